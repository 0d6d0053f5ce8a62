"""Cancelable tasks and a millisecond timer queue."""

from __future__ import annotations

import heapq
import itertools
import time
from typing import Any, Callable, Optional


class TaskCancelable:
    """A callable wrapper whose task can be cancelled before it runs."""

    default: Any = None

    def __init__(self, task: Optional[Callable[..., Any]]) -> None:
        self._task = task

    def cancel(self) -> None:
        """Drop the task; later calls return the default value."""
        self._task = None

    def __bool__(self) -> bool:
        return self._task is not None and callable(self._task)

    def __call__(self, *args: Any) -> Any:
        task = self._task
        if task is not None and callable(task):
            return task(*args)
        return self.default


class Timer(TaskCancelable):
    """A timer entry; its function returns the next delay in ms, or 0 to stop."""

    default = 0

    def __init__(self, expire: int, fun: Callable[[Any], int], args: Any = None) -> None:
        super().__init__(fun)
        self.expire = expire
        self.args = args

    def active(self) -> int:
        """Run the timer function with its argument and return its result."""
        return self(self.args)


class TimerManager:
    """A queue of timers ordered by expiry time in epoch milliseconds."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Timer]] = []
        self._seq = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def _push(self, timer: Timer) -> None:
        heapq.heappush(self._heap, (timer.expire, next(self._seq), timer))

    def add_timer(self, timeout: int, fun: Callable[[Any], int], args: Any = None) -> Timer:
        """Schedule ``fun(args)`` to run ``timeout`` ms from now."""
        timer = Timer(self.current_millisecs() + timeout, fun, args)
        self._push(timer)
        return timer

    def add(self, timer: Timer) -> None:
        """Schedule an existing timer at its own expiry time."""
        self._push(timer)

    def del_timer(self, timer: Timer) -> bool:
        """Remove ``timer`` from the queue; return whether it was present."""
        remaining = [entry for entry in self._heap if entry[2] is not timer]
        found = len(remaining) != len(self._heap)
        if found:
            heapq.heapify(remaining)
            self._heap = remaining
        return found

    def get_recent_timeout(self) -> Optional[int]:
        """Milliseconds until the next timer fires, or None if there is none."""
        if not self._heap:
            return None
        return max(0, self._heap[0][0] - self.current_millisecs())

    def process_all_timeout(self) -> int:
        """Fire every due timer; return ms until the next one, or 0 if none remain."""
        now = self.current_millisecs()
        while self._heap:
            expire, _, timer = self._heap[0]
            if expire > now:
                return expire - now
            heapq.heappop(self._heap)
            delay = timer.active()
            if delay and delay > 0:
                timer.expire = now + delay
                self._push(timer)
        return 0

    def current_millisecs(self) -> int:
        """Current wall-clock time in milliseconds since the epoch."""
        return int(time.time() * 1000)