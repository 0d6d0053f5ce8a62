"""Background task queues, a polled task queue and scope guards."""

from __future__ import annotations

import itertools
import logging
import threading
from collections import deque
from typing import Callable, ClassVar, Optional

Task = Callable[[], object]

_log = logging.getLogger(__name__)
_POLL_INTERVAL = 0.01


def set_thread_name(name: str, thread: Optional[threading.Thread] = None) -> None:
    """Name ``thread``, or the calling thread when none is given."""
    target = thread if thread is not None else threading.current_thread()
    target.name = name


class DispatchQueue:
    """Runs dispatched tasks one by one, in order, on a dedicated thread."""

    _counter: ClassVar[itertools.count] = itertools.count(1)
    _global: ClassVar[Optional["DispatchQueue"]] = None
    _global_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._tasks: deque[Task] = deque()
        self._stopping = False
        self._thread: Optional[threading.Thread] = None
        self.start()

    @classmethod
    def global_queue(cls) -> "DispatchQueue":
        """Return the process-wide shared queue, creating it on first use."""
        with cls._global_lock:
            if cls._global is None:
                cls._global = cls()
            return cls._global

    def start(self) -> None:
        """Start the worker thread if it is not already running."""
        with self._cond:
            if self._thread is not None and self._thread.is_alive():
                return
            self._stopping = False
            thread = threading.Thread(
                target=self._runloop, name="DispatchQueue", daemon=True
            )
            set_thread_name(f"DispatchQueue {next(self._counter)}", thread)
            self._thread = thread
        thread.start()

    def stop(self) -> None:
        """Stop the worker thread; tasks still queued are not run."""
        with self._cond:
            self._stopping = True
            thread, self._thread = self._thread, None
            self._cond.notify_all()
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def dispatch(self, task: Task) -> None:
        """Queue ``task`` to run on the worker thread."""
        with self._cond:
            self._tasks.append(task)
            self._cond.notify_all()

    def is_current_thread(self) -> bool:
        """Return True when called from this queue's worker thread."""
        thread = self._thread
        return thread is not None and threading.current_thread() is thread

    def _runloop(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(
                    lambda: self._stopping or bool(self._tasks), _POLL_INTERVAL
                )
                if self._stopping:
                    return
                if not self._tasks:
                    continue
                task = self._tasks.popleft()
            try:
                task()
            except Exception:
                _log.exception("dispatched task failed")


class LoopQueue:
    """Collects tasks from any thread and runs them when polled."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: deque[Task] = deque()

    def post(self, task: Task) -> None:
        """Queue ``task`` for the next call to :meth:`run_once`."""
        with self._lock:
            self._tasks.append(task)

    def run_once(self) -> int:
        """Run every task queued so far, in order; return how many ran.

        Tasks posted while running wait for the next call.
        """
        with self._lock:
            tasks = list(self._tasks)
            self._tasks.clear()
        for task in tasks:
            task()
        return len(tasks)


class ScopeGuard:
    """Context manager that calls ``fn`` on leaving the block unless dismissed."""

    def __init__(self, fn: Callable[[], object]) -> None:
        self._fn: Optional[Callable[[], object]] = fn

    def dismiss(self) -> None:
        """Cancel the pending call."""
        self._fn = None

    def __enter__(self) -> "ScopeGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        fn, self._fn = self._fn, None
        if fn is not None:
            fn()
        return False