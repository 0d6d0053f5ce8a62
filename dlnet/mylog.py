"""Levelled log lines with a timestamp, source location and thread id."""

from __future__ import annotations

import enum
import inspect
import os
import sys
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

OutputFunc = Callable[[str], object]


class MyLogLevel(enum.IntEnum):
    """Severity of a log line; lines below the current level are dropped."""

    DEBUG = 1
    INFO = 2
    WARNING = 3
    CRITICAL = 4


@dataclass
class _LogSettings:
    level: MyLogLevel = MyLogLevel.INFO
    output_func: Optional[OutputFunc] = None


_settings = _LogSettings()


def set_my_log_level(level: int) -> None:
    """Set the lowest level that is still written."""
    _settings.level = MyLogLevel(level)


def get_my_log_level() -> MyLogLevel:
    """Return the lowest level that is still written."""
    return _settings.level


def set_output_func(func: Optional[OutputFunc]) -> None:
    """Send finished lines to ``func``; ``None`` restores standard output."""
    if func is not None and not callable(func):
        raise TypeError("output function must be callable or None")
    _settings.output_func = func


def output(text: str) -> None:
    """Hand ``text`` to the output function, or write it to standard output."""
    func = _settings.output_func
    if func is not None:
        func(text)
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def get_current_millisecond_epoch() -> tuple[int, int]:
    """Return the current time as whole seconds and the milliseconds past them."""
    seconds, rest = divmod(time.time_ns(), 1_000_000_000)
    return seconds, rest // 1_000_000


class MyOut:
    """One log line, built with ``<<`` and emitted by :meth:`finish`.

    Used as a context manager the line is emitted on leaving the block.
    """

    def __init__(self, file: str, line: int, type_char: str, level: int) -> None:
        self._level = int(level)
        self._enabled = self._level >= get_my_log_level()
        self._parts: list[str] = []
        self._done = False
        if self._enabled:
            seconds, millis = get_current_millisecond_epoch()
            stamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(seconds))
            self._parts.append(
                f"[{stamp}.{millis:03d}] [{type_char}] [{file}:{line}] "
                f"[{threading.get_native_id()}] "
            )

    @property
    def enabled(self) -> bool:
        """Whether this line passes the level filter."""
        return self._enabled

    @property
    def text(self) -> str:
        """The line built so far, without the final newline."""
        return "".join(self._parts)

    def __lshift__(self, value: Any) -> "MyOut":
        if self._enabled and not self._done:
            self._parts.append("<nullptr> " if value is None else f"{value} ")
        return self

    def finish(self) -> Optional[str]:
        """Emit the line once; return it, or None if filtered or already emitted."""
        if self._done or not self._enabled:
            self._done = True
            return None
        self._done = True
        line = self.text + "\n"
        output(line)
        return line

    def __enter__(self) -> "MyOut":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.finish()
        return False


def _emit(type_char: str, level: MyLogLevel, args: tuple) -> Optional[str]:
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame is not None and frame.f_back else None
    if caller is not None:
        file, line = os.path.basename(caller.f_code.co_filename), caller.f_lineno
    else:
        file, line = "?", 0
    del frame, caller
    out = MyOut(file, line, type_char, level)
    for arg in args:
        out << arg
    return out.finish()


def debug(*args: Any) -> Optional[str]:
    """Write a debug line made of ``args``; return it if it was written."""
    return _emit("D", MyLogLevel.DEBUG, args)


def info(*args: Any) -> Optional[str]:
    """Write an info line made of ``args``; return it if it was written."""
    return _emit("I", MyLogLevel.INFO, args)


def warning(*args: Any) -> Optional[str]:
    """Write a warning line made of ``args``; return it if it was written."""
    return _emit("W", MyLogLevel.WARNING, args)


def critical(*args: Any) -> Optional[str]:
    """Write a critical line made of ``args``; return it if it was written."""
    return _emit("E", MyLogLevel.CRITICAL, args)