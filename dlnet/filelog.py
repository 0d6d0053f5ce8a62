"""Log files rotated by day or by size."""

from __future__ import annotations

import datetime as _dt
import logging
import os
import threading
import time
from contextlib import suppress
from typing import IO, Optional, Union

from dlnet.ioutil import get_file_size, is_file_exist, open_file

_log = logging.getLogger(__name__)
_DAY_SECONDS = 24 * 60 * 60
_OLD_DAYS_SCANNED = 10
_RENAME_FALLBACKS = 10


def _to_bytes(text: Union[str, bytes]) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def _local_midnight(timestamp: float) -> float:
    day = _dt.datetime.fromtimestamp(timestamp).date()
    return _dt.datetime.combine(day, _dt.time()).timestamp()


class DailyFileLog:
    """Appends to ``<base>_<YYYY-MM-DD><ext>``, switching files at local midnight.

    With ``max_files`` above zero, files older than that many days are removed
    after each switch.
    """

    def __init__(self, base_file_name: str, ext: str, max_files: int) -> None:
        self._base = base_file_name
        self._ext = ext
        self._max_files = max_files
        self._lock = threading.Lock()
        now = time.time()
        self._cur_file_name = self._file_name(_dt.datetime.fromtimestamp(now).date())
        self._fp: Optional[IO[bytes]] = open_file(self._cur_file_name, "ab")
        self._next_rotate = _local_midnight(now) + _DAY_SECONDS

    @property
    def current_file_name(self) -> str:
        """Path of the file being written."""
        return self._cur_file_name

    def _file_name(self, day: _dt.date) -> str:
        return f"{self._base}_{day:%Y-%m-%d}{self._ext}"

    def write(self, text: Union[str, bytes]) -> None:
        """Append ``text`` (UTF-8 if a string) and flush."""
        data = _to_bytes(text)
        with self._lock:
            if self._fp is None:
                raise ValueError("log file is closed")
            now = time.time()
            rotated = now >= self._next_rotate
            if rotated:
                self._fp.close()
                self._fp = None
                self._cur_file_name = self._file_name(
                    _dt.datetime.fromtimestamp(now).date()
                )
                self._fp = open_file(self._cur_file_name, "ab")
                self._next_rotate = _local_midnight(now) + _DAY_SECONDS
            self._fp.write(data)
            self._fp.flush()
            if rotated and self._max_files > 0:
                self._delete_old(now)

    def _delete_old(self, now: float) -> None:
        today = _dt.datetime.fromtimestamp(now).date()
        for back in range(self._max_files, self._max_files + _OLD_DAYS_SCANNED):
            with suppress(OSError):
                os.remove(self._file_name(today - _dt.timedelta(days=back)))

    def flush(self) -> None:
        """Flush buffered data to disk."""
        if self._fp is not None:
            self._fp.flush()

    def close(self) -> None:
        """Close the current file; later writes raise ValueError."""
        with self._lock:
            if self._fp is not None:
                self._fp.close()
                self._fp = None

    def __enter__(self) -> "DailyFileLog":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False


class RotateFileLog:
    """Appends to ``<base>_0<ext>``, shifting files up once it reaches ``max_size``.

    On rotation ``_i`` becomes ``_i+1`` for ``i`` from ``max_files - 1`` down
    to 0, and a fresh ``_0`` file is started.
    """

    def __init__(self, base_file_name: str, ext: str, max_files: int, max_size: int) -> None:
        self._base = base_file_name
        self._ext = ext
        self._max_files = max_files
        self._max_size = max_size
        self._lock = threading.Lock()
        self._fp: Optional[IO[bytes]] = None
        file_name = self._file_name(0)
        self._cur_size = get_file_size(file_name)
        if self._cur_size >= self._max_size:
            self._rotate()
        else:
            self._fp = open_file(file_name, "ab")
            self._cur_size = 0

    @property
    def current_file_name(self) -> str:
        """Path of the file being written."""
        return self._file_name(0)

    def _file_name(self, index: int) -> str:
        return f"{self._base}_{index}{self._ext}"

    def write(self, text: Union[str, bytes]) -> None:
        """Append ``text`` (UTF-8 if a string), rotating when the size limit is hit."""
        data = _to_bytes(text)
        with self._lock:
            if self._fp is None:
                raise ValueError("log file is closed")
            self._fp.write(data)
            self._cur_size += len(data)
            if self._cur_size >= self._max_size:
                self._rotate()
            else:
                self._fp.flush()

    def _move(self, src: str, dst: str) -> bool:
        with suppress(OSError):
            os.remove(dst)
        try:
            os.rename(src, dst)
            return True
        except OSError:
            pass
        for attempt in range(_RENAME_FALLBACKS):
            fallback = f"{src}.{attempt}"
            with suppress(OSError):
                os.remove(fallback)
            try:
                os.rename(src, fallback)
                return True
            except OSError as exc:
                error = exc
        _log.warning("RotateFileLog rotate failed: %s (%s)", error, src)
        return False

    def _rotate(self) -> bool:
        ok = True
        if self._fp is not None:
            self._fp.close()
            self._fp = None
        for index in range(self._max_files - 1, -1, -1):
            src = self._file_name(index)
            if not is_file_exist(src):
                continue
            if not self._move(src, self._file_name(index + 1)):
                ok = False
                break  # keep the remaining files rather than lose log lines
        self._fp = open_file(self._file_name(0), "ab")
        self._cur_size = 0
        return ok

    def flush(self) -> None:
        """Flush buffered data to disk."""
        if self._fp is not None:
            self._fp.flush()

    def close(self) -> None:
        """Close the current file; later writes raise ValueError."""
        with self._lock:
            if self._fp is not None:
                self._fp.close()
                self._fp = None

    def __enter__(self) -> "RotateFileLog":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False