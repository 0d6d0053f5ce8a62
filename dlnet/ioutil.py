"""Filesystem helpers: path checks, directory creation and robust opening."""

from __future__ import annotations

import os
import time
from typing import IO, Union

_SEPARATORS = frozenset({"/", os.sep} | ({os.altsep} if os.altsep else set()))
_OPEN_TRIES = 5
_RETRY_DELAY = 0.01


def is_path_exists(path: Union[str, os.PathLike]) -> bool:
    """Return True if ``path`` names an existing file or directory."""
    return os.path.exists(path)


def dir_name(path: str) -> str:
    """Return everything before the last separator, or an empty string.

    "abc/file" gives "abc", "abc/" gives "abc", "abc" gives "" and
    "abc///" gives "abc//".
    """
    pos = max(path.rfind(sep) for sep in _SEPARATORS)
    return path[:pos] if pos >= 0 else ""


def create_dir(path: str) -> None:
    """Create ``path`` and any missing parents with mode 0755.

    Nothing is done if the path already exists. Raises ValueError for an
    empty path and OSError when a directory cannot be created.
    """
    if is_path_exists(path):
        return
    if not path:
        raise ValueError("path must not be empty")
    os.makedirs(path, mode=0o755, exist_ok=True)


def get_file_size(target: Union[str, os.PathLike, IO, None]) -> int:
    """Return the size in bytes of a file given by path or open file object.

    A path that cannot be opened for reading, or ``None``, gives 0.
    """
    if target is None:
        return 0
    if hasattr(target, "fileno"):
        return os.fstat(target.fileno()).st_size
    try:
        with open(target, "rb") as handle:
            return handle.seek(0, os.SEEK_END)
    except OSError:
        return 0


def is_file_exist(path: Union[str, os.PathLike]) -> bool:
    """Return True if ``path`` can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def open_file(path: str, mode: str = "ab") -> IO:
    """Open ``path``, creating its directory first, retrying a few times.

    Raises the last OSError if every attempt fails.
    """
    last_error: OSError = OSError(f"cannot open {path!r}")
    for attempt in range(_OPEN_TRIES):
        try:
            parent = dir_name(path)
            if parent:
                create_dir(parent)
            return open(path, mode)
        except OSError as exc:
            last_error = exc
        if attempt + 1 < _OPEN_TRIES:
            time.sleep(_RETRY_DELAY)
    raise last_error