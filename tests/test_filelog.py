import datetime as dt
import os
from unittest import mock

import pytest

from dlnet.filelog import DailyFileLog, RotateFileLog


def _ts(year, month, day, hour=12):
    return dt.datetime(year, month, day, hour).timestamp()


def _read(path):
    with open(path, "rb") as handle:
        return handle.read()


@pytest.fixture
def base(tmp_path):
    return str(tmp_path / "logs" / "app")


def test_daily_writes_dated_file(base):
    with mock.patch("time.time", return_value=_ts(2024, 3, 10)):
        with DailyFileLog(base, ".log", 0) as log:
            log.write("hello ")
            log.write(b"world")
            name = log.current_file_name
    assert name == base + "_2024-03-10.log"
    assert _read(name) == b"hello world"


def test_daily_switches_file_next_day(base):
    with mock.patch("time.time", return_value=_ts(2024, 3, 10)):
        log = DailyFileLog(base, ".log", 0)
        log.write("a")
    with mock.patch("time.time", return_value=_ts(2024, 3, 11, 1)):
        log.write("b")
        second = log.current_file_name
    log.close()
    assert second == base + "_2024-03-11.log"
    assert _read(base + "_2024-03-10.log") == b"a"
    assert _read(second) == b"b"


def test_daily_removes_old_files_after_switch(base):
    os.makedirs(os.path.dirname(base))
    old = base + "_2024-03-05.log"
    with open(old, "wb") as handle:
        handle.write(b"old")
    with mock.patch("time.time", return_value=_ts(2024, 3, 10)):
        log = DailyFileLog(base, ".log", 3)
        log.write("x")
    with mock.patch("time.time", return_value=_ts(2024, 3, 11)):
        log.write("y")
    log.close()
    assert not os.path.exists(old)
    assert os.path.exists(base + "_2024-03-10.log")
    assert os.path.exists(base + "_2024-03-11.log")


def test_daily_keeps_files_without_limit(base):
    with mock.patch("time.time", return_value=_ts(2024, 3, 10)):
        log = DailyFileLog(base, ".log", 0)
        log.write("x")
    with mock.patch("time.time", return_value=_ts(2024, 4, 20)):
        log.write("y")
    log.close()
    assert _read(base + "_2024-03-10.log") == b"x"


def test_daily_write_after_close_raises(base):
    log = DailyFileLog(base, ".log", 0)
    log.close()
    with pytest.raises(ValueError):
        log.write("late")


def test_rotate_below_limit_stays_in_first_file(base):
    with RotateFileLog(base, ".txt", 3, 100) as log:
        log.write("abc")
        log.write("def")
    assert _read(base + "_0.txt") == b"abcdef"
    assert not os.path.exists(base + "_1.txt")


def test_rotate_moves_full_file(base):
    with RotateFileLog(base, ".txt", 3, 10) as log:
        log.write("12345")
        log.write("67890")
        log.write("z")
    assert _read(base + "_1.txt") == b"1234567890"
    assert _read(base + "_0.txt") == b"z"


def test_rotate_keeps_bounded_history(base):
    with RotateFileLog(base, ".txt", 2, 10) as log:
        for fill in (b"A", b"B", b"C"):
            log.write(fill * 10)
    assert _read(base + "_0.txt") == b""
    assert _read(base + "_1.txt") == b"C" * 10
    assert _read(base + "_2.txt") == b"B" * 10
    assert not os.path.exists(base + "_3.txt")


def test_rotate_on_open_when_existing_file_is_full(base):
    os.makedirs(os.path.dirname(base))
    with open(base + "_0.txt", "wb") as handle:
        handle.write(b"x" * 20)
    with RotateFileLog(base, ".txt", 2, 10) as log:
        name = log.current_file_name
    assert name == base + "_0.txt"
    assert _read(base + "_1.txt") == b"x" * 20
    assert _read(name) == b""


def test_rotate_write_after_close_raises(base):
    log = RotateFileLog(base, ".txt", 2, 10)
    log.close()
    with pytest.raises(ValueError):
        log.write("late")