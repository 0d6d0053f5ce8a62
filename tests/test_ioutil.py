import pytest

from dlnet.ioutil import (
    create_dir,
    dir_name,
    get_file_size,
    is_file_exist,
    is_path_exists,
    open_file,
)


@pytest.mark.parametrize(
    "path, expected",
    [("abc/file", "abc"), ("abc/", "abc"), ("abc", ""), ("abc///", "abc//")],
)
def test_dir_name(path, expected):
    assert dir_name(path) == expected


def test_is_path_exists(tmp_path):
    file_path = tmp_path / "f.txt"
    assert is_path_exists(str(tmp_path)) is True
    assert is_path_exists(str(file_path)) is False
    file_path.write_bytes(b"x")
    assert is_path_exists(str(file_path)) is True


def test_create_dir_nested(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    create_dir(str(target))
    assert target.is_dir()


def test_create_dir_existing_is_accepted(tmp_path):
    create_dir(str(tmp_path))
    assert tmp_path.is_dir()


def test_create_dir_empty_raises():
    with pytest.raises(ValueError):
        create_dir("")


def test_create_dir_under_file_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"")
    with pytest.raises(OSError):
        create_dir(str(blocker / "sub"))


def test_get_file_size_by_path(tmp_path):
    file_path = tmp_path / "data.bin"
    payload = b"hello world"
    file_path.write_bytes(payload)
    assert get_file_size(str(file_path)) == len(payload)


def test_get_file_size_missing_is_zero(tmp_path):
    assert get_file_size(str(tmp_path / "missing")) == 0
    assert get_file_size(None) == 0


def test_get_file_size_by_file_object(tmp_path):
    file_path = tmp_path / "data.bin"
    with open(file_path, "wb") as handle:
        handle.write(b"abcdef")
        handle.flush()
        assert get_file_size(handle) == 6


def test_is_file_exist(tmp_path):
    file_path = tmp_path / "here.txt"
    assert is_file_exist(str(file_path)) is False
    file_path.write_text("x")
    assert is_file_exist(str(file_path)) is True


def test_open_file_creates_parent_directories(tmp_path):
    target = tmp_path / "logs" / "deep" / "out.log"
    with open_file(str(target), "ab") as handle:
        handle.write(b"line\n")
    assert target.read_bytes() == b"line\n"


def test_open_file_appends(tmp_path):
    target = tmp_path / "out.log"
    for chunk in (b"one", b"two"):
        with open_file(str(target), "ab") as handle:
            handle.write(chunk)
    assert target.read_bytes() == b"onetwo"


def test_open_file_failure_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"")
    with pytest.raises(OSError):
        open_file(str(blocker / "out.log"), "ab")