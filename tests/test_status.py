import errno
import os
from pathlib import Path

import pytest

from pathkit.status import (
    FileStatus,
    FileType,
    describe_status,
    main,
    status,
    symlink_status,
)


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "f1").write_text("file-f1")
    (tmp_path / "d1").mkdir()
    return tmp_path


def test_regular_file(tree: Path) -> None:
    s = status(tree / "f1")
    assert s.type is FileType.REGULAR_FILE
    assert s.exists() and s.is_regular_file()
    assert not s.is_directory() and not s.is_other() and not s.is_symlink()


def test_permissions_include_owner_read_write(tree: Path) -> None:
    s = status(tree / "f1")
    assert s.permissions is not None
    assert s.permissions & 0o600 == 0o600


def test_directory(tree: Path) -> None:
    s = status(tree / "d1")
    assert s.type is FileType.DIRECTORY_FILE
    assert s.is_directory() and s.exists()


def test_missing_path(tree: Path) -> None:
    s = status(tree / "nosuch")
    assert s.type is FileType.FILE_NOT_FOUND
    assert s.status_known()
    assert not s.exists()
    assert not s.is_regular_file() and not s.is_directory() and not s.is_other()


def test_empty_path_is_not_found() -> None:
    s = status("")
    assert s.type is FileType.FILE_NOT_FOUND
    assert not s.exists()


def test_path_through_regular_file_is_not_found(tree: Path) -> None:
    assert status(tree / "f1" / "x").type is FileType.FILE_NOT_FOUND


def test_symlink_to_file(tree: Path) -> None:
    link = tree / "sym-f1"
    os.symlink(tree / "f1", link)
    assert symlink_status(link).type is FileType.SYMLINK_FILE
    assert status(link).type is FileType.REGULAR_FILE


def test_dangling_symlink(tree: Path) -> None:
    link = tree / "dangling"
    os.symlink(tree / "does not exist", link)
    assert symlink_status(link).is_symlink()
    assert status(link).type is FileType.FILE_NOT_FOUND


def test_default_status_is_unknown() -> None:
    s = FileStatus()
    assert s.type is FileType.STATUS_ERROR
    assert not s.status_known()
    assert not s.exists()


def test_other_types_count_as_other() -> None:
    assert FileStatus(FileType.FIFO_FILE).is_other()
    assert FileStatus(FileType.SOCKET_FILE).is_other()
    assert not FileStatus(FileType.SYMLINK_FILE).is_other()


def test_type_labels(tree: Path) -> None:
    assert status(tree / "f1").type.label == "regular_file"
    assert status(tree / "nosuch").type.label == "file_not_found"
    assert FileStatus().type.label == "status_error"
    assert FileStatus(FileType.TYPE_UNKNOWN).type.label == "type_unknown"


def test_describe_without_error(tree: Path) -> None:
    text = describe_status(status(tree / "f1"), None)
    assert text.startswith("clears error.")
    assert 'which is defined as "regular_file"' in text
    assert "is_regular_file(s) is true" in text


def test_describe_with_error() -> None:
    err = FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT))
    text = describe_status(FileStatus(FileType.FILE_NOT_FOUND, 0), err)
    assert text.startswith("sets error to indicate an error:")
    assert 'which is defined as "file_not_found"' in text
    assert "exists(s) is false" in text


def test_main_reports_file(tree: Path, capsys: pytest.CaptureFixture) -> None:
    assert main([str(tree / "f1")]) == 0
    out = capsys.readouterr().out
    assert 'which is defined as "regular_file"' in out
    assert out.rstrip().endswith("is true")


def test_main_reports_missing(tree: Path, capsys: pytest.CaptureFixture) -> None:
    assert main([str(tree / "nosuch")]) == 0
    out = capsys.readouterr().out
    assert 'which is defined as "file_not_found"' in out
    assert out.rstrip().endswith("is false")