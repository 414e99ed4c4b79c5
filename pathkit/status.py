"""File status queries and a command that reports them."""

from __future__ import annotations

import errno
import os
import platform
import stat
import sys
from dataclasses import dataclass
from enum import IntEnum

_NOT_FOUND_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR})


class FileType(IntEnum):
    """Kind of file system object a status describes."""

    STATUS_ERROR = 0
    FILE_NOT_FOUND = 1
    REGULAR_FILE = 2
    DIRECTORY_FILE = 3
    SYMLINK_FILE = 4
    BLOCK_FILE = 5
    CHARACTER_FILE = 6
    FIFO_FILE = 7
    SOCKET_FILE = 8
    TYPE_UNKNOWN = 9

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class FileStatus:
    """Type and permission bits of a file system object."""

    type: FileType = FileType.STATUS_ERROR
    permissions: int | None = None

    def status_known(self) -> bool:
        return self.type is not FileType.STATUS_ERROR

    def exists(self) -> bool:
        return self.status_known() and self.type is not FileType.FILE_NOT_FOUND

    def is_regular_file(self) -> bool:
        return self.type is FileType.REGULAR_FILE

    def is_directory(self) -> bool:
        return self.type is FileType.DIRECTORY_FILE

    def is_symlink(self) -> bool:
        return self.type is FileType.SYMLINK_FILE

    def is_other(self) -> bool:
        return self.exists() and not (
            self.is_regular_file() or self.is_directory() or self.is_symlink()
        )


_MODE_TYPES = (
    (stat.S_ISREG, FileType.REGULAR_FILE),
    (stat.S_ISDIR, FileType.DIRECTORY_FILE),
    (stat.S_ISLNK, FileType.SYMLINK_FILE),
    (stat.S_ISBLK, FileType.BLOCK_FILE),
    (stat.S_ISCHR, FileType.CHARACTER_FILE),
    (stat.S_ISFIFO, FileType.FIFO_FILE),
    (stat.S_ISSOCK, FileType.SOCKET_FILE),
)


def _from_mode(mode: int) -> FileStatus:
    kind = next((t for test, t in _MODE_TYPES if test(mode)), FileType.TYPE_UNKNOWN)
    return FileStatus(kind, stat.S_IMODE(mode))


def _probe(path, follow_symlinks: bool) -> tuple[FileStatus, OSError | None]:
    """Return the status of ``path`` together with the error met, if any."""
    try:
        result = os.stat(path, follow_symlinks=follow_symlinks)
    except OSError as err:
        if err.errno in _NOT_FOUND_ERRNOS:
            return FileStatus(FileType.FILE_NOT_FOUND, 0), err
        return FileStatus(FileType.STATUS_ERROR), err
    return _from_mode(result.st_mode), None


def status(path) -> FileStatus:
    """Status of ``path``, following symbolic links.

    A missing path gives FILE_NOT_FOUND; any other failure raises OSError.
    """
    result, err = _probe(path, True)
    if err is not None and not result.status_known():
        raise err
    return result


def symlink_status(path) -> FileStatus:
    """Status of ``path`` itself, without following a final symbolic link."""
    result, err = _probe(path, False)
    if err is not None and not result.status_known():
        raise err
    return result


def _yes_no(flag: bool) -> str:
    return "true" if flag else "false"


def describe_status(file_status: FileStatus, error: OSError | None) -> str:
    """Render a status and the error that came with it as report lines."""
    lines = []
    if error is not None:
        code = error.errno or 0
        lines += [
            "sets error to indicate an error:",
            f"   errno is {code}",
            f'   message is "{os.strerror(code)}"',
            f'   error name is "{errno.errorcode.get(code, "unknown")}"',
        ]
    else:
        lines.append("clears error.")
    s = file_status
    lines += [
        f's.type() is {int(s.type)}, which is defined as "{s.type.label}"',
        f"exists(s) is {_yes_no(s.exists())}",
        f"status_known(s) is {_yes_no(s.status_known())}",
        f"is_regular_file(s) is {_yes_no(s.is_regular_file())}",
        f"is_directory(s) is {_yes_no(s.is_directory())}",
        f"is_other(s) is {_yes_no(s.is_other())}",
        f"is_symlink(s) is {_yes_no(s.is_symlink())}",
    ]
    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    """Report status and symlink status of a path."""
    args = sys.argv[1:] if argv is None else list(argv)
    print(
        f"Python {platform.python_version()}, "
        f"{platform.python_implementation()}, {platform.platform()}"
    )
    if args:
        target = args[0]
    else:
        print("Usage: file_status <path>")
        target = sys.argv[0]

    for name, follow in (("status", True), ("symlink_status", False)):
        result, err = _probe(target, follow)
        print(f'\nfile_status s = {name}("{target}", ec) ', end="")
        print(describe_status(result, err), end="")

    print(f'\nexists("{target}") ', end="")
    try:
        print(f"is {_yes_no(status(target).exists())}")
    except OSError as ex:
        print(f"throws a filesystem_error exception: {ex}")
    return 0


if __name__ == "__main__":
    sys.exit(main())