"""Report on files and list directory contents."""

from __future__ import annotations

import argparse
import errno
import os
import sys
from dataclasses import dataclass, field

from pathkit.pathinfo import _quoted, compose_path
from pathkit.status import status


@dataclass
class ListingSummary:
    """Entries found in a directory and the counts by kind."""

    path: str
    lines: list[str] = field(default_factory=list)
    files: int = 0
    directories: int = 0
    others: int = 0
    errors: int = 0

    def __str__(self) -> str:
        head = f"\nIn directory: {_quoted(self.path)}\n\n"
        body = "".join(f"{line}\n" for line in self.lines)
        tail = (
            f"\n{self.files} files\n{self.directories} directories\n"
            f"{self.others} others\n{self.errors} errors\n"
        )
        return head + body + tail


def _file_size(path: str) -> int:
    s = status(path)
    if not s.exists():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
    if not s.is_regular_file():
        raise OSError(errno.EPERM, os.strerror(errno.EPERM), path)
    return os.stat(path).st_size


def _list_names(path: str) -> list[str]:
    with os.scandir(path) as entries:
        return [entry.name for entry in entries]


def _system_complete(path: str) -> str:
    if not path or os.path.isabs(path):
        return path
    return compose_path([os.getcwd(), path])


def file_size_report(path) -> str:
    """Return the size line for a regular file.

    Raises FileNotFoundError if the path is missing and ValueError if it is
    not a regular file.
    """
    p = os.fspath(path)
    s = status(p)
    if not s.exists():
        raise FileNotFoundError(f"not found: {p}")
    if not s.is_regular_file():
        raise ValueError(f"not a regular file: {p}")
    return f"size of {p} is {os.stat(p).st_size}"


def describe(path, list_entries=False, sort_entries=False) -> str:
    """Say what ``path`` is; for a directory, optionally list its entries.

    Unsorted listings show full quoted paths in directory order; sorted
    listings show bare filenames in order.
    """
    p = os.fspath(path)
    q = _quoted(p)
    s = status(p)
    if not s.exists():
        return f"{q} does not exist"
    if s.is_regular_file():
        return f"{q} size is {os.stat(p).st_size}"
    if s.is_directory():
        if not list_entries:
            return f"{q} is a directory"
        names = _list_names(p)
        if sort_entries:
            body = [f"    {name}" for name in sorted(names)]
        else:
            body = [f"    {_quoted(compose_path([p, name]))}" for name in names]
        return "\n".join([f"{q} is a directory containing:", *body])
    return f"{q} exists, but is not a regular file or directory"


def simple_ls(path=None) -> ListingSummary:
    """Classify the entries of a directory (the current one by default).

    Raises FileNotFoundError if the path is missing and NotADirectoryError
    if it is not a directory.
    """
    p = os.getcwd() if path is None else _system_complete(os.fspath(path))
    s = status(p)
    if not s.exists():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), p)
    if not s.is_directory():
        raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), p)

    summary = ListingSummary(p)
    for name in _list_names(p):
        shown = _quoted(name)
        try:
            entry = status(compose_path([p, name]))
        except OSError as ex:
            summary.errors += 1
            summary.lines.append(f"{shown} {ex}")
            continue
        if entry.is_directory():
            summary.directories += 1
            summary.lines.append(f"{shown} [directory]")
        elif entry.is_regular_file():
            summary.files += 1
            summary.lines.append(shown)
        else:
            summary.others += 1
            summary.lines.append(f"{shown} [other]")
    return summary


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="listing", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("echo", "print the path"),
        ("size", "print the path and its size"),
        ("file-size", "report the size of a regular file"),
    ):
        commands.add_parser(name, help=help_text).add_argument("path")
    desc = commands.add_parser("describe", help="say what a path is")
    desc.add_argument("path")
    desc.add_argument("--list", action="store_true", help="list directory entries")
    desc.add_argument("--sort", action="store_true", help="sort listed filenames")
    ls = commands.add_parser("ls", help="list and count directory entries")
    ls.add_argument("path", nargs="?")
    return parser


def main(argv=None) -> int:
    """Run one of the listing commands."""
    args = _build_parser().parse_args(sys.argv[1:] if argv is None else list(argv))

    if args.command == "echo":
        print(args.path)
        return 0

    if args.command == "size":
        try:
            print(f"{args.path} {_file_size(args.path)}")
        except OSError as ex:
            print(ex, file=sys.stderr)
            return 1
        return 0

    if args.command == "file-size":
        try:
            print(file_size_report(args.path))
        except (FileNotFoundError, ValueError) as ex:
            print(ex)
            return 1
        return 0

    if args.command == "describe":
        try:
            print(describe(args.path, args.list or args.sort, args.sort))
        except OSError as ex:
            print(ex)
        return 0

    if args.path is None:
        print("\nusage:   simple_ls [path]")
    try:
        summary = simple_ls(args.path)
    except FileNotFoundError as ex:
        print(f"\nNot found: {_quoted(ex.filename)}")
        return 1
    except NotADirectoryError as ex:
        print(f"\nFound: {_quoted(ex.filename)}")
        return 0
    print(summary, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())