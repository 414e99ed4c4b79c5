"""Recursive directory iteration with control over descent."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Iterator

from pathkit.pathinfo import _quoted, compose_path


def _open(directory: str) -> tuple[str, Iterator[tuple[str, bool, bool]]]:
    with os.scandir(directory) as entries:
        listing = [(entry.name, entry.is_dir(), entry.is_symlink()) for entry in entries]
    return directory, iter(listing)


class RecursiveDirectoryIterator:
    """Iterate over every path below ``root``, depth first.

    ``level`` is the depth of the path most recently returned, 0 for the
    direct children of ``root``. A directory returned is descended into on
    the following step unless ``no_push`` or ``pop`` is called first.
    Symbolic links to directories are descended into only when
    ``follow_symlinks`` is true. Opening ``root`` fails with OSError; failing
    to open a subdirectory raises OSError from that step, after which
    iteration continues with the next entry.
    """

    def __init__(self, root, follow_symlinks=False):
        self.root = os.fspath(root)
        self.follow_symlinks = follow_symlinks
        self.level = 0
        self._stack = [_open(self.root)]
        self._pending: str | None = None

    def __iter__(self) -> RecursiveDirectoryIterator:
        return self

    def __next__(self) -> str:
        if self._pending is not None:
            directory, self._pending = self._pending, None
            self._stack.append(_open(directory))
        while self._stack:
            directory, entries = self._stack[-1]
            entry = next(entries, None)
            if entry is None:
                self._stack.pop()
                continue
            name, is_dir, is_link = entry
            path = compose_path([directory, name])
            self.level = len(self._stack) - 1
            if is_dir and (self.follow_symlinks or not is_link):
                self._pending = path
            return path
        raise StopIteration

    def pop(self) -> None:
        """Abandon the rest of the current directory and resume in its parent."""
        if not self._stack:
            raise ValueError("pop() on an exhausted iterator")
        self._pending = None
        self._stack.pop()

    def no_push(self) -> None:
        """Do not descend into the directory most recently returned."""
        self._pending = None


def _tree(root, max_level, report_errors) -> Iterator[str]:
    try:
        iterator = RecursiveDirectoryIterator(root)
    except OSError as ex:
        if report_errors:
            yield "************* exception *****************"
            yield str(ex)
        return
    while True:
        try:
            path = next(iterator)
        except StopIteration:
            return
        except OSError as ex:
            if report_errors:
                yield "************* filesystem_error *****************"
                yield str(ex)
            continue
        if max_level is not None and iterator.level > max_level:
            iterator.pop()
            continue
        yield "  " * (iterator.level + 1) + _quoted(path)


def tree_lines(root, max_level=None) -> Iterator[str]:
    """Yield an indented line per path below ``root``, reporting errors inline.

    Entries deeper than ``max_level`` are skipped along with their siblings.
    """
    return _tree(root, max_level, True)


def main(argv=None) -> int:
    """Print the tree below a directory."""
    parser = argparse.ArgumentParser(prog="walk", description=__doc__)
    parser.add_argument("path")
    parser.add_argument("--max-level", type=int, default=None)
    parser.add_argument("--ignore-errors", action="store_true")
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    for line in _tree(args.path, args.max_level, not args.ignore_errors):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())