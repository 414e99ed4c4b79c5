"""Repeatedly strip extensions from a filename."""

from __future__ import annotations

import os
import sys

from pathkit.pathinfo import _filename, _quoted, _stem_and_extension


def stem_chain(path) -> list[tuple[str, str, str]]:
    """Return (name, stem, extension) for the filename and each successive stem.

    The chain stops once either the stem or the extension is empty.
    """
    name = _filename(os.fspath(path))
    chain = []
    while True:
        stem, extension = _stem_and_extension(name)
        chain.append((name, stem, extension))
        if not stem or not extension:
            return chain
        name = stem


def main(argv=None) -> int:
    """Print the stem chain of the path given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: stems <path>")
        return 1
    for name, stem, extension in stem_chain(args[0]):
        print(
            f"filename {_quoted(name)} has stem {_quoted(stem)}"
            f" and extension {_quoted(extension)}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())