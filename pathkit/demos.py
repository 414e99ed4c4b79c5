"""Small demonstrations of symlink resolution and file naming."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from pathkit.string_file import load_string_file, save_string_file

_SMILE = "\u263A"


def symlink_parent_resolution(base) -> str:
    """Show how ``..`` after a directory symlink is resolved.

    Builds ``dspr_demo`` under ``base`` with ``a/b`` linking to ``c/d`` and
    a ``name.txt`` in both ``a`` and ``a/c``, then returns the content read
    through ``a/b/../name.txt``.
    """
    test_dir = Path(base) / "dspr_demo"
    if test_dir.is_symlink() or test_dir.is_file():
        test_dir.unlink()
    elif test_dir.exists():
        shutil.rmtree(test_dir)
    (test_dir / "a" / "c" / "d").mkdir(parents=True)
    os.symlink("c/d", test_dir / "a" / "b", target_is_directory=True)
    save_string_file(test_dir / "a" / "name.txt", "Windows")
    save_string_file(test_dir / "a" / "c" / "name.txt", "POSIX")
    return load_string_file(os.path.join(os.fspath(test_dir), "a/b/../name.txt"))


def create_smile_files(directory) -> list[Path]:
    """Create empty files whose names are built from narrow and wide strings."""
    base = Path(directory)
    names = ["smile", "smile" + _SMILE]
    for digit in "234":
        names += [f"smile{digit}", f"smile{digit}{_SMILE}"]
    created = []
    for name in names:
        path = base / name
        with open(path, "wb"):
            pass
        created.append(path)
    return created