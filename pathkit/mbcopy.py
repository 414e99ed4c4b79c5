"""Copy files into a directory, naming the copies in a chosen encoding."""

from __future__ import annotations

import locale
import os
import shutil
import sys

from pathkit.codecvt import CodecvtError, convert


def _encoding(encoding: str | None) -> str:
    return encoding or locale.getpreferredencoding(False)


def to_external(text: str, encoding=None) -> bytes:
    """Encode a path held as text into bytes; raise CodecvtError on failure."""
    try:
        return convert(text, _encoding(encoding))
    except CodecvtError as exc:
        raise CodecvtError(exc.result, "to_external conversion error") from exc


def to_internal(data: bytes, encoding=None) -> str:
    """Decode a path held as bytes into text; raise CodecvtError on failure."""
    try:
        return convert(bytes(data), _encoding(encoding))
    except CodecvtError as exc:
        raise CodecvtError(exc.result, "to_internal conversion error") from exc


def copy_file(source, target) -> None:
    """Copy the bytes of ``source`` into ``target``, replacing its content."""
    with open(source, "rb") as src, open(target, "wb") as dst:
        shutil.copyfileobj(src, dst)


def copy_directory_files(source_dir, target_dir, encoding="utf-8") -> list[str]:
    """Copy each regular file of ``source_dir`` into ``target_dir``.

    The name of each copy is encoded with ``encoding``. Returns the names
    copied. Raises NotADirectoryError if ``target_dir`` is not a directory.
    """
    if not os.path.isdir(target_dir):
        raise NotADirectoryError(f"{os.fspath(target_dir)} is not a directory")
    target = os.fsencode(target_dir)
    copied = []
    with os.scandir(source_dir) as entries:
        for entry in entries:
            if not entry.is_file():
                continue
            copy_file(entry.path, os.path.join(target, to_external(entry.name, encoding)))
            copied.append(entry.name)
    return copied


def main(argv=None) -> int:
    """Copy the files of the current directory into the given directory."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(
            "Copy files in the current directory to a target directory\n"
            "Usage: mbcopy <target-dir>"
        )
        return 1
    try:
        copy_directory_files(".", args[0], "utf-8")
    except NotADirectoryError:
        print(f"Error: {args[0]} is not a directory")
        return 1
    except (OSError, CodecvtError) as ex:
        print(ex)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())