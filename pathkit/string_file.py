"""Read and write a whole file as a single string."""

from __future__ import annotations

import os
from pathlib import Path

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def save_string_file(path: str | os.PathLike, text: str | bytes) -> None:
    """Write ``text`` to ``path`` in binary mode, replacing any existing content."""
    data = text if isinstance(text, (bytes, bytearray)) else text.encode(_ENCODING, _ERRORS)
    with open(Path(path), "wb") as handle:
        handle.write(data)


def load_string_file(path: str | os.PathLike) -> str:
    """Return the whole content of ``path``, read in binary mode."""
    with open(Path(path), "rb") as handle:
        data = handle.read()
    return data.decode(_ENCODING, _ERRORS)