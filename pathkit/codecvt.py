"""Conversion between byte and text path representations, with codecvt results."""

from __future__ import annotations

import codecs
import os
from enum import IntEnum

CATEGORY_NAME = "codecvt"


class CodecvtResult(IntEnum):
    """Outcome of a character conversion."""

    OK = 0
    PARTIAL = 1
    ERROR = 2
    NOCONV = 3


_MESSAGES = {
    CodecvtResult.OK: "ok",
    CodecvtResult.PARTIAL: "partial",
    CodecvtResult.ERROR: "error",
    CodecvtResult.NOCONV: "noconv",
}


def codecvt_error_message(value: int) -> str:
    """Return the message for a conversion result value."""
    try:
        return _MESSAGES[CodecvtResult(value)]
    except ValueError:
        return "unknown error"


class CodecvtError(ValueError):
    """Raised when a conversion does not complete."""

    category = CATEGORY_NAME

    def __init__(self, result: int, detail: str = "") -> None:
        self.result = CodecvtResult(result)
        message = f"{CATEGORY_NAME}: {codecvt_error_message(self.result)}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


def _is_char(item: object) -> bool:
    if isinstance(item, str):
        return len(item) == 1
    return isinstance(item, int) and not isinstance(item, bool) and 0 <= item <= 255


def is_pathable(value: object) -> bool:
    """Tell whether ``value`` can be used as the source of a path."""
    if isinstance(value, (str, bytes, bytearray, os.PathLike)):
        return True
    if isinstance(value, (list, tuple)):
        kinds = {type(item) for item in value}
        return len(kinds) <= 1 and all(_is_char(item) for item in value)
    return False


def _normalise(source: object) -> str | bytes:
    if not is_pathable(source):
        raise TypeError(f"not a path source: {type(source).__name__}")
    if isinstance(source, os.PathLike):
        return os.fspath(source)
    if isinstance(source, (str, bytes)):
        return source
    if isinstance(source, bytearray):
        return bytes(source)
    if source and isinstance(source[0], int):
        return bytes(source)
    return "".join(source)


def is_empty(source: object) -> bool:
    """Tell whether a path source holds no characters."""
    return len(_normalise(source)) == 0


def convert(source: object, encoding: str) -> str | bytes:
    """Convert text to encoded bytes, or bytes to decoded text.

    Raises CodecvtError when a character cannot be converted or when the
    input ends in the middle of a multi-byte sequence.
    """
    value = _normalise(source)
    if isinstance(value, str):
        try:
            return value.encode(encoding)
        except UnicodeEncodeError as exc:
            raise CodecvtError(CodecvtResult.ERROR, str(exc)) from exc
    decoder = codecs.getincrementaldecoder(encoding)()
    try:
        text = decoder.decode(value, final=False)
    except UnicodeDecodeError as exc:
        raise CodecvtError(CodecvtResult.ERROR, str(exc)) from exc
    pending, _ = decoder.getstate()
    if pending:
        raise CodecvtError(
            CodecvtResult.PARTIAL, f"{len(pending)} trailing byte(s) incomplete"
        )
    return text