"""Compose a path from elements and report how it decomposes."""

from __future__ import annotations

import os
import sys
from typing import Iterable

SEPARATOR = "/"


def _quoted(text: str) -> str:
    """Quote ``text`` the way paths are written to a stream."""
    return '"' + text.replace("&", "&&").replace('"', '&"') + '"'


def _root_name_end(p: str) -> int:
    if p.startswith("//") and (len(p) == 2 or p[2] != SEPARATOR):
        end = p.find(SEPARATOR, 2)
        return len(p) if end == -1 else end
    return 0


def _split(p: str) -> tuple[str, str, str]:
    """Split ``p`` into root name, root directory and relative path."""
    end = _root_name_end(p)
    rest = p[end:]
    relative = rest.lstrip(SEPARATOR)
    root_directory = SEPARATOR if len(relative) < len(rest) else ""
    return p[:end], root_directory, relative


def _elements(p: str) -> list[str]:
    root_name, root_directory, relative = _split(p)
    parts = [part for part in (root_name, root_directory) if part]
    parts += [segment for segment in relative.split(SEPARATOR) if segment]
    if relative.endswith(SEPARATOR):
        parts.append(".")
    return parts


def _filename(p: str) -> str:
    parts = _elements(p)
    return parts[-1] if parts else ""


def _parent_path(p: str) -> str:
    if not p:
        return ""
    relative = _split(p)[2]
    root_end = len(p) - len(relative)
    if relative and p.endswith(SEPARATOR):
        end = len(p)
    else:
        end = len(p) - len(_filename(p))
    while end > root_end and p[end - 1] == SEPARATOR:
        end -= 1
    return p[:end]


def _stem_and_extension(p: str) -> tuple[str, str]:
    name = _filename(p)
    if name in (".", ".."):
        return name, ""
    dot = name.rfind(".")
    if dot == -1:
        return name, ""
    return name[:dot], name[dot:]


def _stem(p: str) -> str:
    return _stem_and_extension(p)[0]


def _extension(p: str) -> str:
    return _stem_and_extension(p)[1]


def compose_path(elements: Iterable) -> str:
    """Append each element in turn, adding a separator where one is needed."""
    result = ""
    for element in elements:
        piece = os.fspath(element)
        if not piece:
            continue
        if result and not result.endswith(SEPARATOR) and not piece.startswith(SEPARATOR):
            result += SEPARATOR
        result += piece
    return result


def describe_path(elements: Iterable) -> str:
    """Return the full report for the path composed from ``elements``."""
    p = compose_path(elements)
    root_name, root_directory, relative = _split(p)
    root_path = root_name + root_directory
    parent = _parent_path(p)
    filename = _filename(p)
    stem, extension = _stem_and_extension(p)

    lines = [
        "",
        "composed path:",
        f"  operator<<()---------: {_quoted(p)}",
        f"  make_preferred()-----: {_quoted(p)}",
        "",
        "elements:",
    ]
    lines += [f"  {_quoted(element)}" for element in _elements(p)]
    lines += [
        "",
        "observers, native format:",
        f"  native()-------------: {p}",
        f"  c_str()--------------: {p}",
        f"  string()-------------: {p}",
        f"  wstring()------------: {p}",
        "",
        "observers, generic format:",
        f"  generic_string()-----: {p}",
        f"  generic_wstring()----: {p}",
        "",
        "decomposition:",
        f"  root_name()----------: {_quoted(root_name)}",
        f"  root_directory()-----: {_quoted(root_directory)}",
        f"  root_path()----------: {_quoted(root_path)}",
        f"  relative_path()------: {_quoted(relative)}",
        f"  parent_path()--------: {_quoted(parent)}",
        f"  filename()-----------: {_quoted(filename)}",
        f"  stem()---------------: {_quoted(stem)}",
        f"  extension()----------: {_quoted(extension)}",
        "",
        "query:",
    ]
    queries = [
        ("empty()--------------", not p),
        ("is_absolute()--------", bool(root_directory)),
        ("has_root_name()------", bool(root_name)),
        ("has_root_directory()-", bool(root_directory)),
        ("has_root_path()------", bool(root_path)),
        ("has_relative_path()--", bool(relative)),
        ("has_parent_path()----", bool(parent)),
        ("has_filename()-------", bool(filename)),
        ("has_stem()-----------", bool(stem)),
        ("has_extension()------", bool(extension)),
    ]
    lines += [f"  {label}: {'true' if flag else 'false'}" for label, flag in queries]
    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    """Compose a path from the arguments and print its report."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(
            "Usage: path_info path-element [path-element...]\n"
            "Composes a path via operator/= from one or more path-element arguments\n"
            "Example: path_info foo/bar baz\n"
            "         would report info about the composed path foo/bar/baz"
        )
        return 1
    print(describe_path(args), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())