"""Generate an HTML table showing how paths decompose."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Callable, Iterable

from pathkit.pathinfo import _elements, _filename, _parent_path, _split

_EMPTY = '<font size="-1"><i>empty</i></font>'

_PAGE_HEAD = (
    "<html>\n"
    "<head>\n"
    "<title>Path Decomposition Table</title>\n"
    "</head>\n"
    '<body bgcolor="#ffffff" text="#000000">\n'
)

_TABLE_HEAD = (
    "<h1>Path Decomposition Table</h1>\n"
    "<p>Shaded entries indicate cases where <i>POSIX</i> and <i>Windows</i>\n"
    "implementations yield different results. The top value is the\n"
    "<i>POSIX</i> result and the bottom value is the <i>Windows</i> result.\n"
    '<table border="1" cellspacing="0" cellpadding="5">\n'
    "<p>\n"
)

_PAGE_TAIL = "</body>\n</html>\n"

_USAGE = (
    'Usage: path_table "POSIX"|"Windows" input-file posix-file output-file\n'
    "Run on POSIX first, then on Windows\n"
    '  "POSIX" causes POSIX results to be saved in posix-file;\n'
    '  "Windows" causes POSIX results read from posix-file\n'
    "  input-file contains the paths to appear in the table.\n"
    "  posix-file will be used for POSIX results\n"
    "  output-file will contain the generated HTML.\n"
)


def element_list(path) -> str:
    """Return the elements of ``path`` joined by commas."""
    return ",".join(_elements(os.fspath(path)))


@dataclass(frozen=True)
class Column:
    """One column of the table: its heading and how a cell is computed."""

    heading: str
    extract: Callable[[str], str]

    def cell_value(self, path) -> str:
        return self.extract(os.fspath(path))


COLUMNS = (
    Column("Iteration<br>over<br>Elements", element_list),
    Column("<code>string()</code>", lambda p: p),
    Column("<code>generic_<br>string()</code>", lambda p: p),
    Column("<code>root_<br>path()</code>", lambda p: "".join(_split(p)[:2])),
    Column("<code>root_<br>name()</code>", lambda p: _split(p)[0]),
    Column("<code>root_<br>directory()</code>", lambda p: _split(p)[1]),
    Column("<code>relative_<br>path()</code>", lambda p: _split(p)[2]),
    Column("<code>parent_<br>path()</code>", _parent_path),
    Column("<code>filename()</code>", _filename),
)


def _strip_line_end(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


def read_cases(lines: Iterable[str]) -> list[str]:
    """Return the test cases in ``lines``, dropping comment lines."""
    cases = []
    for line in lines:
        case = _strip_line_end(line)
        if not case or not case.startswith("#"):
            cases.append(case)
    return cases


def _cell(column: Column, case: str) -> str:
    value = column.cell_value(case)
    return f"<code>{value}</code>" if value else _EMPTY


def render_page(cases, posix=True, posix_lines=None) -> tuple[str, list[str]]:
    """Render the page for ``cases``.

    In POSIX mode the cells are left blank and their values are returned as
    the second item, to be saved. Otherwise each value is compared with the
    saved POSIX value from ``posix_lines`` and shaded where they differ.
    """
    recorded: list[str] = []
    saved = iter(posix_lines or ())
    out = [_PAGE_HEAD, _TABLE_HEAD, "<tr><td><b>Constructor<br>argument</b></td>\n"]
    out += [f"<td><b>{column.heading}</b></td>\n" for column in COLUMNS]
    out.append("</tr>\n")
    for case in cases:
        out.append("<tr>\n")
        out.append(f"<td><code>{case}</code></td>\n" if case else f"<td>{_EMPTY}</td>\n")
        for column in COLUMNS:
            value = _cell(column, case)
            if posix:
                recorded.append(value)
                out.append("<td></td>\n")
                continue
            expected = next(saved, "").removesuffix("\n")
            if value != expected:
                value = (
                    '<span style="background-color: #CCFFCC">'
                    f"{expected}<br>{value}</span>"
                )
            out.append(f"<td>{value}</td>\n")
        out.append("</tr>\n")
    out.append("</table>\n")
    out.append(_PAGE_TAIL)
    return "".join(out), recorded


def main(argv=None) -> int:
    """Build the table from an input file, saving or comparing POSIX results."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        print(_USAGE, end="", file=sys.stderr)
        return 1
    mode, input_file, posix_file, output_file = args
    posix = mode == "POSIX"

    try:
        with open(input_file, encoding="utf-8", newline="") as handle:
            cases = read_cases(handle)
    except OSError:
        print(f"Could not open input file: {input_file}", file=sys.stderr)
        return 1

    posix_lines: list[str] = []
    if not posix:
        try:
            with open(posix_file, encoding="utf-8") as handle:
                posix_lines = list(handle)
        except OSError:
            print(f"Could not open POSIX input file: {posix_file}", file=sys.stderr)
            return 1

    page, recorded = render_page(cases, posix, posix_lines)

    if posix:
        try:
            with open(posix_file, "w", encoding="utf-8") as handle:
                handle.write("".join(f"{value}\n" for value in recorded))
        except OSError:
            print(f"Could not open POSIX output file: {posix_file}", file=sys.stderr)
            return 1

    try:
        with open(output_file, "w", encoding="utf-8") as handle:
            handle.write(page)
    except OSError:
        print(f"Could not open output file: {output_file}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())