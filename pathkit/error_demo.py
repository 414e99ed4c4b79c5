"""Show how status, existence and directory listing report errors."""

from __future__ import annotations

import os
import sys

from pathkit.status import FileStatus, _probe, status


def _status_line(file_status: FileStatus) -> str:
    return f"  file_status type is {file_status.type.label}"


def _exception_lines(ex: OSError) -> list[str]:
    return [
        "  threw filesystem_error exception:",
        f"    errno is {ex.errno}",
        "    category is system",
        f"    what is {ex}",
    ]


def _error_lines(err: OSError | None) -> list[str]:
    code = 0 if err is None else (err.errno or 0)
    return [
        "  error:",
        f"    value is {code}",
        "    category is system",
        f"    message is {os.strerror(code)}",
    ]


def _at_end(path: str) -> bool:
    with os.scandir(path) as entries:
        return next(entries, None) is None


def _end_line(at_end: bool) -> str:
    return f"  {'Equal' if at_end else 'Not equal'} to the end iterator"


def error_report(path) -> str:
    """Return the error-reporting report for ``path``."""
    p = os.fspath(path)
    lines: list[str] = []

    lines.append(f'\nstatus("{p}");')
    try:
        s = status(p)
        lines.append("  Did not throw exception")
    except OSError as ex:
        lines += _exception_lines(ex)
        s = FileStatus()
    lines.append(_status_line(s))

    lines.append(f'\nstatus("{p}", ec);')
    s, err = _probe(p, True)
    lines.append(_status_line(s))
    lines += _error_lines(err)

    lines.append(f'\nexists("{p}");')
    try:
        found = status(p).exists()
        lines += ["  Did not throw exception", f"  Returns: {'true' if found else 'false'}"]
    except OSError as ex:
        lines += _exception_lines(ex)

    lines.append(f'\ndirectory_iterator("{p}");')
    try:
        at_end = _at_end(p)
        lines += ["  Did not throw exception", _end_line(at_end)]
    except OSError as ex:
        lines += _exception_lines(ex)

    lines.append(f'\ndirectory_iterator("{p}", ec);')
    try:
        at_end, err = _at_end(p), None
    except OSError as ex:
        at_end, err = True, ex
    lines.append(_end_line(at_end))
    lines += _error_lines(err)

    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    """Print the error report for the path given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: error_demo path")
        return 1
    print(error_report(args[0]), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())