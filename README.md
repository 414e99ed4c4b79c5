# pathkit

Tools for looking at paths and the files behind them: how a path breaks down
into parts, what kind of file it names, how big it is and what a directory
holds. It also has a few small file helpers. Everything runs on the standard
library alone.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `pathkit-status [PATH]` | Shows the status and symlink status of a path, with any error met, then whether it exists |
| `pathkit-error-demo PATH` | Shows how each query on a path reports errors: by raising or by returning them |
| `pathkit-path-info ELEMENT [ELEMENT...]` | Joins the elements into one path and shows its parts and queries |
| `pathkit-stems PATH` | Takes the filename's extensions off one at a time and shows each stem |
| `pathkit-ls echo PATH` | Prints the path |
| `pathkit-ls size PATH` | Prints the path and the size of the regular file it names |
| `pathkit-ls file-size PATH` | Reports the size of a regular file, or says it is missing or not a regular file |
| `pathkit-ls describe PATH [--list] [--sort]` | Says what the path is; `--list` lists a directory's entries as full paths, `--sort` lists bare filenames in sorted order |
| `pathkit-ls ls [PATH]` | Lists a directory (the current one by default) and counts its files, directories, other entries and errors |
| `pathkit-walk PATH [--max-level N] [--ignore-errors]` | Prints the tree below a directory, indented by depth; entries deeper than N are skipped, and errors are printed inline unless ignored |
| `pathkit-path-table POSIX\|Windows INPUT POSIX-FILE OUTPUT` | Builds an HTML table showing how each path in INPUT breaks down |
| `pathkit-mbcopy TARGET-DIR` | Copies the regular files in the current directory into TARGET-DIR, naming the copies in UTF-8 |

For `pathkit-path-table`, lines of INPUT that start with `#` are skipped. Run
it with `POSIX` first: the cell values are saved in POSIX-FILE and the table
in OUTPUT has empty cells. Run it again with `Windows`: POSIX-FILE is read
back and each cell shows its value, shaded with the saved value above it
where the two differ.

## Library

```python
from pathkit.status import status, symlink_status, FileType
from pathkit.string_file import save_string_file, load_string_file
from pathkit.walk import RecursiveDirectoryIterator, tree_lines

save_string_file("note.txt", "hello")
assert load_string_file("note.txt") == "hello"

st = status("note.txt")
assert st.is_regular_file() and st.type is FileType.REGULAR_FILE

it = RecursiveDirectoryIterator(".", follow_symlinks=False)
for entry in it:
    if it.level > 1:
        it.pop()           # leave the rest of this directory
        continue
    print(entry)
```

The library is arranged as follows:

- `pathkit.string_file`: `save_string_file` writes text (UTF-8) or bytes to a file in one call, and `load_string_file` reads a whole file back as text.
- `pathkit.codecvt`: `convert` encodes text to bytes or decodes bytes to text in a given encoding. `is_pathable` tells whether a value (string, bytes, path-like, or a list or tuple of single characters or byte values) can serve as a path source, and `is_empty` whether it holds no characters. Failures raise `CodecvtError`, which carries a `CodecvtResult` (`ERROR` for a character that cannot be converted, `PARTIAL` for an incomplete trailing sequence); `codecvt_error_message` turns a result value into its message.
- `pathkit.status`: `status` and `symlink_status` return a `FileStatus` holding a `FileType` and the permission bits. A missing path gives `FileType.FILE_NOT_FOUND`; any other failure raises `OSError`. The status has the queries `exists`, `status_known`, `is_regular_file`, `is_directory`, `is_symlink` and `is_other`. `describe_status` formats a status and its error as a report.
- `pathkit.error_demo`: `error_report` returns the error report for a path.
- `pathkit.pathinfo`: `compose_path` joins path elements with `/` and `describe_path` reports on the joined path.
- `pathkit.stems`: `stem_chain` lists the filename and each successive stem with its stem and extension.
- `pathkit.listing`: `file_size_report` reports the size of a regular file. `describe` reports on a path and can list a directory's entries, sorted or not. `simple_ls` returns a `ListingSummary` of entry lines and counts.
- `pathkit.walk`: `RecursiveDirectoryIterator` walks a tree depth first, exposes `level`, and has `pop` and `no_push`. `tree_lines` yields the indented lines of a walk, with errors reported inline.
- `pathkit.path_table`: `Column`, `element_list`, `read_cases` and `render_page` build the path decomposition table.
- `pathkit.mbcopy`: `to_external` and `to_internal` convert file names between text and encoded bytes (the locale's encoding by default). `copy_file` copies one file and `copy_directory_files` copies every regular file in a directory.
- `pathkit.demos`: `symlink_parent_resolution` shows how `..` resolves after a directory symlink. `create_smile_files` creates empty files whose names mix plain and non-ASCII characters.

## What it does not do

- There is no path class. Paths are plain strings, split on `/` only; drive
  letters and backslash separators are not treated as parts of a path.
- There is no general file operations API: nothing here creates, removes,
  renames or links files for you beyond the helpers listed above, and there
  are no permission, disk space or timestamp functions.
- `pathkit-path-table` computes the same decomposition in both modes; it does
  not itself produce Windows results.