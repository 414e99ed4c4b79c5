import os

import pytest

from pathkit.walk import RecursiveDirectoryIterator, main, tree_lines


@pytest.fixture
def unique(tmp_path):
    unique_dir = tmp_path / "unique"
    (unique_dir / "yy" / "zz").mkdir(parents=True)
    return unique_dir


def test_full_walk(unique):
    it = RecursiveDirectoryIterator(unique)
    assert next(it) == str(unique / "yy")
    assert it.level == 0
    assert next(it) == str(unique / "yy" / "zz")
    assert it.level == 1
    with pytest.raises(StopIteration):
        next(it)


def test_list_of_walk(unique):
    assert list(RecursiveDirectoryIterator(unique)) == [
        str(unique / "yy"),
        str(unique / "yy" / "zz"),
    ]


def test_no_push(unique):
    it = RecursiveDirectoryIterator(unique)
    assert next(it) == str(unique / "yy")
    it.no_push()
    with pytest.raises(StopIteration):
        next(it)


def test_pop_ends_walk(unique):
    it = RecursiveDirectoryIterator(unique)
    assert next(it) == str(unique / "yy")
    next(it)
    it.pop()
    with pytest.raises(StopIteration):
        next(it)


def test_pop_resumes_in_parent(unique):
    (unique / "yy" / "later").mkdir()
    (unique / "other").mkdir()
    it = RecursiveDirectoryIterator(unique)
    seen = []
    for path in it:
        seen.append(path)
        if it.level == 1:
            it.pop()
    assert len(seen) == 3
    assert sum(1 for p in seen if os.path.dirname(p) == str(unique / "yy")) == 1


def test_empty_directory(unique):
    assert list(RecursiveDirectoryIterator(unique / "yy" / "zz")) == []


def test_missing_root(tmp_path):
    with pytest.raises(FileNotFoundError):
        RecursiveDirectoryIterator(tmp_path / "no-such-path")


def test_file_root(tmp_path):
    f = tmp_path / "plain"
    f.write_text("x")
    with pytest.raises(NotADirectoryError):
        RecursiveDirectoryIterator(f)


def _count_d1f1(root, follow):
    return sum(
        1
        for p in RecursiveDirectoryIterator(root, follow)
        if os.path.basename(p) == "d1f1"
    )


def test_symlink_recursion(tmp_path):
    (tmp_path / "d1").mkdir()
    (tmp_path / "d1" / "d1f1").write_text("")
    os.symlink(tmp_path / "d1", tmp_path / "d1_symlink")
    assert _count_d1f1(tmp_path, False) == 1
    assert _count_d1f1(tmp_path, True) > 1


def test_tree_lines_max_level(tmp_path):
    (tmp_path / "x" / "y" / "z").mkdir(parents=True)
    lines = list(tree_lines(tmp_path, 1))
    assert lines == [
        f'  "{tmp_path / "x"}"',
        f'    "{tmp_path / "x" / "y"}"',
    ]


def test_tree_lines_unbounded(tmp_path):
    (tmp_path / "x" / "y" / "z").mkdir(parents=True)
    lines = list(tree_lines(tmp_path))
    assert lines[-1] == f'      "{tmp_path / "x" / "y" / "z"}"'
    assert len(lines) == 3


def test_tree_lines_missing_root(tmp_path):
    lines = list(tree_lines(tmp_path / "nosuchdir"))
    assert lines[0] == "************* exception *****************"
    assert len(lines) == 2


def test_main_ignore_errors(tmp_path, capsys):
    assert main([str(tmp_path / "nosuchdir"), "--ignore-errors"]) == 0
    assert capsys.readouterr().out == ""


def test_main_prints_tree(unique, capsys):
    assert main([str(unique)]) == 0
    out = capsys.readouterr().out
    assert out == f'  "{unique / "yy"}"\n    "{unique / "yy" / "zz"}"\n'