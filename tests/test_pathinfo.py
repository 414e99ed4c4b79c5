from pathkit.pathinfo import compose_path, describe_path, main


def test_compose_documented_example():
    assert compose_path(["foo/bar", "baz"]) == "foo/bar/baz"


def test_compose_skips_empty_elements():
    assert compose_path(["a", "", "b"]) == compose_path(["a", "b"])


def test_compose_does_not_double_separator():
    assert compose_path(["x/", "y"]) == compose_path(["x", "y"])


def test_compose_single_element_unchanged():
    assert compose_path(["only"]) == "only"


def test_report_lists_elements_in_order():
    report = describe_path(["foo/bar", "baz"])
    assert '  "foo"\n  "bar"\n  "baz"\n' in report


def test_report_decomposition_relative():
    report = describe_path(["foo/bar", "baz"])
    assert '  filename()-----------: "baz"' in report
    assert '  parent_path()--------: "foo/bar"' in report
    assert '  relative_path()------: "foo/bar/baz"' in report
    assert "  is_absolute()--------: false" in report
    assert "  has_extension()------: false" in report


def test_report_absolute_path():
    report = describe_path(["/usr", "lib"])
    assert '  root_directory()-----: "/"' in report
    assert "  is_absolute()--------: true" in report
    assert "  has_root_name()------: false" in report


def test_report_stem_and_extension():
    report = describe_path(["archive.tar.gz"])
    assert '  extension()----------: ".gz"' in report
    assert '  stem()---------------: "archive.tar"' in report


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.startswith("Usage: path_info")


def test_main_prints_report(capsys):
    assert main(["foo/bar", "baz"]) == 0
    out = capsys.readouterr().out
    assert out == describe_path(["foo/bar", "baz"])