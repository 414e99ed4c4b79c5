from pathlib import Path

import pytest

from pathkit.error_demo import error_report, main


def test_directory_with_entries(tmp_path: Path) -> None:
    (tmp_path / "f0").write_text("")
    report = error_report(tmp_path)
    assert "threw filesystem_error" not in report
    assert "  file_status type is directory_file" in report
    assert "  Returns: true" in report
    assert report.count("Not equal to the end iterator") == 2
    assert "    value is 0" in report


def test_empty_directory_is_at_end(tmp_path: Path) -> None:
    report = error_report(tmp_path)
    assert report.count("  Equal to the end iterator") == 2


def test_missing_path(tmp_path: Path) -> None:
    report = error_report(tmp_path / "no-such")
    status_section = report.split("\nexists(")[0]
    assert "  Did not throw exception" in status_section
    assert "  file_status type is file_not_found" in status_section
    assert "  Returns: false" in report
    listing = report.split("\ndirectory_iterator(")[1]
    assert "  threw filesystem_error exception:" in listing
    last = report.split("\ndirectory_iterator(")[2]
    assert "  Equal to the end iterator" in last
    assert "    value is 0" not in last


def test_regular_file_listing_fails(tmp_path: Path) -> None:
    target = tmp_path / "f1"
    target.write_text("file-f1")
    report = error_report(target)
    assert "  file_status type is regular_file" in report
    listing = report.split("\ndirectory_iterator(")[1]
    assert "  threw filesystem_error exception:" in listing


def test_main_without_arguments(capsys: pytest.CaptureFixture) -> None:
    assert main([]) == 1
    assert capsys.readouterr().out == "Usage: error_demo path\n"


def test_main_prints_report(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert out == error_report(tmp_path)