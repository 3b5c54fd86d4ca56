"""Tests for gitreview.output module."""

import pytest

from gitreview.options import ReviewOptions
from gitreview.output import (
    OutputError,
    REPORT_TITLE,
    colorize_review,
    format_review_sections,
    handle_review_output,
    strip_ansi_codes,
    write_review_file,
)


class TestFormatReviewSections:
    """Tests for format_review_sections function."""

    def test_trims_and_drops_empty_sections(self):
        """Test that sections are stripped and blank ones removed."""
        raw = "\n\n  Summary line  \n\n\n\nIssue one\n\n   \n\nIssue two\n"
        assert format_review_sections(raw) == "Summary line\n\nIssue one\n\nIssue two"

    def test_keeps_lines_within_section(self):
        """Test that single newlines stay inside a section."""
        assert format_review_sections("a\nb\n\nc") == "a\nb\n\nc"

    def test_empty(self):
        """Test empty model output."""
        assert format_review_sections("") == ""


class TestStripAnsiCodes:
    """Tests for strip_ansi_codes function."""

    def test_removes_colors(self):
        """Test removal of color sequences."""
        assert strip_ansi_codes("\x1b[34mblue\x1b[0m text") == "blue text"

    def test_removes_bold_and_compound(self):
        """Test removal of bold and multi-parameter sequences."""
        assert strip_ansi_codes("\x1b[1;36mTitle\x1b[39;49m") == "Title"

    def test_plain_text_unchanged(self):
        """Test that text without escapes is unchanged."""
        assert strip_ansi_codes("no [colors] here") == "no [colors] here"

    def test_removes_colorized_review(self):
        """Test that a colorized review strips back to the original."""
        review = "First\n\nSecond"
        assert strip_ansi_codes(colorize_review(review)) == review


class TestWriteReviewFile:
    """Tests for write_review_file function."""

    def test_writes_header_and_review(self, temp_dir):
        """Test the report layout."""
        path = temp_dir / "review.txt"
        write_review_file("Looks good.", path)
        assert path.read_text(encoding="utf-8") == f"{REPORT_TITLE}\n\nLooks good."

    def test_strips_ansi(self, temp_dir):
        """Test that escape codes never reach the file."""
        path = temp_dir / "review.txt"
        write_review_file("\x1b[31mBug\x1b[0m", path)
        assert "\x1b" not in path.read_text(encoding="utf-8")

    def test_overwrites(self, temp_dir):
        """Test that an existing file is replaced."""
        path = temp_dir / "review.txt"
        path.write_text("old content")
        write_review_file("new", path)
        assert "old content" not in path.read_text()

    def test_write_error(self, temp_dir):
        """Test that an unwritable path raises OutputError."""
        with pytest.raises(OutputError):
            write_review_file("x", temp_dir / "missing" / "review.txt")


class TestHandleReviewOutput:
    """Tests for handle_review_output function."""

    def test_console(self, capsys):
        """Test console output."""
        handle_review_output("Summary\n\nIssue", ReviewOptions())

        out = capsys.readouterr().out
        assert REPORT_TITLE in out
        assert "=" * 50 in out
        assert "Summary" in out
        assert "Review completed successfully!" in out

    def test_file(self, temp_dir, capsys):
        """Test file output."""
        path = temp_dir / "out.txt"
        handle_review_output("Summary", ReviewOptions(output=str(path)))

        assert path.read_text() == f"{REPORT_TITLE}\n\nSummary"
        assert "Review written to file" in capsys.readouterr().out
