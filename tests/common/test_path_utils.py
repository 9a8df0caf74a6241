"""
Unit tests for cribsheet list and path helpers.
"""

from pathlib import Path

import pytest

from cribtutor.common import (
    CribsheetListError,
    SkipToNotFoundError,
    clean_list_line,
    extract_sheet_prefix,
    read_cribsheet_list,
    select_cribsheets,
)


class TestExtractSheetPrefix:
    """Tests for extract_sheet_prefix."""

    @pytest.mark.parametrize("name,expected", [
        ("3_cells.html", "3"),
        (Path("/sheets/12_genetics.html"), "12"),
        ("sub_dir/glossary.html", ""),
        ("a_b_c.html", "a"),
    ])
    def test_extract_when_name_then_text_before_first_underscore(self, name, expected):
        """Only the file name is considered."""
        # Act & Assert
        assert extract_sheet_prefix(name) == expected


class TestCribsheetList:
    """Tests for reading the cribsheet list."""

    def test_clean_list_line_when_comment_and_tabs_then_stripped(self):
        """Comments and surrounding whitespace are removed."""
        # Act & Assert
        assert clean_list_line("\tbiology/3_cells.html\t# chapter 3") == "biology/3_cells.html"
        assert clean_list_line("# only a comment") == ""

    def test_read_list_when_file_exists_then_entries_in_order(self, tmp_path):
        """Blank and comment lines are skipped."""
        # Arrange
        list_path = tmp_path / "cribsheets.txt"
        list_path.write_text("# Biology\n3_cells.html\n\n4_tissues.html  # next\n", encoding="utf-8")

        # Act
        entries = read_cribsheet_list(list_path)

        # Assert
        assert entries == ["3_cells.html", "4_tissues.html"]

    def test_read_list_when_missing_then_raises_error(self, tmp_path):
        """A missing list is an error."""
        # Act & Assert
        with pytest.raises(CribsheetListError, match="Not found"):
            read_cribsheet_list(tmp_path / "missing.txt")


class TestSelectCribsheets:
    """Tests for skip-to selection."""

    def test_select_when_no_skip_to_then_all_entries(self):
        """Everything is selected by default."""
        # Act & Assert
        assert list(select_cribsheets(["a.html", "b.html"])) == ["a.html", "b.html"]

    def test_select_when_skip_to_matches_then_starts_there(self):
        """Selection starts at the first file name with the prefix."""
        # Act
        selected = list(select_cribsheets(["bio/3_cells.html", "bio/4_tissues.html", "5_organs.html"], "4_"))

        # Assert
        assert selected == ["bio/4_tissues.html", "5_organs.html"]

    def test_select_when_skip_to_missing_then_raises_error(self):
        """An unmatched skip-to name is an error."""
        # Act & Assert
        with pytest.raises(SkipToNotFoundError, match="Skip to: '9_' not found"):
            list(select_cribsheets(["3_cells.html"], "9_"))
