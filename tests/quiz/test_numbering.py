"""
Unit tests for SectionNumber.
"""

from pathlib import Path

from cribtutor.quiz import SectionNumber


class TestSectionNumber:
    """Tests for header numbering from file names."""

    def test_chapter_when_single_digit_prefix_then_numbered_from_prefix(self):
        """One digit starts chapter numbering at that digit."""
        # Arrange
        numbering = SectionNumber("3_cells.html")

        # Act & Assert
        assert numbering.single_digit is True
        assert numbering.chapter("Cells") == "3 Cells"
        assert numbering.section("Membranes") == "3.1 Membranes"
        assert numbering.section("Organelles") == "3.2 Organelles"
        assert numbering.chapter("Tissues") == "4 Tissues"
        assert numbering.section("Epithelium") == "4.1 Epithelium"

    def test_chapter_when_two_digit_prefix_then_quiz_number_leads(self):
        """The first digit numbers the quiz, the second the chapters."""
        # Arrange
        numbering = SectionNumber(Path("notes/12_genes.html"))

        # Act & Assert
        assert numbering.double_digit is True
        assert numbering.quiz("Genetics") == "1 Genetics"
        assert numbering.chapter("DNA") == "1.2 DNA"
        assert numbering.section("Bases") == "1.2.1 Bases"

    def test_repeat_chapter_when_sections_numbered_then_restarts_sections(self):
        """A repeated chapter numbers its sections from 1 again."""
        # Arrange
        numbering = SectionNumber("3_cells.html")
        numbering.chapter("Cells")
        numbering.section("Membranes")

        # Act
        numbering.repeat_chapter()

        # Assert
        assert numbering.section("Membranes") == "3.1 Membranes"

    def test_chapter_when_no_prefix_then_unnumbered(self):
        """Files without a numeric prefix print plain headers."""
        # Arrange
        numbering = SectionNumber("glossary.html")

        # Act & Assert
        assert numbering.numbered is False
        assert numbering.single_digit is False
        assert numbering.double_digit is False
        assert numbering.chapter("Terms") == "\nTerms"
        assert numbering.section("A") == "\nA"
        assert numbering.quiz("Glossary") == "Glossary"

    def test_chapter_when_prefix_not_numeric_then_unnumbered(self):
        """A prefix not ending in a digit gives no numbering."""
        # Arrange
        numbering = SectionNumber("ab_intro.html")

        # Act & Assert
        assert numbering.numbered is False
        assert numbering.chapter("Intro") == "\nIntro"
