"""
Unit tests for split_into_words.
"""

import pytest

from cribtutor.quiz.matching import split_into_words


class TestSplitIntoWords:
    """Tests for response tokenising."""

    def test_split_when_plain_words_then_split_on_spaces(self):
        """Runs of spaces separate words."""
        # Act & Assert
        assert split_into_words("  heart   lungs ") == ["heart", "lungs"]

    def test_split_when_hyphen_or_slash_in_word_then_split(self):
        """Real words are also split at "-" and "/"."""
        # Act & Assert
        assert split_into_words("carbon-dioxide water/oxygen") == ["carbon", "dioxide", "water", "oxygen"]

    def test_split_when_trailing_punctuation_then_dropped(self):
        """One trailing ".", "," or ";" is removed."""
        # Act & Assert
        assert split_into_words("cells, tissues; organs.") == ["cells", "tissues", "organs"]

    @pytest.mark.parametrize("line,expected", [
        ("-ve", ["-ve"]),
        ("pH-", ["pH-"]),
        ("x/", ["x/"]),
    ])
    def test_split_when_short_or_symbolic_word_then_kept_whole(self, line, expected):
        """Words that do not look like words are not split."""
        # Act & Assert
        assert split_into_words(line) == expected

    def test_split_when_empty_line_then_no_words(self):
        """Nothing in, nothing out."""
        # Act & Assert
        assert split_into_words("") == []
        assert split_into_words("   ") == []
