"""
Unit tests for check_answer and format_expected.
"""

import pytest

from cribtutor.core.models import CompoundTerm, MaskedTermGroup, MaskedTermList
from cribtutor.quiz.matching import check_answer, format_expected


def _expected(*groups):
    expected = MaskedTermList()
    for group in groups:
        expected.append(MaskedTermGroup(CompoundTerm.from_text(text) for text in group))
    return expected


@pytest.fixture
def scenario_expected():
    return _expected(["European Union", "United States"], ["international"])


class TestCheckAnswer:
    """Tests for answer checking."""

    def test_check_answer_when_pair_in_either_order_then_accepted(self, scenario_expected):
        """Unordered group members may come in any order."""
        # Act & Assert
        assert check_answer(scenario_expected, "United States and European Union international") is True
        assert check_answer(scenario_expected, "European Union, United States, international.") is True

    def test_check_answer_when_abbreviations_then_rejected(self, scenario_expected):
        """Abbreviations are not the masked words."""
        # Act & Assert
        assert check_answer(scenario_expected, "usa and eu") is False

    def test_check_answer_when_strict_groups_swapped_then_rejected(self):
        """Groups must be answered in order."""
        # Arrange
        expected = _expected(["heart"], ["lungs"])

        # Act & Assert
        assert check_answer(expected, "heart lungs") is True
        assert check_answer(expected, "lungs heart") is False

    def test_check_answer_when_words_left_over_then_rejected(self):
        """Extra words fail the answer."""
        # Arrange
        expected = _expected(["heart"], ["lungs"])

        # Act & Assert
        assert check_answer(expected, "heart lungs kidneys") is False
        assert check_answer(expected, "heart") is False

    def test_check_answer_when_plural_or_capitalised_then_accepted(self):
        """Fuzzy lookups apply to every word."""
        # Arrange
        expected = _expected(["heart"], ["lungs"])

        # Act & Assert
        assert check_answer(expected, "Hearts lung") is True

    def test_check_answer_when_hyphenated_term_then_spaces_or_hyphens_accepted(self):
        """Compound words may be typed either way."""
        # Arrange
        expected = _expected(["carbon-dioxide"])

        # Act & Assert
        assert check_answer(expected, "carbon dioxide") is True
        assert check_answer(expected, "carbon-dioxide") is True
        assert check_answer(expected, "dioxide carbon") is False

    def test_check_answer_when_duplicate_keys_then_next_entry_tried(self):
        """Entries sharing a first word are told apart by the rest."""
        # Arrange
        expected = _expected(["cell wall", "cell membrane"])

        # Act & Assert
        assert check_answer(expected, "cell membrane cell wall") is True
        assert check_answer(expected, "cell wall cell membrane") is True

    def test_check_answer_when_connective_matches_term_then_used_as_term(self):
        """"and" is only skipped when it is not itself an answer."""
        # Arrange
        expected = _expected(["and", "or"])

        # Act & Assert
        assert check_answer(expected, "or and") is True

    @pytest.mark.parametrize("term", ["-ve", "--amend"])
    def test_check_answer_when_term_starts_with_hyphen_then_typed_as_written(self, term):
        """Leading hyphens are part of the term and of the response word."""
        # Arrange
        expected = _expected([term])

        # Act & Assert
        assert check_answer(expected, term) is True
        assert check_answer(expected, term.lstrip("-")) is False

    @pytest.mark.parametrize("masked,response", [
        ("organization", "organisation"),
        ("organisation", "organization"),
    ])
    def test_check_answer_when_british_or_american_spelling_then_accepted(self, masked, response):
        """Either spelling answers a single-term group."""
        # Arrange
        expected = _expected([masked])

        # Act & Assert
        assert check_answer(expected, response) is True

    def test_check_answer_when_empty_response_then_rejected(self, scenario_expected):
        """An empty line answers nothing."""
        # Act & Assert
        assert check_answer(scenario_expected, "") is False


class TestFormatExpected:
    """Tests for the peek text."""

    def test_format_expected_when_groups_then_semicolon_separated(self, scenario_expected):
        """Groups end with ";", members are comma separated in key order."""
        # Act & Assert
        assert format_expected(scenario_expected) == " European Union, United States; international;"
