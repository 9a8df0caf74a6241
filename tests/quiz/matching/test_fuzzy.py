"""
Unit tests for fuzzy_compare and fuzzy_find.
"""

import pytest

from cribtutor.quiz.matching import fuzzy_compare, fuzzy_find


class TestFuzzyCompare:
    """Tests for spelling and plural tolerance."""

    @pytest.mark.parametrize("lhs,rhs", [
        ("potato", "potatoes"),
        ("half", "halves"),
        ("focus", "foci"),
        ("woman", "women"),
        ("city", "cities"),
        ("cell", "cells"),
        ("analysis", "analyses"),
        ("organisation", "organization"),
        ("colour", "color"),
        ("color", "colour"),
        ("cell", "cell"),
    ])
    def test_fuzzy_compare_when_variants_then_equal(self, lhs, rhs):
        """Regular plurals and British/American spellings match."""
        # Act & Assert
        assert fuzzy_compare(lhs, rhs) is True
        assert fuzzy_compare(rhs, lhs) is True

    @pytest.mark.parametrize("lhs,rhs", [
        ("cat", "dog"),
        ("cell", "cellular"),
        ("cell", ""),
        ("fish", "fist"),
    ])
    def test_fuzzy_compare_when_different_words_then_not_equal(self, lhs, rhs):
        """Unrelated words do not match."""
        # Act & Assert
        assert fuzzy_compare(lhs, rhs) is False


class TestFuzzyFind:
    """Tests for locating a response word among sorted keys."""

    def test_fuzzy_find_when_exact_then_returns_index(self):
        """Exact matches win."""
        # Act & Assert
        assert fuzzy_find(["European", "United"], "United") == 1

    def test_fuzzy_find_when_capitalised_then_lower_case_tried(self):
        """A capital first letter from the response is forgiven."""
        # Act & Assert
        assert fuzzy_find(["cell", "nucleus"], "Cell") == 0

    def test_fuzzy_find_when_single_key_plural_then_found(self):
        """A lone key is compared fuzzily."""
        # Act & Assert
        assert fuzzy_find(["cell"], "cells") == 0

    def test_fuzzy_find_when_lower_bound_matches_then_found(self):
        """Fuzzy matches at the insertion point are found."""
        # Act & Assert
        assert fuzzy_find(["cells", "nucleus"], "cell") == 0

    def test_fuzzy_find_when_no_match_then_none(self):
        """Words matching no key return None."""
        # Act & Assert
        assert fuzzy_find(["European", "United"], "usa") is None
        assert fuzzy_find([], "cell") is None
        assert fuzzy_find(["cell"], "") is None
