"""
Answer Matching Package

Tokenises response lines and checks them against masked terms.
"""

from .fuzzy import fuzzy_compare, fuzzy_find
from .matcher import CONNECTIVES, check_answer, format_expected
from .tokenizer import split_into_words

__all__ = [
    "check_answer",
    "format_expected",
    "fuzzy_compare",
    "fuzzy_find",
    "split_into_words",
    "CONNECTIVES",
]
