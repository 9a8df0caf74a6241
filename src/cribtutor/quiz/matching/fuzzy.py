"""
Module: quiz.matching.fuzzy

Purpose:
    Heuristic word equivalence tolerant of British/American spelling and
    regular English plurals, plus lookup of a response word among the
    entries of a MaskedTermGroup.

    fuzzy_compare():
        1. Align alternate spellings: isation/ization, ise/ize, ice/ise,
           our/or (both directions, at the same position)
        2. By length difference between the words:
           0  equal, else man/men, then sis/ses, cis/ces, xis/xes
           1  +s, else us/i (focus/foci)
           2  +es, else f/ves (half/halves), y/ies (city/cities)
        3. Anything else is not equal

Key Functions:
    - fuzzy_compare(): Compare two words
    - fuzzy_find(): Locate a response word among sorted term keys
"""

from __future__ import annotations

import bisect
from typing import Optional, Sequence, Tuple

SPELLING_ALTERNATIVES: Tuple[Tuple[str, str], ...] = (
    ("isation", "ization"),
    ("ise", "ize"),
    ("ice", "ise"),
    ("our", "or"),
)

SAME_LENGTH_PLURALS: Tuple[Tuple[str, str], ...] = (
    ("sis", "ses"),
    ("cis", "ces"),
    ("xis", "xes"),
)


def adjust_spelling(lhs: str, rhs: str, alt1: str, alt2: str) -> str:
    """
    Rewrite ``rhs`` to use ``lhs``'s spelling where they differ by ``alt1``/``alt2``.

    The rewrite applies when ``lhs`` uses one alternative at the same
    position where ``rhs`` (searched from the end) uses the other.
    """
    pos = lhs.find(alt1)
    if pos != -1 and rhs.rfind(alt2) == pos:
        rhs = rhs[:pos] + alt1 + rhs[pos + len(alt2):]
    pos = lhs.find(alt2)
    if pos != -1 and rhs.rfind(alt1) == pos:
        rhs = rhs[:pos] + alt2 + rhs[pos + len(alt1):]
    return rhs


def fuzzy_compare(lhs: str, rhs: str) -> bool:
    """
    Compare two words allowing spelling variants and plurals.

    Examples:
        >>> fuzzy_compare("potato", "potatoes")
        True
        >>> fuzzy_compare("organisation", "organization")
        True
        >>> fuzzy_compare("cat", "dog")
        False
    """
    for alt1, alt2 in SPELLING_ALTERNATIVES:
        rhs = adjust_spelling(lhs, rhs, alt1, alt2)

    if len(lhs) > len(rhs):
        lhs, rhs = rhs, lhs
    if not lhs:
        return lhs == rhs

    difference = len(rhs) - len(lhs)

    if difference == 0:
        if lhs == rhs:
            return True
        rhs = adjust_spelling(lhs, rhs, "man", "men")
        if lhs == rhs:
            return True
        for alt1, alt2 in SAME_LENGTH_PLURALS:
            rhs = adjust_spelling(lhs, rhs, alt1, alt2)
        return lhs == rhs

    if difference == 1:
        if lhs + "s" == rhs:
            return True
        if lhs.endswith("i"):
            return lhs[:-1] + "us" == rhs
        return False

    if difference == 2:
        if lhs + "es" == rhs:
            return True
        if lhs.endswith("f"):
            return lhs[:-1] + "ves" == rhs
        if lhs.endswith("y"):
            return lhs[:-1] + "ies" == rhs
        return False

    return False


def fuzzy_find(keys: Sequence[str], word: str) -> Optional[int]:
    """
    Find the index of the key matching a response word.

    ``keys`` must be sorted. Tried in order: exact match; the word with its
    first letter lower-cased; fuzzy compare against the only key; fuzzy
    compare against the lower bound, the upper bound and the last key.

    Returns:
        Index into ``keys``, or None
    """
    if not keys or not word:
        return None

    index = bisect.bisect_left(keys, word)
    if index < len(keys) and keys[index] == word:
        return index

    word = word[0].lower() + word[1:]
    index = bisect.bisect_left(keys, word)
    if index < len(keys) and keys[index] == word:
        return index

    if len(keys) == 1:
        return 0 if fuzzy_compare(keys[0], word) else None

    lower = bisect.bisect_left(keys, word)
    if lower < len(keys) and fuzzy_compare(keys[lower], word):
        return lower

    upper = bisect.bisect_right(keys, word)
    if upper < len(keys) and fuzzy_compare(keys[upper], word):
        return upper

    last = len(keys) - 1
    if fuzzy_compare(keys[last], word):
        return last

    return None
