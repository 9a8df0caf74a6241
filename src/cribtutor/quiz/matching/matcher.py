"""
Module: quiz.matching.matcher

Purpose:
    Check a response line against the expected answer of a masked question.

    Groups are answered in order. Within a group each response word is
    located among the remaining entry keys (fuzzy_find); the entry's other
    words must follow in order. When they do not, the next entry is tried
    only if it has the same key. A connective ("and", "or") that matches
    no entry is skipped, so "A and B" answers a pair masked as "A and B".
    The response passes only if every group is used up and no words are
    left over.

Key Functions:
    - check_answer(): Response line against a MaskedTermList
    - format_expected(): The answer text shown on request ("?")
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, FrozenSet, List, Sequence

from cribtutor.core.models import CompoundTerm, MaskedTermGroup, MaskedTermList

from .fuzzy import fuzzy_compare, fuzzy_find
from .tokenizer import split_into_words

logger = logging.getLogger(__name__)


CONNECTIVES: FrozenSet[str] = frozenset({"and", "or"})


def check_answer(expected: MaskedTermList, response: str) -> bool:
    """
    Decide whether ``response`` fills in the blanks of ``expected``.

    Example:
        >>> group = MaskedTermGroup([CompoundTerm.from_text("European Union"),
        ...                          CompoundTerm.from_text("United States")])
        >>> expected = MaskedTermList([group])
        >>> check_answer(expected, "United States and European Union")
        True
        >>> check_answer(expected, "usa and eu")
        False
    """
    words: Deque[str] = deque(split_into_words(response))

    for group in expected:
        if not _consume_group(group, words):
            return False

    if words:
        logger.debug(f"Unused words in response: {list(words)}")
        return False
    return True


def _consume_group(group: MaskedTermGroup, words: Deque[str]) -> bool:
    entries: List[CompoundTerm] = list(group.entries)

    while entries:
        if not words:
            return False

        keys = [entry.key for entry in entries]
        index = fuzzy_find(keys, words[0])
        if index is None:
            if words[0].lower() in CONNECTIVES:
                words.popleft()
                continue
            logger.debug(f"No masked term starts with {words[0]!r}")
            return False

        while not _rest_matches(entries[index], words):
            key = entries[index].key
            index += 1
            if index == len(entries) or entries[index].key != key:
                logger.debug(f"Words after {words[0]!r} do not complete a masked term")
                return False

        for _ in range(entries[index].word_count):
            words.popleft()
        del entries[index]

    return True


def _rest_matches(term: CompoundTerm, words: Sequence[str]) -> bool:
    if len(words) < term.word_count:
        return False
    return all(
        fuzzy_compare(words[offset], expected)
        for offset, expected in enumerate(term.rest, start=1)
    )


def format_expected(expected: MaskedTermList) -> str:
    """
    Expected answer as shown after "?".

    Example:
        >>> group = MaskedTermGroup([CompoundTerm.from_text("United States"),
        ...                          CompoundTerm.from_text("European Union")])
        >>> format_expected(MaskedTermList([group]))
        ' European Union, United States;'
    """
    return "".join(
        " " + ", ".join(" ".join(term.words) for term in group) + ";"
        for group in expected
    )
