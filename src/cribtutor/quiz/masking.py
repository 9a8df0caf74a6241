"""
Module: quiz.masking

Purpose:
    Choose which terms of a question to blank, write their masks into the
    tree and build the expected answer.

    Selection: shuffle the candidate indices, keep the first ``choices``
    and sort them back into document order. Each selected term becomes one
    or more CompoundTerms (one per "/"-separated alternative). A
    strict-order term closes the pending group before and after itself,
    so it always sits in a group of its own; adjacent non-strict terms
    (inside <ul>, or paired by a conjunction) share a group.

Key Functions:
    - find_terms(): Candidate terms of a question
    - is_quizzable(): Whether a question should be masked at all
    - select_and_mask(): Mask terms, return the expected answer
    - clear_masks(): Remove every mask from a tree

Dependencies:
    - random (std)
    - core.models: Element, Tag, CompoundTerm, MaskedTermGroup, MaskedTermList
    - .config.MaskingConfig

Used By:
    - quiz.dialogue: fill_in_the_blanks()
    - quiz.controller: find_terms()
"""

from __future__ import annotations

import logging
import random
import re
from typing import List, Optional, Sequence

from cribtutor.core.models import (
    CompoundTerm,
    Element,
    MaskedTermGroup,
    MaskedTermList,
    Tag,
)

from .config import MaskingConfig

logger = logging.getLogger(__name__)


ALTERNATIVE_SEPARATOR = "/"

_WORD_BREAK = re.compile(r"(?<=[^ \-])[ \-]+(?=[^ \-])")


def find_terms(element: Element) -> List[Element]:
    """
    Collect the emphasis elements under ``element`` in document order.

    Emphasis elements are not searched for nested emphasis.
    """
    terms: List[Element] = []
    for sub in element.subelements():
        if sub.tag == Tag.EM:
            terms.append(sub)
        else:
            terms.extend(find_terms(sub))
    return terms


def is_quizzable(candidate_count: int, choices: int) -> bool:
    """
    Decide whether a question with ``candidate_count`` terms is masked.

    A question is shown verbatim when no terms are asked for, or when it
    has too few terms for the number requested (twice the count is less
    than ``choices``).
    """
    if choices == 0:
        return False
    return 2 * candidate_count >= choices


def lower_sentence_start(text: str) -> str:
    """
    Lower-case the first letter of a term that starts a sentence.

    The letter is lowered only when the rest of the first word is lower
    case and, for a compound term, the second word does not start with a
    capital. "Mitochondria" becomes "mitochondria"; "DNA" and "New York"
    are left alone.
    """
    if len(text) < 2:
        return text
    words = _WORD_BREAK.split(text, maxsplit=2)
    tail = words[0][1:]
    if tail != tail.lower():
        return text
    if len(words) > 1 and words[1][:1].isupper():
        return text
    return text[0].lower() + text[1:]


def select_and_mask(
    tree: Element,
    candidate_terms: Optional[Sequence[Element]],
    choices: int,
    rng: Optional[random.Random] = None,
    config: Optional[MaskingConfig] = None,
) -> MaskedTermList:
    """
    Mask ``choices`` randomly selected terms and return the expected answer.

    Args:
        tree: The question being asked
        candidate_terms: Terms eligible for masking; None collects them from ``tree``
        choices: Number of terms to mask (clamped to the number available)
        rng: Random source (a fresh Random when omitted)
        config: Masking display settings

    Returns:
        Groups of CompoundTerms in document order. Masks are left set on the
        selected elements until clear_masks() is called.

    Example:
        >>> from cribtutor.markup import parse_document, render
        >>> root = parse_document("<p>The <em>heart</em> pumps.</p>")
        >>> expected = select_and_mask(root, None, 1, random.Random(0))
        >>> render(root)
        'The ____ pumps.'
    """
    rng = rng or random.Random()
    config = config or MaskingConfig()
    candidates = list(find_terms(tree) if candidate_terms is None else candidate_terms)

    order = list(range(len(candidates)))
    rng.shuffle(order)
    selected = sorted(order[:min(choices, len(candidates))])
    logger.debug(f"Masking terms {selected} of {len(candidates)}")

    expected = MaskedTermList()
    pending = MaskedTermGroup()

    def flush() -> MaskedTermGroup:
        if pending:
            expected.append(pending)
            return MaskedTermGroup()
        return pending

    for index in selected:
        term = candidates[index]
        text = term.plain_text().strip()
        if not text:
            logger.debug(f"Term {index} has no text; not masked")
            continue

        if term.strict_order:
            pending = flush()

        if term.start_of_sentence:
            text = lower_sentence_start(text)

        masks: List[str] = []
        for alternative in text.split(ALTERNATIVE_SEPARATOR):
            if not alternative.strip(" -"):
                continue
            compound = CompoundTerm.from_text(alternative)
            pending.add(compound)
            masks.append(compound.mask(config.placeholder))
        term.content_mask = ALTERNATIVE_SEPARATOR.join(masks)

        if term.strict_order:
            pending = flush()

    flush()
    return expected


def clear_masks(tree: Element) -> None:
    """Remove every content mask in ``tree``."""
    for element in tree.iter_all():
        element.content_mask = None
