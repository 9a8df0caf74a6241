"""
Module: quiz.controller

Purpose:
    Walk an annotated cribsheet and quiz the user on it.
    Tome → Chapters → Sections → Paragraphs

    Each chapter and section is offered for skipping. When every answer in
    a chapter or section was right, the number of blanks per question goes
    up by one and the user may repeat it, until the number of blanks
    exceeds the most terms any of its questions has.

    Comments steer question order when quizzing (choices > 0):
        <!-- Shuffle On --> ... <!-- Shuffle Off -->   shuffle the paragraphs between
        <!-- Shuffle List --> at the head of an <ol>    shuffle its items

Key Functions:
    - shuffle_paragraphs(): Apply Shuffle On/Off markers to a range of parts
    - shuffle_ordered_lists(): Apply Shuffle List markers in a paragraph

Key Classes:
    - QuizController: Runs quizzes, remembering the tome across cribsheets
    - QuizResult: Outcome of one cribsheet

Dependencies:
    - quiz.dialogue: Dialogue
    - quiz.numbering: SectionNumber
    - quiz.masking: find_terms

Used By:
    - cli
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from cribtutor.core.models import Element, ElementPart, Tag

from .config import QuizConfig
from .dialogue import Dialogue
from .masking import find_terms
from .numbering import SectionNumber

logger = logging.getLogger(__name__)


SHUFFLE_ON = "Shuffle On"
SHUFFLE_OFF = "Shuffle Off"
SHUFFLE_LIST = "Shuffle List"


@dataclass(frozen=True)
class QuizResult:
    """
    Outcome of quizzing one cribsheet.

    Attributes:
        all_responses_good: No question was answered wrongly
        skipped: The user skipped the whole cribsheet at the tome prompt
    """
    all_responses_good: bool
    skipped: bool = False


class QuizController:
    """
    Runs the quiz for each cribsheet of a session.

    The tome heading is remembered between cribsheets so that a run of
    cribsheets under the same <h1> announces it once.
    """

    def __init__(self, dialogue: Dialogue, config: Optional[QuizConfig] = None, rng: Optional[random.Random] = None):
        self.dialogue = dialogue
        self.config = config or QuizConfig()
        self._rng = rng or random.Random(self.config.seed)
        self.tome_header = ""

    def run(self, numbering: SectionNumber, document: Element) -> QuizResult:
        """Quiz the user on one annotated cribsheet."""
        for sub in document.subelements():
            if sub.tag == Tag.H2:
                break
            if sub.tag != Tag.H1:
                continue

            header = sub.plain_text()
            if header == self.tome_header:
                continue
            self.tome_header = header
            if numbering.single_digit:
                continue
            if numbering.double_digit:
                self.dialogue.write(numbering.quiz(header) + "\n\n")
            elif self.dialogue.skip_yes_no(header):
                logger.info(f"Skipped {header!r}")
                return QuizResult(all_responses_good=True, skipped=True)

        good = self._chapters(numbering, document.parts, self.config.choices)
        return QuizResult(all_responses_good=good)

    # ─────────────────────────────────────────────────────────────────────────
    # Levels
    # ─────────────────────────────────────────────────────────────────────────

    def _chapters(self, numbering: SectionNumber, parts: List[ElementPart], choices: int) -> bool:
        tag = Tag.H1 if numbering.single_digit else Tag.H2
        markers = find_headers(parts, 0, len(parts), tag)

        good, _ = self._paragraphs(parts, 0, markers[0], choices, 0)

        for start, end in zip(markers, markers[1:]):
            title = parts[start].sub.plain_text()
            header = numbering.chapter(title)
            if numbering.single_digit:
                self.tome_header = title
            if self.dialogue.skip_yes_no(header):
                continue

            term_count = 0
            chapter_choices = choices
            while True:
                chapter_good, term_count = self._sections(
                    numbering, parts, start + 1, end, chapter_choices, term_count
                )
                if chapter_good:
                    chapter_choices += 1
                    if chapter_choices > term_count:
                        break
                numbering.repeat_chapter()
                if choices == 0 or not self.dialogue.repeat_yes_no(header):
                    break

            good = good and chapter_good

        return good

    def _sections(
        self,
        numbering: SectionNumber,
        parts: List[ElementPart],
        first: int,
        last: int,
        choices: int,
        max_terms: int,
    ) -> Tuple[bool, int]:
        tag = Tag.H2 if numbering.single_digit else Tag.H3
        markers = find_headers(parts, first, last, tag)

        good, max_terms = self._paragraphs(parts, first, markers[0], choices, max_terms)

        for start, end in zip(markers, markers[1:]):
            header = numbering.section(parts[start].sub.plain_text())
            if self.dialogue.skip_yes_no(header):
                continue

            term_count = 0
            section_choices = choices
            while True:
                section_good, term_count = self._paragraphs(
                    parts, start + 1, end, section_choices, term_count
                )
                if section_good:
                    section_choices += 1
                    if section_choices > term_count:
                        break
                if choices == 0 or not self.dialogue.repeat_yes_no(header):
                    break

            max_terms = max(max_terms, term_count)
            good = good and section_good

        return good, max_terms

    def _paragraphs(
        self,
        parts: List[ElementPart],
        first: int,
        last: int,
        choices: int,
        max_terms: int,
    ) -> Tuple[bool, int]:
        good = True
        if choices > 0:
            shuffle_paragraphs(parts, first, last, self._rng)

        for index in range(first, last):
            paragraph = parts[index].sub
            if paragraph is None or paragraph.tag != Tag.P:
                continue
            if choices > 0:
                shuffle_ordered_lists(paragraph, self._rng)

            terms = find_terms(paragraph)
            max_terms = max(max_terms, len(terms))
            if not self.dialogue.fill_in_the_blanks(paragraph, terms, choices):
                good = False

        return good, max_terms


# ─────────────────────────────────────────────────────────────────────────────
# Structure helpers
# ─────────────────────────────────────────────────────────────────────────────


def find_headers(parts: List[ElementPart], first: int, last: int, tag: Tag) -> List[int]:
    """
    Indices of parts in [first, last) holding ``tag``, followed by ``last``.

    The trailing ``last`` makes consecutive pairs delimit each header's body.
    """
    markers = [
        index for index in range(first, last)
        if parts[index].sub is not None and parts[index].sub.tag == tag
    ]
    markers.append(last)
    return markers


def shuffle_paragraphs(parts: List[ElementPart], first: int, last: int, rng: random.Random) -> None:
    """
    Shuffle the parts between each Shuffle On / Shuffle Off pair in [first, last).

    A Shuffle On without a matching Shuffle Off shuffles to ``last``.
    """
    begin: Optional[int] = None
    for index in range(first, last):
        comment = parts[index].sub
        if comment is None or comment.tag != Tag.COMMENT:
            continue
        text = comment.comment_text
        if text == SHUFFLE_ON:
            begin = index
        elif text == SHUFFLE_OFF:
            if begin is not None:
                _shuffle_range(parts, begin + 1, index, rng)
            begin = None

    if begin is not None:
        _shuffle_range(parts, begin + 1, last, rng)


def shuffle_ordered_lists(paragraph: Element, rng: random.Random) -> None:
    """Shuffle the items of each <ol> in ``paragraph`` that starts with Shuffle List."""
    for sub in paragraph.subelements():
        if sub.tag != Tag.OL or not sub.parts:
            continue
        marker = sub.parts[0].sub
        if marker is None or marker.comment_text != SHUFFLE_LIST:
            continue
        _shuffle_range(sub.parts, 1, len(sub.parts), rng)


def _shuffle_range(parts: List[ElementPart], begin: int, end: int, rng: random.Random) -> None:
    segment = parts[begin:end]
    rng.shuffle(segment)
    parts[begin:end] = segment
    logger.debug(f"Shuffled {len(segment)} parts")
