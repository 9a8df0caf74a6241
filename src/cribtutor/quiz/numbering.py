"""
Module: quiz.numbering

Purpose:
    Chapter and section numbers derived from a cribsheet's file name.

    The prefix before the first "_" in the name decides the scheme:

        3_cells.html     one digit   chapters 3, 4 ...   sections 3.1, 3.2 ...
        12_genes.html    two digits  quiz 1, chapters 1.2, 1.3 ...  sections 1.2.1 ...
        genes.html       none        headers printed unnumbered

    In the one-digit scheme chapters are <h1> and sections <h2>; otherwise
    chapters are <h2>, sections <h3> and <h1> is the quiz (tome) title.

Key Classes:
    - SectionNumber: Numbering state for one cribsheet
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from cribtutor.common.path_utils import extract_sheet_prefix

logger = logging.getLogger(__name__)


class SectionNumber:
    """
    Numbering state for one cribsheet.

    Example:
        >>> numbering = SectionNumber("3_cells.html")
        >>> numbering.chapter("Cells")
        '3 Cells'
        >>> numbering.section("Membranes")
        '3.1 Membranes'
    """

    def __init__(self, path: str | Path):
        self.chapter_number: Optional[int] = None
        self.section_number: Optional[int] = None
        self.prefix = self._make_prefix(str(path))

    def _make_prefix(self, path: str) -> str:
        prefix = extract_sheet_prefix(path)
        if not prefix:
            return ""
        digit = prefix[-1]
        if not digit.isdigit():
            logger.debug(f"Prefix {prefix!r} of {path} does not end in a digit; headers unnumbered")
            return ""
        self.chapter_number = int(digit) - 1
        self.section_number = 0
        return prefix[:-1]

    @property
    def numbered(self) -> bool:
        return self.chapter_number is not None

    @property
    def single_digit(self) -> bool:
        return self.numbered and not self.prefix

    @property
    def double_digit(self) -> bool:
        return self.numbered and bool(self.prefix)

    def quiz(self, header: str) -> str:
        """Quiz (tome) heading, prefixed by the leading digits."""
        if self.prefix:
            return f"{self.prefix} {header}"
        return header

    def chapter(self, header: str) -> str:
        """Next chapter heading; restarts section numbering."""
        if self.chapter_number is None:
            return f"\n{header}"
        self.chapter_number += 1
        self.section_number = 0
        return f"{self._lead()}{self.chapter_number} {header}"

    def section(self, header: str) -> str:
        """Next section heading within the current chapter."""
        if self.section_number is None:
            return f"\n{header}"
        self.section_number += 1
        return f"{self._lead()}{self.chapter_number}.{self.section_number} {header}"

    def repeat_chapter(self) -> None:
        """Restart section numbering for a repeated chapter."""
        if self.section_number is not None:
            self.section_number = 0

    def _lead(self) -> str:
        return f"{self.prefix}." if self.prefix else ""
