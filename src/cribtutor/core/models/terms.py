"""
Module: terms

Purpose:
    Provides the expected-answer structure built when terms are masked:
    CompoundTerm (one masked term, split into words), MaskedTermGroup
    (terms answerable in any order) and MaskedTermList (groups that must
    be answered in document order).

Key Classes:
    - CompoundTerm: key word plus ordered remaining words
    - MaskedTermGroup: entries kept sorted by key, duplicates in insertion order
    - MaskedTermList: ordered sequence of groups

Dependencies:
    - bisect (std)
    - dataclasses (std)
    - re (std)

Used By:
    - quiz.masking: builds the structure
    - quiz.matching: consumes it
"""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

# Hyphens opening or closing a word ("-ve", "pH-") belong to it
_WORD_PATTERN = re.compile(r"(?:(?<![^ ])-+)?[^ \-]+(?:-+(?![^ ]))?")

SPACE = " "
HYPHEN = "-"


@dataclass(frozen=True)
class CompoundTerm:
    """
    A masked term split into words (immutable).

    Attributes:
        key: First word of the term
        rest: Remaining words in order (empty for a single-word term)
        separators: One entry per word in ``rest``, either " " or "-"

    Invariants:
        - key is non-empty
        - len(separators) == len(rest)

    Example:
        >>> term = CompoundTerm.from_text("carbon-dioxide levels")
        >>> term.key, term.rest, term.separators
        ('carbon', ('dioxide', 'levels'), ('-', ' '))
        >>> term.mask("____")
        '____-____ ____'
    """
    key: str
    rest: Tuple[str, ...] = ()
    separators: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("CompoundTerm key must be non-empty")
        if len(self.separators) != len(self.rest):
            raise ValueError(
                f"CompoundTerm needs one separator per word: "
                f"{len(self.separators)} separators for {len(self.rest)} words"
            )

    @classmethod
    def from_text(cls, text: str) -> CompoundTerm:
        """
        Split term text into words at runs of spaces and hyphens between words.

        A separator run containing a hyphen is recorded as "-", any other
        run as " ". Hyphens at the start or end of a word are kept, so
        "-ve" and "--amend" are single words.

        Raises:
            ValueError: If the text contains no words
        """
        matches = list(_WORD_PATTERN.finditer(text))
        if not matches:
            raise ValueError(f"Term has no words: {text!r}")
        words = [m.group(0) for m in matches]
        separators = [
            HYPHEN if HYPHEN in text[prev.end():cur.start()] else SPACE
            for prev, cur in zip(matches, matches[1:])
        ]
        return cls(words[0], tuple(words[1:]), tuple(separators))

    @property
    def words(self) -> Tuple[str, ...]:
        return (self.key,) + self.rest

    @property
    def word_count(self) -> int:
        return 1 + len(self.rest)

    def mask(self, placeholder: str) -> str:
        """Placeholder per word, joined by the recorded separators."""
        return placeholder + "".join(sep + placeholder for sep in self.separators)

    def __str__(self) -> str:
        return self.key + "".join(sep + word for sep, word in zip(self.separators, self.rest))


class MaskedTermGroup:
    """
    Terms that may be answered in any order relative to each other.

    Entries are kept sorted by key; entries with equal keys stay in
    insertion order.
    """

    def __init__(self, terms: Iterable[CompoundTerm] = ()):
        self._entries: List[CompoundTerm] = []
        self._keys: List[str] = []
        for term in terms:
            self.add(term)

    def add(self, term: CompoundTerm) -> None:
        index = bisect.bisect_right(self._keys, term.key)
        self._keys.insert(index, term.key)
        self._entries.insert(index, term)

    @property
    def entries(self) -> Tuple[CompoundTerm, ...]:
        return tuple(self._entries)

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(self._keys)

    @property
    def word_count(self) -> int:
        return sum(term.word_count for term in self._entries)

    def __iter__(self) -> Iterator[CompoundTerm]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"MaskedTermGroup({[str(term) for term in self._entries]!r})"


@dataclass
class MaskedTermList:
    """
    Expected answer for one masked question.

    Groups are answered in order; terms inside a group in any order.

    Attributes:
        groups: Ordered term groups
    """
    groups: List[MaskedTermGroup] = field(default_factory=list)

    def append(self, group: MaskedTermGroup) -> None:
        if not group:
            raise ValueError("Cannot append an empty MaskedTermGroup")
        self.groups.append(group)

    @property
    def term_count(self) -> int:
        return sum(len(group) for group in self.groups)

    @property
    def word_count(self) -> int:
        return sum(group.word_count for group in self.groups)

    def __iter__(self) -> Iterator[MaskedTermGroup]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)
