"""
Module: markup.reader

Purpose:
    Character reader over cribsheet text. Gives the parser the small set
    of read operations it needs, each tolerant of running out of input.

Key Classes:
    - MarkupReader: Position-tracking reader over a string
"""

from __future__ import annotations

from typing import Callable, Tuple


class MarkupReader:
    """
    Sequential reader over markup text.

    Example:
        >>> reader = MarkupReader("a <b> c")
        >>> reader.read_to("<")
        'a '
        >>> reader.read_through(">")
        ('<b>', True)
    """

    def __init__(self, text: str):
        self._text = text
        self._pos = 0

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    @property
    def position(self) -> int:
        return self._pos

    def peek(self) -> str:
        """Next character, or "" at the end of input."""
        return self._text[self._pos:self._pos + 1]

    def read_to(self, char: str) -> str:
        """Read up to (not including) the next ``char``, or to the end."""
        end = self._text.find(char, self._pos)
        if end == -1:
            end = len(self._text)
        chunk = self._text[self._pos:end]
        self._pos = end
        return chunk

    def read_through(self, char: str) -> Tuple[str, bool]:
        """
        Read up to and including the next ``char``.

        Returns:
            (text read, whether ``char`` was found before the end of input)
        """
        end = self._text.find(char, self._pos)
        if end == -1:
            chunk = self._text[self._pos:]
            self._pos = len(self._text)
            return chunk, False
        chunk = self._text[self._pos:end + 1]
        self._pos = end + 1
        return chunk, True

    def skip_while(self, predicate: Callable[[str], bool]) -> int:
        """Discard characters while ``predicate`` holds; return how many."""
        start = self._pos
        while not self.at_end and predicate(self._text[self._pos]):
            self._pos += 1
        return self._pos - start

    def skip_newlines(self) -> int:
        return self.skip_while(lambda char: char == "\n")

    def skip_whitespace(self) -> int:
        return self.skip_while(str.isspace)
