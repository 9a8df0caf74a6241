"""
Module: quiz.matching.tokenizer

Purpose:
    Split a response line into answer words.

    Words are separated by spaces. A word that looks like a real word
    (starts alphanumeric, at least three characters, ends alphanumeric or
    with ".", "," or ";" after an alphanumeric) is also split at "-" and
    "/", so "carbon-dioxide" answers a term masked as "____-____" and
    "____ ____" alike. One trailing ".", "," or ";" is dropped from each
    word.

Key Functions:
    - split_into_words(): Response line to list of words
"""

from __future__ import annotations

from typing import List, Optional

TRAILING_PUNCTUATION = ".,;"
INNER_SEPARATORS = " -/"


def split_into_words(line: str) -> List[str]:
    """
    Tokenise a response.

    Example:
        >>> split_into_words("Carbon-dioxide, water/oxygen. -ve")
        ['Carbon', 'dioxide', 'water', 'oxygen', '-ve']
    """
    words: List[str] = []
    position = 0
    length = len(line)

    while position < length:
        begin = _skip_spaces(line, position)
        if begin is None:
            break

        end: Optional[int] = line.find(" ", begin)
        if end == -1:
            end = None
        if _looks_like_word(line, begin, end):
            end = _find_any(line, INNER_SEPARATORS, begin)

        word = _drop_trailing_punctuation(line[begin:end])
        if word:
            words.append(word)

        if end is None:
            break
        position = end + 1

    return words


def _skip_spaces(line: str, position: int) -> Optional[int]:
    while position < len(line) and line[position] == " ":
        position += 1
    return position if position < len(line) else None


def _find_any(line: str, chars: str, start: int) -> Optional[int]:
    for index in range(start, len(line)):
        if line[index] in chars:
            return index
    return None


def _looks_like_word(line: str, begin: int, end: Optional[int]) -> bool:
    if not line[begin].isalnum():
        return False
    last = (end if end is not None else len(line)) - 1
    if last - begin < 2:
        return False
    final = line[last]
    if final.isalnum():
        return True
    if final in TRAILING_PUNCTUATION:
        return line[last - 1].isalnum()
    return False


def _drop_trailing_punctuation(word: str) -> str:
    if word and word[-1] in TRAILING_PUNCTUATION:
        return word[:-1]
    return word
