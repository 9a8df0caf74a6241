"""
Module: markup.escapes

Purpose:
    Replace HTML entity escapes with the characters they stand for.

    The lookup pattern is built lazily on first use and then reused.
    Entities are matched longest first in a single left-to-right pass,
    so the "&" produced by "&amp;" never combines with following text
    ("&amp;lt;" becomes "&lt;", not "<").

Key Classes:
    - EntityTable: Entity map plus its compiled pattern
"""

from __future__ import annotations

import re
from typing import Dict, Mapping, Optional, Pattern

DEFAULT_ENTITIES: Dict[str, str] = {
    "&lt;": "<",
    "&gt;": ">",
    "&amp;": "&",
    "&apos;": "'",
    "&quot;": '"',
}


class EntityTable:
    """
    Entity unescaping table.

    Example:
        >>> EntityTable().unescape("a &lt; b &amp;&amp; c")
        'a < b && c'
    """

    def __init__(self, entities: Optional[Mapping[str, str]] = None):
        self._entities: Dict[str, str] = dict(DEFAULT_ENTITIES if entities is None else entities)
        self._pattern: Optional[Pattern[str]] = None

    @property
    def pattern(self) -> Pattern[str]:
        if self._pattern is None:
            ordered = sorted(self._entities, key=len, reverse=True)
            self._pattern = re.compile("|".join(re.escape(entity) for entity in ordered))
        return self._pattern

    def unescape(self, text: str) -> str:
        if not self._entities or "&" not in text or ";" not in text:
            return text
        return self.pattern.sub(lambda match: self._entities[match.group(0)], text)

    def __contains__(self, entity: str) -> bool:
        return entity in self._entities

    def __len__(self) -> int:
        return len(self._entities)
