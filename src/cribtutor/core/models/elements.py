"""
Module: elements

Purpose:
    Provides the Element / ElementPart tree that represents a parsed
    cribsheet. An Element is a tagged node holding an ordered list of
    ElementParts; each part is a run of literal text optionally followed
    by one owned subelement.

Key Functions:
    - Element.merge(other): Move another element's parts onto this one
    - Element.iter_all(): Iterate over this element and all descendants
    - Element.find_all(tag): Collect descendants with a given tag
    - Element.plain_text(): Concatenated text without comments
    - Tag.from_name(name): Look up a tag by its markup name

Key Classes:
    - Tag: The recognised markup vocabulary
    - Element: Mutable tree node (tag, parts, annotation flags, mask)
    - ElementPart: Text plus optional subelement

Dependencies:
    - dataclasses (std)
    - enum (std)
    - typing (std)

Used By:
    - markup.parser, markup.massage, markup.annotate, markup.renderer
    - quiz.masking, quiz.dialogue, quiz.controller

Ownership:
    The tree is a tree, not a DAG. Moving a subelement during massaging
    always detaches it from its old part before it is attached elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional


class Tag(str, Enum):
    """Markup tags recognised in a cribsheet."""
    NONE = ""          # Untagged node (also the document root)
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    P = "p"
    EM = "em"          # A candidate quiz term
    PRE = "pre"
    CODE = "code"
    UL = "ul"
    OL = "ol"
    LI = "li"
    BR = "br"
    HR = "hr"
    A = "a"
    COMMENT = "!--"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Optional[Tag]:
        """
        Look up a tag by name (case-insensitive).

        Returns:
            The Tag, or None if the name is not part of the vocabulary
        """
        return _TAGS_BY_NAME.get(name.lower())

    @property
    def open_marker(self) -> str:
        """Opening markup, e.g. ``<em>`` or ``<!--``."""
        if self is Tag.COMMENT:
            return "<!--"
        return f"<{self.value}>"

    @property
    def close_marker(self) -> str:
        """Closing markup, e.g. ``</em>`` or ``-->``."""
        if self is Tag.COMMENT:
            return "-->"
        return f"</{self.value}>"


_TAGS_BY_NAME: Dict[str, Tag] = {
    tag.value: tag for tag in Tag if tag not in (Tag.NONE, Tag.COMMENT)
}


@dataclass(eq=False)
class ElementPart:
    """
    One part of an element: literal text and/or a subelement.

    Attributes:
        text: Literal text that precedes the subelement (may be empty)
        sub: Owned subelement, if any
        line_before: Print a blank line before the subelement
        line_after: Print a blank line after the subelement

    Invariants:
        - A part is constructed with text, a subelement, or both
    """
    text: str = ""
    sub: Optional[Element] = None
    line_before: bool = False
    line_after: bool = False

    def __post_init__(self) -> None:
        if not self.text and self.sub is None:
            raise ValueError("ElementPart requires text or a subelement")


@dataclass(eq=False)
class Element:
    """
    Markup tree node (mutable).

    The parser creates elements, the massager moves them between parents,
    the annotator sets the flags and the masker sets/clears content_mask
    once per quiz question.

    Attributes:
        tag: Markup tag; reset to Tag.NONE only when merged away
        parts: Ordered element parts
        strict_order: Terms under this node must be answered in order
        end_of_sentence: Content ends with a full stop
        start_of_sentence: Node starts a sentence
        extra_new_line: Print a newline after this node
        content_mask: When set, printed in place of the node's content
        consumed: Set once merge() has moved this node's parts away

    Example:
        >>> term = Element(Tag.EM, [ElementPart("photosynthesis")])
        >>> para = Element(Tag.P, [ElementPart("Plants use ", term)])
        >>> para.plain_text()
        'Plants use photosynthesis'
    """
    tag: Tag = Tag.NONE
    parts: List[ElementPart] = field(default_factory=list)
    strict_order: bool = True
    end_of_sentence: bool = False
    start_of_sentence: bool = False
    extra_new_line: bool = False
    content_mask: Optional[str] = None
    consumed: bool = field(default=False, repr=False)

    # ─────────────────────────────────────────────────────────────────────────
    # Structure
    # ─────────────────────────────────────────────────────────────────────────

    def append(self, text: str = "", sub: Optional[Element] = None) -> ElementPart:
        """Append a new part and return it."""
        part = ElementPart(text, sub)
        self.parts.append(part)
        return part

    def merge(self, other: Element) -> None:
        """
        Move all of ``other``'s parts onto the end of this element.

        ``other`` is left empty with its tag reset to Tag.NONE.
        """
        if other is self:
            raise ValueError("Cannot merge an element into itself")
        self.parts.extend(other.parts)
        other.parts = []
        other.tag = Tag.NONE
        other.consumed = True

    def subelements(self) -> Iterator[Element]:
        """Yield direct subelements in document order."""
        for part in self.parts:
            if part.sub is not None:
                yield part.sub

    def iter_all(self) -> Iterator[Element]:
        """
        Iterate over this element and all descendants (pre-order).

        Yields:
            Element instances in document order
        """
        yield self
        for sub in self.subelements():
            yield from sub.iter_all()

    def find_all(self, tag: Tag) -> List[Element]:
        """Collect this element and descendants with the given tag."""
        return [element for element in self.iter_all() if element.tag == tag]

    # ─────────────────────────────────────────────────────────────────────────
    # Text
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_empty(self) -> bool:
        return not self.parts

    @property
    def comment_text(self) -> Optional[str]:
        """Stripped text of a comment element, None for other tags."""
        if self.tag != Tag.COMMENT:
            return None
        if not self.parts:
            return ""
        return self.parts[0].text.strip()

    def starts_with_comment(self) -> bool:
        """True when the first part is a comment with no text before it."""
        if not self.parts:
            return False
        first = self.parts[0]
        return (
            first.sub is not None
            and first.sub.tag == Tag.COMMENT
            and not first.text.strip()
        )

    def ends_with_comment(self) -> bool:
        """True when the last part holds a comment."""
        if not self.parts:
            return False
        last = self.parts[-1].sub
        return last is not None and last.tag == Tag.COMMENT

    def plain_text(self) -> str:
        """Concatenate the text of this element and its descendants, skipping comments."""
        if self.tag == Tag.COMMENT:
            return ""
        pieces: List[str] = []
        for part in self.parts:
            pieces.append(part.text)
            if part.sub is not None:
                pieces.append(part.sub.plain_text())
        return "".join(pieces)
