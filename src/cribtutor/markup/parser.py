"""
Module: markup.parser

Purpose:
    Tolerant parser for the restricted HTML used in cribsheets. Turns
    markup text into a raw Element tree; whitespace tidying and the
    print flags are left to markup.annotate.

    The parser never raises on malformed input. Unexpected end of input
    closes every open element, a stray close tag or a repeated open tag
    is kept as literal text, and unrecognised tags are kept as literal
    text. Each recovery is logged at DEBUG.

Key Functions:
    - MarkupParser.parse_raw(): Parse a whole document
    - MarkupParser.parse_fragment(): Parse text as the content of one element

Key Classes:
    - MarkupParser: Recursive parser over a MarkupReader

Dependencies:
    - re (std)
    - core.models.elements: Element, ElementPart, Tag
    - .reader.MarkupReader
    - .config.MarkupConfig

Used By:
    - markup.pipeline: parse_document()
    - markup.massage: re-parses code text holding emphasis delimiters
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from cribtutor.core.models import Element, ElementPart, Tag

from .config import MarkupConfig
from .reader import MarkupReader

logger = logging.getLogger(__name__)


COMMENT_OPEN = Tag.COMMENT.open_marker
COMMENT_CLOSE = Tag.COMMENT.close_marker

# <name attrs>, </name>, <name attrs/>, <name attrs />
_TAG_PATTERN = re.compile(r"<\s*(/)?\s*([A-Za-z][A-Za-z0-9]*)(.*?)(/)?\s*>\Z", re.DOTALL)


class MarkupParser:
    """
    Recursive-descent parser producing a raw Element tree.

    Each call to ``_parse_element`` consumes input until the element's own
    close tag (or the end of input) and fills in the element's parts.

    Example:
        >>> root = MarkupParser().parse_raw("<p>Water is <em>H2O</em>.</p>")
        >>> paragraph = root.parts[0].sub
        >>> [part.text for part in paragraph.parts]
        ['Water is ', '.']
    """

    def __init__(self, config: Optional[MarkupConfig] = None):
        self.config = config or MarkupConfig()

    def parse_raw(self, text: str) -> Element:
        """Parse a whole document into a tree rooted at a Tag.NONE element."""
        root = Element(Tag.NONE)
        self._parse_element(MarkupReader(text), root)
        return root

    def parse_fragment(self, text: str, tag: Tag) -> List[ElementPart]:
        """Parse ``text`` as the content of an element tagged ``tag``."""
        holder = Element(tag)
        self._parse_element(MarkupReader(text), holder)
        return holder.parts

    # ─────────────────────────────────────────────────────────────────────────
    # Main loop
    # ─────────────────────────────────────────────────────────────────────────

    def _parse_element(self, reader: MarkupReader, element: Element) -> None:
        pending = ""

        while True:
            pending += reader.read_to("<")
            if reader.at_end:
                break

            raw_tag, complete = reader.read_through(">")
            if not complete:
                logger.debug(f"Unterminated tag at end of input: {raw_tag!r}")
                pending += raw_tag
                break

            if raw_tag.startswith(COMMENT_OPEN):
                comment = self._read_comment(reader, raw_tag, pending)
                self._swallow_after_open(reader, Tag.COMMENT)
                self._attach(reader, element, pending, self._new_comment(comment))
                pending = ""
                continue

            match = _TAG_PATTERN.match(raw_tag)
            if match is None:
                if raw_tag.startswith(("<!", "<?")):
                    logger.debug(f"Dropped declaration {raw_tag!r}")
                else:
                    pending += raw_tag
                continue

            closing, name, attributes, self_closing = match.groups()
            name = name.lower()

            if closing:
                if name == element.tag.value:
                    break
                logger.debug(f"Unexpected close tag {raw_tag!r} inside <{element.tag}> kept as text")
                pending += raw_tag
                continue

            if name in self.config.image_tags:
                description = self._image_text(attributes)
                if description:
                    pending += description
                else:
                    logger.debug(f"Dropped {raw_tag!r}: no descriptive attribute")
                continue

            tag = Tag.from_name(name)
            if tag is None:
                logger.debug(f"Unrecognised tag {raw_tag!r} kept as text")
                pending += raw_tag
                continue

            if self_closing or name in self.config.self_closing_tags:
                self._swallow_after_open(reader, tag)
                self._attach(reader, element, pending, Element(tag))
                pending = ""
                continue

            if tag == element.tag:
                logger.debug(f"Nested {raw_tag!r} inside <{element.tag}> kept as text")
                pending += raw_tag
                continue

            subelement = Element(tag)
            self._swallow_after_open(reader, tag)
            self._parse_element(reader, subelement)
            self._attach(reader, element, pending, subelement)
            pending = ""

        if pending.strip():
            element.parts.append(ElementPart(pending))

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _read_comment(self, reader: MarkupReader, raw_tag: str, pending: str) -> str:
        """Read the rest of a comment and return its text without markers."""
        body = raw_tag[len(COMMENT_OPEN):]
        while COMMENT_CLOSE not in body:
            chunk, complete = reader.read_through(">")
            if not complete:
                logger.debug("Unterminated comment at end of input")
                chunk += COMMENT_CLOSE
            body += chunk

        if pending and pending[-1].isspace():
            reader.skip_whitespace()

        return body[:body.rfind(COMMENT_CLOSE)]

    def _new_comment(self, text: str) -> Element:
        comment = Element(Tag.COMMENT)
        if text.strip():
            comment.append(text)
        return comment

    def _image_text(self, attributes: str) -> str:
        for attribute in self.config.image_text_attributes:
            pattern = rf"""(?<![\w-]){re.escape(attribute)}\s*=\s*(?:"([^"]*)"|'([^']*)')"""
            match = re.search(pattern, attributes, re.IGNORECASE)
            if match:
                return match.group(1) if match.group(1) is not None else match.group(2)
        return ""

    def _swallow_after_open(self, reader: MarkupReader, tag: Tag) -> None:
        if tag.value in self.config.swallow_after_open:
            reader.skip_newlines()

    def _attach(self, reader: MarkupReader, parent: Element, text: str, subelement: Element) -> None:
        parent.parts.append(ElementPart(text, subelement))
        if subelement.tag.value in self.config.swallow_after_close:
            reader.skip_newlines()
