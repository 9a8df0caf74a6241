"""
Module: markup.annotate

Purpose:
    Single recursive pass over a massaged tree that tidies literal text
    and sets the flags used by the masker and the renderer.

    Per element:
        strict_order       inherited, false inside <ul> and for both terms
                           of a pair joined by "/", " and " or " or "
        start_of_sentence  from the tidied text preceding the element
        end_of_sentence    from the element's last content
        extra_new_line     <li> in <ol>, <br>, empty <p>
    Per part:
        line_before        <pre>/<ol>, or any block outside a paragraph
        line_after         <pre>/<ol>

    Text outside <pre> has newlines and tabs turned into spaces, runs of
    spaces collapsed and one leading/trailing space trimmed at element
    boundaries. Text inside <pre> keeps its line breaks (one trailing
    newline is dropped) and <code> nested in <pre> is indented. Entities
    are unescaped last.

Key Functions:
    - annotate_tree(): Annotate a tree in place

Key Classes:
    - TreeAnnotator: Annotation pass with its config and entity table

Dependencies:
    - core.models.elements
    - .config.MarkupConfig
    - .escapes.EntityTable

Used By:
    - markup.pipeline: parse_document()
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from cribtutor.core.models import Element, ElementPart, Tag

from .config import MarkupConfig
from .escapes import EntityTable

logger = logging.getLogger(__name__)


_SPACE_RUN = re.compile(r" {2,}")


class TreeAnnotator:
    """
    Annotates a massaged tree in place.

    Example:
        >>> from cribtutor.markup import parse_document
        >>> root = parse_document("<p>The <em>cell</em> divides.</p>")
        >>> term = root.find_all(Tag.EM)[0]
        >>> term.start_of_sentence, term.strict_order
        (False, True)
    """

    def __init__(self, config: Optional[MarkupConfig] = None, entities: Optional[EntityTable] = None):
        self.config = config or MarkupConfig()
        self.entities = entities or EntityTable()

    def annotate(self, root: Element) -> Element:
        self._annotate(root, html_block=True, in_pre=root.tag == Tag.PRE)
        return root

    # ─────────────────────────────────────────────────────────────────────────
    # Traversal
    # ─────────────────────────────────────────────────────────────────────────

    def _annotate(self, element: Element, html_block: bool, in_pre: bool) -> None:
        kept: List[ElementPart] = []

        for part in element.parts:
            at_start = not kept
            sub = part.sub

            if sub is None:
                text = self.tidy(part.text, element.tag, at_start, True, in_pre)
                if not text:
                    continue
                part.text = text
                element.end_of_sentence = ends_sentence(text)
                kept.append(part)
                continue

            text = self.tidy(part.text, element.tag, at_start, False, in_pre)

            sub.strict_order = element.strict_order and sub.tag != Tag.UL
            sub.start_of_sentence = self._starts_sentence(element, kept, text)
            sub.extra_new_line = (
                (element.tag == Tag.OL and sub.tag == Tag.LI) or sub.tag == Tag.BR
            )

            if sub.tag == Tag.COMMENT:
                self._tidy_comment(sub)
            else:
                self._annotate(
                    sub,
                    html_block=html_block and element.tag != Tag.P,
                    in_pre=in_pre or sub.tag == Tag.PRE,
                )

            part.text = text
            part.line_before = self._line_before(element, sub, html_block)
            part.line_after = sub.tag in (Tag.PRE, Tag.OL)
            element.end_of_sentence = sub.end_of_sentence
            kept.append(part)

            if sub.tag != Tag.COMMENT:
                self._pair_terms(kept)

        element.parts = kept

    def _tidy_comment(self, comment: Element) -> None:
        tidied: List[ElementPart] = []
        for part in comment.parts:
            part.text = self.tidy(part.text, Tag.COMMENT, True, True, False)
            if part.text:
                tidied.append(part)
        comment.parts = tidied

    # ─────────────────────────────────────────────────────────────────────────
    # Text
    # ─────────────────────────────────────────────────────────────────────────

    def tidy(self, text: str, tag: Tag, at_start: bool, at_end: bool, in_pre: bool = False) -> str:
        """
        Normalise the whitespace of one run of literal text and unescape it.

        Args:
            text: Raw text
            tag: Tag of the element holding the text
            at_start: Text is the first content of its element
            at_end: Text is the last content of its element
            in_pre: Text lies inside a <pre> block
        """
        if not text:
            return text

        if not in_pre:
            text = text.replace("\n", " ").replace("\t", " ")
            text = _SPACE_RUN.sub(" ", text)
            if at_end and text.endswith(" "):
                text = text[:-1]
            if (at_start or tag in (Tag.OL, Tag.NONE)) and text.startswith(" "):
                text = text[1:]
        else:
            if text.endswith("\n"):
                text = text[:-1]
            if tag == Tag.CODE:
                indent = self.config.code_indent
                text = (indent if at_start else "") + text.replace("\n", "\n" + indent)

        return self.entities.unescape(text)

    # ─────────────────────────────────────────────────────────────────────────
    # Flags
    # ─────────────────────────────────────────────────────────────────────────

    def _starts_sentence(self, parent: Element, kept: List[ElementPart], text: str) -> bool:
        if not text:
            if parent.tag == Tag.P:
                return True
            if parent.tag in (Tag.UL, Tag.OL):
                return False
            return parent.start_of_sentence

        if len(text) == 1:
            if text not in self.config.linking_characters:
                return False
            previous = next((p.sub for p in reversed(kept) if p.sub is not None), None)
            return previous.start_of_sentence if previous is not None else False

        return text[-2] == "."

    def _line_before(self, parent: Element, sub: Element, html_block: bool) -> bool:
        if sub.tag == Tag.P and sub.is_empty:
            sub.extra_new_line = True
            return False
        if sub.tag in (Tag.PRE, Tag.OL):
            return True
        if sub.tag in (Tag.COMMENT, Tag.HR):
            return False
        return html_block and parent.tag != Tag.P

    def _pair_terms(self, kept: List[ElementPart]) -> None:
        """Make two terms joined by a conjunction an unordered pair."""
        if len(kept) < 2:
            return
        lhs, rhs = kept[-2], kept[-1]
        if rhs.text not in self.config.conjunctions:
            return
        if lhs.sub is None or rhs.sub is None:
            return
        lhs.sub.strict_order = False
        rhs.sub.strict_order = False
        logger.debug(f"Paired terms joined by {rhs.text!r}")


def ends_sentence(text: str) -> bool:
    """True for text ending in a full stop that is not part of an ellipsis."""
    return text.endswith(".") and not text.endswith("...")


def annotate_tree(root: Element, config: Optional[MarkupConfig] = None) -> Element:
    """Annotate a massaged tree in place and return it."""
    return TreeAnnotator(config).annotate(root)
