"""
Module: markup.massage

Purpose:
    Second pass over the raw tree, before annotation. Rewrites structures
    that Markdown converters produce but the quiz expects in another form.

    - A list or pre block sitting directly in a block container (outside
      any paragraph) is wrapped in a new paragraph, which is then merged
      with the paragraphs either side so the list is asked as part of the
      surrounding question. A neighbour that starts (following) or ends
      (preceding) with a comment is left alone; the comment separates
      questions.
    - A "Shuffle List" comment at the start of an ordered list's first
      item is hoisted to be the list's first part.
    - A code or pre element holding only plain text with _term_ or *term*
      spans is re-parsed so the spans become emphasis (quizzable) elements,
      keeping the delimiters for display.

Key Functions:
    - massage_tree(): Massage a raw tree in place

Key Classes:
    - TreeMassager: Holds the parser used to re-parse code text

Dependencies:
    - core.models.elements
    - .parser.MarkupParser

Used By:
    - markup.pipeline: parse_document()
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from cribtutor.core.models import Element, ElementPart, Tag

from .parser import MarkupParser

logger = logging.getLogger(__name__)


SHUFFLE_LIST_MARKER = "Shuffle List"

WRAPPED_TAGS = (Tag.UL, Tag.OL, Tag.PRE)

# _term_ or *term*, not inside identifiers such as snake_case_names
_EMPHASIS_SPAN = re.compile(r"(?<![\w*])([_*])([^\s_*](?:[^_*\n]*[^\s_*])?)\1(?![\w*])")


class TreeMassager:
    """
    Rewrites a raw tree in place.

    Every element is visited exactly once. Wrapping happens for a container
    before its children are visited, so a synthesized paragraph and the
    paragraphs merged into it are descended into once, as paragraphs.
    """

    def __init__(self, parser: Optional[MarkupParser] = None):
        self._parser = parser or MarkupParser()

    def massage(self, root: Element) -> Element:
        self._visit(root, inside_paragraph=False)
        return root

    # ─────────────────────────────────────────────────────────────────────────
    # Traversal
    # ─────────────────────────────────────────────────────────────────────────

    def _visit(self, element: Element, inside_paragraph: bool) -> None:
        if element.tag == Tag.OL:
            hoist_shuffle_marker(element)
        if element.tag in (Tag.CODE, Tag.PRE):
            self._fold_code_emphasis(element)

        if not inside_paragraph and element.tag != Tag.P:
            self._wrap_blocks(element)

        inside = inside_paragraph or element.tag == Tag.P
        for sub in element.subelements():
            self._visit(sub, inside)

    def _wrap_blocks(self, container: Element) -> None:
        index = 0
        while index < len(container.parts):
            block = container.parts[index].sub
            if block is None or block.tag not in WRAPPED_TAGS:
                index += 1
                continue

            paragraph = Element(Tag.P, [ElementPart(sub=block)])
            container.parts[index].sub = paragraph
            logger.debug(f"Wrapped <{block.tag}> in a new paragraph inside <{container.tag}>")

            self._merge_following(container, index, paragraph, block.tag)
            index = self._merge_preceding(container, index, paragraph, block.tag)
            index += 1

    def _merge_following(self, container: Element, index: int, paragraph: Element, block_tag: Tag) -> None:
        if index + 1 >= len(container.parts):
            return
        after = container.parts[index + 1].sub
        if after is None or after.tag != Tag.P or after.is_empty:
            return
        if after.starts_with_comment():
            return

        if block_tag == Tag.UL:
            after.parts[0].text = " " + after.parts[0].text
        paragraph.merge(after)
        remove_part(container, index + 1)

    def _merge_preceding(self, container: Element, index: int, paragraph: Element, block_tag: Tag) -> int:
        if index == 0:
            return index
        before = container.parts[index - 1].sub
        if before is None or before.tag != Tag.P or before.is_empty:
            return index
        if before.ends_with_comment():
            return index

        # <pre> and <ol> start on a new line; only <ul> runs on from the text
        if block_tag == Tag.UL:
            paragraph.parts[0].text += " "
        before.merge(paragraph)
        remove_part(container, index)
        return index - 1

    # ─────────────────────────────────────────────────────────────────────────
    # Code emphasis
    # ─────────────────────────────────────────────────────────────────────────

    def _fold_code_emphasis(self, element: Element) -> None:
        if len(element.parts) != 1 or element.parts[0].sub is not None:
            return
        text = element.parts[0].text
        if not _EMPHASIS_SPAN.search(text):
            return

        marked = _EMPHASIS_SPAN.sub(
            lambda m: f"{m.group(1)}{Tag.EM.open_marker}{m.group(2)}{Tag.EM.close_marker}{m.group(1)}",
            text,
        )
        element.parts = self._parser.parse_fragment(marked, element.tag)
        logger.debug(f"Folded emphasis spans in <{element.tag}>: {marked!r}")


def hoist_shuffle_marker(ordered_list: Element) -> bool:
    """
    Move a leading "Shuffle List" comment from the first item to the list.

    Returns:
        True if the comment was moved
    """
    first_item = next(ordered_list.subelements(), None)
    if first_item is None or first_item.tag != Tag.LI:
        return False
    if not first_item.starts_with_comment():
        return False
    comment = first_item.parts[0].sub
    if comment.comment_text != SHUFFLE_LIST_MARKER:
        return False

    remove_part(first_item, 0)
    ordered_list.parts.insert(0, ElementPart(sub=comment))
    logger.debug("Hoisted 'Shuffle List' marker to the ordered list")
    return True


def remove_part(container: Element, index: int) -> ElementPart:
    """
    Remove a part, folding any non-blank text it held into the next part.

    Returns:
        The removed part
    """
    removed = container.parts.pop(index)
    if removed.text.strip():
        if index < len(container.parts):
            following = container.parts[index]
            following.text = removed.text + following.text
        else:
            container.parts.insert(index, ElementPart(removed.text))
    return removed


def massage_tree(root: Element, parser: Optional[MarkupParser] = None) -> Element:
    """Massage a raw tree in place and return it."""
    return TreeMassager(parser).massage(root)
