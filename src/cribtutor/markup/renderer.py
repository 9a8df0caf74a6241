"""
Module: markup.renderer

Purpose:
    Print a (possibly masked) tree as quiz text. Only blank lines and list
    indents are inserted; inline formatting is not reproduced. An element
    with a content mask prints the mask in place of its content.

    The verbose view (--raw) also prints every tag, indented by depth,
    with comments included; it exists for debugging cribsheets.

Key Functions:
    - render(): Render an element to a string

Key Classes:
    - TreeRenderer: Renderer bound to a RenderConfig
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from cribtutor.core.models import Element, ElementPart, Tag

from .config import RenderConfig

BLANK_LINE = "\n\n"
LIST_ITEM_INDENT = "  "


class TreeRenderer:
    """Renders Element trees as plain quiz text."""

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def render(self, element: Element) -> str:
        out: List[str] = []
        self._render(element, out, "")
        return "".join(out)

    def _render(self, element: Element, out: List[str], indent: str) -> None:
        verbose = self.config.verbose
        if verbose:
            out.append(f"{indent}{element.tag.open_marker}\n")
            indent += "  "

        if element.content_mask is not None:
            out.append(indent + element.content_mask)
        else:
            self._render_parts(element, out, indent)

        if verbose:
            out.append(f"\n{indent[2:]}{element.tag.close_marker}\n")

    def _render_parts(self, element: Element, out: List[str], indent: str) -> None:
        line_between = False
        line_after = False

        for index, part in enumerate(element.parts):
            if part.text:
                if line_after or (line_between and element.tag == Tag.NONE):
                    out.append(BLANK_LINE)
                out.append(indent + part.text)
                line_after = False
                line_between = True

            sub = part.sub
            if sub is None:
                continue
            if sub.tag == Tag.COMMENT and not self.config.verbose:
                continue

            if line_after or (line_between and part.line_before):
                out.append(BLANK_LINE)
            ordered_item = element.tag == Tag.OL and sub.tag == Tag.LI
            if ordered_item and not part.text:
                out.append(LIST_ITEM_INDENT)

            self._render(sub, out, indent)

            if sub.extra_new_line and _has_visible_part(element.parts[index + 1:]):
                out.append("\n")
                if ordered_item and sub.end_of_sentence:
                    out.append("\n")

            line_after = part.line_after
            line_between = True


def _has_visible_part(parts: Sequence[ElementPart]) -> bool:
    """True if any part has text or a non-comment subelement."""
    return any(part.sub is None or part.sub.tag != Tag.COMMENT for part in parts)


def render(element: Element, config: Optional[RenderConfig] = None) -> str:
    """Render ``element`` (and everything under it) as quiz text."""
    return TreeRenderer(config).render(element)
