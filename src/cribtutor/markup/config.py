"""
Module: markup.config

Purpose:
    Configuration dataclasses for the markup pipeline.
    Immutable configuration with validation on construction.

Key Classes:
    - MarkupConfig: Parser / annotator settings
    - RenderConfig: Renderer settings

Dependencies:
    - dataclasses (std)

Used By:
    - markup.parser, markup.annotate, markup.renderer, markup.pipeline
    - cli: builds RenderConfig from --raw
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class MarkupConfig:
    """
    Settings for parsing and annotating cribsheets (immutable).

    Attributes:
        self_closing_tags: Tags that never have content (no close tag expected)
        image_tags: Self-describing tags replaced by their description text
        image_text_attributes: Attributes searched (in order) for that text
        swallow_after_open: Tags whose opening discards following newlines
        swallow_after_close: Tags whose closing discards following newlines
        conjunctions: Text that pairs two adjacent terms into an unordered pair
        linking_characters: Single characters that carry sentence start across terms
        code_indent: Indent applied to each line of code nested in a pre block

    Invariants:
        - code_indent contains only whitespace
        - linking_characters are all single, non-alphanumeric characters

    Example:
        >>> config = MarkupConfig()
        >>> "br" in config.self_closing_tags
        True
    """

    self_closing_tags: FrozenSet[str] = frozenset({"br", "hr"})
    image_tags: FrozenSet[str] = frozenset({"img", "embed"})
    image_text_attributes: Tuple[str, ...] = ("alt", "title")
    swallow_after_open: FrozenSet[str] = frozenset({"pre", "br", "!--"})
    swallow_after_close: FrozenSet[str] = frozenset({"pre", "ol"})
    conjunctions: Tuple[str, ...] = ("/", " and ", " or ")
    linking_characters: str = "/-"
    code_indent: str = "    "

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.code_indent.strip():
            raise ValueError(f"code_indent must be whitespace: {self.code_indent!r}")
        for char in self.linking_characters:
            if char.isalnum():
                raise ValueError(f"linking character must not be alphanumeric: {char!r}")
        if not self.image_text_attributes and self.image_tags:
            raise ValueError("image_tags need at least one image_text_attribute")


@dataclass(frozen=True)
class RenderConfig:
    """
    Settings for printing a (possibly masked) tree.

    Attributes:
        verbose: Debug view showing tags, comments and nesting
    """

    verbose: bool = False
