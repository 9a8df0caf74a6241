"""
Markup Package

Parses cribsheet markup into an annotated Element tree and prints trees
back as quiz text.
"""

from .annotate import TreeAnnotator, annotate_tree
from .config import MarkupConfig, RenderConfig
from .escapes import EntityTable
from .massage import TreeMassager, massage_tree
from .parser import MarkupParser
from .pipeline import parse_document, parse_file
from .renderer import TreeRenderer, render

__all__ = [
    "MarkupConfig",
    "RenderConfig",
    "MarkupParser",
    "TreeMassager",
    "TreeAnnotator",
    "TreeRenderer",
    "EntityTable",
    "parse_document",
    "parse_file",
    "massage_tree",
    "annotate_tree",
    "render",
]
