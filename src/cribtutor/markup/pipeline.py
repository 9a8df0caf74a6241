"""
Module: markup.pipeline

Purpose:
    Run the three markup passes in order.
    Parse → Massage → Annotate

Key Functions:
    - parse_document(): Text or text stream to annotated tree
    - parse_file(): Cribsheet path to annotated tree

Dependencies:
    - markup.parser, markup.massage, markup.annotate
    - common.path_utils: CribsheetNotFoundError

Used By:
    - cli: one call per cribsheet
    - cribtutor: package-level API
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, TextIO, Union

from cribtutor.common.path_utils import CribsheetNotFoundError
from cribtutor.core.models import Element

from .annotate import TreeAnnotator
from .config import MarkupConfig
from .massage import TreeMassager
from .parser import MarkupParser

logger = logging.getLogger(__name__)


def parse_document(source: Union[str, TextIO], config: Optional[MarkupConfig] = None) -> Element:
    """
    Parse cribsheet markup into an annotated tree.

    Args:
        source: Markup text, or an open text stream to read it from
        config: Markup settings (defaults to MarkupConfig())

    Returns:
        Root element (Tag.NONE) of the annotated tree

    Example:
        >>> root = parse_document("<h1>Cells</h1><p>A <em>nucleus</em>.</p>")
        >>> [sub.tag for sub in root.subelements()]
        [<Tag.H1: 'h1'>, <Tag.P: 'p'>]
    """
    text = source if isinstance(source, str) else source.read()
    config = config or MarkupConfig()

    parser = MarkupParser(config)
    root = parser.parse_raw(text)
    TreeMassager(parser).massage(root)
    TreeAnnotator(config).annotate(root)
    return root


def parse_file(path: Union[str, Path], config: Optional[MarkupConfig] = None) -> Element:
    """
    Read and parse one cribsheet.

    Raises:
        CribsheetNotFoundError: If the file cannot be read
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8", errors="replace") as stream:
            root = parse_document(stream, config)
    except OSError as e:
        raise CribsheetNotFoundError(f"Not found: '{path}'") from e

    logger.debug(f"Parsed {path.name}: {len(root.parts)} top-level parts")
    return root
