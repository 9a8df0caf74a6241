"""Path and filename utilities.

Provides shared functions for reading the cribsheet list, choosing where
a run starts, and extracting the numbering prefix from cribsheet names.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List

logger = logging.getLogger(__name__)


DEFAULT_CRIBSHEET_LIST = "cribsheets.txt"


class CribsheetNotFoundError(Exception):
    """A cribsheet named in the list could not be read."""
    pass


class CribsheetListError(Exception):
    """The cribsheet list itself could not be read."""
    pass


class SkipToNotFoundError(Exception):
    """No cribsheet in the list matches the requested skip-to name."""
    pass


def extract_sheet_prefix(filename: str | Path) -> str:
    """Extract the numbering prefix from a cribsheet filename.

    The prefix is the part of the file name before the first underscore.
    Names without an underscore have no prefix.

    Args:
        filename: Filename or Path object to extract prefix from.

    Returns:
        Prefix string, or "" if the name has no underscore.

    Examples:
        >>> extract_sheet_prefix("3_cells.html")
        '3'
        >>> extract_sheet_prefix(Path("/sheets/12_genetics.html"))
        '12'
        >>> extract_sheet_prefix("glossary.html")
        ''
    """
    name = Path(filename).name
    head, separator, _ = name.partition("_")
    return head if separator else ""


def clean_list_line(line: str) -> str:
    """Strip a ``#`` comment and surrounding whitespace from a list line.

    Examples:
        >>> clean_list_line("  biology/3_cells.html\\t# chapter 3")
        'biology/3_cells.html'
    """
    line = line.split("#", 1)[0]
    return line.replace("\t", " ").strip()


def read_cribsheet_list(list_path: str | Path) -> List[str]:
    """Read the cribsheet list: one path per line, ``#`` starts a comment.

    Args:
        list_path: Path to the list file.

    Returns:
        Non-empty entries in file order.

    Raises:
        CribsheetListError: If the list file cannot be read.
    """
    list_path = Path(list_path)
    try:
        content = list_path.read_text(encoding="utf-8")
    except OSError as e:
        raise CribsheetListError(f"Not found: '{list_path}'") from e

    entries = [clean_list_line(line) for line in content.splitlines()]
    entries = [entry for entry in entries if entry]
    logger.debug(f"Read {len(entries)} cribsheets from {list_path}")
    return entries


def select_cribsheets(entries: Iterable[str], skip_to: str = "") -> Iterator[str]:
    """Yield entries starting at the first whose file name begins with ``skip_to``.

    With an empty ``skip_to`` every entry is yielded.

    Raises:
        SkipToNotFoundError: After the last entry, if no file name matched.
    """
    fast_forward = bool(skip_to)
    for entry in entries:
        if fast_forward:
            fast_forward = not Path(entry).name.startswith(skip_to)
            if fast_forward:
                logger.debug(f"Skipping {entry}")
                continue
        yield entry

    if fast_forward:
        raise SkipToNotFoundError(f"Skip to: '{skip_to}' not found")
