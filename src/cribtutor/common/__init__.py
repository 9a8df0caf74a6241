"""Common utilities shared across cribtutor."""

from __future__ import annotations

from .path_utils import (
    CribsheetListError,
    CribsheetNotFoundError,
    SkipToNotFoundError,
    clean_list_line,
    extract_sheet_prefix,
    read_cribsheet_list,
    select_cribsheets,
)

__all__ = [
    "CribsheetListError",
    "CribsheetNotFoundError",
    "SkipToNotFoundError",
    "clean_list_line",
    "extract_sheet_prefix",
    "read_cribsheet_list",
    "select_cribsheets",
]
