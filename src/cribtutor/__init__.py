"""Top-level package for cribtutor.

Fill-in-the-blanks quizzes generated from HTML cribsheets.

Provides subpackages:
- cribtutor.core – element tree and masked term models
- cribtutor.markup – parse, massage, annotate and render cribsheets
- cribtutor.quiz – masking, answer matching and the quiz dialogue
- cribtutor.common – cribsheet list and path helpers
"""

from __future__ import annotations


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("cribtutor")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

from .markup import parse_document, render  # noqa: E402
from .quiz import check_answer, clear_masks, select_and_mask  # noqa: E402

__all__: list[str] = [
    "__version__",
    "parse_document",
    "select_and_mask",
    "clear_masks",
    "check_answer",
    "render",
]
