"""
Module: quiz.config

Purpose:
    Configuration dataclasses for a quiz session.
    Immutable configuration with validation on construction.

Key Classes:
    - MaskingConfig: How masked terms are displayed
    - QuizConfig: Settings for one run of the quiz

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - quiz.masking: MaskingConfig
    - quiz.controller, cli: QuizConfig
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from cribtutor.common.path_utils import DEFAULT_CRIBSHEET_LIST


@dataclass(frozen=True)
class MaskingConfig:
    """
    Display settings for masked terms.

    Attributes:
        placeholder: Printed once per masked word

    Invariants:
        - placeholder is non-empty and contains no whitespace, "-" or "/"
    """

    placeholder: str = "____"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.placeholder:
            raise ValueError("placeholder must be non-empty")
        if any(char.isspace() or char in "-/" for char in self.placeholder):
            raise ValueError(f"placeholder must not contain separators: {self.placeholder!r}")


@dataclass(frozen=True)
class QuizConfig:
    """
    Settings for one quiz run (immutable).

    Attributes:
        choices: Terms blanked per question; 0 prints the cribsheets unquizzed
        seed: Random seed for reproducible term selection and shuffling
        directory: Directory holding the cribsheet list and cribsheets
        cribsheet_list: Name of the list file inside ``directory``
        skip_to: Start at the first cribsheet whose name begins with this
        run_quiz: False to print the parsed cribsheet instead of quizzing
        raw: Print the parse tree view (tags and comments)
        masking: Masked term display settings

    Invariants:
        - choices >= 0
        - cribsheet_list is non-empty

    Example:
        >>> config = QuizConfig(directory=Path("notes"), choices=3)
        >>> config.list_path
        PosixPath('notes/cribsheets.txt')
    """

    choices: int = 2
    seed: Optional[int] = None
    directory: Path = Path(".")
    cribsheet_list: str = DEFAULT_CRIBSHEET_LIST
    skip_to: str = ""
    run_quiz: bool = True
    raw: bool = False
    masking: MaskingConfig = field(default_factory=MaskingConfig)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.choices < 0:
            raise ValueError(f"choices must be non-negative: {self.choices}")
        if not self.cribsheet_list:
            raise ValueError("cribsheet_list must be non-empty")

    @property
    def list_path(self) -> Path:
        return Path(self.directory) / self.cribsheet_list

    def sheet_path(self, entry: str) -> Path:
        """Resolve a list entry relative to the cribsheet directory."""
        return Path(self.directory) / entry
