"""
Quiz Package

Masks terms in annotated cribsheets, asks the questions and checks the
answers.
"""

from .config import MaskingConfig, QuizConfig
from .controller import QuizController, QuizResult
from .dialogue import Dialogue, QuitRequested, ResponseState
from .masking import clear_masks, find_terms, is_quizzable, select_and_mask
from .matching import check_answer, format_expected
from .numbering import SectionNumber

__all__ = [
    "MaskingConfig",
    "QuizConfig",
    "QuizController",
    "QuizResult",
    "Dialogue",
    "QuitRequested",
    "ResponseState",
    "SectionNumber",
    "select_and_mask",
    "clear_masks",
    "find_terms",
    "is_quizzable",
    "check_answer",
    "format_expected",
]
