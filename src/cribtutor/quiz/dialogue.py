"""
Module: quiz.dialogue

Purpose:
    Line-oriented conversation with the user: skip/repeat prompts and the
    fill-in-the-blanks question loop.

    Response states for one masked question:

        AWAITING_RESPONSE --empty-->  SKIPPED
        AWAITING_RESPONSE --match-->  CORRECT
        AWAITING_RESPONSE --wrong-->  RETRY_PROMPT
        RETRY_PROMPT      --y------>  AWAITING_RESPONSE (re-masked)
        RETRY_PROMPT      --n/empty-> INCORRECT
        RETRY_PROMPT      --q------>  TERMINATED (QuitRequested)
        RETRY_PROMPT      --?------>  RETRY_PROMPT, expected answer shown
        RETRY_PROMPT      --answer->  CORRECT or RETRY_PROMPT

Key Classes:
    - Dialogue: Prompts over injected input/output streams
    - ResponseState: States above
    - QuitRequested: Raised when the user quits or input ends

Dependencies:
    - quiz.masking, quiz.matching
    - markup.renderer

Used By:
    - quiz.controller
    - cli
"""

from __future__ import annotations

import logging
import random
import sys
from collections import Counter
from enum import Enum
from typing import Optional, Sequence, TextIO

from cribtutor.core.models import Element, MaskedTermList, Tag
from cribtutor.markup.renderer import TreeRenderer

from .config import MaskingConfig
from .masking import clear_masks, is_quizzable, select_and_mask
from .matching import check_answer, format_expected

logger = logging.getLogger(__name__)


FILL_IN_PROMPT = "Fill in the blanks: "
RETRY_PROMPT = "    Oops ... try again [yNq?] ? "
PEEK_MARKER = " >>"


class QuitRequested(Exception):
    """The user asked to quit, or input ended."""
    pass


class ResponseState(str, Enum):
    """State of the response to one masked question."""
    AWAITING_RESPONSE = "awaiting_response"
    SKIPPED = "skipped"
    CORRECT = "correct"
    RETRY_PROMPT = "retry_prompt"
    INCORRECT = "incorrect"
    TERMINATED = "terminated"

    def __str__(self) -> str:
        return self.value


class Dialogue:
    """
    Prompts the user and reads responses.

    Streams are injected so sessions can be scripted in tests.

    Attributes:
        outcomes: Count of final states (CORRECT, INCORRECT, SKIPPED)
    """

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
        renderer: Optional[TreeRenderer] = None,
        masking: Optional[MaskingConfig] = None,
    ):
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stdout
        self._rng = rng or random.Random()
        self._renderer = renderer or TreeRenderer()
        self._masking = masking or MaskingConfig()
        self.outcomes: Counter = Counter()

    # ─────────────────────────────────────────────────────────────────────────
    # I/O
    # ─────────────────────────────────────────────────────────────────────────

    def write(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()

    def read_line(self) -> Optional[str]:
        """Next input line without its newline, or None at end of input."""
        line = self._input.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    # ─────────────────────────────────────────────────────────────────────────
    # Yes/no prompts
    # ─────────────────────────────────────────────────────────────────────────

    def yes_no(self, header: str, prompt: str) -> bool:
        """
        Print ``header`` and ask a yes/no question (default no).

        Raises:
            QuitRequested: On "q" or end of input
        """
        self.write(f"{header}\n    {prompt} [yNq] ? ")
        response = self.read_line()
        self.write("\n")

        if response is None:
            raise QuitRequested("End of input")
        letter = response[:1].lower() or "n"
        if letter == "q":
            raise QuitRequested("Quit at prompt")
        return letter == "y"

    def skip_yes_no(self, header: str) -> bool:
        return self.yes_no(header, "Skip")

    def repeat_yes_no(self, header: str) -> bool:
        return self.yes_no(header, "Repeat")

    # ─────────────────────────────────────────────────────────────────────────
    # Questions
    # ─────────────────────────────────────────────────────────────────────────

    def fill_in_the_blanks(self, paragraph: Element, source_terms: Sequence[Element], choices: int) -> bool:
        """
        Ask one question.

        Prints the paragraph verbatim when it is not quizzable, otherwise
        masks it and runs the response loop, re-masking on each retry.

        Returns:
            False if the user answered wrongly at any point
        """
        good = True

        if not is_quizzable(len(source_terms), choices):
            self.write(self._renderer.render(paragraph) + "\n")
        else:
            while True:
                expected = select_and_mask(paragraph, source_terms, choices, self._rng, self._masking)
                self.write(self._renderer.render(paragraph) + "\n")
                if _ends_with_block(paragraph):
                    self.write("\n")
                clear_masks(paragraph)

                state = self.solicit_response(expected)
                if state in (ResponseState.AWAITING_RESPONSE, ResponseState.INCORRECT):
                    good = False
                if state is not ResponseState.AWAITING_RESPONSE:
                    self.outcomes[state] += 1
                    break
                logger.debug("Retrying with a fresh selection")

        self.write("\n")
        return good

    def solicit_response(self, expected: MaskedTermList) -> ResponseState:
        """
        Read answers for one masking until a final state is reached.

        Returns:
            SKIPPED, CORRECT, INCORRECT, or AWAITING_RESPONSE when the user
            asked to try again

        Raises:
            QuitRequested: On "q" or end of input
        """
        self.write(FILL_IN_PROMPT)
        response = self.read_line()
        if response is None:
            self.write("\n")
            raise QuitRequested("End of input")

        state = self._judge(expected, response)
        while state is ResponseState.RETRY_PROMPT:
            self.write(RETRY_PROMPT)
            response = self.read_line()
            if response is None:
                self.write("\n")
                raise QuitRequested("End of input")
            state = self._retry(expected, response)
        return state

    def _judge(self, expected: MaskedTermList, response: str) -> ResponseState:
        if not response:
            return ResponseState.SKIPPED
        if check_answer(expected, response):
            return ResponseState.CORRECT
        return ResponseState.RETRY_PROMPT

    def _retry(self, expected: MaskedTermList, response: str) -> ResponseState:
        if len(response) > 1:
            return ResponseState.CORRECT if check_answer(expected, response) else ResponseState.RETRY_PROMPT

        letter = response.lower() or "n"
        if letter == "q":
            self.outcomes[ResponseState.TERMINATED] += 1
            self.write("\n")
            raise QuitRequested("Quit at retry prompt")
        if letter == "?":
            self.write(f"{PEEK_MARKER}{format_expected(expected)}\n")
            return ResponseState.RETRY_PROMPT
        if letter == "n":
            return ResponseState.INCORRECT
        if letter == "y":
            return ResponseState.AWAITING_RESPONSE
        return ResponseState.RETRY_PROMPT


def _ends_with_block(paragraph: Element) -> bool:
    """True when the paragraph's last part holds a <pre> or <ol>."""
    if not paragraph.parts:
        return False
    last = paragraph.parts[-1].sub
    return last is not None and last.tag in (Tag.PRE, Tag.OL)
