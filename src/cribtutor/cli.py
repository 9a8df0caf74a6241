"""
Module: cli

Purpose:
    Command line entry point: read the cribsheet list and quiz the user on
    each cribsheet in turn.

Usage:
    cribtutor [directory] [skipto] [choices] [file]
    cribtutor -d notes -s 3_ -c 3
    cribtutor -p -r -f single.txt      # print the parse tree of the first cribsheet

    Positional arguments fill whichever of directory, skipto, choices and
    file were not given as options, in that order.

Key Functions:
    - build_parser(): argparse parser
    - config_from_args(): Parsed arguments to QuizConfig
    - run_session(): Run the quiz over the cribsheet list
    - main(): Entry point, returns the exit status

Exit status:
    0 on completion or quit, 1 when the list is missing or the skip-to
    cribsheet is not in it.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from cribtutor import __version__
from cribtutor.common.path_utils import (
    DEFAULT_CRIBSHEET_LIST,
    CribsheetListError,
    CribsheetNotFoundError,
    SkipToNotFoundError,
    read_cribsheet_list,
    select_cribsheets,
)
from cribtutor.markup import RenderConfig, TreeRenderer, parse_file
from cribtutor.quiz import Dialogue, QuitRequested, QuizConfig, QuizController, ResponseState, SectionNumber

logger = logging.getLogger(__name__)


POSITIONAL_FIELDS = ("directory", "skipto", "choices", "file")
DEFAULT_CHOICES = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cribtutor",
        description="Fill-in-the-blanks quizzes from HTML cribsheets.",
    )
    parser.add_argument("positionals", nargs="*", metavar="arg",
                        help="directory, skipto, choices, file: same as the options below, in this order")
    parser.add_argument("-d", "--directory", help="Directory holding the cribsheet list (default: .)")
    parser.add_argument("-s", "--skipto", help="Start at the first cribsheet whose name begins with this")
    parser.add_argument("-c", "--choices", type=int,
                        help=f"Terms blanked per question, 0 to just read (default: {DEFAULT_CHOICES})")
    parser.add_argument("-f", "--file", help=f"Cribsheet list file name (default: {DEFAULT_CRIBSHEET_LIST})")
    parser.add_argument("-p", "--parser", action="store_true",
                        help="Print the first cribsheet as parsed instead of quizzing")
    parser.add_argument("-r", "--raw", action="store_true", help="Show tags and comments when printing")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible quizzes")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> QuizConfig:
    """
    Build the run configuration, filling unset fields from positionals.

    Exits through ``parser.error`` on surplus positionals or invalid values.
    """
    positionals: List[str] = list(args.positionals)
    for name in POSITIONAL_FIELDS:
        if not positionals:
            break
        if getattr(args, name) is None:
            value = positionals.pop(0)
            if name == "choices":
                try:
                    value = int(value)
                except ValueError:
                    parser.error(f"choices must be a number: {value!r}")
            setattr(args, name, value)
    if positionals:
        parser.error(f"unexpected arguments: {' '.join(positionals)}")

    try:
        return QuizConfig(
            choices=DEFAULT_CHOICES if args.choices is None else args.choices,
            seed=args.seed,
            directory=Path(args.directory or "."),
            cribsheet_list=args.file or DEFAULT_CRIBSHEET_LIST,
            skip_to=args.skipto or "",
            run_quiz=not args.parser,
            raw=args.raw,
        )
    except ValueError as e:
        parser.error(str(e))
        raise


def run_session(
    config: QuizConfig,
    input_stream: Optional[TextIO] = None,
    output_stream: Optional[TextIO] = None,
) -> int:
    """
    Quiz the user on every selected cribsheet.

    Args:
        config: Run settings
        input_stream: Responses (default stdin)
        output_stream: Quiz text (default stdout)

    Returns:
        Exit status
    """
    output = output_stream if output_stream is not None else sys.stdout

    try:
        entries = read_cribsheet_list(config.list_path)
    except CribsheetListError as e:
        logger.error(f"Cribsheet list {e}")
        return 1

    rng = random.Random(config.seed)
    renderer = TreeRenderer(RenderConfig(verbose=config.raw))
    dialogue = Dialogue(input_stream, output, rng, renderer, config.masking)
    controller = QuizController(dialogue, config, rng)

    status = 0
    try:
        for entry in select_cribsheets(entries, config.skip_to):
            path = config.sheet_path(entry)
            try:
                document = parse_file(path)
            except CribsheetNotFoundError as e:
                logger.error(f"Cribsheet {e}, skipping")
                continue

            if not config.run_quiz:
                output.write(renderer.render(document) + "\n")
                break

            logger.info(f"Quizzing {path}")
            result = controller.run(SectionNumber(path), document)
            if result.skipped:
                logger.debug(f"Skipped {path}")
    except SkipToNotFoundError as e:
        logger.error(str(e))
        status = 1
    except QuitRequested as e:
        logger.info(f"Quit: {e}")

    _log_outcomes(dialogue)
    return status


def _log_outcomes(dialogue: Dialogue) -> None:
    outcomes = dialogue.outcomes
    logger.info(
        f"Correct: {outcomes[ResponseState.CORRECT]}, "
        f"incorrect: {outcomes[ResponseState.INCORRECT]}, "
        f"skipped: {outcomes[ResponseState.SKIPPED]}"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = config_from_args(parser, args)
    return run_session(config)


if __name__ == "__main__":
    raise SystemExit(main())
