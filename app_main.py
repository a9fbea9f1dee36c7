"""Application entry point for the timed console quiz."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TextIO

from pydantic import ValidationError

from timed_quiz.constants.about import APP_ABOUT_TEXT, APP_NAME, APP_VERSION
from timed_quiz.constants.quiz_constants import (
    DEFAULT_QUIZ_PATH,
    DEFAULT_TIME_LIMIT_SECONDS,
    EMPTY_PROMPT_MESSAGE,
    FILE_OPEN_FAILED_MESSAGE,
    MALFORMED_RECORD_MESSAGE,
    START_PROMPT,
)
from timed_quiz.core.errors import (
    EmptyPromptError,
    MalformedRecordError,
    QuizFileOpenError,
    QuizImportError,
)
from timed_quiz.core.models import QuizResult
from timed_quiz.core.quiz_importer import load_quiz_from_file
from timed_quiz.core.quiz_manager import QuizManager, format_report
from timed_quiz.core.settings import QuizSettings
from timed_quiz.utils.logging_config import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description=APP_ABOUT_TEXT)
    parser.add_argument(
        "-csv",
        "--csv",
        dest="csv_path",
        default=str(DEFAULT_QUIZ_PATH),
        help="csv file in the format of 'question,answer'",
    )
    parser.add_argument(
        "-limit",
        "--limit",
        dest="time_limit_seconds",
        type=int,
        default=DEFAULT_TIME_LIMIT_SECONDS,
        help="the time limit for the quiz in seconds",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def parse_settings(argv: list[str] | None = None) -> QuizSettings:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        return QuizSettings(**vars(args))
    except ValidationError as exc:
        messages = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        parser.error(messages)
        raise  # pragma: no cover - parser.error exits


def run_quiz(
    settings: QuizSettings,
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
) -> QuizResult:
    """Load the quiz, wait for the operator, race the questions against the clock."""
    input_stream = input_stream if input_stream is not None else sys.stdin
    output_stream = output_stream if output_stream is not None else sys.stdout

    quiz = load_quiz_from_file(settings.csv_path)

    output_stream.write(START_PROMPT)
    output_stream.flush()
    input_stream.readline()

    manager = QuizManager(quiz.questions, input_stream=input_stream, output_stream=output_stream)
    result = manager.run_timed(settings.time_limit)
    output_stream.write(format_report(result))
    output_stream.flush()
    return result


def _diagnostic_for(exc: QuizImportError, settings: QuizSettings) -> str:
    if isinstance(exc, QuizFileOpenError):
        return FILE_OPEN_FAILED_MESSAGE.format(path=settings.csv_path)
    if isinstance(exc, EmptyPromptError):
        return EMPTY_PROMPT_MESSAGE
    if isinstance(exc, MalformedRecordError):
        return MALFORMED_RECORD_MESSAGE
    return str(exc)


def main(argv: list[str] | None = None) -> None:
    """Parse flags, run one timed quiz, and exit as soon as the score is printed."""
    settings = parse_settings(argv)
    logger = configure_logging(logging.INFO if settings.verbose else logging.WARNING)

    try:
        result = run_quiz(settings)
    except QuizImportError as exc:
        print(_diagnostic_for(exc, settings))
        logger.error("%s", exc)
        sys.exit(1)

    if result.timed_out:
        # The runner thread may still hold stdin; skip interpreter teardown.
        sys.stdout.flush()
        logging.shutdown()
        os._exit(0)


if __name__ == "__main__":
    main()
