"""Utilities for importing quizzes from a CSV file.

File format (one question per row, no header):

    prompt,answer

Example:

    5+5,10
    "What is 6+7, in digits?", 13

The prompt is used verbatim; surrounding whitespace is stripped from the
answer. Standard CSV quoting applies, so a prompt may contain commas when it
is quoted. Blank lines are ignored, any other row must have exactly two
fields.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from timed_quiz.constants.quiz_constants import EXPECTED_FIELD_COUNT
from timed_quiz.core.errors import (
    EmptyPromptError,
    MalformedRecordError,
    QuizFileOpenError,
    QuizReadError,
)
from timed_quiz.core.models import QuizQuestion, QuizRecord
from timed_quiz.core.services.quiz_repository import QuizRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ImportedQuiz:
    """Container for imported quiz metadata and questions."""

    source_path: Path
    questions: list[QuizQuestion]


def read_quiz_records(handle: Iterable[str]) -> Iterator[QuizRecord]:
    """Yield one record per CSV row, stopping cleanly at end of input."""
    reader = csv.reader(handle)
    try:
        for row in reader:
            if not row:
                continue
            if len(row) != EXPECTED_FIELD_COUNT:
                raise MalformedRecordError(
                    reader.line_num,
                    f"expected {EXPECTED_FIELD_COUNT} fields, found {len(row)}",
                )
            prompt, answer = row
            if not prompt.strip():
                raise EmptyPromptError(reader.line_num)
            yield QuizRecord(prompt=prompt, answer=answer.strip())
    except (csv.Error, UnicodeDecodeError) as exc:
        raise QuizReadError(f"Line {reader.line_num}: {exc}") from exc
    except OSError as exc:
        raise QuizReadError(str(exc)) from exc


def load_quiz_from_handle(handle: TextIO, source_path: Path) -> ImportedQuiz:
    repository = QuizRepository()
    repository.load_records(read_quiz_records(handle))
    return ImportedQuiz(source_path=source_path, questions=repository.get_questions())


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    try:
        handle = file_path.open("r", encoding="utf-8", newline="")
    except OSError as exc:
        raise QuizFileOpenError(file_path, exc.strerror or str(exc)) from exc

    with handle:
        quiz = load_quiz_from_handle(handle, file_path)
    logger.info("Loaded %d question(s) from %s", len(quiz.questions), file_path)
    return quiz
