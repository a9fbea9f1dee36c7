"""Errors raised while loading a quiz."""

from __future__ import annotations

from pathlib import Path


class QuizImportError(Exception):
    """Raised when a quiz definition cannot be loaded."""


class QuizFileOpenError(QuizImportError):
    """Raised when the quiz file does not exist or cannot be opened."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot open quiz file {path}: {reason}")
        self.path = path


class MalformedRecordError(QuizImportError):
    """Raised when a row does not describe exactly one prompt and one answer."""

    def __init__(self, line_number: int, detail: str) -> None:
        super().__init__(f"Line {line_number}: {detail}")
        self.line_number = line_number


class EmptyPromptError(MalformedRecordError):
    """Raised when a row has two fields but no question text."""

    def __init__(self, line_number: int) -> None:
        super().__init__(line_number, "question prompt is empty")


class QuizReadError(QuizImportError):
    """Raised when reading the quiz file fails for any other reason."""
