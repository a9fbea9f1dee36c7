"""Service for building and holding the ordered set of quiz questions."""

from __future__ import annotations

from collections.abc import Iterable

from timed_quiz.core.errors import EmptyPromptError
from timed_quiz.core.models import QuizQuestion, QuizRecord


class QuizRepository:
    """Materializes records into questions, preserving file order."""

    def __init__(self) -> None:
        self._questions: list[QuizQuestion] = []
        self._question_counter: int = 0

    def load_records(self, records: Iterable[QuizRecord]) -> None:
        """Replace the current quiz with questions built from ``records``.

        The records are consumed completely before anything is stored, so a
        failure part-way through leaves no partial quiz behind.
        """
        self._question_counter = 0
        prepared = [self._prepare_question(record) for record in records]
        self._questions = prepared

    def get_questions(self) -> list[QuizQuestion]:
        """Return a copy of the question list (the questions themselves are shared)."""
        return list(self._questions)

    def has_questions(self) -> bool:
        return bool(self._questions)

    def get_question_count(self) -> int:
        return len(self._questions)

    def get_question_at_index(self, index: int) -> QuizQuestion:
        if not 0 <= index < len(self._questions):
            raise IndexError(f"Question index {index} out of range")
        return self._questions[index]

    def reset_results(self) -> None:
        for question in self._questions:
            question.answered_correctly = False

    def _prepare_question(self, record: QuizRecord) -> QuizQuestion:
        """Validate a record and turn it into a question with a cleared result."""
        question_id = self._next_question_id()
        if not record.prompt.strip():
            raise EmptyPromptError(question_id)
        return QuizQuestion(
            id=question_id,
            prompt=record.prompt,
            answer=record.answer.strip(),
            answered_correctly=False,
        )

    def _next_question_id(self) -> int:
        self._question_counter += 1
        return self._question_counter
