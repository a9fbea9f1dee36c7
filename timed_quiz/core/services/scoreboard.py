"""Service for keeping the running tally of correct answers."""

from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock


@dataclass(slots=True)
class ScoreEntry:
    """Mutable tally used internally."""

    correct_answers: int = 0
    answered: int = 0
    missed_question_ids: list[int] = field(default_factory=list)


@dataclass(slots=True)
class ScoreboardRow:
    """Immutable snapshot returned to consumers."""

    correct_answers: int
    answered: int
    total_questions: int
    missed_question_ids: tuple[int, ...]


class Scoreboard:
    """Tally written by the quiz runner and read by the race controller."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._entry = ScoreEntry()
        self._closed = False

    def record_answer(self, question_id: int, is_correct: bool) -> bool:
        """Count one judged answer; returns False once the tally has been closed."""
        with self._lock:
            if self._closed:
                return False
            self._entry.answered += 1
            if is_correct:
                self._entry.correct_answers += 1
            else:
                self._entry.missed_question_ids.append(question_id)
            return True

    def close(self, total_questions: int) -> ScoreboardRow:
        """Stop accepting answers and return the final tally."""
        with self._lock:
            self._closed = True
            return self._row(total_questions)

    def snapshot(self, total_questions: int) -> ScoreboardRow:
        """Return the tally as it stands right now."""
        with self._lock:
            return self._row(total_questions)

    def clear(self) -> None:
        """Reset the tally and reopen it."""
        with self._lock:
            self._entry = ScoreEntry()
            self._closed = False

    def _row(self, total_questions: int) -> ScoreboardRow:
        return ScoreboardRow(
            correct_answers=self._entry.correct_answers,
            answered=self._entry.answered,
            total_questions=total_questions,
            missed_question_ids=tuple(self._entry.missed_question_ids),
        )
