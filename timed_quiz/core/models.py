"""Domain models for the timed quiz."""

from __future__ import annotations

from dataclasses import dataclass, field

from timed_quiz.constants.quiz_constants import SCORE_TEMPLATE


@dataclass(slots=True, frozen=True)
class QuizRecord:
    """One parsed row of the question file: prompt verbatim, answer trimmed."""

    prompt: str
    answer: str


@dataclass(slots=True)
class QuizQuestion:
    """Free-text question with a single expected answer."""

    id: int
    prompt: str
    answer: str
    answered_correctly: bool = False  # Updated by the runner as responses are judged

    def matches(self, response: str) -> bool:
        """Exact, case-sensitive comparison after trimming surrounding whitespace."""
        return response.strip() == self.answer


@dataclass(slots=True)
class QuizResult:
    """Outcome reported once the race between runner and timer resolves."""

    correct_answers: int
    total_questions: int
    timed_out: bool = False
    missed_question_ids: list[int] = field(default_factory=list)

    def summary_line(self) -> str:
        return SCORE_TEMPLATE.format(correct=self.correct_answers, total=self.total_questions)
