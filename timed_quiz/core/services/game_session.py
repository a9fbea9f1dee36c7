"""Service that asks the questions of a quiz one after another."""

from __future__ import annotations

import logging
from threading import Event, Lock
from typing import TextIO

from timed_quiz.constants.quiz_constants import PROBLEM_TEMPLATE
from timed_quiz.core.models import QuizQuestion
from timed_quiz.core.services.scoreboard import Scoreboard

logger = logging.getLogger(__name__)


class GameSession:
    """Presents each question on the console and judges the typed response.

    ``run`` is meant to be the body of a worker thread. It signals completion
    exactly once through an event, after the last answer has been recorded on
    the scoreboard.
    """

    def __init__(
        self,
        questions: list[QuizQuestion],
        scoreboard: Scoreboard,
        input_stream: TextIO,
        output_stream: TextIO,
    ) -> None:
        self._questions = questions
        self._scoreboard = scoreboard
        self._input = input_stream
        self._output = output_stream
        self._finished = Event()
        self._cancelled = Event()
        self._output_lock = Lock()
        self._error: Exception | None = None

    def run(self) -> None:
        try:
            for number, question in enumerate(self._questions, start=1):
                response = self._ask(number, question)
                if response is None or self._cancelled.is_set():
                    # Time ran out while waiting for this answer
                    return
                self._judge(question, response)
        except Exception as exc:
            # Handed to the controller, which re-raises it on its own thread
            self._error = exc
        finally:
            self._finished.set()

    def cancel(self) -> None:
        """Stop asking questions; a read already in progress is left alone.

        Once this returns no further prompt is written.
        """
        with self._output_lock:
            self._cancelled.set()

    def is_finished(self) -> bool:
        return self._finished.is_set()

    def get_error(self) -> Exception | None:
        return self._error

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the session finishes or ``timeout`` elapses."""
        return self._finished.wait(timeout)

    def _ask(self, number: int, question: QuizQuestion) -> str | None:
        with self._output_lock:
            if self._cancelled.is_set():
                return None
            self._output.write(PROBLEM_TEMPLATE.format(number=number, prompt=question.prompt))
            self._output.flush()
        # An empty read means end of input; it is judged as an empty response.
        return self._input.readline()

    def _judge(self, question: QuizQuestion, response: str) -> None:
        is_correct = question.matches(response)
        if not self._scoreboard.record_answer(question.id, is_correct):
            # The tally was closed by a timeout while this answer was being read
            return
        question.answered_correctly = is_correct
        logger.debug("Question #%d judged %s", question.id, "correct" if is_correct else "wrong")
