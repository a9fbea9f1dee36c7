"""Runs a quiz against the clock and reports the score."""

from __future__ import annotations

import logging
from datetime import timedelta
from threading import Thread
from typing import TextIO

from timed_quiz.constants.quiz_constants import MAX_TIME_LIMIT_SECONDS
from timed_quiz.core.models import QuizQuestion, QuizResult
from timed_quiz.core.services.game_session import GameSession
from timed_quiz.core.services.scoreboard import Scoreboard

logger = logging.getLogger(__name__)


class QuizManager:
    """Races a ``GameSession`` worker thread against a deadline.

    Whichever finishes first decides the result. On a timeout the worker is
    left running as a daemon thread, possibly still blocked on input, and is
    only asked to stop prompting.
    """

    def __init__(
        self,
        questions: list[QuizQuestion],
        input_stream: TextIO,
        output_stream: TextIO,
    ) -> None:
        self._questions = questions
        self._scoreboard = Scoreboard()
        self._session = GameSession(
            questions=questions,
            scoreboard=self._scoreboard,
            input_stream=input_stream,
            output_stream=output_stream,
        )

    def get_question_count(self) -> int:
        return len(self._questions)

    def run_timed(self, time_limit: timedelta) -> QuizResult:
        limit_seconds = min(max(time_limit.total_seconds(), 0.0), MAX_TIME_LIMIT_SECONDS)
        worker = Thread(target=self._session.run, name="quiz-runner", daemon=True)
        logger.info(
            "Starting quiz with %d question(s) and a %.0f second limit",
            len(self._questions),
            limit_seconds,
        )
        worker.start()

        finished = self._session.wait(timeout=limit_seconds)
        if not finished:
            self._session.cancel()
            logger.info("Time limit reached")
        else:
            error = self._session.get_error()
            if error is not None:
                raise error
            logger.info("All questions answered before the time limit")

        row = self._scoreboard.close(len(self._questions))
        for question_id in row.missed_question_ids:
            logger.info("Question #%d was answered incorrectly", question_id)
        return QuizResult(
            correct_answers=row.correct_answers,
            total_questions=row.total_questions,
            timed_out=not finished,
            missed_question_ids=list(row.missed_question_ids),
        )


def format_report(result: QuizResult) -> str:
    """Render the final score line, newline-terminated.

    A timeout usually interrupts an unanswered prompt, so the report starts
    on a fresh line in that case.
    """
    prefix = "\n" if result.timed_out else ""
    return f"{prefix}{result.summary_line()}\n"
