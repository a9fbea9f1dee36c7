"""Validated runtime settings for a quiz run."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from timed_quiz.constants.quiz_constants import (
    DEFAULT_QUIZ_PATH,
    DEFAULT_TIME_LIMIT_SECONDS,
    MAX_TIME_LIMIT_SECONDS,
)


class QuizSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    csv_path: Path = DEFAULT_QUIZ_PATH
    time_limit_seconds: int = Field(default=DEFAULT_TIME_LIMIT_SECONDS, ge=0, le=MAX_TIME_LIMIT_SECONDS)
    verbose: bool = False

    @property
    def time_limit(self) -> timedelta:
        return timedelta(seconds=self.time_limit_seconds)
