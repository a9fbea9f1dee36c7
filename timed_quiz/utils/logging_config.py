"""Logging configuration helpers for the timed quiz."""

from __future__ import annotations

import logging
from logging import Logger


def configure_logging(level: int = logging.WARNING) -> Logger:
    """Configure basic logging for the application and return the package logger.

    Records go to stderr so the quiz prompts on stdout stay readable.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("timed_quiz")
