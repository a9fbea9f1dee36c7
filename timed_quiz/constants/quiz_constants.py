"""Quiz-related constants shared across the core and the entry point."""

from pathlib import Path
from threading import TIMEOUT_MAX

DEFAULT_TIME_LIMIT_SECONDS: int = 30
# Longest wait the threading primitives accept on this platform, in whole seconds
MAX_TIME_LIMIT_SECONDS: int = int(TIMEOUT_MAX)
DEFAULT_QUIZ_PATH: Path = Path(__file__).resolve().parent.parent / "data" / "problems.csv"
EXPECTED_FIELD_COUNT: int = 2

START_PROMPT: str = "Please press enter to begin quiz..."
PROBLEM_TEMPLATE: str = "Problem #{number}: {prompt} = "
SCORE_TEMPLATE: str = "You scored {correct} out of {total}."

FILE_OPEN_FAILED_MESSAGE: str = "failed to open CSV file {path}"
MALFORMED_RECORD_MESSAGE: str = "record from quiz file had an unexpected number of fields"
EMPTY_PROMPT_MESSAGE: str = "record from quiz file has an empty question"
