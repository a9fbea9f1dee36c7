"""Static metadata describing the timed quiz."""

APP_NAME = "timed-quiz"
APP_VERSION = "0.1"
APP_ABOUT_TEXT = (
    "Console quiz that reads 'question,answer' rows from a CSV file and scores "
    "the answers typed before the time limit runs out."
)
