from __future__ import annotations

from collections import deque
from pathlib import Path
from threading import Event

import pytest


class ScriptedConsole:
    """Stand-in for stdin: replays queued lines, then blocks like an idle operator."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = deque(lines)
        self._released = Event()
        self.blocked = Event()

    def readline(self) -> str:
        if self._lines:
            return self._lines.popleft()
        self.blocked.set()
        self._released.wait()
        return ""

    def release(self) -> None:
        self._released.set()


@pytest.fixture
def scripted_console():
    consoles: list[ScriptedConsole] = []

    def factory(*lines: str) -> ScriptedConsole:
        console = ScriptedConsole(list(lines))
        consoles.append(console)
        return console

    yield factory
    for console in consoles:
        console.release()


@pytest.fixture
def write_quiz(tmp_path: Path):
    def factory(text: str, name: str = "problems.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return factory
