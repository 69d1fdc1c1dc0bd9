"""
Shared fixtures: a console double that records calls instead of printing,
and scripted timers for deterministic elapsed times.
"""

import io
import re
from datetime import datetime

import pytest

from stylelog.console import Console
from stylelog.engine.timer import RequestTimer

_ANSI = re.compile(r"\x1b\[\d+m")

FIXED_NOW = datetime(2026, 3, 14, 9, 5, 7)
T0 = 5_000_000_000


def strip_ansi(text: str) -> str:
    return _ANSI.sub("", text)


class RecordingConsole(Console):
    """Console double that keeps every call in order."""

    def __init__(self) -> None:
        super().__init__(stream=io.StringIO())
        self.calls: list[tuple] = []

    def write(self, line: str) -> None:
        self.calls.append(("write", line))

    def start_group(self, title: str) -> None:
        self.calls.append(("start_group", title))

    def end_group(self) -> None:
        self.calls.append(("end_group",))

    @property
    def lines(self) -> list[str]:
        return [call[1] for call in self.calls if call[0] == "write"]

    @property
    def plain_lines(self) -> list[str]:
        return [strip_ansi(line) for line in self.lines]

    @property
    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]

    def clear(self) -> None:
        self.calls.clear()


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def make_timer():
    """Build a timer factory whose clock advances by ``elapsed_ns`` per request."""

    def factory(elapsed_ns: int, now: datetime = FIXED_NOW):
        def build() -> RequestTimer:
            ticks = iter([T0, T0 + elapsed_ns])
            return RequestTimer(clock=lambda: next(ticks), now=lambda: now)

        return build

    return factory
