"""
Console output sink and ANSI color palette.

The middleware never prints directly. It talks to a ``Console`` through
``write``, ``start_group`` and ``end_group``, so tests can swap in a recording
double and hosts can point output at any text stream.
"""

import sys
import threading
from contextlib import contextmanager
from types import MappingProxyType
from typing import Iterator, TextIO

# Process-wide, read-only escape table
COLORS = MappingProxyType(
    {
        "reset": "\x1b[0m",
        "bright": "\x1b[1m",
        "dim": "\x1b[2m",
        "underscore": "\x1b[4m",
        "yellow": "\x1b[33m",
        "green": "\x1b[32m",
        "blue": "\x1b[34m",
        "red": "\x1b[31m",
        "cyan": "\x1b[36m",
    }
)

RESET = COLORS["reset"]
YELLOW = COLORS["yellow"]
GREEN = COLORS["green"]
BLUE = COLORS["blue"]
RED = COLORS["red"]
CYAN = COLORS["cyan"]

_INDENT = "  "


class Console:
    """
    Plain-text console sink.

    Groups have no native collapsing on a text stream, so a group prints its
    title and indents everything written until the matching ``end_group``.
    All output goes through one lock; callers that emit several related
    lines should hold ``atomic()`` for the whole block.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._depth = 0
        self._lock = threading.RLock()

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys and output redirection still apply
        return self._stream if self._stream is not None else sys.stdout

    @contextmanager
    def atomic(self) -> Iterator["Console"]:
        """Hold the writer lock for a block of related calls."""
        with self._lock:
            yield self

    def write(self, line: str) -> None:
        """Write one line, wrapped in the reset sequence on both sides."""
        self._emit(f"{RESET}{line}{RESET}")

    def start_group(self, title: str) -> None:
        with self._lock:
            self._emit(f"{title}{RESET}")
            self._depth += 1

    def end_group(self) -> None:
        with self._lock:
            if self._depth:
                self._depth -= 1

    def _emit(self, text: str) -> None:
        with self._lock:
            prefix = _INDENT * self._depth
            for part in text.split("\n"):
                self.stream.write(f"{prefix}{part}\n")
            self.stream.flush()
