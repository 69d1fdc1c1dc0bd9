"""
Request latency timer.

``start()`` reads a monotonic nanosecond clock when the middleware first sees
the request. ``finish()`` reads it again when the response completes and
returns whole milliseconds plus a local ``HH:MM:SS`` timestamp taken at
that moment.

Rounding is half-up on integer nanoseconds, so 1.5ms renders as 2 and
1.4999ms as 1.
"""

import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

_NS_PER_MS = 1_000_000
TIMESTAMP_FORMAT = "%H:%M:%S"


def elapsed_ms(start_ns: int, end_ns: int) -> int:
    """Whole milliseconds between two nanosecond marks, never negative."""
    delta = max(0, end_ns - start_ns)
    return (delta + _NS_PER_MS // 2) // _NS_PER_MS


@dataclass
class RequestTimer:
    """Start/finish marks for one request."""

    clock: Callable[[], int] = time.perf_counter_ns
    now: Callable[[], datetime] = datetime.now
    _start_ns: int | None = field(default=None, init=False, repr=False)

    def start(self) -> "RequestTimer":
        self._start_ns = self.clock()
        return self

    def finish(self) -> tuple[int, str]:
        """Return ``(elapsed_ms, timestamp)`` measured at completion."""
        end_ns = self.clock()
        start_ns = end_ns if self._start_ns is None else self._start_ns
        return elapsed_ms(start_ns, end_ns), self.now().strftime(TIMESTAMP_FORMAT)
