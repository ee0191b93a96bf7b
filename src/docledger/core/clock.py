from __future__ import annotations

import threading
import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int: ...


class SystemClock:
    """Wall-clock seconds, truncated like a block timestamp."""

    def now(self) -> int:
        return int(time.time())


class ManualClock:
    """Clock that only moves when told to.

    Useful for tests and for replaying a recorded sequence of calls.
    """

    def __init__(self, start: int = 1_700_000_000) -> None:
        self._lock = threading.Lock()
        self._now = int(start)

    def now(self) -> int:
        with self._lock:
            return self._now

    def set(self, timestamp: int) -> None:
        ts = int(timestamp)
        with self._lock:
            if ts < self._now:
                raise ValueError("clock cannot move backwards")
            self._now = ts

    def advance(self, seconds: int = 1) -> int:
        step = int(seconds)
        if step < 0:
            raise ValueError("seconds must be >= 0")
        with self._lock:
            self._now += step
            return self._now
