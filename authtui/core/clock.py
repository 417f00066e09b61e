from __future__ import annotations

import time
from typing import Protocol

from .errors import ClockError


class Clock(Protocol):
    def now(self) -> int:  # pragma: no cover - protocol
        """Current unix time in whole seconds."""


class SystemClock:
    """Wall clock backed by time.time()."""

    def now(self) -> int:
        t = int(time.time())
        if t < 0:
            raise ClockError("system clock is before the unix epoch", context={"time": t})
        return t


class FixedClock:
    """Manually driven clock for deterministic runs."""

    def __init__(self, t: int = 0) -> None:
        self.t = t

    def now(self) -> int:
        return self.t

    def advance(self, seconds: int = 1) -> None:
        self.t += seconds
