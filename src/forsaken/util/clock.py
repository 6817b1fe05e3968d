"""Millisecond clocks for cooldown bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass
import time


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class ManualClock:
    """Clock that only moves when told to; used by headless runs and tests."""

    current: int = 0

    def __call__(self) -> int:
        return self.current

    def advance(self, ms: int) -> int:
        self.current += int(ms)
        return self.current

    def advance_seconds(self, seconds: float) -> int:
        return self.advance(int(seconds * 1000))
