"""Shared helpers for randomness and time."""

from forsaken.util.clock import ManualClock, now_ms
from forsaken.util.rng import Rng

__all__ = [
    "ManualClock",
    "Rng",
    "now_ms",
]
