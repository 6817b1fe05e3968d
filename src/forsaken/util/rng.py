"""Seedable RNG wrapper for reproducible encounters."""

from __future__ import annotations

from dataclasses import dataclass
import random
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class Rng:
    seed: int | None = None

    def __post_init__(self) -> None:
        self._random = random.Random(self.seed)

    def randint(self, a: int, b: int) -> int:
        return self._random.randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        return self._random.choice(seq)

    def ticket_draw(self, items: Iterable[tuple[T, int]]) -> T | None:
        """Draw uniformly from a pool where each value holds *n* tickets.

        Values with zero or negative tickets never win. Returns ``None`` when
        the pool is empty.
        """
        pool: list[T] = []
        for value, tickets in items:
            pool.extend([value] * max(0, int(tickets)))
        if not pool:
            return None
        return self._random.choice(pool)
