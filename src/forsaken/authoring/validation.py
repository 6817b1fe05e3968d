"""Validation errors and id helpers for authored records."""

from __future__ import annotations

import re
from typing import Iterable

_WHITESPACE = re.compile(r"\s+")


class AuthoringError(ValueError):
    """An authored record was rejected and nothing was applied."""


class EnemyIdConflictError(AuthoringError):
    def __init__(self, enemy_id: str) -> None:
        super().__init__(
            f"An enemy with id '{enemy_id}' already exists. Please choose a different name."
        )
        self.enemy_id = enemy_id


def derive_enemy_id(name: str) -> str:
    return _WHITESPACE.sub("-", name.strip().lower())


def require_text(value: str | None, label: str) -> str:
    text = (value or "").strip()
    if not text:
        raise AuthoringError(f"{label} is required.")
    return text


def unique_id(base: str, taken: Iterable[str]) -> str:
    taken_set = set(taken)
    candidate = base
    suffix = 1
    while candidate in taken_set:
        suffix += 1
        candidate = f"{base}-{suffix}"
    return candidate
