"""Invariant checks shared by the catalog and authoring layers."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping


def ensure_unique_ids(ids: Iterable[str], label: str) -> None:
    counts = Counter(ids)
    duplicates = sorted(key for key, count in counts.items() if count > 1)
    if duplicates:
        raise ValueError(f"Duplicate {label} id(s): {', '.join(duplicates)}")


def ensure_known_ids(ids: Iterable[str], known: Mapping[str, object], label: str) -> None:
    missing = sorted({entry for entry in ids if entry not in known})
    if missing:
        raise KeyError(f"Unknown {label} id(s): {', '.join(missing)}")


def slot_in_range(index: int, size: int) -> bool:
    return isinstance(index, int) and 0 <= index < size
