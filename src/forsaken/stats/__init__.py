"""Stat aggregation over equipped items."""

from forsaken.stats.aggregator import (
    active_effects,
    compute_stats,
    format_number,
    rarity_style,
)
from forsaken.stats.effects import STAT_MAP, apply_stat_effect

__all__ = [
    "STAT_MAP",
    "active_effects",
    "apply_stat_effect",
    "compute_stats",
    "format_number",
    "rarity_style",
]
