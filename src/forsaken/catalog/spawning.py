"""Spawn eligibility rules over the bestiary."""

from __future__ import annotations

from forsaken.catalog.loader import Catalog
from forsaken.domain.enums import TimeOfDay
from forsaken.domain.models import Enemy


def is_spawn_eligible(enemy: Enemy, biome_id: str, time_of_day: TimeOfDay) -> bool:
    conditions = enemy.spawn_conditions
    # Weather whitelists are recorded on the template but not used as a filter.
    return biome_id in conditions.biomes and conditions.time_of_day.allows(time_of_day)


def eligible_enemies(
    catalog: Catalog, biome_id: str, time_of_day: TimeOfDay
) -> list[Enemy]:
    return [
        enemy
        for enemy in catalog.enemies
        if is_spawn_eligible(enemy, biome_id, time_of_day)
    ]
