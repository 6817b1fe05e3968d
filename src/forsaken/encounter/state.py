"""Immutable encounter state snapshots."""

from __future__ import annotations

from dataclasses import dataclass

from forsaken.catalog.loader import Catalog
from forsaken.config import DEFAULT_SETTINGS, EncounterSettings
from forsaken.domain.enums import TimeOfDay
from forsaken.domain.models import Biome, EnemyInstance, Weather


@dataclass(frozen=True)
class EncounterState:
    current_biome: Biome | None = None
    current_weather: Weather | None = None
    time_of_day: TimeOfDay = TimeOfDay.DAY
    active_enemies: tuple[EnemyInstance, ...] = ()
    discovered_biomes: tuple[Biome, ...] = ()
    last_spawn_time: int | None = None
    spawn_cooldown: int = DEFAULT_SETTINGS.spawn_cooldown_ms
    attack_cooldown: int = DEFAULT_SETTINGS.attack_cooldown_ms
    max_active_enemies: int = DEFAULT_SETTINGS.max_active_enemies
    spawn_timer: int = 0
    last_action_time: int | None = None

    @property
    def has_biome(self) -> bool:
        return self.current_biome is not None

    @property
    def at_capacity(self) -> bool:
        return len(self.active_enemies) >= self.max_active_enemies

    def enemy(self, instance_id: str) -> EnemyInstance | None:
        return next(
            (enemy for enemy in self.active_enemies if enemy.id == instance_id),
            None,
        )


def new_encounter_state(
    catalog: Catalog,
    settings: EncounterSettings = DEFAULT_SETTINGS,
    time_of_day: TimeOfDay = TimeOfDay.DAY,
) -> EncounterState:
    return EncounterState(
        time_of_day=time_of_day,
        discovered_biomes=tuple(catalog.biomes),
        spawn_cooldown=settings.spawn_cooldown_ms,
        attack_cooldown=settings.attack_cooldown_ms,
        max_active_enemies=settings.max_active_enemies,
    )
