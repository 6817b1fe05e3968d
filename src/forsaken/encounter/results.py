"""Result structures for encounter transitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from forsaken.domain.models import Character, EnemyInstance
from forsaken.encounter.state import EncounterState


class EncounterAction(StrEnum):
    TELEPORT = "teleport"
    SPAWN_TICK = "spawn_tick"
    SPAWN = "spawn"
    ATTACK = "attack"
    TOGGLE_TIME = "toggle_time"
    CHANGE_WEATHER = "change_weather"
    LEAVE_BIOME = "leave_biome"


class ActionOutcome(StrEnum):
    SUCCESS = "success"
    NO_EFFECT = "no_effect"


@dataclass(frozen=True)
class EncounterResult:
    action: EncounterAction
    outcome: ActionOutcome
    summary: str
    state: EncounterState
    character: Character | None = None
    spawned: EnemyInstance | None = None
    defeated: EnemyInstance | None = None
    damage_dealt: float = 0.0
    gold_awarded: int = 0
    notes: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.outcome == ActionOutcome.SUCCESS
