"""Encounter simulation: biome travel, timed spawns and combat."""

from forsaken.encounter.results import ActionOutcome, EncounterAction, EncounterResult
from forsaken.encounter.session import EncounterSession
from forsaken.encounter.simulator import (
    attack,
    attempt_spawn,
    change_weather,
    leave_biome,
    seconds_until_spawn,
    spawn_tick,
    teleport,
    toggle_time,
)
from forsaken.encounter.state import EncounterState, new_encounter_state

__all__ = [
    "ActionOutcome",
    "EncounterAction",
    "EncounterResult",
    "EncounterSession",
    "EncounterState",
    "attack",
    "attempt_spawn",
    "change_weather",
    "leave_biome",
    "new_encounter_state",
    "seconds_until_spawn",
    "spawn_tick",
    "teleport",
    "toggle_time",
]
