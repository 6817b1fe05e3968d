"""Single-player session tying the character, catalog and encounter together."""

from __future__ import annotations

from collections import deque
from typing import Callable

from forsaken.catalog.loader import Catalog
from forsaken.character.loadout import SlotRef, create_default_character, equip, unequip
from forsaken.config import DEFAULT_SETTINGS, EncounterSettings
from forsaken.domain.models import (
    Accessory,
    Armor,
    Character,
    CharacterStats,
    Enemy,
    ItemEffect,
    Weapon,
)
from forsaken.encounter import simulator
from forsaken.encounter.results import EncounterResult
from forsaken.encounter.state import EncounterState, new_encounter_state
from forsaken.stats.aggregator import active_effects, compute_stats
from forsaken.util.clock import now_ms
from forsaken.util.rng import Rng

LOG_LIMIT = 50


class EncounterSession:
    """Owns the current snapshots and swaps them whole after each transition.

    The session never runs a timer itself. Whoever embeds it calls
    :meth:`tick` every ``settings.spawn_check_interval`` seconds while
    :attr:`ticking` is true.
    """

    def __init__(
        self,
        catalog: Catalog,
        settings: EncounterSettings = DEFAULT_SETTINGS,
        rng: Rng | None = None,
        clock: Callable[[], int] = now_ms,
        character: Character | None = None,
    ) -> None:
        self.catalog = catalog
        self.settings = settings
        self.rng = rng or Rng()
        self.clock = clock
        self.character = character or create_default_character()
        self.state: EncounterState = new_encounter_state(catalog, settings)
        self.log: deque[str] = deque(maxlen=LOG_LIMIT)

    @property
    def ticking(self) -> bool:
        return self.state.has_biome

    @property
    def stats(self) -> CharacterStats:
        return compute_stats(self.character)

    @property
    def effects(self) -> list[ItemEffect]:
        return active_effects(self.character)

    def seconds_until_spawn(self) -> int:
        return simulator.seconds_until_spawn(self.state, self.settings)

    def _commit(self, result: EncounterResult) -> EncounterResult:
        self.state = result.state
        if result.character is not None:
            self.character = result.character
        if result.summary:
            self.log.append(result.summary)
        self.log.extend(result.notes)
        return result

    def teleport(self) -> EncounterResult:
        return self._commit(simulator.teleport(self.state, self.rng, self.clock()))

    def leave_biome(self) -> EncounterResult:
        return self._commit(simulator.leave_biome(self.state))

    def tick(self) -> EncounterResult:
        return self._commit(
            simulator.spawn_tick(
                self.state, self.catalog, self.rng, self.clock(), self.settings
            )
        )

    def attack(self, instance_id: str) -> EncounterResult:
        return self._commit(
            simulator.attack(
                self.state,
                self.character,
                instance_id,
                self.rng,
                self.clock(),
                self.settings,
            )
        )

    def toggle_time(self) -> EncounterResult:
        return self._commit(simulator.toggle_time(self.state))

    def change_weather(self) -> EncounterResult:
        return self._commit(simulator.change_weather(self.state, self.catalog, self.rng))

    def equip(self, item: Weapon | Armor | Accessory, slot: SlotRef) -> Character:
        self.character = equip(self.character, item, slot)
        return self.character

    def unequip(self, slot: SlotRef) -> Character:
        self.character = unequip(self.character, slot)
        return self.character

    def update_bestiary(self, enemies: list[Enemy]) -> None:
        self.catalog = self.catalog.with_enemies(enemies)
