"""Encounter transitions: travel, spawning, attacks, time and weather.

Every function takes an :class:`EncounterState` snapshot and returns an
:class:`EncounterResult` carrying the next snapshot. Nothing here reads the
wall clock or a global RNG; callers pass ``now`` (milliseconds) and an
:class:`Rng`. Blocked or degenerate requests come back as ``NO_EFFECT``
results holding the unchanged state.
"""

from __future__ import annotations

from dataclasses import replace
import logging

from forsaken.catalog.loader import Catalog
from forsaken.catalog.spawning import eligible_enemies
from forsaken.character.loadout import award_gold
from forsaken.config import DEFAULT_SETTINGS, EncounterSettings
from forsaken.domain.models import Character, Enemy, EnemyInstance
from forsaken.encounter.results import ActionOutcome, EncounterAction, EncounterResult
from forsaken.encounter.state import EncounterState
from forsaken.stats.aggregator import compute_stats
from forsaken.util.rng import Rng

logger = logging.getLogger(__name__)


def _no_effect(
    action: EncounterAction,
    state: EncounterState,
    summary: str,
    character: Character | None = None,
) -> EncounterResult:
    logger.debug("%s had no effect: %s", action.value, summary)
    return EncounterResult(
        action=action,
        outcome=ActionOutcome.NO_EFFECT,
        summary=summary,
        state=state,
        character=character,
    )


def _instance_id(template: Enemy, now: int, state: EncounterState) -> str:
    base = f"{template.id}-{now}"
    taken = {enemy.id for enemy in state.active_enemies}
    candidate = base
    suffix = 1
    while candidate in taken:
        suffix += 1
        candidate = f"{base}-{suffix}"
    return candidate


def spawn_instance(template: Enemy, instance_id: str) -> EnemyInstance:
    return EnemyInstance(id=instance_id, template=template, health=template.health)


def teleport(state: EncounterState, rng: Rng, now: int) -> EncounterResult:
    """Travel to a biome drawn by rarity tickets; abandons every active enemy."""
    biome = rng.ticket_draw((biome, biome.rarity) for biome in state.discovered_biomes)
    if biome is None:
        return _no_effect(EncounterAction.TELEPORT, state, "No biome to travel to.")
    notes: list[str] = []
    if state.active_enemies:
        notes.append(f"{len(state.active_enemies)} enemies left behind.")
    next_state = replace(
        state,
        current_biome=biome,
        active_enemies=(),
        spawn_timer=0,
        last_action_time=now,
    )
    logger.info("Teleported to %s", biome.id)
    return EncounterResult(
        action=EncounterAction.TELEPORT,
        outcome=ActionOutcome.SUCCESS,
        summary=f"You arrive in {biome.name}.",
        state=next_state,
        notes=notes,
    )


def leave_biome(state: EncounterState) -> EncounterResult:
    if state.current_biome is None:
        return _no_effect(EncounterAction.LEAVE_BIOME, state, "You are not in a biome.")
    next_state = replace(state, current_biome=None, active_enemies=(), spawn_timer=0)
    logger.info("Left %s", state.current_biome.id)
    return EncounterResult(
        action=EncounterAction.LEAVE_BIOME,
        outcome=ActionOutcome.SUCCESS,
        summary=f"You leave {state.current_biome.name}.",
        state=next_state,
    )


def attempt_spawn(
    state: EncounterState, catalog: Catalog, rng: Rng, now: int
) -> EncounterResult:
    if state.current_biome is None:
        return _no_effect(EncounterAction.SPAWN, state, "No biome selected.")
    if state.at_capacity:
        return _no_effect(EncounterAction.SPAWN, state, "Too many enemies already.")
    if (
        state.last_spawn_time is not None
        and now - state.last_spawn_time < state.spawn_cooldown
    ):
        return _no_effect(EncounterAction.SPAWN, state, "Spawning is on cooldown.")
    candidates = eligible_enemies(catalog, state.current_biome.id, state.time_of_day)
    if not candidates:
        return _no_effect(EncounterAction.SPAWN, state, "Nothing stirs here.")
    template = rng.choice(candidates)
    instance = spawn_instance(template, _instance_id(template, now, state))
    next_state = replace(
        state,
        active_enemies=state.active_enemies + (instance,),
        last_spawn_time=now,
    )
    logger.info("Spawned %s in %s", instance.id, state.current_biome.id)
    return EncounterResult(
        action=EncounterAction.SPAWN,
        outcome=ActionOutcome.SUCCESS,
        summary=f"A {template.name} appears!",
        state=next_state,
        spawned=instance,
    )


def spawn_tick(
    state: EncounterState,
    catalog: Catalog,
    rng: Rng,
    now: int,
    settings: EncounterSettings = DEFAULT_SETTINGS,
) -> EncounterResult:
    """Advance the spawn counter by one tick and spawn once it hits the threshold.

    The counter resets after every attempt, successful or not. While the
    biome is full the counter keeps climbing, so the next free slot is
    filled on the following tick.
    """
    if state.current_biome is None:
        return _no_effect(EncounterAction.SPAWN_TICK, state, "No biome selected.")
    elapsed = state.spawn_timer + 1
    if elapsed < settings.spawn_threshold or state.at_capacity:
        return EncounterResult(
            action=EncounterAction.SPAWN_TICK,
            outcome=ActionOutcome.NO_EFFECT,
            summary="",
            state=replace(state, spawn_timer=elapsed),
        )
    attempt = attempt_spawn(replace(state, spawn_timer=0), catalog, rng, now)
    return replace(attempt, action=EncounterAction.SPAWN_TICK)


def seconds_until_spawn(
    state: EncounterState, settings: EncounterSettings = DEFAULT_SETTINGS
) -> int:
    return max(0, settings.spawn_threshold - state.spawn_timer)


def attack(
    state: EncounterState,
    character: Character,
    instance_id: str,
    rng: Rng,
    now: int,
    settings: EncounterSettings = DEFAULT_SETTINGS,
) -> EncounterResult:
    if (
        state.last_action_time is not None
        and now - state.last_action_time < state.attack_cooldown
    ):
        return _no_effect(
            EncounterAction.ATTACK, state, "You are still recovering.", character
        )
    target = state.enemy(instance_id)
    if target is None:
        return _no_effect(
            EncounterAction.ATTACK, state, f"No enemy {instance_id} here.", character
        )

    damage = compute_stats(character).damage
    new_health = max(0, target.health - damage)

    if new_health <= 0:
        gold = rng.randint(settings.gold_reward_min, settings.gold_reward_max)
        defeated = target.model_copy(update={"health": 0})
        remaining = tuple(enemy for enemy in state.active_enemies if enemy.id != instance_id)
        next_state = replace(state, active_enemies=remaining, last_action_time=now)
        logger.info("%s defeated; awarded %d gold", instance_id, gold)
        return EncounterResult(
            action=EncounterAction.ATTACK,
            outcome=ActionOutcome.SUCCESS,
            summary=f"{target.name} is defeated! You loot {gold} gold.",
            state=next_state,
            character=award_gold(character, gold),
            defeated=defeated,
            damage_dealt=damage,
            gold_awarded=gold,
        )

    wounded = target.model_copy(update={"health": new_health})
    enemies = tuple(
        wounded if enemy.id == instance_id else enemy for enemy in state.active_enemies
    )
    next_state = replace(state, active_enemies=enemies, last_action_time=now)
    return EncounterResult(
        action=EncounterAction.ATTACK,
        outcome=ActionOutcome.SUCCESS,
        summary=f"You hit {target.name} for {damage:g}.",
        state=next_state,
        character=character,
        damage_dealt=damage,
    )


def toggle_time(state: EncounterState) -> EncounterResult:
    """Flip day and night, dropping enemies that cannot exist at the new time."""
    new_time = state.time_of_day.flipped()
    kept = tuple(enemy for enemy in state.active_enemies if enemy.spawn_time.allows(new_time))
    kept_ids = {enemy.id for enemy in kept}
    vanished = [enemy for enemy in state.active_enemies if enemy.id not in kept_ids]
    notes = [f"{enemy.name} fades away." for enemy in vanished]
    next_state = replace(state, time_of_day=new_time, active_enemies=kept)
    logger.info("Time of day is now %s", new_time.value)
    return EncounterResult(
        action=EncounterAction.TOGGLE_TIME,
        outcome=ActionOutcome.SUCCESS,
        summary=f"It is now {new_time.value}.",
        state=next_state,
        notes=notes,
    )


def change_weather(state: EncounterState, catalog: Catalog, rng: Rng) -> EncounterResult:
    if not catalog.weather:
        return _no_effect(EncounterAction.CHANGE_WEATHER, state, "No weather defined.")
    weather = rng.choice(catalog.weather)
    logger.info("Weather changed to %s", weather.id)
    return EncounterResult(
        action=EncounterAction.CHANGE_WEATHER,
        outcome=ActionOutcome.SUCCESS,
        summary=f"The weather turns: {weather.name}.",
        state=replace(state, current_weather=weather),
    )
