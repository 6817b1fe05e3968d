"""Apply named stat effects onto a mutable stat bag."""

from __future__ import annotations

from forsaken.domain.enums import EffectKind
from forsaken.domain.models import CharacterStats, ItemEffect

# Effect names as authored in item editors, mapped onto stat fields.
STAT_MAP: dict[str, str] = {
    "health": "max_health",
    "armor": "armor",
    "damage": "damage",
    "criticalChance": "critical_chance",
    "criticalDamage": "critical_damage",
    "movementSpeed": "movement_speed",
    "jumpHeight": "jump_height",
    "lifesteal": "lifesteal",
}


def stat_field_for(effect_name: str) -> str | None:
    return STAT_MAP.get(effect_name)


def apply_stat_effect(stats: CharacterStats, effect: ItemEffect) -> None:
    if effect.kind != EffectKind.STAT:
        return
    field_name = stat_field_for(effect.name)
    if field_name is None:
        return
    current = getattr(stats, field_name)
    if isinstance(current, (int, float)) and not isinstance(current, bool):
        setattr(stats, field_name, current + effect.value)
