"""Derive final combat stats from base stats and the equipped loadout."""

from __future__ import annotations

from forsaken.domain.enums import Rarity
from forsaken.domain.models import Character, CharacterStats, ItemBase, ItemEffect
from forsaken.stats.effects import apply_stat_effect


def _apply_item_effects(stats: CharacterStats, item: ItemBase) -> None:
    for effect in item.effects:
        apply_stat_effect(stats, effect)


def compute_stats(character: Character) -> CharacterStats:
    """Return a fresh :class:`CharacterStats` for *character*.

    Weapons add their damage and crit chance, armor adds its armor value,
    accessories count only through effects. Every contribution is additive;
    nothing is clamped. The character itself is left untouched.
    """
    stats = character.base_stats.model_copy(deep=True)
    loadout = character.equipment

    for weapon in loadout.weapons:
        if weapon is None:
            continue
        stats.damage += weapon.damage
        stats.critical_chance += weapon.crit_chance
        _apply_item_effects(stats, weapon)

    for armor in loadout.armor.in_order():
        if armor is None:
            continue
        stats.armor += armor.armor_value
        _apply_item_effects(stats, armor)

    for accessory in loadout.accessories:
        if accessory is None:
            continue
        _apply_item_effects(stats, accessory)

    return stats


def active_effects(character: Character) -> list[ItemEffect]:
    effects: list[ItemEffect] = []
    for item in character.equipment.equipped_items():
        effects.extend(item.effects)
    return effects


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


_RARITY_STYLES = {
    Rarity.COMMON: "grey62",
    Rarity.UNCOMMON: "green",
    Rarity.RARE: "dodger_blue1",
    Rarity.EPIC: "medium_purple",
    Rarity.LEGENDARY: "dark_orange",
    Rarity.MYTHIC: "red",
}


def rarity_style(rarity: Rarity | str) -> str:
    try:
        return _RARITY_STYLES[Rarity(rarity)]
    except ValueError:
        return _RARITY_STYLES[Rarity.COMMON]
