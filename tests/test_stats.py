import pytest

from forsaken.character import SlotRef, equip
from forsaken.domain import Accessory, Armor, ArmorSlot, CharacterStats, ItemEffect, Weapon
from forsaken.stats import (
    active_effects,
    apply_stat_effect,
    compute_stats,
    format_number,
    rarity_style,
)


def _effect(name, value, kind="stat", effect_id=None):
    return ItemEffect(id=effect_id or f"fx-{name}", name=name, kind=kind, value=value)


def test_no_equipment_matches_base_stats(character):
    assert compute_stats(character) == character.base_stats


def test_compute_stats_returns_fresh_value(character):
    stats = compute_stats(character)
    stats.damage += 100
    assert character.base_stats.damage == 10


def test_compute_stats_does_not_mutate_character(character):
    sword = Weapon(id="w1", name="Sword", damage=7, effects=[_effect("damage", 3)])
    helm = Armor(id="a1", name="Helm", armor_value=4)
    equipped = equip(equip(character, sword, SlotRef.weapon(0)), helm, SlotRef.armor("helmet"))
    before = equipped.model_copy(deep=True)
    compute_stats(equipped)
    compute_stats(equipped)
    assert equipped == before


def test_weapon_damage_is_added_once_per_slot(character):
    base = character.base_stats.damage
    sword = Weapon(id="w1", name="Sword", damage=7)
    one = equip(character, sword, SlotRef.weapon(0))
    assert compute_stats(one).damage == base + 7

    three = character
    for index in range(3):
        three = equip(three, sword, SlotRef.weapon(index))
    assert compute_stats(three).damage == base + 21


def test_weapon_crit_chance_adds_to_critical_chance(character):
    dagger = Weapon(id="w1", name="Dagger", crit_chance=0.1)
    stats = compute_stats(equip(character, dagger, SlotRef.weapon(1)))
    assert stats.critical_chance == pytest.approx(0.15)


def test_armor_value_and_effects(character):
    plate = Armor(
        id="a1",
        name="Plate",
        armor_value=12,
        effects=[_effect("health", 20), _effect("movementSpeed", -10)],
    )
    stats = compute_stats(equip(character, plate, SlotRef.armor(ArmorSlot.CHESTPLATE)))
    assert stats.armor == 12
    assert stats.max_health == 120
    assert stats.health == 100
    assert stats.movement_speed == 90


def test_accessory_without_effects_changes_nothing(character):
    ring = Accessory(id="r1", name="Plain Ring")
    equipped = equip(character, ring, SlotRef.accessory(4))
    assert compute_stats(equipped) == character.base_stats


def test_accessory_contributes_through_effects(character):
    charm = Accessory(
        id="r1",
        name="Vampire Charm",
        effects=[_effect("lifesteal", 0.05), _effect("jumpHeight", 25)],
    )
    stats = compute_stats(equip(character, charm, SlotRef.accessory(0)))
    assert stats.lifesteal == pytest.approx(0.05)
    assert stats.jump_height == 125


def test_non_stat_effects_are_inert(character):
    ring = Accessory(
        id="r1",
        name="Ring",
        effects=[
            _effect("damage", 50, kind="passive"),
            _effect("damage", 50, kind="active"),
            _effect("damage", 50, kind="conditional"),
        ],
    )
    assert compute_stats(equip(character, ring, SlotRef.accessory(0))).damage == 10


def test_apply_stat_effect_ignores_unknown_names():
    stats = CharacterStats()
    apply_stat_effect(stats, _effect("charisma", 5))
    apply_stat_effect(stats, _effect("gold", 5))
    assert stats == CharacterStats()


def test_apply_stat_effect_ignores_field_names():
    """Only authored effect names count; stat field spellings do not."""

    stats = CharacterStats()
    apply_stat_effect(stats, _effect("max_health", 50))
    apply_stat_effect(stats, _effect("critical_damage", 0.5))
    apply_stat_effect(stats, _effect("movement_speed", 10))
    assert stats.max_health == 100
    assert stats.critical_damage == pytest.approx(1.5)
    assert stats == CharacterStats()

    apply_stat_effect(stats, _effect("criticalDamage", 0.5))
    assert stats.critical_damage == pytest.approx(2.0)


def test_active_effects_order_is_weapons_armor_accessories(character):
    """Flattened effects follow slot order across categories."""

    ring = Accessory(id="r", name="Ring", effects=[_effect("armor", 1, effect_id="ring")])
    legs = Armor(id="l", name="Legs", effects=[_effect("armor", 1, effect_id="legs")])
    helm = Armor(id="h", name="Helm", effects=[_effect("armor", 1, effect_id="helm")])
    bow = Weapon(
        id="b",
        name="Bow",
        effects=[_effect("damage", 1, effect_id="bow-1"), _effect("damage", 1, effect_id="bow-2")],
    )
    equipped = character
    equipped = equip(equipped, ring, SlotRef.accessory(2))
    equipped = equip(equipped, legs, SlotRef.armor("leggings"))
    equipped = equip(equipped, helm, SlotRef.armor("helmet"))
    equipped = equip(equipped, bow, SlotRef.weapon(2))
    ids = [effect.id for effect in active_effects(equipped)]
    assert ids == ["bow-1", "bow-2", "helm", "legs", "ring"]


def test_format_number():
    assert format_number(100.0) == "100"
    assert format_number(-3) == "-3"
    assert format_number(0.05) == "0.05"
    assert format_number(1.5) == "1.50"
    assert format_number(2 / 3) == "0.67"


def test_rarity_style_falls_back_to_common():
    assert rarity_style("mythic") == "red"
    assert rarity_style("unheard-of") == rarity_style("common")
