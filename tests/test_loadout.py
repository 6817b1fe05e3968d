from forsaken.character import (
    SlotRef,
    all_slots,
    award_gold,
    can_equip,
    create_default_character,
    equip,
    item_in_slot,
    unequip,
)
from forsaken.domain import Accessory, Armor, ArmorSlot, ItemType, Weapon


def test_default_character_has_empty_loadout():
    character = create_default_character()
    assert character.id == "player-1"
    assert character.name == "Forsaken Warrior"
    assert character.equipment.weapons == [None, None, None]
    assert character.equipment.accessories == [None] * 8
    assert character.equipment.armor.in_order() == [None, None, None]
    assert character.base_stats.critical_damage == 1.5
    assert set(character.base_stats.elemental_resistance) == {
        "fire",
        "ice",
        "lightning",
        "poison",
        "holy",
        "dark",
    }


def test_all_slots_covers_fourteen_slots():
    slots = all_slots()
    assert len(slots) == 14
    assert all(slot.is_valid() for slot in slots)


def test_equip_returns_new_character(character):
    sword = Weapon(id="w1", name="Sword", damage=5)
    equipped = equip(character, sword, SlotRef.weapon(1))
    assert equipped is not character
    assert character.equipment.weapons[1] is None
    assert item_in_slot(equipped, SlotRef.weapon(1)) == sword


def test_equip_overwrites_previous_occupant(character):
    first = Weapon(id="w1", name="Stick", damage=1)
    second = Weapon(id="w2", name="Sword", damage=5)
    equipped = equip(equip(character, first, SlotRef.weapon(0)), second, SlotRef.weapon(0))
    assert equipped.equipment.weapons[0].id == "w2"
    assert [w for w in equipped.equipment.weapons if w is not None] == [second]


def test_equip_records_armor_and_accessory_slot(character):
    armor = Armor(id="a1", name="Greaves", slot=ArmorSlot.HELMET)
    ring = Accessory(id="r1", name="Ring", slot=1)
    equipped = equip(character, armor, SlotRef.armor("leggings"))
    equipped = equip(equipped, ring, SlotRef.accessory(5))
    assert equipped.equipment.armor.leggings.slot == ArmorSlot.LEGGINGS
    assert equipped.equipment.armor.helmet is None
    assert equipped.equipment.accessories[5].slot == 6


def test_mismatched_equip_is_a_no_op(character):
    sword = Weapon(id="w1", name="Sword", damage=5)
    assert not can_equip(sword, SlotRef.armor("helmet"))
    assert equip(character, sword, SlotRef.armor("helmet")) == character
    assert equip(character, sword, SlotRef.accessory(0)) == character


def test_out_of_range_slot_is_a_no_op(character):
    sword = Weapon(id="w1", name="Sword", damage=5)
    assert not SlotRef.weapon(3).is_valid()
    assert equip(character, sword, SlotRef.weapon(3)) == character
    assert equip(character, sword, SlotRef(ItemType.WEAPON, -1)) == character
    assert unequip(character, SlotRef.accessory(8)) == character


def test_unequip_clears_slot(character):
    helm = Armor(id="a1", name="Helm", armor_value=3)
    equipped = equip(character, helm, SlotRef.armor(ArmorSlot.HELMET))
    cleared = unequip(equipped, SlotRef.armor(ArmorSlot.HELMET))
    assert cleared.equipment.armor.helmet is None
    assert equipped.equipment.armor.helmet is not None


def test_award_gold_leaves_original_untouched(character):
    richer = award_gold(character, 7)
    assert richer.base_stats.gold == 7
    assert character.base_stats.gold == 0


def test_slot_labels():
    assert SlotRef.weapon(0).label() == "Weapon 1"
    assert SlotRef.armor("chestplate").label() == "Chestplate"
    assert SlotRef.accessory(7).label() == "Accessory 8"
