"""Character creation and loadout management."""

from forsaken.character.loadout import (
    SlotRef,
    all_slots,
    award_gold,
    can_equip,
    create_default_character,
    equip,
    item_in_slot,
    unequip,
)

__all__ = [
    "SlotRef",
    "all_slots",
    "award_gold",
    "can_equip",
    "create_default_character",
    "equip",
    "item_in_slot",
    "unequip",
]
