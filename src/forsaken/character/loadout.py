"""Character factory and equip/unequip transitions."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from forsaken.domain.enums import ArmorSlot, ItemType
from forsaken.domain.models import (
    ACCESSORY_SLOTS,
    WEAPON_SLOTS,
    Accessory,
    Armor,
    Character,
    CharacterStats,
    Loadout,
    Weapon,
)
from forsaken.domain.rules import slot_in_range

logger = logging.getLogger(__name__)

DEFAULT_CHARACTER_ID = "player-1"
DEFAULT_CHARACTER_NAME = "Forsaken Warrior"


def create_default_character(
    character_id: str = DEFAULT_CHARACTER_ID,
    name: str = DEFAULT_CHARACTER_NAME,
) -> Character:
    return Character(
        id=character_id,
        name=name,
        level=1,
        experience=0,
        base_stats=CharacterStats(),
        equipment=Loadout(),
    )


@dataclass(frozen=True)
class SlotRef:
    """Points at one loadout slot: a weapon index, an armor slot or an accessory index."""

    category: ItemType
    index: int | ArmorSlot

    @classmethod
    def weapon(cls, index: int) -> "SlotRef":
        return cls(ItemType.WEAPON, index)

    @classmethod
    def armor(cls, slot: ArmorSlot | str) -> "SlotRef":
        return cls(ItemType.ARMOR, ArmorSlot(slot))

    @classmethod
    def accessory(cls, index: int) -> "SlotRef":
        return cls(ItemType.ACCESSORY, index)

    def is_valid(self) -> bool:
        if self.category == ItemType.WEAPON:
            return slot_in_range(self.index, WEAPON_SLOTS)
        if self.category == ItemType.ACCESSORY:
            return slot_in_range(self.index, ACCESSORY_SLOTS)
        return self.index in set(ArmorSlot)

    def label(self) -> str:
        if self.category == ItemType.ARMOR:
            return str(self.index).title()
        if isinstance(self.index, int):
            return f"{self.category.value.title()} {self.index + 1}"
        return f"{self.category.value.title()} {self.index}"


def all_slots() -> list[SlotRef]:
    slots = [SlotRef.weapon(index) for index in range(WEAPON_SLOTS)]
    slots.extend(SlotRef.armor(slot) for slot in ArmorSlot)
    slots.extend(SlotRef.accessory(index) for index in range(ACCESSORY_SLOTS))
    return slots


def can_equip(item: Weapon | Armor | Accessory, slot: SlotRef) -> bool:
    return slot.is_valid() and item.type == slot.category.value


def equip(
    character: Character,
    item: Weapon | Armor | Accessory,
    slot: SlotRef,
) -> Character:
    """Return a copy of *character* with *item* placed into *slot*.

    Whatever occupied the slot is dropped. A category mismatch or an
    out-of-range slot leaves the character unchanged.
    """
    if not can_equip(item, slot):
        logger.debug(
            "Ignoring equip of %s item %s into %s", item.type, item.id, slot.label()
        )
        return character
    updated = character.model_copy(deep=True)
    loadout = updated.equipment
    if isinstance(item, Weapon):
        loadout.weapons[int(slot.index)] = item
    elif isinstance(item, Armor):
        armor_slot = ArmorSlot(slot.index)
        setattr(loadout.armor, armor_slot.value, item.model_copy(update={"slot": armor_slot}))
    else:
        index = int(slot.index)
        loadout.accessories[index] = item.model_copy(update={"slot": index + 1})
    return updated


def unequip(character: Character, slot: SlotRef) -> Character:
    if not slot.is_valid():
        return character
    updated = character.model_copy(deep=True)
    loadout = updated.equipment
    if slot.category == ItemType.WEAPON:
        loadout.weapons[int(slot.index)] = None
    elif slot.category == ItemType.ARMOR:
        setattr(loadout.armor, ArmorSlot(slot.index).value, None)
    else:
        loadout.accessories[int(slot.index)] = None
    return updated


def item_in_slot(character: Character, slot: SlotRef) -> Weapon | Armor | Accessory | None:
    if not slot.is_valid():
        return None
    loadout = character.equipment
    if slot.category == ItemType.WEAPON:
        return loadout.weapons[int(slot.index)]
    if slot.category == ItemType.ARMOR:
        return loadout.armor.get(ArmorSlot(slot.index))
    return loadout.accessories[int(slot.index)]


def award_gold(character: Character, amount: float) -> Character:
    updated = character.model_copy(deep=True)
    updated.base_stats.gold += amount
    return updated
