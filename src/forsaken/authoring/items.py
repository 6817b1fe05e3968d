"""Build items and their effects from editor input."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from forsaken.authoring.validation import AuthoringError, require_text, unique_id
from forsaken.domain.enums import (
    ArmorSlot,
    EffectKind,
    EffectTrigger,
    ItemType,
    Rarity,
    WeaponType,
)
from forsaken.domain.models import Accessory, Armor, ItemEffect, Weapon

logger = logging.getLogger(__name__)

WEAPON_DEFAULTS = {
    "weapon_type": WeaponType.SWORD,
    "damage": 10,
    "crit_chance": 0.05,
    "attack_speed": 1.0,
    "range": 100,
    "projectile": False,
}
ARMOR_DEFAULTS = {"slot": ArmorSlot.HELMET, "armor_value": 5}
ACCESSORY_DEFAULTS = {"slot": 1}


class EffectDraft(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    name: str = ""
    description: str = ""
    kind: EffectKind = EffectKind.STAT
    value: float = 0
    trigger: Optional[EffectTrigger] = None
    duration: Optional[float] = None
    cooldown: Optional[float] = None
    conditions: List[str] = Field(default_factory=list)


class ItemDraft(BaseModel):
    """Editor input for one item; ``overrides`` replace the kind defaults."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    type: ItemType
    name: str = ""
    description: str = ""
    rarity: Rarity = Rarity.COMMON
    value: float = 0
    effects: List[ItemEffect] = Field(default_factory=list)
    overrides: dict[str, Any] = Field(default_factory=dict)

    def with_effect(self, draft: EffectDraft, now: int) -> "ItemDraft":
        taken = [effect.id for effect in self.effects]
        effect = build_effect(draft, now)
        effect = effect.model_copy(update={"id": unique_id(effect.id, taken)})
        return self.model_copy(update={"effects": [*self.effects, effect]})

    def without_effect(self, index: int) -> "ItemDraft":
        effects = [effect for idx, effect in enumerate(self.effects) if idx != index]
        return self.model_copy(update={"effects": effects})


def build_effect(draft: EffectDraft, now: int) -> ItemEffect:
    return ItemEffect(
        id=f"effect-{now}",
        name=require_text(draft.name, "Effect name"),
        description=require_text(draft.description, "Effect description"),
        kind=draft.kind,
        trigger=draft.trigger,
        value=draft.value,
        duration=draft.duration,
        cooldown=draft.cooldown,
        conditions=list(draft.conditions),
    )


def build_item(draft: ItemDraft, now: int) -> Weapon | Armor | Accessory:
    """Turn *draft* into a concrete item with id ``"<type>-<now>"``."""
    base = {
        "id": f"{draft.type.value}-{now}",
        "name": require_text(draft.name, "Item name"),
        "description": require_text(draft.description, "Item description"),
        "rarity": draft.rarity,
        "value": draft.value,
        "effects": list(draft.effects),
    }
    if draft.type == ItemType.WEAPON:
        model, defaults = Weapon, WEAPON_DEFAULTS
    elif draft.type == ItemType.ARMOR:
        model, defaults = Armor, ARMOR_DEFAULTS
    else:
        model, defaults = Accessory, ACCESSORY_DEFAULTS
    unknown = sorted(set(draft.overrides) - set(defaults))
    if unknown:
        raise AuthoringError(
            f"Unsupported {draft.type.value} field(s): {', '.join(unknown)}"
        )
    try:
        return model.model_validate({**base, **defaults, **draft.overrides})
    except ValidationError as exc:
        raise AuthoringError(f"Invalid {draft.type.value}: {exc}") from exc


def save_item(existing: list, item: Weapon | Armor | Accessory) -> list:
    updated = list(existing)
    for index, current in enumerate(updated):
        if current.id == item.id:
            updated[index] = item
            logger.info("Updated item %s", item.id)
            return updated
    updated.append(item)
    logger.info("Created item %s", item.id)
    return updated


def delete_item(existing: list, item_id: str) -> list:
    return [item for item in existing if item.id != item_id]
