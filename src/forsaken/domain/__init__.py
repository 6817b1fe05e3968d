"""Stat model: characters, equipment, enemies, biomes and weather."""

from forsaken.domain.enums import (
    ArmorSlot,
    EffectKind,
    EffectTrigger,
    EnemySize,
    ItemType,
    Rarity,
    SpawnTime,
    TimeOfDay,
    WeaponType,
)
from forsaken.domain.models import (
    Accessory,
    Armor,
    ArmorLoadout,
    Biome,
    Character,
    CharacterStats,
    Enemy,
    EnemyInstance,
    Equipment,
    ItemEffect,
    Loadout,
    LootEntry,
    LootQuantity,
    SpawnConditions,
    Weapon,
    Weather,
)

__all__ = [
    "Accessory",
    "Armor",
    "ArmorLoadout",
    "ArmorSlot",
    "Biome",
    "Character",
    "CharacterStats",
    "EffectKind",
    "EffectTrigger",
    "Enemy",
    "EnemyInstance",
    "EnemySize",
    "Equipment",
    "ItemEffect",
    "ItemType",
    "Loadout",
    "LootEntry",
    "LootQuantity",
    "Rarity",
    "SpawnConditions",
    "SpawnTime",
    "TimeOfDay",
    "Weapon",
    "WeaponType",
    "Weather",
]
