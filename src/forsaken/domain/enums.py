"""Shared enums for the stat model, catalog and encounters."""

from __future__ import annotations

from enum import StrEnum


class Rarity(StrEnum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    MYTHIC = "mythic"

    @property
    def rank(self) -> int:
        return list(Rarity).index(self)


class EffectKind(StrEnum):
    STAT = "stat"
    PASSIVE = "passive"
    ACTIVE = "active"
    CONDITIONAL = "conditional"


class EffectTrigger(StrEnum):
    ON_HIT = "on_hit"
    ON_CRIT = "on_crit"
    ON_DAMAGE = "on_damage"
    ON_IDLE = "on_idle"
    ON_MOVE = "on_move"
    ON_TIME = "on_time"


class ItemType(StrEnum):
    WEAPON = "weapon"
    ARMOR = "armor"
    ACCESSORY = "accessory"


class WeaponType(StrEnum):
    SWORD = "sword"
    BOW = "bow"
    STAFF = "staff"
    DAGGER = "dagger"
    HAMMER = "hammer"
    SPEAR = "spear"
    CUSTOM = "custom"


class ArmorSlot(StrEnum):
    HELMET = "helmet"
    CHESTPLATE = "chestplate"
    LEGGINGS = "leggings"


class EnemySize(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    BOSS = "boss"


class TimeOfDay(StrEnum):
    DAY = "day"
    NIGHT = "night"

    def flipped(self) -> "TimeOfDay":
        return TimeOfDay.NIGHT if self == TimeOfDay.DAY else TimeOfDay.DAY


class SpawnTime(StrEnum):
    DAY = "day"
    NIGHT = "night"
    ANY = "any"

    def allows(self, time_of_day: TimeOfDay) -> bool:
        return self == SpawnTime.ANY or self.value == time_of_day.value
