"""Domain models for characters, equipment and the bestiary."""

from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from forsaken.domain.enums import (
    ArmorSlot,
    EffectKind,
    EffectTrigger,
    EnemySize,
    Rarity,
    SpawnTime,
    WeaponType,
)

WEAPON_SLOTS = 3
ACCESSORY_SLOTS = 8
DEFAULT_RESISTANCES = ("fire", "ice", "lightning", "poison", "holy", "dark")


class CharacterStats(BaseModel):
    """Flat bag of numeric combat attributes."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    health: float = 100
    max_health: float = 100
    armor: float = 0
    damage: float = 10
    critical_chance: float = 0.05
    critical_damage: float = 1.5
    movement_speed: float = 100
    jump_height: float = 100
    lifesteal: float = 0
    gold: float = 0
    elemental_resistance: Dict[str, float] = Field(
        default_factory=lambda: {name: 0.0 for name in DEFAULT_RESISTANCES}
    )


class ItemEffect(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    id: str
    name: str
    description: str = ""
    kind: EffectKind = EffectKind.STAT
    trigger: Optional[EffectTrigger] = None
    value: float = 0
    duration: Optional[float] = None
    cooldown: Optional[float] = None
    conditions: List[str] = Field(default_factory=list)


class ItemBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    id: str
    name: str
    description: str = ""
    image: Optional[str] = None
    rarity: Rarity = Rarity.COMMON
    value: float = 0
    effects: List[ItemEffect] = Field(default_factory=list)
    custom_stats: Dict[str, float] = Field(default_factory=dict)


class Weapon(ItemBase):
    type: Literal["weapon"] = "weapon"
    weapon_type: WeaponType = WeaponType.SWORD
    damage: float = 0
    crit_chance: float = 0
    attack_speed: float = 1.0
    range: float = 100
    projectile: bool = False
    elemental_damage: Dict[str, float] = Field(default_factory=dict)


class Armor(ItemBase):
    type: Literal["armor"] = "armor"
    slot: ArmorSlot = ArmorSlot.HELMET
    armor_value: float = 0
    set_name: Optional[str] = None
    set_bonus: List[ItemEffect] = Field(default_factory=list)


class Accessory(ItemBase):
    type: Literal["accessory"] = "accessory"
    slot: int = Field(default=1, ge=1, le=ACCESSORY_SLOTS)


Equipment = Annotated[Union[Weapon, Armor, Accessory], Field(discriminator="type")]


class ArmorLoadout(BaseModel):
    model_config = ConfigDict(extra="forbid")

    helmet: Optional[Armor] = None
    chestplate: Optional[Armor] = None
    leggings: Optional[Armor] = None

    def get(self, slot: ArmorSlot) -> Optional[Armor]:
        return getattr(self, ArmorSlot(slot).value)

    def in_order(self) -> list[Optional[Armor]]:
        return [self.get(slot) for slot in ArmorSlot]


class Loadout(BaseModel):
    """Fixed slot layout: three weapons, three armor pieces, eight accessories."""

    model_config = ConfigDict(extra="forbid")

    weapons: List[Optional[Weapon]] = Field(default_factory=lambda: [None] * WEAPON_SLOTS)
    armor: ArmorLoadout = Field(default_factory=ArmorLoadout)
    accessories: List[Optional[Accessory]] = Field(
        default_factory=lambda: [None] * ACCESSORY_SLOTS
    )

    @field_validator("weapons")
    @classmethod
    def _three_weapon_slots(cls, value: list) -> list:
        if len(value) != WEAPON_SLOTS:
            raise ValueError(f"expected {WEAPON_SLOTS} weapon slots, got {len(value)}")
        return value

    @field_validator("accessories")
    @classmethod
    def _eight_accessory_slots(cls, value: list) -> list:
        if len(value) != ACCESSORY_SLOTS:
            raise ValueError(
                f"expected {ACCESSORY_SLOTS} accessory slots, got {len(value)}"
            )
        return value

    def equipped_items(self) -> list[Weapon | Armor | Accessory]:
        items: list[Weapon | Armor | Accessory] = []
        items.extend(weapon for weapon in self.weapons if weapon is not None)
        items.extend(armor for armor in self.armor.in_order() if armor is not None)
        items.extend(acc for acc in self.accessories if acc is not None)
        return items


class Character(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    name: str
    level: int = 1
    experience: int = 0
    base_stats: CharacterStats = Field(default_factory=CharacterStats)
    equipment: Loadout = Field(default_factory=Loadout)


class LootQuantity(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    min: int = 1
    max: int = 1


class LootEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    item_id: str
    drop_chance: float = Field(default=1.0, ge=0, le=1)
    quantity: LootQuantity = Field(default_factory=LootQuantity)
    conditions: List[str] = Field(default_factory=list)


class SpawnConditions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    time_of_day: SpawnTime = SpawnTime.ANY
    weather: List[str] = Field(default_factory=list)
    biomes: List[str] = Field(default_factory=list)


class Enemy(BaseModel):
    """Bestiary template; spawned copies are :class:`EnemyInstance`."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    id: str
    name: str
    image: Optional[str] = None
    health: float = 100
    max_health: float = 100
    damage: float = 10
    armor: float = 0
    size: EnemySize = EnemySize.MEDIUM
    spawn_conditions: SpawnConditions = Field(default_factory=SpawnConditions)
    loot_table: List[LootEntry] = Field(default_factory=list)
    behavior: str = "aggressive"
    spawn_weight: float = 5


class EnemyInstance(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    template: Enemy
    health: float

    @property
    def template_id(self) -> str:
        return self.template.id

    @property
    def name(self) -> str:
        return self.template.name

    @property
    def max_health(self) -> float:
        return self.template.max_health

    @property
    def spawn_time(self) -> SpawnTime:
        return self.template.spawn_conditions.time_of_day

    @property
    def defeated(self) -> bool:
        return self.health <= 0


class Biome(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    description: str = ""
    image: Optional[str] = None
    rarity: int = Field(default=1, ge=0)
    enemies: List[str] = Field(default_factory=list)
    weather: List[str] = Field(default_factory=list)
    special_events: List[str] = Field(default_factory=list)
    environmental_effects: List[ItemEffect] = Field(default_factory=list)


class Weather(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    description: str = ""
    effects: List[ItemEffect] = Field(default_factory=list)
    conditions: List[str] = Field(default_factory=list)
    atmospheric: bool = False
