"""Create, edit and delete bestiary entries."""

from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from forsaken.authoring.validation import (
    EnemyIdConflictError,
    derive_enemy_id,
    require_text,
)
from forsaken.domain.enums import EnemySize
from forsaken.domain.models import Enemy, LootEntry, SpawnConditions

logger = logging.getLogger(__name__)


class EnemyDraft(BaseModel):
    """Editable enemy form; ``id`` stays empty for brand-new enemies."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    id: Optional[str] = None
    name: str = ""
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


def draft_from_enemy(enemy: Enemy) -> EnemyDraft:
    return EnemyDraft.model_validate(enemy.model_dump())


def save_enemy(existing: list[Enemy], draft: EnemyDraft) -> list[Enemy]:
    """Return a new list with *draft* applied.

    A draft whose id matches an entry replaces it in place; anything else is
    appended. Drafts without an id get one derived from the name, and a
    derived id that is already taken raises :class:`EnemyIdConflictError`.
    """
    name = require_text(draft.name, "Enemy name")
    explicit_id = (draft.id or "").strip()
    enemy_id = explicit_id or derive_enemy_id(name)
    index = next(
        (idx for idx, enemy in enumerate(existing) if enemy.id == enemy_id), None
    )
    if not explicit_id and index is not None:
        raise EnemyIdConflictError(enemy_id)

    payload = draft.model_dump(exclude={"id"})
    payload["name"] = name
    enemy = Enemy(id=enemy_id, **payload)

    updated = list(existing)
    if index is None:
        updated.append(enemy)
        logger.info("Created enemy %s", enemy_id)
    else:
        updated[index] = enemy
        logger.info("Updated enemy %s", enemy_id)
    return updated


def delete_enemy(existing: list[Enemy], enemy_id: str) -> list[Enemy]:
    return [enemy for enemy in existing if enemy.id != enemy_id]
