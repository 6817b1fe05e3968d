"""Designer-facing create/edit/delete operations for enemies and items."""

from forsaken.authoring.enemies import EnemyDraft, delete_enemy, draft_from_enemy, save_enemy
from forsaken.authoring.items import (
    EffectDraft,
    ItemDraft,
    build_effect,
    build_item,
    delete_item,
    save_item,
)
from forsaken.authoring.validation import (
    AuthoringError,
    EnemyIdConflictError,
    derive_enemy_id,
)

__all__ = [
    "AuthoringError",
    "EffectDraft",
    "EnemyDraft",
    "EnemyIdConflictError",
    "ItemDraft",
    "build_effect",
    "build_item",
    "delete_enemy",
    "delete_item",
    "derive_enemy_id",
    "draft_from_enemy",
    "save_enemy",
    "save_item",
]
