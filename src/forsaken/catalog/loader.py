"""Load the bestiary, biome and weather tables from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError
import yaml

from forsaken.domain import rules
from forsaken.domain.models import Biome, Enemy, Weather

logger = logging.getLogger(__name__)

_CATALOG_CACHE: "Catalog | None" = None


class CatalogError(ValueError):
    pass


@dataclass(frozen=True)
class Catalog:
    enemies: tuple[Enemy, ...] = field(default_factory=tuple)
    biomes: tuple[Biome, ...] = field(default_factory=tuple)
    weather: tuple[Weather, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        rules.ensure_unique_ids((enemy.id for enemy in self.enemies), "enemy")
        rules.ensure_unique_ids((biome.id for biome in self.biomes), "biome")
        rules.ensure_unique_ids((entry.id for entry in self.weather), "weather")

    def enemy(self, enemy_id: str) -> Enemy | None:
        return next((enemy for enemy in self.enemies if enemy.id == enemy_id), None)

    def biome(self, biome_id: str) -> Biome | None:
        return next((biome for biome in self.biomes if biome.id == biome_id), None)

    def biomes_by_id(self, biome_ids: Iterable[str]) -> tuple[Biome, ...]:
        ids = list(biome_ids)
        known = {biome.id: biome for biome in self.biomes}
        rules.ensure_known_ids(ids, known, "biome")
        return tuple(known[biome_id] for biome_id in ids)

    def with_enemies(self, enemies: Iterable[Enemy]) -> "Catalog":
        return replace(self, enemies=tuple(enemies))


def _catalog_path() -> Path:
    return Path(__file__).resolve().with_name("default_catalog.yml")


def _parse_records(model, entries: Any, label: str, source: Path) -> tuple:
    if entries is None:
        return ()
    if not isinstance(entries, list):
        raise CatalogError(f"{source}: '{label}' must be a list")
    try:
        return tuple(model.model_validate(entry) for entry in entries)
    except ValidationError as exc:
        raise CatalogError(f"{source}: invalid {label} entry\n{exc}") from exc


def load_catalog(path: str | Path) -> Catalog:
    """Parse a catalog file with ``enemies``, ``biomes`` and ``weather`` lists."""
    catalog_path = Path(path)
    try:
        data = yaml.safe_load(catalog_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise CatalogError(f"Could not parse {catalog_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise CatalogError(f"{catalog_path} must contain a mapping")
    try:
        catalog = Catalog(
            enemies=_parse_records(Enemy, data.get("enemies"), "enemies", catalog_path),
            biomes=_parse_records(Biome, data.get("biomes"), "biomes", catalog_path),
            weather=_parse_records(Weather, data.get("weather"), "weather", catalog_path),
        )
    except CatalogError:
        raise
    except ValueError as exc:
        raise CatalogError(f"{catalog_path}: {exc}") from exc
    logger.info(
        "Loaded catalog from %s: %d enemies, %d biomes, %d weather",
        catalog_path,
        len(catalog.enemies),
        len(catalog.biomes),
        len(catalog.weather),
    )
    return catalog


def default_catalog() -> Catalog:
    """Load the bundled catalog once and cache it."""
    global _CATALOG_CACHE
    if _CATALOG_CACHE is None:
        _CATALOG_CACHE = load_catalog(_catalog_path())
    return _CATALOG_CACHE
