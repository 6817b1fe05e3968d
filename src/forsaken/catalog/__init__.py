"""Static bestiary, biome and weather reference data."""

from .loader import Catalog, CatalogError, default_catalog, load_catalog
from .spawning import eligible_enemies, is_spawn_eligible

__all__ = [
    "Catalog",
    "CatalogError",
    "default_catalog",
    "eligible_enemies",
    "is_spawn_eligible",
    "load_catalog",
]
