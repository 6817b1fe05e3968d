"""Catalog dump helpers for debugging."""

from __future__ import annotations

from forsaken.catalog.loader import Catalog


def dangling_references(catalog: Catalog) -> list[str]:
    enemy_ids = {enemy.id for enemy in catalog.enemies}
    biome_ids = {biome.id for biome in catalog.biomes}
    weather_ids = {entry.id for entry in catalog.weather}
    lines: list[str] = []
    for biome in catalog.biomes:
        for enemy_id in biome.enemies:
            if enemy_id not in enemy_ids:
                lines.append(f"biome {biome.id} lists unknown enemy {enemy_id}")
        for weather_id in biome.weather:
            if weather_id not in weather_ids:
                lines.append(f"biome {biome.id} lists unknown weather {weather_id}")
    for enemy in catalog.enemies:
        for biome_id in enemy.spawn_conditions.biomes:
            if biome_id not in biome_ids:
                lines.append(f"enemy {enemy.id} spawns in unknown biome {biome_id}")
    return lines


def dump_catalog(catalog: Catalog) -> str:
    lines: list[str] = []
    lines.append("Biomes:")
    for biome in catalog.biomes:
        lines.append(
            f"- {biome.name} [{biome.id}] rarity={biome.rarity} "
            f"enemies={biome.enemies} weather={biome.weather}"
        )
    lines.append("")
    lines.append("Enemies:")
    for enemy in catalog.enemies:
        conditions = enemy.spawn_conditions
        lines.append(
            f"- {enemy.name} [{enemy.id}] hp={enemy.max_health:g} dmg={enemy.damage:g} "
            f"size={enemy.size} time={conditions.time_of_day} biomes={conditions.biomes}"
        )
    lines.append("")
    lines.append("Weather:")
    for entry in catalog.weather:
        effect_summary = ", ".join(f"{effect.name}={effect.value:g}" for effect in entry.effects)
        effect_text = f" effects({effect_summary})" if effect_summary else ""
        lines.append(f"- {entry.name} [{entry.id}]{effect_text}")
    problems = dangling_references(catalog)
    if problems:
        lines.append("")
        lines.append("Dangling references:")
        lines.extend(f"- {line}" for line in problems)
    return "\n".join(lines)
