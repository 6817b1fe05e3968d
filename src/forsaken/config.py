"""Runtime constants and overridable encounter settings."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

SEED = 1337

SPAWN_CHECK_INTERVAL = 1.0
SPAWN_THRESHOLD = 20
SPAWN_COOLDOWN_MS = 1000
ATTACK_COOLDOWN_MS = 500
MAX_ACTIVE_ENEMIES = 3
GOLD_REWARD_MIN = 1
GOLD_REWARD_MAX = 10

ENV_PREFIX = "FORSAKEN_"


class SettingsError(ValueError):
    pass


@dataclass(frozen=True)
class EncounterSettings:
    spawn_check_interval: float = SPAWN_CHECK_INTERVAL
    spawn_threshold: int = SPAWN_THRESHOLD
    spawn_cooldown_ms: int = SPAWN_COOLDOWN_MS
    attack_cooldown_ms: int = ATTACK_COOLDOWN_MS
    max_active_enemies: int = MAX_ACTIVE_ENEMIES
    gold_reward_min: int = GOLD_REWARD_MIN
    gold_reward_max: int = GOLD_REWARD_MAX

    def __post_init__(self) -> None:
        if self.spawn_check_interval <= 0:
            raise SettingsError("spawn_check_interval must be positive")
        if self.spawn_threshold < 1:
            raise SettingsError("spawn_threshold must be at least 1")
        if self.spawn_cooldown_ms < 0 or self.attack_cooldown_ms < 0:
            raise SettingsError("cooldowns must not be negative")
        if self.max_active_enemies < 0:
            raise SettingsError("max_active_enemies must not be negative")
        if self.gold_reward_min > self.gold_reward_max:
            raise SettingsError("gold reward range is empty")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def merged(self, overrides: Mapping[str, Any]) -> "EncounterSettings":
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise SettingsError(f"Unknown settings: {', '.join(unknown)}")
        coerced: dict[str, Any] = {}
        for key, value in overrides.items():
            caster = float if key == "spawn_check_interval" else int
            try:
                coerced[key] = caster(value)
            except (TypeError, ValueError) as exc:
                raise SettingsError(f"Invalid value for {key}: {value!r}") from exc
        return replace(self, **coerced)


DEFAULT_SETTINGS = EncounterSettings()


def load_settings(path: str | Path | None = None) -> EncounterSettings:
    """Load encounter settings from a YAML file.

    A missing file yields the defaults. The file holds a flat mapping whose
    keys are :class:`EncounterSettings` field names.
    """
    if path is None:
        return DEFAULT_SETTINGS
    settings_path = Path(path)
    if not settings_path.exists():
        return DEFAULT_SETTINGS
    try:
        data = yaml.safe_load(settings_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise SettingsError(f"Could not parse {settings_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SettingsError(f"{settings_path} must contain a mapping")
    return DEFAULT_SETTINGS.merged(data)


def settings_from_env(
    base: EncounterSettings | None = None,
    environ: Mapping[str, str] | None = None,
) -> EncounterSettings:
    env = os.environ if environ is None else environ
    overrides: dict[str, str] = {}
    for field in fields(EncounterSettings):
        key = ENV_PREFIX + field.name.upper()
        if key in env:
            overrides[field.name] = env[key]
    settings = base or DEFAULT_SETTINGS
    if not overrides:
        return settings
    return settings.merged(overrides)
