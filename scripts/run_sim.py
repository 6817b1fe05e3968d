from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from forsaken import config
from forsaken.catalog import default_catalog, load_catalog
from forsaken.encounter import EncounterSession
from forsaken.stats import format_number
from forsaken.util import ManualClock, Rng


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a seeded headless encounter.")
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument("--seconds", type=int, default=120)
    parser.add_argument("--catalog", type=str, default=None)
    parser.add_argument("--settings", type=str, default=None)
    parser.add_argument(
        "--attack-every",
        type=int,
        default=3,
        help="Seconds between attacks on the first active enemy.",
    )
    parser.add_argument(
        "--toggle-at",
        type=int,
        default=None,
        help="Flip day/night once this many seconds in.",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())

    catalog = load_catalog(Path(args.catalog)) if args.catalog else default_catalog()
    settings = config.settings_from_env(config.load_settings(args.settings))
    clock = ManualClock(current=1_000_000)
    session = EncounterSession(catalog, settings=settings, rng=Rng(args.seed), clock=clock)

    result = session.teleport()
    print(f"t=0s {result.summary}")
    for second in range(1, args.seconds + 1):
        clock.advance_seconds(settings.spawn_check_interval)
        tick = session.tick()
        if tick.spawned is not None:
            print(f"t={second}s {tick.summary} [{tick.spawned.id}]")
        if args.toggle_at is not None and second == args.toggle_at:
            toggled = session.toggle_time()
            print(f"t={second}s {toggled.summary}")
            for note in toggled.notes:
                print(f"  - {note}")
        enemies = session.state.active_enemies
        if enemies and args.attack_every > 0 and second % args.attack_every == 0:
            hit = session.attack(enemies[0].id)
            if hit.succeeded:
                print(f"t={second}s {hit.summary}")

    stats = session.stats
    print("")
    print(f"Gold: {format_number(stats.gold)}")
    print(f"Enemies still active: {len(session.state.active_enemies)}")


if __name__ == "__main__":
    main()
