from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from forsaken.catalog import default_catalog, eligible_enemies, load_catalog
from forsaken.catalog.exporters import dump_catalog
from forsaken.domain.enums import TimeOfDay


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the enemy/biome/weather catalog.")
    parser.add_argument("--catalog", type=str, default=None)
    args = parser.parse_args()

    catalog = load_catalog(Path(args.catalog)) if args.catalog else default_catalog()
    print(dump_catalog(catalog))
    print("")
    print("Spawn table:")
    for biome in catalog.biomes:
        for time_of_day in TimeOfDay:
            names = [enemy.id for enemy in eligible_enemies(catalog, biome.id, time_of_day)]
            print(f"- {biome.id}/{time_of_day.value}: {', '.join(names) or '(none)'}")


if __name__ == "__main__":
    main()
