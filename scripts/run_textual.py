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
from forsaken.ui.app import ForsakenApp


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Forsaken character sheet and encounter loop.")
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="YAML catalog of enemies, biomes and weather (defaults to the bundled one).",
    )
    parser.add_argument(
        "--settings",
        type=str,
        default=None,
        help="YAML file overriding encounter timings and limits.",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write logs here; the terminal is owned by the UI.",
    )
    return parser


def main() -> None:
    args = build_parser().parse_args()

    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=args.log_level.upper())

    catalog = load_catalog(Path(args.catalog)) if args.catalog else default_catalog()
    settings = config.settings_from_env(config.load_settings(args.settings))
    app = ForsakenApp(catalog, settings=settings, seed=args.seed)
    app.run()


if __name__ == "__main__":
    main()
