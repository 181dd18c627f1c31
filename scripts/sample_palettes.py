#!/usr/bin/env python3
"""
CLI: Draw palettes from a seeded generator and print the seed so the run can be replayed.
Usage:
  python scripts/sample_palettes.py
  python scripts/sample_palettes.py --count 5 --fg-alpha 0.8
  python scripts/sample_palettes.py --seed 1234567890   # replay
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from chromaseed.colors import Palette
from chromaseed.config import load_config, make_seed, palette_alphas
from chromaseed.errors import ChromaseedError
from chromaseed.seed import Seed


def _format_rgba(rgba) -> str:
    return "[" + ", ".join(f"{c:.4f}" for c in rgba) + "]"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Draw random palettes with a reproducible seed."
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Replay this seed (default: seed.value from config, else the wall clock).",
    )
    parser.add_argument(
        "--count",
        "-n",
        type=int,
        default=1,
        help="Number of palettes to draw (default: 1).",
    )
    parser.add_argument("--fg-alpha", type=float, default=None, help="Foreground alpha (default: from config).")
    parser.add_argument("--bg-alpha", type=float, default=None, help="Background alpha (default: from config).")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config path (default: config/default.yaml).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.count < 0:
        parser.error("--count must be >= 0")

    try:
        config = load_config(args.config)
        fg_alpha, bg_alpha = palette_alphas(config)
        rng = Seed.from_value(args.seed) if args.seed is not None else make_seed(config)
    except (ChromaseedError, ValueError) as e:
        parser.error(str(e))

    if args.fg_alpha is not None:
        fg_alpha = args.fg_alpha
    if args.bg_alpha is not None:
        bg_alpha = args.bg_alpha

    print(f"seed: {rng.seed}")
    for _ in range(args.count):
        p = Palette.random(rng, fg_alpha, bg_alpha)
        print(f"{p.index}  fg={_format_rgba(p.fg)}  bg={_format_rgba(p.bg)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
