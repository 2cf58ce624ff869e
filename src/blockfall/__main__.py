"""Simple ASCII demo for the engine.

Run with: `python -m blockfall`

Starts a seeded game, hard-drops a number of pieces straight down and prints
the resulting board with the active piece overlaid.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from . import Engine, render_grid

LOGGER = logging.getLogger(__name__)


def format_grid(grid: list[list[Optional[str]]]) -> str:
    return "\n".join("".join("#" if cell else "." for cell in row) for row in grid)


def run(drops: int, seed: Optional[int]) -> Engine:
    engine = Engine(seed=seed)
    engine.start()
    for _ in range(drops):
        result = engine.hard_drop()
        for event in result.events:
            LOGGER.info("%s", event)
        if result.snapshot.game_over:
            break
    return engine


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--drops", type=int, default=0, help="Number of hard drops to perform.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for piece selection.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")
    snapshot = run(args.drops, args.seed).snapshot()
    print(format_grid(render_grid(snapshot.board, snapshot.active)))
    print(f"score={snapshot.score} level={snapshot.level} lines={snapshot.lines} game_over={snapshot.game_over}")


if __name__ == "__main__":
    main()
