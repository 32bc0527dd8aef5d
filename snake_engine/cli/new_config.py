#!/usr/bin/env python3
"""Create a game configuration file under config/.

Usage:

    snake-config hard --difficulty 8 --seed 42 --food-count 3 --probabilities 0.2 0.3 0.5 --select
"""

import argparse
import logging

from snake_engine.data_access import ConfigRepository
from snake_engine.domain.config import GameConfig
from snake_engine.domain.errors import ConfigInvalid
from snake_engine.settings import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a snake game configuration file")
    parser.add_argument("name", type=str, help="Config name (written to config/<name>.config)")
    parser.add_argument("--data-dir", type=str, default=None, help="Directory holding config/")
    parser.add_argument("--difficulty", type=int, default=1, help="1-10, moves per second")
    parser.add_argument("--seed", type=int, default=-1, help="Random seed, -1 for the current time")
    parser.add_argument("--food-count", type=int, default=1, help="Food items on the board (1-5)")
    parser.add_argument("--probabilities", type=float, nargs=3, default=[0.6, 0.3, 0.1],
                        metavar=("P1", "P2", "P3"),
                        help="Probabilities of 1, 2 and 3 point food, summing to 1")
    parser.add_argument("--select", action="store_true",
                        help="Use this config for the next game")
    args = parser.parse_args()

    configure_logging()

    try:
        config = GameConfig(
            difficulty=args.difficulty,
            random_seed=args.seed,
            food_count=args.food_count,
            food_probabilities=tuple(args.probabilities),
        )
    except ConfigInvalid as exc:
        raise SystemExit(f"Invalid configuration: {exc}")

    repo = ConfigRepository(args.data_dir)
    try:
        relative = repo.create(args.name, config)
    except (FileExistsError, ValueError) as exc:
        raise SystemExit(f"Configuration not created: {exc}")

    if args.select:
        repo.set_last(relative)
        logger.info("%s selected for the next game", relative)


if __name__ == "__main__":
    main()
