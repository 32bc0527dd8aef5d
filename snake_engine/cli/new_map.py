#!/usr/bin/env python3
"""Create a map file under map/.

Obstacle coordinates are 0-based, as stored in the file.

Usage:

    snake-map arena --width 20 --height 12 --walls 0 0 1 1 --obstacle 2 3 --obstacle 2 4
"""

import argparse
import logging

from snake_engine.data_access import MapRepository, format_map
from snake_engine.domain.config import MapDefinition
from snake_engine.domain.errors import ConfigInvalid
from snake_engine.settings import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a snake map file")
    parser.add_argument("name", type=str, help="Map name (written to map/<name>.map)")
    parser.add_argument("--data-dir", type=str, default=None, help="Directory holding map/")
    parser.add_argument("--width", type=int, default=15, help="Board width (8-20)")
    parser.add_argument("--height", type=int, default=15, help="Board height (8-20)")
    parser.add_argument("--walls", type=int, nargs=4, default=[1, 1, 1, 1],
                        metavar=("UP", "DOWN", "LEFT", "RIGHT"), choices=[0, 1],
                        help="1 for a wall edge, 0 for an edge that wraps around")
    parser.add_argument("--obstacle", type=int, nargs=2, action="append", default=[],
                        metavar=("X", "Y"), help="Obstacle cell, 0-based (repeatable)")
    parser.add_argument("--select", action="store_true",
                        help="Use this map for the next game")
    args = parser.parse_args()

    configure_logging()

    try:
        game_map = MapDefinition.from_zero_based(
            args.width, args.height, [bool(w) for w in args.walls], [tuple(p) for p in args.obstacle]
        )
    except ConfigInvalid as exc:
        raise SystemExit(f"Invalid map: {exc}")

    repo = MapRepository(args.data_dir)
    try:
        relative = repo.create(args.name, game_map)
    except (FileExistsError, ValueError) as exc:
        raise SystemExit(f"Map not created: {exc}")

    logger.info("Map %s:\n%s", relative, format_map(game_map))
    if args.select:
        repo.set_last(relative)
        logger.info("%s selected for the next game", relative)


if __name__ == "__main__":
    main()
