"""
Headless game runner.

Plays one game without a terminal UI, using a random autopilot or a scripted
list of moves, and optionally saves the record for replay.
"""

import argparse
import json
import logging
import random
from typing import Any, Dict, Optional

from .data_access import ConfigRepository, MapRepository, RecordRepository
from .domain.config import GameConfig, MapDefinition
from .domain.constants import VALID_INTENTS
from .domain.errors import AllocationExhausted, ConfigInvalid
from .game import SnakeGame, resolve_seed
from .players import Player, RandomPlayer, ScriptedPlayer
from .recorder import GameRecord
from .services.text_renderer import TextRenderer
from .settings import configure_logging

logger = logging.getLogger(__name__)

# Single-letter shorthands accepted by --moves
MOVE_SHORTHANDS = {"w": "up", "a": "left", "s": "down", "d": "right", "-": None}


def run_simulation(
    config: GameConfig,
    game_map: MapDefinition,
    player: Player,
    config_path: str = "",
    map_path: str = "",
    renderer=None,
    max_ticks: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Runs a single snake game to the end.

    Args:
        config: Game settings (difficulty, seed, food)
        game_map: Board definition
        player: Input source driving the snake
        config_path, map_path: Paths stored in the record header
        renderer: Optional renderer that receives every frame
        max_ticks: Stop the game after this many ticks (None = no limit)

    Returns:
        A dictionary summarizing the game (game_id, seed, final_score,
        length, ticks, cause, frames, aborted) plus the GameRecord under
        "record".
    """
    game = None
    aborted = None
    try:
        game = SnakeGame(config, game_map, config_path=config_path, map_path=map_path)
        record = game.run(player, renderer=renderer, max_ticks=max_ticks)
    except AllocationExhausted as exc:
        aborted = str(exc)
        if game is None:
            # Not even the initial food fits on the board
            logger.error("Game aborted before the first tick: %s", exc)
            return {
                "game_id": None,
                "seed": resolve_seed(config.random_seed),
                "final_score": 0,
                "length": 0,
                "ticks": 0,
                "cause": None,
                "frames": 0,
                "aborted": aborted,
                "record": GameRecord(config_path, map_path, config.difficulty,
                                     game_map.height, game_map.width),
            }
        logger.error("Game %s aborted: %s", game.game_id, exc)
        record = game.record()

    return {
        "game_id": game.game_id,
        "seed": game.seed,
        "final_score": game.score,
        "length": len(game.state.snake),
        "ticks": game.tick_count,
        "cause": game.state.cause,
        "frames": record.frame_count,
        "aborted": aborted,
        "record": record,
    }


def parse_moves(text: str) -> list:
    """
    Parse a comma-separated move script: intents (up, pause, ...) or the
    shorthands w/a/s/d, and '-' for a tick without input.
    """
    script = []
    for token in (t.strip().lower() for t in text.split(",")):
        if token in MOVE_SHORTHANDS:
            script.append(MOVE_SHORTHANDS[token])
        elif token in VALID_INTENTS:
            script.append(token)
        else:
            allowed = ", ".join(sorted(set(MOVE_SHORTHANDS) | VALID_INTENTS))
            raise ValueError(f"Unknown move {token!r}; use one of: {allowed}")
    return script


def save_record(record: GameRecord, name: str, data_dir: Optional[str] = None) -> str:
    return RecordRepository(data_dir).save(name, record)


def main():
    parser = argparse.ArgumentParser(
        description="Run a headless snake game with a random or scripted player."
    )
    parser.add_argument("--data-dir", type=str, default=None,
                        help="Directory holding config/, map/ and record/ (default: SNAKE_DATA_DIR or .)")
    parser.add_argument("--config", type=str, default=None,
                        help="Config file name under config/ (default: last used)")
    parser.add_argument("--map", dest="map_name", type=str, default=None,
                        help="Map file name under map/ (default: last used)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Override the config's random seed")
    parser.add_argument("--player-seed", type=int, default=None,
                        help="Seed for the random player")
    parser.add_argument("--moves", type=str, default=None,
                        help="Comma-separated script, e.g. 'd,d,s,-,a' (default: random player)")
    parser.add_argument("--save", type=str, default=None,
                        help="Save the record as record/<NAME>.rec")
    parser.add_argument("--max-ticks", type=int, default=1000,
                        help="Stop the game after this many ticks")
    parser.add_argument("--show", action="store_true",
                        help="Print every frame as text")

    args = parser.parse_args()
    configure_logging()

    configs = ConfigRepository(args.data_dir)
    maps = MapRepository(args.data_dir)
    try:
        config_path, config = configs.load(args.config) if args.config else configs.load_last()
        map_path, game_map = maps.load(args.map_name) if args.map_name else maps.load_last()
        if args.seed is not None:
            config = GameConfig(
                difficulty=config.difficulty,
                random_seed=args.seed,
                food_count=config.food_count,
                food_probabilities=config.food_probabilities,
            )
    except (ConfigInvalid, FileNotFoundError) as exc:
        raise SystemExit(f"Could not load game settings: {exc}")

    if args.moves:
        player = ScriptedPlayer(parse_moves(args.moves))
    else:
        player = RandomPlayer(random.Random(args.player_seed))

    renderer = TextRenderer() if args.show else None
    result = run_simulation(
        config, game_map, player, config_path, map_path, renderer, max_ticks=args.max_ticks
    )
    record = result.pop("record")

    if args.save:
        try:
            result["saved_to"] = save_record(record, args.save, args.data_dir)
        except FileExistsError as exc:
            logger.error("Record not saved: %s", exc)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
