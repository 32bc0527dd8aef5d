#!/usr/bin/env python3
"""Interactive terminal snake game.

Loads the last used (or the given) config and map, plays one game in
curses and, once it is over, offers to save the record and to add a
leaderboard entry.

Usage:

    snake-play
    snake-play --config hard --map arena
"""

import argparse
import curses
import logging
from typing import Optional

from snake_engine.data_access import (
    ConfigRepository,
    LeaderboardRepository,
    MapRepository,
    RecordRepository,
    make_entry,
)
from snake_engine.domain.config import GameConfig, MapDefinition
from snake_engine.domain.errors import AllocationExhausted, ConfigInvalid
from snake_engine.game import SnakeGame
from snake_engine.players.keyboard_player import KeyboardPlayer
from snake_engine.recorder import GameRecord
from snake_engine.services.terminal_renderer import CursesRenderer
from snake_engine.settings import configure_logging

logger = logging.getLogger(__name__)

MIN_ROWS_BELOW_BOARD = 7


def prompt(window, renderer: CursesRenderer, text: str) -> str:
    """Ask for one word on the bottom line; an empty answer or 'q' cancels."""
    renderer.message(text)
    curses.echo()
    try:
        window.timeout(-1)
        raw = window.getstr()
    finally:
        curses.noecho()
    answer = raw.decode("utf-8", errors="replace").strip()
    return "" if answer == "q" else answer


def save_record_dialog(window, renderer, record: GameRecord, records: RecordRepository) -> bool:
    name = prompt(window, renderer, "Enter the record file name (q to cancel): ")
    if not name:
        return False
    try:
        relative = records.save(name, record)
    except (FileExistsError, ValueError) as exc:
        renderer.message(f"Record not saved: {exc}")
        return False
    renderer.message(f"Record saved to {relative}.")
    return True


def leaderboard_dialog(window, renderer, game: SnakeGame, leaderboard: LeaderboardRepository) -> bool:
    name = prompt(window, renderer, "Enter your name (q to cancel): ")
    if not name:
        return False
    try:
        entry = make_entry(name, game.score, game.config_path, game.map_path)
    except ValueError as exc:
        renderer.message(str(exc))
        return False
    rank = leaderboard.add(entry)
    renderer.message(f"Leaderboard updated, you are number {rank}.")
    return True


def post_game_menu(window, renderer, player: KeyboardPlayer, game: SnakeGame,
                   record: GameRecord, data_dir: Optional[str]) -> None:
    """b saves the record, l adds a leaderboard entry, any other key leaves. Each works once."""
    records = RecordRepository(data_dir)
    leaderboard = LeaderboardRepository(data_dir)
    saved = ranked = False

    while True:
        ch = player.wait_for_key()
        if ch in (ord('b'), ord('B')):
            if saved:
                renderer.message("Record already saved. Press l for the leaderboard or any other key to leave.")
            else:
                saved = save_record_dialog(window, renderer, record, records)
        elif ch in (ord('l'), ord('L')):
            if ranked:
                renderer.message("Leaderboard already updated. Press b to save the record or any other key to leave.")
            else:
                ranked = leaderboard_dialog(window, renderer, game, leaderboard)
        else:
            break


def play_game(stdscr, config_path: str, config: GameConfig, map_path: str,
              game_map: MapDefinition, data_dir: Optional[str]) -> int:
    height, width = stdscr.getmaxyx()
    need_rows = game_map.height + 2 + MIN_ROWS_BELOW_BOARD
    need_cols = max(game_map.width + 2, 60)
    if height < need_rows or width < need_cols:
        raise SystemExit(f"Terminal too small: need at least {need_rows}x{need_cols}, got {height}x{width}")

    renderer = CursesRenderer(stdscr)
    player = KeyboardPlayer(stdscr)
    game = None
    try:
        game = SnakeGame(config, game_map, config_path=config_path, map_path=map_path)
        record = game.run(player, renderer)
    except AllocationExhausted as exc:
        logger.error("Game aborted: %s", exc)
        renderer.message("No free cell left for food - game aborted. Press any key.")
        if game is None:
            player.wait_for_key()
            return 0
        record = game.record()

    post_game_menu(stdscr, renderer, player, game, record, data_dir)
    return game.score


def main() -> None:
    parser = argparse.ArgumentParser(description="Play snake in the terminal")
    parser.add_argument("--data-dir", type=str, default=None,
                        help="Directory holding config/, map/, record/ and leaderboard/")
    parser.add_argument("--config", type=str, default=None,
                        help="Config name to load and remember (default: last used)")
    parser.add_argument("--map", dest="map_name", type=str, default=None,
                        help="Map name to load and remember (default: last used)")
    args = parser.parse_args()

    configure_logging(to_file=True)

    configs = ConfigRepository(args.data_dir)
    maps = MapRepository(args.data_dir)
    try:
        config_path, config = configs.select(args.config) if args.config else configs.load_last()
        map_path, game_map = maps.select(args.map_name) if args.map_name else maps.load_last()
    except (ConfigInvalid, FileNotFoundError) as exc:
        raise SystemExit(f"Could not load game settings: {exc}")

    score = curses.wrapper(play_game, config_path, config, map_path, game_map, args.data_dir)
    print(f"Final score: {score}")


if __name__ == "__main__":
    main()
