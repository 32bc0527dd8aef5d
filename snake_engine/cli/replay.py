#!/usr/bin/env python3
"""Replay a saved game record.

In the terminal UI, q stops the replay. With --text the frames are printed
to stdout instead.

Usage:

    snake-replay best_run
    snake-replay best_run --text --delay 0
"""

import argparse
import curses
import logging
from typing import Optional

from snake_engine.data_access import RecordRepository
from snake_engine.domain.errors import RecordCorrupt
from snake_engine.players.keyboard_player import KeyboardPlayer
from snake_engine.recorder import GameRecord, Playback
from snake_engine.services.base import RenderStatus
from snake_engine.services.terminal_renderer import CursesRenderer
from snake_engine.services.text_renderer import TextRenderer
from snake_engine.settings import configure_logging

logger = logging.getLogger(__name__)


def show(playback: Playback, renderer) -> int:
    """Draw every frame the playback yields; returns how many were shown."""
    record = playback.record
    shown = 0
    for item in playback:
        renderer.draw(item.frame, RenderStatus(
            score=item.frame.score,
            terminal=item.terminal,
            replay=True,
            config_path=record.config_path,
            map_path=record.map_path,
        ))
        shown += 1
    return shown


def replay_in_terminal(stdscr, record: GameRecord, delay: Optional[float]) -> int:
    renderer = CursesRenderer(stdscr)
    player = KeyboardPlayer(stdscr)
    playback = Playback(record, delay=delay, wait=player.quit_requested)
    shown = show(playback, renderer)
    if not playback.cancelled:
        player.wait_for_key()
    return shown


def main() -> None:
    parser = argparse.ArgumentParser(description="Replay a saved snake game")
    parser.add_argument("name", type=str, help="Record name under record/ (without .rec)")
    parser.add_argument("--data-dir", type=str, default=None,
                        help="Directory holding record/")
    parser.add_argument("--delay", type=float, default=None,
                        help="Seconds between frames (default: the game's tick length)")
    parser.add_argument("--text", action="store_true",
                        help="Print frames to stdout instead of using the terminal UI")
    args = parser.parse_args()

    configure_logging(to_file=not args.text)

    try:
        record = RecordRepository(args.data_dir).load(args.name)
    except FileNotFoundError:
        raise SystemExit(f"Record {args.name!r} does not exist")
    except RecordCorrupt as exc:
        raise SystemExit(f"Record {args.name!r} is corrupt: {exc}")

    if args.text:
        shown = show(Playback(record, delay=args.delay), TextRenderer())
    else:
        shown = curses.wrapper(replay_in_terminal, record, args.delay)
    logger.info("Replayed %d of %d frames", shown, record.frame_count)


if __name__ == "__main__":
    main()
