"""
Runtime settings read from the environment (and a local .env file).

Environment variables:
- SNAKE_DATA_DIR: directory holding config/, map/, record/ and leaderboard/
- SNAKE_LOG_LEVEL: logging level name (default INFO)
- SNAKE_LOG_FILE: log file used by the curses front-ends (default snake.log)
- SNAKE_VIDEO_FPS: frames per second for exported videos (default: difficulty)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def get_data_dir() -> Path:
    return Path(os.getenv('SNAKE_DATA_DIR', '.'))


def get_log_level() -> int:
    name = os.getenv('SNAKE_LOG_LEVEL', 'INFO').upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"SNAKE_LOG_LEVEL must be a logging level name, got {name!r}")
    return level


def get_log_file() -> str:
    return os.getenv('SNAKE_LOG_FILE', 'snake.log')


def get_video_fps() -> Optional[float]:
    value = os.getenv('SNAKE_VIDEO_FPS')
    if not value:
        return None
    try:
        fps = float(value)
    except ValueError:
        raise ValueError(f"SNAKE_VIDEO_FPS must be a number, got {value!r}") from None
    if fps <= 0:
        raise ValueError(f"SNAKE_VIDEO_FPS must be positive, got {fps}")
    return fps


def configure_logging(to_file: bool = False) -> None:
    """
    Set up root logging for a command line entry point.

    Curses front-ends log to SNAKE_LOG_FILE so log lines never land on the
    game screen.
    """
    kwargs = {"level": get_log_level(), "format": LOG_FORMAT}
    if to_file:
        kwargs["filename"] = get_log_file()
    logging.basicConfig(**kwargs)
