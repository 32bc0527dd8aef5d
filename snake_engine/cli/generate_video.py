#!/usr/bin/env python3
"""Export a saved game record as an MP4 video or animated GIF.

Usage:

    snake-video best_run                      # record/best_run.mp4
    snake-video best_run --format gif --output best_run.gif
"""

import argparse
import logging
from pathlib import Path

from snake_engine.data_access import RecordRepository
from snake_engine.domain.errors import RecordCorrupt
from snake_engine.services.video_generator import SnakeVideoGenerator
from snake_engine.settings import configure_logging, get_video_fps

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Export a snake record to MP4 or GIF")
    parser.add_argument("name", type=str, help="Record name under record/ (without .rec)")
    parser.add_argument("--data-dir", type=str, default=None, help="Directory holding record/")
    parser.add_argument("--format", choices=["mp4", "gif"], default="mp4", help="Output format")
    parser.add_argument("--output", type=str, default=None,
                        help="Output path (default: next to the record)")
    parser.add_argument("--fps", type=float, default=None,
                        help="Frames per second (default: SNAKE_VIDEO_FPS or the game's difficulty)")
    parser.add_argument("--cell-size", type=int, default=32, help="Pixels per board cell")
    args = parser.parse_args()

    configure_logging()

    repo = RecordRepository(args.data_dir)
    try:
        record = repo.load(args.name)
    except FileNotFoundError:
        raise SystemExit(f"Record {args.name!r} does not exist")
    except RecordCorrupt as exc:
        raise SystemExit(f"Record {args.name!r} is corrupt: {exc}")

    output = args.output or str(repo.directory / f"{args.name}.{args.format}")
    Path(output).parent.mkdir(parents=True, exist_ok=True)

    generator = SnakeVideoGenerator(fps=args.fps or get_video_fps(), cell_size=args.cell_size)
    if args.format == "gif":
        path = generator.generate_gif(record, output)
    else:
        path = generator.generate_video(record, output)
    logger.info("✓ Exported %s", path)


if __name__ == "__main__":
    main()
