"""
Video Generation Service for Snake Game Records

This service turns a saved game record into a video by:
1. Rendering each frame using PIL (Pillow)
2. Encoding frames to MP4 using MoviePy/FFmpeg, or to an animated GIF with Pillow

The rendering mirrors the terminal look:
- Board with grid lines and wall/open edges
- Snake body and head (red once the game is over)
- Food coloured by value
- Score and frame counter under the board
"""

import logging
import os
import tempfile
from typing import List, Optional, Tuple

import numpy as np
from moviepy import ImageSequenceClip
from PIL import Image, ImageDraw, ImageFont

from ..domain.frame import Frame
from ..recorder import GameRecord
from .presentation import (
    TOKEN_BODY,
    TOKEN_EMPTY,
    TOKEN_FOOD_1,
    TOKEN_FOOD_2,
    TOKEN_FOOD_3,
    TOKEN_HEAD,
    TOKEN_OBSTACLE,
    TOKEN_WALL_HORIZONTAL,
    TOKEN_WALL_VERTICAL,
    token_for,
)

logger = logging.getLogger(__name__)

# Video settings
CELL_SIZE = 32  # Size of each grid cell in pixels
FOOTER_HEIGHT = 64


class ColorScheme:
    """Color configuration matching the terminal renderer"""

    BACKGROUND = "#FFFFFF"
    GRID_LINE = "#E5E7EB"
    OPEN_EDGE = "#F3F4F6"
    WALL = "#374151"
    OBSTACLE = "#6B7280"

    FOOD_1 = "#2563EB"  # blue
    FOOD_2 = "#A21CAF"  # magenta
    FOOD_3 = "#EAB308"  # yellow

    SNAKE = "#4F7022"
    SNAKE_DEAD = "#DC2626"

    FOOTER_BG = "#1a1f2e"
    FOOTER_TEXT = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken a hex color by a given amount"""
    r, g, b = hex_to_rgb(hex_color)
    r = max(0, int(r * (1 - amount)))
    g = max(0, int(g * (1 - amount)))
    b = max(0, int(b * (1 - amount)))
    return (r, g, b)


def _fill_for(token: str, terminal: bool) -> Optional[Tuple[int, int, int]]:
    snake = ColorScheme.SNAKE_DEAD if terminal else ColorScheme.SNAKE
    fills = {
        TOKEN_EMPTY: None,
        TOKEN_FOOD_1: hex_to_rgb(ColorScheme.FOOD_1),
        TOKEN_FOOD_2: hex_to_rgb(ColorScheme.FOOD_2),
        TOKEN_FOOD_3: hex_to_rgb(ColorScheme.FOOD_3),
        TOKEN_HEAD: darken_color(snake, 0.3),
        TOKEN_BODY: hex_to_rgb(snake),
        TOKEN_OBSTACLE: hex_to_rgb(ColorScheme.OBSTACLE),
        TOKEN_WALL_VERTICAL: hex_to_rgb(ColorScheme.WALL),
        TOKEN_WALL_HORIZONTAL: hex_to_rgb(ColorScheme.WALL),
    }
    return fills[token]


class SnakeVideoGenerator:
    """Generate MP4 videos and GIFs from snake game records"""

    def __init__(self, fps: Optional[float] = None, cell_size: int = CELL_SIZE):
        self.fps = fps
        self.cell_size = cell_size
        self.font = ImageFont.load_default()

    def frame_size(self, record: GameRecord) -> Tuple[int, int]:
        width = (record.width + 2) * self.cell_size
        height = (record.height + 2) * self.cell_size + FOOTER_HEIGHT
        return width, height

    def render_frame(
        self,
        frame: Frame,
        frame_number: int,
        total_frames: int,
        terminal: bool = False
    ) -> Image.Image:
        """Render a single frame of the game"""
        size = self.cell_size
        board_w = len(frame.rows[0]) * size
        board_h = len(frame.rows) * size

        img = Image.new('RGB', (board_w, board_h + FOOTER_HEIGHT), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        # Open edges are shaded so they read as passable
        draw.rectangle([0, 0, board_w - 1, board_h - 1], fill=hex_to_rgb(ColorScheme.OPEN_EDGE))
        draw.rectangle(
            [size, size, board_w - size - 1, board_h - size - 1],
            fill=hex_to_rgb(ColorScheme.BACKGROUND)
        )

        # Draw grid
        for i in range(1, len(frame.rows[0])):
            draw.line([i * size, size, i * size, board_h - size], fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)
        for i in range(1, len(frame.rows)):
            draw.line([size, i * size, board_w - size, i * size], fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)

        for y, row in enumerate(frame.rows):
            for x, cell in enumerate(row):
                token = token_for(cell)
                fill = _fill_for(token, terminal)
                if fill is None:
                    continue
                padding = 0 if token in (TOKEN_HEAD, TOKEN_WALL_VERTICAL, TOKEN_WALL_HORIZONTAL) else 1
                self._draw_cell(draw, x * size, y * size, size, fill, padding)

        # Footer with score and frame counter
        draw.rectangle([0, board_h, board_w, board_h + FOOTER_HEIGHT], fill=hex_to_rgb(ColorScheme.FOOTER_BG))
        status = "GAME OVER" if terminal else f"Frame {frame_number + 1} / {total_frames}"
        draw.text((8, board_h + 10), f"Score: {frame.score}", fill=hex_to_rgb(ColorScheme.FOOTER_TEXT), font=self.font)
        draw.text((8, board_h + 34), status, fill=hex_to_rgb(ColorScheme.FOOTER_TEXT), font=self.font)

        return img

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        x: int,
        y: int,
        size: int,
        color: Tuple[int, int, int],
        padding: int = 1
    ):
        """Draw a single cell"""
        draw.rectangle(
            [x + padding, y + padding, x + size - padding - 1, y + size - padding - 1],
            fill=color
        )

    def render_frames(self, record: GameRecord) -> List[Image.Image]:
        total = record.frame_count
        images = []
        for i, frame in enumerate(record.frames):
            if i % 50 == 0:
                logger.info("Rendering frame %d/%d", i + 1, total)
            images.append(self.render_frame(frame, i, total, terminal=(i == total - 1)))
        return images

    def _fps_for(self, record: GameRecord) -> float:
        # Same cadence as live play unless overridden
        return self.fps if self.fps else float(record.difficulty)

    def generate_video(self, record: GameRecord, output_path: Optional[str] = None) -> str:
        """
        Generate an MP4 video from a game record

        Args:
            record: The record to render
            output_path: Optional output path (if None, uses temp file)

        Returns:
            Path to the generated video file
        """
        if not record.frames:
            raise ValueError("record has no frames to render")

        logger.info("Rendering %d frames (%s / %s)", record.frame_count, record.config_path, record.map_path)
        frames = [np.array(image) for image in self.render_frames(record)]

        if output_path is None:
            output_path = os.path.join(tempfile.gettempdir(), "snake_replay.mp4")

        clip = ImageSequenceClip(frames, fps=self._fps_for(record))
        clip.write_videofile(output_path, codec='libx264', audio=False, logger=None)

        logger.info("Video created successfully at %s", output_path)
        return output_path

    def generate_gif(self, record: GameRecord, output_path: str) -> str:
        """Write the record as an animated GIF, one record frame per GIF frame"""
        if not record.frames:
            raise ValueError("record has no frames to render")

        images = self.render_frames(record)
        duration_ms = int(round(1000 / self._fps_for(record)))
        images[0].save(
            output_path,
            save_all=True,
            append_images=images[1:],
            duration=duration_ms,
            loop=0,
        )
        logger.info("GIF created successfully at %s", output_path)
        return output_path
