"""
Plain-text renderer used by headless runs and logs.
"""

import sys
from typing import Optional, TextIO

from ..domain.frame import Frame
from .base import Renderer, RenderStatus
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
    status_lines,
    token_for,
)

GLYPHS = {
    TOKEN_EMPTY: " ",
    TOKEN_FOOD_1: "1",
    TOKEN_FOOD_2: "2",
    TOKEN_FOOD_3: "3",
    TOKEN_HEAD: "#",
    TOKEN_BODY: "*",
    TOKEN_OBSTACLE: "O",
    TOKEN_WALL_VERTICAL: "|",
    TOKEN_WALL_HORIZONTAL: "-",
}


def print_board(frame: Frame) -> str:
    """
    Returns a string representation of the board with:
    ' ' = empty space
    1,2,3 = food worth that many points
    # = snake head, * = snake body
    O = obstacle, | and - = wall edges
    """
    return "\n".join(
        "".join(GLYPHS[token_for(cell)] for cell in row)
        for row in frame.rows
    )


class TextRenderer(Renderer):
    """Writes each frame and its status lines to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def draw(self, frame: Frame, status: RenderStatus) -> None:
        lines = [print_board(frame)]
        lines.extend(status_lines(
            status.score, status.terminal, status.paused, status.replay,
            status.config_path, status.map_path,
        ))
        self.stream.write("\n".join(lines) + "\n\n")
        self.stream.flush()
