"""
Curses renderer for live games and replays.

Colours follow the classic look: blue, magenta and yellow food for 1, 2 and
3 points, a green snake that turns red when the game is over.
"""

import curses
import logging

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

logger = logging.getLogger(__name__)

# Colour pair ids
PAIR_FOOD_1 = 1
PAIR_FOOD_2 = 2
PAIR_FOOD_3 = 3
PAIR_SNAKE = 4
PAIR_SNAKE_DEAD = 5
PAIR_TEXT = 6

# token -> (glyph, colour pair, colour pair once the game is over)
PRESENTATION = {
    TOKEN_EMPTY: (" ", 0, 0),
    TOKEN_FOOD_1: ("@", PAIR_FOOD_1, PAIR_FOOD_1),
    TOKEN_FOOD_2: ("@", PAIR_FOOD_2, PAIR_FOOD_2),
    TOKEN_FOOD_3: ("@", PAIR_FOOD_3, PAIR_FOOD_3),
    TOKEN_HEAD: ("#", PAIR_SNAKE, PAIR_SNAKE_DEAD),
    TOKEN_BODY: ("*", PAIR_SNAKE, PAIR_SNAKE_DEAD),
    TOKEN_OBSTACLE: ("O", 0, 0),
    TOKEN_WALL_VERTICAL: ("|", 0, 0),
    TOKEN_WALL_HORIZONTAL: ("-", 0, 0),
}


def init_colors() -> None:
    """Background-coloured cells, as the board reads best with solid blocks."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(PAIR_FOOD_1, curses.COLOR_WHITE, curses.COLOR_BLUE)
    curses.init_pair(PAIR_FOOD_2, curses.COLOR_WHITE, curses.COLOR_MAGENTA)
    curses.init_pair(PAIR_FOOD_3, curses.COLOR_BLACK, curses.COLOR_YELLOW)
    curses.init_pair(PAIR_SNAKE, curses.COLOR_BLACK, curses.COLOR_GREEN)
    curses.init_pair(PAIR_SNAKE_DEAD, curses.COLOR_WHITE, curses.COLOR_RED)
    curses.init_pair(PAIR_TEXT, curses.COLOR_YELLOW, -1)


class CursesRenderer(Renderer):
    """Draws frames into a curses window."""

    def __init__(self, window, colors: bool = True):
        self.window = window
        self.colors = colors
        if colors:
            init_colors()
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal does not support hiding the cursor")

    def _attr(self, pair: int) -> int:
        if not self.colors or pair == 0:
            return 0
        return curses.color_pair(pair)

    def draw(self, frame: Frame, status: RenderStatus) -> None:
        self.window.erase()
        for y, row in enumerate(frame.rows):
            for x, cell in enumerate(row):
                glyph, live_pair, over_pair = PRESENTATION[token_for(cell)]
                pair = over_pair if status.terminal else live_pair
                self._put(y, x, glyph, self._attr(pair))

        lines = status_lines(
            status.score, status.terminal, status.paused, status.replay,
            status.config_path, status.map_path,
        )
        top = len(frame.rows) + 1
        for offset, line in enumerate(lines):
            self._put(top + offset, 0, line, self._attr(PAIR_TEXT))
        self.window.refresh()

    def message(self, text: str) -> None:
        """Show a one-line message below the status lines."""
        height, _ = self.window.getmaxyx()
        self.window.move(height - 1, 0)
        self.window.clrtoeol()
        self._put(height - 1, 0, text, self._attr(PAIR_TEXT))
        self.window.refresh()

    def _put(self, y: int, x: int, text: str, attr: int) -> None:
        try:
            self.window.addstr(y, x, text, attr)
        except curses.error:
            # Writing the bottom-right cell or past a small terminal raises
            logger.debug("Could not draw %r at (%d, %d)", text, y, x)
