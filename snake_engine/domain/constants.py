"""
Game constants for the snake engine.
"""

from typing import Dict, Tuple

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Unit vectors in screen coordinates: y grows downward
DELTAS: Dict[str, Tuple[int, int]] = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# Cell characters. These are part of the record file format.
EMPTY = "0"
HEAD = "#"
BODY = "*"
OBSTACLE = "O"
VERTICAL_WALL = "|"
HORIZONTAL_WALL = "-"
FOOD_CELLS = {1: "1", 2: "2", 3: "3"}
FOOD_VALUES = {cell: value for value, cell in FOOD_CELLS.items()}
CELL_ALPHABET = frozenset(
    [EMPTY, HEAD, BODY, OBSTACLE, VERTICAL_WALL, HORIZONTAL_WALL] + list(FOOD_CELLS.values())
)

# Intents delivered by input collaborators
INTENT_UP = "up"
INTENT_DOWN = "down"
INTENT_LEFT = "left"
INTENT_RIGHT = "right"
INTENT_PAUSE = "pause"
INTENT_RESUME = "resume"
INTENT_QUIT = "quit"
DIRECTION_INTENTS = {
    INTENT_UP: UP,
    INTENT_DOWN: DOWN,
    INTENT_LEFT: LEFT,
    INTENT_RIGHT: RIGHT,
}
VALID_INTENTS = set(DIRECTION_INTENTS) | {INTENT_PAUSE, INTENT_RESUME, INTENT_QUIT}

# Game settings
INITIAL_SNAKE_LENGTH = 4
MIN_DIFFICULTY, MAX_DIFFICULTY = 1, 10
MIN_FOOD_COUNT, MAX_FOOD_COUNT = 1, 5
MIN_BOARD_SIZE, MAX_BOARD_SIZE = 8, 20
RANDOM_SEED_FROM_TIME = -1
PROBABILITY_TOLERANCE = 1e-9
