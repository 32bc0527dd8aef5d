"""
Game configuration and map definition entities.

Both are validated when they are built, so a game never starts with values
outside the documented ranges.
"""

import math
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, NamedTuple, Tuple

from .constants import (
    INITIAL_SNAKE_LENGTH,
    MAX_BOARD_SIZE,
    MAX_DIFFICULTY,
    MAX_FOOD_COUNT,
    MIN_BOARD_SIZE,
    MIN_DIFFICULTY,
    MIN_FOOD_COUNT,
    PROBABILITY_TOLERANCE,
)
from .errors import ConfigInvalid

Point = Tuple[int, int]


class EdgeWalls(NamedTuple):
    """Per-edge wall flags. True means the edge kills, False means it wraps."""
    up: bool = True
    down: bool = True
    left: bool = True
    right: bool = True


@dataclass(frozen=True)
class GameConfig:
    """
    Settings for one game.

    Attributes:
        difficulty: 1-10, the snake moves one cell every 1 / difficulty seconds
        random_seed: seed for food placement, -1 to seed from the current time
        food_count: number of food slots on the board (1-5)
        food_probabilities: probabilities of 1, 2 and 3 point food
    """
    difficulty: int = 1
    random_seed: int = -1
    food_count: int = 1
    food_probabilities: Tuple[float, float, float] = (0.6, 0.3, 0.1)

    def __post_init__(self):
        object.__setattr__(self, "food_probabilities", tuple(float(p) for p in self.food_probabilities))
        self.validate()

    def validate(self) -> None:
        if not isinstance(self.difficulty, int) or not MIN_DIFFICULTY <= self.difficulty <= MAX_DIFFICULTY:
            raise ConfigInvalid(
                f"difficulty must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}, got {self.difficulty!r}"
            )
        if not isinstance(self.random_seed, int):
            raise ConfigInvalid(f"random_seed must be an integer, got {self.random_seed!r}")
        if not isinstance(self.food_count, int) or not MIN_FOOD_COUNT <= self.food_count <= MAX_FOOD_COUNT:
            raise ConfigInvalid(
                f"food_count must be between {MIN_FOOD_COUNT} and {MAX_FOOD_COUNT}, got {self.food_count!r}"
            )
        if len(self.food_probabilities) != 3:
            raise ConfigInvalid("food_probabilities must hold exactly three values")
        for p in self.food_probabilities:
            if not 0.0 <= p <= 1.0:
                raise ConfigInvalid(f"food probability {p} is outside [0, 1]")
        total = sum(self.food_probabilities)
        if not math.isclose(total, 1.0, rel_tol=0.0, abs_tol=PROBABILITY_TOLERANCE):
            raise ConfigInvalid(f"food probabilities must sum to 1.0, got {total}")

    @property
    def tick_seconds(self) -> float:
        """Length of one tick, which is also the input polling window."""
        return 1.0 / self.difficulty


def initial_snake_positions(width: int, height: int) -> list:
    """Starting snake in the middle of the board, head first, facing right."""
    head_x = width // 2 + 1
    y = height // 2 + 1
    return [(head_x - i, y) for i in range(INITIAL_SNAKE_LENGTH)]


@dataclass(frozen=True)
class MapDefinition:
    """
    Board layout for one game.

    Obstacles are interior coordinates, 1-based, the same space the snake
    moves in.
    """
    width: int = 15
    height: int = 15
    walls: EdgeWalls = EdgeWalls()
    obstacles: FrozenSet[Point] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "walls", EdgeWalls(*(bool(w) for w in self.walls)))
        object.__setattr__(self, "obstacles", frozenset(tuple(p) for p in self.obstacles))
        self.validate()

    def validate(self) -> None:
        for name, value in (("width", self.width), ("height", self.height)):
            if not isinstance(value, int) or not MIN_BOARD_SIZE <= value <= MAX_BOARD_SIZE:
                raise ConfigInvalid(
                    f"map {name} must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}, got {value!r}"
                )
        for x, y in self.obstacles:
            if not (1 <= x <= self.width and 1 <= y <= self.height):
                raise ConfigInvalid(f"obstacle {(x, y)} is outside the {self.width}x{self.height} board")
        blocked = self.obstacles.intersection(initial_snake_positions(self.width, self.height))
        if blocked:
            raise ConfigInvalid(f"obstacles {sorted(blocked)} overlap the starting snake")

    @classmethod
    def from_zero_based(
        cls,
        width: int,
        height: int,
        walls: Iterable[bool],
        obstacles: Iterable[Point] = (),
    ) -> "MapDefinition":
        """Build a map from obstacle coordinates stored 0-based, as in .map files."""
        return cls(
            width=width,
            height=height,
            walls=EdgeWalls(*walls),
            obstacles=frozenset((x + 1, y + 1) for x, y in obstacles),
        )

    def zero_based_obstacles(self) -> list:
        return sorted((x - 1, y - 1) for x, y in self.obstacles)
