"""
Food items and the allocator that places them.
"""

import logging
import random
from typing import Collection, NamedTuple, Sequence, Tuple

from .constants import FOOD_CELLS
from .errors import AllocationExhausted
from .grid import Grid

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


class FoodItem(NamedTuple):
    x: int
    y: int
    value: int

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    @property
    def cell(self) -> str:
        return FOOD_CELLS[self.value]


def food_value(r: float, probabilities: Sequence[float]) -> int:
    """
    Map a uniform draw in [0, 1) to a food value.

    The thresholds are closed-open: r < p1 gives 1, r < p1 + p2 gives 2,
    anything else gives 3.
    """
    p1, p2 = probabilities[0], probabilities[1]
    if r < p1:
        return 1
    if r < p1 + p2:
        return 2
    return 3


class FoodAllocator:
    """
    Picks free interior cells for food and rolls their value.

    The random generator is owned by the game and seeded once, so a fixed
    seed reproduces the same food sequence.
    """

    def __init__(self, grid: Grid, probabilities: Sequence[float], rng: random.Random):
        self.grid = grid
        self.probabilities = tuple(probabilities)
        self.rng = rng

    def place(self, excluded: Collection[Point]) -> FoodItem:
        """
        Return a food item on a random cell not in `excluded`.

        Raises:
            AllocationExhausted: every interior cell is taken
        """
        occupied = {p for p in excluded if self.grid.contains(p)}
        if len(occupied) >= self.grid.interior_size:
            raise AllocationExhausted(
                f"no free cell left on the {self.grid.width}x{self.grid.height} board"
            )

        # Rejection sampling; at least one free cell exists so this terminates
        while True:
            x = self.rng.randrange(self.grid.width) + 1
            y = self.rng.randrange(self.grid.height) + 1
            if (x, y) not in occupied:
                break

        value = food_value(self.rng.random(), self.probabilities)
        logger.debug("Placed %d-point food at %s", value, (x, y))
        return FoodItem(x, y, value)
