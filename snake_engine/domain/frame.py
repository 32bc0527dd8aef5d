"""
Frame entity - an immutable snapshot of the board and score at one tick.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import FOOD_VALUES, HEAD

Point = Tuple[int, int]


@dataclass(frozen=True)
class Frame:
    """
    Attributes:
        rows: the full character buffer, border included, one string per row
        score: score at the time of capture
    """
    rows: Tuple[str, ...]
    score: int

    @property
    def width(self) -> int:
        """Interior width."""
        return len(self.rows[0]) - 2 if self.rows else 0

    @property
    def height(self) -> int:
        """Interior height."""
        return len(self.rows) - 2

    def cell(self, point: Point) -> str:
        x, y = point
        return self.rows[y][x]

    def find(self, cell: str) -> List[Point]:
        return [
            (x, y)
            for y, row in enumerate(self.rows)
            for x, ch in enumerate(row)
            if ch == cell
        ]

    @property
    def head(self) -> Optional[Point]:
        heads = self.find(HEAD)
        return heads[0] if heads else None

    def food(self) -> List[Tuple[Point, int]]:
        return [
            ((x, y), FOOD_VALUES[ch])
            for y, row in enumerate(self.rows)
            for x, ch in enumerate(row)
            if ch in FOOD_VALUES
        ]
