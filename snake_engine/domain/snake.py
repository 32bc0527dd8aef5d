"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Optional, Tuple

Point = Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Point]):
        if len(set(positions)) != len(positions):
            raise ValueError(f"snake segments overlap: {positions}")
        self.positions = deque(positions)

    @property
    def head(self) -> Point:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Point:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def __len__(self):
        return len(self.positions)

    def __contains__(self, point):
        return point in self.positions

    def body_without_tail(self) -> List[Point]:
        """Segments the head can collide with this tick; the tail moves away."""
        return list(self.positions)[:-1]

    def advance(self, new_head: Point) -> Point:
        """Move one cell: push the new head and drop the tail, returning it."""
        tail = self.positions.pop()
        self.positions.appendleft(new_head)
        return tail

    def grow(self, tail: Point) -> None:
        """Put a just-dropped tail back, lengthening the snake by one."""
        self.positions.append(tail)

    def neck(self) -> Optional[Point]:
        return self.positions[1] if len(self.positions) > 1 else None

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self)}>"
