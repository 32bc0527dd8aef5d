"""
Grid entity - the character cell buffer the game is played on.

The buffer is (height + 2) rows by (width + 2) columns: the interior is
1-based and the outer ring only shows whether each edge is a wall or open.
"""

from typing import Iterator, List, NamedTuple, Tuple

from .config import EdgeWalls
from .constants import DELTAS, EMPTY, HORIZONTAL_WALL, VERTICAL_WALL

Point = Tuple[int, int]


class Resolution(NamedTuple):
    """Outcome of stepping from a cell: where the step lands and whether it hit a wall."""
    point: Point
    crossed_wall: bool


class Grid:
    """
    Represents the board.

    Attributes:
        width, height: interior dimensions
        walls: which of the four edges are walls
        cells: list of rows, each a list of single-character cell states
    """

    def __init__(self, width: int, height: int, walls: EdgeWalls):
        self.width = width
        self.height = height
        self.walls = walls
        self.cells: List[List[str]] = [[EMPTY] * (width + 2) for _ in range(height + 2)]
        self._paint_border()

    def _paint_border(self):
        # Columns first, then rows: corners show '-' when a horizontal edge is a wall
        if self.walls.left:
            for row in self.cells:
                row[0] = VERTICAL_WALL
        if self.walls.right:
            for row in self.cells:
                row[self.width + 1] = VERTICAL_WALL
        if self.walls.up:
            self.cells[0] = [HORIZONTAL_WALL] * (self.width + 2)
        if self.walls.down:
            self.cells[self.height + 1] = [HORIZONTAL_WALL] * (self.width + 2)

    def contains(self, point: Point) -> bool:
        """True if the point lies in the playable interior."""
        x, y = point
        return 1 <= x <= self.width and 1 <= y <= self.height

    def get(self, point: Point) -> str:
        x, y = point
        return self.cells[y][x]

    def set(self, point: Point, cell: str) -> None:
        if not self.contains(point):
            raise ValueError(f"{point} is not an interior cell of a {self.width}x{self.height} grid")
        x, y = point
        self.cells[y][x] = cell

    def interior_cells(self) -> Iterator[Point]:
        for y in range(1, self.height + 1):
            for x in range(1, self.width + 1):
                yield (x, y)

    @property
    def interior_size(self) -> int:
        return self.width * self.height

    def resolve(self, point: Point, direction: str) -> Resolution:
        """
        Step one cell from `point` in `direction`.

        Leaving the interior through a wall edge reports crossed_wall=True and
        returns the out-of-bounds point, which the caller must not commit.
        Leaving through an open edge wraps to the opposite side.
        """
        dx, dy = DELTAS[direction]
        x, y = point[0] + dx, point[1] + dy

        if y == 0:
            if self.walls.up:
                return Resolution((x, y), True)
            y = self.height
        elif y == self.height + 1:
            if self.walls.down:
                return Resolution((x, y), True)
            y = 1

        if x == 0:
            if self.walls.left:
                return Resolution((x, y), True)
            x = self.width
        elif x == self.width + 1:
            if self.walls.right:
                return Resolution((x, y), True)
            x = 1

        return Resolution((x, y), False)

    def rows(self) -> Tuple[str, ...]:
        """Snapshot of the whole buffer, border included, one string per row."""
        return tuple("".join(row) for row in self.cells)

    def __repr__(self):
        return f"<Grid {self.width}x{self.height} walls={tuple(self.walls)}>"
