"""
SimulationState entity - the authoritative state of one running game.
"""

from typing import List, Optional, Set, Tuple

from .config import MapDefinition, initial_snake_positions
from .constants import BODY, EMPTY, HEAD, OBSTACLE, RIGHT, VALID_MOVES
from .food import FoodItem
from .grid import Grid
from .snake import Snake

Point = Tuple[int, int]


class SimulationState:
    """
    Everything the engine mutates during a game.

    Attributes:
        game_map: the map definition the game was built from
        grid: character buffer kept in sync with snake, food and obstacles
        snake: the snake, head first
        foods: one FoodItem per food slot
        obstacles: fixed obstacle coordinates
        direction: direction the snake moved on the last tick
        score: points eaten so far
        over: True once the game has ended
        paused: True while the game is paused
        cause: why the game ended, if it ended by collision
    """

    def __init__(
        self,
        game_map: MapDefinition,
        snake_positions: Optional[List[Point]] = None,
        direction: str = RIGHT,
    ):
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}")

        self.game_map = game_map
        self.grid = Grid(game_map.width, game_map.height, game_map.walls)
        self.obstacles = game_map.obstacles
        self.direction = direction
        self.score = 0
        self.over = False
        self.paused = False
        self.cause: Optional[str] = None
        self.foods: List[FoodItem] = []

        for point in self.obstacles:
            self.grid.set(point, OBSTACLE)

        if snake_positions is None:
            snake_positions = initial_snake_positions(game_map.width, game_map.height)
        for point in snake_positions:
            if not self.grid.contains(point):
                raise ValueError(f"snake segment {point} is outside the board")
            if point in self.obstacles:
                raise ValueError(f"snake segment {point} is on an obstacle")
        self.snake = Snake(list(snake_positions))

        self.grid.set(self.snake.head, HEAD)
        for point in list(self.snake.positions)[1:]:
            self.grid.set(point, BODY)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def occupied(self, skip_slot: Optional[int] = None) -> Set[Point]:
        """Cells food may not be placed on: snake, obstacles and other food."""
        taken = set(self.snake.positions) | set(self.obstacles)
        taken.update(food.position for slot, food in enumerate(self.foods) if slot != skip_slot)
        return taken

    def food_slot_at(self, point: Point) -> Optional[int]:
        for slot, food in enumerate(self.foods):
            if food.position == point:
                return slot
        return None

    def set_food(self, slot: int, item: FoodItem) -> None:
        """
        Put `item` into food slot `slot`, appending when slot == len(foods).

        The previous item of the slot is removed from the grid unless the
        snake already covers it.
        """
        if item.position in self.occupied(skip_slot=slot):
            raise ValueError(f"cannot place food on occupied cell {item.position}")
        if slot < len(self.foods):
            old = self.foods[slot]
            if self.grid.get(old.position) == old.cell:
                self.grid.set(old.position, EMPTY)
            self.foods[slot] = item
        elif slot == len(self.foods):
            self.foods.append(item)
        else:
            raise IndexError(f"food slot {slot} skips past slot {len(self.foods)}")
        self.grid.set(item.position, item.cell)

    def __repr__(self):
        return (
            f"<SimulationState head={self.snake.head}, length={len(self.snake)}, "
            f"foods={list(self.foods)}, score={self.score}, over={self.over}>"
        )
