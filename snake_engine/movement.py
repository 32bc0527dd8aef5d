"""
Movement and collision rules: advance the snake one cell per tick.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .domain.constants import BODY, EMPTY, HEAD
from .domain.errors import AllocationExhausted
from .domain.food import FoodAllocator
from .domain.game_state import SimulationState

logger = logging.getLogger(__name__)

# Tick outcomes
MOVED = "moved"
FED = "fed"
COLLIDED = "collided"
SKIPPED = "skipped"

# Collision causes
WALL = "wall"
SELF = "self"
OBSTACLE = "obstacle"


@dataclass(frozen=True)
class TickResult:
    outcome: str
    cause: Optional[str] = None
    food_value: int = 0

    @property
    def collided(self) -> bool:
        return self.outcome == COLLIDED


class MovementEngine:
    """
    Applies one tick to a SimulationState.

    Collisions are checked before anything is written, so on a fatal tick the
    grid is left exactly as it was and the game is only marked over.
    """

    def __init__(self, allocator: FoodAllocator):
        self.allocator = allocator

    def step(self, state: SimulationState) -> TickResult:
        """
        Execute one tick in state.direction:
          1) Resolve the next head cell through the grid (wall or wrap)
          2) Check body (tail excluded) and obstacle collisions
          3) Shift the snake
          4) Eat, grow and replace the eaten food
        """
        if state.over or state.paused:
            return TickResult(SKIPPED)

        snake = state.snake
        resolution = state.grid.resolve(snake.head, state.direction)
        if resolution.crossed_wall:
            return self._collide(state, WALL)

        candidate = resolution.point
        # The tail leaves its cell this tick, so moving into it is allowed
        if candidate in snake.body_without_tail():
            return self._collide(state, SELF)
        if candidate in state.obstacles:
            return self._collide(state, OBSTACLE)

        old_head = snake.head
        state.grid.set(snake.tail, EMPTY)
        tail = snake.advance(candidate)
        state.grid.set(old_head, BODY)
        state.grid.set(candidate, HEAD)

        slot = state.food_slot_at(candidate)
        if slot is None:
            return TickResult(MOVED)

        value = state.foods[slot].value
        state.score += value
        snake.grow(tail)
        state.grid.set(tail, BODY)
        logger.debug("Ate %d-point food at %s, score=%d length=%d", value, candidate, state.score, len(snake))

        try:
            replacement = self.allocator.place(state.occupied(skip_slot=slot))
        except AllocationExhausted:
            # The eaten item is gone and nothing replaces it
            del state.foods[slot]
            raise
        state.set_food(slot, replacement)
        return TickResult(FED, food_value=value)

    def _collide(self, state: SimulationState, cause: str) -> TickResult:
        state.over = True
        state.cause = cause
        logger.debug("Collision (%s) with head at %s moving %s", cause, state.snake.head, state.direction)
        return TickResult(COLLIDED, cause=cause)
