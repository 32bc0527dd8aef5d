"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from ..domain.constants import DIRECTION_INTENTS, INTENT_RESUME, OPPOSITE
from ..domain.game_state import SimulationState
from .base import Player


class RandomPlayer(Player):
    """
    A random autopilot that picks a direction avoiding walls, its own body
    and obstacles. Useful for headless runs and smoke tests.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def safe_intents(self, state: SimulationState) -> List[str]:
        snake = state.snake
        body = set(snake.body_without_tail())
        safe = []
        for intent, direction in sorted(DIRECTION_INTENTS.items()):
            # Reversals are ignored by the game anyway
            if direction == OPPOSITE[state.direction]:
                continue
            point, crossed_wall = state.grid.resolve(snake.head, direction)
            if crossed_wall or point in body or point in state.obstacles:
                continue
            safe.append(intent)
        return safe

    def poll(self, state: SimulationState, timeout: float) -> List[str]:
        safe = self.safe_intents(state)
        # If no valid moves, keep going (we'll die anyway)
        if not safe:
            return []
        return [self.rng.choice(safe)]

    def wait_for_intent(self, state: SimulationState) -> str:
        return INTENT_RESUME
