"""
SnakeGame - the simulation controller.

Owns one game's state, drives the tick loop and keeps the frame log used
for saving and replaying the game.
"""

import logging
import random
import time
import uuid
from typing import List, Optional, Tuple

from .domain.config import GameConfig, MapDefinition
from .domain.constants import (
    DIRECTION_INTENTS,
    INTENT_PAUSE,
    INTENT_QUIT,
    INTENT_RESUME,
    OPPOSITE,
    RANDOM_SEED_FROM_TIME,
    RIGHT,
    VALID_MOVES,
)
from .domain.errors import AllocationExhausted
from .domain.food import FoodAllocator
from .domain.frame import Frame
from .domain.game_state import SimulationState
from .movement import FED, SKIPPED, MovementEngine, TickResult
from .recorder import FrameRecorder, GameRecord
from .services.base import RenderStatus

logger = logging.getLogger(__name__)

# Controller states
RUNNING = "running"
PAUSED = "paused"
OVER = "over"


def resolve_seed(random_seed: int) -> int:
    """-1 means seed from the current time; any other value is used as is."""
    if random_seed == RANDOM_SEED_FROM_TIME:
        return int(time.time())
    return random_seed


class SnakeGame:
    """
    Manages:
      - Simulation state (board, snake, food, score)
      - Running / paused / over transitions
      - The latest direction requested by the player
      - Frame log for replay
    """

    def __init__(
        self,
        config: GameConfig,
        game_map: MapDefinition,
        config_path: str = "",
        map_path: str = "",
        snake_positions: Optional[List[Tuple[int, int]]] = None,
        direction: str = RIGHT,
        rng: Optional[random.Random] = None,
        game_id: Optional[str] = None,
    ):
        self.config = config
        self.game_map = game_map
        self.config_path = config_path
        self.map_path = map_path
        self.game_id = game_id or str(uuid.uuid4())

        self.seed = resolve_seed(config.random_seed)
        self.rng = rng if rng is not None else random.Random(self.seed)

        self.state = SimulationState(game_map, snake_positions, direction)
        self.allocator = FoodAllocator(self.state.grid, config.food_probabilities, self.rng)
        self.engine = MovementEngine(self.allocator)
        self.recorder = FrameRecorder(
            config_path, map_path, config.difficulty, game_map.width, game_map.height
        )

        self.tick_count = 0
        self.last_result: Optional[TickResult] = None
        self._requested_direction: Optional[str] = None
        self._finished = False

        for slot in range(config.food_count):
            self.state.set_food(slot, self.allocator.place(self.state.occupied()))

        logger.info(
            "Game %s started on %dx%d board (seed=%d, difficulty=%d, food=%d)",
            self.game_id, game_map.width, game_map.height, self.seed,
            config.difficulty, config.food_count,
        )

    @property
    def status(self) -> str:
        if self.state.over:
            return OVER
        if self.state.paused:
            return PAUSED
        return RUNNING

    @property
    def over(self) -> bool:
        return self.state.over

    @property
    def score(self) -> int:
        return self.state.score

    # ------------------------------------------------------------------
    # Transitions driven by input
    # ------------------------------------------------------------------

    def request_direction(self, direction: str) -> None:
        """
        Remember the latest requested direction for the next tick.

        The reversal check happens when the tick runs, against the direction
        the snake actually moved last.
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}")
        if self.status != RUNNING:
            return
        self._requested_direction = direction

    def pause(self) -> bool:
        if self.status != RUNNING:
            return False
        self.state.paused = True
        logger.debug("Game %s paused at tick %d", self.game_id, self.tick_count)
        return True

    def resume(self) -> bool:
        if self.status != PAUSED:
            return False
        self.state.paused = False
        logger.debug("Game %s resumed", self.game_id)
        return True

    def quit(self) -> bool:
        """End a paused game."""
        if self.status != PAUSED:
            return False
        self.state.paused = False
        self.state.over = True
        self._finish()
        return True

    def handle_intent(self, intent: str) -> None:
        if intent in DIRECTION_INTENTS:
            self.request_direction(DIRECTION_INTENTS[intent])
        elif intent == INTENT_PAUSE:
            self.pause()
        elif intent == INTENT_RESUME:
            self.resume()
        elif intent == INTENT_QUIT:
            self.quit()
        else:
            raise ValueError(f"Unknown intent {intent!r}")

    # ------------------------------------------------------------------
    # Ticks
    # ------------------------------------------------------------------

    def _apply_requested_direction(self) -> None:
        requested, self._requested_direction = self._requested_direction, None
        if requested is None:
            return
        if requested == OPPOSITE[self.state.direction]:
            logger.debug("Ignoring reversal from %s to %s", self.state.direction, requested)
            return
        self.state.direction = requested

    def step(self) -> TickResult:
        """
        Run one tick if the game is running. When the tick ends the game, the
        terminal frame is captured.

        Raises:
            AllocationExhausted: food could not be replaced; the game is over
        """
        if self.status != RUNNING:
            return TickResult(SKIPPED)

        self._apply_requested_direction()
        score_before = self.state.score
        try:
            result = self.engine.step(self.state)
        except AllocationExhausted:
            # The snake already moved and ate, so the tick counts
            self.tick_count += 1
            self.last_result = TickResult(FED, food_value=self.state.score - score_before)
            self.state.over = True
            self._finish()
            raise

        self.tick_count += 1
        self.last_result = result
        if result.collided:
            self._finish()
        return result

    def capture(self) -> Frame:
        return self.recorder.capture(self.state)

    def _finish(self) -> None:
        if self._finished:
            return
        self._finished = True
        self.capture()
        logger.info(
            "Game %s over after %d ticks: score=%d length=%d cause=%s",
            self.game_id, self.tick_count, self.state.score, len(self.state.snake),
            self.state.cause or "quit",
        )

    def render_status(self) -> RenderStatus:
        return RenderStatus(
            score=self.state.score,
            terminal=self.state.over,
            paused=self.state.paused,
            config_path=self.config_path,
            map_path=self.map_path,
        )

    def end(self, reason: str) -> None:
        """End the game from outside the rules, e.g. when a tick limit is hit."""
        if self.over:
            return
        self.state.paused = False
        self.state.over = True
        logger.info("Game %s ended: %s", self.game_id, reason)
        self._finish()

    def run(self, player, renderer=None, max_ticks: Optional[int] = None) -> GameRecord:
        """
        Play until the game is over (or max_ticks ticks have run).

        Each tick: capture and draw the frame, give the player one tick of
        time to send intents, wait out any pause, then move.
        """
        while not self.over:
            if max_ticks is not None and self.tick_count >= max_ticks:
                self.end(f"reached {max_ticks} ticks")
                break

            frame = self.capture()
            if renderer is not None:
                renderer.draw(frame, self.render_status())

            for intent in player.poll(self.state, self.config.tick_seconds):
                self.handle_intent(intent)

            while self.status == PAUSED:
                if renderer is not None:
                    renderer.draw(frame, self.render_status())
                self.handle_intent(player.wait_for_intent(self.state))

            self.step()

        if renderer is not None:
            renderer.draw(self.recorder.frames[-1], self.render_status())
        return self.record()

    def record(self) -> GameRecord:
        return self.recorder.record()
