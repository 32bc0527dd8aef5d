"""
Tests for movement.py - one tick of snake movement and collision.
"""

import random
from unittest.mock import Mock

import pytest

from snake_engine.domain.config import EdgeWalls, MapDefinition
from snake_engine.domain.constants import DIRECTION_INTENTS, DOWN, LEFT, RIGHT
from snake_engine.domain.errors import AllocationExhausted
from snake_engine.domain.food import FoodAllocator, FoodItem
from snake_engine.domain.game_state import SimulationState
from snake_engine.movement import (
    COLLIDED,
    FED,
    MOVED,
    OBSTACLE,
    SELF,
    SKIPPED,
    WALL,
    MovementEngine,
)
from snake_engine.players import RandomPlayer


def make_engine(state, seed=1):
    allocator = FoodAllocator(state.grid, (0.6, 0.3, 0.1), random.Random(seed))
    return MovementEngine(allocator)


class TestMoves:
    """Plain moves and feeding."""

    def test_move_right(self):
        state = SimulationState(MapDefinition())
        result = make_engine(state).step(state)

        assert result.outcome == MOVED
        assert list(state.snake.positions) == [(9, 8), (8, 8), (7, 8), (6, 8)]
        assert state.grid.get((9, 8)) == "#"
        assert state.grid.get((8, 8)) == "*"
        assert state.grid.get((5, 8)) == "0"

    def test_eating_grows_scores_and_replaces_food(self):
        state = SimulationState(MapDefinition())
        state.set_food(0, FoodItem(9, 8, 2))
        result = make_engine(state).step(state)

        assert result.outcome == FED
        assert result.food_value == 2
        assert state.score == 2
        assert len(state.snake) == 5
        assert state.snake.head == (9, 8)
        assert state.grid.get((5, 8)) == "*"

        assert len(state.foods) == 1
        replacement = state.foods[0]
        assert replacement.position not in state.snake
        assert state.grid.get(replacement.position) == replacement.cell

    def test_only_eaten_slot_is_replaced(self):
        state = SimulationState(MapDefinition())
        state.set_food(0, FoodItem(2, 2, 1))
        state.set_food(1, FoodItem(9, 8, 3))
        make_engine(state).step(state)

        assert state.foods[0] == FoodItem(2, 2, 1)
        assert state.foods[1].position != (9, 8)
        assert state.score == 3

    def test_unreplaceable_food_is_removed(self):
        state = SimulationState(MapDefinition())
        state.set_food(0, FoodItem(2, 2, 1))
        state.set_food(1, FoodItem(9, 8, 3))
        engine = make_engine(state)
        engine.allocator.place = Mock(side_effect=AllocationExhausted("no free cell"))

        with pytest.raises(AllocationExhausted):
            engine.step(state)

        assert state.foods == [FoodItem(2, 2, 1)]
        assert state.score == 3
        assert len(state.snake) == 5
        assert state.grid.get((9, 8)) == "#"

    def test_wraps_through_open_edge(self):
        game_map = MapDefinition(walls=EdgeWalls(False, False, False, False))
        state = SimulationState(game_map, [(15, 3), (14, 3), (13, 3), (12, 3)], RIGHT)
        result = make_engine(state).step(state)

        assert result.outcome == MOVED
        assert state.snake.head == (1, 3)
        assert state.grid.get((1, 3)) == "#"
        assert state.grid.get((12, 3)) == "0"

    def test_moving_into_the_tail_is_allowed(self):
        state = SimulationState(MapDefinition(), [(5, 5), (6, 5), (6, 6), (5, 6)], DOWN)
        result = make_engine(state).step(state)

        assert result.outcome == MOVED
        assert list(state.snake.positions) == [(5, 6), (5, 5), (6, 5), (6, 6)]
        assert state.grid.get((5, 6)) == "#"

    def test_skipped_when_paused_or_over(self):
        state = SimulationState(MapDefinition())
        engine = make_engine(state)
        state.paused = True
        assert engine.step(state).outcome == SKIPPED
        state.paused = False
        state.over = True
        assert engine.step(state).outcome == SKIPPED
        assert state.snake.head == (8, 8)


class TestCollisions:
    """Fatal ticks leave the grid untouched."""

    def test_wall(self):
        state = SimulationState(MapDefinition(), [(1, 8), (2, 8), (3, 8), (4, 8)], LEFT)
        before = state.grid.rows()
        result = make_engine(state).step(state)

        assert result.outcome == COLLIDED
        assert result.cause == WALL
        assert state.over is True
        assert state.cause == WALL
        assert state.snake.head == (1, 8)
        assert state.grid.rows() == before

    def test_self(self):
        positions = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]
        state = SimulationState(MapDefinition(), positions, DOWN)
        before = state.grid.rows()
        result = make_engine(state).step(state)

        assert result.collided
        assert result.cause == SELF
        assert list(state.snake.positions) == positions
        assert state.grid.rows() == before

    def test_obstacle(self):
        state = SimulationState(MapDefinition(obstacles={(9, 8)}))
        before = state.grid.rows()
        result = make_engine(state).step(state)

        assert result.cause == OBSTACLE
        assert state.over is True
        assert state.grid.rows() == before


class TestInvariants:
    """Properties that hold on every tick of long food-seeking games."""

    @staticmethod
    def choose_intent(state, player, rng):
        """Safe move closest to some food, ties broken at random."""
        safe = player.safe_intents(state)
        if not safe:
            return None

        def distance(intent):
            point, _ = state.grid.resolve(state.snake.head, DIRECTION_INTENTS[intent])
            return min(abs(point[0] - f.x) + abs(point[1] - f.y) for f in state.foods)

        best = min(distance(intent) for intent in safe)
        return rng.choice([intent for intent in safe if distance(intent) == best])

    def test_long_games_grow_exactly_when_fed(self):
        game_map = MapDefinition(
            walls=EdgeWalls(False, False, True, True),
            obstacles={(3, 3), (12, 12), (3, 12)},
        )
        total_ticks = 0
        total_feeds = 0
        for seed in range(4):
            state = SimulationState(game_map)
            engine = make_engine(state, seed=seed)
            for slot in range(3):
                state.set_food(slot, engine.allocator.place(state.occupied()))
            player = RandomPlayer(random.Random(seed))
            rng = random.Random(100 + seed)

            for _ in range(400):
                intent = self.choose_intent(state, player, rng)
                if intent is None:
                    break
                state.direction = DIRECTION_INTENTS[intent]
                length_before = len(state.snake)
                score_before = state.score

                result = engine.step(state)
                assert not result.collided
                total_ticks += 1
                fed = result.outcome == FED
                total_feeds += fed

                snake = list(state.snake.positions)
                assert len(snake) - length_before == int(fed)
                assert state.score - score_before == (result.food_value if fed else 0)
                assert len(set(snake)) == len(snake)
                assert len(state.foods) == 3
                food_cells = {f.position for f in state.foods}
                assert len(food_cells) == 3
                assert not food_cells & set(snake)
                assert not food_cells & game_map.obstacles
                assert not set(snake) & game_map.obstacles
                rows = state.grid.rows()
                assert "".join(rows).count("#") == 1
                assert "".join(rows).count("*") == len(snake) - 1
                assert state.grid.get(state.snake.head) == "#"

        assert total_ticks >= 300
        assert total_feeds >= 15
