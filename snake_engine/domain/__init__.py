"""
Domain entities for the snake engine.

This module contains the core game entities that are independent of
infrastructure concerns (terminal, files, video encoding).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE
from .config import EdgeWalls, GameConfig, MapDefinition
from .errors import SnakeEngineError, ConfigInvalid, AllocationExhausted, RecordCorrupt
from .food import FoodItem, FoodAllocator
from .frame import Frame
from .game_state import SimulationState
from .grid import Grid, Resolution
from .snake import Snake

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE',
    'EdgeWalls', 'GameConfig', 'MapDefinition',
    'SnakeEngineError', 'ConfigInvalid', 'AllocationExhausted', 'RecordCorrupt',
    'FoodItem', 'FoodAllocator',
    'Frame',
    'SimulationState',
    'Grid', 'Resolution',
    'Snake',
]
