"""
Data access layer for snake engine files.

This module provides repositories for configuration and map files, saved
game records and the leaderboard, all stored under the data directory.
"""

from .repositories import (
    ConfigRepository,
    LeaderboardEntry,
    LeaderboardRepository,
    MapRepository,
    RecordRepository,
)
from .repositories.config_repository import format_config, parse_config
from .repositories.leaderboard_repository import make_entry
from .repositories.map_repository import format_map, parse_map

__all__ = [
    'ConfigRepository',
    'MapRepository',
    'RecordRepository',
    'LeaderboardRepository',
    'LeaderboardEntry',
    'make_entry',
    'parse_config',
    'format_config',
    'parse_map',
    'format_map',
]
