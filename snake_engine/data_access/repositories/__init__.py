"""
Repository classes over the data directory.
"""

from .base import FileRepository
from .config_repository import ConfigRepository
from .leaderboard_repository import LeaderboardEntry, LeaderboardRepository
from .map_repository import MapRepository
from .record_repository import RecordRepository

__all__ = [
    'FileRepository',
    'ConfigRepository',
    'MapRepository',
    'RecordRepository',
    'LeaderboardRepository',
    'LeaderboardEntry',
]
