"""
Player implementations for the snake engine.

Players are the input side of the game: they turn keys, scripts or a random
policy into intents for the controller.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
]
