"""
Exceptions raised by the snake engine.

Collisions are not errors: they end the game and show up in the final frame.
"""


class SnakeEngineError(Exception):
    """Base class for all engine errors."""


class ConfigInvalid(SnakeEngineError, ValueError):
    """A configuration or map definition is out of range or unparsable."""


class AllocationExhausted(SnakeEngineError):
    """No free interior cell is left to place food on."""


class RecordCorrupt(SnakeEngineError, ValueError):
    """A persisted game record is malformed or truncated."""
