"""
snake_engine - turn-based snake simulation with frame recording and replay.
"""

__version__ = "1.0.0"
