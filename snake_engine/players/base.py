"""
Base player interface for the game engine.
"""

from typing import List

from ..domain.game_state import SimulationState


class Player:
    """
    Base class/interface for input sources.

    A player turns whatever it listens to (keyboard, a script, a random
    policy) into intents: up, down, left, right, pause, resume, quit.
    """

    def poll(self, state: SimulationState, timeout: float) -> List[str]:
        """
        Return the intents received within at most `timeout` seconds.

        Args:
            state: Current state of the game (read-only)
            timeout: Length of one tick

        Returns:
            Intents in the order they arrived, possibly empty
        """
        raise NotImplementedError

    def wait_for_intent(self, state: SimulationState) -> str:
        """Block until the next intent arrives. Used while the game is paused."""
        raise NotImplementedError
