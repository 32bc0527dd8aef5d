"""
Scripted player - replays a fixed list of intents, one entry per tick.
"""

from collections import deque
from typing import Iterable, List, Optional, Sequence, Union

from ..domain.constants import INTENT_QUIT, VALID_INTENTS
from ..domain.game_state import SimulationState
from .base import Player

ScriptEntry = Optional[Union[str, Sequence[str]]]


class ScriptedPlayer(Player):
    """
    Each script entry is what the player sends during one tick: None for
    nothing, a single intent, or a list of intents. Once the script runs out
    the player stays silent, and a paused game is quit.
    """

    def __init__(self, script: Iterable[ScriptEntry] = ()):
        self.script = deque(self._normalize(entry) for entry in script)

    @staticmethod
    def _normalize(entry: ScriptEntry) -> List[str]:
        if entry is None:
            return []
        intents = [entry] if isinstance(entry, str) else list(entry)
        for intent in intents:
            if intent not in VALID_INTENTS:
                raise ValueError(f"Unknown intent {intent!r} in script")
        return intents

    def poll(self, state: SimulationState, timeout: float) -> List[str]:
        if not self.script:
            return []
        return self.script.popleft()

    def wait_for_intent(self, state: SimulationState) -> str:
        while self.script:
            intents = self.script.popleft()
            if intents:
                head, rest = intents[0], intents[1:]
                if rest:
                    self.script.appendleft(rest)
                return head
        return INTENT_QUIT

    @property
    def exhausted(self) -> bool:
        return not self.script
