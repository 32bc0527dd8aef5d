"""
Keyboard player - reads keys from a curses window.
"""

import curses
import time
from typing import Callable, List

from ..domain.constants import (
    INTENT_DOWN,
    INTENT_LEFT,
    INTENT_PAUSE,
    INTENT_QUIT,
    INTENT_RESUME,
    INTENT_RIGHT,
    INTENT_UP,
)
from ..domain.game_state import SimulationState
from .base import Player

# Key mappings
KEY_MAP = {
    curses.KEY_UP: INTENT_UP, ord('w'): INTENT_UP, ord('W'): INTENT_UP,
    curses.KEY_DOWN: INTENT_DOWN, ord('s'): INTENT_DOWN, ord('S'): INTENT_DOWN,
    curses.KEY_LEFT: INTENT_LEFT, ord('a'): INTENT_LEFT, ord('A'): INTENT_LEFT,
    curses.KEY_RIGHT: INTENT_RIGHT, ord('d'): INTENT_RIGHT, ord('D'): INTENT_RIGHT,
}
PAUSE_KEYS = {ord(' '), ord('p'), ord('P')}
QUIT_KEYS = {ord('q'), ord('Q')}


class KeyboardPlayer(Player):
    """
    Polls a curses window for keys.

    Space (or p) pauses a running game and resumes a paused one; q quits
    a paused game or a replay.
    """

    def __init__(self, window, clock: Callable[[], float] = time.monotonic):
        self.window = window
        self.clock = clock
        self.window.keypad(True)

    def _read_key(self, timeout_ms: int) -> int:
        self.window.timeout(timeout_ms)
        return self.window.getch()

    def poll(self, state: SimulationState, timeout: float) -> List[str]:
        """Collect keys until the tick deadline; the tick always lasts `timeout`."""
        intents = []
        deadline = self.clock() + timeout
        while True:
            remaining = deadline - self.clock()
            if remaining <= 0:
                break
            ch = self._read_key(max(1, int(remaining * 1000)))
            if ch == -1:
                continue
            if ch in KEY_MAP:
                intents.append(KEY_MAP[ch])
            elif ch in PAUSE_KEYS:
                intents.append(INTENT_PAUSE)
            elif ch in QUIT_KEYS:
                intents.append(INTENT_QUIT)
        return intents

    def wait_for_intent(self, state: SimulationState) -> str:
        while True:
            ch = self._read_key(-1)
            if ch in PAUSE_KEYS:
                return INTENT_RESUME
            if ch in QUIT_KEYS:
                return INTENT_QUIT

    def quit_requested(self, seconds: float) -> bool:
        """Wait up to `seconds`; True as soon as q is pressed. Used as a replay wait."""
        deadline = self.clock() + seconds
        while True:
            remaining = deadline - self.clock()
            if remaining <= 0:
                return False
            ch = self._read_key(max(1, int(remaining * 1000)))
            if ch in QUIT_KEYS:
                return True

    def wait_for_key(self) -> int:
        return self._read_key(-1)
