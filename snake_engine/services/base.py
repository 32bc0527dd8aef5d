"""
Base renderer interface and the status passed along with each frame.
"""

from typing import NamedTuple

from ..domain.frame import Frame


class RenderStatus(NamedTuple):
    score: int
    terminal: bool
    paused: bool = False
    replay: bool = False
    config_path: str = ""
    map_path: str = ""


class Renderer:
    """
    Base class/interface for anything that shows frames.

    Renderers own every presentation decision; the engine only hands them
    the character grid and a RenderStatus.
    """

    def draw(self, frame: Frame, status: RenderStatus) -> None:
        raise NotImplementedError
