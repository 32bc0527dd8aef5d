"""
Mapping from cell characters to presentation tokens.

Renderers translate tokens into their own glyphs and colours, so no colour
or terminal assumption ever reaches the engine.
"""

from ..domain.constants import (
    BODY,
    EMPTY,
    FOOD_CELLS,
    HEAD,
    HORIZONTAL_WALL,
    OBSTACLE,
    VERTICAL_WALL,
)

TOKEN_EMPTY = "empty"
TOKEN_FOOD_1 = "food_1"
TOKEN_FOOD_2 = "food_2"
TOKEN_FOOD_3 = "food_3"
TOKEN_HEAD = "head"
TOKEN_BODY = "body"
TOKEN_OBSTACLE = "obstacle"
TOKEN_WALL_VERTICAL = "wall_vertical"
TOKEN_WALL_HORIZONTAL = "wall_horizontal"

CELL_TOKENS = {
    EMPTY: TOKEN_EMPTY,
    FOOD_CELLS[1]: TOKEN_FOOD_1,
    FOOD_CELLS[2]: TOKEN_FOOD_2,
    FOOD_CELLS[3]: TOKEN_FOOD_3,
    HEAD: TOKEN_HEAD,
    BODY: TOKEN_BODY,
    OBSTACLE: TOKEN_OBSTACLE,
    VERTICAL_WALL: TOKEN_WALL_VERTICAL,
    HORIZONTAL_WALL: TOKEN_WALL_HORIZONTAL,
}


def token_for(cell: str) -> str:
    try:
        return CELL_TOKENS[cell]
    except KeyError:
        raise ValueError(f"Unknown cell character {cell!r}") from None


def status_lines(score: int, terminal: bool, paused: bool, replay: bool,
                 config_path: str = "", map_path: str = "") -> list:
    """Text shown under the board: score, file paths and the key prompt."""
    if terminal:
        lines = [f"Game over! Your score is {score}"]
    else:
        lines = [f"Current score: {score}"]
    lines.append(f"Config: {config_path}")
    lines.append(f"Map: {map_path}")

    if replay:
        if terminal:
            lines.append("Replay finished. Press any key to go back.")
        else:
            lines.append("Press q to quit the replay.")
    elif terminal:
        lines.append("Press b to save the record, l to add a leaderboard entry, any other key to leave.")
    elif paused:
        lines.append("Press space to continue, q to quit.")
    else:
        lines.append("Press space to pause, w/a/s/d or arrows to move.")
    return lines
