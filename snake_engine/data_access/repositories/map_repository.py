"""
Repository for map files (map/*.map).

File layout, whitespace separated, obstacle coordinates 0-based:

    width height
    up down left right        (1 = wall, 0 = open)
    obstacle_count
    x y                       (obstacle_count lines)
"""

from ...domain.config import MapDefinition
from ...domain.errors import ConfigInvalid
from .selectable import SelectableRepository

DEFAULT_MAP_TEXT = "15 15\n1 1 1 1\n0\n"


def parse_map(text: str) -> MapDefinition:
    try:
        values = [int(t) for t in text.split()]
    except ValueError as exc:
        raise ConfigInvalid(f"malformed map value: {exc}") from exc

    if len(values) < 7:
        raise ConfigInvalid(f"map file is incomplete: {len(values)} values")
    width, height = values[0], values[1]
    flags = values[2:6]
    count = values[6]
    if any(flag not in (0, 1) for flag in flags):
        raise ConfigInvalid(f"edge flags must be 0 or 1, got {flags}")
    if count < 0:
        raise ConfigInvalid(f"obstacle count {count} is negative")
    coords = values[7:]
    if len(coords) != 2 * count:
        raise ConfigInvalid(f"expected {count} obstacles, found {len(coords) / 2:g}")

    obstacles = [(coords[i], coords[i + 1]) for i in range(0, len(coords), 2)]
    return MapDefinition.from_zero_based(width, height, [bool(f) for f in flags], obstacles)


def format_map(game_map: MapDefinition) -> str:
    walls = " ".join("1" if flag else "0" for flag in game_map.walls)
    obstacles = game_map.zero_based_obstacles()
    lines = [f"{game_map.width} {game_map.height}", walls, str(len(obstacles))]
    lines.extend(f"{x} {y}" for x, y in obstacles)
    return "\n".join(lines) + "\n"


class MapRepository(SelectableRepository[MapDefinition]):
    subdir = "map"
    suffix = ".map"
    default_text = DEFAULT_MAP_TEXT

    def parse(self, text: str) -> MapDefinition:
        return parse_map(text)

    def format(self, obj: MapDefinition) -> str:
        return format_map(obj)
