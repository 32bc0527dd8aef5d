"""
Repository for game configuration files (config/*.config).

File layout, whitespace separated:

    difficulty
    random_seed
    food_count
    p1 p2 p3
"""

from ...domain.config import GameConfig
from ...domain.errors import ConfigInvalid
from .selectable import SelectableRepository

DEFAULT_CONFIG_TEXT = "1\n-1\n1\n0.6 0.3 0.1\n"


def parse_config(text: str) -> GameConfig:
    tokens = text.split()
    if len(tokens) != 6:
        raise ConfigInvalid(f"expected 6 values in a config file, found {len(tokens)}")
    try:
        difficulty, seed, food_count = (int(t) for t in tokens[:3])
        probabilities = tuple(float(t) for t in tokens[3:])
    except ValueError as exc:
        raise ConfigInvalid(f"malformed config value: {exc}") from exc
    return GameConfig(
        difficulty=difficulty,
        random_seed=seed,
        food_count=food_count,
        food_probabilities=probabilities,
    )


def format_config(config: GameConfig) -> str:
    p1, p2, p3 = config.food_probabilities
    return (
        f"{config.difficulty}\n"
        f"{config.random_seed}\n"
        f"{config.food_count}\n"
        f"{p1:g} {p2:g} {p3:g}\n"
    )


class ConfigRepository(SelectableRepository[GameConfig]):
    subdir = "config"
    suffix = ".config"
    default_text = DEFAULT_CONFIG_TEXT

    def parse(self, text: str) -> GameConfig:
        return parse_config(text)

    def format(self, obj: GameConfig) -> str:
        return format_config(obj)
