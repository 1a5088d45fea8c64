"""League configuration management."""

from functools import lru_cache
from pathlib import Path

from .schemas import LeagueConfig
from .utils import load_json

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'league_config.json'


@lru_cache(maxsize=1)
def get_config() -> LeagueConfig:
    """
    Load league configuration from data/league_config.json.

    Configuration is cached after first load. A missing file yields the
    defaults.

    Raises:
        ValueError: If the config file has invalid structure

    Example:
        from pickleleague.config import get_config
        config = get_config()
        print(f"Minimum players: {config.min_available_players}")
    """
    if not CONFIG_PATH.exists():
        return LeagueConfig()
    return load_json(CONFIG_PATH, schema=LeagueConfig)


def get_available_player_bounds() -> tuple[int, int]:
    """(min, max) players allowed to be available in a week."""
    config = get_config()
    return config.min_available_players, config.max_available_players


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime.
    """
    get_config.cache_clear()
