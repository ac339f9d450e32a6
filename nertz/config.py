"""Tracker configuration management."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_STATE_PATH, DEFAULT_TARGET_SCORE, MIN_PLAYERS, STORAGE_KEY
from .utils import load_json

CONFIG_ENV_VAR = 'NERTZ_CONFIG'
DEFAULT_CONFIG_PATH = 'nertz_config.json'


class TrackerConfig(BaseModel):
    """Tracker configuration settings."""

    model_config = ConfigDict(extra='forbid')

    state_path: str = DEFAULT_STATE_PATH
    storage_key: str = Field(STORAGE_KEY, min_length=1)
    target_score: int = Field(DEFAULT_TARGET_SCORE, ge=1)
    min_players: int = Field(MIN_PLAYERS, ge=1)
    log_dir: str | None = None
    log_level: str = Field('WARNING', pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')


def get_config_path() -> Path:
    """Config file location: $NERTZ_CONFIG, else nertz_config.json in the working directory."""
    return Path(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH))


@lru_cache(maxsize=1)
def get_config() -> TrackerConfig:
    """
    Load tracker configuration.

    A missing file yields the defaults. Configuration is cached after the
    first load.

    Raises:
        json.JSONDecodeError: If the config file is not valid JSON
        ValueError: If the config file has an invalid structure

    Example:
        from nertz.config import get_config
        config = get_config()
        print(f"Playing to {config.target_score}")
    """
    path = get_config_path()
    if not path.exists():
        return TrackerConfig()
    return load_json(path, schema=TrackerConfig)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file or $NERTZ_CONFIG changes during runtime.
    """
    get_config.cache_clear()
