"""Configuration management.

This module handles:
- Locating the user config file (overridable via LIFX_CONTROL_CONFIG)
- Loading/saving the config JSON
- Reading typed settings with defaults
"""

import json
import os
from pathlib import Path

from core.errors import ConfigError
from models.types import LifxConfig

# Configuration file paths
USER_CONFIG_FILE = Path.home() / '.lifx_control' / 'config.json'
CONFIG_ENV_VAR = 'LIFX_CONTROL_CONFIG'

DEFAULT_POLL_INTERVAL = 0.1


def get_config_file() -> Path:
    """Return the config file path, honouring the LIFX_CONTROL_CONFIG override."""
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return USER_CONFIG_FILE


def load_config() -> LifxConfig:
    """Load configuration from the user config file.

    Returns:
        Config dict; defaults to an empty inventory if the file doesn't exist

    Raises:
        ConfigError: If the file exists but isn't a JSON object
    """
    config_file = get_config_file()
    if not config_file.exists():
        return {'devices': {}}

    try:
        with open(config_file, 'r') as f:
            config = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Config in {config_file} must be a JSON object")
    config.setdefault('devices', {})
    return config


def save_config(config: LifxConfig):
    """Save configuration to file.

    Args:
        config: Configuration dict to save
    """
    config_file = get_config_file()
    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, 'w') as f:
        json.dump(config, f, indent=2)


def get_poll_interval(config: LifxConfig) -> float:
    """Seconds between cancellation checks in looping commands."""
    value = config.get('poll_interval', DEFAULT_POLL_INTERVAL)
    try:
        interval = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"poll_interval must be a number, got {value!r}") from None
    if interval <= 0:
        raise ConfigError(f"poll_interval must be positive, got {interval}")
    return interval
