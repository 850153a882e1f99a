"""
Configuration utility for the layout engine.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from ..errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "viewport": {
        "width": 800,
        "height": 600
    },
    "logging": {
        "console_level": "INFO",
        "file_level": "DEBUG"
    }
}


def get_default_config_path() -> str:
    """Get the default config file path, ``~/.wink_layout/config.json``."""
    return os.path.join(os.path.expanduser("~"), ".wink_layout", "config.json")


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


class Config:
    """Configuration manager for the layout engine."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the config file
        """
        self.config_path = config_path or get_default_config_path()
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

        # Load config if it exists
        self.load()

        logger.debug(f"Configuration initialized (config_path: {self.config_path})")

    def load(self) -> None:
        """
        Load configuration from file, merged over the defaults.

        Raises:
            ConfigError: If the file exists but is not a readable JSON object
        """
        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            raise ConfigError(f"Cannot load configuration from {self.config_path}: {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigError(f"Configuration in {self.config_path} must be a JSON object")

        _merge(self.config, loaded)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'viewport.width')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        config = self.config
        parts = key.split('.')

        for part in parts[:-1]:
            if part not in config or not isinstance(config[part], dict):
                return default
            config = config[part]

        return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'viewport.width')
            value: Configuration value
        """
        config = self.config
        parts = key.split('.')

        for part in parts[:-1]:
            if not isinstance(config.get(part), dict):
                config[part] = {}
            config = config[part]

        config[parts[-1]] = value
