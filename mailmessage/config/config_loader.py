"""Configuration loader for application settings."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .settings import AppConfig

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a config file cannot be read as a valid AppConfig."""

    pass


class ConfigLoader:
    """Load and validate application configuration."""

    DEFAULT_CONFIG_PATHS = [
        Path("~/.mailmessage/config.json"),
        Path("config/mailmessage.json"),
    ]

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Optional custom config file path
        """
        self.config_path = config_path
        self._config: Optional[AppConfig] = None

    def load_app_config(self) -> AppConfig:
        """
        Load application configuration from the first existing file.

        Returns:
            AppConfig instance, defaults if no config file exists

        Raises:
            ConfigError: If the config file is not valid JSON or fails validation
        """
        if self._config is not None:
            return self._config

        config_paths = [self.config_path] if self.config_path else self.DEFAULT_CONFIG_PATHS

        for config_path in config_paths:
            path = config_path.expanduser()
            if not path.exists():
                continue

            try:
                with open(path, "r", encoding="utf-8") as f:
                    config_data = json.load(f)
                self._config = AppConfig(**config_data)
            except (json.JSONDecodeError, ValidationError, TypeError) as e:
                raise ConfigError(f"Invalid config in {config_path}: {e}") from e

            logger.info("Loaded configuration from %s", path)
            return self._config

        logger.debug("No config file found, using defaults")
        self._config = AppConfig()
        return self._config

    def reload(self) -> AppConfig:
        """Reload configuration from file."""
        self._config = None
        return self.load_app_config()
