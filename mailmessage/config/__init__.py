"""Configuration management"""

from .config_loader import ConfigError, ConfigLoader
from .settings import AppConfig, DisplayRules, FoldingRules, ParsingRules

__all__ = ["ConfigError", "ConfigLoader", "AppConfig", "DisplayRules", "FoldingRules", "ParsingRules"]
