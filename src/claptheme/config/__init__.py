"""Configuration for claptheme."""

from claptheme.config.loader import get_config_paths, load_config
from claptheme.config.settings import BindingSettings, LoggingSettings, Settings

__all__ = [
    "BindingSettings",
    "LoggingSettings",
    "Settings",
    "get_config_paths",
    "load_config",
]
