# mypy: warn_unused_ignores=False
import sys
from pathlib import Path
from typing import Any, cast

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore

from pydantic import ValidationError

from claptheme.errors import ConfigError
from claptheme.logger import get_logger

from .settings import Settings

logger = get_logger(__name__)


def get_config_paths() -> tuple[Path, Path]:
    """Return the user and project config file locations."""
    user_config = Path.home() / ".config" / "claptheme" / "config.toml"
    project_config = Path.cwd() / ".claptheme" / "config.toml"
    return user_config, project_config


def _deep_update(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Recursively update a dictionary."""
    for key, value in update.items():
        if isinstance(value, dict) and key in base and isinstance(base[key], dict):
            _deep_update(base[key], value)
        else:
            base[key] = value
    return base


def _load_toml(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file if it exists."""
    if not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            data: Any = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    logger.debug("Loaded config from {}", path)
    return cast(dict[str, Any], data)


def load_config(
    user_config_path: Path | None = None,
    project_config_path: Path | None = None,
) -> Settings:
    """Load and merge configuration from multiple sources.

    Priority (highest to lowest):
    1. Project config (.claptheme/config.toml)
    2. User config (~/.config/claptheme/config.toml)
    3. Defaults

    Tables are merged key by key; arrays such as ``bindings`` are replaced
    wholesale by the higher-priority file.

    Args:
        user_config_path: Override user config location.
        project_config_path: Override project config location.

    Returns:
        Merged Settings instance.

    Raises:
        ConfigError: If a file is not valid TOML or the merged values are invalid.
    """
    default_user, default_project = get_config_paths()

    config_data: dict[str, Any] = {}
    config_data = _deep_update(config_data, _load_toml(user_config_path or default_user))
    config_data = _deep_update(config_data, _load_toml(project_config_path or default_project))

    try:
        return Settings(**config_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
