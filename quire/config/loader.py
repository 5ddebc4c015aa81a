"""Configuration loader for quire."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from ..core.errors import ConfigError
from .schema import Config

CONFIG_DIR = ".quire"
CONFIG_FILE = "config.yaml"


def get_config_path(root: Path) -> Path:
    return root / CONFIG_DIR / CONFIG_FILE


def load_config(root: Path) -> Config | None:
    """Load configuration from config.yaml in the .quire folder.

    Args:
        root: Path to the content root directory.

    Returns:
        Config object if config.yaml exists and is not empty, None otherwise.

    Raises:
        ConfigError: If the file cannot be read or is not a valid config.
    """
    config_path = get_config_path(root)
    if not config_path.exists():
        return None

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"error loading {config_path}: {e}") from e

    if data is None:
        return None
    if not isinstance(data, dict):
        raise ConfigError(f"error loading {config_path}: expected a mapping")

    try:
        return Config.from_dict(data)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration in {config_path}: {e}") from e


def save_config(config: Config, root: Path) -> None:
    """Save configuration to config.yaml in the .quire folder.

    Args:
        config: Config object to save.
        root: Path to the content root directory.
    """
    config_path = get_config_path(root)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(config.to_yaml(), encoding="utf-8")
