"""Configuration management for quire.

This module handles loading and validating configuration from .quire/config.yaml files.
"""

from .loader import get_config_path, load_config, save_config
from .schema import Config, FrontmatterConfig, OutputConfig, RenderingConfig

__all__ = [
    "Config",
    "FrontmatterConfig",
    "RenderingConfig",
    "OutputConfig",
    "get_config_path",
    "load_config",
    "save_config",
]
