"""
Configuration management package for the Astro CLI.

This package provides:
- A registry of known settings with their dotted paths and defaults
- Home and project YAML config stores with project-over-home precedence
- Upward discovery of the nearest project directory
- A typed, pydantic-validated view of the merged configuration
"""

from .astro_config import AstroConfig
from .project import find_dir_in_path
from .settings import CFG, ConfigSetting, SettingsRegistry
from .store import (
    CONFIG_DIR,
    CONFIG_FILE_NAME_WITH_EXT,
    ConfigContext,
    ConfigStore,
    create_config,
    get_home_dir,
    init_config,
    project_root,
)

__all__ = [
    "AstroConfig",
    "CFG",
    "ConfigSetting",
    "SettingsRegistry",
    "CONFIG_DIR",
    "CONFIG_FILE_NAME_WITH_EXT",
    "ConfigContext",
    "ConfigStore",
    "create_config",
    "find_dir_in_path",
    "get_home_dir",
    "init_config",
    "project_root",
]
