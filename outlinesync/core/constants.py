"""Core constants and paths for outlinesync.

Single source of truth for config locations.
"""

from pathlib import Path

CONFIG_DIR_NAME = ".outlinesync"
CONFIG_FILE_NAME = "config.json"


def get_global_dir() -> Path:
    """Get ~/.outlinesync (global config directory)."""
    return Path.home() / CONFIG_DIR_NAME


def get_global_config_path() -> Path:
    """Get the global config file path."""
    return get_global_dir() / CONFIG_FILE_NAME


def get_local_config_path(cwd: Path) -> Path:
    """Get the project-local config file path for a working directory."""
    return cwd / CONFIG_DIR_NAME / CONFIG_FILE_NAME
