"""Configuration loading with fail-fast behavior and layered merging.

Layers, later overriding earlier:
1. Global user config (~/.outlinesync/config.json)
2. Project local config (<cwd>/.outlinesync/config.json)

An explicit path skips layering entirely.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from outlinesync.config.load_utils import load_config_layer, load_json_object
from outlinesync.config.schema import Config
from outlinesync.core.constants import get_global_config_path, get_local_config_path
from outlinesync.core.errors import ConfigError, LoadError
from outlinesync.core.utils import deep_merge

logger = logging.getLogger(__name__)


def load_config(path: Path | None = None, cwd: Path | None = None) -> Config:
    """Load configuration from file with layered merging.

    Args:
        path: Explicit config file path. If provided, skips layered loading.
        cwd: Working directory for local lookup. Defaults to Path.cwd().

    Returns:
        Validated Config object.

    Raises:
        ConfigError: If any config file contains invalid JSON or the merged
            config fails validation.
    """
    if path is not None:
        return _load_from_path(path)

    effective_cwd = cwd or Path.cwd()
    merged: dict[str, Any] = {}
    loaded_from: list[Path] = []

    for layer in (get_global_config_path(), get_local_config_path(effective_cwd)):
        try:
            data = load_config_layer(layer)
        except LoadError as e:
            raise ConfigError(e.message) from e
        if data:
            merged = deep_merge(merged, data)
            loaded_from.append(layer)

    if loaded_from:
        logger.info("Config loaded from: %s", [str(p) for p in loaded_from])
    else:
        logger.debug("No config files found, using defaults")
        return Config()

    return _validate(merged, ", ".join(str(p) for p in loaded_from))


def _load_from_path(path: Path) -> Config:
    """Load a single explicit config file."""
    try:
        data = load_json_object(path, "config")
    except LoadError as e:
        raise ConfigError(e.message) from e
    return _validate(data, str(path))


def _validate(data: dict[str, Any], source: str) -> Config:
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed ({source}): {e}") from e
