"""Core types, errors and helpers for outlinesync."""

from outlinesync.core.errors import (
    ConfigError,
    LoadError,
    OutlineParseError,
    OutlineSyncError,
    SurfaceUnavailableError,
)
from outlinesync.core.types import Position, Range

__all__ = [
    "ConfigError",
    "LoadError",
    "OutlineParseError",
    "OutlineSyncError",
    "Position",
    "Range",
    "SurfaceUnavailableError",
]
