"""Typed exception hierarchy for outlinesync."""

from __future__ import annotations


class OutlineSyncError(Exception):
    """Base class for all outlinesync errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(OutlineSyncError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""


class LoadError(OutlineSyncError):
    """Raised when a JSON file cannot be found, read or parsed."""


class OutlineParseError(OutlineSyncError):
    """Raised when an outline notification does not have the expected shape."""


class SurfaceUnavailableError(OutlineSyncError):
    """Raised by a display surface that has been closed or is not reachable."""

    def __init__(self, surface: str, reason: str = "surface is not available") -> None:
        self.surface = surface
        self.reason = reason
        super().__init__(f"Display surface '{surface}': {reason}")
