"""Configuration loading and validation."""

from outlinesync.config.loader import load_config
from outlinesync.config.schema import Config, CursorConfig, OutlineConfig, SurfaceConfig

__all__ = ["Config", "CursorConfig", "OutlineConfig", "SurfaceConfig", "load_config"]
