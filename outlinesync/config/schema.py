"""Pydantic models for outlinesync configuration validation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class OutlineConfig(BaseModel):
    """How outlines are rendered and whether the breadcrumb path is computed."""

    model_config = ConfigDict(extra="forbid")

    show_path: bool = True
    """Resolve the cursor to an outline node and show the breadcrumb path."""

    line_numbers: bool = False
    """Append ': <declaration line>' to every rendered node."""

    fold_indicators: bool = False
    """Prefix folded nodes that have children with a fold glyph."""


class CursorConfig(BaseModel):
    """Coordinate origin of the host's cursor-move notifications.

    The locator works on 0-indexed lines and columns. These values are
    subtracted from incoming coordinates before comparison, so a host that
    reports 1-indexed lines and 0-indexed byte columns uses
    ``line_origin=1, column_origin=0``.
    """

    model_config = ConfigDict(extra="forbid")

    line_origin: Literal[0, 1] = 1
    column_origin: Literal[0, 1] = 1


class SurfaceConfig(BaseModel):
    """Display surface (outline window) settings."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="__flutter_widget_tree", min_length=1)
    width: int = Field(default=30, gt=0)
    position: Literal["right", "left"] = "right"
    highlight_group: str = Field(default="OutlineSyncCurrent", min_length=1)


class Config(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    outline: OutlineConfig = Field(default_factory=OutlineConfig)
    cursor: CursorConfig = Field(default_factory=CursorConfig)
    surface: SurfaceConfig = Field(default_factory=SurfaceConfig)
