"""Position types shared by the outline model and the locator.

Positions are 0-indexed (line, character) pairs. Ranges are half-open: the
start position is inside the range, the end position is not.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from outlinesync.core.errors import OutlineParseError


@dataclass(frozen=True, order=True)
class Position:
    """A 0-indexed line/character coordinate."""

    line: int
    character: int

    @classmethod
    def from_dict(cls, data: Any) -> Position:
        """Create from a ``{"line": .., "character": ..}`` wire object."""
        if not isinstance(data, dict):
            raise OutlineParseError(f"Expected position object, got {type(data).__name__}")
        try:
            return cls(line=int(data["line"]), character=int(data["character"]))
        except (KeyError, TypeError, ValueError) as e:
            raise OutlineParseError(f"Invalid position {data!r}: {e}") from e


@dataclass(frozen=True)
class Range:
    """A half-open span between two positions.

    Attributes:
        start: First position inside the range.
        end: First position after the range.
    """

    start: Position
    end: Position

    @classmethod
    def from_dict(cls, data: Any) -> Range:
        """Create from a ``{"start": {...}, "end": {...}}`` wire object."""
        if not isinstance(data, dict):
            raise OutlineParseError(f"Expected range object, got {type(data).__name__}")
        if "start" not in data or "end" not in data:
            raise OutlineParseError(f"Range is missing start/end: {data!r}")
        return cls(start=Position.from_dict(data["start"]), end=Position.from_dict(data["end"]))

    def contains(self, position: Position) -> bool:
        """Return True if position lies inside the half-open range."""
        after_start = position.line > self.start.line or (
            position.line == self.start.line and position.character >= self.start.character
        )
        before_end = position.line < self.end.line or (
            position.line == self.end.line and position.character < self.end.character
        )
        return after_start and before_end
