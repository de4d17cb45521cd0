"""In-memory display surface.

Backs the ``replay`` CLI command and tests. Setting ``available = False``
makes every operation raise SurfaceUnavailableError, like a closed split.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from outlinesync.core.errors import SurfaceUnavailableError
from outlinesync.view.surface import DisplaySurface, SurfaceSyntax

if TYPE_CHECKING:
    from outlinesync.config.schema import SurfaceConfig


@dataclass(frozen=True)
class Highlight:
    group: str
    line: int
    start_col: int
    end_col: int


class MemorySurface(DisplaySurface):
    """Keeps lines, highlights and cursor in plain Python structures."""

    def __init__(
        self,
        name: str = "memory",
        lines: list[str] | None = None,
        width: int = 30,
        position: str = "right",
    ) -> None:
        self.name = name
        self.width = width
        self.position = position
        self.lines: list[str] = list(lines or [])
        self.highlights: list[Highlight] = []
        self.cursor: tuple[int, int] = (0, 0)
        self.syntax: SurfaceSyntax | None = None
        self.available = True
        self.writes = 0

    @classmethod
    def from_config(cls, config: SurfaceConfig) -> MemorySurface:
        """Create a surface laid out as the ``surface`` config section asks."""
        return cls(config.name, width=config.width, position=config.position)

    def _check(self) -> None:
        if not self.available:
            raise SurfaceUnavailableError(self.name)

    async def line_count(self) -> int:
        self._check()
        return len(self.lines)

    async def set_lines(self, start: int, end: int, lines: list[str]) -> None:
        self._check()
        if start < 0 or start > len(self.lines):
            raise IndexError(f"start {start} out of range for {len(self.lines)} lines")
        self.lines[start:end] = lines
        self.writes += 1

    async def clear_highlights(self) -> None:
        self._check()
        self.highlights.clear()
        self.writes += 1

    async def add_highlight(self, group: str, line: int, start_col: int, end_col: int) -> None:
        self._check()
        self.highlights.append(Highlight(group, line, start_col, end_col))
        self.writes += 1

    async def set_cursor(self, line: int, col: int = 0) -> None:
        self._check()
        if not 0 <= line < max(len(self.lines), 1):
            raise IndexError(f"cursor line {line} out of range")
        self.cursor = (line, col)
        self.writes += 1

    async def declare_syntax(self, syntax: SurfaceSyntax) -> None:
        self._check()
        self.syntax = syntax

    async def close(self) -> None:
        self.available = False
