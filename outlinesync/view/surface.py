"""Display surface abstraction.

A display surface is a line-addressed text view (an editor split, a
terminal pane, an in-memory buffer). The synchronizer only talks to it
through this interface. Every operation may fail with any exception when
the surface has gone away; callers treat that as "not updated".
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from outlinesync.outline.model import ElementKind
from outlinesync.outline.render import CONNECTOR_GLYPHS, icon_for

CONNECTOR_GROUP = "Comment"

ICON_GROUPS: dict[ElementKind, str] = {
    ElementKind.TOP_LEVEL_VARIABLE: "Identifier",
    ElementKind.CLASS: "Type",
    ElementKind.FIELD: "Identifier",
    ElementKind.CONSTRUCTOR: "Special",
    ElementKind.CONSTRUCTOR_INVOCATION: "Special",
    ElementKind.FUNCTION: "Function",
    ElementKind.METHOD: "Function",
    ElementKind.UNKNOWN: "Normal",
}


@dataclass(frozen=True)
class SyntaxRule:
    """Highlight every occurrence of one glyph with a group."""

    group: str
    glyph: str


@dataclass(frozen=True)
class SurfaceSyntax:
    """Declarative styling issued once when a surface is created.

    Attributes:
        rules: Glyph to highlight-group rules.
        links: Highlight groups defined as links to existing ones.
    """

    rules: tuple[SyntaxRule, ...] = ()
    links: dict[str, str] = field(default_factory=dict)


def build_surface_syntax(highlight_group: str) -> SurfaceSyntax:
    """Connector glyphs as comments, icons by kind, and the current-node group."""
    rules = [SyntaxRule(CONNECTOR_GROUP, glyph) for glyph in CONNECTOR_GLYPHS]
    for kind in ElementKind:
        icon = icon_for(kind).strip()
        rules.append(SyntaxRule(ICON_GROUPS[kind], icon))
    return SurfaceSyntax(rules=tuple(rules), links={highlight_group: "Search"})


class DisplaySurface(ABC):
    """Line-oriented view the outline is drawn into.

    Lines are 0-indexed, ranges are end-exclusive, columns are byte offsets.
    """

    name: str = "surface"

    @abstractmethod
    async def line_count(self) -> int:
        """Number of lines currently held."""

    @abstractmethod
    async def set_lines(self, start: int, end: int, lines: list[str]) -> None:
        """Replace lines ``[start, end)`` with ``lines``."""

    @abstractmethod
    async def clear_highlights(self) -> None:
        """Remove every highlight placed by add_highlight()."""

    @abstractmethod
    async def add_highlight(self, group: str, line: int, start_col: int, end_col: int) -> None:
        """Highlight bytes ``[start_col, end_col)`` of a line."""

    @abstractmethod
    async def set_cursor(self, line: int, col: int = 0) -> None:
        """Move the surface's cursor."""

    @abstractmethod
    async def declare_syntax(self, syntax: SurfaceSyntax) -> None:
        """Install glyph styling. Called once per surface."""

    async def close(self) -> None:
        """Release the surface. Default is a no-op."""
