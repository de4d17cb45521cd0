"""Resolve a cursor position to the deepest enclosing outline node."""

from __future__ import annotations

from dataclasses import dataclass, field

from outlinesync.core.types import Position, Range
from outlinesync.outline.model import OutlineNode

BREADCRUMB_SEPARATOR = " > "


def normalize_cursor(
    line: int,
    column: int,
    *,
    line_origin: int = 1,
    column_origin: int = 1,
) -> Position:
    """Convert host cursor coordinates to a 0-indexed Position.

    Args:
        line: Line as reported by the host.
        column: Column as reported by the host.
        line_origin: Index of the host's first line (0 or 1).
        column_origin: Index of the host's first column (0 or 1).
    """
    return Position(max(line - line_origin, 0), max(column - column_origin, 0))


def contains(code_range: Range, position: Position) -> bool:
    """Half-open containment test used for cursor resolution."""
    return code_range.contains(position)


@dataclass(frozen=True)
class LocatedPath:
    """Result of locate_path().

    Attributes:
        node: Deepest node containing the cursor; the root if none does.
        path: Nodes descended into, outermost first (root excluded).
    """

    node: OutlineNode
    path: tuple[OutlineNode, ...] = field(default=())

    @property
    def breadcrumb(self) -> str:
        """`` > A > A1`` style path text, empty when the cursor is outside all nodes."""
        return "".join(BREADCRUMB_SEPARATOR + node.name for node in self.path)

    @property
    def found(self) -> bool:
        return bool(self.path)


def locate_path(tree: OutlineNode, position: Position) -> LocatedPath:
    """Descend from the root to the deepest node whose code range contains position.

    At every level the first child (in source order) that contains the
    position wins, so overlapping siblings resolve deterministically.
    """
    node = tree
    path: list[OutlineNode] = []
    while True:
        child = next((c for c in node.children if contains(c.code_range, position)), None)
        if child is None:
            break
        node = child
        path.append(node)
    return LocatedPath(node=node, path=tuple(path))
