"""Render an outline tree as box-drawing text lines.

Each non-root node becomes one line ``<indent> <icon><name>``. The indent is
built from connector glyphs so siblings line up under their parent:

     main
     MyApp
    ├ build
    │  Scaffold
    └ dispose

Icons are omitted above. Columns in the returned spans are UTF-8 byte
offsets, matching the column addressing of the display surface.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from outlinesync.outline.model import ElementKind, OutlineNode

VERTICAL_LINE = "│"
MIDDLE_CORNER = "├"
BOTTOM_CORNER = "└"
CONNECTOR_GLYPHS = (VERTICAL_LINE, MIDDLE_CORNER, BOTTOM_CORNER)

FOLD_GLYPH = "▸ "
DEFAULT_ICON = "\ue612"


def icon_for(kind: ElementKind) -> str:
    """Return the display icon for an element kind."""
    match kind:
        case ElementKind.TOP_LEVEL_VARIABLE:
            return "\uf435"
        case ElementKind.CLASS:
            return "\uf0e8 "
        case ElementKind.FIELD:
            return "\uf93d"
        case ElementKind.CONSTRUCTOR:
            return "\ue624 "
        case ElementKind.CONSTRUCTOR_INVOCATION:
            return "\ufc2a "
        case ElementKind.FUNCTION:
            return "\u0192 "
        case ElementKind.METHOD:
            return "\uf6a6 "
        case _:
            return DEFAULT_ICON


def byte_length(text: str) -> int:
    """Length of text in encoded UTF-8 bytes."""
    return len(text.encode("utf-8"))


@dataclass(frozen=True)
class NodeSpan:
    """Where a node's label was rendered.

    Attributes:
        node: The rendered node.
        line: 0-indexed output line.
        start_col: Byte column where the icon starts.
        end_col: Byte column just past the name.
    """

    node: OutlineNode
    line: int
    start_col: int
    end_col: int


@dataclass(frozen=True)
class RenderedOutline:
    """Lines and per-node spans produced by render_outline()."""

    lines: tuple[str, ...] = ()
    spans: tuple[NodeSpan, ...] = ()
    _by_node: dict[OutlineNode, NodeSpan] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_node", {span.node: span for span in self.spans})

    def span_for(self, node: OutlineNode) -> NodeSpan | None:
        """Return the span of a node, or None if it was not rendered."""
        return self._by_node.get(node)

    def node_at_line(self, line: int) -> OutlineNode | None:
        if 0 <= line < len(self.spans):
            return self.spans[line].node
        return None

    def __len__(self) -> int:
        return len(self.lines)


def _child_indent(indent: str) -> str:
    """Turn the connector a node was drawn with into the one its children inherit."""
    if indent.endswith(MIDDLE_CORNER):
        return indent[:-1] + VERTICAL_LINE
    if indent.endswith(BOTTOM_CORNER):
        return indent[:-1] + " "
    return indent


def render_outline(
    tree: OutlineNode,
    *,
    line_numbers: bool = False,
    fold_indicators: bool = False,
    detail: bool = False,
) -> RenderedOutline:
    """Render every descendant of tree in pre-order.

    Args:
        tree: Outline root. The root itself is not rendered.
        line_numbers: Append ``: <declaration line>`` to each line.
        fold_indicators: Mark folded nodes that have children with a glyph.
        detail: Label nodes with their signature (type parameters, parameters
            and return type) instead of the bare name.

    Returns:
        The rendered lines and a span for every rendered node.
    """
    lines: list[str] = []
    spans: list[NodeSpan] = []

    def visit(node: OutlineNode, indent: str) -> None:
        prefix = indent + " "
        if fold_indicators and node.folded and node.children:
            prefix += FOLD_GLYPH
        label = icon_for(node.kind) + (node.signature if detail else node.name)
        line = prefix + label
        if line_numbers:
            line += f": {node.declaration_line}"

        start_col = byte_length(prefix)
        spans.append(NodeSpan(node, len(lines), start_col, start_col + byte_length(label)))
        lines.append(line)

        inherited = _child_indent(indent)
        if len(node.children) == 1:
            visit(node.children[0], inherited + " ")
            return
        last = len(node.children) - 1
        for i, child in enumerate(node.children):
            visit(child, inherited + (BOTTOM_CORNER if i == last else MIDDLE_CORNER))

    for child in tree.children:
        visit(child, "")

    return RenderedOutline(lines=tuple(lines), spans=tuple(spans))
