"""Rich styling for rendered outline lines.

Mirrors the surface syntax: connectors dim, icons colored by kind, the
current node reversed.
"""

from __future__ import annotations

from rich.text import Text

from outlinesync.outline.model import ElementKind
from outlinesync.outline.render import CONNECTOR_GLYPHS, NodeSpan, RenderedOutline, icon_for

KIND_STYLES: dict[ElementKind, str] = {
    ElementKind.TOP_LEVEL_VARIABLE: "cyan",
    ElementKind.CLASS: "bold yellow",
    ElementKind.FIELD: "cyan",
    ElementKind.CONSTRUCTOR: "magenta",
    ElementKind.CONSTRUCTOR_INVOCATION: "magenta",
    ElementKind.FUNCTION: "green",
    ElementKind.METHOD: "green",
    ElementKind.UNKNOWN: "",
}
CONNECTOR_STYLE = "dim"
CURRENT_STYLE = "reverse"


def _char_offset(line: str, byte_col: int) -> int:
    """Convert a byte column back to a character offset within line."""
    return len(line.encode("utf-8")[:byte_col].decode("utf-8", errors="ignore"))


def styled_line(line: str, span: NodeSpan, current: bool = False) -> Text:
    """Style one rendered line using its span."""
    text = Text(line)
    start = _char_offset(line, span.start_col)
    end = _char_offset(line, span.end_col)
    for i, char in enumerate(line[:start]):
        if char in CONNECTOR_GLYPHS:
            text.stylize(CONNECTOR_STYLE, i, i + 1)
    icon = icon_for(span.node.kind)
    kind_style = KIND_STYLES.get(span.node.kind, "")
    if kind_style:
        text.stylize(kind_style, start, start + len(icon))
    if current:
        text.stylize(CURRENT_STYLE, start, end)
    return text


def styled_outline(rendered: RenderedOutline, current_line: int | None = None) -> Text:
    """Join all lines of a rendering into one styled Text."""
    result = Text()
    for i, (line, span) in enumerate(zip(rendered.lines, rendered.spans)):
        if i:
            result.append("\n")
        result.append_text(styled_line(line, span, current=i == current_line))
    return result
