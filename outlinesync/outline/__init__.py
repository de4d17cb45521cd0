"""Outline tree model, storage, rendering and cursor resolution."""

from outlinesync.outline.locate import LocatedPath, locate_path, normalize_cursor
from outlinesync.outline.model import ElementKind, OutlineNode, OutlineNotification
from outlinesync.outline.render import NodeSpan, RenderedOutline, icon_for, render_outline
from outlinesync.outline.store import DocumentOutlineState, TreeStore

__all__ = [
    "DocumentOutlineState",
    "ElementKind",
    "LocatedPath",
    "NodeSpan",
    "OutlineNode",
    "OutlineNotification",
    "RenderedOutline",
    "TreeStore",
    "icon_for",
    "locate_path",
    "normalize_cursor",
    "render_outline",
]
