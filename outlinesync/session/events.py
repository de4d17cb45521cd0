"""Inbound event types for the notification adapter.

Events are frozen dataclasses. The adapter dispatches on their type.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from outlinesync.outline.model import OutlineNode

__all__ = [
    "AdapterEvent",
    "CursorMoved",
    "DocumentClosed",
    "OutlinePublished",
    "OutlineNotificationReceived",
    "ViewClosed",
    "ViewOpened",
]


@dataclass(frozen=True)
class AdapterEvent:
    """Base class for adapter events."""

    pass


@dataclass(frozen=True)
class OutlinePublished(AdapterEvent):
    """A parsed outline for a document.

    Attributes:
        doc_id: Document identifier (URI).
        tree: Outline root.
    """

    doc_id: str
    tree: "OutlineNode"


@dataclass(frozen=True)
class OutlineNotificationReceived(AdapterEvent):
    """Raw outline notification params, parsed by the adapter."""

    params: dict[str, Any]


@dataclass(frozen=True)
class CursorMoved(AdapterEvent):
    """The cursor moved in a document.

    Attributes:
        doc_id: Document identifier (URI).
        line: Cursor line in host coordinates.
        column: Cursor column in host coordinates.
    """

    doc_id: str
    line: int
    column: int


@dataclass(frozen=True)
class ViewOpened(AdapterEvent):
    """The user asked for the outline view.

    Attributes:
        doc_id: Document to show; None means the last document seen.
    """

    doc_id: str | None = None


@dataclass(frozen=True)
class ViewClosed(AdapterEvent):
    """The outline view was closed."""

    pass


@dataclass(frozen=True)
class DocumentClosed(AdapterEvent):
    """The editor no longer tracks a document."""

    doc_id: str
