"""Event-driven session layer tying the outline engine to an editor."""

from outlinesync.session.adapter import NotificationAdapter
from outlinesync.session.events import (
    AdapterEvent,
    CursorMoved,
    DocumentClosed,
    OutlineNotificationReceived,
    OutlinePublished,
    ViewClosed,
    ViewOpened,
)
from outlinesync.session.interfaces import (
    DocumentRegistry,
    OpenDocuments,
    StatusIndicator,
    SurfaceFactory,
)

__all__ = [
    "AdapterEvent",
    "CursorMoved",
    "DocumentClosed",
    "DocumentRegistry",
    "NotificationAdapter",
    "OpenDocuments",
    "OutlineNotificationReceived",
    "OutlinePublished",
    "StatusIndicator",
    "SurfaceFactory",
    "ViewClosed",
    "ViewOpened",
]
