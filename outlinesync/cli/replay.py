"""Read JSON-lines event logs for the ``replay`` command.

Each line is one object with a ``type`` key:

    {"type": "outline", "params": {"uri": ..., "outline": {...}}}
    {"type": "cursor", "uri": ..., "line": 12, "column": 4}
    {"type": "open", "uri": ...}
    {"type": "close"}
    {"type": "document_closed", "uri": ...}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from outlinesync.config.load_utils import load_json_lines
from outlinesync.core.errors import LoadError
from outlinesync.session.events import (
    AdapterEvent,
    CursorMoved,
    DocumentClosed,
    OutlineNotificationReceived,
    ViewClosed,
    ViewOpened,
)


def event_from_dict(data: dict[str, Any]) -> AdapterEvent:
    """Build an adapter event from one log record.

    Raises:
        LoadError: For unknown types or missing fields.
    """
    kind = data.get("type")
    try:
        match kind:
            case "outline":
                return OutlineNotificationReceived(params=data["params"])
            case "cursor":
                return CursorMoved(data["uri"], int(data["line"]), int(data["column"]))
            case "open":
                return ViewOpened(data.get("uri"))
            case "close":
                return ViewClosed()
            case "document_closed":
                return DocumentClosed(data["uri"])
            case _:
                raise LoadError(f"Unknown event type: {kind!r}")
    except (KeyError, TypeError, ValueError) as e:
        raise LoadError(f"Invalid {kind} event {data!r}: {e}") from e


def load_events(path: Path) -> list[AdapterEvent]:
    """Load every event of a JSON-lines file, skipping blank lines."""
    return [event_from_dict(record) for record in load_json_lines(path, "event log")]
