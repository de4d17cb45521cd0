"""Protocols for the adapter's external collaborators.

Using Protocols keeps editor integrations free to implement these without
inheriting from outlinesync classes.
"""

from typing import Protocol

from outlinesync.config.schema import SurfaceConfig
from outlinesync.view.surface import DisplaySurface


class DocumentRegistry(Protocol):
    """Knows which documents the editor session currently has open."""

    def is_open(self, doc_id: str) -> bool:
        """Return True if the document has a live editor buffer."""
        ...


class StatusIndicator(Protocol):
    """Transient status line used for the breadcrumb."""

    def show(self, text: str) -> None:
        ...


class SurfaceFactory(Protocol):
    """Creates the display surface when the outline view is opened.

    Receives the ``surface`` config section: buffer name, split width and
    which side of the editor the split goes on.
    """

    async def __call__(self, config: SurfaceConfig) -> DisplaySurface:
        ...


class OpenDocuments:
    """DocumentRegistry backed by a set of document ids."""

    def __init__(self, doc_ids: set[str] | None = None) -> None:
        self._doc_ids: set[str] = set(doc_ids or ())

    def open(self, doc_id: str) -> None:
        self._doc_ids.add(doc_id)

    def close(self, doc_id: str) -> None:
        self._doc_ids.discard(doc_id)

    def is_open(self, doc_id: str) -> bool:
        return doc_id in self._doc_ids
