"""Per-document outline storage with version counters."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from outlinesync.outline.model import OutlineNode
    from outlinesync.outline.render import RenderedOutline

logger = logging.getLogger(__name__)


@dataclass
class DocumentOutlineState:
    """Latest outline and rendering state for one document.

    Attributes:
        tree: Latest outline root, None until the first outline arrives.
        rendered: Rendering of ``tree``, None until rendered.
        version: Bumped each time a tree is stored; None before the first one.
        rendered_version: Version currently shown on the display surface.
    """

    tree: OutlineNode | None = None
    rendered: RenderedOutline | None = None
    version: int | None = None
    rendered_version: int | None = None

    @property
    def rendered_lines(self) -> list[str]:
        return list(self.rendered.lines) if self.rendered is not None else []

    @property
    def is_stale(self) -> bool:
        """True when the surface does not reflect the latest version."""
        return self.version is None or self.version != self.rendered_version


class TreeStore:
    """Holds the latest outline tree per document id.

    Only the latest tree is kept. Updates are last-write-wins. Created at
    session start and cleared at session end.
    """

    def __init__(self) -> None:
        self._documents: dict[str, DocumentOutlineState] = {}

    def put(self, doc_id: str, tree: OutlineNode) -> DocumentOutlineState:
        """Replace the tree for a document and bump its version.

        The first tree gets version 0. Any previous rendering is dropped.
        """
        state = self._documents.setdefault(doc_id, DocumentOutlineState())
        state.tree = tree
        state.rendered = None
        state.version = 0 if state.version is None else state.version + 1
        logger.debug("Stored outline for %s (version %d)", doc_id, state.version)
        return state

    def get(self, doc_id: str) -> OutlineNode | None:
        """Return the current tree, or None if none has arrived yet."""
        state = self._documents.get(doc_id)
        return state.tree if state is not None else None

    def state(self, doc_id: str) -> DocumentOutlineState | None:
        return self._documents.get(doc_id)

    def version(self, doc_id: str) -> int | None:
        state = self._documents.get(doc_id)
        return state.version if state is not None else None

    def set_rendered(self, doc_id: str, rendered: RenderedOutline) -> None:
        """Attach a rendering to a document's current tree."""
        state = self._documents.get(doc_id)
        if state is None:
            raise KeyError(doc_id)
        state.rendered = rendered

    def discard(self, doc_id: str) -> bool:
        """Forget a document. Returns True if it was known."""
        removed = self._documents.pop(doc_id, None) is not None
        if removed:
            logger.debug("Discarded outline for %s", doc_id)
        return removed

    def clear(self) -> None:
        self._documents.clear()

    def documents(self) -> Iterator[str]:
        return iter(list(self._documents))

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)
