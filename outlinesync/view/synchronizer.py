"""Keep a display surface in step with the stored outlines.

The synchronizer decides from version numbers whether the surface needs a
content replace, and from the current node whether the highlight must move.
When nothing changed it performs no surface writes at all, so it is cheap to
call on every cursor move.

Surface failures (closed split, wrong buffer, racing with the user) are
logged at DEBUG and swallowed. The view is allowed to be stale until the
next successful cycle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from outlinesync.outline.model import OutlineNode
    from outlinesync.outline.store import TreeStore
    from outlinesync.view.surface import DisplaySurface

logger = logging.getLogger(__name__)

HighlightSpan = tuple[int, int, int]


@dataclass
class SynchronizerState:
    """What the single display surface currently shows.

    Attributes:
        active_document: Document whose lines occupy the surface.
        current_document: Document the current node belongs to.
        current_node: Node last resolved from the cursor.
        highlight: (line, start_col, end_col) currently drawn, if any.
    """

    active_document: str | None = None
    current_document: str | None = None
    current_node: OutlineNode | None = None
    highlight: HighlightSpan | None = None


class ViewSynchronizer:
    """Applies minimal mutations to one display surface."""

    def __init__(self, store: TreeStore, highlight_group: str = "OutlineSyncCurrent") -> None:
        self._store = store
        self._highlight_group = highlight_group
        self._surface: DisplaySurface | None = None
        self._highlight_dirty = False
        self.state = SynchronizerState()

    @property
    def surface(self) -> DisplaySurface | None:
        return self._surface

    def attach_surface(self, surface: DisplaySurface) -> None:
        """Use a (new) surface. Its content is unknown until a forced synchronize."""
        self._surface = surface
        self.state.highlight = None
        self._highlight_dirty = True

    def detach_surface(self) -> DisplaySurface | None:
        surface, self._surface = self._surface, None
        self.state.active_document = None
        self.state.highlight = None
        return surface

    def invalidate(self) -> None:
        """Forget what the surface shows so the next synchronize redraws."""
        self.state.active_document = None

    def set_current(self, doc_id: str | None, node: OutlineNode | None) -> None:
        self.state.current_document = doc_id if node is not None else None
        self.state.current_node = node

    def needs_redraw(self, doc_id: str, force: bool = False) -> bool:
        """True when the surface content does not reflect doc_id's latest tree."""
        if force or doc_id != self.state.active_document:
            return True
        doc_state = self._store.state(doc_id)
        if doc_state is None or doc_state.version is None:
            return False
        return doc_state.version != doc_state.rendered_version

    async def synchronize(self, doc_id: str, *, force: bool = False) -> bool:
        """Bring the surface up to date for doc_id.

        Returns:
            True if the surface content was replaced.
        """
        if self._surface is None:
            return False
        replaced = False
        if self.needs_redraw(doc_id, force):
            replaced = await self._replace(self._surface, doc_id)
        await self._update_highlight(self._surface)
        return replaced

    async def _replace(self, surface: DisplaySurface, doc_id: str) -> bool:
        doc_state = self._store.state(doc_id)
        content = doc_state.rendered_lines if doc_state is not None else []
        try:
            count = await surface.line_count()
            if count > len(content):
                # Drop the stale tail first, then overwrite what remains.
                await surface.set_lines(len(content), count, [])
                await surface.set_lines(0, len(content), content)
            else:
                await surface.set_lines(0, count, content)
        except Exception:
            logger.debug("Outline redraw of %s skipped", doc_id, exc_info=True)
            return False

        if doc_state is not None and doc_state.rendered is not None:
            doc_state.rendered_version = doc_state.version
        self.state.active_document = doc_id
        self.state.highlight = None
        self._highlight_dirty = True
        logger.debug("Redrew outline for %s (%d lines)", doc_id, len(content))
        return True

    def _target_highlight(self) -> HighlightSpan | None:
        node = self.state.current_node
        active = self.state.active_document
        if node is None or active is None or self.state.current_document != active:
            return None
        doc_state = self._store.state(active)
        if doc_state is None or doc_state.rendered is None:
            return None
        span = doc_state.rendered.span_for(node)
        if span is None:
            return None
        return (span.line, span.start_col, span.end_col)

    async def _update_highlight(self, surface: DisplaySurface) -> None:
        target = self._target_highlight()
        if not self._highlight_dirty and target == self.state.highlight:
            return
        try:
            await surface.clear_highlights()
            self.state.highlight = None
            self._highlight_dirty = False
            if target is not None:
                line, start_col, end_col = target
                await surface.add_highlight(self._highlight_group, line, start_col, end_col)
                await surface.set_cursor(line, 0)
                self.state.highlight = target
        except Exception:
            logger.debug("Outline highlight update skipped", exc_info=True)
