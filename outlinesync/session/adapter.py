"""Notification adapter: drives store, renderer, locator and synchronizer.

Two independent inbound channels feed the adapter: outline notifications
from the analysis server and cursor moves from the editor. Both are handled
on one asyncio task, one event at a time, so the store and the surface are
never mutated concurrently and no locking is needed.

Example:
    adapter = NotificationAdapter(config, documents, status, surface_factory)
    runner = asyncio.create_task(adapter.run())

    adapter.post(OutlineNotificationReceived(params))
    adapter.post(CursorMoved("file:///a.dart", line=12, column=5))

    adapter.stop()
    await runner
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from outlinesync.core.errors import OutlineParseError
from outlinesync.core.types import Position
from outlinesync.outline.locate import LocatedPath, locate_path, normalize_cursor
from outlinesync.outline.model import OutlineNode, OutlineNotification
from outlinesync.outline.render import render_outline
from outlinesync.outline.store import TreeStore
from outlinesync.session.events import (
    AdapterEvent,
    CursorMoved,
    DocumentClosed,
    OutlineNotificationReceived,
    OutlinePublished,
    ViewClosed,
    ViewOpened,
)
from outlinesync.view.surface import build_surface_syntax
from outlinesync.view.synchronizer import ViewSynchronizer

if TYPE_CHECKING:
    from outlinesync.config.schema import Config
    from outlinesync.session.interfaces import DocumentRegistry, StatusIndicator, SurfaceFactory

logger = logging.getLogger(__name__)


class NotificationAdapter:
    """Reacts to outline, cursor and view events for one editor session."""

    def __init__(
        self,
        config: Config,
        documents: DocumentRegistry,
        status: StatusIndicator,
        surface_factory: SurfaceFactory,
        store: TreeStore | None = None,
    ) -> None:
        self._config = config
        self._documents = documents
        self._status = status
        self._surface_factory = surface_factory
        self.store = store if store is not None else TreeStore()
        self.synchronizer = ViewSynchronizer(self.store, config.surface.highlight_group)
        self._queue: asyncio.Queue[AdapterEvent | None] = asyncio.Queue()
        self._last_document: str | None = None
        self._cursor: tuple[str, Position] | None = None

    # === Handlers ===

    async def on_outline(self, doc_id: str, tree: OutlineNode) -> bool:
        """Store, render and show a new outline.

        Returns:
            False if the document is not open in the editor (dropped).
        """
        if not self._documents.is_open(doc_id):
            logger.debug("Dropping outline for untracked document %s", doc_id)
            return False

        self.store.put(doc_id, tree)
        outline_config = self._config.outline
        rendered = render_outline(
            tree,
            line_numbers=outline_config.line_numbers,
            fold_indicators=outline_config.fold_indicators,
        )
        self.store.set_rendered(doc_id, rendered)

        # The old tree's nodes are gone; resolve the last cursor against the new one.
        if outline_config.show_path and self._cursor is not None and self._cursor[0] == doc_id:
            self.synchronizer.set_current(doc_id, locate_path(tree, self._cursor[1]).node)

        await self.synchronizer.synchronize(doc_id)
        return True

    async def handle_outline_notification(self, params: dict[str, Any]) -> bool:
        """Parse raw notification params and hand them to on_outline()."""
        try:
            notification = OutlineNotification.from_dict(params)
        except OutlineParseError as e:
            logger.warning("Ignoring malformed outline notification: %s", e.message)
            return False
        return await self.on_outline(notification.uri, notification.outline)

    async def on_cursor_move(self, doc_id: str, line: int, column: int) -> LocatedPath | None:
        """Resolve the breadcrumb for a cursor move and refresh the view.

        Args:
            doc_id: Document the cursor is in.
            line: Host cursor line.
            column: Host cursor column.

        Returns:
            The located path, or None if path display is off or there is no
            outline for the document yet.
        """
        tree = self.store.get(doc_id)
        if tree is None:
            # Plain files and the outline buffer itself: keep showing the last outline.
            logger.debug("No outline for %s, view left as is", doc_id)
            return None

        self._last_document = doc_id
        located: LocatedPath | None = None

        if self._config.outline.show_path:
            cursor_config = self._config.cursor
            position = normalize_cursor(
                line,
                column,
                line_origin=cursor_config.line_origin,
                column_origin=cursor_config.column_origin,
            )
            self._cursor = (doc_id, position)
            located = locate_path(tree, position)
            self.synchronizer.set_current(doc_id, located.node)
            self._status.show(located.breadcrumb)

        await self.synchronizer.synchronize(doc_id)
        return located

    async def open_view(self, doc_id: str | None = None) -> bool:
        """Open (or reuse) the display surface and fill it.

        Always forces a redraw: a fresh surface is empty even when the cached
        rendered version says otherwise.
        """
        if self.synchronizer.surface is None:
            try:
                surface = await self._surface_factory(self._config.surface)
            except Exception:
                logger.debug("Could not create outline surface", exc_info=True)
                return False
            try:
                await surface.declare_syntax(
                    build_surface_syntax(self._config.surface.highlight_group)
                )
            except Exception:
                logger.debug("Could not declare outline syntax", exc_info=True)
            self.synchronizer.attach_surface(surface)
            logger.info("Outline view opened: %s", surface.name)

        target = doc_id or self._last_document
        if target is None:
            return False
        return await self.synchronizer.synchronize(target, force=True)

    async def close_view(self) -> None:
        surface = self.synchronizer.detach_surface()
        if surface is None:
            return
        try:
            await surface.close()
        except Exception:
            logger.debug("Error closing outline surface", exc_info=True)

    async def on_document_closed(self, doc_id: str) -> None:
        """Forget a document's outline; blank the view if it was showing it."""
        self.store.discard(doc_id)
        if self._cursor is not None and self._cursor[0] == doc_id:
            self._cursor = None
        if self.synchronizer.state.current_document == doc_id:
            self.synchronizer.set_current(None, None)
        if self.synchronizer.state.active_document == doc_id:
            await self.synchronizer.synchronize(doc_id, force=True)

    async def close(self) -> None:
        """Session teardown: close the view and drop all outlines."""
        await self.close_view()
        self.store.clear()
        self._cursor = None
        self._last_document = None

    # === Dispatch ===

    async def dispatch(self, event: AdapterEvent) -> None:
        """Route one event to its handler."""
        match event:
            case OutlinePublished(doc_id=doc_id, tree=tree):
                await self.on_outline(doc_id, tree)
            case OutlineNotificationReceived(params=params):
                await self.handle_outline_notification(params)
            case CursorMoved(doc_id=doc_id, line=line, column=column):
                await self.on_cursor_move(doc_id, line, column)
            case ViewOpened(doc_id=doc_id):
                await self.open_view(doc_id)
            case ViewClosed():
                await self.close_view()
            case DocumentClosed(doc_id=doc_id):
                await self.on_document_closed(doc_id)
            case _:
                logger.warning("Unhandled adapter event: %s", type(event).__name__)

    def post(self, event: AdapterEvent) -> None:
        """Queue an event for run(). Safe to call from any callback on the loop."""
        self._queue.put_nowait(event)

    def stop(self) -> None:
        """Ask run() to return after the events already queued."""
        self._queue.put_nowait(None)

    async def join(self) -> None:
        """Wait until every queued event has been handled."""
        await self._queue.join()

    async def run(self) -> None:
        """Handle queued events one at a time until stop() is called."""
        while True:
            event = await self._queue.get()
            try:
                if event is None:
                    return
                await self.dispatch(event)
            except Exception:
                logger.exception("Error handling %s", type(event).__name__)
            finally:
                self._queue.task_done()
