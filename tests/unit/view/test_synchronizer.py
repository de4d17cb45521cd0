"""Tests for ViewSynchronizer redraw and highlight decisions."""

from unittest.mock import AsyncMock

import pytest

from outlinesync.core.types import Position, Range
from outlinesync.outline.model import ElementKind, OutlineNode
from outlinesync.outline.render import icon_for, render_outline
from outlinesync.outline.store import TreeStore
from outlinesync.view.memory import Highlight, MemorySurface
from outlinesync.view.synchronizer import ViewSynchronizer

DOC = "file:///lib/main.dart"
OTHER = "file:///lib/other.dart"
GROUP = "OutlineSyncCurrent"
FIELD_ICON = icon_for(ElementKind.FIELD)


def _flat_tree(count: int, prefix: str = "n") -> OutlineNode:
    children = [
        OutlineNode(
            f"{prefix}{i}",
            ElementKind.FIELD,
            code_range=Range(Position(i, 0), Position(i + 1, 0)),
        )
        for i in range(count)
    ]
    return OutlineNode("root", children=children)


def _store(doc_id: str, tree: OutlineNode, store: TreeStore | None = None) -> TreeStore:
    store = store or TreeStore()
    store.put(doc_id, tree)
    store.set_rendered(doc_id, render_outline(tree))
    return store


def _synchronizer(store: TreeStore, surface: MemorySurface | None = None) -> ViewSynchronizer:
    sync = ViewSynchronizer(store, GROUP)
    if surface is not None:
        sync.attach_surface(surface)
    return sync


class TestRedrawDecision:
    @pytest.mark.asyncio
    async def test_no_surface_is_noop(self) -> None:
        sync = _synchronizer(_store(DOC, _flat_tree(2)))
        assert await sync.synchronize(DOC) is False
        assert sync.state.active_document is None

    @pytest.mark.asyncio
    async def test_first_synchronize_writes_content(self) -> None:
        store = _store(DOC, _flat_tree(2))
        surface = MemorySurface()
        sync = _synchronizer(store, surface)

        assert await sync.synchronize(DOC) is True
        assert surface.lines == store.state(DOC).rendered_lines
        assert store.state(DOC).rendered_version == 0
        assert sync.state.active_document == DOC

    @pytest.mark.asyncio
    async def test_second_synchronize_performs_no_writes(self) -> None:
        surface = MemorySurface()
        sync = _synchronizer(_store(DOC, _flat_tree(2)), surface)
        await sync.synchronize(DOC)
        writes = surface.writes

        assert await sync.synchronize(DOC) is False
        assert surface.writes == writes

    @pytest.mark.asyncio
    async def test_force_always_replaces(self) -> None:
        surface = MemorySurface()
        sync = _synchronizer(_store(DOC, _flat_tree(2)), surface)
        await sync.synchronize(DOC)
        surface.lines = ["scribbled"]

        assert await sync.synchronize(DOC, force=True) is True
        assert surface.lines == [f" {FIELD_ICON}n0", f" {FIELD_ICON}n1"]

    @pytest.mark.asyncio
    async def test_new_version_triggers_redraw(self) -> None:
        store = _store(DOC, _flat_tree(2))
        surface = MemorySurface()
        sync = _synchronizer(store, surface)
        await sync.synchronize(DOC)

        _store(DOC, _flat_tree(4), store)
        assert sync.needs_redraw(DOC)
        assert await sync.synchronize(DOC) is True
        assert len(surface.lines) == 4
        assert store.state(DOC).rendered_version == 1

    @pytest.mark.asyncio
    async def test_switching_documents_redraws(self) -> None:
        store = _store(DOC, _flat_tree(2))
        _store(OTHER, _flat_tree(3, "o"), store)
        surface = MemorySurface()
        sync = _synchronizer(store, surface)
        await sync.synchronize(DOC)

        assert await sync.synchronize(OTHER) is True
        assert surface.lines == store.state(OTHER).rendered_lines
        assert sync.state.active_document == OTHER

    @pytest.mark.asyncio
    async def test_discarded_document_blanks_once(self) -> None:
        store = _store(DOC, _flat_tree(2))
        surface = MemorySurface()
        sync = _synchronizer(store, surface)
        await sync.synchronize(DOC)

        store.discard(DOC)
        assert await sync.synchronize(DOC, force=True) is True
        assert surface.lines == []
        writes = surface.writes
        assert await sync.synchronize(DOC) is False
        assert surface.writes == writes


class TestApplyMutation:
    @pytest.mark.asyncio
    async def test_shrink_leaves_no_stale_tail(self) -> None:
        surface = MemorySurface(lines=[f"old{i}" for i in range(10)])
        sync = _synchronizer(_store(DOC, _flat_tree(3)), surface)

        await sync.synchronize(DOC)
        assert len(surface.lines) == 3
        assert not any(line.startswith("old") for line in surface.lines)

    @pytest.mark.asyncio
    async def test_shrink_clears_tail_before_writing(self) -> None:
        surface = AsyncMock()
        surface.line_count.return_value = 10
        sync = _synchronizer(_store(DOC, _flat_tree(3)))
        sync.attach_surface(surface)

        await sync.synchronize(DOC)
        calls = surface.set_lines.await_args_list
        assert calls[0].args == (3, 10, [])
        assert calls[1].args[:2] == (0, 3)
        assert len(calls[1].args[2]) == 3

    @pytest.mark.asyncio
    async def test_grow(self) -> None:
        surface = MemorySurface(lines=["a", "b", "c"])
        sync = _synchronizer(_store(DOC, _flat_tree(10)), surface)

        await sync.synchronize(DOC)
        assert len(surface.lines) == 10

    @pytest.mark.asyncio
    async def test_unavailable_surface_is_swallowed(self) -> None:
        store = _store(DOC, _flat_tree(2))
        surface = MemorySurface()
        surface.available = False
        sync = _synchronizer(store, surface)

        assert await sync.synchronize(DOC) is False
        assert store.state(DOC).rendered_version is None
        assert sync.state.active_document is None

        surface.available = True
        assert await sync.synchronize(DOC) is True
        assert surface.lines == store.state(DOC).rendered_lines

    @pytest.mark.asyncio
    async def test_arbitrary_surface_errors_are_swallowed(self) -> None:
        surface = AsyncMock()
        surface.line_count.side_effect = RuntimeError("buffer wiped")
        sync = _synchronizer(_store(DOC, _flat_tree(2)))
        sync.attach_surface(surface)

        assert await sync.synchronize(DOC) is False


class TestHighlight:
    @pytest.mark.asyncio
    async def test_highlights_current_node_and_moves_cursor(self) -> None:
        tree = _flat_tree(3)
        store = _store(DOC, tree)
        surface = MemorySurface()
        sync = _synchronizer(store, surface)
        target = tree.children[2]
        sync.set_current(DOC, target)

        await sync.synchronize(DOC)
        span = store.state(DOC).rendered.span_for(target)
        assert surface.highlights == [Highlight(GROUP, 2, span.start_col, span.end_col)]
        assert surface.cursor == (2, 0)
        assert sync.state.highlight == (2, span.start_col, span.end_col)

    @pytest.mark.asyncio
    async def test_unchanged_highlight_is_not_redrawn(self) -> None:
        tree = _flat_tree(3)
        surface = MemorySurface()
        sync = _synchronizer(_store(DOC, tree), surface)
        sync.set_current(DOC, tree.children[1])
        await sync.synchronize(DOC)
        writes = surface.writes

        await sync.synchronize(DOC)
        assert surface.writes == writes

    @pytest.mark.asyncio
    async def test_moving_current_node_replaces_highlight(self) -> None:
        tree = _flat_tree(3)
        surface = MemorySurface()
        sync = _synchronizer(_store(DOC, tree), surface)
        sync.set_current(DOC, tree.children[0])
        await sync.synchronize(DOC)

        sync.set_current(DOC, tree.children[1])
        assert await sync.synchronize(DOC) is False
        assert len(surface.highlights) == 1
        assert surface.highlights[0].line == 1
        assert surface.cursor == (1, 0)

    @pytest.mark.asyncio
    async def test_unrendered_node_clears_highlight(self) -> None:
        tree = _flat_tree(3)
        surface = MemorySurface()
        sync = _synchronizer(_store(DOC, tree), surface)
        sync.set_current(DOC, tree.children[0])
        await sync.synchronize(DOC)

        sync.set_current(DOC, tree)
        await sync.synchronize(DOC)
        assert surface.highlights == []
        assert sync.state.highlight is None

    @pytest.mark.asyncio
    async def test_node_of_other_document_is_not_highlighted(self) -> None:
        tree = _flat_tree(2)
        store = _store(DOC, _flat_tree(2))
        _store(OTHER, tree, store)
        surface = MemorySurface()
        sync = _synchronizer(store, surface)
        sync.set_current(OTHER, tree.children[0])

        await sync.synchronize(DOC)
        assert surface.highlights == []

    @pytest.mark.asyncio
    async def test_highlight_failure_is_swallowed(self) -> None:
        tree = _flat_tree(2)
        surface = MemorySurface()
        sync = _synchronizer(_store(DOC, tree), surface)
        await sync.synchronize(DOC)

        surface.available = False
        sync.set_current(DOC, tree.children[0])
        await sync.synchronize(DOC)
        assert sync.state.highlight is None

        surface.available = True
        await sync.synchronize(DOC)
        assert sync.state.highlight is not None


class TestSurfaceLifecycle:
    @pytest.mark.asyncio
    async def test_detach_resets_active_document(self) -> None:
        surface = MemorySurface()
        sync = _synchronizer(_store(DOC, _flat_tree(1)), surface)
        await sync.synchronize(DOC)

        assert sync.detach_surface() is surface
        assert sync.surface is None
        assert sync.state.active_document is None

    @pytest.mark.asyncio
    async def test_invalidate_forces_next_redraw(self) -> None:
        surface = MemorySurface()
        sync = _synchronizer(_store(DOC, _flat_tree(1)), surface)
        await sync.synchronize(DOC)

        sync.invalidate()
        assert await sync.synchronize(DOC) is True
