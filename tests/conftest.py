"""Shared pytest fixtures for outlinesync tests."""

import pytest

from outlinesync.core.types import Position, Range
from outlinesync.outline.model import ElementKind, OutlineNode
from outlinesync.view.memory import MemorySurface


def _span(start_line: int, end_line: int) -> Range:
    return Range(Position(start_line, 0), Position(end_line, 0))


@pytest.fixture
def sample_tree() -> OutlineNode:
    """root -> A (lines 0-10) -> A1 (lines 2-4), plus B (lines 12-15)."""
    a1 = OutlineNode("A1", ElementKind.METHOD, _span(2, 2), _span(2, 4))
    a = OutlineNode("A", ElementKind.CLASS, _span(0, 0), _span(0, 10), [a1])
    b = OutlineNode("B", ElementKind.FUNCTION, _span(12, 12), _span(12, 15))
    return OutlineNode("root", ElementKind.UNKNOWN, _span(0, 0), _span(0, 100), [a, b])


@pytest.fixture
def memory_surface() -> MemorySurface:
    return MemorySurface("test-surface")
