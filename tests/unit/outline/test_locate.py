"""Tests for cursor to outline path resolution."""

from outlinesync.core.types import Position, Range
from outlinesync.outline.locate import contains, locate_path, normalize_cursor
from outlinesync.outline.model import ElementKind, OutlineNode


def _range(start: tuple[int, int], end: tuple[int, int]) -> Range:
    return Range(Position(*start), Position(*end))


class TestContains:
    def test_start_is_inclusive(self) -> None:
        assert contains(_range((2, 4), (5, 0)), Position(2, 4))

    def test_before_start_column(self) -> None:
        assert not contains(_range((2, 4), (5, 0)), Position(2, 3))

    def test_end_is_exclusive(self) -> None:
        assert not contains(_range((2, 4), (5, 3)), Position(5, 3))
        assert contains(_range((2, 4), (5, 3)), Position(5, 2))

    def test_middle_line_ignores_columns(self) -> None:
        assert contains(_range((2, 40), (5, 0)), Position(3, 0))

    def test_inverted_range_contains_nothing(self) -> None:
        assert not contains(_range((5, 0), (2, 0)), Position(3, 0))


class TestNormalizeCursor:
    def test_one_indexed_host(self) -> None:
        assert normalize_cursor(1, 1) == Position(0, 0)
        assert normalize_cursor(10, 5) == Position(9, 4)

    def test_zero_indexed_columns(self) -> None:
        assert normalize_cursor(10, 5, column_origin=0) == Position(9, 5)

    def test_zero_indexed_host(self) -> None:
        assert normalize_cursor(0, 0, line_origin=0, column_origin=0) == Position(0, 0)

    def test_never_negative(self) -> None:
        assert normalize_cursor(0, 0) == Position(0, 0)


class TestLocatePath:
    def test_resolves_deepest_node(self, sample_tree: OutlineNode) -> None:
        located = locate_path(sample_tree, Position(3, 0))
        assert located.node.name == "A1"
        assert located.breadcrumb == " > A > A1"
        assert [n.name for n in located.path] == ["A", "A1"]
        assert located.found

    def test_stops_at_parent_outside_children(self, sample_tree: OutlineNode) -> None:
        located = locate_path(sample_tree, Position(9, 0))
        assert located.node.name == "A"
        assert located.breadcrumb == " > A"

    def test_outside_everything_returns_root(self, sample_tree: OutlineNode) -> None:
        located = locate_path(sample_tree, Position(20, 0))
        assert located.node is sample_tree
        assert located.breadcrumb == ""
        assert not located.found

    def test_gap_between_siblings(self, sample_tree: OutlineNode) -> None:
        assert locate_path(sample_tree, Position(11, 0)).node is sample_tree

    def test_second_sibling(self, sample_tree: OutlineNode) -> None:
        assert locate_path(sample_tree, Position(13, 2)).breadcrumb == " > B"

    def test_overlapping_siblings_first_wins(self) -> None:
        first = OutlineNode("first", ElementKind.FIELD, code_range=_range((0, 0), (10, 0)))
        second = OutlineNode("second", ElementKind.FIELD, code_range=_range((5, 0), (15, 0)))
        root = OutlineNode("root", children=[first, second])
        assert locate_path(root, Position(7, 0)).node is first

    def test_empty_tree(self) -> None:
        root = OutlineNode("root")
        located = locate_path(root, Position(0, 0))
        assert located.node is root
        assert located.breadcrumb == ""
