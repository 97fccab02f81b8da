"""Tests for RiverEdges."""

import pytest
from pydantic import ValidationError

from hexmap.rivers import RiverEdges


class TestRiverEdgesConstruction:
    """Tests for building edge sets."""

    def test_none_and_all(self) -> None:
        assert not RiverEdges.NONE.has_river
        assert RiverEdges.NONE.edge_count == 0
        assert RiverEdges.ALL.edge_count == 6

    def test_new_masks_high_bits(self) -> None:
        """Bits above the six edges are dropped."""
        assert RiverEdges.new(0xFF).bits == 0b11_1111
        assert RiverEdges.new(0xFF) == RiverEdges.ALL

    def test_from_edges(self) -> None:
        edges = RiverEdges.from_edges([RiverEdges.EDGE_E, RiverEdges.EDGE_W])
        assert edges.bits == RiverEdges.EDGE_E | RiverEdges.EDGE_W
        assert edges.has_edge(RiverEdges.EDGE_E)
        assert edges.has_edge(RiverEdges.EDGE_W)
        assert not edges.has_edge(RiverEdges.EDGE_NE)

    def test_frozen(self) -> None:
        edges = RiverEdges.NONE
        with pytest.raises(ValidationError):
            edges.bits = 1  # type: ignore


class TestRiverEdgesMutation:
    """Tests for set/clear/toggle returning new values."""

    def test_set_edge_returns_new_value(self) -> None:
        original = RiverEdges.NONE
        updated = original.set_edge(RiverEdges.EDGE_SE)
        assert updated.has_edge(RiverEdges.EDGE_SE)
        assert not original.has_river

    def test_clear_edge(self) -> None:
        edges = RiverEdges.ALL.clear_edge(RiverEdges.EDGE_NW)
        assert not edges.has_edge(RiverEdges.EDGE_NW)
        assert edges.edge_count == 5

    def test_toggle_edge_twice_restores(self) -> None:
        edges = RiverEdges.from_edges([RiverEdges.EDGE_E])
        toggled = edges.toggle_edge(RiverEdges.EDGE_SW)
        assert toggled.has_edge(RiverEdges.EDGE_SW)
        assert toggled.toggle_edge(RiverEdges.EDGE_SW) == edges


class TestRiverEdgesIteration:
    """Tests for iteration and index helpers."""

    def test_iter_edges_in_fixed_order(self) -> None:
        edges = RiverEdges.from_edges(
            [RiverEdges.EDGE_SE, RiverEdges.EDGE_E, RiverEdges.EDGE_W]
        )
        assert list(edges.iter_edges()) == [
            RiverEdges.EDGE_E,
            RiverEdges.EDGE_W,
            RiverEdges.EDGE_SE,
        ]

    def test_opposite_edges(self) -> None:
        pairs = [
            (RiverEdges.EDGE_E, RiverEdges.EDGE_W),
            (RiverEdges.EDGE_NE, RiverEdges.EDGE_SW),
            (RiverEdges.EDGE_NW, RiverEdges.EDGE_SE),
        ]
        for a, b in pairs:
            assert RiverEdges.opposite_edge(a) == b
            assert RiverEdges.opposite_edge(b) == a

    def test_opposite_of_invalid_is_zero(self) -> None:
        assert RiverEdges.opposite_edge(0) == 0
        assert RiverEdges.opposite_edge(RiverEdges.EDGE_E | RiverEdges.EDGE_W) == 0

    def test_index_conversion(self) -> None:
        for index, edge in enumerate(RiverEdges.ALL_EDGES):
            assert RiverEdges.edge_to_index(edge) == index
            assert RiverEdges.index_to_edge(index) == edge

    def test_index_conversion_out_of_range(self) -> None:
        assert RiverEdges.index_to_edge(6) is None
        assert RiverEdges.index_to_edge(-1) is None
        assert RiverEdges.edge_to_index(64) is None

    def test_str(self) -> None:
        assert str(RiverEdges.new(0b000101)) == "RiverEdges(000101)"
