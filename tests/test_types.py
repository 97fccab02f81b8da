"""Tests for core types."""

import pytest
from pydantic import ValidationError

from hexmap.types import HexCoord


class TestHexCoord:
    """Tests for HexCoord class."""

    def test_creation(self):
        """HexCoord can be created with q and r."""
        coord = HexCoord(q=3, r=-2)
        assert coord.q == 3
        assert coord.r == -2

    def test_new_from_pair(self):
        """new() builds the same value as keyword construction."""
        assert HexCoord.new(3, 4) == HexCoord(q=3, r=4)

    def test_immutable(self):
        """HexCoord is immutable (frozen)."""
        coord = HexCoord(q=1, r=1)
        with pytest.raises(ValidationError):
            coord.q = 2  # type: ignore

    def test_equality(self):
        """Coordinates compare by value."""
        assert HexCoord(q=5, r=5) == HexCoord(q=5, r=5)
        assert HexCoord(q=5, r=5) != HexCoord(q=5, r=6)

    def test_hashable(self):
        """HexCoord can be used as dict key or in set."""
        a = HexCoord(q=1, r=2)
        b = HexCoord(q=1, r=2)
        c = HexCoord(q=2, r=1)

        assert hash(a) == hash(b)
        assert len({a, b, c}) == 2

        mapping = {a: "first", c: "second"}
        assert mapping[b] == "first"

    def test_str(self):
        """String form is the pair."""
        assert str(HexCoord(q=3, r=7)) == "(3, 7)"

    def test_json_round_trip(self):
        """Coordinates survive JSON encoding."""
        coord = HexCoord(q=12, r=31)
        assert HexCoord.model_validate_json(coord.model_dump_json()) == coord
