"""Tile storage for generated maps."""

from typing import Iterator, Mapping, Protocol

from pydantic import BaseModel, PrivateAttr

from .exceptions import (
    TileAlreadyExistsError,
    TileMismatchError,
    TileNotFoundError,
)
from .features import TileFeature
from .terrain_types import Terrain
from .tiles import TileRecord
from .types import HexCoord


class TileSink(Protocol):
    """Anything that can take ownership of a generated tile.

    spawn() returns an opaque handle for the caller's bookkeeping.
    """

    def spawn(self, record: TileRecord) -> int: ...


class TileMap(BaseModel):
    """
    Mutable tile store indexed by handle and by coordinate.

    Handles are issued sequentially from 0 in spawn order. Records are frozen;
    replace() swaps a whole record, e.g. when a later system attaches a
    resource.
    """

    width: int
    height: int

    _tiles: list[TileRecord] = PrivateAttr(default_factory=list)

    # Coordinate index for quick lookups
    _positions: dict[HexCoord, int] = PrivateAttr(default_factory=dict)

    def spawn(self, record: TileRecord) -> int:
        """Add a tile and return its handle.

        Raises:
            TileAlreadyExistsError: If a tile already exists at the coordinate.
        """
        if record.position in self._positions:
            existing = self._positions[record.position]
            raise TileAlreadyExistsError(
                f"Tile at {record.position} already exists (handle {existing})"
            )
        handle = len(self._tiles)
        self._tiles.append(record)
        self._positions[record.position] = handle
        return handle

    def get(self, handle: int) -> TileRecord:
        """Get tile by handle.

        Raises:
            TileNotFoundError: If handle is unknown.
        """
        if not 0 <= handle < len(self._tiles):
            raise TileNotFoundError(f"Tile handle {handle} not found")
        return self._tiles[handle]

    def handle_at(self, position: HexCoord) -> int:
        """Get the handle of the tile at a coordinate.

        Raises:
            TileNotFoundError: If no tile exists at the coordinate.
        """
        if position not in self._positions:
            raise TileNotFoundError(f"No tile at {position}")
        return self._positions[position]

    def tile_at(self, position: HexCoord) -> TileRecord:
        """Get the tile at a coordinate.

        Raises:
            TileNotFoundError: If no tile exists at the coordinate.
        """
        return self._tiles[self.handle_at(position)]

    def replace(self, handle: int, record: TileRecord) -> None:
        """Swap the record stored under a handle.

        Raises:
            TileNotFoundError: If handle is unknown.
            TileMismatchError: If the new record has a different coordinate.
        """
        current = self.get(handle)
        if current.position != record.position:
            raise TileMismatchError(
                f"Replacement for {current.position} has position {record.position}"
            )
        self._tiles[handle] = record

    def in_bounds(self, position: HexCoord) -> bool:
        """Check if position is within the map grid."""
        return 0 <= position.q < self.width and 0 <= position.r < self.height

    def coordinates(self) -> Mapping[HexCoord, int]:
        """Return read-only view of the coordinate index."""
        return self._positions

    def with_feature(self, feature: TileFeature) -> list[TileRecord]:
        """All tiles carrying the given feature, in spawn order."""
        return [t for t in self._tiles if t.feature is feature]

    def with_terrain(self, terrain: Terrain) -> list[TileRecord]:
        """All tiles of the given terrain, in spawn order."""
        return [t for t in self._tiles if t.terrain is terrain]

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[TileRecord]:  # type: ignore[override]
        return iter(self._tiles)
