"""River edge tracking as a 6-bit mask over hex edges.

Edge bits, counter-clockwise from East (pointy-top orientation):

          NW  /\\  NE
            /    \\
         W |      | E
            \\    /
          SW  \\/  SE

    Bit 0: E    Bit 3: W
    Bit 1: NE   Bit 4: SW
    Bit 2: NW   Bit 5: SE
"""

from typing import ClassVar, Iterable, Iterator

from pydantic import BaseModel, field_validator

EDGE_MASK = 0b0011_1111


class RiverEdges(BaseModel, frozen=True):
    """Immutable set of hex edges carrying a river."""

    EDGE_E: ClassVar[int] = 1 << 0
    EDGE_NE: ClassVar[int] = 1 << 1
    EDGE_NW: ClassVar[int] = 1 << 2
    EDGE_W: ClassVar[int] = 1 << 3
    EDGE_SW: ClassVar[int] = 1 << 4
    EDGE_SE: ClassVar[int] = 1 << 5

    ALL_EDGES: ClassVar[tuple[int, ...]] = (
        EDGE_E, EDGE_NE, EDGE_NW, EDGE_W, EDGE_SW, EDGE_SE,
    )

    NONE: ClassVar["RiverEdges"]
    ALL: ClassVar["RiverEdges"]

    bits: int = 0

    @field_validator("bits")
    @classmethod
    def _mask_bits(cls, value: int) -> int:
        return value & EDGE_MASK

    @classmethod
    def new(cls, edges: int) -> "RiverEdges":
        """Create from a raw bitmask, keeping only the low six bits."""
        return cls(bits=edges)

    @classmethod
    def from_edges(cls, edges: Iterable[int]) -> "RiverEdges":
        """Create from a sequence of EDGE_* flags."""
        bits = 0
        for edge in edges:
            bits |= edge
        return cls(bits=bits)

    @property
    def has_river(self) -> bool:
        """Whether any edge has a river."""
        return self.bits != 0

    def has_edge(self, edge: int) -> bool:
        """Whether the given EDGE_* flag is set."""
        return self.bits & edge != 0

    def set_edge(self, edge: int) -> "RiverEdges":
        """Return a copy with a river on the given edge."""
        return RiverEdges(bits=self.bits | (edge & EDGE_MASK))

    def clear_edge(self, edge: int) -> "RiverEdges":
        """Return a copy without a river on the given edge."""
        return RiverEdges(bits=self.bits & ~edge)

    def toggle_edge(self, edge: int) -> "RiverEdges":
        """Return a copy with the given edge flipped."""
        return RiverEdges(bits=self.bits ^ (edge & EDGE_MASK))

    @property
    def edge_count(self) -> int:
        """Number of edges with a river."""
        return bin(self.bits).count("1")

    def iter_edges(self) -> Iterator[int]:
        """Yield set EDGE_* flags in E, NE, NW, W, SW, SE order."""
        return (edge for edge in self.ALL_EDGES if self.has_edge(edge))

    @staticmethod
    def opposite_edge(edge: int) -> int:
        """Edge on the neighboring tile that shares this edge, 0 if invalid.

        A river on the E edge of one tile is the W edge of its east neighbor.
        """
        index = RiverEdges.edge_to_index(edge)
        if index is None:
            return 0
        return RiverEdges.ALL_EDGES[(index + 3) % 6]

    @staticmethod
    def edge_to_index(edge: int) -> int | None:
        """Index 0-5 of a single EDGE_* flag, or None."""
        try:
            return RiverEdges.ALL_EDGES.index(edge)
        except ValueError:
            return None

    @staticmethod
    def index_to_edge(index: int) -> int | None:
        """EDGE_* flag for index 0-5, or None when out of range."""
        if 0 <= index < len(RiverEdges.ALL_EDGES):
            return RiverEdges.ALL_EDGES[index]
        return None

    def __str__(self) -> str:
        return f"RiverEdges({self.bits:06b})"


RiverEdges.NONE = RiverEdges(bits=0)
RiverEdges.ALL = RiverEdges(bits=EDGE_MASK)
