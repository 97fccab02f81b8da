"""Core types for the hex map."""

from pydantic import BaseModel


class HexCoord(BaseModel, frozen=True):
    """Immutable axial hex coordinate.

    Only construction and value equality live here; neighbor, ring and
    distance math belong to the coordinate layer of the host application.
    """

    q: int
    r: int

    @classmethod
    def new(cls, q: int, r: int) -> "HexCoord":
        """Create a coordinate from an integer pair."""
        return cls(q=q, r=r)

    def __hash__(self) -> int:
        return hash((self.q, self.r))

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"

    def __repr__(self) -> str:
        return f"HexCoord(q={self.q}, r={self.r})"
