"""Custom exceptions for the hex map."""


class MapError(Exception):
    """Base exception for map errors."""

    pass


class TileNotFoundError(MapError):
    """Raised when no tile exists for a handle or coordinate."""

    pass


class TileAlreadyExistsError(MapError):
    """Raised when trying to add a tile at an occupied coordinate."""

    pass


class TileMismatchError(MapError):
    """Raised when a replacement tile has a different coordinate."""

    pass
