"""Overlay features: yield modifiers and terrain compatibility."""

from enum import Enum

from .terrain_types import Terrain


class TileFeature(str, Enum):
    """Feature overlay on a terrain tile. A tile carries at most one.

    | Feature     | Food | Production | Gold | Movement |
    |-------------|------|------------|------|----------|
    | Forest      | 0    | +1         | 0    | +1       |
    | Jungle      | 0    | -1         | 0    | +1       |
    | Marsh       | -1   | 0          | 0    | +1       |
    | Floodplains | +2   | 0          | 0    | 0        |
    | Oasis       | +3   | 0          | +1   | 0        |
    | Ice         | 0    | 0          | 0    | 0        |
    """

    FOREST = "forest"
    JUNGLE = "jungle"
    MARSH = "marsh"
    FLOODPLAINS = "floodplains"
    OASIS = "oasis"
    ICE = "ice"

    @property
    def food_modifier(self) -> int:
        return _MODIFIERS[self][0]

    @property
    def production_modifier(self) -> int:
        return _MODIFIERS[self][1]

    @property
    def gold_modifier(self) -> int:
        return _MODIFIERS[self][2]

    @property
    def movement_modifier(self) -> int:
        """Extra movement cost for entering a tile with this feature."""
        return 1 if self in _ROUGH_FEATURES else 0

    def can_place_on(self, terrain: Terrain) -> bool:
        """Whether this feature may appear on the given terrain."""
        return terrain in _VALID_TERRAINS[self]

    def valid_terrains(self) -> tuple[Terrain, ...]:
        """Terrains this feature may appear on, in declaration order."""
        return tuple(t for t in Terrain if t in _VALID_TERRAINS[self])


# Feature -> (food, production, gold)
_MODIFIERS: dict[TileFeature, tuple[int, int, int]] = {
    TileFeature.FOREST: (0, 1, 0),
    TileFeature.JUNGLE: (0, -1, 0),
    TileFeature.MARSH: (-1, 0, 0),
    TileFeature.FLOODPLAINS: (2, 0, 0),
    TileFeature.OASIS: (3, 0, 1),
    TileFeature.ICE: (0, 0, 0),
}

_ROUGH_FEATURES = frozenset({
    TileFeature.FOREST,
    TileFeature.JUNGLE,
    TileFeature.MARSH,
})

_VALID_TERRAINS: dict[TileFeature, frozenset[Terrain]] = {
    TileFeature.FOREST: frozenset({
        Terrain.GRASSLAND,
        Terrain.PLAINS,
        Terrain.TUNDRA,
        Terrain.GRASSLAND_HILL,
        Terrain.PLAINS_HILL,
        Terrain.TUNDRA_HILL,
    }),
    TileFeature.JUNGLE: frozenset({
        Terrain.GRASSLAND,
        Terrain.PLAINS,
        Terrain.GRASSLAND_HILL,
        Terrain.PLAINS_HILL,
    }),
    TileFeature.MARSH: frozenset({Terrain.GRASSLAND}),
    TileFeature.FLOODPLAINS: frozenset({Terrain.DESERT}),
    TileFeature.OASIS: frozenset({Terrain.DESERT}),
    TileFeature.ICE: frozenset({Terrain.COAST, Terrain.OCEAN}),
}
