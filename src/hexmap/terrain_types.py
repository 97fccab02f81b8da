"""Terrain kinds and their base yields and movement costs."""

from enum import Enum


class Terrain(str, Enum):
    """Terrain kinds for a map tile.

    Base yields (food, production, gold):

    | Terrain        | Food | Production | Gold |
    |----------------|------|------------|------|
    | Grassland      | 2    | 0          | 0    |
    | Plains         | 1    | 1          | 0    |
    | Desert         | 0    | 0          | 0    |
    | Tundra         | 1    | 0          | 0    |
    | Snow           | 0    | 0          | 0    |
    | any hill       | 0    | 2          | 0    |
    | Mountain       | 0    | 0          | 0    |
    | Coast, Ocean   | 1    | 0          | 0    |
    | Lake           | 2    | 0          | 0    |
    """

    # Flat terrain
    GRASSLAND = "grassland"
    PLAINS = "plains"
    DESERT = "desert"
    TUNDRA = "tundra"
    SNOW = "snow"

    # Hill variants
    GRASSLAND_HILL = "grassland_hill"
    PLAINS_HILL = "plains_hill"
    DESERT_HILL = "desert_hill"
    TUNDRA_HILL = "tundra_hill"
    SNOW_HILL = "snow_hill"

    MOUNTAIN = "mountain"

    # Water
    COAST = "coast"
    OCEAN = "ocean"
    LAKE = "lake"

    @classmethod
    def default(cls) -> "Terrain":
        return cls.GRASSLAND

    @property
    def base_food(self) -> int:
        """Base food yield."""
        return _BASE_FOOD.get(self, 0)

    @property
    def base_production(self) -> int:
        """Base production yield. Every hill gives 2."""
        if self.is_hill:
            return 2
        return 1 if self is Terrain.PLAINS else 0

    @property
    def base_gold(self) -> int:
        """Terrain never yields gold on its own."""
        return 0

    @property
    def movement_cost(self) -> int:
        """Movement cost to enter: 1 flat, 2 hill, 9999 impassable."""
        if self.is_flat_land:
            return 1
        if self.is_hill:
            return 2
        return IMPASSABLE_COST

    @property
    def is_water(self) -> bool:
        """Whether this is Coast, Ocean or Lake."""
        return self in _WATER_TYPES

    @property
    def is_hill(self) -> bool:
        """Whether this is a hill variant."""
        return self in _HILL_TYPES

    @property
    def is_passable(self) -> bool:
        """Whether land units can enter this terrain."""
        return self is not Terrain.MOUNTAIN and not self.is_water

    @property
    def is_flat_land(self) -> bool:
        """Whether this is a flat (non-hill, non-mountain) land kind."""
        return self in _FLAT_TYPES

    def hill_variant(self) -> "Terrain":
        """Hill counterpart of a flat kind; other kinds map to themselves."""
        return _FLAT_TO_HILL.get(self, self)

    def flat_variant(self) -> "Terrain":
        """Flat counterpart of a hill kind; other kinds map to themselves."""
        return _HILL_TO_FLAT.get(self, self)


IMPASSABLE_COST = 9999

_BASE_FOOD: dict[Terrain, int] = {
    Terrain.GRASSLAND: 2,
    Terrain.LAKE: 2,
    Terrain.PLAINS: 1,
    Terrain.TUNDRA: 1,
    Terrain.COAST: 1,
    Terrain.OCEAN: 1,
}

# Define sets for O(1) lookup
_WATER_TYPES = frozenset({
    Terrain.COAST,
    Terrain.OCEAN,
    Terrain.LAKE,
})

_FLAT_TO_HILL: dict[Terrain, Terrain] = {
    Terrain.GRASSLAND: Terrain.GRASSLAND_HILL,
    Terrain.PLAINS: Terrain.PLAINS_HILL,
    Terrain.DESERT: Terrain.DESERT_HILL,
    Terrain.TUNDRA: Terrain.TUNDRA_HILL,
    Terrain.SNOW: Terrain.SNOW_HILL,
}

_HILL_TO_FLAT: dict[Terrain, Terrain] = {
    hill: flat for flat, hill in _FLAT_TO_HILL.items()
}

_FLAT_TYPES = frozenset(_FLAT_TO_HILL)
_HILL_TYPES = frozenset(_HILL_TO_FLAT)
