"""Collectible tile resources and their yield bonuses."""

from enum import Enum


class ResourceCategory(str, Enum):
    """Resource classification."""

    BONUS = "bonus"
    STRATEGIC = "strategic"
    LUXURY = "luxury"


class TileResource(str, Enum):
    """Resource on a tile.

    Each resource has a base bonus and a larger bonus once the tile carries
    a matching improvement. Bonuses are (food, production, gold) triples.
    """

    # Bonus
    CATTLE = "cattle"
    SHEEP = "sheep"
    FISH = "fish"
    STONE = "stone"
    WHEAT = "wheat"
    BANANAS = "bananas"
    DEER = "deer"

    # Strategic
    HORSES = "horses"
    IRON = "iron"
    COAL = "coal"
    OIL = "oil"
    ALUMINUM = "aluminum"
    URANIUM = "uranium"

    # Luxury
    CITRUS = "citrus"
    COTTON = "cotton"
    COPPER = "copper"
    GOLD = "gold"
    CRAB = "crab"
    WHALES = "whales"
    TURTLES = "turtles"
    OLIVES = "olives"
    WINE = "wine"
    SILK = "silk"
    SPICES = "spices"
    GEMS = "gems"
    MARBLE = "marble"
    IVORY = "ivory"

    @property
    def category(self) -> ResourceCategory:
        return _RESOURCE_TABLE[self][0]

    @property
    def food_bonus(self) -> int:
        return _RESOURCE_TABLE[self][1][0]

    @property
    def production_bonus(self) -> int:
        return _RESOURCE_TABLE[self][1][1]

    @property
    def gold_bonus(self) -> int:
        return _RESOURCE_TABLE[self][1][2]

    @property
    def improved_food_bonus(self) -> int:
        return _RESOURCE_TABLE[self][2][0]

    @property
    def improved_production_bonus(self) -> int:
        return _RESOURCE_TABLE[self][2][1]

    @property
    def improved_gold_bonus(self) -> int:
        return _RESOURCE_TABLE[self][2][2]

    @property
    def is_bonus(self) -> bool:
        return self.category is ResourceCategory.BONUS

    @property
    def is_strategic(self) -> bool:
        return self.category is ResourceCategory.STRATEGIC

    @property
    def is_luxury(self) -> bool:
        return self.category is ResourceCategory.LUXURY


_B = ResourceCategory.BONUS
_S = ResourceCategory.STRATEGIC
_L = ResourceCategory.LUXURY

# Resource -> (category, base bonus, improved bonus)
_RESOURCE_TABLE: dict[
    TileResource, tuple[ResourceCategory, tuple[int, int, int], tuple[int, int, int]]
] = {
    TileResource.CATTLE: (_B, (0, 1, 0), (0, 2, 0)),
    TileResource.SHEEP: (_B, (0, 1, 0), (0, 2, 0)),
    TileResource.FISH: (_B, (1, 0, 0), (2, 0, 0)),
    TileResource.STONE: (_B, (0, 1, 0), (0, 2, 0)),
    TileResource.WHEAT: (_B, (1, 0, 0), (2, 0, 0)),
    TileResource.BANANAS: (_B, (1, 0, 0), (2, 0, 0)),
    TileResource.DEER: (_B, (1, 0, 0), (2, 0, 0)),
    TileResource.HORSES: (_S, (0, 1, 0), (0, 2, 0)),
    TileResource.IRON: (_S, (0, 1, 0), (0, 2, 0)),
    TileResource.COAL: (_S, (0, 1, 0), (0, 2, 0)),
    TileResource.OIL: (_S, (0, 1, 0), (0, 2, 0)),
    TileResource.ALUMINUM: (_S, (0, 1, 0), (0, 2, 0)),
    TileResource.URANIUM: (_S, (0, 1, 0), (0, 2, 0)),
    TileResource.CITRUS: (_L, (1, 0, 1), (1, 0, 2)),
    TileResource.COTTON: (_L, (0, 0, 2), (0, 0, 3)),
    TileResource.COPPER: (_L, (0, 0, 2), (0, 1, 2)),
    TileResource.GOLD: (_L, (0, 0, 2), (0, 0, 2)),
    TileResource.CRAB: (_L, (1, 0, 0), (2, 0, 0)),
    TileResource.WHALES: (_L, (1, 0, 1), (2, 0, 1)),
    TileResource.TURTLES: (_L, (1, 0, 1), (2, 0, 1)),
    TileResource.OLIVES: (_L, (0, 1, 1), (0, 1, 2)),
    TileResource.WINE: (_L, (0, 0, 2), (0, 0, 3)),
    TileResource.SILK: (_L, (0, 0, 2), (0, 0, 3)),
    TileResource.SPICES: (_L, (0, 0, 2), (0, 0, 3)),
    TileResource.GEMS: (_L, (0, 0, 3), (0, 0, 3)),
    TileResource.MARBLE: (_L, (0, 1, 1), (0, 2, 1)),
    TileResource.IVORY: (_L, (0, 1, 1), (0, 2, 1)),
}
