"""Tile yield calculation."""

from typing import ClassVar

from pydantic import BaseModel

from .features import TileFeature
from .resources import TileResource
from .terrain_types import Terrain


class TileYields(BaseModel, frozen=True):
    """Combined output of a tile.

    Values are signed so intermediate modifiers (Jungle's -1 production) can
    be represented; derived yields are clamped at zero for food, production
    and gold. Science, culture and faith come from mechanics outside terrain
    and are always zero here.
    """

    ZERO: ClassVar["TileYields"]

    food: int = 0
    production: int = 0
    gold: int = 0
    science: int = 0
    culture: int = 0
    faith: int = 0

    @classmethod
    def new(cls, food: int, production: int, gold: int) -> "TileYields":
        return cls(food=food, production=production, gold=gold)

    @classmethod
    def calculate(
        cls,
        terrain: Terrain,
        feature: TileFeature | None = None,
        resource: TileResource | None = None,
        has_river: bool = False,
    ) -> "TileYields":
        """Yields from terrain, optional feature and unimproved resource.

        Args:
            terrain: Base terrain.
            feature: Overlay feature, if any.
            resource: Resource on the tile, if any.
            has_river: Accepted for a future river bonus; has no effect.

        Returns:
            TileYields with food, production and gold clamped to >= 0.
        """
        bonus = None
        if resource is not None:
            bonus = (
                resource.food_bonus,
                resource.production_bonus,
                resource.gold_bonus,
            )
        return cls._combine(terrain, feature, bonus)

    @classmethod
    def calculate_improved(
        cls,
        terrain: Terrain,
        feature: TileFeature | None = None,
        resource: TileResource | None = None,
        has_river: bool = False,
    ) -> "TileYields":
        """Same as calculate() but with the resource's improved bonus."""
        bonus = None
        if resource is not None:
            bonus = (
                resource.improved_food_bonus,
                resource.improved_production_bonus,
                resource.improved_gold_bonus,
            )
        return cls._combine(terrain, feature, bonus)

    @classmethod
    def _combine(
        cls,
        terrain: Terrain,
        feature: TileFeature | None,
        resource_bonus: tuple[int, int, int] | None,
    ) -> "TileYields":
        food = terrain.base_food
        production = terrain.base_production
        gold = terrain.base_gold

        if feature is not None:
            food += feature.food_modifier
            production += feature.production_modifier
            gold += feature.gold_modifier

        if resource_bonus is not None:
            food += resource_bonus[0]
            production += resource_bonus[1]
            gold += resource_bonus[2]

        # Each channel is clamped on its own, after all contributions
        return cls(food=max(0, food), production=max(0, production), gold=max(0, gold))

    def total(self) -> int:
        """Sum of all yield values."""
        return (
            self.food
            + self.production
            + self.gold
            + self.science
            + self.culture
            + self.faith
        )

    def is_empty(self) -> bool:
        """Whether every yield is zero."""
        return self.total() == 0

    def __add__(self, other: "TileYields") -> "TileYields":
        return TileYields(
            food=self.food + other.food,
            production=self.production + other.production,
            gold=self.gold + other.gold,
            science=self.science + other.science,
            culture=self.culture + other.culture,
            faith=self.faith + other.faith,
        )


TileYields.ZERO = TileYields()
