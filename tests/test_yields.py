"""Tests for tile yield calculation."""

from hexmap.features import TileFeature
from hexmap.resources import TileResource
from hexmap.terrain_types import Terrain
from hexmap.yields import TileYields


class TestTileYieldsCalculate:
    """Tests for TileYields.calculate."""

    def test_bare_terrain(self) -> None:
        assert TileYields.calculate(Terrain.GRASSLAND) == TileYields.new(2, 0, 0)
        assert TileYields.calculate(Terrain.PLAINS_HILL) == TileYields.new(0, 2, 0)

    def test_grassland_forest(self) -> None:
        y = TileYields.calculate(Terrain.GRASSLAND, TileFeature.FOREST)
        assert (y.food, y.production, y.gold) == (2, 1, 0)

    def test_desert_oasis(self) -> None:
        y = TileYields.calculate(Terrain.DESERT, TileFeature.OASIS)
        assert (y.food, y.production, y.gold) == (3, 0, 1)

    def test_jungle_production_clamped(self) -> None:
        """Plains production 1 with Jungle -1 ends at 0."""
        y = TileYields.calculate(Terrain.PLAINS, TileFeature.JUNGLE)
        assert (y.food, y.production, y.gold) == (1, 0, 0)

    def test_clamp_is_per_channel(self) -> None:
        """Desert with Jungle would be -1 production; food is unaffected."""
        y = TileYields.calculate(Terrain.DESERT, TileFeature.JUNGLE, TileResource.WHEAT)
        assert (y.food, y.production, y.gold) == (1, 0, 0)

    def test_resource_base_bonus(self) -> None:
        y = TileYields.calculate(Terrain.PLAINS, resource=TileResource.CATTLE)
        assert (y.food, y.production, y.gold) == (1, 2, 0)

    def test_improved_bonus(self) -> None:
        y = TileYields.calculate_improved(Terrain.PLAINS, resource=TileResource.CATTLE)
        assert (y.food, y.production, y.gold) == (1, 3, 0)

    def test_improved_without_resource_matches_base(self) -> None:
        assert TileYields.calculate_improved(
            Terrain.GRASSLAND, TileFeature.FOREST
        ) == TileYields.calculate(Terrain.GRASSLAND, TileFeature.FOREST)

    def test_river_flag_has_no_effect(self) -> None:
        assert TileYields.calculate(
            Terrain.GRASSLAND, has_river=True
        ) == TileYields.calculate(Terrain.GRASSLAND)

    def test_other_yields_always_zero(self) -> None:
        y = TileYields.calculate(Terrain.DESERT, TileFeature.OASIS, TileResource.GEMS)
        assert y.science == y.culture == y.faith == 0

    def test_never_negative(self) -> None:
        """Every terrain, feature and resource combination stays non-negative."""
        features = [None, *TileFeature]
        resources = [None, *TileResource]
        for terrain in Terrain:
            for feature in features:
                for resource in resources:
                    for calculate in (
                        TileYields.calculate,
                        TileYields.calculate_improved,
                    ):
                        y = calculate(terrain, feature, resource)
                        assert y.food >= 0
                        assert y.production >= 0
                        assert y.gold >= 0


class TestTileYieldsHelpers:
    """Tests for arithmetic helpers."""

    def test_zero(self) -> None:
        assert TileYields.ZERO.is_empty()
        assert TileYields.ZERO.total() == 0

    def test_total(self) -> None:
        y = TileYields(food=2, production=1, gold=3, science=1, culture=0, faith=2)
        assert y.total() == 9
        assert not y.is_empty()

    def test_add(self) -> None:
        a = TileYields.new(1, 2, 3)
        b = TileYields(food=1, science=4)
        assert a + b == TileYields(food=2, production=2, gold=3, science=4)
