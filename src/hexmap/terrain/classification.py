"""Terrain and feature classification from height, temperature and moisture."""

import numpy as np

from ..features import TileFeature
from ..terrain_types import Terrain
from .config import MapConfig

# Fraction of the ocean threshold below which water is deep ocean
DEEP_OCEAN_RATIO = 0.6

# Upper temperature bound -> flat biome, checked in order
_BIOME_BANDS: tuple[tuple[float, Terrain], ...] = (
    (0.15, Terrain.SNOW),
    (0.30, Terrain.TUNDRA),
    (0.50, Terrain.GRASSLAND),
    (0.80, Terrain.PLAINS),
)

FEATURELESS_TERRAIN = frozenset({
    Terrain.MOUNTAIN,
    Terrain.SNOW,
    Terrain.SNOW_HILL,
})

OASIS_CHANCE = 0.05
MARSH_CHANCE = 0.2
JUNGLE_CHANCE = 0.5
FOREST_CHANCE = 0.4


def determine_terrain(
    height: float,
    temperature: float,
    moisture: float,
    config: MapConfig,
) -> Terrain:
    """Classify one tile's terrain. First match wins.

    1. height < ocean threshold: Ocean below 60% of the threshold, else Coast.
    2. height > mountain threshold: Mountain.
    3. Land biome by temperature (Snow < 0.15 <= Tundra < 0.30 <= Grassland
       < 0.50 <= Plains < 0.80 <= Desert), as the hill variant when
       height > hill threshold.

    Moisture is accepted for symmetry with determine_feature but does not
    affect terrain.

    Args:
        height: Normalized height.
        temperature: Temperature in [0, 1].
        moisture: Normalized moisture (unused).
        config: Map configuration supplying the thresholds.

    Returns:
        Terrain for the tile.
    """
    if height < config.ocean_threshold:
        if height < config.ocean_threshold * DEEP_OCEAN_RATIO:
            return Terrain.OCEAN
        return Terrain.COAST

    if height > config.mountain_threshold:
        return Terrain.MOUNTAIN

    is_hill = height > config.hill_threshold
    biome = _biome_for(temperature)
    return biome.hill_variant() if is_hill else biome


def _biome_for(temperature: float) -> Terrain:
    for upper, biome in _BIOME_BANDS:
        if temperature < upper:
            return biome
    return Terrain.DESERT


def _draw(rng: np.random.Generator, probability: float) -> bool:
    """Bernoulli draw consuming one value from the stream."""
    return bool(rng.random() < probability)


def determine_feature(
    terrain: Terrain,
    temperature: float,
    moisture: float,
    rng: np.random.Generator,
) -> TileFeature | None:
    """Pick at most one feature for a tile.

    Water, Mountain, Snow and SnowHill never get a feature and consume no
    draws. Otherwise the rules below run in order and stop at the first
    success. A rule only draws once its climate conditions hold, and
    placement compatibility is checked after the draw, so the number of
    values taken from ``rng`` depends only on the tile's inputs.

    1. Desert, moisture > 0.4, 5% -> Oasis
    2. flat, moisture > 0.7, 20%, placeable -> Marsh
    3. temperature > 0.7, moisture > 0.6, 50%, placeable -> Jungle
    4. temperature < 0.6, moisture > 0.5, 40%, placeable -> Forest

    Args:
        terrain: Terrain already chosen for the tile.
        temperature: Temperature in [0, 1].
        moisture: Normalized moisture.
        rng: The generation session's random stream.

    Returns:
        The chosen feature or None.
    """
    if terrain.is_water or terrain in FEATURELESS_TERRAIN:
        return None

    if terrain is Terrain.DESERT and moisture > 0.4 and _draw(rng, OASIS_CHANCE):
        return TileFeature.OASIS

    if (
        not terrain.is_hill
        and moisture > 0.7
        and _draw(rng, MARSH_CHANCE)
        and TileFeature.MARSH.can_place_on(terrain)
    ):
        return TileFeature.MARSH

    if (
        temperature > 0.7
        and moisture > 0.6
        and _draw(rng, JUNGLE_CHANCE)
        and TileFeature.JUNGLE.can_place_on(terrain)
    ):
        return TileFeature.JUNGLE

    if (
        temperature < 0.6
        and moisture > 0.5
        and _draw(rng, FOREST_CHANCE)
        and TileFeature.FOREST.can_place_on(terrain)
    ):
        return TileFeature.FOREST

    return None
