"""Main map generation orchestration."""

from collections import Counter
from typing import Iterable

import numpy as np
import structlog
from numpy.typing import NDArray

from ..state import TileMap, TileSink
from ..tiles import TileRecord, make_tile
from ..types import HexCoord
from .classification import determine_feature, determine_terrain
from .config import MapConfig
from .fields import (
    NoiseFields,
    make_fields,
    make_height,
    make_moisture,
    make_temperature,
)

logger = structlog.get_logger()


class MapGenerator:
    """Deterministic map generator for one configuration.

    Owns the random stream used for feature draws. The stream is seeded
    once from ``config.seed`` and advanced tile by tile in a fixed order
    (q outer, r inner), so the same config always yields the same map.
    A generator is single-use: create a new one to regenerate.
    """

    def __init__(self, config: MapConfig):
        self.config = config
        self.rng = np.random.default_rng(config.seed)

    def generate_height_map(self) -> NDArray[np.float64]:
        width, height = self.config.size.dimensions()
        return make_height(width, height, self.config.seed)

    def generate_temperature_map(self) -> NDArray[np.float64]:
        width, height = self.config.size.dimensions()
        return make_temperature(width, height, self.config.seed)

    def generate_moisture_map(self) -> NDArray[np.float64]:
        width, height = self.config.size.dimensions()
        return make_moisture(width, height, self.config.seed)

    def generate_fields(self) -> NoiseFields:
        """Build the height, temperature and moisture fields."""
        return make_fields(self.config)

    def generate(self, store: TileSink) -> list[int]:
        """Generate every tile and hand each one to the store.

        No resources or rivers are placed here; a later system that adds
        them must rebuild the record so yields are recomputed.

        Args:
            store: Receives one TileRecord per coordinate via spawn().

        Returns:
            Handles returned by the store, in generation order.
        """
        width, height = self.config.size.dimensions()
        logger.info(
            "map_generation_started",
            size=self.config.size.value,
            width=width,
            height=height,
            seed=self.config.seed,
        )

        fields = self.generate_fields()
        logger.debug("noise_fields_ready")

        handles: list[int] = []
        for q in range(width):
            for r in range(height):
                record = self._build_tile(q, r, fields)
                handles.append(store.spawn(record))

        logger.info("map_generation_finished", tiles=len(handles))
        return handles

    def _build_tile(self, q: int, r: int, fields: NoiseFields) -> TileRecord:
        h, temperature, moisture = fields.sample(q, r)
        terrain = determine_terrain(h, temperature, moisture, self.config)
        feature = determine_feature(terrain, temperature, moisture, self.rng)
        return make_tile(HexCoord(q=q, r=r), terrain, feature=feature)


def generate_map(config: MapConfig) -> TileMap:
    """Generate a complete map into a fresh TileMap.

    Args:
        config: Map generation configuration.

    Returns:
        TileMap holding one tile per coordinate.
    """
    width, height = config.size.dimensions()
    tiles = TileMap(width=width, height=height)
    MapGenerator(config).generate(tiles)
    log_map_stats(tiles)
    return tiles


def terrain_counts(tiles: Iterable[TileRecord]) -> tuple[Counter, Counter]:
    """Count tiles per terrain and per feature (tiles without one excluded)."""
    terrains: Counter = Counter()
    features: Counter = Counter()
    for tile in tiles:
        terrains[tile.terrain] += 1
        if tile.feature is not None:
            features[tile.feature] += 1
    return terrains, features


def log_map_stats(tiles: TileMap) -> None:
    """Log terrain and feature statistics."""
    total = len(tiles)
    if total == 0:
        logger.warning("map_empty")
        return

    terrains, features = terrain_counts(tiles)
    land = sum(count for terrain, count in terrains.items() if not terrain.is_water)

    logger.info(
        "map_stats",
        tiles=total,
        land_fraction=round(land / total, 3),
        terrains={t.value: c for t, c in terrains.most_common()},
        features={f.value: c for f, c in features.most_common()},
    )
