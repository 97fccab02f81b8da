"""Deterministic procedural terrain for hex strategy maps."""

from .features import TileFeature
from .resources import ResourceCategory, TileResource
from .rivers import RiverEdges
from .state import TileMap
from .terrain import MapConfig, MapGenerator, MapSize, generate_map
from .terrain_types import Terrain
from .tiles import TileRecord, make_tile
from .types import HexCoord
from .yields import TileYields

__all__ = [
    "HexCoord",
    "MapConfig",
    "MapGenerator",
    "MapSize",
    "ResourceCategory",
    "RiverEdges",
    "Terrain",
    "TileFeature",
    "TileMap",
    "TileRecord",
    "TileResource",
    "TileYields",
    "generate_map",
    "make_tile",
]
