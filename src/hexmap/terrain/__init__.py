"""Procedural map generation package.

This package implements noise-based generation of hex strategy maps:
height, temperature and moisture fields, terrain and feature
classification, and post-generation validation.
"""

from .classification import determine_feature, determine_terrain
from .config import MapConfig, MapSize, NoiseConfig
from .fields import NoiseFields, make_fields
from .generator import MapGenerator, generate_map
from .validation import ValidationResult, validate_map

__all__ = [
    "MapConfig",
    "MapGenerator",
    "MapSize",
    "NoiseConfig",
    "NoiseFields",
    "ValidationResult",
    "determine_feature",
    "determine_terrain",
    "generate_map",
    "make_fields",
    "validate_map",
]
