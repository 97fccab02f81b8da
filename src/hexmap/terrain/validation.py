"""Post-generation validation."""

from typing import Iterable

import structlog

from ..tiles import TileRecord
from ..yields import TileYields
from .classification import FEATURELESS_TERRAIN
from .config import MapConfig

logger = structlog.get_logger()


class ValidationResult:
    """Outcome of validate_map.

    Errors mark a map that breaks a generation invariant; warnings flag
    legal but suspicious maps (all land, all water).
    """

    def __init__(self) -> None:
        self.passed = True
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def add_error(self, message: str) -> None:
        """Record an invariant violation and mark the map as failed."""
        self.passed = False
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        """Record a non-fatal finding."""
        self.warnings.append(message)

    def summary(self) -> str:
        """One-line status, e.g. ``passed (1 warning)``."""
        status = "passed" if self.passed else f"failed ({len(self.errors)} errors)"
        if self.warnings:
            plural = "" if len(self.warnings) == 1 else "s"
            status += f" ({len(self.warnings)} warning{plural})"
        return status


def validate_map(
    tiles: Iterable[TileRecord],
    config: MapConfig,
) -> ValidationResult:
    """Validate generated tiles against the map's invariants.

    Args:
        tiles: Generated tile records.
        config: Configuration the tiles were generated from.

    Returns:
        ValidationResult; ``passed`` is False if any error was recorded.
    """
    records = list(tiles)
    result = ValidationResult()

    _check_grid_completeness(records, config, result)
    _check_feature_placement(records, result)
    _check_yields(records, result)
    _check_land_and_water(records, result)

    for message in result.errors:
        logger.error("map_validation_error", detail=message)
    for message in result.warnings:
        logger.warning("map_validation_warning", detail=message)
    logger.info(
        "map_validated",
        tiles=len(records),
        passed=result.passed,
        errors=len(result.errors),
        warnings=len(result.warnings),
    )
    return result


def _check_grid_completeness(
    records: list[TileRecord],
    config: MapConfig,
    result: ValidationResult,
) -> None:
    """Check the tiles cover the grid exactly once."""
    width, height = config.size.dimensions()
    expected = config.size.total_tiles()

    if len(records) != expected:
        result.add_error(f"Expected {expected} tiles, found {len(records)}")

    seen: set[tuple[int, int]] = set()
    out_of_bounds = 0
    duplicates = 0
    for tile in records:
        key = (tile.position.q, tile.position.r)
        if not (0 <= key[0] < width and 0 <= key[1] < height):
            out_of_bounds += 1
        elif key in seen:
            duplicates += 1
        seen.add(key)

    if out_of_bounds:
        result.add_error(f"{out_of_bounds} tiles outside the {width}x{height} grid")
    if duplicates:
        result.add_error(f"{duplicates} duplicate coordinates")

    in_grid = sum(1 for q, r in seen if 0 <= q < width and 0 <= r < height)
    missing = expected - in_grid
    if missing > 0:
        result.add_error(f"{missing} coordinates have no tile")


def _check_feature_placement(
    records: list[TileRecord],
    result: ValidationResult,
) -> None:
    """Check features are on terrain that allows them."""
    incompatible = 0
    on_barren = 0

    for tile in records:
        if tile.feature is None:
            continue
        if not tile.feature.can_place_on(tile.terrain):
            incompatible += 1
        if tile.terrain.is_water or tile.terrain in FEATURELESS_TERRAIN:
            on_barren += 1

    if incompatible:
        result.add_error(f"{incompatible} features on incompatible terrain")
    if on_barren:
        result.add_error(
            f"{on_barren} features on water, mountain or snow tiles"
        )


def _check_yields(
    records: list[TileRecord],
    result: ValidationResult,
) -> None:
    """Check yields are clamped and derived from the tile's determinants."""
    negative = 0
    stale = 0

    for tile in records:
        y = tile.yields
        if y.food < 0 or y.production < 0 or y.gold < 0:
            negative += 1

        calculate = (
            TileYields.calculate_improved if tile.improved else TileYields.calculate
        )
        expected = calculate(
            tile.terrain, tile.feature, tile.resource, tile.rivers.has_river
        )
        if y != expected:
            stale += 1

    if negative:
        result.add_error(f"{negative} tiles with negative yields")
    if stale:
        result.add_error(f"{stale} tiles with yields not matching their inputs")


def _check_land_and_water(
    records: list[TileRecord],
    result: ValidationResult,
) -> None:
    """Warn when the map is all land or all water."""
    if not records:
        return

    water = sum(1 for tile in records if tile.terrain.is_water)
    if water == len(records):
        result.add_warning("Map has no land tiles")
    elif water == 0:
        result.add_warning("Map has no water tiles")
