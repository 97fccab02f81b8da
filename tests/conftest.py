"""Shared test fixtures for hexmap tests."""

import pytest

from hexmap.state import TileMap
from hexmap.terrain.config import MapConfig, MapSize
from hexmap.terrain.generator import generate_map


class ScriptedRng:
    """Stand-in for numpy's Generator that replays fixed draws.

    Counts calls so tests can check how many values a rule consumed.
    """

    def __init__(self, values: list[float]):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRng instances."""
    return ScriptedRng


@pytest.fixture(scope="session")
def duel_config() -> MapConfig:
    """Default thresholds on the smallest preset."""
    return MapConfig(size=MapSize.DUEL, seed=42)


@pytest.fixture(scope="session")
def duel_map(duel_config: MapConfig) -> TileMap:
    """One generated Duel map shared across tests (48x32 = 1536 tiles)."""
    return generate_map(duel_config)


@pytest.fixture
def empty_map() -> TileMap:
    """Empty 4x3 tile store."""
    return TileMap(width=4, height=3)
