"""Map generation configuration models."""

from enum import Enum

from pydantic import BaseModel, Field


class MapSize(str, Enum):
    """Preset map sizes.

    | Size     | Width | Height | Tiles  |
    |----------|-------|--------|--------|
    | Duel     | 48    | 32     | 1,536  |
    | Tiny     | 56    | 36     | 2,016  |
    | Small    | 68    | 44     | 2,992  |
    | Standard | 80    | 52     | 4,160  |
    | Large    | 104   | 64     | 6,656  |
    | Huge     | 128   | 80     | 10,240 |
    """

    DUEL = "duel"
    TINY = "tiny"
    SMALL = "small"
    STANDARD = "standard"
    LARGE = "large"
    HUGE = "huge"

    def dimensions(self) -> tuple[int, int]:
        """Return (width, height) in tiles."""
        return _DIMENSIONS[self]

    def total_tiles(self) -> int:
        width, height = self.dimensions()
        return width * height


_DIMENSIONS: dict[MapSize, tuple[int, int]] = {
    MapSize.DUEL: (48, 32),
    MapSize.TINY: (56, 36),
    MapSize.SMALL: (68, 44),
    MapSize.STANDARD: (80, 52),
    MapSize.LARGE: (104, 64),
    MapSize.HUGE: (128, 80),
}


class NoiseConfig(BaseModel, frozen=True):
    """Fractal noise parameters for a single field."""

    octaves: int = Field(default=6, description="Number of octaves for fBm")
    frequency: float = Field(default=0.02, description="Base sampling frequency")
    lacunarity: float = Field(default=2.0, description="Frequency multiplier per octave")
    persistence: float = Field(default=0.5, description="Amplitude multiplier per octave")
    seed_offset: int = Field(default=0, description="Added to the map seed")


HEIGHT_NOISE = NoiseConfig()
TEMPERATURE_NOISE = NoiseConfig(octaves=1, frequency=0.05, seed_offset=1000)
MOISTURE_NOISE = NoiseConfig(octaves=4, frequency=0.03, seed_offset=2000)

# Peak deviation the temperature noise adds to the latitude gradient
TEMPERATURE_VARIATION = 0.2


class MapConfig(BaseModel, frozen=True):
    """Complete map generation configuration.

    Two configs with equal fields always generate identical maps. Thresholds
    are not range checked: inverted or out-of-range values give a skewed
    but well-defined classification.
    """

    size: MapSize = Field(default=MapSize.STANDARD, description="Map dimensions preset")
    seed: int = Field(
        default=42, ge=0, le=2**64 - 1, description="Random seed for reproducibility"
    )
    land_coverage: float = Field(
        default=0.4, description="Target land fraction (reserved, not used yet)"
    )
    ocean_threshold: float = Field(
        default=0.35, description="Height below this is water"
    )
    hill_threshold: float = Field(
        default=0.55, description="Height above this is hills"
    )
    mountain_threshold: float = Field(
        default=0.75, description="Height above this is mountains"
    )

    @property
    def width(self) -> int:
        return self.size.dimensions()[0]

    @property
    def height(self) -> int:
        return self.size.dimensions()[1]

    @classmethod
    def duel(cls) -> "MapConfig":
        return cls(size=MapSize.DUEL)

    @classmethod
    def tiny(cls) -> "MapConfig":
        return cls(size=MapSize.TINY)

    @classmethod
    def small(cls) -> "MapConfig":
        return cls(size=MapSize.SMALL)

    @classmethod
    def standard(cls) -> "MapConfig":
        return cls()

    @classmethod
    def large(cls) -> "MapConfig":
        return cls(size=MapSize.LARGE)

    @classmethod
    def huge(cls) -> "MapConfig":
        return cls(size=MapSize.HUGE)

    def with_seed(self, seed: int) -> "MapConfig":
        """Return copy with a different seed."""
        return self.model_validate({**self.model_dump(), "seed": seed})

    def with_ocean_threshold(self, threshold: float) -> "MapConfig":
        """Return copy with a different ocean threshold. Higher means more water."""
        return self.model_copy(update={"ocean_threshold": threshold})

    def with_hill_threshold(self, threshold: float) -> "MapConfig":
        """Return copy with a different hill threshold. Lower means more hills."""
        return self.model_copy(update={"hill_threshold": threshold})

    def with_mountain_threshold(self, threshold: float) -> "MapConfig":
        """Return copy with a different mountain threshold."""
        return self.model_copy(update={"mountain_threshold": threshold})
