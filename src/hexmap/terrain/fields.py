"""Field generation for map generation: height, temperature, and moisture."""

import numpy as np
from numpy.typing import NDArray

from .config import (
    HEIGHT_NOISE,
    MOISTURE_NOISE,
    TEMPERATURE_NOISE,
    TEMPERATURE_VARIATION,
    MapConfig,
    NoiseConfig,
)
from .noise import edge_falloff, fbm_noise, normalize_field, seed32


class NoiseFields:
    """The three per-tile scalar fields, each of shape (height, width)."""

    def __init__(
        self,
        height: NDArray[np.float64],
        temperature: NDArray[np.float64],
        moisture: NDArray[np.float64],
    ):
        self.height = height
        self.temperature = temperature
        self.moisture = moisture

    def sample(self, q: int, r: int) -> tuple[float, float, float]:
        """Return (height, temperature, moisture) at an axial coordinate."""
        return (
            float(self.height[r, q]),
            float(self.temperature[r, q]),
            float(self.moisture[r, q]),
        )


def make_height(
    width: int,
    height: int,
    seed: int,
    noise: NoiseConfig = HEIGHT_NOISE,
) -> NDArray[np.float64]:
    """Generate the height field.

    fBm noise attenuated by the edge falloff, so land gathers toward the
    middle of the map, then min-max normalized.

    Args:
        width: Map width in tiles.
        height: Map height in tiles.
        seed: Map seed.
        noise: Noise parameters.

    Returns:
        2D height array in [0, 1] (unscaled if the field is uniform).
    """
    raw = fbm_noise(width, height, seed32(seed + noise.seed_offset), noise)
    return normalize_field(raw * edge_falloff(width, height))


def make_temperature(
    width: int,
    height: int,
    seed: int,
    noise: NoiseConfig = TEMPERATURE_NOISE,
    variation: float = TEMPERATURE_VARIATION,
) -> NDArray[np.float64]:
    """Generate the temperature field.

    A latitude gradient (1.0 on the middle row, 0.0 at the top and bottom
    edges) perturbed by noise of +/- ``variation``, clamped to [0, 1].

    Args:
        width: Map width in tiles.
        height: Map height in tiles.
        seed: Map seed.
        noise: Noise parameters for the perturbation.
        variation: Noise amplitude.

    Returns:
        2D temperature array in [0, 1].
    """
    rows = np.arange(height, dtype=np.float64)
    latitude = np.abs(rows / height - 0.5) * 2.0
    base = np.broadcast_to((1.0 - latitude)[:, np.newaxis], (height, width))

    perturbation = fbm_noise(width, height, seed32(seed + noise.seed_offset), noise)
    return np.clip(base + perturbation * variation, 0.0, 1.0)


def make_moisture(
    width: int,
    height: int,
    seed: int,
    noise: NoiseConfig = MOISTURE_NOISE,
) -> NDArray[np.float64]:
    """Generate the moisture field.

    Args:
        width: Map width in tiles.
        height: Map height in tiles.
        seed: Map seed.
        noise: Noise parameters.

    Returns:
        2D moisture array in [0, 1] (unscaled if the field is uniform).
    """
    raw = fbm_noise(width, height, seed32(seed + noise.seed_offset), noise)
    return normalize_field(raw)


def make_fields(config: MapConfig) -> NoiseFields:
    """Generate all three fields for a map configuration.

    The fields are independent of one another and of the feature stream.
    """
    width, height = config.size.dimensions()
    return NoiseFields(
        height=make_height(width, height, config.seed),
        temperature=make_temperature(width, height, config.seed),
        moisture=make_moisture(width, height, config.seed),
    )
