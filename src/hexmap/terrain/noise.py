"""Noise generation functions for map generation.

Provides fBm (fractal Brownian motion) over OpenSimplex noise, the
radial edge falloff used to shape continents, and min-max normalization.
"""

import numpy as np
from numpy.typing import NDArray
from opensimplex import OpenSimplex

from .config import NoiseConfig

SEED_MASK = 0xFFFF_FFFF


def seed32(seed: int) -> int:
    """Reduce a map seed to the 32-bit seed space of the noise sources."""
    return seed & SEED_MASK


def fbm_noise(
    width: int,
    height: int,
    seed: int,
    config: NoiseConfig,
) -> NDArray[np.float64]:
    """Generate fractal Brownian motion noise sampled at integer tile coordinates.

    Sums multiple octaves of simplex noise at increasing frequencies
    and decreasing amplitudes for natural-looking variation. Each octave
    uses its own noise source seeded from ``seed + octave``.

    Args:
        width: Output width in tiles.
        height: Output height in tiles.
        seed: 32-bit seed for the first octave.
        config: Octaves, base frequency, lacunarity and persistence.

    Returns:
        2D array of shape (height, width), roughly in range [-1, 1].
    """
    xs = np.arange(width, dtype=np.float64)
    ys = np.arange(height, dtype=np.float64)
    result = np.zeros((height, width), dtype=np.float64)

    frequency = config.frequency
    amplitude = 1.0
    max_amplitude = 0.0

    for octave in range(config.octaves):
        source = OpenSimplex(seed=seed32(seed + octave))
        # noise2array returns shape (len(ys), len(xs))
        result += amplitude * source.noise2array(xs * frequency, ys * frequency)
        max_amplitude += amplitude
        frequency *= config.lacunarity
        amplitude *= config.persistence

    if max_amplitude > 0:
        result /= max_amplitude
    return result


def edge_falloff(width: int, height: int) -> NDArray[np.float64]:
    """Radial attenuation that is 1 at the map center and 0 at the rim.

    With ex = |x/width - 0.5| * 2 and ey = |y/height - 0.5| * 2 the factor
    is 1 - min(1, sqrt(ex^2 + ey^2)), an ellipse matching the map aspect.

    Args:
        width: Map width in tiles.
        height: Map height in tiles.

    Returns:
        2D array of shape (height, width) in [0, 1].
    """
    ex = np.abs(np.arange(width, dtype=np.float64) / width - 0.5) * 2.0
    ey = np.abs(np.arange(height, dtype=np.float64) / height - 0.5) * 2.0
    dist = np.sqrt(ex[np.newaxis, :] ** 2 + ey[:, np.newaxis] ** 2)
    return 1.0 - np.minimum(1.0, dist)


def normalize_field(field: NDArray[np.float64]) -> NDArray[np.float64]:
    """Min-max normalize a field to [0, 1].

    A field whose range is within machine epsilon is returned unscaled,
    so a uniform field keeps its original value instead of becoming NaN.

    Args:
        field: Input 2D field.

    Returns:
        New normalized array.
    """
    if field.size == 0:
        return field.copy()

    min_val = float(np.min(field))
    max_val = float(np.max(field))
    value_range = max_val - min_val

    if value_range > np.finfo(np.float64).eps:
        return (field - min_val) / value_range
    return field.copy()
