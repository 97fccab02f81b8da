"""Tests for noise generation functions."""

import numpy as np

from hexmap.terrain.config import NoiseConfig
from hexmap.terrain.noise import edge_falloff, fbm_noise, normalize_field, seed32


class TestSeed32:
    """Tests for seed reduction."""

    def test_small_seed_unchanged(self) -> None:
        assert seed32(42) == 42

    def test_wraps_at_32_bits(self) -> None:
        assert seed32(2**32 + 5) == 5
        assert seed32(2**64 - 1) == 2**32 - 1


class TestFbmNoise:
    """Tests for fractal Brownian motion noise."""

    def test_output_shape(self) -> None:
        """Output is indexed [row, column]."""
        result = fbm_noise(20, 10, seed=42, config=NoiseConfig())
        assert result.shape == (10, 20)
        assert result.dtype == np.float64

    def test_deterministic(self) -> None:
        """Same seed produces identical output."""
        config = NoiseConfig(octaves=4)
        a = fbm_noise(16, 12, seed=123, config=config)
        b = fbm_noise(16, 12, seed=123, config=config)
        np.testing.assert_array_equal(a, b)

    def test_different_seeds(self) -> None:
        """Different seeds produce different output."""
        config = NoiseConfig(octaves=3, frequency=0.1)
        a = fbm_noise(16, 16, seed=1, config=config)
        b = fbm_noise(16, 16, seed=2, config=config)
        assert not np.array_equal(a, b)

    def test_bounded(self) -> None:
        """Amplitude-normalized sum stays within [-1, 1]."""
        result = fbm_noise(32, 32, seed=7, config=NoiseConfig(frequency=0.1))
        assert result.min() >= -1.0
        assert result.max() <= 1.0

    def test_not_constant(self) -> None:
        result = fbm_noise(32, 32, seed=7, config=NoiseConfig(frequency=0.1))
        assert result.std() > 0.01

    def test_zero_octaves(self) -> None:
        """No octaves gives an all-zero field."""
        result = fbm_noise(5, 4, seed=1, config=NoiseConfig(octaves=0))
        np.testing.assert_array_equal(result, np.zeros((4, 5)))


class TestEdgeFalloff:
    """Tests for the radial edge falloff."""

    def test_shape_and_range(self) -> None:
        falloff = edge_falloff(48, 32)
        assert falloff.shape == (32, 48)
        assert falloff.min() >= 0.0
        assert falloff.max() <= 1.0

    def test_center_is_one(self) -> None:
        falloff = edge_falloff(48, 32)
        assert falloff[16, 24] == 1.0

    def test_corner_is_zero(self) -> None:
        falloff = edge_falloff(48, 32)
        assert falloff[0, 0] == 0.0

    def test_decreases_toward_edge(self) -> None:
        falloff = edge_falloff(48, 32)
        row = falloff[16]
        assert row[24] > row[12] > row[0]


class TestNormalizeField:
    """Tests for min-max normalization."""

    def test_maps_to_unit_range(self) -> None:
        field = np.array([[1.0, 2.0], [3.0, 5.0]])
        result = normalize_field(field)
        np.testing.assert_allclose(result, [[0.0, 0.25], [0.5, 1.0]])

    def test_does_not_modify_input(self) -> None:
        field = np.array([[1.0, 3.0]])
        normalize_field(field)
        np.testing.assert_array_equal(field, [[1.0, 3.0]])

    def test_uniform_field_unscaled(self) -> None:
        """A flat field keeps its value instead of dividing by zero."""
        field = np.full((3, 4), 0.7)
        result = normalize_field(field)
        np.testing.assert_array_equal(result, field)
        assert not np.isnan(result).any()

    def test_empty_field(self) -> None:
        result = normalize_field(np.zeros((0, 0)))
        assert result.shape == (0, 0)
