"""
Tests for block-aligned marker placement.
"""

import logging

import numpy as np
import pytest

from pixel_treasure_map.config import RenderParameters
from pixel_treasure_map.errors import ConfigurationError, PlacementError
from pixel_treasure_map.placement import marker_bounds, place_marker, snap_bounds, snap_random


class TestSnapRandom:
    """Bounded random snap helper."""

    def test_snap_bounds(self):
        assert snap_bounds(7, 23, 5) == (10, 20)
        assert snap_bounds(10, 20, 5) == (10, 20)
        assert snap_bounds(100.0, 525.5, 5) == (100, 525)

    @pytest.mark.parametrize("lo, hi, block_size", [
        (50, 750, 5),
        (3, 97, 10),
        (150.0, 550.0, 5),
        (0, 1, 1),
    ])
    def test_aligned_and_inside_bounds(self, lo, hi, block_size):
        rng = np.random.default_rng(123)
        lo_snapped, hi_snapped = snap_bounds(lo, hi, block_size)

        for _ in range(300):
            value = snap_random(lo, hi, block_size, rng)
            assert value % block_size == 0
            assert lo_snapped <= value <= hi_snapped

    def test_reaches_both_ends(self):
        rng = np.random.default_rng(0)
        values = {snap_random(0, 20, 5, rng) for _ in range(500)}
        assert values == {0, 5, 10, 15, 20}

    def test_single_point(self):
        rng = np.random.default_rng(0)
        assert snap_random(7, 13, 5, rng) == 10

    def test_empty_region_raises(self):
        rng = np.random.default_rng(0)
        with pytest.raises(PlacementError):
            snap_random(7, 9, 5, rng)
        with pytest.raises(ConfigurationError):
            snap_random(100, 10, 5, rng)


class TestPlaceMarker:
    """Marker position for a viewport."""

    def test_marker_bounds(self, default_params):
        (x_min, x_max), (y_min, y_max) = marker_bounds(default_params)
        assert (x_min, x_max) == (50, 750)
        assert (y_min, y_max) == (150, 550)

    def test_marker_inside_margins(self, default_params):
        rng = np.random.default_rng(42)
        for _ in range(100):
            x, y = place_marker(default_params, rng)
            assert x % 5 == 0 and y % 5 == 0
            assert 50 <= x <= 750
            assert 150 <= y <= 550

    def test_same_seed_same_marker(self, default_params):
        first = place_marker(default_params, np.random.default_rng(7))
        second = place_marker(default_params, np.random.default_rng(7))
        assert first == second

    def test_tiny_viewport_uses_centre(self, caplog):
        params = RenderParameters(width=60, height=40, block_size=5)
        with caplog.at_level(logging.WARNING, logger="pixel_treasure_map.placement"):
            position = place_marker(params, np.random.default_rng(0))

        assert position == (30, 20)
        assert "too small" in caplog.text
