"""
Tests for height -> terrain classification.
"""

import numpy as np
import pytest

from pixel_treasure_map import config
from pixel_treasure_map.terrain import (
    TERRAIN_BANDS,
    TERRAIN_COLORS,
    TerrainType,
    classify,
    classify_grid,
    color_grid,
    terrain_color,
    validate_bands,
)


class TestClassify:
    """Threshold ladder behaviour."""

    @pytest.mark.parametrize("height", [0.0, 0.1, 0.2999, np.nextafter(0.3, 0)])
    def test_low_heights_are_deep_water(self, height):
        assert classify(height) is TerrainType.DEEP_WATER

    def test_boundary_goes_to_upper_band(self):
        assert classify(0.3) is TerrainType.SHALLOW_WATER
        assert classify(0.45) is TerrainType.LIGHT_GRASS
        assert classify(0.75) is TerrainType.STONE

    @pytest.mark.parametrize("height, terrain", [
        (0.35, TerrainType.SHALLOW_WATER),
        (0.42, TerrainType.SAND),
        (0.48, TerrainType.LIGHT_GRASS),
        (0.6, TerrainType.DARK_GRASS),
        (0.7, TerrainType.TREES),
        (0.99, TerrainType.STONE),
    ])
    def test_default_ladder(self, height, terrain):
        assert classify(height) is terrain

    def test_one_and_above_fall_back(self):
        assert classify(1.0) is TerrainType.FALLBACK
        assert classify(1.5) is TerrainType.FALLBACK
        assert terrain_color(1.0) == config.COLOR_FALLBACK

    def test_colors(self):
        assert terrain_color(0.1) == config.COLOR_DEEP_WATER
        assert terrain_color(0.8) == config.COLOR_STONE
        assert set(TERRAIN_COLORS) == set(TerrainType)


class TestBandTable:
    """Band table invariants."""

    def test_default_bands_are_valid(self):
        assert validate_bands(TERRAIN_BANDS) is TERRAIN_BANDS

    def test_bands_cover_unit_interval_once(self):
        heights = np.linspace(0.0, 1.0, 10001, endpoint=False)
        for height in heights:
            matches = []
            lower = 0.0
            for upper, terrain in TERRAIN_BANDS:
                if lower <= height < upper:
                    matches.append(terrain)
                lower = upper
            assert len(matches) == 1
            assert classify(height) is matches[0]

    def test_rejects_unsorted_bands(self):
        with pytest.raises(ValueError):
            validate_bands(((0.5, TerrainType.SAND), (0.4, TerrainType.TREES), (1.0, TerrainType.STONE)))

    def test_rejects_short_table(self):
        with pytest.raises(ValueError):
            validate_bands(((0.5, TerrainType.SAND),))

    def test_rejects_empty_table(self):
        with pytest.raises(ValueError):
            validate_bands(())


class TestGridClassification:
    """Vectorised classification agrees with the scalar ladder."""

    def test_matches_scalar_classify(self):
        rng = np.random.default_rng(7)
        heights = np.concatenate([rng.random(500), [0.0, 0.3, 0.4, 0.45, 0.5, 0.65, 0.75, 1.0]])
        indexes = classify_grid(heights)
        terrains = [terrain for _, terrain in TERRAIN_BANDS] + [TerrainType.FALLBACK]

        for height, index in zip(heights, indexes):
            assert terrains[index] is classify(height)

    def test_color_grid_shape_and_values(self):
        heights = np.array([[0.1, 0.6], [0.3, 1.0]])
        colors = color_grid(heights)

        assert colors.shape == (2, 2, 3)
        assert colors.dtype == np.uint8
        assert tuple(colors[0, 0]) == config.COLOR_DEEP_WATER
        assert tuple(colors[0, 1]) == config.COLOR_DARK_GRASS
        assert tuple(colors[1, 0]) == config.COLOR_SHALLOW_WATER
        assert tuple(colors[1, 1]) == config.COLOR_FALLBACK
