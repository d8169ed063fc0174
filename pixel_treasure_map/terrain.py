# Terrain classification: height -> terrain type -> color

from enum import Enum

import numpy as np

from . import config


class TerrainType(Enum):
    DEEP_WATER = "deep_water"
    SHALLOW_WATER = "shallow_water"
    SAND = "sand"
    LIGHT_GRASS = "light_grass"
    DARK_GRASS = "dark_grass"
    TREES = "trees"
    STONE = "stone"
    FALLBACK = "fallback"


# (exclusive upper bound, terrain), ascending
TERRAIN_BANDS = (
    (0.30, TerrainType.DEEP_WATER),
    (0.40, TerrainType.SHALLOW_WATER),
    (0.45, TerrainType.SAND),
    (0.50, TerrainType.LIGHT_GRASS),
    (0.65, TerrainType.DARK_GRASS),
    (0.75, TerrainType.TREES),
    (1.00, TerrainType.STONE),
)

TERRAIN_COLORS = {
    TerrainType.DEEP_WATER: config.COLOR_DEEP_WATER,
    TerrainType.SHALLOW_WATER: config.COLOR_SHALLOW_WATER,
    TerrainType.SAND: config.COLOR_SAND,
    TerrainType.LIGHT_GRASS: config.COLOR_LIGHT_GRASS,
    TerrainType.DARK_GRASS: config.COLOR_DARK_GRASS,
    TerrainType.TREES: config.COLOR_TREES,
    TerrainType.STONE: config.COLOR_STONE,
    TerrainType.FALLBACK: config.COLOR_FALLBACK,
}


def validate_bands(bands):
    """Check that bands ascend strictly and end at 1.0"""
    if not bands:
        raise ValueError("terrain band table is empty")
    bounds = [upper for upper, _ in bands]
    if bounds[0] <= 0.0:
        raise ValueError(f"first band must cover heights above 0, got upper bound {bounds[0]}")
    for lower, upper in zip(bounds, bounds[1:]):
        if upper <= lower:
            raise ValueError(f"band bounds must ascend strictly, got {lower} then {upper}")
    if bounds[-1] != 1.0:
        raise ValueError(f"last band must end at 1.0, got {bounds[-1]}")
    return bands


validate_bands(TERRAIN_BANDS)


def classify(height, bands=TERRAIN_BANDS):
    """Return the terrain of the first band whose upper bound exceeds `height`"""
    for upper, terrain in bands:
        if height < upper:
            return terrain
    return TerrainType.FALLBACK


def terrain_color(height, bands=TERRAIN_BANDS):
    return TERRAIN_COLORS[classify(height, bands)]


def classify_grid(heights, bands=TERRAIN_BANDS):
    """Band index for every height; len(bands) marks the fallback

    Same strict "<" ladder as classify(), done with one searchsorted.
    """
    bounds = np.array([upper for upper, _ in bands])
    return np.searchsorted(bounds, heights, side="right")


def color_grid(heights, bands=TERRAIN_BANDS):
    """RGB array of shape heights.shape + (3,)"""
    palette = np.array(
        [TERRAIN_COLORS[terrain] for _, terrain in bands] + [TERRAIN_COLORS[TerrainType.FALLBACK]],
        dtype=np.uint8,
    )
    return palette[classify_grid(heights, bands)]
