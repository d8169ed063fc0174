"""Random pixelated treasure maps from Perlin noise, drawn with pygame."""

from .config import RenderParameters
from .errors import ConfigurationError, PixelTreasureMapError, PlacementError
from .grid import HeightGrid, build_height_grid
from .noise import PerlinNoise
from .placement import place_marker, snap_random
from .terrain import TERRAIN_BANDS, TERRAIN_COLORS, TerrainType, classify, terrain_color
from .treasure_map import TreasureMap

__all__ = [
    "ConfigurationError",
    "HeightGrid",
    "PerlinNoise",
    "PixelTreasureMapError",
    "PlacementError",
    "RenderParameters",
    "TERRAIN_BANDS",
    "TERRAIN_COLORS",
    "TerrainType",
    "TreasureMap",
    "build_height_grid",
    "classify",
    "place_marker",
    "snap_random",
    "terrain_color",
]
