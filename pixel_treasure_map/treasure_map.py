from dataclasses import dataclass

import numpy as np

from .grid import HeightGrid, build_height_grid
from .noise import time_seed
from .placement import place_marker

# Offset for the marker's random stream so it does not reuse the noise permutation draw
MARKER_SEED_OFFSET = 1


@dataclass(frozen=True, eq=False)
class TreasureMap:
    """One generated map: its height grid and where the treasure is"""

    grid: HeightGrid
    marker: tuple

    @property
    def seed(self):
        return self.grid.seed

    @classmethod
    def generate(cls, params, seed=None):
        """Build a new map for `params`, from a clock seed unless one is given"""
        if seed is None:
            seed = time_seed()
        grid = build_height_grid(params, seed=seed)
        marker = place_marker(params, np.random.default_rng(seed + MARKER_SEED_OFFSET))
        return cls(grid=grid, marker=marker)
