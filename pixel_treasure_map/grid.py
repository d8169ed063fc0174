"""
Height grid construction.

The viewport is split into square blocks of ``block_size`` pixels and the
noise field is sampled once at each block's top-left pixel, scaled by
``noise_scale``. The result is indexed ``[column, row]``, so the cell at
pixel origin (x, y) lives at ``heights[x // block_size, y // block_size]``.
"""

import logging
import time
from dataclasses import dataclass

import numpy as np

from .noise import PerlinNoise, time_seed

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class HeightGrid:
    """Read-only block heights for one generated map"""

    heights: np.ndarray
    block_size: int
    noise_scale: float
    seed: int

    @property
    def columns(self):
        return self.heights.shape[0]

    @property
    def rows(self):
        return self.heights.shape[1]

    @property
    def shape(self):
        return self.heights.shape

    def at(self, column, row):
        return float(self.heights[column, row])

    def cells(self):
        """Yield (x, y, height) for every block, column by column"""
        block_size = self.block_size
        for column in range(self.columns):
            for row in range(self.rows):
                yield column * block_size, row * block_size, float(self.heights[column, row])

    def same_heights(self, other):
        return self.shape == other.shape and bool(np.array_equal(self.heights, other.heights))


def build_height_grid(params, seed=None):
    """Sample a fresh noise field over the viewport of `params`

    A new noise source is created for every build. Without an explicit
    seed one is taken from the clock, so repeated builds differ while a
    fixed seed always reproduces the same grid.
    """
    ts = time.perf_counter()
    params.validate()

    if seed is None:
        seed = time_seed()
    noise = PerlinNoise(seed)

    # Loop through all pixels (considering block size)
    xs = np.arange(0, params.width, params.block_size)
    ys = np.arange(0, params.height, params.block_size)
    grid_x, grid_y = np.meshgrid(xs * params.noise_scale, ys * params.noise_scale, indexing="ij")

    heights = np.asarray(
        noise.sample(grid_x, grid_y, params.noise_octaves, params.noise_falloff,
                     params.noise_contrast),
        dtype=float,
    )
    heights.setflags(write=False)

    logger.info("build_height_grid(): %dx%d cells in %dms (seed=%d)",
                heights.shape[0], heights.shape[1],
                (time.perf_counter() - ts) * 1000, seed)
    return HeightGrid(heights=heights, block_size=params.block_size,
                      noise_scale=params.noise_scale, seed=seed)
