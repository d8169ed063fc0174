# Block-aligned random placement of the treasure marker

import logging
import math

from .config import CROSS_MARGIN_BLOCKS
from .errors import PlacementError

logger = logging.getLogger(__name__)


def snap_bounds(lo, hi, block_size):
    """Round `lo` up and `hi` down to multiples of `block_size`"""
    return math.ceil(lo / block_size) * block_size, math.floor(hi / block_size) * block_size


def snap_random(lo, hi, block_size, rng):
    """Random multiple of `block_size` inside [lo, hi]

    `rng` is a numpy Generator. Raises PlacementError if no multiple of
    `block_size` lies inside the bounds.
    """
    lo, hi = snap_bounds(lo, hi, block_size)
    if hi < lo:
        raise PlacementError(f"no {block_size}px aligned position between {lo} and {hi}")
    steps = (hi - lo) // block_size
    return lo + int(rng.integers(0, steps + 1)) * block_size


def marker_bounds(params):
    """((x_min, x_max), (y_min, y_max)) the marker must stay inside

    Keeps the marker clear of the side edges, below the title band and
    above the bottom edge.
    """
    margin = params.block_size * CROSS_MARGIN_BLOCKS
    x_range = (margin, params.width - margin)
    y_range = (params.height / 6 + margin, params.height - margin)
    return x_range, y_range


def place_marker(params, rng):
    """Pick the marker position for a map with viewport `params`

    A viewport too small for the margins puts the marker at its centre,
    snapped down to the block grid.
    """
    block_size = params.block_size
    (x_min, x_max), (y_min, y_max) = marker_bounds(params)
    try:
        x = snap_random(x_min, x_max, block_size, rng)
        y = snap_random(y_min, y_max, block_size, rng)
    except PlacementError as exc:
        x = (params.width // 2) // block_size * block_size
        y = (params.height // 2) // block_size * block_size
        logger.warning("viewport %dx%d too small for marker margins (%s), using centre (%d, %d)",
                       params.width, params.height, exc, x, y)
    return x, y
