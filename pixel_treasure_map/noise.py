# Perlin noise for terrain heights
# Works on plain floats or whole numpy coordinate arrays.

import itertools
import time

import numpy as np

from .config import NOISE_CONTRAST, NOISE_FALLOFF, NOISE_OCTAVES

# Keeps seeds distinct when the clock has not ticked between two calls
_calls = itertools.count()


def time_seed():
    """Seed derived from the wall clock, different on every call"""
    return time.time_ns() + next(_calls)


class PerlinNoise:
    """Seedable 2D Perlin noise"""

    def __init__(self, seed=0):
        self.seed = seed

        # Create permutation table based on seed
        rng = np.random.default_rng(seed)
        self.perm = rng.permutation(256)
        self.perm = np.concatenate([self.perm, self.perm])  # Duplicate for wraparound

    def fade(self, t):
        """Fade function for smooth interpolation (6t^5 - 15t^4 + 10t^3)"""
        return t * t * t * (t * (t * 6 - 15) + 10)

    def lerp(self, t, a, b):
        """Linear interpolation"""
        return a + t * (b - a)

    def grad(self, hash_val, x, y):
        """Dot product with one of the four diagonal gradients"""
        h = hash_val & 3
        u = np.where((h & 1) == 0, x, -x)
        v = np.where((h & 2) == 0, y, -y)
        return u + v

    def noise(self, x, y):
        """Single octave of 2D Perlin noise at (x, y), in [-1, 1]"""
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)

        # Find unit square containing point
        x0 = np.floor(x)
        y0 = np.floor(y)
        X = x0.astype(int) & 255
        Y = y0.astype(int) & 255

        # Relative position within square
        x = x - x0
        y = y - y0

        # Compute fade curves
        u = self.fade(x)
        v = self.fade(y)

        # Hash coordinates of square corners
        perm = self.perm
        A = perm[X] + Y
        AA = perm[A]
        AB = perm[A + 1]
        B = perm[X + 1] + Y
        BA = perm[B]
        BB = perm[B + 1]

        # Blend results from 4 corners
        return self.lerp(v,
                         self.lerp(u, self.grad(perm[AA], x, y),
                                   self.grad(perm[BA], x - 1, y)),
                         self.lerp(u, self.grad(perm[AB], x, y - 1),
                                   self.grad(perm[BB], x - 1, y - 1)))

    def sample(self, x, y, octaves=NOISE_OCTAVES, falloff=NOISE_FALLOFF, contrast=NOISE_CONTRAST):
        """Fractional Brownian motion over `octaves` layers, in [0, 1]

        Every octave doubles the frequency and scales the amplitude by
        `falloff`. Summed Perlin octaves rarely leave [0.23, 0.79], so the
        result is stretched around 0.5 by `contrast` and clipped.
        Scalars in give a float out, arrays give an array of the same shape.
        """
        amplitude = 1.0
        frequency = 1.0
        max_value = 0.0
        height_value = 0.0

        for octave in range(octaves):
            height_value = height_value + self.noise(x * frequency, y * frequency) * amplitude
            max_value += amplitude
            amplitude *= falloff
            frequency *= 2.0

        # Normalize to [0, 1]
        normalized = (height_value / max_value + 1) / 2
        result = np.clip(0.5 + (normalized - 0.5) * contrast, 0.0, 1.0)
        if np.ndim(result) == 0:
            return float(result)
        return result
