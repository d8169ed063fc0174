"""
Fonts and the paper texture, loaded once at startup.

A missing font or texture file is fatal: pygame's FileNotFoundError or
pygame.error propagates to the caller. Without a font path pygame's default
font is used; without a texture path a parchment texture is generated.
"""

import logging
from dataclasses import dataclass

import numpy as np
import pygame

from .config import CROSS_SIZE, TITLE_SIZE
from .noise import PerlinNoise

logger = logging.getLogger(__name__)

TEXTURE_SIZE = 512
TEXTURE_SEED = 1337
PAPER_LIGHT = np.array([236, 214, 170], dtype=float)
PAPER_DARK = np.array([120, 84, 44], dtype=float)


def parchment_texture(size=TEXTURE_SIZE, seed=TEXTURE_SEED):
    """Aged paper: blotchy noise with a darkened vignette, as a pygame Surface"""
    noise = PerlinNoise(seed)
    rng = np.random.default_rng(seed)

    coords = np.arange(size) / size
    xs, ys = np.meshgrid(coords, coords, indexing="xy")
    blotches = noise.sample(xs * 6.0, ys * 6.0, octaves=4, falloff=0.55)
    grain = rng.random((size, size)) * 0.08

    # Radial vignette, 0 in the middle to 1 in the corners
    dist = np.hypot(xs - 0.5, ys - 0.5) / np.hypot(0.5, 0.5)
    vignette = np.clip(dist, 0.0, 1.0) ** 2

    darkness = np.clip(0.35 * (1 - blotches) + grain + 0.75 * vignette, 0.0, 1.0)
    rgb = PAPER_LIGHT + (PAPER_DARK - PAPER_LIGHT) * darkness[..., None]
    rgb = np.ascontiguousarray(rgb, dtype=np.uint8)
    return pygame.image.frombuffer(rgb.tobytes(), (size, size), "RGB").copy()


@dataclass(frozen=True)
class Assets:
    title_font: pygame.font.Font
    cross_font: pygame.font.Font
    texture: pygame.Surface

    @classmethod
    def load(cls, params):
        if not pygame.font.get_init():
            pygame.font.init()

        title_font = pygame.font.Font(params.font_path, TITLE_SIZE)
        cross_font = pygame.font.Font(params.font_path, CROSS_SIZE)

        if params.texture_path:
            texture = pygame.image.load(params.texture_path)
            logger.info("loaded texture %s", params.texture_path)
        else:
            texture = parchment_texture()
            logger.debug("using generated parchment texture")
        return cls(title_font=title_font, cross_font=cross_font, texture=texture)
