import logging
import time

import pygame

from .config import (
    COLOR_CROSS,
    COLOR_TITLE,
    CROSS_GLYPH,
    TEXTURE_ALPHA,
    TITLE_ANGLE,
    TITLE_TEXT,
)
from .terrain import color_grid

logger = logging.getLogger(__name__)


class TerrainRenderer:
    """Paints a TreasureMap onto a pygame surface"""

    def __init__(self, assets):
        self.assets = assets
        self._scaled_texture = None

    def render(self, surface, treasure_map):
        """Draw terrain blocks, the marker, the title and the paper texture"""
        ts = time.perf_counter()

        self.draw_terrain(surface, treasure_map.grid)

        # Draw overlays
        self.draw_cross(surface, treasure_map.marker)
        self.draw_title(surface)

        # Blend paper texture
        self.blend_texture(surface)

        logger.info("render(): %dms", (time.perf_counter() - ts) * 1000)

    def draw_terrain(self, surface, grid):
        block_size = grid.block_size
        colors = color_grid(grid.heights)

        for column in range(grid.columns):
            for row in range(grid.rows):
                color = tuple(int(c) for c in colors[column, row])
                pygame.draw.rect(surface, color,
                                 (column * block_size, row * block_size, block_size, block_size))

    def draw_cross(self, surface, position):
        """Treasure "x", centred on x with its bottom edge on y"""
        text_surface = self.assets.cross_font.render(CROSS_GLYPH, True, COLOR_CROSS)
        surface.blit(text_surface, text_surface.get_rect(midbottom=position))

    def draw_title(self, surface):
        width, height = surface.get_size()
        text_surface = self.assets.title_font.render(TITLE_TEXT, True, COLOR_TITLE)
        text_surface = pygame.transform.rotate(text_surface, TITLE_ANGLE)
        surface.blit(text_surface, text_surface.get_rect(center=(width // 2, height // 6)))

    def blend_texture(self, surface):
        size = surface.get_size()
        if self._scaled_texture is None or self._scaled_texture.get_size() != size:
            texture = self.assets.texture
            # smoothscale only handles 24 and 32 bit surfaces
            scale = pygame.transform.smoothscale if texture.get_bitsize() in (24, 32) else pygame.transform.scale
            self._scaled_texture = scale(texture, size)
            self._scaled_texture.set_alpha(TEXTURE_ALPHA)
        surface.blit(self._scaled_texture, (0, 0))
