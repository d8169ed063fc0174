# Pixel Treasure Map - default configuration

import logging
from dataclasses import dataclass, replace

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# You can adjust the colors to your preference
COLOR_DEEP_WATER = (0x00, 0x8D, 0xC4)
COLOR_SHALLOW_WATER = (0x00, 0xA9, 0xCC)
COLOR_SAND = (0xEE, 0xCD, 0xA3)
COLOR_LIGHT_GRASS = (0xC2, 0xD5, 0x8D)
COLOR_DARK_GRASS = (0x79, 0xBD, 0x4F)
COLOR_TREES = (0x61, 0x87, 0x49)
COLOR_STONE = (0x73, 0x6C, 0x6C)
COLOR_FALLBACK = (0xFF, 0xFF, 0xFF)
COLOR_CROSS = (0xDF, 0x00, 0x00)
COLOR_TITLE = (0x16, 0x08, 0x00)

# Block size is the resolution, noise scale the zoom.
# Block sizes below 5 take noticeably longer to render.
BLOCK_SIZE = 5
SLOW_BLOCK_SIZE = 5
NOISE_SCALE = 1 / 150
NOISE_OCTAVES = 5
NOISE_FALLOFF = 0.5
# Stretch of the fBm around 0.5 so heights spread over roughly [0.1, 0.93]
# and every terrain band shows up
NOISE_CONTRAST = 1.5

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

# Overlays
TITLE_TEXT = "pixel TREASURE  MAP"
TITLE_SIZE = 50
TITLE_ANGLE = 2
CROSS_GLYPH = "x"
CROSS_SIZE = 40
# Marker margins in blocks
CROSS_MARGIN_BLOCKS = 10

TEXTURE_ALPHA = 75

EXPORT_PREFIX = "PixelTreasureMap_"
EXPORT_SUFFIX = ".jpg"

WINDOW_CAPTION = "Pixel Treasure Map"
FPS = 30


@dataclass(frozen=True)
class RenderParameters:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    block_size: int = BLOCK_SIZE
    noise_scale: float = NOISE_SCALE
    noise_octaves: int = NOISE_OCTAVES
    noise_falloff: float = NOISE_FALLOFF
    noise_contrast: float = NOISE_CONTRAST
    font_path: str = None
    texture_path: str = None

    def validate(self):
        """Raise ConfigurationError if the parameters cannot produce a map"""
        if self.block_size < 1:
            raise ConfigurationError(f"block size must be >= 1, got {self.block_size}")
        if self.width < 1 or self.height < 1:
            raise ConfigurationError(
                f"viewport must be at least 1x1, got {self.width}x{self.height}"
            )
        if self.noise_scale <= 0:
            raise ConfigurationError(f"noise scale must be positive, got {self.noise_scale}")
        if self.noise_octaves < 1:
            raise ConfigurationError(f"noise octaves must be >= 1, got {self.noise_octaves}")
        if not 0 < self.noise_falloff <= 1:
            raise ConfigurationError(
                f"noise falloff must be in (0, 1], got {self.noise_falloff}"
            )
        if self.noise_contrast <= 0:
            raise ConfigurationError(f"noise contrast must be positive, got {self.noise_contrast}")
        return self

    def warn_if_slow(self):
        """Warn about block sizes that make rendering slow"""
        if self.block_size < SLOW_BLOCK_SIZE:
            logger.warning("block size %d will be slow to render", self.block_size)
            return True
        return False

    def resized(self, width, height):
        return replace(self, width=width, height=height)

    @property
    def viewport(self):
        return (self.width, self.height)
