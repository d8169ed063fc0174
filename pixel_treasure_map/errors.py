class PixelTreasureMapError(Exception):
    """Base class for all errors raised by pixel_treasure_map"""


class ConfigurationError(PixelTreasureMapError, ValueError):
    """Render parameters that cannot produce a map"""


class PlacementError(ConfigurationError):
    """No block-aligned position exists inside the requested bounds"""
