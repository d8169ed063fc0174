import argparse
import logging
import sys

from .app import TreasureMapViewer, render_headless
from .config import (
    BLOCK_SIZE,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    NOISE_CONTRAST,
    NOISE_FALLOFF,
    NOISE_OCTAVES,
    NOISE_SCALE,
    RenderParameters,
)
from .errors import ConfigurationError


def seed_type(value):
    seed = int(value)
    if seed < 0:
        raise argparse.ArgumentTypeError(f"seed must be non-negative, got {seed}")
    return seed


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="pixel-treasure-map",
        description="Render a random pixelated treasure map from Perlin noise.",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Window height in pixels")
    parser.add_argument("--block-size", type=int, default=BLOCK_SIZE,
                        help="Edge length of one map block in pixels (below 5 is slow)")
    parser.add_argument("--noise-scale", type=float, default=NOISE_SCALE,
                        help="Noise frequency per pixel (smaller zooms in)")
    parser.add_argument("--octaves", type=int, default=NOISE_OCTAVES, help="Noise octaves")
    parser.add_argument("--falloff", type=float, default=NOISE_FALLOFF,
                        help="Amplitude factor between octaves")
    parser.add_argument("--contrast", type=float, default=NOISE_CONTRAST,
                        help="Height spread around sea level (higher: more water and stone)")
    parser.add_argument("--seed", type=seed_type, default=None,
                        help="Seed for the first map (default: from the clock)")
    parser.add_argument("--font", default=None, help="TTF font file (default: pygame font)")
    parser.add_argument("--texture", default=None,
                        help="Paper texture image (default: generated parchment)")
    parser.add_argument("--out-dir", default=".", help="Directory for frames saved with 's'")
    parser.add_argument("--headless", metavar="PATH", default=None,
                        help="Render one map to PATH without opening a window")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser, parser.parse_args(argv)


def main(argv=None):
    parser, args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    params = RenderParameters(
        width=args.width,
        height=args.height,
        block_size=args.block_size,
        noise_scale=args.noise_scale,
        noise_octaves=args.octaves,
        noise_falloff=args.falloff,
        noise_contrast=args.contrast,
        font_path=args.font,
        texture_path=args.texture,
    )
    try:
        params.validate()
    except ConfigurationError as exc:
        parser.error(str(exc))
    params.warn_if_slow()

    if args.headless:
        path, treasure_map = render_headless(params, args.headless, seed=args.seed)
        print(f"wrote {path} (seed {treasure_map.seed})")
        return 0

    print("=== Pixel Treasure Map ===")
    print("\nControls:")
    print("N - Generate a new map")
    print("F - Toggle fullscreen")
    print("S - Save the map as an image")
    print("ESC - Exit")

    TreasureMapViewer(params, out_dir=args.out_dir, seed=args.seed).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
