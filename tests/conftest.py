import os

# Headless pygame, must be set before pygame is imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from pixel_treasure_map.config import RenderParameters


@pytest.fixture
def small_params():
    """Small viewport that still fits the marker margins."""
    return RenderParameters(width=200, height=150, block_size=5)


@pytest.fixture
def default_params():
    return RenderParameters(width=800, height=600, block_size=5, noise_scale=1 / 150)


@pytest.fixture
def pygame_fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def display():
    pygame.display.init()
    yield
    pygame.display.quit()
