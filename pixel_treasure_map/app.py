"""
pygame window loop for the treasure map viewer.

Translates pygame events into application events, runs them through
events.handle_event and carries out the returned effects.
"""

import logging
from pathlib import Path

import pygame
from pygame.locals import *

from .assets import Assets
from .config import FPS, WINDOW_CAPTION
from .events import (
    AppState,
    Draw,
    Export,
    Quit,
    Regenerate,
    Resize,
    SaveFrame,
    SetDisplayMode,
    Stop,
    ToggleFullscreen,
    handle_event,
)
from .renderer import TerrainRenderer
from .treasure_map import TreasureMap

logger = logging.getLogger(__name__)

KEY_EVENTS = {
    K_n: Regenerate,
    K_f: ToggleFullscreen,
    K_s: Export,
    K_ESCAPE: Quit,
}


def translate_event(event):
    """Application event for a pygame event, or None if it is not handled"""
    if event.type == QUIT:
        return Quit()
    if event.type == KEYDOWN and event.key in KEY_EVENTS:
        return KEY_EVENTS[event.key]()
    if event.type == VIDEORESIZE and event.w > 0 and event.h > 0:
        return Resize(event.w, event.h)
    return None


def save_frame(surface, out_dir, filename):
    path = Path(out_dir) / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(surface, str(path))
    logger.info("saved %s", path)
    return path


def render_headless(params, out_path, seed=None):
    """Render one map off-screen and save it to `out_path`"""
    params = params.validate()
    renderer = TerrainRenderer(Assets.load(params))
    treasure_map = TreasureMap.generate(params, seed=seed)

    surface = pygame.Surface(params.viewport)
    renderer.render(surface, treasure_map)

    out_path = Path(out_path)
    return save_frame(surface, out_path.parent, out_path.name), treasure_map


class TreasureMapViewer:
    """Interactive window showing one treasure map at a time"""

    def __init__(self, params, out_dir=".", seed=None):
        self.params = params.validate()
        self.out_dir = out_dir
        self.seed = seed
        self.screen = None
        self.renderer = None

    def set_mode(self, width, height, fullscreen):
        flags = FULLSCREEN if fullscreen else RESIZABLE
        self.screen = pygame.display.set_mode((width, height), flags)
        return self.screen

    def apply(self, state, effects):
        """Carry out effects; returns the state, updated if the window size changed"""
        for effect in effects:
            if isinstance(effect, Draw):
                # Resizable windows replace the display surface behind our back
                self.screen = pygame.display.get_surface()
                self.renderer.render(self.screen, state.treasure_map)
                pygame.display.flip()
            elif isinstance(effect, SaveFrame):
                save_frame(self.screen, self.out_dir, effect.filename)
            elif isinstance(effect, SetDisplayMode):
                self.set_mode(effect.width, effect.height, effect.fullscreen)
                # The new mode may not match the request (fullscreen picks the desktop size)
                width, height = self.screen.get_size()
                state, follow_up = handle_event(state, Resize(width, height))
                state = self.apply(state, follow_up or [Draw()])
            elif isinstance(effect, Stop):
                logger.debug("stopping")
        return state

    def run(self):
        pygame.init()
        try:
            self.set_mode(self.params.width, self.params.height, False)
            pygame.display.set_caption(WINDOW_CAPTION)

            self.renderer = TerrainRenderer(Assets.load(self.params))
            state = AppState.initial(self.params, seed=self.seed)
            state = self.apply(state, [Draw()])

            # Main loop
            clock = pygame.time.Clock()
            while state.running:
                for event in pygame.event.get():
                    app_event = translate_event(event)
                    if app_event is None:
                        continue
                    state, effects = handle_event(state, app_event, millis=pygame.time.get_ticks())
                    state = self.apply(state, effects)
                    if not state.running:
                        break
                clock.tick(FPS)
        finally:
            pygame.quit()
