"""
Application events and their handlers.

Handlers are plain functions: they take the current AppState and an event
and return the next AppState together with a list of effects for the
window loop to carry out (draw, save a file, change the display mode,
stop). They never touch pygame themselves.
"""

import logging
from dataclasses import dataclass, replace

from .config import EXPORT_PREFIX, EXPORT_SUFFIX, RenderParameters
from .treasure_map import TreasureMap

logger = logging.getLogger(__name__)


# --- Events ---

@dataclass(frozen=True)
class Regenerate:
    pass


@dataclass(frozen=True)
class ToggleFullscreen:
    pass


@dataclass(frozen=True)
class Export:
    pass


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Quit:
    pass


# --- Effects ---

@dataclass(frozen=True)
class Draw:
    pass


@dataclass(frozen=True)
class SaveFrame:
    filename: str


@dataclass(frozen=True)
class SetDisplayMode:
    width: int
    height: int
    fullscreen: bool


@dataclass(frozen=True)
class Stop:
    pass


@dataclass(frozen=True)
class AppState:
    params: RenderParameters
    treasure_map: TreasureMap
    fullscreen: bool = False
    # Window size to go back to when leaving fullscreen
    windowed_size: tuple = None
    running: bool = True

    @classmethod
    def initial(cls, params, seed=None):
        params = params.validate()
        return cls(params=params, treasure_map=TreasureMap.generate(params, seed=seed),
                   windowed_size=params.viewport)


def export_filename(millis):
    return f"{EXPORT_PREFIX}{int(millis)}{EXPORT_SUFFIX}"


def _regenerate(state, event, seed, millis):
    logger.info("generating new map")
    new_map = TreasureMap.generate(state.params, seed=seed)
    return replace(state, treasure_map=new_map), [Draw()]


def _toggle_fullscreen(state, event, seed, millis):
    fullscreen = not state.fullscreen
    if fullscreen:
        # (0, 0) asks pygame for the desktop resolution
        mode = SetDisplayMode(0, 0, True)
        new_state = replace(state, fullscreen=True, windowed_size=state.params.viewport)
    else:
        width, height = state.windowed_size or state.params.viewport
        mode = SetDisplayMode(width, height, False)
        new_state = replace(state, fullscreen=False)
    return new_state, [mode]


def _export(state, event, seed, millis):
    return state, [SaveFrame(export_filename(millis))]


def _resize(state, event, seed, millis):
    if (event.width, event.height) == state.params.viewport:
        return state, []
    params = state.params.resized(event.width, event.height).validate()
    logger.info("viewport resized to %dx%d", event.width, event.height)
    new_map = TreasureMap.generate(params, seed=seed)
    return replace(state, params=params, treasure_map=new_map), [Draw()]


def _quit(state, event, seed, millis):
    return replace(state, running=False), [Stop()]


_HANDLERS = {
    Regenerate: _regenerate,
    ToggleFullscreen: _toggle_fullscreen,
    Export: _export,
    Resize: _resize,
    Quit: _quit,
}


def handle_event(state, event, seed=None, millis=0):
    """Return (new_state, effects) for `event`

    `seed` feeds any map generated by the event (None: clock seed) and
    `millis` is the time since startup used to name exported frames.
    """
    try:
        handler = _HANDLERS[type(event)]
    except KeyError:
        raise TypeError(f"unknown event {event!r}") from None
    return handler(state, event, seed, millis)
