"""Command-line entry point: open a map file and show it in a window."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from functools import partial

import pygame

from fdfview.controls import Action, Key, auto_rotate, handle_keypress
from fdfview.parsing import HeightMap, load_map
from fdfview.projection import (
    VIEW_WINDOW_HEIGHT,
    VIEW_WINDOW_WIDTH,
    View,
    classic_project,
    render,
    view_project,
)
from fdfview.raster import WINDOW_HEIGHT, WINDOW_WIDTH, Framebuffer

MAP_SUFFIX = ".fdf"
CLASSIC_FLAG = "--classic"
_TITLE = "FDF"
_FRAME_RATE = 60

_PYGAME_KEYS = {
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_q: Key.Q,
    pygame.K_w: Key.W,
    pygame.K_e: Key.E,
    pygame.K_r: Key.R,
    pygame.K_i: Key.I,
    pygame.K_p: Key.P,
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_PLUS: Key.PLUS,
    pygame.K_EQUALS: Key.PLUS,
    pygame.K_KP_PLUS: Key.PLUS,
    pygame.K_MINUS: Key.MINUS,
    pygame.K_KP_MINUS: Key.MINUS,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_UP: Key.UP,
}


def is_map_filename(path: str) -> bool:
    """True if ``path`` has a name before a ``.fdf`` suffix."""
    return len(path) > len(MAP_SUFFIX) and path.endswith(MAP_SUFFIX)


def _to_surface(buffer: Framebuffer) -> pygame.Surface:
    data = bytearray(buffer.to_bytes())
    data[0::4], data[2::4] = data[2::4], data[0::4]
    return pygame.image.frombuffer(bytes(data), (buffer.width, buffer.height), "RGBX")


def _show(screen: pygame.Surface, heightmap: HeightMap, buffer: Framebuffer, project) -> None:
    render(heightmap, buffer, project)
    screen.blit(_to_surface(buffer), (0, 0))
    pygame.display.flip()


def _run_classic(heightmap: HeightMap) -> None:
    buffer = Framebuffer(WINDOW_WIDTH, WINDOW_HEIGHT)
    project = partial(classic_project, map_height=heightmap.height)
    screen = pygame.display.set_mode((buffer.width, buffer.height))
    pygame.display.set_caption(_TITLE)
    _show(screen, heightmap, buffer, project)
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return
        if event.type == pygame.KEYDOWN:
            if _PYGAME_KEYS.get(event.key) == Key.ESC:
                return
            _show(screen, heightmap, buffer, project)


def _run_interactive(heightmap: HeightMap) -> None:
    view = View()
    buffer = Framebuffer(VIEW_WINDOW_WIDTH, VIEW_WINDOW_HEIGHT)
    project = partial(view_project, view=view)
    screen = pygame.display.set_mode((buffer.width, buffer.height))
    pygame.display.set_caption(_TITLE)
    clock = pygame.time.Clock()
    _show(screen, heightmap, buffer, project)
    while True:
        redraw = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN:
                if handle_keypress(_PYGAME_KEYS.get(event.key), view) is Action.QUIT:
                    return
                redraw = True
        if auto_rotate(view):
            redraw = True
        if redraw:
            _show(screen, heightmap, buffer, project)
        clock.tick(_FRAME_RATE)


def main(argv: Sequence[str] | None = None) -> int:
    """Show the map named on the command line; return the exit status.

    ``--classic`` before the file name selects the fixed isometric view;
    otherwise the interactive viewer opens.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    classic = bool(args) and args[0] == CLASSIC_FLAG
    if classic:
        args = args[1:]
    if len(args) != 1 or not is_map_filename(args[0]):
        return 1
    try:
        heightmap = load_map(args[0])
    except OSError:
        return 1
    pygame.init()
    try:
        if classic:
            _run_classic(heightmap)
        else:
            _run_interactive(heightmap)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())