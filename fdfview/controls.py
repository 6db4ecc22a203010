"""Keyboard handling for the interactive viewer."""

from __future__ import annotations

from enum import Enum, IntEnum

from fdfview.projection import ProjectionMode, View

ROTATION_STEP = 3
"""Degrees added to or taken from an angle per rotation key press."""

MOVE_STEP = 10
"""Pixels the picture shifts per arrow key press."""

MIN_ZOOM = 1
"""Zoom never drops below this many pixels per map unit."""


class Key(IntEnum):
    """Key codes the viewer reacts to."""

    A = 0
    S = 1
    D = 2
    Q = 12
    W = 13
    E = 14
    R = 15
    I = 34  # noqa: E741
    P = 35
    ESC = 53
    PLUS = 69
    MINUS = 78
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


class Action(Enum):
    """What the viewer should do after a key press."""

    REDRAW = "redraw"
    QUIT = "quit"


def handle_projection(key: int | None, view: View) -> None:
    """Switch between parallel (P) and isometric (I) projection."""
    if key == Key.P:
        view.mode = ProjectionMode.PARALLEL
    elif key == Key.I:
        view.mode = ProjectionMode.ISOMETRIC


def handle_rotation(key: int | None, view: View) -> None:
    """Turn the map about its axes: W/S for x, A/D for y, Q/E for z."""
    if key == Key.W:
        view.rotation_x -= ROTATION_STEP
    elif key == Key.S:
        view.rotation_x += ROTATION_STEP
    elif key == Key.A:
        view.rotation_y -= ROTATION_STEP
    elif key == Key.D:
        view.rotation_y += ROTATION_STEP
    elif key == Key.Q:
        view.rotation_z -= ROTATION_STEP
    elif key == Key.E:
        view.rotation_z += ROTATION_STEP


def handle_zoom(key: int | None, view: View) -> None:
    """Zoom in on plus and out on minus, never below MIN_ZOOM."""
    if key == Key.PLUS:
        view.zoom += 1
    elif key == Key.MINUS:
        view.zoom -= 1
    view.zoom = max(view.zoom, MIN_ZOOM)


def handle_moves(key: int | None, view: View) -> None:
    """Shift the picture with the arrow keys."""
    if key == Key.LEFT:
        view.x_offset -= MOVE_STEP
    elif key == Key.RIGHT:
        view.x_offset += MOVE_STEP
    elif key == Key.DOWN:
        view.y_offset += MOVE_STEP
    elif key == Key.UP:
        view.y_offset -= MOVE_STEP


def handle_keypress(key: int | None, view: View) -> Action:
    """Apply one key press to ``view`` and say what should follow.

    Escape asks to quit and leaves the view untouched; R toggles the
    automatic rotation; every other key is offered to each handler.
    """
    if key == Key.ESC:
        return Action.QUIT
    if key == Key.R:
        view.auto_rotate = not view.auto_rotate
    handle_projection(key, view)
    handle_rotation(key, view)
    handle_zoom(key, view)
    handle_moves(key, view)
    return Action.REDRAW


def auto_rotate(view: View) -> bool:
    """Advance every angle by one degree when auto-rotation is on.

    Returns whether the view changed and needs redrawing.
    """
    if not view.auto_rotate:
        return False
    view.rotation_x += 1
    view.rotation_y += 1
    view.rotation_z += 1
    return True