"""Turning map coordinates into screen pixels, and drawing the wireframe."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from fdfview.parsing import HeightMap
from fdfview.raster import WINDOW_HEIGHT, WINDOW_WIDTH, Framebuffer, draw_line

ANGLE = 0.523599
"""Isometric angle, in radians, used by the interactive view."""

VIEW_WINDOW_WIDTH = 1700
"""Width of the interactive viewer's window."""

VIEW_WINDOW_HEIGHT = 1000
"""Height of the interactive viewer's window."""

_CLASSIC_ANGLE = 30 * math.pi / 180.0

Projector = Callable[[int, int, int], tuple[int, int]]


class ProjectionMode(Enum):
    """How the interactive view lays the map out."""

    PARALLEL = 0
    ISOMETRIC = 1


@dataclass
class View:
    """Camera state of the interactive viewer."""

    rotation_x: int = 1
    rotation_y: int = 1
    rotation_z: int = 1
    x_offset: int = 0
    y_offset: int = 0
    zoom: int = 20
    mode: ProjectionMode = ProjectionMode.ISOMETRIC
    auto_rotate: bool = False


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle from degrees to radians."""
    return degrees * math.pi / 180.0


def rotate_x(y: float, z: float, angle: float) -> tuple[float, float]:
    """Rotate about the x axis; return the new ``(y, z)``."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return y * cos_a - z * sin_a, y * sin_a + z * cos_a


def rotate_y(x: float, z: float, angle: float) -> tuple[float, float]:
    """Rotate about the y axis; return the new ``(x, z)``."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return z * sin_a + x * cos_a, z * cos_a - x * sin_a


def rotate_z(x: float, y: float, angle: float) -> tuple[float, float]:
    """Rotate about the z axis; return the new ``(x, y)``."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return x * cos_a - y * sin_a, x * sin_a + y * cos_a


def classic_scale(map_height: int) -> int:
    """Pixels per map unit in the fixed view, chosen by the map's row count."""
    if map_height > 250:
        return 1
    if map_height > 40:
        return 3
    return 20


def classic_project(
    x: int,
    y: int,
    z: int,
    map_height: int,
    width: int = WINDOW_WIDTH,
    height: int = WINDOW_HEIGHT,
) -> tuple[int, int]:
    """Fixed isometric projection, centred on a ``width`` x ``height`` window."""
    scale = classic_scale(map_height)
    px = int((x - y) * math.cos(_CLASSIC_ANGLE) * scale)
    py = int((x + y) * math.sin(_CLASSIC_ANGLE) * scale - z * scale)
    return px + width // 2, py + height // 2


def _iso_project(x: int, y: int, z: int, view: View) -> tuple[int, int]:
    rot_y, rot_z = rotate_x(float(y), float(z), degrees_to_radians(view.rotation_x))
    rot_x, rot_z = rotate_y(float(x), rot_z, degrees_to_radians(view.rotation_y))
    rot_x, rot_y = rotate_z(rot_x, rot_y, degrees_to_radians(view.rotation_z))
    px = int((rot_x - rot_y) * math.cos(ANGLE) * view.zoom + view.x_offset)
    py = int(((rot_x + rot_y) * math.sin(ANGLE) - rot_z) * view.zoom + view.y_offset)
    return px, py


def view_project(
    x: int,
    y: int,
    z: int,
    view: View,
    width: int = VIEW_WINDOW_WIDTH,
    height: int = VIEW_WINDOW_HEIGHT,
) -> tuple[int, int]:
    """Project a map point through ``view``, centred on the window."""
    if view.mode is ProjectionMode.ISOMETRIC:
        px, py = _iso_project(x, y, z, view)
    else:
        px = x * view.zoom + view.x_offset
        py = y * view.zoom + view.y_offset
    return px + width // 2, py + height // 2


def render(heightmap: HeightMap, buffer: Framebuffer, project: Projector) -> None:
    """Clear ``buffer`` and draw the map's wireframe through ``project``.

    Each point is joined to its right and lower neighbours in its own colour.
    """
    buffer.clear()
    for y in range(heightmap.height):
        for x in range(heightmap.width):
            point = heightmap.at(x, y)
            origin = project(x, y, point.height)
            if x + 1 < heightmap.width:
                right = project(x + 1, y, heightmap.at(x + 1, y).height)
                draw_line(buffer, origin, right, point.color)
            if y + 1 < heightmap.height:
                below = project(x, y + 1, heightmap.at(x, y + 1).height)
                draw_line(buffer, origin, below, point.color)