"""A 32-bit pixel buffer and Bresenham line drawing."""

from __future__ import annotations

import sys
from array import array
from collections.abc import Iterator
from dataclasses import dataclass, field

WINDOW_WIDTH = 2100
"""Default width of the drawing surface, in pixels."""

WINDOW_HEIGHT = 1300
"""Default height of the drawing surface, in pixels."""

BYTES_PER_PIXEL = 4
_UINT32_MASK = 0xFFFFFFFF

Pixel = tuple[int, int]


@dataclass
class Framebuffer:
    """A rectangle of 32-bit pixels, all black until drawn on."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    _pixels: array = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"framebuffer size must be positive, got {self.width}x{self.height}")
        self._pixels = array("I", [0]) * (self.width * self.height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the buffer are ignored."""
        if self._inside(x, y):
            self._pixels[y * self.width + x] = color & _UINT32_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour stored at ``(x, y)``."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) lies outside a {self.width}x{self.height} buffer")
        return self._pixels[y * self.width + x]

    def clear(self) -> None:
        """Set every pixel back to zero."""
        self._pixels = array("I", [0]) * (self.width * self.height)

    def to_bytes(self) -> bytes:
        """Return the pixels row by row, four little-endian bytes each."""
        data = array("I", self._pixels)
        if sys.byteorder == "big":
            data.byteswap()
        return data.tobytes()


def bresenham_line(start: Pixel, end: Pixel) -> Iterator[Pixel]:
    """Yield every pixel of the line from ``start`` to ``end``, both included."""
    x, y = start
    end_x, end_y = end
    dx = abs(end_x - x)
    dy = abs(end_y - y)
    sx = 1 if x < end_x else -1
    sy = 1 if y < end_y else -1
    steep = dy > dx
    if steep:
        dx, dy = dy, dx
    err = 2 * dy - dx
    yield x, y
    for _ in range(dx):
        if err >= 0:
            if steep:
                x += sx
            else:
                y += sy
            err -= 2 * dx
        if steep:
            y += sy
        else:
            x += sx
        err += 2 * dy
        yield x, y


def draw_line(buffer: Framebuffer, start: Pixel, end: Pixel, color: int) -> None:
    """Draw a one-pixel line of ``color`` into ``buffer``."""
    for x, y in bresenham_line(start, end):
        buffer.put_pixel(x, y, color)