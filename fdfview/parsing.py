"""Reading ``.fdf`` height maps into a grid of coloured points."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

DEFAULT_COLOR = 0xFFFFFF
"""Colour given to a point whose token carries no colour."""

HEIGHT_LIMIT = 20000
"""Decimal values stop growing once another digit would exceed this."""

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"
_UINT32_MASK = 0xFFFFFFFF
_LINE_PATTERN = re.compile(r"[^\n]*\n|[^\n]+")


@dataclass(frozen=True)
class Point:
    """One map cell: its height and its colour as 0xRRGGBB."""

    height: int
    color: int = DEFAULT_COLOR


@dataclass
class HeightMap:
    """A rectangular grid of points, indexed by row then column."""

    rows: list[list[Point]] = field(default_factory=list)
    width: int = 0
    height: int = 0

    def at(self, x: int, y: int) -> Point:
        """Return the point in column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"point ({x}, {y}) lies outside a {self.width}x{self.height} map")
        return self.rows[y][x]

    def __iter__(self):
        for y, row in enumerate(self.rows):
            for x, point in enumerate(row):
                yield x, y, point


def parse_int(text: str) -> int:
    """Read a leading decimal number, capped so it never passes HEIGHT_LIMIT.

    Leading whitespace and a single ``+`` are skipped; a ``-`` sign is not
    understood, so such text reads as zero.
    """
    rest = text.lstrip(_WHITESPACE)
    if rest.startswith("+"):
        rest = rest[1:]
    result = 0
    for char in rest:
        if char not in _DIGITS:
            break
        candidate = result * 10 + int(char)
        if candidate > HEIGHT_LIMIT:
            break
        result = candidate
    return result


def parse_hex(text: str) -> int:
    """Read leading hexadecimal digits as an unsigned 32-bit value."""
    result = 0
    for char in text:
        if char not in _HEX_DIGITS:
            break
        result = (result * 16 + int(char, 16)) & _UINT32_MASK
    return result


def split_words(text: str | None, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces."""
    if text is None:
        return []
    return [word for word in text.split(sep) if word]


def count_words(text: str | None, sep: str) -> int:
    """Count the runs of characters other than ``sep`` in ``text``."""
    return len(split_words(text, sep))


def parse_value(token: str) -> Point:
    """Parse a ``height`` or ``height,color`` token."""
    coordinate, comma, color = token.partition(",")
    height = parse_int(coordinate)
    if not comma:
        return Point(height, DEFAULT_COLOR)
    if color.startswith("0x"):
        return Point(height, parse_hex(color[2:]))
    return Point(height, parse_int(color))


def parse_line(line: str) -> list[Point]:
    """Parse every space-separated token of one map line."""
    return [parse_value(token) for token in split_words(line, " ")]


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a file, each keeping its trailing newline."""
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        text = handle.read()
    return _LINE_PATTERN.findall(text)


def map_height(lines: Sequence[str]) -> int:
    """Number of rows in the map."""
    return len(lines)


def map_width(lines: Iterable[str]) -> int:
    """Number of columns: the word count of the shortest line."""
    return min((count_words(line, " ") for line in lines), default=0)


def parse_map(lines: Sequence[str]) -> HeightMap:
    """Build a height map from its lines, trimming rows to the common width."""
    width = map_width(lines)
    rows = [parse_line(line)[:width] for line in lines]
    return HeightMap(rows=rows, width=width, height=map_height(lines))


def load_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read and parse the map stored at ``path``."""
    return parse_map(read_lines(path))