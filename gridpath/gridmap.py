"""A tile map read from a delimited text file, with terminal rendering."""

from __future__ import annotations

import re
import sys
from typing import Iterable, List

from .iterator import MapIterator
from .tiles import GridCoordinate, GridTile, TileType

RESET = "\033[0m"
RED = "\033[41m"
GREEN = "\033[42m"
BLUE = "\033[44m"
YELLOW = "\033[43m"
WHITE_TEXT = "\033[97m"
WHITE_BG = "\033[47m"
CLEAR_SCREEN = "\x1B[2J\x1B[H"

_DELIMITERS = re.compile(r"[,;.\-]")
_LEADING_DIGITS = re.compile(r"[0-9]+")


def _parse_token(token: str) -> GridTile:
    match = _LEADING_DIGITS.match(token)
    if match:
        return GridTile(TileType.TRAIL, int(match.group()))
    return GridTile(TileType.OBSTACLE, -1)


def _parse_line(line: str) -> List[GridTile]:
    return [_parse_token(tok) for tok in _DELIMITERS.split(line) if tok]


def _digits(n: int) -> int:
    return len(str(n))


class GridtypeMap:
    """A map of trail and obstacle tiles, possibly with rows of unequal length."""

    def __init__(self) -> None:
        self._grid: List[List[GridTile]] = []
        self._iterator = MapIterator(self._grid)

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self._grid), default=0)

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self._grid)

    def import_map(self, file_name) -> int:
        """Replace the map with the contents of ``file_name``; return the row count.

        Each line is split on any of ``, ; . -``. A field starting with a digit is
        a trail tile whose cost is its leading digits; anything else is an obstacle.
        """
        with open(file_name, "rb") as f:
            text = f.read().decode("latin-1")

        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()

        self._grid.clear()
        self._grid.extend(_parse_line(line) for line in lines)

        print(f"Loaded map with {len(lines)} lines.")
        return len(lines)

    def render(self, hide_costs: bool, path: Iterable[GridCoordinate] = ()) -> str:
        """Return the map as coloured text, with ``path`` drawn over it."""
        width, height = self.width, self.height
        if width == 0 or height == 0:
            return ""

        path = list(path)
        on_path = set(path)
        start = path[0] if path else None
        end = path[-1] if path else None

        col_width = _digits(width - 1)
        row_width = _digits(height - 1)

        out = [" " * (row_width + 1)]
        out.extend(f"{x:>{col_width}}" for x in range(width))
        out.append("\n")

        for y, row in enumerate(self._grid):
            out.append(f"{y:>{row_width}} ")
            for x in range(width):
                pos = GridCoordinate(x, y)
                char, color = "#", RED
                if x < len(row) and row[x].type is TileType.TRAIL:
                    char = " " if hide_costs else chr(ord("0") + row[x].cost)
                    color = ""

                if path:
                    if pos == start:
                        char, color = "S", GREEN
                    elif pos == end:
                        char, color = "E", BLUE
                    elif pos in on_path:
                        char, color = "o", YELLOW

                if char == "#":
                    char, color = " ", WHITE_BG

                out.append(f"{color}{WHITE_TEXT}{char * col_width}{RESET}")
            out.append("\n")

        return "".join(out)

    def to_console(self, hide_costs: bool, path: Iterable[GridCoordinate] = ()) -> None:
        """Clear the terminal and print the rendered map to standard output."""
        sys.stdout.write(CLEAR_SCREEN)
        sys.stdout.write(self.render(hide_costs, path))
        sys.stdout.flush()

    def leap_in(self, pos: GridCoordinate) -> MapIterator:
        """Place the map's iterator at ``pos`` (if walkable) and return it."""
        self._iterator.jump_to_position(pos)
        return self._iterator