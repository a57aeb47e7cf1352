"""Basic value types describing a tile grid."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TileType(enum.Enum):
    """Kind of a single grid tile."""

    UNDEFINED = enum.auto()
    TRAIL = enum.auto()
    OBSTACLE = enum.auto()


@dataclass(frozen=True)
class GridTile:
    """One tile of the map: its kind and the cost of stepping on it."""

    type: TileType
    cost: int


@dataclass(frozen=True, order=True)
class GridCoordinate:
    """A column/row position on the map, ordered by x first, then y."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x}/{self.y}"