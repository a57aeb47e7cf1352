"""A cursor that walks over the trail tiles of a grid."""

from __future__ import annotations

from typing import List, Sequence

from .tiles import GridCoordinate, GridTile, TileType

Grid = List[List[GridTile]]


class MapIterator:
    """Moves over a grid, only ever stepping onto trail tiles.

    The grid is held by reference, so changes to it are seen by the iterator.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._pos = GridCoordinate(-1, -1)
        self._last = self._pos

    @property
    def position(self) -> GridCoordinate:
        """The current position."""
        return self._pos

    def _is_trail(self, pos: GridCoordinate) -> bool:
        if not 0 <= pos.y < len(self._grid):
            return False
        row: Sequence[GridTile] = self._grid[pos.y]
        return 0 <= pos.x < len(row) and row[pos.x].type is TileType.TRAIL

    def jump_to_position(self, pos: GridCoordinate) -> bool:
        """Move to ``pos`` if it is a trail tile on the map; report success."""
        if not isinstance(pos, GridCoordinate):
            pos = GridCoordinate(*pos)
        if not self._is_trail(pos):
            return False
        self._last = self._pos
        self._pos = pos
        return True

    def move_back(self) -> None:
        """Return to the position held before the last successful move."""
        self._pos = self._last

    def _step(self, dx: int, dy: int) -> bool:
        return self.jump_to_position(
            GridCoordinate(self._pos.x + dx, self._pos.y + dy)
        )

    def move_north(self) -> bool:
        """Step one row up."""
        return self._step(0, -1)

    def move_south(self) -> bool:
        """Step one row down."""
        return self._step(0, 1)

    def move_west(self) -> bool:
        """Step one column left."""
        return self._step(-1, 0)

    def move_east(self) -> bool:
        """Step one column right."""
        return self._step(1, 0)