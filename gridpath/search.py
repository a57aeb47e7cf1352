"""Path searches over a grid, driven through a :class:`MapIterator`."""

from __future__ import annotations

from typing import Callable, Dict, List, Set, Tuple, Union

from .iterator import MapIterator
from .tiles import GridCoordinate

Point = Union[GridCoordinate, Tuple[int, int]]


class UnreachableError(ValueError):
    """Raised when the start or goal of a search is not a walkable tile."""

    def __init__(self, position: GridCoordinate) -> None:
        super().__init__(f"position {position} is not reachable")
        self.position = position


def _coord(point: Point) -> GridCoordinate:
    return point if isinstance(point, GridCoordinate) else GridCoordinate(*point)


def _enter(it: MapIterator, start: GridCoordinate, goal: GridCoordinate) -> None:
    if not it.jump_to_position(goal):
        raise UnreachableError(goal)
    if not it.jump_to_position(start):
        raise UnreachableError(start)


def _moves(it: MapIterator) -> Tuple[Callable[[], bool], ...]:
    return (it.move_north, it.move_east, it.move_south, it.move_west)


def depth_first(it: MapIterator, start: Point, goal: Point) -> List[GridCoordinate]:
    """Find a path from ``start`` to ``goal`` by depth-first search.

    Directions are tried in the order north, east, south, west. Returns the path
    including both ends, or an empty list when the goal cannot be reached.
    Raises :class:`UnreachableError` if either end is not a trail tile.
    """
    start, goal = _coord(start), _coord(goal)
    _enter(it, start, goal)

    marked: Set[GridCoordinate] = {start}
    path: List[GridCoordinate] = [start]
    moves = _moves(it)

    while it.position != goal:
        for move in moves:
            if not move():
                continue
            if it.position in marked:
                it.move_back()
                continue
            marked.add(it.position)
            path.append(it.position)
            break
        else:
            path.pop()
            if not path:
                return []
            it.jump_to_position(path[-1])

    return path


def _manhattan(a: GridCoordinate, b: GridCoordinate) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def a_star(it: MapIterator, start: Point, goal: Point) -> List[GridCoordinate]:
    """Find a shortest path from ``start`` to ``goal`` with A*.

    Every step costs one; the heuristic is the Manhattan distance. Returns the
    path including both ends, or an empty list when the goal cannot be reached.
    Raises :class:`UnreachableError` if either end is not a trail tile.
    """
    start, goal = _coord(start), _coord(goal)
    _enter(it, start, goal)

    open_list: List[GridCoordinate] = [start]
    came_from: Dict[GridCoordinate, GridCoordinate] = {}
    g_score: Dict[GridCoordinate, int] = {start: 0}
    f_score: Dict[GridCoordinate, int] = {start: _manhattan(start, goal)}
    closed: Set[GridCoordinate] = set()
    moves = _moves(it)

    while open_list:
        current = min(open_list, key=f_score.__getitem__)
        open_list.remove(current)

        if current == goal:
            path = [current]
            while current != start:
                current = came_from[current]
                path.append(current)
            path.reverse()
            return path

        closed.add(current)
        it.jump_to_position(current)

        for move in moves:
            if not move():
                continue
            neighbor = it.position
            if neighbor in closed:
                it.move_back()
                continue

            tentative = g_score[current] + 1
            in_open = neighbor in open_list
            if not in_open or tentative < g_score[neighbor]:
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                f_score[neighbor] = tentative + _manhattan(neighbor, goal)
                if not in_open:
                    open_list.append(neighbor)

            it.move_back()

    return []