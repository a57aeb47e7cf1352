"""Command line entry: load a map, search a path and draw it."""

from __future__ import annotations

import argparse
import re
import sys
from typing import List, Optional

from .gridmap import GridtypeMap
from .search import UnreachableError, a_star, depth_first
from .tiles import GridCoordinate

_ALGORITHMS = {"astar": ("aStar", a_star), "depth-first": ("depthFirst", depth_first)}


def _coordinate(text: str) -> GridCoordinate:
    parts = re.split(r"[/,]", text.strip())
    try:
        x, y = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid coordinate {text!r}, expected X/Y"
        ) from None
    return GridCoordinate(x, y)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridpath", description="Find and draw a path across a tile map."
    )
    parser.add_argument("map_file", nargs="?", default="map03.CSV")
    parser.add_argument("--probe", type=_coordinate, default=GridCoordinate(1, 1))
    parser.add_argument("--start", type=_coordinate, default=GridCoordinate(1, 11))
    parser.add_argument("--goal", type=_coordinate, default=GridCoordinate(9, 4))
    parser.add_argument("--algorithm", choices=sorted(_ALGORITHMS), default="astar")
    parser.add_argument(
        "--no-pause", dest="pause", action="store_false", help="do not wait for input"
    )
    return parser


def _pause(enabled: bool) -> None:
    if not enabled:
        return
    print("Press any key to continue...", end="", flush=True)
    sys.stdin.readline()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the program; returns the process exit status."""
    args = _parser().parse_args(argv)

    grid_map = GridtypeMap()
    try:
        grid_map.import_map(args.map_file)
    except OSError:
        print(f"Error: Could not open file {args.map_file}", file=sys.stderr)
    print(f"WIDTH: {grid_map.width}\t HEIGHT: {grid_map.height}")

    _pause(args.pause)
    it = grid_map.leap_in(args.probe)
    print(f"\nCurrent position of map iterator: {it.position}")

    _pause(args.pause)
    print("Map (without path): \n")
    grid_map.to_console(True, [])

    _pause(args.pause)

    name, search = _ALGORITHMS[args.algorithm]
    try:
        path = search(it, args.start, args.goal)
    except UnreachableError:
        path = []

    if path:
        print(f"Using algorithm {name}")
        print(f"Path found with {len(path)} steps.")
        print("Map (with path):")
        grid_map.to_console(True, path)
        print("\nPath coordinates:")
        for i, pos in enumerate(path):
            print(f"{i}: {pos}")
    else:
        print("No path found.")

    return 0


if __name__ == "__main__":
    sys.exit(main())