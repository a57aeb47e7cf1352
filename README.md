# gridpath

Load a tile map from a delimited text file, walk across it tile by tile,
search for a route between two points, and print the map in the terminal with
coloured tiles.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Map files

Each line of the file is one row of the map. The cells in a row are split at
any of the characters `,` `;` `.` `-`, and empty cells are skipped. A cell
that starts with a digit is a walkable *trail* tile, and its cost is the
number formed by those leading digits. Any other cell is an *obstacle*. Rows
can have different lengths, and the map is as wide as its longest row.

```
#,#,#,#,#
#,1,1,2,#
#,1,#,1,#
#,1,1,1,#
#,#,#,#,#
```

## Command line

```
gridpath [MAP_FILE] [--probe X/Y] [--start X/Y] [--goal X/Y]
         [--algorithm {astar,depth-first}] [--no-pause]
```

- `MAP_FILE` defaults to `map03.CSV` in the current directory. If the file
  cannot be opened, an error is printed and the run goes on with an empty map.
- `--probe` (default `1/1`) is where the map's iterator is placed first; its
  position is printed.
- `--start` (default `1/11`) and `--goal` (default `9/4`) are the ends of the
  search. Coordinates are written `X/Y` or `X,Y`.
- `--algorithm` picks `astar` (the default) or `depth-first`.
- Between steps the program prints `Press any key to continue...` and waits
  for a line on standard input. `--no-pause` turns this off.

The program prints the map's width and height, clears the terminal and shows
the map, then searches. When it finds a path, it draws the path over the map:
the start is green, the end is blue and the steps between are yellow. It then
lists the path's coordinates. Otherwise it prints `No path found.`, which
also happens when the start or the goal is not a trail tile. The exit status
is 0.

No map file comes with the package. Bring your own.

## As a library

```python
from gridpath.gridmap import GridtypeMap
from gridpath.tiles import GridCoordinate
from gridpath.search import a_star, depth_first, UnreachableError

grid = GridtypeMap()
grid.import_map("map03.CSV")
print(grid.width, grid.height)

it = grid.leap_in(GridCoordinate(1, 1))
print(it.position)

try:
    path = a_star(it, GridCoordinate(1, 11), GridCoordinate(9, 4))
except UnreachableError as exc:
    print("not a trail tile:", exc.position)
else:
    if path:
        grid.to_console(True, path)
```

### Pieces

- `gridpath.tiles`: `TileType` (`UNDEFINED`, `TRAIL`, `OBSTACLE`), `GridTile`
  (`type`, `cost`) and `GridCoordinate` (`x`, `y`). Coordinates are hashable,
  are ordered by `x` and then `y`, and print as `x/y`.
- `gridpath.iterator`: `MapIterator(grid)` walks over a list of rows of
  `GridTile` and only steps onto trail tiles. It starts at `-1/-1`.
  - `position` is the current coordinate.
  - `jump_to_position`, `move_north`, `move_south`, `move_east` and
    `move_west` return whether the move was made. `jump_to_position` also
    accepts an `(x, y)` tuple.
  - `move_back` returns to the position held before the last successful move.
- `gridpath.gridmap`: `GridtypeMap` holds a map and one iterator over it.
  - `import_map(file_name)` replaces the map with the file's contents, prints
    `Loaded map with N lines.` and returns the row count. A file that cannot be
    opened raises `OSError`.
  - `width` and `height` give the map's size.
  - `render(hide_costs, path=())` returns the coloured view as a string, with
    column and row numbers. With `hide_costs` false, trail tiles show their
    cost.
  - `to_console(hide_costs, path=())` clears the terminal and prints that view.
  - `leap_in(pos)` moves the map's iterator to `pos` if it is a trail tile and
    returns the iterator.
- `gridpath.search`: `depth_first(it, start, goal)` and `a_star(it, start,
  goal)` return the path as a list of coordinates that includes both ends, or
  an empty list when the goal cannot be reached. Both try directions in the
  order north, east, south, west. `a_star` counts every step as cost 1 and
  uses the Manhattan distance as its heuristic; tile costs are not used. Both
  raise `UnreachableError` (a `ValueError`, with the offending `position`)
  when the start or the goal is not a trail tile.
- `gridpath.cli`: `main(argv=None)` runs the command above.