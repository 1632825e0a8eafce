# mazeroute

Route planning for a small robot that drives on a 5x5 grid of crossings.
The crossings are named `c00` to `c44`: row first, then column.

The grid is held as a 13x13 list of lists. Crossings sit at the even cells
from 2 to 10, the cells between them are the edges, and `-1` marks a wall.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Planning a route

```python
from mazeroute.grid import base_maze, crossing_to_crossing
from mazeroute.obstacle import create_wall
from mazeroute.movement import Direction, path_to_commands, split_route

maze = base_maze()
create_wall(maze, "c11", 1, "E")        # block the edge east of c11

route = crossing_to_crossing("c00", "c22", maze)
coords = ["c00", *split_route(route)]
commands = path_to_commands(coords, Direction.S)
```

### `mazeroute.grid`

- `base_maze()` returns a new grid with no walls.
- `crossing_to_coord(name)` gives the grid cell `(row, column)` of a crossing
  name. It raises `ValueError` for a name that is not `c` followed by two
  digits from 0 to 4.
- `coord_to_crossing(i, j)` gives the crossing name at a cell, or `None` when
  the cell is not a crossing.
- `shortest_cells(maze, start, target)` returns the cells of a shortest walk
  between two cells, with the start left out.
- `crossing_to_crossing(start_crossing, end_crossing, maze=None)` searches a
  copy of the maze with a breadth-first search. It returns the crossings passed
  after the start, with the destination included, separated by single spaces.
  The maze you pass in is not changed. It raises `ValueError` for an unknown
  crossing, when start and end are the same, and when walls leave no route.
  Among routes of equal length, the order of steps tried (down, up, right,
  left) decides which one is returned.

### `mazeroute.obstacle`

`create_wall(maze, crossing, distance, direction)` marks walls in place, next
to a crossing in direction `N`, `E`, `S` or `W`. A distance of 1 blocks the
edge next to the crossing; a larger distance blocks a run of cells; a distance
below 1 changes nothing. Cells that fall outside the grid are skipped. An
unknown direction raises `ValueError`.

### `mazeroute.movement`

- `Direction` is an `IntEnum` of the compass headings `N`, `E`, `S`, `W`,
  numbered clockwise.
- `get_move_direction(current, next_crossing)` gives the heading from one
  crossing to a neighbouring one.
- `get_initial_direction(start_station)` gives the heading when leaving a
  station: 1 to 3 north, 4 to 6 west, 7 to 9 south, anything else east.
- `turn_commands(current, target)` gives the commands for one step:
  `["F"]` straight on, `["R", "F"]` right, `["L", "F"]` left, `["B"]` reverse.
- `path_to_commands(coords, initial_dir)` joins those commands for a list of
  crossings into one string, each command followed by a space.
- `split_route(route)` splits a space-separated route into crossing names.

## Serial console

`mazeroute-console` opens a serial port (8 data bits, no parity, one stop bit)
to the robot's Zigbee link. In a loop it reads bytes until the robot sends
`c`, reads one more byte for the distance, and asks for a command. The first
character of what you type is sent back as a single byte (a NUL byte if the
line is empty). Enter `q`, or end the input, to stop.

    mazeroute-console --port COM5 --baudrate 9600

`COM5` and `9600` are the defaults. If the port cannot be opened, the command
prints a message and exits with status 1.

The functions behind it are in `mazeroute.console`: `open_port(port, baudrate)`,
`read_byte(port)`, `write_byte(port, data)` and
`run(port, input_func=input, output=print)`. `run` takes any object with
`read` and `write` methods in place of a real port.

## What it does not do

- Routes run between crossings only. There is no routing to or from the
  numbered stations at the edge of the grid; `get_initial_direction` is the
  only part that knows about stations.
- The console does not decode the distance byte: it always reports
  `Received Distance: -1`. It does not plan routes or place walls by itself;
  every command is typed by hand.