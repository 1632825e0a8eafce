"""The 13x13 grid of crossings and edges, and shortest routes between crossings."""

GRID_SIZE = 13
CROSSINGS_PER_SIDE = 5
WALL = -1
OPEN = 0

_LAYOUT = (
    (-1, -1, -1, -1, 0, -1, 0, -1, 0, -1, -1, -1, -1),
    (-1, -1, -1, -1, 0, -1, 0, -1, 0, -1, -1, -1, -1),
    (-1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, -1),
    (-1, -1, 0, -1, 0, -1, 0, -1, 0, -1, 0, -1, -1),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (-1, -1, 0, -1, 0, -1, 0, -1, 0, -1, 0, -1, -1),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (-1, -1, 0, -1, 0, -1, 0, -1, 0, -1, 0, -1, -1),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (-1, -1, 0, -1, 0, -1, 0, -1, 0, -1, 0, -1, -1),
    (-1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1, -1),
    (-1, -1, -1, -1, 0, -1, 0, -1, 0, -1, -1, -1, -1),
    (-1, -1, -1, -1, 0, -1, 0, -1, 0, -1, -1, -1, -1),
)

# Neighbour order: down, up, right, left. It decides which of several
# equally short routes is taken.
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIGITS = "0123456789"


def base_maze():
    """Return a fresh, wall-free copy of the grid as a list of lists."""
    return [list(row) for row in _LAYOUT]


def crossing_to_coord(name):
    """Return the grid cell (row, column) of a crossing named like 'c12'."""
    if (
        not isinstance(name, str)
        or len(name) != 3
        or name[0] != "c"
        or name[1] not in _DIGITS
        or name[2] not in _DIGITS
    ):
        raise ValueError(f"not a crossing name: {name!r}")
    row, col = int(name[1]), int(name[2])
    if row >= CROSSINGS_PER_SIDE or col >= CROSSINGS_PER_SIDE:
        raise ValueError(f"crossing out of range: {name!r}")
    return 2 + 2 * row, 2 + 2 * col


def coord_to_crossing(i, j):
    """Return the crossing name at cell (i, j), or None if the cell is not a crossing."""
    if i < 2 or j < 2 or (i - 2) % 2 or (j - 2) % 2:
        return None
    row, col = (i - 2) // 2, (j - 2) // 2
    if row >= CROSSINGS_PER_SIDE or col >= CROSSINGS_PER_SIDE:
        return None
    return f"c{row}{col}"


def _in_bounds(i, j):
    return 0 <= i < GRID_SIZE and 0 <= j < GRID_SIZE


def _flood(maze, start, target):
    """Number cells by distance from target until start is reached."""
    grid = [list(row) for row in maze]
    grid[target[0]][target[1]] = 1
    grid[start[0]][start[1]] = OPEN
    level = 1
    while grid[start[0]][start[1]] == OPEN:
        frontier = [
            (i, j)
            for i, row in enumerate(grid)
            for j, value in enumerate(row)
            if value == level
        ]
        if not frontier:
            raise ValueError("no route between the given cells")
        for i, j in frontier:
            for di, dj in _STEPS:
                ni, nj = i + di, j + dj
                if _in_bounds(ni, nj) and grid[ni][nj] == OPEN:
                    grid[ni][nj] = level + 1
        level += 1
    return grid


def _trace(grid, start, target):
    """Yield the cells stepped onto when walking downhill from start to target."""
    current = start
    while current != target:
        best = current
        best_value = grid[current[0]][current[1]]
        for di, dj in _STEPS:
            ni, nj = current[0] + di, current[1] + dj
            if _in_bounds(ni, nj) and 0 < grid[ni][nj] < best_value:
                best, best_value = (ni, nj), grid[ni][nj]
        if best == current:
            raise ValueError("route tracing got stuck")
        current = best
        yield current


def shortest_cells(maze, start, target):
    """Return the cells of a shortest walk from start to target, start excluded."""
    grid = _flood(maze, start, target)
    return list(_trace(grid, start, target))


def crossing_to_crossing(start_crossing, end_crossing, maze=None):
    """Return the crossings passed on a shortest route, space separated.

    The start crossing is left out and the end crossing is included.
    The given maze is not changed. Raises ValueError for unknown
    crossings, for identical start and end, and when no route exists.
    """
    if maze is None:
        maze = base_maze()
    start = crossing_to_coord(start_crossing)
    end = crossing_to_coord(end_crossing)
    names = (coord_to_crossing(i, j) for i, j in shortest_cells(maze, start, end))
    return " ".join(name for name in names if name is not None)