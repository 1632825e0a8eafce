"""Placing walls into the grid next to a crossing."""

GRID_SIZE = 13
WALL = -1
_DIGITS = "0123456789"
_DIRECTIONS = ("N", "E", "S", "W")


def _parse_crossing(crossing):
    if (
        not isinstance(crossing, str)
        or len(crossing) < 3
        or crossing[1] not in _DIGITS
        or crossing[2] not in _DIGITS
    ):
        raise ValueError(f"not a crossing name: {crossing!r}")
    return int(crossing[1]), int(crossing[2])


def _single_wall(y, x, direction):
    if direction == "N":
        return 2 + (y - 1) * 2 + 1, 2 + x * 2
    if direction == "S":
        return 2 + y * 2 + 1, 2 + x * 2
    if direction == "E":
        return 2 + y * 2, 2 + x * 2 + 1
    return 2 + y * 2, 2 + (x - 1) * 2 + 1


def _long_wall(y, x, distance, direction):
    # North and west shift the reference crossing cumulatively with each step.
    for d in range(distance):
        if direction == "N":
            y -= d
            yield 2 + y * 2 + 1, 2 + x * 2
        elif direction == "S":
            yield 2 + y * 2 + 1, 2 + x * 2
        elif direction == "E":
            yield 2 + y * 2, 2 + x * 2 + d + 1
        else:
            x -= d
            yield 2 + y * 2, 2 + x * 2 + d + 1


def _wall_cells(crossing, distance, direction):
    y, x = _parse_crossing(crossing)
    if distance == 1:
        yield _single_wall(y, x, direction)
    elif distance > 1:
        yield from _long_wall(y, x, distance, direction)


def create_wall(maze, crossing, distance, direction):
    """Mark cells seen as blocked from a crossing as walls, in place.

    ``direction`` is one of 'N', 'E', 'S', 'W'. Cells outside the grid are
    ignored; a distance below 1 changes nothing.
    """
    if direction not in _DIRECTIONS:
        raise ValueError(f"unknown direction: {direction!r}")
    for i, j in _wall_cells(crossing, distance, direction):
        if 0 <= i < GRID_SIZE and 0 <= j < GRID_SIZE:
            maze[i][j] = WALL