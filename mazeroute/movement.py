"""Turning a route of crossings into driving commands."""

from enum import IntEnum
from itertools import pairwise


class Direction(IntEnum):
    """Compass heading, numbered clockwise."""

    N = 0
    E = 1
    S = 2
    W = 3


def _position(crossing):
    return int(crossing[1]), int(crossing[2])


def get_move_direction(current, next_crossing):
    """Return the heading needed to go from one crossing to the next."""
    current_i, current_j = _position(current)
    next_i, next_j = _position(next_crossing)
    if next_i < current_i:
        return Direction.N
    if next_i > current_i:
        return Direction.S
    if next_j > current_j:
        return Direction.E
    return Direction.W


def get_initial_direction(start_station):
    """Return the heading of a robot leaving the given station."""
    if 1 <= start_station <= 3:
        return Direction.N
    if 4 <= start_station <= 6:
        return Direction.W
    if 7 <= start_station <= 9:
        return Direction.S
    return Direction.E


def turn_commands(current, target):
    """Return the commands that turn from one heading to another and move on."""
    diff = (Direction(target) - Direction(current)) % 4
    if diff == 0:
        return ["F"]
    if diff == 1:
        return ["R", "F"]
    if diff == 2:
        return ["B"]
    return ["L", "F"]


def path_to_commands(coords, initial_dir):
    """Return the command string for driving along crossings; each command ends in a space."""
    heading = Direction(initial_dir)
    commands = []
    for current, following in pairwise(coords):
        move = get_move_direction(current, following)
        commands.extend(turn_commands(heading, move))
        heading = move
    return "".join(f"{command} " for command in commands)


def split_route(route):
    """Split a space-separated route into crossing names."""
    return [part for part in route.split(" ") if part]