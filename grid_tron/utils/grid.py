"""Grid math helpers.

Pure predicates and samplers used by the movement, bullet and spawning
systems. Functions here are intentionally lightweight to keep the per-tick
loops cheap.
"""

import random
from typing import AbstractSet

from grid_tron.components import Position
from grid_tron.constants import MAX_SPAWN_ATTEMPTS
from grid_tron.state import State


def is_out_of_bounds(pos: Position, width: int, height: int) -> bool:
    """Return True if either coordinate is negative or past the grid edge."""
    return pos.x < 0 or pos.x >= width or pos.y < 0 or pos.y >= height


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies within the round's grid."""
    return not is_out_of_bounds(pos, state.width, state.height)


def positions_equal(a: Position, b: Position) -> bool:
    return a.x == b.x and a.y == b.y


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def random_unoccupied_position(
    width: int,
    height: int,
    occupied: AbstractSet[Position],
    rng: random.Random,
    max_attempts: int = MAX_SPAWN_ATTEMPTS,
) -> Position:
    """Sample a uniformly random cell not in ``occupied``.

    Rejection sampling is capped at ``max_attempts``; after that the grid is
    scanned row by row and the first free cell is returned, which keeps a
    nearly full grid from looping forever.

    Raises:
        ValueError: If every cell of the grid is occupied.
    """
    for _ in range(max_attempts):
        candidate = Position(rng.randrange(width), rng.randrange(height))
        if candidate not in occupied:
            return candidate
    for y in range(height):
        for x in range(width):
            candidate = Position(x, y)
            if candidate not in occupied:
                return candidate
    raise ValueError(f"No unoccupied cell left on a {width}x{height} grid")
