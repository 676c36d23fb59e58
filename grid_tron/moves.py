"""Direction arithmetic.

Players and bullets only ever move along the four cardinal headings. These
helpers translate a heading into grid offsets and encode the no-reversal rule
used when staging a new heading.
"""

from typing import Dict, Tuple

from grid_tron.components import Position
from grid_tron.types import Direction


DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def opposite(direction: Direction) -> Direction:
    """Return the heading pointing the other way."""
    return _OPPOSITES[direction]


def is_valid_direction_change(current: Direction, requested: Direction) -> bool:
    """A change is valid unless it is an instant 180 degree reversal."""
    return opposite(current) != requested


def translate(pos: Position, direction: Direction, distance: int = 1) -> Position:
    """Return ``pos`` moved ``distance`` cells along ``direction``.

    No bounds check; callers decide what leaving the grid means.
    """
    dx, dy = DIRECTION_DELTAS[direction]
    return Position(pos.x + dx * distance, pos.y + dy * distance)
