import pytest

from grid_tron.components import Position
from grid_tron.moves import is_valid_direction_change, opposite, translate
from grid_tron.types import Direction


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_is_involutive(direction: Direction) -> None:
    assert opposite(opposite(direction)) == direction
    assert opposite(direction) != direction


@pytest.mark.parametrize(
    "current, requested, expected",
    [
        (Direction.RIGHT, Direction.LEFT, False),
        (Direction.LEFT, Direction.RIGHT, False),
        (Direction.UP, Direction.DOWN, False),
        (Direction.DOWN, Direction.UP, False),
        (Direction.RIGHT, Direction.UP, True),
        (Direction.RIGHT, Direction.DOWN, True),
        (Direction.RIGHT, Direction.RIGHT, True),
        (Direction.UP, Direction.LEFT, True),
    ],
)
def test_valid_direction_change(
    current: Direction, requested: Direction, expected: bool
) -> None:
    assert is_valid_direction_change(current, requested) is expected


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (2, 1)),
        (Direction.DOWN, (2, 3)),
        (Direction.LEFT, (1, 2)),
        (Direction.RIGHT, (3, 2)),
    ],
)
def test_translate_one_step(direction: Direction, expected: tuple[int, int]) -> None:
    assert translate(Position(2, 2), direction) == Position(*expected)


def test_translate_does_not_clamp_to_grid() -> None:
    assert translate(Position(0, 0), Direction.LEFT) == Position(-1, 0)
    assert translate(Position(0, 0), Direction.DOWN, distance=3) == Position(0, 3)
