import pytest

from grid_tron.components import Position
from grid_tron.systems.movement import movement_system
from grid_tron.types import Direction
from tests.test_utils import assert_player_positions, cells, make_player, make_state


def test_player_advances_and_leaves_trail() -> None:
    state = make_state(make_player(position=(2, 5), trail=[(1, 5)]))
    new_state = movement_system(state)
    player = new_state.players[0]
    assert player.position == Position(3, 5)
    assert player.trail == cells((1, 5), (2, 5))
    assert player.position not in player.trail
    assert player.is_alive


def test_pending_direction_applied() -> None:
    player = make_player(position=(2, 5), pending_direction=Direction.UP)
    new_state = movement_system(make_state(player))
    assert new_state.players[0].direction == Direction.UP
    assert_player_positions(new_state, {1: (2, 4)})


@pytest.mark.parametrize(
    "position, direction",
    [
        ((9, 3), Direction.RIGHT),
        ((0, 3), Direction.LEFT),
        ((3, 0), Direction.UP),
        ((3, 9), Direction.DOWN),
    ],
)
def test_wall_crash(position: tuple[int, int], direction: Direction) -> None:
    state = make_state(make_player(position=position, direction=direction))
    player = movement_system(state).players[0]
    assert not player.is_alive
    assert player.position == Position(*position)
    assert player.trail == cells(position)


def test_own_trail_crash() -> None:
    player = make_player(
        position=(3, 3), direction=Direction.UP, trail=[(3, 2), (4, 2), (4, 3)]
    )
    new_player = movement_system(make_state(player)).players[0]
    assert not new_player.is_alive
    assert new_player.position == Position(3, 3)


def test_other_trail_crash() -> None:
    p1 = make_player(1, position=(2, 2), direction=Direction.RIGHT)
    p2 = make_player(2, position=(7, 7), direction=Direction.LEFT, trail=[(3, 2), (3, 3)])
    new_state = movement_system(make_state(p1, p2))
    assert not new_state.players[0].is_alive
    assert new_state.players[1].is_alive


def test_mutual_head_on_kills_both() -> None:
    p1 = make_player(1, position=(3, 5), direction=Direction.RIGHT)
    p2 = make_player(2, position=(5, 5), direction=Direction.LEFT)
    new_state = movement_system(make_state(p1, p2))
    assert [p.is_alive for p in new_state.players] == [False, False]
    assert_player_positions(new_state, {1: (3, 5), 2: (5, 5)})


def test_swapping_heads_kills_both() -> None:
    p1 = make_player(1, position=(3, 5), direction=Direction.RIGHT)
    p2 = make_player(2, position=(4, 5), direction=Direction.LEFT)
    new_state = movement_system(make_state(p1, p2))
    assert [p.is_alive for p in new_state.players] == [False, False]


def test_entering_vacated_head_is_a_crash() -> None:
    # Player 2's head becomes trail this tick, so player 1 runs into it.
    p1 = make_player(1, position=(3, 5), direction=Direction.RIGHT)
    p2 = make_player(2, position=(4, 5), direction=Direction.UP)
    new_state = movement_system(make_state(p1, p2))
    assert not new_state.players[0].is_alive
    assert new_state.players[1].is_alive
    assert_player_positions(new_state, {2: (4, 4)})


def test_dead_players_do_not_move() -> None:
    player = make_player(position=(2, 5), is_alive=False)
    state = make_state(player)
    assert movement_system(state).players[0] == player
