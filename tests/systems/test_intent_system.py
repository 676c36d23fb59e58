from grid_tron.components import Position
from grid_tron.systems.intent import (
    direction_system,
    neutron_bomb_system,
    pause_system,
    shoot_system,
)
from grid_tron.types import Direction
from tests.test_utils import assert_pickups_disjoint, make_player, make_state, token_cells


def test_reversal_rejected() -> None:
    state = make_state(make_player(direction=Direction.RIGHT))
    new_state = direction_system(state, 1, Direction.LEFT)
    assert new_state.players[0].pending_direction == Direction.RIGHT


def test_perpendicular_accepted() -> None:
    state = make_state(make_player(direction=Direction.RIGHT))
    new_state = direction_system(state, 1, Direction.UP)
    assert new_state.players[0].pending_direction == Direction.UP
    assert new_state.players[0].direction == Direction.RIGHT


def test_reversal_checked_against_current_heading() -> None:
    # UP was staged, but the cycle still heads RIGHT, so LEFT stays illegal.
    player = make_player(direction=Direction.RIGHT, pending_direction=Direction.UP)
    new_state = direction_system(make_state(player), 1, Direction.LEFT)
    assert new_state.players[0].pending_direction == Direction.UP


def test_dead_player_cannot_steer() -> None:
    state = make_state(make_player(is_alive=False))
    assert direction_system(state, 1, Direction.UP) is state


def test_shoot_spawns_bullet() -> None:
    state = make_state(make_player(position=(4, 4), direction=Direction.DOWN, bullet_count=2))
    new_state = shoot_system(state, 1)
    assert new_state.players[0].bullet_count == 1
    bullet = new_state.bullets[0]
    assert bullet.position == Position(4, 4)
    assert bullet.direction == Direction.DOWN
    assert bullet.owner_id == 1
    assert bullet.active


def test_shoot_without_ammo_is_noop() -> None:
    state = make_state(make_player(bullet_count=0))
    assert shoot_system(state, 1) is state


def test_deploy_neutron_bomb() -> None:
    player = make_player(neutron_bomb_count=2, trail=[(0, 5), (1, 5)])
    state = make_state(player, tokens=[(8, 8)])
    new_state = neutron_bomb_system(state, 1)
    assert new_state.players[0].neutron_bomb_count == 1
    assert len(new_state.players[0].trail) == 0
    assert len(token_cells(new_state)) == 2
    assert_pickups_disjoint(new_state)


def test_deploy_neutron_bomb_noops() -> None:
    state = make_state(make_player(neutron_bomb_count=0))
    assert neutron_bomb_system(state, 1) is state
    state = make_state(make_player(neutron_bomb_count=1, is_alive=False))
    assert neutron_bomb_system(state, 1) is state
    two = make_state(make_player(1, neutron_bomb_count=1), make_player(2, position=(7, 7)))
    assert neutron_bomb_system(two, 1) is two


def test_pause_toggles_unless_game_over() -> None:
    state = make_state()
    paused = pause_system(state)
    assert paused.is_game_paused
    assert not pause_system(paused).is_game_paused
    over = make_state(is_game_over=True)
    assert pause_system(over) is over
