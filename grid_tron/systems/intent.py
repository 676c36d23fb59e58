"""Intent reducers.

Pure state transitions for player input. They only stage data for the next
tick (a pending heading, a new bullet, a cleared trail); no movement or
collision logic happens here. Invalid requests are silently ignored.
"""

from dataclasses import replace

from pyrsistent import pvector

from grid_tron.components import Bullet, Token
from grid_tron.moves import is_valid_direction_change
from grid_tron.state import State
from grid_tron.types import Direction, GameMode, PlayerID
from grid_tron.utils.players import get_player, set_player
from grid_tron.utils.rng import ACTION_SALT, state_rng
from grid_tron.utils.spawn import spawn_position


def direction_system(state: State, player_id: PlayerID, direction: Direction) -> State:
    """Stage ``direction`` unless it reverses the current heading."""
    player = get_player(state, player_id)
    if not player.is_alive or not is_valid_direction_change(player.direction, direction):
        return state
    return set_player(state, replace(player, pending_direction=direction))


def shoot_system(state: State, player_id: PlayerID) -> State:
    """Fire a bullet from the head along the current heading."""
    player = get_player(state, player_id)
    if not player.is_alive or player.bullet_count <= 0:
        return state
    bullet = Bullet(position=player.position, direction=player.direction, owner_id=player.id)
    state = set_player(state, replace(player, bullet_count=player.bullet_count - 1))
    return replace(state, bullets=state.bullets.append(bullet))


def neutron_bomb_system(state: State, player_id: PlayerID) -> State:
    """Spend a NeuTron bomb: wipe the trail and drop an extra token."""
    if state.mode != GameMode.SINGLE:
        return state
    player = get_player(state, player_id)
    if not player.is_alive or player.neutron_bomb_count <= 0:
        return state
    state = set_player(
        state,
        replace(player, neutron_bomb_count=player.neutron_bomb_count - 1, trail=pvector()),
    )
    token = Token(position=spawn_position(state, state_rng(state, ACTION_SALT)))
    return replace(state, tokens=state.tokens.append(token))


def pause_system(state: State) -> State:
    """Flip the pause flag; a finished round stays as it is."""
    if state.is_game_over:
        return state
    return replace(state, is_game_paused=not state.is_game_paused)
