"""Pickup availability systems (single-player).

Run at the very start of a tick, before any collection or movement:

1. ``hydrotron_spawn_system`` tops up HydroTrons to
    ``neutron_bomb_count // HYDROTRON_THRESHOLD`` instances.
2. ``gravitron_spawn_system`` places the GraviTron once enough HydroTrons were
    collected and raises ``gravitron_active``.
3. ``neutron_spawn_system`` places the NeuTron pickup once the player holds
    enough bullets. The reducer ends the tick early when this one fires.

Two-player rounds never reach any of these spawns.
"""

import random
from dataclasses import replace

from grid_tron.components import GraviTron, HydroTron, PurpleBullet
from grid_tron.constants import (
    GRAVITRON_THRESHOLD,
    HYDROTRON_THRESHOLD,
    NEUTRON_BOMB_THRESHOLD,
)
from grid_tron.state import State
from grid_tron.types import GameMode
from grid_tron.utils.spawn import spawn_position


def hydrotron_spawn_system(state: State, rng: random.Random) -> State:
    """Spawn missing HydroTrons for the player's current bomb count."""
    if state.mode != GameMode.SINGLE:
        return state
    player = state.players[0]
    if player.neutron_bomb_count < HYDROTRON_THRESHOLD:
        return state
    desired = player.neutron_bomb_count // HYDROTRON_THRESHOLD
    while len(state.hydrotrons) < desired:
        hydrotron = HydroTron(position=spawn_position(state, rng))
        state = replace(state, hydrotrons=state.hydrotrons.append(hydrotron))
    return state


def gravitron_spawn_system(state: State, rng: random.Random) -> State:
    """Spawn the GraviTron once ``GRAVITRON_THRESHOLD`` HydroTrons were collected."""
    if state.mode != GameMode.SINGLE or state.gravitron is not None:
        return state
    if state.players[0].hydrotrons_collected < GRAVITRON_THRESHOLD:
        return state
    return replace(
        state,
        gravitron=GraviTron(position=spawn_position(state, rng)),
        gravitron_active=True,
    )


def neutron_spawn_system(state: State, rng: random.Random) -> State:
    """Spawn the NeuTron pickup once the player holds enough bullets."""
    if state.mode != GameMode.SINGLE or state.purple_bullet is not None:
        return state
    if state.players[0].bullet_count < NEUTRON_BOMB_THRESHOLD:
        return state
    return replace(state, purple_bullet=PurpleBullet(position=spawn_position(state, rng)))
