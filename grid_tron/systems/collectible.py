"""Collectible system.

Resolves pickups for every living player, in player index order, before
anyone moves. For each player the checks run in a fixed order, which is the
tie-break when several pickups are reachable on the same tick:

1. Token: the first uncollected token on the head cell grants a bullet and is
    replaced 1-for-1 elsewhere. In single-player the round tally increments.
2. NeuTron pickup: trades ``NEUTRON_BOMB_THRESHOLD`` bullets for a bomb and
    wipes the trail.
3. HydroTron: the first uncollected one on the head cell consumes
    ``HYDROTRON_THRESHOLD`` bombs, counts towards the GraviTron and drops two
    bonus tokens.
4. GraviTron collection: terminal. The player dies, the trail and HydroTron
    tally are wiped and ``gravitron_death`` is raised.
5. GraviTron evasion: a player within ``GRAVITRON_PROXIMITY_THRESHOLD`` that
    holds fewer than ``STABILITY_THRESHOLD`` bullets scares the GraviTron to a
    fresh cell. Collection is checked first, so standing on it always catches
    it. Evasion only runs in the pre-movement pass.

Steps 2-5 only exist in single-player rounds. Collected entities stay in the
state flagged ``collected`` until the end-of-tick garbage collector runs.
"""

import random
from dataclasses import replace

from pyrsistent import pvector

from grid_tron.components import Token
from grid_tron.constants import (
    GRAVITRON_PROXIMITY_THRESHOLD,
    HYDROTRON_THRESHOLD,
    HYDROTRON_TOKEN_REWARD,
    NEUTRON_BOMB_THRESHOLD,
    STABILITY_THRESHOLD,
)
from grid_tron.state import State
from grid_tron.types import GameMode
from grid_tron.utils.grid import manhattan_distance
from grid_tron.utils.spawn import spawn_position


def collectible_system(state: State, rng: random.Random, evade: bool = True) -> State:
    """Process pickups for all living players.

    Args:
        state (State): State at the start of the collection pass.
        rng (random.Random): Tick generator used for replacement spawns and
            GraviTron teleports.
        evade (bool): Run the GraviTron evasion check. The arrival pass after
            movement turns it off so the GraviTron teleports at most once per
            player per tick.

    Returns:
        State: Updated state with counters, pickups and flags applied.
    """
    for index in range(len(state.players)):
        if not state.players[index].is_alive:
            continue
        state = collect_token(state, index, rng)
        if state.mode != GameMode.SINGLE:
            continue
        state = collect_purple_bullet(state, index)
        state = collect_hydrotron(state, index, rng)
        state = collect_gravitron(state, index)
        if evade:
            state = evade_gravitron(state, index, rng)
    return state


def collect_token(state: State, index: int, rng: random.Random) -> State:
    player = state.players[index]
    for token_index, token in enumerate(state.tokens):
        if token.collected or token.position != player.position:
            continue
        tally = state.tokens_collected
        if state.mode == GameMode.SINGLE and index == 0:
            tally += 1
        state = replace(
            state,
            players=state.players.set(
                index, replace(player, bullet_count=player.bullet_count + 1)
            ),
            tokens=state.tokens.set(token_index, replace(token, collected=True)),
            tokens_collected=tally,
        )
        replacement = Token(position=spawn_position(state, rng))
        return replace(state, tokens=state.tokens.append(replacement))
    return state


def collect_purple_bullet(state: State, index: int) -> State:
    purple_bullet = state.purple_bullet
    player = state.players[index]
    if (
        purple_bullet is None
        or purple_bullet.collected
        or purple_bullet.position != player.position
    ):
        return state
    player = replace(
        player,
        bullet_count=max(0, player.bullet_count - NEUTRON_BOMB_THRESHOLD),
        neutron_bomb_count=player.neutron_bomb_count + 1,
        trail=pvector(),
    )
    return replace(
        state,
        players=state.players.set(index, player),
        purple_bullet=replace(purple_bullet, collected=True),
    )


def collect_hydrotron(state: State, index: int, rng: random.Random) -> State:
    player = state.players[index]
    for hydro_index, hydrotron in enumerate(state.hydrotrons):
        if hydrotron.collected or hydrotron.position != player.position:
            continue
        player = replace(
            player,
            hydrotrons_collected=player.hydrotrons_collected + 1,
            neutron_bomb_count=max(0, player.neutron_bomb_count - HYDROTRON_THRESHOLD),
        )
        state = replace(
            state,
            players=state.players.set(index, player),
            hydrotrons=state.hydrotrons.set(
                hydro_index, replace(hydrotron, collected=True)
            ),
        )
        for _ in range(HYDROTRON_TOKEN_REWARD):
            bonus = Token(position=spawn_position(state, rng))
            state = replace(state, tokens=state.tokens.append(bonus))
        return state
    return state


def collect_gravitron(state: State, index: int) -> State:
    gravitron = state.gravitron
    player = state.players[index]
    if gravitron is None or gravitron.collected or gravitron.position != player.position:
        return state
    player = replace(player, is_alive=False, hydrotrons_collected=0, trail=pvector())
    return replace(
        state,
        players=state.players.set(index, player),
        gravitron=replace(gravitron, collected=True, active=False),
        gravitron_active=False,
        gravitron_death=True,
    )


def evade_gravitron(state: State, index: int, rng: random.Random) -> State:
    gravitron = state.gravitron
    player = state.players[index]
    if gravitron is None or gravitron.collected or not player.is_alive:
        return state
    if manhattan_distance(player.position, gravitron.position) > GRAVITRON_PROXIMITY_THRESHOLD:
        return state
    if player.bullet_count >= STABILITY_THRESHOLD:
        return state
    # Occupancy includes the current cell, so the GraviTron always relocates.
    new_position = spawn_position(state, rng)
    return replace(state, gravitron=replace(gravitron, position=new_position))
