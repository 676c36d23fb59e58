"""Round construction and resets.

``initial_state`` builds the first round of a game; ``reset_round`` starts the
next round while carrying over the cross-round accumulators; ``reset_game``
throws everything away. All three return fresh immutable states.
"""

from __future__ import annotations

import random
from dataclasses import replace
from typing import List, Optional

from pyrsistent import pvector

from grid_tron.components import Player
from grid_tron.constants import INITIAL_TOKEN_COUNT
from grid_tron.state import State
from grid_tron.types import GameMode
from grid_tron.utils.rng import ROUND_SALT, state_rng
from grid_tron.utils.spawn import spawn_position
from .factories import create_player, create_token


def initialize_players(width: int, height: int, mode: GameMode) -> List[Player]:
    """Player 1 always; player 2 only in two-player rounds."""
    players = [create_player(1, width, height)]
    if mode == GameMode.TWO:
        players.append(create_player(2, width, height))
    return players


def _spawn_initial_tokens(state: State) -> State:
    rng = state_rng(state, ROUND_SALT)
    for _ in range(INITIAL_TOKEN_COUNT):
        token = create_token(spawn_position(state, rng))
        state = replace(state, tokens=state.tokens.append(token))
    return state


def initial_state(
    width: int,
    height: int,
    mode: GameMode = GameMode.SINGLE,
    seed: Optional[int] = None,
) -> State:
    """Build round 1 of a new game.

    Args:
        width (int): Grid width in cells.
        height (int): Grid height in cells.
        mode (GameMode): Single-player or two-player.
        seed (int | None): Spawn seed. A random one is drawn when omitted so
            the stored state is always reproducible.
    """
    if seed is None:
        seed = random.randrange(2**31)
    state = State(
        width=width,
        height=height,
        mode=mode,
        players=pvector(initialize_players(width, height, mode)),
        seed=seed,
    )
    return _spawn_initial_tokens(state)


def reset_round(state: State) -> State:
    """Start the next round.

    Positions, trails, bullets and pickups are rebuilt. ``score`` carries over
    in both modes; single-player also keeps ``neutron_bomb_count`` and
    ``hydrotrons_collected``. The round counter increments and the per-round
    token tally restarts.
    """
    players: List[Player] = []
    for old, new in zip(state.players, initialize_players(state.width, state.height, state.mode)):
        if state.mode == GameMode.SINGLE:
            new = replace(
                new,
                neutron_bomb_count=old.neutron_bomb_count,
                hydrotrons_collected=old.hydrotrons_collected,
            )
        players.append(replace(new, score=old.score))

    fresh = State(
        width=state.width,
        height=state.height,
        mode=state.mode,
        players=pvector(players),
        round=state.round + 1,
        turn=state.turn,
        seed=state.seed,
    )
    return _spawn_initial_tokens(fresh)


def reset_game(
    width: int,
    height: int,
    mode: GameMode = GameMode.SINGLE,
    seed: Optional[int] = None,
) -> State:
    """Discard every accumulator and build a brand new round 1."""
    return initial_state(width, height, mode, seed)
