"""State reducer and tick orchestration.

This module wires together all systems in the order that defines a single
*tick*. The exported :func:`step` is the only gameplay progression entry point
and is pure: it returns a *new* :class:`grid_tron.state.State`, and the random
draws it makes are seeded from the snapshot itself. :func:`apply_action` is the
matching entry point for player intents injected between ticks.

Ordering (it decides every tie-break):

1. Pickup availability (single-player): HydroTron top-up, GraviTron spawn,
    NeuTron spawn. A tick that spawns the NeuTron pickup ends right there.
2. ``collectible_system``: pickups under each living head, in index order.
3. ``movement_system``: players advance one cell and crash.
4. ``collectible_system`` again for the cells just entered, so a pickup is
    taken on the tick a player arrives on it. GraviTron evasion is skipped
    here; it only reacts to the pre-movement heads.
5. ``bullet_system``: bullets fly and cut trails.
6. Garbage collection of finished entities.
7. ``terminal_system``: game over, draw or winner.
"""

from dataclasses import replace

from grid_tron.actions import ACTION_DIRECTIONS, Action
from grid_tron.state import State
from grid_tron.systems.bullet import bullet_system
from grid_tron.systems.collectible import collectible_system
from grid_tron.systems.intent import (
    direction_system,
    neutron_bomb_system,
    pause_system,
    shoot_system,
)
from grid_tron.systems.movement import movement_system
from grid_tron.systems.spawn import (
    gravitron_spawn_system,
    hydrotron_spawn_system,
    neutron_spawn_system,
)
from grid_tron.systems.terminal import terminal_system
from grid_tron.types import PlayerID
from grid_tron.utils.gc import run_garbage_collector
from grid_tron.utils.rng import state_rng
from grid_tron.utils.terminal import is_frozen_state


def step(state: State) -> State:
    """Advance the round by one tick.

    Args:
        state (State): Previous immutable round state.

    Returns:
        State: Next snapshot. A paused or finished round is returned unchanged.
    """
    if is_frozen_state(state):
        return state

    rng = state_rng(state)
    previous_tokens = state.tokens

    state = hydrotron_spawn_system(state, rng)
    state = gravitron_spawn_system(state, rng)
    spawned = neutron_spawn_system(state, rng)
    if spawned.purple_bullet is not state.purple_bullet:
        # NeuTron spawn ticks apply nothing but the spawns.
        return _after_step(spawned)

    state = collectible_system(state, rng)
    state = movement_system(state)
    state = collectible_system(state, rng, evade=False)
    state = bullet_system(state)
    state = run_garbage_collector(state, previous_tokens)
    state = terminal_system(state)
    return _after_step(state)


def apply_action(state: State, action: Action, player_id: PlayerID = 1) -> State:
    """Apply a player intent between ticks.

    Args:
        state (State): Current state.
        action (Action): Intent to apply.
        player_id (PlayerID): Acting player (ignored for ``PAUSE``).

    Returns:
        State: Updated state, or the same state when the intent is a no-op.

    Raises:
        ValueError: If the action is not recognized or the player does not exist.
    """
    if action in ACTION_DIRECTIONS:
        return direction_system(state, player_id, ACTION_DIRECTIONS[action])
    elif action == Action.SHOOT:
        return shoot_system(state, player_id)
    elif action == Action.DEPLOY_NEUTRON:
        return neutron_bomb_system(state, player_id)
    elif action == Action.PAUSE:
        return pause_system(state)
    raise ValueError("Action is not valid")


def _after_step(state: State) -> State:
    return replace(state, turn=state.turn + 1)
