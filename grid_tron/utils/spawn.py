"""Pickup placement helpers.

Every pickup spawns on a cell free of player heads, trails and other live
pickups. Occupancy is only checked at spawn time.
"""

import random
from typing import Iterable, Set

from grid_tron.components import Position
from grid_tron.state import State
from grid_tron.utils.grid import random_unoccupied_position


def occupied_positions(state: State) -> Set[Position]:
    """Return every cell taken by a head, a trail or an uncollected pickup."""
    occupied: Set[Position] = set()
    for player in state.players:
        occupied.add(player.position)
        occupied.update(player.trail)
    occupied.update(t.position for t in state.tokens if not t.collected)
    occupied.update(h.position for h in state.hydrotrons if not h.collected)
    if state.purple_bullet is not None and not state.purple_bullet.collected:
        occupied.add(state.purple_bullet.position)
    if state.gravitron is not None and not state.gravitron.collected:
        occupied.add(state.gravitron.position)
    return occupied


def spawn_position(
    state: State, rng: random.Random, extra: Iterable[Position] = ()
) -> Position:
    """Pick a free cell for a new pickup.

    Args:
        state (State): Snapshot whose entities define occupancy.
        rng (random.Random): Generator for this tick or action.
        extra (Iterable[Position]): Additional cells to avoid (e.g. a pickup
            placed earlier in the same batch but not yet stored on ``state``).
    """
    occupied = occupied_positions(state)
    occupied.update(extra)
    return random_unoccupied_position(state.width, state.height, occupied, rng)
