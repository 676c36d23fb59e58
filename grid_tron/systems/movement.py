"""Player movement system.

Every living player advances exactly one cell per tick:

1. The current head is appended to the trail.
2. ``pending_direction`` becomes ``direction`` and the next cell is computed.
3. Leaving the grid is fatal.
4. Entering any cell of the pre-movement snapshot is fatal. The snapshot is
    every player's trail plus every living head, since all heads are vacated
    (and become trail) during this tick; it does not depend on the order in
    which players are processed.
5. In two-player rounds, players that enter the same cell on the same tick
    both die.

A player that steps into the cell another head just vacated crashes into
that cell (it is trail now) while the other player moves on unharmed; it is
not treated as a head-on collision that kills both.

The head only moves if the player survived all checks; a crashed player keeps
its last head cell (which is also the last trail cell).
"""

from dataclasses import replace
from typing import Dict, List, Set

from pyrsistent import pvector

from grid_tron.components import Player, Position
from grid_tron.moves import translate
from grid_tron.state import State
from grid_tron.types import GameMode
from grid_tron.utils.grid import is_in_bounds
from grid_tron.utils.trail import trail_cells


def blocked_cells(state: State) -> Set[Position]:
    """Return the pre-movement collision snapshot."""
    blocked = trail_cells(state.players)
    blocked.update(p.position for p in state.players if p.is_alive)
    return blocked


def head_on_collisions(targets: Dict[int, Position]) -> Set[int]:
    """Return indices of players whose target cell is shared with another player."""
    counts: Dict[Position, int] = {}
    for pos in targets.values():
        counts[pos] = counts.get(pos, 0) + 1
    return {index for index, pos in targets.items() if counts[pos] > 1}


def movement_system(state: State) -> State:
    """Advance all living players by one cell and resolve crashes."""
    blocked = blocked_cells(state)
    players: List[Player] = list(state.players)
    targets: Dict[int, Position] = {}

    for index, player in enumerate(players):
        if not player.is_alive:
            continue
        direction = player.pending_direction
        next_pos = translate(player.position, direction)
        alive = is_in_bounds(state, next_pos) and next_pos not in blocked
        players[index] = replace(
            player,
            trail=player.trail.append(player.position),
            direction=direction,
            is_alive=alive,
        )
        if alive:
            targets[index] = next_pos

    if state.mode == GameMode.TWO:
        for index in head_on_collisions(targets):
            players[index] = replace(players[index], is_alive=False)
            del targets[index]

    for index, next_pos in targets.items():
        players[index] = replace(players[index], position=next_pos)

    return replace(state, players=pvector(players))
