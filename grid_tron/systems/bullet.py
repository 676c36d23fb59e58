"""Bullet flight system.

Each active bullet advances up to ``BULLET_SPEED`` cells per tick, one
sub-step at a time, so it can reach and cut a trail two cells away within the
same tick. A sub-step that leaves the grid deactivates the bullet. A sub-step
that lands on any trail cell (the shooter's own included) cuts that trail and
deactivates the bullet: the cells from the hit point back to the tail are
destroyed and the head-ward part survives. Players are checked in index order.
"""

from dataclasses import replace
from typing import List

from pyrsistent import pvector

from grid_tron.components import Bullet, Player
from grid_tron.constants import BULLET_SPEED
from grid_tron.moves import translate
from grid_tron.state import State
from grid_tron.utils.grid import is_in_bounds
from grid_tron.utils.trail import cut_trail, trail_hit_index


def move_bullet(state: State, bullet: Bullet, players: List[Player]) -> Bullet:
    """Fly one bullet for a tick, cutting trails in ``players`` in place."""
    for _ in range(BULLET_SPEED):
        next_pos = translate(bullet.position, bullet.direction)
        if not is_in_bounds(state, next_pos):
            return replace(bullet, active=False)
        for index, player in enumerate(players):
            hit_index = trail_hit_index(next_pos, player.trail)
            if hit_index is not None:
                players[index] = replace(player, trail=cut_trail(player.trail, hit_index))
                return replace(bullet, active=False)
        bullet = replace(bullet, position=next_pos)
    return bullet


def bullet_system(state: State) -> State:
    players: List[Player] = list(state.players)
    bullets: List[Bullet] = []
    for bullet in state.bullets:
        if bullet.active:
            bullet = move_bullet(state, bullet, players)
        bullets.append(bullet)
    return replace(state, players=pvector(players), bullets=pvector(bullets))
