"""Player component.

A light cycle: its head ``position``, heading, the staged heading applied on
the next tick, the trail of previously occupied cells and the per-player
counters that survive (or not) across rounds.
"""

from dataclasses import dataclass

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_tron.components.position import Position
from grid_tron.types import Direction, PlayerID


@dataclass(frozen=True)
class Player:
    """Player record.

    Attributes:
        id: Stable player id (1 or 2).
        position: Current head cell. Never part of ``trail`` while alive.
        direction: Heading used during the previous tick.
        pending_direction: Heading to apply on the next tick.
        trail: Previously occupied cells, oldest first.
        is_alive: False once the player crashed or caught the GraviTron.
        bullet_count: Bullets available to shoot.
        neutron_bomb_count: NeuTron bombs held (single-player).
        hydrotrons_collected: HydroTrons collected so far (single-player).
        score: Rounds won (two-player).
    """

    id: PlayerID
    position: Position
    direction: Direction
    pending_direction: Direction
    trail: PVector[Position] = pvector()
    is_alive: bool = True
    bullet_count: int = 0
    neutron_bomb_count: int = 0
    hydrotrons_collected: int = 0
    score: int = 0
