"""Bullet component.

Projectile fired along the shooter's heading. Bullets travel
:data:`grid_tron.constants.BULLET_SPEED` cells per tick and cut the first
trail cell they strike.
"""

from dataclasses import dataclass

from grid_tron.components.position import Position
from grid_tron.types import Direction, PlayerID


@dataclass(frozen=True)
class Bullet:
    """Projectile.

    Attributes:
        position: Current cell.
        direction: Fixed heading.
        owner_id: Player that fired it (bullets may cut their owner's trail).
        active: False once it left the grid or hit a trail; pruned at cleanup.
    """

    position: Position
    direction: Direction
    owner_id: PlayerID
    active: bool = True
