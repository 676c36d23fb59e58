"""grid_tron.components
=====================

Aggregate import surface for the immutable records that make up a round.

Every record is a frozen ``@dataclass``; systems express change by building
new instances (usually through :func:`dataclasses.replace`) and storing them in
a new :class:`grid_tron.state.State`. Ordered collections such as a player's
trail are ``pyrsistent.PVector`` values so copies share structure.

Import from here rather than the individual modules::

    from grid_tron.components import Player, Position, Token

"""

from .bullet import Bullet
from .pickups import GraviTron, HydroTron, PurpleBullet
from .player import Player
from .position import Position
from .token import Token

__all__ = [
    "Bullet",
    "GraviTron",
    "HydroTron",
    "Player",
    "Position",
    "PurpleBullet",
    "Token",
]
