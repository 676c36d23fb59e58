"""Token component (bullet pickup)."""

from dataclasses import dataclass

from grid_tron.components.position import Position


@dataclass(frozen=True)
class Token:
    """Grants one bullet when a player's head reaches it.

    Collected tokens linger with ``collected=True`` until the end-of-tick
    cleanup prunes them.
    """

    position: Position
    collected: bool = False
