"""Trail helpers.

A trail is the ordered history of cells a player vacated, oldest first. Bullets
cut trails: the segment from the hit cell back to the tail is destroyed and the
head-ward remainder survives.
"""

from typing import Iterable, Optional, Set

from pyrsistent.typing import PVector

from grid_tron.components import Player, Position


def trail_hit_index(pos: Position, trail: PVector[Position]) -> Optional[int]:
    """Return the index of the first trail cell equal to ``pos``, if any."""
    for index, cell in enumerate(trail):
        if cell == pos:
            return index
    return None


def cut_trail(trail: PVector[Position], hit_index: int) -> PVector[Position]:
    """Keep only the cells after ``hit_index`` (closer to the head)."""
    return trail[hit_index + 1 :]


def trail_cells(players: Iterable[Player]) -> Set[Position]:
    """Union of every trail cell of ``players``."""
    cells: Set[Position] = set()
    for player in players:
        cells.update(player.trail)
    return cells
