"""Convenience factories for round entities.

Each helper returns a fresh record in its starting configuration. Player start
cells follow the arena layout: player 1 a quarter of the way in heading right,
player 2 three quarters of the way in heading left, both on the middle row.
"""

from __future__ import annotations

from grid_tron.components import Player, Position, Token
from grid_tron.types import Direction, PlayerID


def start_position(player_id: PlayerID, width: int, height: int) -> Position:
    """Return the starting head cell for ``player_id``."""
    fraction = 0.25 if player_id == 1 else 0.75
    return Position(int(width * fraction), height // 2)


def start_direction(player_id: PlayerID) -> Direction:
    return Direction.RIGHT if player_id == 1 else Direction.LEFT


def create_player(player_id: PlayerID, width: int, height: int) -> Player:
    """Player at its start cell with an empty trail and zeroed counters."""
    direction = start_direction(player_id)
    return Player(
        id=player_id,
        position=start_position(player_id, width, height),
        direction=direction,
        pending_direction=direction,
    )


def create_token(position: Position) -> Token:
    return Token(position=position)
