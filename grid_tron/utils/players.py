"""Player queries and updates.

Small helpers so systems can address players by id without repeating index
bookkeeping. All functions are pure.
"""

from dataclasses import replace
from typing import List

from grid_tron.components import Player
from grid_tron.state import State
from grid_tron.types import PlayerID


def player_index(state: State, player_id: PlayerID) -> int:
    """Return the index of ``player_id`` in ``state.players``.

    Raises:
        ValueError: If the round has no such player.
    """
    for index, player in enumerate(state.players):
        if player.id == player_id:
            return index
    raise ValueError(f"State contains no player {player_id}")


def get_player(state: State, player_id: PlayerID) -> Player:
    return state.players[player_index(state, player_id)]


def set_player(state: State, player: Player) -> State:
    """Return a state with ``player`` replacing the record sharing its id."""
    index = player_index(state, player.id)
    return replace(state, players=state.players.set(index, player))


def alive_players(state: State) -> List[Player]:
    return [player for player in state.players if player.is_alive]
