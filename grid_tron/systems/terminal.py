"""Round termination system.

Evaluated once at the end of every tick:

* A GraviTron death ends the round unconditionally, overriding everything else.
* No surviving player ends the round without a winner (a draw in two-player).
* In two-player rounds a lone survivor wins and earns a point.
"""

from dataclasses import replace

from grid_tron.state import State
from grid_tron.types import GameMode
from grid_tron.utils.players import alive_players, player_index


def terminal_system(state: State) -> State:
    if state.gravitron_death:
        return replace(state, is_game_over=True, winner_id=None)

    alive = alive_players(state)
    if not alive:
        return replace(state, is_game_over=True, winner_id=None)

    if state.mode == GameMode.TWO and len(alive) == 1:
        winner = alive[0]
        index = player_index(state, winner.id)
        return replace(
            state,
            players=state.players.set(index, replace(winner, score=winner.score + 1)),
            is_game_over=True,
            winner_id=winner.id,
        )
    return state
