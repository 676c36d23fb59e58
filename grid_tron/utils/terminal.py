"""Terminal condition helper predicates."""

from grid_tron.state import State


def is_terminal_state(state: State) -> bool:
    """Return True once the round is over (crash, draw, win or GraviTron death)."""
    return state.is_game_over or state.gravitron_death


def is_frozen_state(state: State) -> bool:
    """Return True if ticks must not advance the state."""
    return is_terminal_state(state) or state.is_game_paused
