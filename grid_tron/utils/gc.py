"""End-of-tick cleanup.

Prunes entities that finished their lifecycle during the tick: inactive
bullets, collected tokens, collected HydroTrons and a collected NeuTron pickup.
The GraviTron is kept after being caught so renderers can show where the round
ended.
"""

from dataclasses import replace

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_tron.components import Token
from grid_tron.state import State


def run_garbage_collector(state: State, previous_tokens: PVector[Token]) -> State:
    """Drop finished entities.

    Args:
        state (State): State after collection, movement and bullet passes.
        previous_tokens (PVector[Token]): Token list the tick started with.
            Restored if filtering would leave no tokens at all.
    """
    tokens = pvector(t for t in state.tokens if not t.collected)
    if len(tokens) == 0:
        tokens = previous_tokens
    purple_bullet = state.purple_bullet
    if purple_bullet is not None and purple_bullet.collected:
        purple_bullet = None
    return replace(
        state,
        bullets=pvector(b for b in state.bullets if b.active),
        tokens=tokens,
        hydrotrons=pvector(h for h in state.hydrotrons if not h.collected),
        purple_bullet=purple_bullet,
    )
