"""Deterministic random generators derived from a state snapshot.

Spawning must not make ``step`` impure, so every random draw comes from a
generator seeded by ``(seed, turn, salt)``. Integer tuples hash identically
across processes, unlike strings.
"""

import random

from grid_tron.state import State

TICK_SALT = 0
ACTION_SALT = 1
ROUND_SALT = 2


def state_rng(state: State, salt: int = TICK_SALT) -> random.Random:
    """Return a generator for ``state``; ``salt`` separates independent draws."""
    base_seed = hash((state.seed if state.seed is not None else 0, state.turn, salt))
    return random.Random(base_seed)
