"""Keyboard bindings.

Maps raw key names (browser-style ``KeyboardEvent.key`` values) to
:class:`Intent` objects for the active game mode:

* Single-player: arrow keys steer, ``1`` shoots, ``2`` deploys a NeuTron bomb.
* Two-player: player 1 steers with WASD and shoots with ``1``; player 2 steers
    with the arrow keys and shoots with ``/``.
* Space toggles pause in both modes.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from grid_tron.actions import Action
from grid_tron.types import GameMode, PlayerID


@dataclass(frozen=True)
class Intent:
    """A player action waiting to be applied."""

    player_id: PlayerID
    action: Action


PAUSE_KEY = " "

SINGLE_PLAYER_KEYS: Dict[str, Intent] = {
    "ArrowUp": Intent(1, Action.UP),
    "ArrowDown": Intent(1, Action.DOWN),
    "ArrowLeft": Intent(1, Action.LEFT),
    "ArrowRight": Intent(1, Action.RIGHT),
    "1": Intent(1, Action.SHOOT),
    "2": Intent(1, Action.DEPLOY_NEUTRON),
}

TWO_PLAYER_KEYS: Dict[str, Intent] = {
    "w": Intent(1, Action.UP),
    "s": Intent(1, Action.DOWN),
    "a": Intent(1, Action.LEFT),
    "d": Intent(1, Action.RIGHT),
    "1": Intent(1, Action.SHOOT),
    "ArrowUp": Intent(2, Action.UP),
    "ArrowDown": Intent(2, Action.DOWN),
    "ArrowLeft": Intent(2, Action.LEFT),
    "ArrowRight": Intent(2, Action.RIGHT),
    "/": Intent(2, Action.SHOOT),
}

KEY_BINDINGS: Dict[GameMode, Dict[str, Intent]] = {
    GameMode.SINGLE: SINGLE_PLAYER_KEYS,
    GameMode.TWO: TWO_PLAYER_KEYS,
}


def translate_key(mode: GameMode, key: str) -> Optional[Intent]:
    """Return the intent bound to ``key`` in ``mode``, or ``None`` if unbound."""
    if key == PAUSE_KEY:
        return Intent(1, Action.PAUSE)
    return KEY_BINDINGS[mode].get(key)
