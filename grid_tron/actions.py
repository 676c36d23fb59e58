"""Action enumerations.

``Action`` covers every intent a player (or the host UI) can inject between
ticks. ``MOVE_ACTIONS`` is the canonical ordered list of steering actions;
checks like ``if action in MOVE_ACTIONS`` are preferred over name comparisons.
"""

from enum import StrEnum, auto
from typing import Dict

from grid_tron.types import Direction


class Action(StrEnum):
    """String enum of player intents.

    Members:
        UP, DOWN, LEFT, RIGHT: Stage a new heading for the next tick.
        SHOOT: Fire a bullet along the current heading.
        DEPLOY_NEUTRON: Spend a NeuTron bomb (single-player).
        PAUSE: Toggle the pause flag.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SHOOT = auto()
    DEPLOY_NEUTRON = auto()
    PAUSE = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

ONE_SHOT_ACTIONS = [Action.SHOOT, Action.DEPLOY_NEUTRON]

ACTION_DIRECTIONS: Dict[Action, Direction] = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}
