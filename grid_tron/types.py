"""Common type aliases and enumerations."""

from enum import StrEnum, auto


PlayerID = int


class Direction(StrEnum):
    """Cardinal heading of a player or bullet."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class GameMode(StrEnum):
    """Single-player survival or two-player head-to-head."""

    SINGLE = "single"
    TWO = "two"


class Phase(StrEnum):
    """Lifecycle phases driven by :class:`grid_tron.controller.GameController`."""

    SETUP = auto()
    PLAYING = auto()
    PAUSED = auto()
    ROUND_OVER = auto()
