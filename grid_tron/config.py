"""Game configuration and session context.

``GameConfig`` carries what the setup screen decides (grid size, speed, mode)
and validates it on construction. ``SessionContext`` is the explicit stand-in
for a logged-in user; it is passed to the controller rather than read from any
process-wide store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from grid_tron.constants import (
    DEFAULT_FPS,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    MAX_FPS,
    MAX_GRID_SIZE,
    MIN_FPS,
    MIN_GRID_SIZE,
)
from grid_tron.types import GameMode


def validate_frames_per_second(frames_per_second: int) -> None:
    """Raise ``ValueError`` unless the tick rate is within the setup bounds."""
    if not MIN_FPS <= frames_per_second <= MAX_FPS:
        raise ValueError(
            f"frames_per_second must be between {MIN_FPS} and {MAX_FPS}, got {frames_per_second}"
        )


def tick_interval(frames_per_second: int) -> float:
    """Seconds between ticks, rounded to whole milliseconds."""
    return round(1000 / frames_per_second) / 1000


@dataclass(frozen=True)
class GameConfig:
    """Validated setup choices.

    Attributes:
        width: Grid width in cells (20-80).
        height: Grid height in cells (20-80).
        frames_per_second: Tick rate (2-200).
        mode: Single-player or two-player.

    Raises:
        ValueError: On any out-of-range value.
    """

    width: int = DEFAULT_GRID_WIDTH
    height: int = DEFAULT_GRID_HEIGHT
    frames_per_second: int = DEFAULT_FPS
    mode: GameMode = GameMode.SINGLE

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not MIN_GRID_SIZE <= value <= MAX_GRID_SIZE:
                raise ValueError(
                    f"{name} must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}, got {value}"
                )
        validate_frames_per_second(self.frames_per_second)
        # Accept the raw "single" / "two" strings too.
        object.__setattr__(self, "mode", GameMode(self.mode))

    @property
    def tick_interval(self) -> float:
        return tick_interval(self.frames_per_second)


@dataclass(frozen=True)
class SessionContext:
    """Who is playing.

    Attributes:
        user_id: Account id, ``None`` when playing anonymously.
        display_name: Name shown on the leaderboard.
    """

    user_id: Optional[str] = None
    display_name: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user_id) and bool(self.display_name)
