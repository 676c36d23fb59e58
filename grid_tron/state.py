"""Core immutable round ``State`` dataclass.

This module defines the frozen :class:`State` object that represents a whole
round at a single tick. The tick engine (:func:`grid_tron.step.step`) and the
intent reducers are pure functions that take a previous ``State`` and return a
*new* one; no mutation happens in place, so the lifecycle controller can swap
snapshots wholesale and renderers can hold on to any snapshot safely.

Design notes:

* Ordered collections (players, tokens, bullets, HydroTrons and every trail)
    are ``pyrsistent.PVector`` values. Players are kept in index order, which
    is also the tie-break order inside a tick.
* Singleton pickups (NeuTron pickup, GraviTron) are ``Optional`` fields:
    ``None`` means the entity does not exist.
* ``seed`` and ``turn`` together seed the per-tick random generator used for
    spawning, so ``step`` is deterministic for a given snapshot.
* ``is_game_over`` is terminal for the round; ``step`` returns such a state
    unchanged.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import PMap, pmap, pvector
from pyrsistent.typing import PVector

from grid_tron.components import (
    Bullet,
    GraviTron,
    HydroTron,
    Player,
    PurpleBullet,
    Token,
)
from grid_tron.types import GameMode, PlayerID


@dataclass(frozen=True)
class State:
    """Immutable round state.

    Attributes:
        width (int): Grid width in cells.
        height (int): Grid height in cells.
        mode (GameMode): Single-player survival or two-player head-to-head.
        players (PVector[Player]): One or two players, in index order.
        tokens (PVector[Token]): Live bullet pickups.
        bullets (PVector[Bullet]): Projectiles in flight.
        purple_bullet (PurpleBullet | None): NeuTron pickup, if present.
        hydrotrons (PVector[HydroTron]): Live HydroTron pickups.
        gravitron (GraviTron | None): GraviTron, if spawned this round.
        gravitron_active (bool): Presentation flag set when the GraviTron spawns.
        gravitron_death (bool): Terminal flag set when the GraviTron is caught.
        is_game_over (bool): Round finished.
        is_game_paused (bool): Ticks are suspended.
        winner_id (PlayerID | None): Two-player winner; ``None`` on a draw.
        round (int): 1-based round counter.
        tokens_collected (int): Tokens collected by player 1 this round (single-player).
        turn (int): Ticks advanced so far.
        seed (int | None): Base RNG seed for spawning.
    """

    width: int
    height: int
    mode: GameMode = GameMode.SINGLE

    # Entities
    players: PVector[Player] = pvector()
    tokens: PVector[Token] = pvector()
    bullets: PVector[Bullet] = pvector()
    purple_bullet: Optional[PurpleBullet] = None
    hydrotrons: PVector[HydroTron] = pvector()
    gravitron: Optional[GraviTron] = None

    # Status
    gravitron_active: bool = False
    gravitron_death: bool = False
    is_game_over: bool = False
    is_game_paused: bool = False
    winner_id: Optional[PlayerID] = None
    round: int = 1
    tokens_collected: int = 0
    turn: int = 0

    # RNG
    seed: Optional[int] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Empty vectors and falsy scalars are skipped to keep diagnostics short.

        Returns:
            PMap[str, Any]: Persistent map of field name to value.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, type(pvector())) and len(value) == 0:
                continue
            if value is None or value is False:
                continue
            description = description.set(field, value)
        return description
