"""Single-player progression pickups.

``PurpleBullet`` (the NeuTron pickup) and ``GraviTron`` are singletons stored
as ``Optional`` fields on :class:`grid_tron.state.State`; several
``HydroTron`` instances may coexist.
"""

from dataclasses import dataclass

from grid_tron.components.position import Position


@dataclass(frozen=True)
class PurpleBullet:
    """NeuTron pickup: trades surplus bullets for a bomb and a clean trail."""

    position: Position
    collected: bool = False


@dataclass(frozen=True)
class HydroTron:
    """Consumes bomb charges, grants bonus tokens and progress to the GraviTron."""

    position: Position
    collected: bool = False


@dataclass(frozen=True)
class GraviTron:
    """Terminal hazard that flees players without enough bullets.

    Attributes:
        position: Current cell; changes when it evades.
        collected: True once caught (the catching player dies).
        active: True from spawn until caught.
    """

    position: Position
    collected: bool = False
    active: bool = True
