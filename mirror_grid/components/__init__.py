"""mirror_grid.components
=================================

Aggregate import surface for the ECS component dataclasses used by the
engine, e.g.::

    from mirror_grid.components import Position, Moving, Deflector

All component classes are simple frozen ``@dataclass`` value objects; they
carry no behavior and are manipulated by systems during :func:`advance`.
"""

from .properties import Agent
from .properties import Dead
from .properties import Deflector
from .properties import Moving
from .properties import Position

__all__ = [
    "Agent",
    "Dead",
    "Deflector",
    "Moving",
    "Position",
]
