"""Property component aggregates.

All properties are immutable dataclasses; adding one to (or removing one
from) a component store is how state changes are expressed between ticks.
"""

from .agent import Agent
from .dead import Dead
from .deflector import Deflector
from .moving import Moving
from .position import Position

__all__ = [
    "Agent",
    "Dead",
    "Deflector",
    "Moving",
    "Position",
]
