"""Deflector component.

A fixed diagonal mirror occupying one cell. Entities entering the cell are
turned 90 degrees and carried one further cell along the new heading. The
turn direction depends only on ``orientation`` and the incoming heading (see
:data:`mirror_grid.moves.REFLECTION`).
"""

from dataclasses import dataclass

from mirror_grid.types import Orientation


@dataclass(frozen=True)
class Deflector:
    """Immutable deflector.

    Attributes:
        orientation: ``Orientation.SLASH`` ("/") or ``Orientation.BACKSLASH`` ("\\").
    """

    orientation: Orientation
