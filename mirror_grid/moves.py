"""Heading arithmetic and the deflector reflection table.

Every mobile entity moves exactly one cell per tick along its heading. When
the cell it enters holds a deflector the heading is turned 90 degrees and the
entity is carried one further cell along the new heading, like a ray hitting
a 45 degree mirror: travelling ``UP`` into a ``"\\"`` deflector exits to the
``LEFT``.

The functions here do not look at bounds or at other entities; callers
(see :func:`mirror_grid.systems.moving.step_entity`) validate the result.
"""

from typing import Dict, Tuple

from mirror_grid.components import Position
from mirror_grid.types import Heading, Orientation


HEADING_DELTA: Dict[Heading, Tuple[int, int]] = {
    Heading.UP: (0, -1),
    Heading.DOWN: (0, 1),
    Heading.LEFT: (-1, 0),
    Heading.RIGHT: (1, 0),
}

REFLECTION: Dict[Orientation, Dict[Heading, Heading]] = {
    Orientation.BACKSLASH: {
        Heading.UP: Heading.LEFT,
        Heading.DOWN: Heading.RIGHT,
        Heading.LEFT: Heading.UP,
        Heading.RIGHT: Heading.DOWN,
    },
    Orientation.SLASH: {
        Heading.UP: Heading.RIGHT,
        Heading.DOWN: Heading.LEFT,
        Heading.LEFT: Heading.DOWN,
        Heading.RIGHT: Heading.UP,
    },
}


def translate(pos: Position, heading: Heading) -> Position:
    """Return the neighbouring cell of ``pos`` in direction ``heading``.

    The result may lie outside the grid (e.g. ``x == -1``).
    """
    dx, dy = HEADING_DELTA[heading]
    return Position(pos.x + dx, pos.y + dy)


def reflect(heading: Heading, orientation: Orientation) -> Heading:
    """Return the heading after entering a deflector of ``orientation``."""
    return REFLECTION[orientation][heading]
