"""Grid bounds & deflector lookup helpers.

Functions here are pure and intentionally lightweight; they are called for
every entity on every tick.
"""

from typing import Dict

from mirror_grid.components import Deflector, Position
from mirror_grid.exceptions import OutOfBoundsError
from mirror_grid.state import State
from mirror_grid.types import Bounds


def is_in_bounds(bounds: Bounds, pos: Position) -> bool:
    """Return True if ``pos`` lies within the ``(width, height)`` rectangle."""
    width, height = bounds
    return 0 <= pos.x < width and 0 <= pos.y < height


def check_in_bounds(bounds: Bounds, pos: Position) -> Position:
    """Return ``pos`` unchanged, raising :class:`OutOfBoundsError` if outside."""
    if not is_in_bounds(bounds, pos):
        width, height = bounds
        raise OutOfBoundsError(pos, width, height)
    return pos


def deflectors_by_position(state: State) -> Dict[Position, Deflector]:
    """Index the state's deflectors by the cell they occupy.

    Deflectors are guaranteed unique per cell at construction time (see
    :func:`mirror_grid.levels.convert.to_state`).
    """
    return {
        state.position[eid]: deflector
        for eid, deflector in state.deflector.items()
        if eid in state.position
    }
