"""Custom exceptions for the simulation engine."""

from mirror_grid.components import Position


class SimulationError(Exception):
    """Base exception for engine errors."""

    pass


class OutOfBoundsError(SimulationError, IndexError):
    """Raised when a computed or authored position falls outside the grid.

    This is a level authoring bug: deflectors must redirect entities before
    they reach an edge.
    """

    def __init__(self, position: Position, width: int, height: int):
        self.position = position
        self.width = width
        self.height = height
        super().__init__(
            f"Out of bounds: {(position.x, position.y)} for grid {width}x{height}"
        )


class ConflictingDeflectorsError(SimulationError, ValueError):
    """Raised when two deflectors are registered on the same cell."""

    def __init__(self, position: Position):
        self.position = position
        super().__init__(
            f"Conflicting deflectors at {(position.x, position.y)}"
        )
