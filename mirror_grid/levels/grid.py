from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from mirror_grid.components import Position as PositionComp
from mirror_grid.exceptions import ConflictingDeflectorsError, OutOfBoundsError
from mirror_grid.types import Heading, Orientation

# Grid coordinate alias (x, y)
Position = Tuple[int, int]


@dataclass(frozen=True)
class MoverSpec:
    """Authoring-time mobile entity: start cell and heading."""

    pos: Position
    heading: Heading


@dataclass(frozen=True)
class DeflectorSpec:
    """Authoring-time deflector: cell and orientation."""

    pos: Position
    orientation: Orientation


@dataclass
class Level:
    """
    Authoring-time level representation.
    - `player` is the single player mover (required before conversion).
    - `automatic` keeps movers in the order they were added; that order is the
      processing order of the simulation.
    - `deflectors` never share a cell; `add_deflector` rejects duplicates.
    - Level stores simple meta (turn/lose/message) carried through conversion.
    This module is State-agnostic. Use the converter (levels.convert.to_state / from_state)
    to bridge between Level and the immutable ECS State.
    """

    width: int
    height: int

    player: Optional[MoverSpec] = None
    automatic: List[MoverSpec] = field(default_factory=list)
    deflectors: List[DeflectorSpec] = field(default_factory=list)

    # Optional meta (carried through conversion)
    turn: int = 0
    lose: bool = False
    message: Optional[str] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid grid size {self.width}x{self.height}")

    # -------- Authoring API --------

    def set_player(self, pos: Position, heading: Heading) -> None:
        """
        Place (or replace) the player at pos (x, y) heading in `heading`.
        """
        self._check_bounds(*pos)
        self.player = MoverSpec(pos, Heading(heading))

    def add_automatic(self, pos: Position, heading: Heading) -> None:
        """
        Append an automatic mover. Movers are processed in insertion order.
        """
        self._check_bounds(*pos)
        self.automatic.append(MoverSpec(pos, Heading(heading)))

    def add_deflector(self, pos: Position, orientation: Orientation) -> None:
        """
        Place a deflector at pos. Raises ConflictingDeflectorsError if the cell
        already holds one.
        """
        self._check_bounds(*pos)
        if self.deflector_at(pos) is not None:
            raise ConflictingDeflectorsError(PositionComp(*pos))
        self.deflectors.append(DeflectorSpec(pos, Orientation(orientation)))

    def add_many_automatic(self, items: List[Tuple[Position, Heading]]) -> None:
        for pos, heading in items:
            self.add_automatic(pos, heading)

    def add_many_deflectors(self, items: List[Tuple[Position, Orientation]]) -> None:
        for pos, orientation in items:
            self.add_deflector(pos, orientation)

    def deflector_at(self, pos: Position) -> Optional[DeflectorSpec]:
        """
        Return the deflector at pos, if any.
        """
        for spec in self.deflectors:
            if spec.pos == pos:
                return spec
        return None

    # -------- Internal helpers --------

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(PositionComp(x, y), self.width, self.height)
