"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents the
whole world at a single tick: the player, the ordered live collection of
automatic movers, the deflector layout and the grid bounds. All systems are
pure functions that take a previous ``State`` and return a *new* ``State``;
no mutation happens in-place. This makes the engine deterministic and means a
tick that raises can never leave a half-updated world behind.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not currently possess
    that component.
* ``automatic`` is a persistent *vector* of entity ids. Its order is the
    level order and is the order in which automatic movers are processed on
    every tick. Removing a mover drops it from this vector and (via GC) from
    every component store.
* ``lose`` mirrors the player's ``Dead`` marker. The reducer short-circuits
    on terminal states.

See :mod:`mirror_grid.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, PVector, pmap, pvector

from mirror_grid.entity import Entity
from mirror_grid.components import (
    Agent,
    Dead,
    Deflector,
    Moving,
    Position,
)
from mirror_grid.types import Bounds, EntityID


@dataclass(frozen=True)
class State:
    """Immutable ECS world state.

    Instances are *value objects*; every tick creates a new ``State``. Two
    states built from the same level data compare equal, which is what the
    determinism and round-trip guarantees are checked against.

    Attributes:
        width (int): Grid width in cells.
        height (int): Grid height in cells.
        entity (PMap[EntityID, Entity]): Registry of entity descriptors.
        agent (PMap[EntityID, Agent]): The player marker (exactly one entry).
        automatic (PVector[EntityID]): Live automatic movers in processing order.
        dead (PMap[EntityID, Dead]): Dead player marker; terminal once set.
        deflector (PMap[EntityID, Deflector]): Fixed deflector cells.
        moving (PMap[EntityID, Moving]): Heading of every mobile entity.
        position (PMap[EntityID, Position]): Current grid position of entities.
        turn (int): Number of ticks applied so far.
        lose (bool): True once the player has died.
        message (str | None): Optional informational / terminal message.
    """

    # Level
    width: int
    height: int

    # Entity
    entity: PMap[EntityID, Entity] = pmap()
    automatic: PVector[EntityID] = pvector()

    # Components
    agent: PMap[EntityID, Agent] = pmap()
    dead: PMap[EntityID, Dead] = pmap()
    deflector: PMap[EntityID, Deflector] = pmap()
    moving: PMap[EntityID, Moving] = pmap()
    position: PMap[EntityID, Position] = pmap()

    # Status
    turn: int = 0
    lose: bool = False
    message: Optional[str] = None

    @property
    def bounds(self) -> Bounds:
        """Grid size as ``(width, height)``."""
        return (self.width, self.height)

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Returns only those fields that are non-empty (for component stores) or
        truthy (for scalars). Useful for lightweight diagnostics without
        dumping empty maps.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, (type(pmap()), type(pvector()))) and len(value) == 0:
                continue
            if value is None:
                continue
            description = description.set(field, value)
        return description
