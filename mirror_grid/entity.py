"""Entity primitives & ID generation.

The engine models each *thing* on the grid as an ``EntityID`` (an integer)
plus zero or more component dataclasses stored in persistent maps on
:class:`mirror_grid.state.State`.

IDs are *not* recycled: a mover removed by a collision leaves a gap.
Level conversion allocates ids from a fresh generator starting at zero, so
converting the same level twice yields equal states.
"""

from dataclasses import dataclass
from typing import Iterator

from mirror_grid.types import EntityID


@dataclass(frozen=True)
class Entity:
    """Registry marker for an allocated entity id."""

    pass


def entity_id_generator(start: int = 0) -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = start
    while True:
        yield eid
        eid += 1
