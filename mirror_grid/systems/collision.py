"""Mover-vs-mover collision system.

Every pair of live automatic movers that occupy the same cell after moving
is destroyed. Three or more movers landing on one cell are all destroyed.
The movers are only *marked* ``Dead`` here; removal from the live collection
happens once, in :func:`mirror_grid.utils.gc.run_garbage_collector`.
"""

import logging
from dataclasses import replace
from typing import Set

from pyrsistent import pmap

from mirror_grid.components import Dead
from mirror_grid.state import State
from mirror_grid.types import EntityID
from mirror_grid.utils.ecs import colocated_groups

logger = logging.getLogger(__name__)


def collided_automatic(state: State) -> Set[EntityID]:
    """Return the ids of all automatic movers sharing a cell with another one."""
    collided: Set[EntityID] = set()
    for group in colocated_groups(state, state.automatic):
        collided |= group
    return collided


def collision_system(state: State) -> State:
    """Mark colliding automatic movers as dead."""
    collided = collided_automatic(state)
    if not collided:
        return state
    logger.debug("Movers collided on turn %d: %s", state.turn + 1, sorted(collided))
    dead = state.dead.update(pmap({eid: Dead() for eid in collided}))
    return replace(state, dead=dead)
