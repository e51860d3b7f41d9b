"""ECS convenience queries.

Helper functions for querying entity/component relationships without
introducing iteration logic into systems. All functions are pure and operate
on the immutable :class:`mirror_grid.state.State` snapshot.

Performance: ``colocated_groups`` uses a cached reverse index of the immutable
``State.position`` PMap, built once per position store.
"""

from functools import lru_cache
from typing import Dict, FrozenSet, Iterable, Mapping, List, Set

from mirror_grid.components import Position
from mirror_grid.state import State
from mirror_grid.types import EntityID


@lru_cache(maxsize=4096)
def _position_index(
    position_store: Mapping[EntityID, Position],
) -> Mapping[Position, FrozenSet[EntityID]]:
    """Build a reverse index from position to entity IDs.

    The argument is a persistent/immutable PMap, which is hashable and thus
    safe to use with ``lru_cache``. Any new ``State`` (or updated position
    store) produces a distinct key, ensuring correctness across ticks.
    """
    index: Dict[Position, Set[EntityID]] = {}
    for eid, pos in position_store.items():
        index.setdefault(pos, set()).add(eid)
    return {pos: frozenset(eids) for pos, eids in index.items()}


def colocated_groups(state: State, entity_ids: Iterable[EntityID]) -> List[Set[EntityID]]:
    """Return every group of two or more of ``entity_ids`` sharing a cell.

    Groups are ordered by cell (row-major) so callers iterate deterministically.
    """
    wanted = set(entity_ids)
    idx = _position_index(state.position)
    groups: List[Set[EntityID]] = []
    for pos in sorted(idx, key=lambda p: (p.y, p.x)):
        group = set(idx[pos]) & wanted
        if len(group) >= 2:
            groups.append(group)
    return groups
