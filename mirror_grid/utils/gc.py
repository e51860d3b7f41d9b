"""Garbage collection utilities.

Removes dead automatic movers from the live collection and prunes every
component store down to reachable entity IDs. *Reachable* entities are:

* The player (never removed, even when dead).
* Automatic movers still listed in ``State.automatic``.
* Deflectors.

Removal builds the retained subsequence of ``State.automatic`` in a single
pass, so survivors keep their relative order whatever the removal set.
"""

from dataclasses import replace
from typing import Any, Dict, Set, cast

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap

from mirror_grid.state import State
from mirror_grid.types import EntityID


def compute_alive_entities(state: State) -> Set[EntityID]:
    """Return the set of entity IDs that must be kept."""
    alive: Set[EntityID] = set(state.agent.keys())
    alive |= set(state.automatic)
    alive |= set(state.deflector.keys())
    return alive


def remove_dead_automatic(state: State) -> State:
    """Drop automatic movers carrying a ``Dead`` marker from the live collection."""
    if not any(eid in state.dead for eid in state.automatic):
        return state
    retained = pvector(eid for eid in state.automatic if eid not in state.dead)
    return replace(state, automatic=retained)


def run_garbage_collector(state: State) -> State:
    """Prune component maps to only contain reachable entity IDs."""
    state = remove_dead_automatic(state)
    alive = compute_alive_entities(state)
    new_fields: Dict[str, Any] = {}
    for field in state.__dataclass_fields__:
        value = getattr(state, field)
        if isinstance(value, type(pmap())):
            value_map = cast(PMap[EntityID, Any], value)
            if all(k in alive for k in value_map):
                continue
            new_fields[field] = pmap({k: v for k, v in value_map.items() if k in alive})
    if not new_fields:
        return state
    return replace(state, **new_fields)
