from dataclasses import replace
from typing import List, Tuple

from pyrsistent import pmap

from mirror_grid.components import Dead
from mirror_grid.state import State
from mirror_grid.types import EntityID, Heading, Orientation
from mirror_grid.utils.gc import (
    compute_alive_entities,
    remove_dead_automatic,
    run_garbage_collector,
)
from tests.test_utils import make_state


def _state_with_movers() -> Tuple[State, EntityID, List[EntityID]]:
    return make_state(
        player=((0, 4), Heading.RIGHT),
        automatic=[
            ((0, 0), Heading.RIGHT),
            ((1, 0), Heading.RIGHT),
            ((2, 0), Heading.RIGHT),
            ((3, 0), Heading.RIGHT),
        ],
        deflectors=[((4, 4), Orientation.SLASH)],
    )


def test_remove_dead_automatic_keeps_relative_order() -> None:
    state, _, (a, b, c, d) = _state_with_movers()
    state = replace(state, dead=pmap({a: Dead(), c: Dead()}))
    state = remove_dead_automatic(state)
    assert list(state.automatic) == [b, d]


def test_remove_dead_automatic_without_dead_is_identity() -> None:
    state, _, _ = _state_with_movers()
    assert remove_dead_automatic(state) is state


def test_garbage_collector_prunes_removed_movers_but_keeps_player() -> None:
    state, agent_id, (a, b, c, d) = _state_with_movers()
    state = replace(state, dead=pmap({agent_id: Dead(), b: Dead(), d: Dead()}))
    state = run_garbage_collector(state)

    assert list(state.automatic) == [a, c]
    for eid in (b, d):
        assert eid not in state.position
        assert eid not in state.moving
        assert eid not in state.entity
        assert eid not in state.dead
    assert agent_id in state.dead
    assert agent_id in state.position
    assert len(state.deflector) == 1


def test_compute_alive_entities() -> None:
    state, agent_id, movers = _state_with_movers()
    alive = compute_alive_entities(state)
    assert alive == {agent_id, *movers, *state.deflector.keys()}
