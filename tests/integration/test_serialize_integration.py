import json

import pytest

from mirror_grid.examples.first_level import create_first_level, generate
from mirror_grid.exceptions import ConflictingDeflectorsError, OutOfBoundsError
from mirror_grid.levels.convert import from_state, to_state
from mirror_grid.levels.serialize import (
    level_from_dict,
    level_to_dict,
    state_from_dict,
    state_to_dict,
)
from mirror_grid.state import State
from mirror_grid.step import advance
from mirror_grid.types import Heading
from tests.test_utils import make_state


def _advance_n(state: State, n: int) -> State:
    for _ in range(n):
        state = advance(state)
    return state


def test_state_dict_round_trip_then_same_ticks() -> None:
    state = _advance_n(generate(), 3)
    restored = state_from_dict(json.loads(json.dumps(state_to_dict(state))))
    assert restored == state
    assert _advance_n(restored, 5) == _advance_n(state, 5)


def test_state_dict_round_trip_after_removals() -> None:
    state, _, _ = make_state(
        player=((0, 0), Heading.RIGHT),
        automatic=[
            ((2, 1), Heading.DOWN),
            ((1, 2), Heading.RIGHT),
            ((4, 4), Heading.UP),
        ],
    )
    state = advance(state)  # first two collide at (2, 2)
    state = advance(state)
    assert len(state.automatic) == 1
    restored = state_from_dict(state_to_dict(state))
    assert restored == state
    assert advance(restored) == advance(state)


def test_state_dict_uses_readable_values() -> None:
    data = state_to_dict(generate())
    assert data["player"] == {"id": 0, "pos": [0, 12], "heading": "up", "alive": True}
    assert data["deflectors"][0] == {"id": 3, "pos": [0, 5], "orientation": "/"}
    assert [m["heading"] for m in data["automatic"]] == ["left", "up"]


def test_state_from_dict_rejects_conflicting_deflectors() -> None:
    data = state_to_dict(generate())
    data["deflectors"][1]["pos"] = data["deflectors"][0]["pos"]
    with pytest.raises(ConflictingDeflectorsError):
        state_from_dict(data)


def test_state_from_dict_rejects_unknown_heading() -> None:
    data = state_to_dict(generate())
    data["player"]["heading"] = "north"
    with pytest.raises(ValueError):
        state_from_dict(data)


def test_level_dict_round_trip() -> None:
    level = create_first_level()
    restored = level_from_dict(json.loads(json.dumps(level_to_dict(level))))
    assert restored == level
    assert to_state(restored) == to_state(level)


def test_level_state_round_trip() -> None:
    state = generate()
    assert to_state(from_state(state)) == state


def test_from_state_carries_dead_player() -> None:
    state, _, _ = make_state(
        player=((0, 2), Heading.RIGHT),
        automatic=[((1, 2), Heading.DOWN)],
    )
    state = advance(state)
    level = from_state(state)
    assert level.lose
    assert level.turn == 1
    rebuilt = to_state(level)
    assert rebuilt.lose
    assert advance(rebuilt) is rebuilt


@pytest.mark.parametrize(
    "section, index, pos",
    [
        ("automatic", 0, [99, 99]),
        ("automatic", 1, [-1, 0]),
        ("deflectors", 0, [40, 0]),
        ("deflectors", 2, [0, 13]),
    ],
)
def test_state_from_dict_rejects_out_of_bounds(
    section: str, index: int, pos: list[int]
) -> None:
    data = state_to_dict(generate())
    data[section][index]["pos"] = pos
    with pytest.raises(OutOfBoundsError):
        state_from_dict(data)


def test_state_from_dict_rejects_out_of_bounds_player() -> None:
    data = state_to_dict(generate())
    data["player"]["pos"] = [0, 13]
    with pytest.raises(OutOfBoundsError):
        state_from_dict(data)


@pytest.mark.parametrize(
    "section, index, eid",
    [
        ("deflectors", 0, 0),  # deflector sharing the player's id
        ("automatic", 1, 1),  # two movers sharing an id
        ("deflectors", 1, 2),  # deflector sharing a mover's id
    ],
)
def test_state_from_dict_rejects_duplicate_ids(
    section: str, index: int, eid: int
) -> None:
    data = state_to_dict(generate())
    data[section][index]["id"] = eid
    with pytest.raises(ValueError, match="Duplicate entity id"):
        state_from_dict(data)


def test_state_from_dict_rejects_lose_contradicting_alive() -> None:
    data = state_to_dict(generate())
    data["lose"] = True
    with pytest.raises(ValueError, match="contradicts"):
        state_from_dict(data)

    data = state_to_dict(generate())
    data["player"]["alive"] = False
    with pytest.raises(ValueError, match="contradicts"):
        state_from_dict(data)


def test_state_from_dict_derives_lose_from_alive_when_missing() -> None:
    data = state_to_dict(generate())
    del data["lose"]
    data["player"]["alive"] = False
    state = state_from_dict(data)
    assert state.lose
    assert 0 in state.dead
    assert advance(state) is state
