import pytest

from mirror_grid.components import Position
from mirror_grid.exceptions import (
    ConflictingDeflectorsError,
    OutOfBoundsError,
    SimulationError,
)
from mirror_grid.levels.convert import to_state
from mirror_grid.levels.grid import DeflectorSpec, Level, MoverSpec
from mirror_grid.types import Heading, Orientation


def test_level_keeps_automatic_order_and_assigns_ids() -> None:
    level = Level(width=5, height=5)
    level.set_player((0, 0), Heading.RIGHT)
    level.add_automatic((4, 4), Heading.UP)
    level.add_automatic((1, 1), Heading.DOWN)
    level.add_deflector((2, 2), Orientation.SLASH)
    state = to_state(level)

    assert list(state.agent.keys()) == [0]
    assert list(state.automatic) == [1, 2]
    assert state.position[1] == Position(4, 4)
    assert state.position[2] == Position(1, 1)
    assert list(state.deflector.keys()) == [3]
    assert state.bounds == (5, 5)


def test_level_accepts_string_values() -> None:
    level = Level(width=3, height=3)
    level.set_player((1, 1), "up")  # type: ignore[arg-type]
    level.add_deflector((1, 0), "\\")  # type: ignore[arg-type]
    assert level.player == MoverSpec((1, 1), Heading.UP)
    assert level.deflectors == [DeflectorSpec((1, 0), Orientation.BACKSLASH)]


def test_add_deflector_rejects_occupied_cell() -> None:
    level = Level(width=5, height=5)
    level.add_deflector((2, 2), Orientation.SLASH)
    with pytest.raises(ConflictingDeflectorsError) as excinfo:
        level.add_deflector((2, 2), Orientation.BACKSLASH)
    assert excinfo.value.position == Position(2, 2)
    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value, SimulationError)
    assert len(level.deflectors) == 1


def test_to_state_rejects_conflicting_deflectors_built_by_hand() -> None:
    level = Level(
        width=5,
        height=5,
        player=MoverSpec((0, 0), Heading.RIGHT),
        deflectors=[
            DeflectorSpec((3, 3), Orientation.SLASH),
            DeflectorSpec((3, 3), Orientation.SLASH),
        ],
    )
    with pytest.raises(ConflictingDeflectorsError):
        to_state(level)


@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (5, 0), (0, 5)])
def test_authoring_out_of_bounds(pos: tuple[int, int]) -> None:
    level = Level(width=5, height=5)
    with pytest.raises(OutOfBoundsError):
        level.add_automatic(pos, Heading.UP)
    with pytest.raises(OutOfBoundsError):
        level.set_player(pos, Heading.UP)
    with pytest.raises(IndexError):
        level.add_deflector(pos, Orientation.SLASH)


def test_to_state_rejects_out_of_bounds_built_by_hand() -> None:
    level = Level(
        width=5,
        height=5,
        player=MoverSpec((0, 0), Heading.RIGHT),
        automatic=[MoverSpec((7, 0), Heading.LEFT)],
    )
    with pytest.raises(OutOfBoundsError):
        to_state(level)


def test_to_state_requires_player() -> None:
    level = Level(width=5, height=5)
    with pytest.raises(ValueError):
        to_state(level)


def test_level_rejects_empty_grid() -> None:
    with pytest.raises(ValueError):
        Level(width=0, height=5)
