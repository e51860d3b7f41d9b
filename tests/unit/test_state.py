from mirror_grid.examples.first_level import generate
from mirror_grid.state import State
from mirror_grid.step import advance
from mirror_grid.types import Heading, PlayerStatus
from mirror_grid.view import snapshot
from tests.test_utils import make_state


def test_description_skips_empty_fields() -> None:
    description = State(width=4, height=3).description
    assert set(description.keys()) == {"width", "height", "turn", "lose"}


def test_description_lists_populated_stores() -> None:
    description = generate().description
    assert {"agent", "automatic", "deflector", "moving", "position"} <= set(description)
    assert "dead" not in description


def test_snapshot_reports_dead_player() -> None:
    state, agent_id, _ = make_state(
        player=((0, 2), Heading.RIGHT),
        automatic=[((1, 2), Heading.DOWN)],
    )
    view = snapshot(advance(state))
    assert view.player.entity_id == agent_id
    assert view.player.status == PlayerStatus.DEAD
    assert not view.player.alive
    assert view.message is not None


def test_snapshot_reports_live_player() -> None:
    view = snapshot(generate())
    assert view.player.status == PlayerStatus.ALIVE
    assert view.player.alive
