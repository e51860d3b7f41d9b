"""Terminal condition systems.

``lose_system`` raises the ``lose`` flag exactly once when the player
carries a ``Dead`` marker; ``turn_system`` counts applied ticks. Other
systems short-circuit once the state is terminal.
"""

from dataclasses import replace
from mirror_grid.state import State
from mirror_grid.types import EntityID


def lose_system(state: State, agent_id: EntityID) -> State:
    """Set ``lose`` flag if the player is dead (idempotent)."""
    if agent_id in state.dead and not state.lose:
        return replace(state, lose=True)
    return state


def turn_system(state: State) -> State:
    """Increment the turn counter."""
    return replace(state, turn=state.turn + 1)
