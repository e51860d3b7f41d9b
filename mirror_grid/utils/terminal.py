"""Terminal condition helper predicates."""

from typing import Optional

from mirror_grid.state import State
from mirror_grid.types import EntityID, PlayerStatus


def find_agent(state: State) -> Optional[EntityID]:
    """Return the player entity id, or None if the state has no player."""
    return next(iter(state.agent.keys()), None)


def is_valid_state(state: State, agent_id: EntityID) -> bool:
    """Return True if the player exists and has a position and heading."""
    return (
        agent_id in state.agent
        and state.position.get(agent_id) is not None
        and state.moving.get(agent_id) is not None
    )


def is_terminal_state(state: State, agent_id: EntityID) -> bool:
    """Return True if the player is dead (the only terminal condition)."""
    return state.lose or agent_id in state.dead


def player_status(state: State, agent_id: EntityID) -> PlayerStatus:
    """Map the dead marker onto the two-state player machine."""
    return PlayerStatus.DEAD if is_terminal_state(state, agent_id) else PlayerStatus.ALIVE
