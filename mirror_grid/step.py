"""State reducer and tick orchestration.

This module wires together all systems in the correct order to implement a
single *tick*. The exported :func:`advance` is the only public mutation entry
point for gameplay progression and is pure: it returns a *new*
:class:`mirror_grid.state.State`. If any system raises (for example
:class:`mirror_grid.exceptions.OutOfBoundsError`) the caller still holds the
untouched previous state.

Ordering (per tick):

1. ``player_moving_system`` moves the player.
2. ``automatic_moving_system`` moves automatic movers in level order and
   stops at the first one that collides with the player.
3. ``collision_system`` marks movers sharing a cell, unless the player died
   in step 2.
4. ``run_garbage_collector`` drops dead movers from the live collection.
5. ``lose_system`` / ``turn_system`` finalize terminal flag and counter.
"""

import logging

from mirror_grid.state import State
from mirror_grid.systems.collision import collision_system
from mirror_grid.systems.moving import automatic_moving_system, player_moving_system
from mirror_grid.systems.terminal import lose_system, turn_system
from mirror_grid.utils.gc import run_garbage_collector
from mirror_grid.utils.grid import deflectors_by_position
from mirror_grid.types import EntityID
from mirror_grid.utils.terminal import find_agent, is_terminal_state, is_valid_state

logger = logging.getLogger(__name__)


def advance(state: State) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable world state.

    Returns:
        State: Next state snapshot. If the player is already dead the same
            object is returned unchanged.

    Raises:
        ValueError: If the state contains no player, or the player has no
            position or heading.
        OutOfBoundsError: If any mover would leave the grid this tick.
    """
    agent_id = find_agent(state)
    if agent_id is None:
        raise ValueError("State contains no agent")

    if is_terminal_state(state, agent_id):
        return state

    if not is_valid_state(state, agent_id):
        raise ValueError(f"Agent {agent_id} has no position or heading")

    logger.debug(
        "Tick %d: %d live movers", state.turn + 1, len(state.automatic)
    )

    deflectors = deflectors_by_position(state)

    state = player_moving_system(state, agent_id, deflectors)
    state = automatic_moving_system(state, agent_id, deflectors)

    if agent_id not in state.dead:
        state = collision_system(state)

    return _after_step(state, agent_id)


def _after_step(state: State, agent_id: EntityID) -> State:
    """Finalize a tick: prune dead movers, set ``lose`` and bump the turn."""
    state = run_garbage_collector(state)
    state = lose_system(state, agent_id)
    state = turn_system(state)
    return state
