"""Per-tick movement systems.

:func:`step_entity` computes one mover's next cell and heading in isolation.
:func:`player_moving_system` and :func:`automatic_moving_system` apply it to
the player and, in level order, to every automatic mover, detecting the
player collisions that end the game.
"""

import logging
from dataclasses import dataclass, replace
from typing import Mapping

from mirror_grid.components import Dead, Deflector, Moving, Position
from mirror_grid.moves import reflect, translate
from mirror_grid.state import State
from mirror_grid.types import Bounds, EntityID, Heading
from mirror_grid.utils.grid import check_in_bounds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mover:
    """Position and heading of one mobile entity."""

    position: Position
    heading: Heading


def step_entity(
    entity: Mover, deflectors: Mapping[Position, Deflector], bounds: Bounds
) -> Mover:
    """Advance a single mover by one tick.

    The mover is translated one cell along its heading. If that cell holds a
    deflector the heading is reflected and the mover carried one more cell
    along the new heading. Only the cell reached by the first translation is
    checked, so at most one deflection happens per tick even if the second
    cell also holds a deflector.

    Args:
        entity (Mover): Mover before the tick.
        deflectors (Mapping[Position, Deflector]): Deflectors keyed by cell.
        bounds (Bounds): Grid ``(width, height)``.

    Returns:
        Mover: Mover after the tick.

    Raises:
        OutOfBoundsError: If either the translated or the deflected position
            lies outside the grid.
    """
    heading = entity.heading
    pos = check_in_bounds(bounds, translate(entity.position, heading))
    deflector = deflectors.get(pos)
    if deflector is not None:
        heading = reflect(heading, deflector.orientation)
        pos = check_in_bounds(bounds, translate(pos, heading))
    return Mover(pos, heading)


def _step_in_state(
    state: State,
    entity_id: EntityID,
    deflectors: Mapping[Position, Deflector],
) -> State:
    moved = step_entity(
        Mover(state.position[entity_id], state.moving[entity_id].heading),
        deflectors,
        state.bounds,
    )
    return replace(
        state,
        position=state.position.set(entity_id, moved.position),
        moving=state.moving.set(entity_id, Moving(moved.heading)),
    )


def _kill_agent(state: State, agent_id: EntityID, mover_id: EntityID) -> State:
    pos = state.position[agent_id]
    logger.info(
        "Player %d collided with mover %d at (%d, %d) on turn %d",
        agent_id,
        mover_id,
        pos.x,
        pos.y,
        state.turn + 1,
    )
    return replace(
        state,
        dead=state.dead.set(agent_id, Dead()),
        message=f"Player hit by mover {mover_id} at ({pos.x}, {pos.y})",
    )


def player_moving_system(
    state: State, agent_id: EntityID, deflectors: Mapping[Position, Deflector]
) -> State:
    """Move the player one tick."""
    return _step_in_state(state, agent_id, deflectors)


def automatic_moving_system(
    state: State, agent_id: EntityID, deflectors: Mapping[Position, Deflector]
) -> State:
    """Move every automatic mover one tick, in level order.

    Must run after :func:`player_moving_system`. A mover whose current cell is
    the player's new cell, or whose new cell is the player's cell, kills the
    player; processing stops right there, leaving the remaining movers (and,
    in the first case, the offending mover itself) where they were.
    """
    player_pos = state.position[agent_id]
    for mover_id in state.automatic:
        if state.position[mover_id] == player_pos:
            return _kill_agent(state, agent_id, mover_id)
        state = _step_in_state(state, mover_id, deflectors)
        if state.position[mover_id] == player_pos:
            return _kill_agent(state, agent_id, mover_id)
    return state
