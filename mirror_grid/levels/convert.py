from __future__ import annotations

from typing import Dict, List

from pyrsistent import pmap, pvector

from mirror_grid.components import Agent, Dead, Deflector, Moving, Position as PositionComp
from mirror_grid.entity import Entity, entity_id_generator
from mirror_grid.exceptions import ConflictingDeflectorsError, OutOfBoundsError
from mirror_grid.levels.grid import DeflectorSpec, Level, MoverSpec
from mirror_grid.state import State
from mirror_grid.types import EntityID
from mirror_grid.utils.grid import is_in_bounds
from mirror_grid.utils.terminal import find_agent


def _check_position(level: Level, pos: PositionComp) -> PositionComp:
    if not is_in_bounds((level.width, level.height), pos):
        raise OutOfBoundsError(pos, level.width, level.height)
    return pos


def to_state(level: Level) -> State:
    """
    Convert a Level into an immutable State.

    Semantics:
    - Entity ids are allocated locally: player first (0), then automatic movers in
      level order, then deflectors. Converting the same level twice gives equal states.
    - `State.automatic` keeps the level order of automatic movers.
    - If `level.lose` is set the player receives a Dead marker.
    - Every placement is validated again (levels may be built by hand, bypassing
      the authoring API): OutOfBoundsError for cells outside the grid,
      ConflictingDeflectorsError for two deflectors on one cell.
    """
    if level.player is None:
        raise ValueError("Level contains no player")

    ids = entity_id_generator()
    entity: Dict[EntityID, Entity] = {}
    position: Dict[EntityID, PositionComp] = {}
    moving: Dict[EntityID, Moving] = {}
    deflector: Dict[EntityID, Deflector] = {}
    automatic: List[EntityID] = []

    def place_mover(spec: MoverSpec) -> EntityID:
        eid = next(ids)
        entity[eid] = Entity()
        position[eid] = _check_position(level, PositionComp(*spec.pos))
        moving[eid] = Moving(spec.heading)
        return eid

    agent_id = place_mover(level.player)
    for spec in level.automatic:
        automatic.append(place_mover(spec))

    occupied: Dict[PositionComp, DeflectorSpec] = {}
    for spec in level.deflectors:
        pos = _check_position(level, PositionComp(*spec.pos))
        if pos in occupied:
            raise ConflictingDeflectorsError(pos)
        occupied[pos] = spec
        eid = next(ids)
        entity[eid] = Entity()
        position[eid] = pos
        deflector[eid] = Deflector(spec.orientation)

    return State(
        width=level.width,
        height=level.height,
        entity=pmap(entity),
        automatic=pvector(automatic),
        agent=pmap({agent_id: Agent()}),
        dead=pmap({agent_id: Dead()}) if level.lose else pmap(),
        deflector=pmap(deflector),
        moving=pmap(moving),
        position=pmap(position),
        turn=level.turn,
        lose=level.lose,
        message=level.message,
    )


def _mover_spec(state: State, eid: EntityID) -> MoverSpec:
    pos = state.position[eid]
    return MoverSpec((pos.x, pos.y), state.moving[eid].heading)


def from_state(state: State) -> Level:
    """
    Convert an immutable State back into a mutable Level.

    Behavior:
    - Automatic movers are emitted in live-collection order.
    - Deflectors are emitted in ascending eid order (deterministic).
    - A dead player is carried as `lose=True`.
    """
    agent_id = find_agent(state)
    if agent_id is None:
        raise ValueError("State contains no agent")

    level = Level(
        width=state.width,
        height=state.height,
        player=_mover_spec(state, agent_id),
        turn=state.turn,
        lose=state.lose or agent_id in state.dead,
        message=state.message,
    )
    level.automatic = [_mover_spec(state, eid) for eid in state.automatic]
    for eid in sorted(state.deflector.keys()):
        pos = state.position[eid]
        level.deflectors.append(
            DeflectorSpec((pos.x, pos.y), state.deflector[eid].orientation)
        )
    return level
