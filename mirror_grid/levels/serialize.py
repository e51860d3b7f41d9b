"""Plain-dict serialization of levels and states.

Produces JSON-friendly dictionaries (ints, strings, lists, bools) so worlds
can be stored by a presentation layer or compared across processes.
Headings and orientations are written by their enum values (``"up"``,
``"/"``). State serialization keeps entity ids, so
``state_from_dict(state_to_dict(s)) == s``.

Malformed input surfaces as ``KeyError`` (missing field) or ``ValueError``
(unknown heading / orientation, duplicate id, contradictory alive/lose
flags), and as the usual level validation errors (bounds, deflector
conflicts).
"""

from typing import Any, Dict, List, Tuple

from pyrsistent import pmap, pvector

from mirror_grid.components import Agent, Dead, Deflector, Moving, Position
from mirror_grid.entity import Entity
from mirror_grid.exceptions import ConflictingDeflectorsError
from mirror_grid.levels.grid import Level
from mirror_grid.state import State
from mirror_grid.types import EntityID, Heading, Orientation
from mirror_grid.utils.grid import check_in_bounds
from mirror_grid.utils.terminal import find_agent


def position_to_list(position: Position) -> List[int]:
    """Convert a Position to ``[x, y]``."""
    return [position.x, position.y]


def position_from_list(data: List[int]) -> Position:
    """Convert ``[x, y]`` to a Position."""
    x, y = data
    return Position(int(x), int(y))


def _mover_to_dict(state: State, eid: EntityID) -> Dict[str, Any]:
    return {
        "id": eid,
        "pos": position_to_list(state.position[eid]),
        "heading": state.moving[eid].heading.value,
    }


def state_to_dict(state: State) -> Dict[str, Any]:
    """Serialize a State, keeping entity ids and mover order.

    Returns:
        Dict[str, Any]: ``{"width", "height", "player", "automatic",
        "deflectors", "turn", "lose", "message"}`` where ``player`` also
        carries an ``alive`` flag.
    """
    agent_id = find_agent(state)
    if agent_id is None:
        raise ValueError("State contains no agent")
    player = _mover_to_dict(state, agent_id)
    player["alive"] = agent_id not in state.dead
    return {
        "width": state.width,
        "height": state.height,
        "player": player,
        "automatic": [_mover_to_dict(state, eid) for eid in state.automatic],
        "deflectors": [
            {
                "id": eid,
                "pos": position_to_list(state.position[eid]),
                "orientation": state.deflector[eid].orientation.value,
            }
            for eid in sorted(state.deflector.keys())
        ],
        "turn": state.turn,
        "lose": state.lose,
        "message": state.message,
    }


def state_from_dict(data: Dict[str, Any]) -> State:
    """Rebuild a State produced by :func:`state_to_dict`.

    Raises:
        OutOfBoundsError: If any entity lies outside ``width x height``.
        ConflictingDeflectorsError: If two deflectors share a cell.
        ValueError: On a duplicate entity id, or when ``player["alive"]``
            contradicts ``lose``.
    """
    width = int(data["width"])
    height = int(data["height"])
    entity: Dict[EntityID, Entity] = {}
    position: Dict[EntityID, Position] = {}
    moving: Dict[EntityID, Moving] = {}
    deflector: Dict[EntityID, Deflector] = {}
    occupied: Dict[Position, EntityID] = {}

    def load_entity(item: Dict[str, Any]) -> Tuple[EntityID, Position]:
        eid = int(item["id"])
        if eid in entity:
            raise ValueError(f"Duplicate entity id {eid}")
        pos = check_in_bounds((width, height), position_from_list(item["pos"]))
        entity[eid] = Entity()
        position[eid] = pos
        return eid, pos

    def load_mover(item: Dict[str, Any]) -> EntityID:
        eid, _ = load_entity(item)
        moving[eid] = Moving(Heading(item["heading"]))
        return eid

    player = data["player"]
    agent_id = load_mover(player)
    automatic = [load_mover(item) for item in data["automatic"]]
    for item in data["deflectors"]:
        eid, pos = load_entity(item)
        if pos in occupied:
            raise ConflictingDeflectorsError(pos)
        occupied[pos] = eid
        deflector[eid] = Deflector(Orientation(item["orientation"]))

    alive = bool(player.get("alive", True))
    lose = bool(data.get("lose", not alive))
    if lose == alive:
        raise ValueError(f"Player alive={alive} contradicts lose={lose}")

    return State(
        width=width,
        height=height,
        entity=pmap(entity),
        automatic=pvector(automatic),
        agent=pmap({agent_id: Agent()}),
        dead=pmap() if alive else pmap({agent_id: Dead()}),
        deflector=pmap(deflector),
        moving=pmap(moving),
        position=pmap(position),
        turn=int(data.get("turn", 0)),
        lose=lose,
        message=data.get("message"),
    )


def level_to_dict(level: Level) -> Dict[str, Any]:
    """Serialize an authoring Level (no entity ids)."""
    return {
        "width": level.width,
        "height": level.height,
        "player": (
            None
            if level.player is None
            else {"pos": list(level.player.pos), "heading": level.player.heading.value}
        ),
        "automatic": [
            {"pos": list(spec.pos), "heading": spec.heading.value}
            for spec in level.automatic
        ],
        "deflectors": [
            {"pos": list(spec.pos), "orientation": spec.orientation.value}
            for spec in level.deflectors
        ],
        "turn": level.turn,
        "lose": level.lose,
        "message": level.message,
    }


def level_from_dict(data: Dict[str, Any]) -> Level:
    """Rebuild a Level through the authoring API (bounds and conflicts checked)."""
    level = Level(
        width=int(data["width"]),
        height=int(data["height"]),
        turn=int(data.get("turn", 0)),
        lose=bool(data.get("lose", False)),
        message=data.get("message"),
    )
    player = data.get("player")
    if player is not None:
        level.set_player(tuple(player["pos"]), Heading(player["heading"]))
    for item in data.get("automatic", []):
        level.add_automatic(tuple(item["pos"]), Heading(item["heading"]))
    for item in data.get("deflectors", []):
        level.add_deflector(tuple(item["pos"]), Orientation(item["orientation"]))
    return level
