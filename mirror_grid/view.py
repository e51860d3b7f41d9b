"""Read-only world snapshots for presentation layers.

A renderer never touches :class:`mirror_grid.state.State` stores directly;
it calls :func:`snapshot` once per frame and paints the returned frozen
objects. Snapshots hold plain values (tuples, enums) and stay valid after
further ticks.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from mirror_grid.state import State
from mirror_grid.types import EntityID, Heading, Orientation, PlayerStatus
from mirror_grid.utils.terminal import find_agent, player_status


@dataclass(frozen=True)
class MoverView:
    """Position and heading of an automatic mover."""

    entity_id: EntityID
    x: int
    y: int
    heading: Heading


@dataclass(frozen=True)
class PlayerView:
    """Player position, heading and alive/dead status."""

    entity_id: EntityID
    x: int
    y: int
    heading: Heading
    status: PlayerStatus

    @property
    def alive(self) -> bool:
        """True while the player has not collided."""
        return self.status == PlayerStatus.ALIVE


@dataclass(frozen=True)
class DeflectorView:
    """Deflector cell and orientation."""

    x: int
    y: int
    orientation: Orientation


@dataclass(frozen=True)
class WorldView:
    """Everything a frame needs to draw the grid."""

    width: int
    height: int
    turn: int
    player: PlayerView
    automatic: Tuple[MoverView, ...]
    deflectors: Tuple[DeflectorView, ...]
    message: Optional[str] = None


def snapshot(state: State) -> WorldView:
    """Build a :class:`WorldView` of ``state``.

    Automatic movers are listed in processing order; deflectors row-major.

    Raises:
        ValueError: If the state contains no player.
    """
    agent_id = find_agent(state)
    if agent_id is None:
        raise ValueError("State contains no agent")
    pos = state.position[agent_id]
    player = PlayerView(
        entity_id=agent_id,
        x=pos.x,
        y=pos.y,
        heading=state.moving[agent_id].heading,
        status=player_status(state, agent_id),
    )
    automatic = tuple(
        MoverView(
            entity_id=eid,
            x=state.position[eid].x,
            y=state.position[eid].y,
            heading=state.moving[eid].heading,
        )
        for eid in state.automatic
    )
    deflectors = tuple(
        sorted(
            (
                DeflectorView(
                    x=state.position[eid].x,
                    y=state.position[eid].y,
                    orientation=deflector.orientation,
                )
                for eid, deflector in state.deflector.items()
            ),
            key=lambda d: (d.y, d.x),
        )
    )
    return WorldView(
        width=state.width,
        height=state.height,
        turn=state.turn,
        player=player,
        automatic=automatic,
        deflectors=deflectors,
        message=state.message,
    )
