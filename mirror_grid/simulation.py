"""Controller object owning a single world state.

:class:`Simulation` is the seam a presentation layer talks to: it keeps the
current :class:`mirror_grid.state.State`, applies :func:`advance` on
command, and hands out read-only :class:`mirror_grid.view.WorldView`
snapshots.

Usage:

``sim = Simulation(generate)``
``sim.advance()``
``view = sim.view()``

Ticks are applied atomically: if :func:`advance` raises, the held state is
left as it was before the call. The object is not thread-safe; exactly one
caller is expected to drive ticks.
"""

import logging
from typing import Any, Callable, Optional

from mirror_grid.exceptions import OutOfBoundsError
from mirror_grid.state import State
from mirror_grid.step import advance
from mirror_grid.types import EntityID, PlayerStatus
from mirror_grid.utils.terminal import find_agent, player_status
from mirror_grid.view import WorldView, snapshot

logger = logging.getLogger(__name__)


class Simulation:
    """Single-caller driver around the pure :func:`advance` reducer."""

    def __init__(
        self,
        initial_state_fn: Callable[..., State],
        **kwargs: Any,
    ):
        """Create the simulation and build its first state.

        Args:
            initial_state_fn: Callable returning a fully built ``State``
                (e.g. :func:`mirror_grid.examples.first_level.generate`).
            **kwargs: Forwarded to ``initial_state_fn`` on every reset.
        """
        self._initial_state_fn = initial_state_fn
        self._initial_state_kwargs = kwargs
        self._state: Optional[State] = None
        self.agent_id: Optional[EntityID] = None
        self.reset()

    def reset(self) -> WorldView:
        """Rebuild the initial state and return its snapshot."""
        state = self._initial_state_fn(**self._initial_state_kwargs)
        agent_id = find_agent(state)
        if agent_id is None:
            raise ValueError("Initial state contains no agent")
        self._state = state
        self.agent_id = agent_id
        logger.debug(
            "Simulation reset: %dx%d grid, %d movers, %d deflectors",
            state.width,
            state.height,
            len(state.automatic),
            len(state.deflector),
        )
        return snapshot(state)

    @property
    def state(self) -> State:
        assert self._state is not None
        return self._state

    @property
    def status(self) -> PlayerStatus:
        assert self.agent_id is not None
        return player_status(self.state, self.agent_id)

    @property
    def is_over(self) -> bool:
        return self.status == PlayerStatus.DEAD

    def advance(self) -> WorldView:
        """Apply one tick and return the new snapshot.

        A no-op (same snapshot) once the player is dead.

        Raises:
            OutOfBoundsError: If a mover would leave the grid. The held state
                is unchanged.
        """
        try:
            next_state = advance(self.state)
        except OutOfBoundsError as exc:
            logger.warning("Tick %d aborted: %s", self.state.turn + 1, exc)
            raise
        if next_state.lose and not self.state.lose:
            logger.info("Game over on turn %d: %s", next_state.turn, next_state.message)
        self._state = next_state
        return snapshot(next_state)

    def view(self) -> WorldView:
        """Return a snapshot of the current state."""
        return snapshot(self.state)
