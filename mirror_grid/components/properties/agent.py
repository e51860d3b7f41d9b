"""Agent marker component.

Presence of :class:`Agent` designates the player entity. Exactly one agent
exists per simulation; it only advances when the controller calls
:func:`mirror_grid.step.advance`. The component carries no data but enables
queries / system routing.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Agent:
    """Marker (no fields)."""

    pass
