"""Dead marker component (post-mortem)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Dead:
    """Marker set by collision logic. Never removed once present."""

    pass
