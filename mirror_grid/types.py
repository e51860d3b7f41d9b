"""Common type aliases and enumerations.

``Heading`` and ``Orientation`` are string enums so that serialized levels
stay human readable (``"up"``, ``"/"``) and round-trip through JSON.
"""

from enum import StrEnum, auto


EntityID = int

Bounds = tuple[int, int]
"""Grid size as ``(width, height)``."""


class Heading(StrEnum):
    """Cardinal direction of travel for a mobile entity."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class Orientation(StrEnum):
    """Diagonal orientation of a deflector cell."""

    SLASH = "/"
    BACKSLASH = "\\"


class PlayerStatus(StrEnum):
    """Two-state machine of the player. ``DEAD`` is terminal."""

    ALIVE = auto()
    DEAD = auto()
