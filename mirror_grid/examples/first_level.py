from __future__ import annotations

from mirror_grid.config import DEFAULT_HEIGHT, DEFAULT_WIDTH
from mirror_grid.levels.convert import to_state
from mirror_grid.levels.grid import Level
from mirror_grid.state import State
from mirror_grid.types import Heading, Orientation

# -------------------------
# Layout
# -------------------------
# The player starts bottom-left heading up and is routed around a small loop
# of deflectors; two automatic movers cross its path in the x=3 column.

PLAYER_START = ((0, 12), Heading.UP)

AUTOMATIC_MOVERS = [
    ((5, 5), Heading.LEFT),
    ((3, 11), Heading.UP),
]

DEFLECTORS = [
    ((0, 5), Orientation.SLASH),
    ((3, 5), Orientation.SLASH),
    ((3, 2), Orientation.BACKSLASH),
    ((0, 2), Orientation.BACKSLASH),
    ((0, 0), Orientation.SLASH),
    ((3, 0), Orientation.BACKSLASH),
]


def create_first_level(
    width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT
) -> Level:
    """Build the first level as an authoring Level."""
    level = Level(width=width, height=height)
    pos, heading = PLAYER_START
    level.set_player(pos, heading)
    level.add_many_automatic(AUTOMATIC_MOVERS)
    level.add_many_deflectors(DEFLECTORS)
    return level


def generate(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> State:
    """Build the first level and convert it to a State."""
    return to_state(create_first_level(width, height))
