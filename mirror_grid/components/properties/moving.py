"""Movement component.

``Moving`` entities travel one cell per tick along ``heading``. Both the
player and automatic entities carry it; deflectors replace the heading when
an entity enters their cell.
"""

from dataclasses import dataclass

from mirror_grid.types import Heading


@dataclass(frozen=True)
class Moving:
    """Current direction of travel.

    Attributes:
        heading: Cardinal heading applied on the next tick.
    """

    heading: Heading
