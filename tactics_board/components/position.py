"""Position component.

Immutable integer grid coordinates. Used as the key of the board occupancy map
and as the member type of reachable sets, so identity is by value.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int
