"""Cardinal directions.

Defines the :class:`Direction` string enum and its unit deltas. Movement on
the board is strictly 4-connected; there are no diagonal members.

``DIRECTIONS`` is the canonical ordered list (left, right, up, down). Every
neighbour expansion in the package iterates it in this order, which keeps
path search results deterministic.
"""

from enum import StrEnum, auto
from typing import Dict, List, Tuple


class Direction(StrEnum):
    """String enum of the four grid directions.

    Members:
        LEFT, RIGHT: Horizontal steps (x decreases / increases).
        UP, DOWN: Vertical steps (y decreases / increases).
    """

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


DIRECTIONS: List[Direction] = [
    Direction.LEFT,
    Direction.RIGHT,
    Direction.UP,
    Direction.DOWN,
]

DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}
