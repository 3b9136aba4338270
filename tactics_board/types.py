"""Common type aliases and enumerations.

The callable aliases describe the narrow seams between the board core and its
collaborators: occupancy / bounds predicates consumed by the flood fill, and
the completion callbacks used to resume a suspended move.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from tactics_board.components import Position

EntityID = int

CellPredicate = Callable[["Position"], bool]
WalkFinishedFn = Callable[[], None]
SettledFn = Callable[["EntityID", "Position"], None]


class SelectionPhase(StrEnum):
    """Tag of the selection state machine (see :mod:`tactics_board.selection`)."""

    IDLE = auto()
    SELECTED = auto()
    MOVING = auto()
