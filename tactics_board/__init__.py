"""tactics_board
=================================

Authoritative state for a grid-based tactical board: cell occupancy,
reachable-cell flood fill, and the select / move / settle lifecycle that
gates player commands.

Typical wiring::

    from tactics_board import BoardState, RectGrid, SelectionController, Unit
    from tactics_board.components import Position

    units = [Unit(Position(2, 2), move_range=2)]
    controller = SelectionController(BoardState(units), RectGrid(5, 5))
    controller.cell_activated(Position(2, 2))  # select
    controller.cell_activated(Position(3, 3))  # move
"""

from .board import BoardState
from .executor import MoveExecutor
from .grid import GridShape, MaskGrid, RectGrid
from .reachability import ReachabilityEngine, compute_reachable
from .selection import SelectionController
from .state import Idle, Moving, Selected, SelectionState
from .unit import Unit, UnitLike

__all__ = [
    "BoardState",
    "GridShape",
    "Idle",
    "MaskGrid",
    "MoveExecutor",
    "Moving",
    "ReachabilityEngine",
    "RectGrid",
    "Selected",
    "SelectionController",
    "SelectionState",
    "Unit",
    "UnitLike",
    "compute_reachable",
]
