"""Reachable-cell flood fill.

Computes which cells a unit standing on ``start`` may move to, given a step
budget, an occupancy predicate and a bounds predicate.

Algorithm: an explicit list is used as a stack (no recursion, so depth does
not grow with the area). Each popped cell is discarded if it is out of
bounds, already accepted, or further than ``max_distance`` from ``start``;
otherwise it is accepted and its unblocked 4-neighbours are pushed. Blocked
neighbours are never pushed at all.

The distance test uses Manhattan *displacement* from ``start``, not walked
path length. Under obstacles this admits cells whose only walkable route is
longer than the budget. That is the intended reachable-area semantics and is
relied upon by callers; do not replace it with a shortest-path cost map.

``start`` is the seed and is never tested against the occupancy predicate, so
it is part of the result whenever it is in bounds, even though the moving
unit stands on it.
"""

from dataclasses import dataclass
from typing import List, Set

from pyrsistent import pset
from pyrsistent.typing import PSet

from tactics_board.board import BoardState
from tactics_board.components import Position
from tactics_board.grid import GridShape
from tactics_board.types import CellPredicate
from tactics_board.utils.grid import manhattan_distance, neighbors


def compute_reachable(
    start: Position,
    max_distance: int,
    is_blocked: CellPredicate,
    in_bounds: CellPredicate,
) -> PSet[Position]:
    """Flood fill from ``start`` within a Manhattan radius.

    Args:
        start (Position): Seed cell (usually the selected unit's cell).
        max_distance (int): Non-negative Manhattan radius.
        is_blocked (CellPredicate): True for cells that cannot be entered or
            crossed (occupied cells).
        in_bounds (CellPredicate): True for cells inside the playable area.

    Returns:
        PSet[Position]: Snapshot of reachable cells, ``start`` included.

    Raises:
        ValueError: If ``max_distance`` is negative.
    """
    if max_distance < 0:
        raise ValueError(f"max_distance must be non-negative, got {max_distance}")

    frontier: List[Position] = [start]
    reachable: Set[Position] = set()
    while frontier:
        cell = frontier.pop()
        if (
            not in_bounds(cell)
            or cell in reachable
            or manhattan_distance(start, cell) > max_distance
        ):
            continue
        reachable.add(cell)
        for neighbor in neighbors(cell):
            if not is_blocked(neighbor):
                frontier.append(neighbor)
    return pset(reachable)


@dataclass(frozen=True)
class ReachabilityEngine:
    """Binds :func:`compute_reachable` to a board and a grid shape."""

    board: BoardState
    grid: GridShape

    def compute(self, start: Position, max_distance: int) -> PSet[Position]:
        return compute_reachable(
            start, max_distance, self.board.is_occupied, self.grid.in_bounds
        )
