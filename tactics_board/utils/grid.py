"""Grid math helpers.

Pure, lightweight predicates and coordinate arithmetic shared by the flood
fill, the path preview and the grid shapes. Kept free of board state so inner
loops stay cheap.
"""

from typing import List

from tactics_board.actions import DIRECTION_DELTAS, DIRECTIONS, Direction
from tactics_board.components import Position


def manhattan_distance(a: Position, b: Position) -> int:
    """Return ``|a.x - b.x| + |a.y - b.y|``."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def step(pos: Position, direction: Direction) -> Position:
    """Return the cell one step from ``pos`` in ``direction`` (no wrapping)."""
    dx, dy = DIRECTION_DELTAS[direction]
    return Position(pos.x + dx, pos.y + dy)


def neighbors(pos: Position) -> List[Position]:
    """Return the 4-connected neighbours of ``pos`` in ``DIRECTIONS`` order."""
    return [step(pos, direction) for direction in DIRECTIONS]


def is_in_rect(pos: Position, width: int, height: int) -> bool:
    """Return True if ``pos`` lies within the ``width`` x ``height`` rectangle."""
    return 0 <= pos.x < width and 0 <= pos.y < height
