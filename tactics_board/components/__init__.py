"""tactics_board.components
=================================

Aggregate import surface for the value objects shared across the board core::

    from tactics_board.components import Position

Components are plain frozen ``@dataclass`` values with no behaviour; the
board, reachability and selection modules operate on them.
"""

from .position import Position

__all__ = [
    "Position",
]
