"""Move execution.

Applies an accepted move in two phases:

1. Occupancy is updated *immediately* (``BoardState.relocate``), before the
   unit has visibly moved. Any query made while the walk is running already
   sees the destination as taken and the origin as free.
2. The unit is told to walk the supplied path. The executor then holds the
   move as *in flight* until the unit's completion callback fires, at which
   point the caller's ``on_settled`` hook runs.

Only one move may be in flight at a time, for the whole board. There is no
cancellation: a walk that never reports completion keeps the executor busy
forever. That liveness guarantee belongs to the unit implementation.
"""

import logging
from typing import Optional, Sequence, Tuple

from tactics_board.board import BoardState
from tactics_board.components import Position
from tactics_board.state import Selected
from tactics_board.types import EntityID, SettledFn

logger = logging.getLogger(__name__)


class MoveExecutor:
    """Commits moves against a :class:`BoardState`."""

    board: BoardState

    def __init__(self, board: BoardState):
        self.board = board
        self._in_flight: Optional[Tuple[EntityID, Position]] = None

    @property
    def in_flight(self) -> Optional[Tuple[EntityID, Position]]:
        """``(entity_id, destination)`` of the unsettled move, if any."""
        return self._in_flight

    def can_commit(self, selection: Selected, destination: Position) -> bool:
        return (
            self._in_flight is None
            and destination in selection.reachable
            and not self.board.is_occupied(destination)
        )

    def commit(
        self,
        selection: Selected,
        destination: Position,
        path: Sequence[Position],
        on_settled: Optional[SettledFn] = None,
    ) -> bool:
        """Start moving the selected unit to ``destination``.

        Args:
            selection (Selected): Current selection with its cached reachable set.
            destination (Position): Target cell.
            path (Sequence[Position]): Route handed to the unit unchanged.
            on_settled (SettledFn | None): Called with ``(entity_id, destination)``
                once the walk completes.

        Returns:
            bool: True if the move was started; False if the destination is
                not reachable, is occupied, or another move is in flight.
        """
        if not self.can_commit(selection, destination):
            logger.debug(
                f"Move of entity {selection.entity_id} to "
                f"({destination.x}, {destination.y}) rejected"
            )
            return False

        entity_id = selection.entity_id
        unit = selection.unit
        origin = unit.cell
        self.board.relocate(entity_id, origin, destination)
        self._in_flight = (entity_id, destination)
        logger.debug(
            f"Entity {entity_id} moving ({origin.x}, {origin.y}) -> "
            f"({destination.x}, {destination.y})"
        )

        settled = False

        def on_finished() -> None:
            nonlocal settled
            if settled:
                logger.warning(
                    f"Duplicate walk completion for entity {entity_id} ignored"
                )
                return
            settled = True
            self._in_flight = None
            if on_settled is not None:
                on_settled(entity_id, destination)

        try:
            unit.walk_along(path, on_finished)
        except Exception:
            # Only an unsettled walk gives the origin back; once settled the
            # unit stands on the destination.
            if not settled:
                self.board.relocate(entity_id, destination, origin)
                self._in_flight = None
            raise
        return True
