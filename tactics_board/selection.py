"""Selection / move state machine.

Mediates player input against the board:

* ``Idle`` + activate an occupied cell -> ``Selected`` (reachable set computed,
  overlay drawn, path preview armed). Activating an empty cell does nothing.
* ``Selected`` + cancel -> ``Idle`` (overlay and preview cleared).
* ``Selected`` + activate a free reachable cell -> ``Moving``. The overlay and
  preview are cleared, the move is committed through
  :class:`tactics_board.executor.MoveExecutor`, and the state returns to
  ``Idle`` when the walk settles.
* ``Selected`` + activate any other cell -> ignored, selection kept.
* ``Moving`` drops every input.

Illegal input is never an error: handlers return ``False`` and leave the state
untouched. Each handler runs to completion before returning; the only
suspension is the walk itself, during which the controller sits in
``Moving``.
"""

import logging
from typing import List, Optional

from tactics_board.board import BoardState
from tactics_board.components import Position
from tactics_board.executor import MoveExecutor
from tactics_board.grid import GridShape
from tactics_board.overlay import HighlightOverlay, Overlay
from tactics_board.path import PathPreview, PathSource, shortest_path
from tactics_board.reachability import ReachabilityEngine
from tactics_board.state import Idle, Moving, Selected, SelectionState
from tactics_board.types import EntityID, SelectionPhase, SettledFn

logger = logging.getLogger(__name__)


class SelectionController:
    """Owns the current :data:`SelectionState` of one board.

    Attributes:
        board (BoardState): Occupancy the controller reads and the executor writes.
        grid (GridShape): Playable area.
        overlay (Overlay): Receives the reachable set to highlight.
        path_preview (PathSource): Draws and supplies the walk route.
        executor (MoveExecutor): Applies committed moves.
        on_settled (SettledFn | None): Called after a move settles and the
            controller is back to ``Idle``.
        reachability (ReachabilityEngine): Flood fill bound to ``board`` and ``grid``.
    """

    board: BoardState
    grid: GridShape
    overlay: Overlay
    path_preview: PathSource
    executor: MoveExecutor
    on_settled: Optional[SettledFn]
    reachability: ReachabilityEngine

    def __init__(
        self,
        board: BoardState,
        grid: GridShape,
        overlay: Optional[Overlay] = None,
        path_preview: Optional[PathSource] = None,
        executor: Optional[MoveExecutor] = None,
        on_settled: Optional[SettledFn] = None,
    ):
        self.board = board
        self.grid = grid
        self.overlay = overlay if overlay is not None else HighlightOverlay()
        self.path_preview = path_preview if path_preview is not None else PathPreview()
        self.executor = executor if executor is not None else MoveExecutor(board)
        self.on_settled = on_settled
        self.reachability = ReachabilityEngine(board, grid)
        self._state: SelectionState = Idle()

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def phase(self) -> SelectionPhase:
        return self._state.phase

    def cell_activated(self, cell: Position) -> bool:
        """Handle a click / confirm on ``cell``.

        Returns:
            bool: True if the event selected a unit or started a move.
        """
        state = self._state
        if isinstance(state, Idle):
            return self._select(cell)
        if isinstance(state, Selected):
            return self._commit(state, cell)
        logger.debug(f"Activation of ({cell.x}, {cell.y}) dropped while moving")
        return False

    def cell_hovered(self, cell: Position) -> bool:
        """Refresh the path preview towards ``cell`` while a unit is selected."""
        state = self._state
        if not isinstance(state, Selected) or cell not in state.reachable:
            return False
        self.path_preview.draw(state.unit.cell, cell)
        return True

    def cancel(self) -> bool:
        """Drop the current selection. Ignored while idle or moving."""
        state = self._state
        if not isinstance(state, Selected):
            logger.debug(f"Cancel ignored in phase {state.phase}")
            return False
        self._clear_feedback()
        self._state = Idle()
        return True

    def _select(self, cell: Position) -> bool:
        entity_id = self.board.entity_at(cell)
        if entity_id is None:
            logger.debug(f"No unit at ({cell.x}, {cell.y}); nothing selected")
            return False
        unit = self.board.unit(entity_id)
        if unit is None:
            logger.warning(f"Entity {entity_id} occupies a cell but is not registered")
            return False

        reachable = self.reachability.compute(cell, unit.move_range)
        self._state = Selected(entity_id=entity_id, unit=unit, reachable=reachable)
        self.overlay.draw(reachable)
        self.path_preview.initialize(reachable)
        logger.debug(f"Selected entity {entity_id}: {len(reachable)} reachable cells")
        return True

    def _commit(self, selection: Selected, cell: Position) -> bool:
        if not self.executor.can_commit(selection, cell):
            logger.debug(
                f"Activation of ({cell.x}, {cell.y}) ignored for entity "
                f"{selection.entity_id}"
            )
            return False

        path = self._path_to(selection, cell)
        self._clear_feedback()
        self._state = Moving(entity_id=selection.entity_id, destination=cell)
        try:
            started = self.executor.commit(selection, cell, path, self._settle)
        except Exception:
            if isinstance(self._state, Moving):
                self._restore(selection)
            raise
        if not started:
            self._restore(selection)
        return started

    def _path_to(self, selection: Selected, cell: Position) -> List[Position]:
        start = selection.unit.cell
        self.path_preview.draw(start, cell)
        path = self.path_preview.current_path()
        if not path or path[0] != start or path[-1] != cell:
            path = shortest_path(start, cell, selection.reachable)
        return path

    def _settle(self, entity_id: EntityID, destination: Position) -> None:
        self._state = Idle()
        logger.debug(
            f"Entity {entity_id} settled at ({destination.x}, {destination.y})"
        )
        if self.on_settled is not None:
            self.on_settled(entity_id, destination)

    def _clear_feedback(self) -> None:
        self.overlay.clear()
        self.path_preview.stop()

    def _restore(self, selection: Selected) -> None:
        self._state = selection
        self.overlay.draw(selection.reachable)
        self.path_preview.initialize(selection.reachable)

