"""Selection state values.

The selection lifecycle is modelled as three frozen dataclasses, one per
phase. Each carries only what that phase needs:

* :class:`Idle`: nothing selected; the board accepts a new selection.
* :class:`Selected`: a unit is selected and its reachable set is cached. The
  cache is a snapshot taken at selection time; it is only valid while the
  board does not change, which holds because every board change goes through
  a commit that leaves this phase.
* :class:`Moving`: a move has been committed and its walk has not settled.
  All input is dropped until the walk reports completion.

Values are replaced, never mutated; :class:`tactics_board.selection.SelectionController`
owns the current one.
"""

from dataclasses import dataclass
from typing import Union

from pyrsistent.typing import PSet

from tactics_board.components import Position
from tactics_board.types import EntityID, SelectionPhase
from tactics_board.unit import UnitLike


@dataclass(frozen=True)
class Idle:
    phase: SelectionPhase = SelectionPhase.IDLE


@dataclass(frozen=True)
class Selected:
    """A unit is selected.

    Attributes:
        entity_id: Selected unit's ID.
        unit: Reference to the unit record (not owned).
        reachable: Cells the unit may move to, computed on selection.
    """

    entity_id: EntityID
    unit: UnitLike
    reachable: PSet[Position]
    phase: SelectionPhase = SelectionPhase.SELECTED


@dataclass(frozen=True)
class Moving:
    """A committed move is settling.

    Attributes:
        entity_id: Moving unit's ID.
        destination: Cell the board already assigns to the unit.
    """

    entity_id: EntityID
    destination: Position
    phase: SelectionPhase = SelectionPhase.MOVING


SelectionState = Union[Idle, Selected, Moving]
