"""Movable unit record.

The board core reads three things from a unit (``entity_id``, ``cell`` and
``move_range``) and issues exactly one instruction to it: ``walk_along``. The
:class:`UnitLike` protocol captures that contract so scenes can plug in their
own animated actors.

:class:`Unit` is the bundled implementation. It does not animate anything; it
records the requested walk and completes it when :meth:`Unit.finish_walk` is
called (or immediately, with ``auto_finish=True``). A unit only updates its own
``cell`` when the walk completes, which is later than the board's optimistic
occupancy update.
"""

from typing import List, Optional, Protocol, Sequence

from tactics_board.components import Position
from tactics_board.entity import new_entity_id
from tactics_board.types import EntityID, WalkFinishedFn


class UnitLike(Protocol):
    entity_id: EntityID
    cell: Position
    move_range: int

    def walk_along(
        self, path: Sequence[Position], on_finished: WalkFinishedFn
    ) -> None: ...


class Unit:
    """Unit with a position, a move budget and a pending walk.

    Attributes:
        entity_id: Board-unique identifier.
        cell: Current authoritative position of the unit.
        move_range: Maximum Manhattan distance the unit may travel per move.
        auto_finish: Complete walks as soon as they are issued.
        walking: Path of the walk in progress, ``None`` when idle.
    """

    entity_id: EntityID
    cell: Position
    move_range: int
    auto_finish: bool
    walking: Optional[List[Position]]

    def __init__(
        self,
        cell: Position,
        move_range: int,
        entity_id: Optional[EntityID] = None,
        auto_finish: bool = False,
    ):
        if move_range < 0:
            raise ValueError(f"move_range must be non-negative, got {move_range}")
        self.entity_id = entity_id if entity_id is not None else new_entity_id()
        self.cell = cell
        self.move_range = move_range
        self.auto_finish = auto_finish
        self.walking = None
        self._on_finished: Optional[WalkFinishedFn] = None

    def __repr__(self) -> str:
        return (
            f"Unit(entity_id={self.entity_id}, cell={self.cell}, "
            f"move_range={self.move_range})"
        )

    @property
    def is_walking(self) -> bool:
        return self.walking is not None

    def walk_along(self, path: Sequence[Position], on_finished: WalkFinishedFn) -> None:
        """Start walking ``path`` and call ``on_finished`` once it completes.

        Raises:
            ValueError: If ``path`` is empty.
            RuntimeError: If a previous walk has not finished yet.
        """
        if not path:
            raise ValueError("Cannot walk an empty path")
        if self.walking is not None:
            raise RuntimeError(f"Unit {self.entity_id} is already walking")
        self.walking = list(path)
        self._on_finished = on_finished
        if self.auto_finish:
            self.finish_walk()

    def finish_walk(self) -> bool:
        """Complete the pending walk.

        Moves ``cell`` to the last cell of the path and fires the completion
        callback once. Returns False if there was no walk to finish.
        """
        if self.walking is None:
            return False
        self.cell = self.walking[-1]
        on_finished = self._on_finished
        self.walking = None
        self._on_finished = None
        if on_finished is not None:
            on_finished()
        return True
