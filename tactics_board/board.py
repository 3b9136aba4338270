"""Board occupancy state.

:class:`BoardState` is the single source of truth for which unit stands on
which cell. It owns two persistent maps:

* ``occupancy``: ``PMap[Position, EntityID]``. At most one unit per cell.
* ``units``: ``PMap[EntityID, UnitLike]``. The unit records the board was
  built from, so the selection layer can read a unit's move range.

Design notes:

* Every mutation builds a new ``pmap`` and swaps it in with a single
  assignment, so callers never observe a half-applied update.
* ``relocate`` is an optimistic write: it trusts the caller to have checked
  that the destination is free. Only the source cell is validated.
* ``reinitialize`` has no hard duplicate check. When two units claim the same
  cell the last one wins and a consistency warning is logged; this points at
  a bug in whatever supplied the units.
"""

import logging
from typing import Dict, Iterable, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from tactics_board.components import Position
from tactics_board.types import EntityID
from tactics_board.unit import UnitLike

logger = logging.getLogger(__name__)


class BoardState:
    """Mapping from cell to occupying unit.

    Attributes:
        occupancy (PMap[Position, EntityID]): Current cell to unit map.
        units (PMap[EntityID, UnitLike]): Registered unit records.
    """

    occupancy: PMap[Position, EntityID]
    units: PMap[EntityID, UnitLike]

    def __init__(self, units: Iterable[UnitLike] = ()):
        self.occupancy = pmap()
        self.units = pmap()
        self.reinitialize(units)

    def __len__(self) -> int:
        return len(self.occupancy)

    def __contains__(self, cell: object) -> bool:
        return cell in self.occupancy

    def is_occupied(self, cell: Position) -> bool:
        """Return True iff some unit currently maps to ``cell``."""
        return cell in self.occupancy

    def entity_at(self, cell: Position) -> Optional[EntityID]:
        """Return the ID of the unit on ``cell`` or ``None`` if it is empty."""
        return self.occupancy.get(cell)

    def unit(self, entity_id: EntityID) -> Optional[UnitLike]:
        return self.units.get(entity_id)

    def cell_of(self, entity_id: EntityID) -> Optional[Position]:
        """Return the cell the board currently assigns to ``entity_id``.

        This may differ from the unit's own ``cell`` while a move is settling.
        """
        for cell, eid in self.occupancy.items():
            if eid == entity_id:
                return cell
        return None

    def reinitialize(self, units: Iterable[UnitLike]) -> None:
        """Rebuild both maps from the units' current cells.

        Args:
            units (Iterable[UnitLike]): Units to place. Later entries win when
                two units share a cell (logged as a warning).
        """
        occupancy: Dict[Position, EntityID] = {}
        registry: Dict[EntityID, UnitLike] = {}
        for unit in units:
            # Same unit listed twice: only its last cell counts.
            if unit.entity_id in registry:
                del occupancy[registry[unit.entity_id].cell]
            existing = occupancy.get(unit.cell)
            if existing is not None:
                logger.warning(
                    f"Board consistency: entities {existing} and {unit.entity_id} "
                    f"both claim cell ({unit.cell.x}, {unit.cell.y}); keeping {unit.entity_id}"
                )
                del registry[existing]
            occupancy[unit.cell] = unit.entity_id
            registry[unit.entity_id] = unit
        self.occupancy = pmap(occupancy)
        self.units = pmap(registry)

    def add(self, unit: UnitLike) -> None:
        """Place a single unit.

        Raises:
            ValueError: If the unit's cell is occupied or the unit is already
                on the board.
        """
        if unit.cell in self.occupancy:
            raise ValueError(
                f"Cell ({unit.cell.x}, {unit.cell.y}) is already occupied by "
                f"entity {self.occupancy[unit.cell]}"
            )
        if unit.entity_id in self.units:
            raise ValueError(f"Entity {unit.entity_id} is already on the board")
        self.occupancy = self.occupancy.set(unit.cell, unit.entity_id)
        self.units = self.units.set(unit.entity_id, unit)

    def remove(self, entity_id: EntityID) -> bool:
        """Take a unit off the board. Returns False if it was not present."""
        cell = self.cell_of(entity_id)
        if cell is None and entity_id not in self.units:
            return False
        if cell is not None:
            self.occupancy = self.occupancy.remove(cell)
        self.units = self.units.discard(entity_id)
        return True

    def relocate(
        self, entity_id: EntityID, origin: Position, destination: Position
    ) -> None:
        """Move ``entity_id`` from ``origin`` to ``destination``.

        The destination is not re-validated; callers check occupancy first.

        Raises:
            ValueError: If ``origin`` does not currently map to ``entity_id``.
        """
        if self.occupancy.get(origin) != entity_id:
            raise ValueError(
                f"Entity {entity_id} is not at ({origin.x}, {origin.y})"
            )
        self.occupancy = self.occupancy.remove(origin).set(destination, entity_id)

    def is_consistent(self) -> bool:
        """Return True if every registered unit maps back from exactly one cell.

        The cell a unit maps back from must also be the unit's own ``cell``.
        Between a relocate and the end of the walk the unit still reports its
        origin, so only call this while no move is in flight.
        """
        ids = list(self.occupancy.values())
        if len(ids) != len(set(ids)) or set(ids) != set(self.units.keys()):
            return False
        return all(
            self.occupancy.get(unit.cell) == entity_id
            for entity_id, unit in self.units.items()
        )
