"""Path preview.

While a unit is selected the player sees the route it would walk to the cell
under the cursor. The route is a breadth-first shortest path restricted to the
unit's reachable set, so it never crosses an occupied or out-of-range cell.

The reachable set produced by the flood fill is 4-connected to its seed, so a
route to any of its members always exists. Its *length* may exceed the unit's
move range when obstacles force a detour (see
:mod:`tactics_board.reachability`).
"""

from collections import deque
from typing import Deque, Dict, Iterable, List, Optional, Protocol

from pyrsistent import pset
from pyrsistent.typing import PSet

from tactics_board.components import Position
from tactics_board.utils.grid import neighbors


class PathSource(Protocol):
    def initialize(self, cells: Iterable[Position]) -> None: ...

    def draw(self, start: Position, goal: Position) -> None: ...

    def current_path(self) -> List[Position]: ...

    def stop(self) -> None: ...


def shortest_path(
    start: Position, goal: Position, allowed: Iterable[Position]
) -> List[Position]:
    """Return a shortest 4-connected path from ``start`` to ``goal``.

    Only cells in ``allowed`` (and ``start`` itself) may be stepped on.

    Returns:
        List[Position]: Cells from ``start`` to ``goal`` inclusive, or an empty
            list when ``goal`` cannot be reached.
    """
    allowed_cells = set(allowed)
    allowed_cells.add(start)
    if goal not in allowed_cells:
        return []

    came_from: Dict[Position, Optional[Position]] = {start: None}
    queue: Deque[Position] = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == goal:
            break
        for neighbor in neighbors(cell):
            if neighbor in allowed_cells and neighbor not in came_from:
                came_from[neighbor] = cell
                queue.append(neighbor)

    if goal not in came_from:
        return []

    path: List[Position] = []
    node: Optional[Position] = goal
    while node is not None:
        path.append(node)
        node = came_from[node]
    path.reverse()
    return path


class PathPreview:
    """Tracks the previewed route for the selected unit.

    Attributes:
        cells: Cells the preview may route through (empty when inactive).
        path: Most recently drawn route.
        active: True between ``initialize`` and ``stop``.
    """

    cells: PSet[Position]
    path: List[Position]
    active: bool

    def __init__(self) -> None:
        self.cells = pset()
        self.path = []
        self.active = False

    def initialize(self, cells: Iterable[Position]) -> None:
        self.cells = pset(cells)
        self.path = []
        self.active = True

    def draw(self, start: Position, goal: Position) -> None:
        """Recompute the route from ``start`` to ``goal``; empty if inactive."""
        if not self.active:
            self.path = []
            return
        self.path = shortest_path(start, goal, self.cells)

    def current_path(self) -> List[Position]:
        return list(self.path)

    def stop(self) -> None:
        self.cells = pset()
        self.path = []
        self.active = False
