"""Reachable-cell highlight overlay.

The selection controller tells an overlay which cells to highlight when a
unit is selected and to clear them when the selection ends. It never reads
anything back. :class:`HighlightOverlay` keeps the highlighted set so a
renderer (see :mod:`tactics_board.renderer`) can draw it.
"""

from typing import Iterable, Protocol

from pyrsistent import pset
from pyrsistent.typing import PSet

from tactics_board.components import Position


class Overlay(Protocol):
    def draw(self, cells: Iterable[Position]) -> None: ...

    def clear(self) -> None: ...


class HighlightOverlay:
    cells: PSet[Position]

    def __init__(self) -> None:
        self.cells = pset()

    def draw(self, cells: Iterable[Position]) -> None:
        self.cells = pset(cells)

    def clear(self) -> None:
        self.cells = pset()
