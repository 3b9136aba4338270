"""Grid shapes.

A grid shape answers a single question for the board core: is this
coordinate part of the playable area? Anything exposing
``in_bounds(Position) -> bool`` satisfies :class:`GridShape`; the two
built-in shapes cover plain rectangles and arbitrary cell masks (boards with
holes or irregular outlines).
"""

from dataclasses import dataclass
from typing import Iterable, Protocol

from pyrsistent import pset
from pyrsistent.typing import PSet

from tactics_board.components import Position
from tactics_board.utils.grid import is_in_rect


class GridShape(Protocol):
    def in_bounds(self, pos: Position) -> bool: ...


@dataclass(frozen=True)
class RectGrid:
    """Rectangular playable area ``0 <= x < width``, ``0 <= y < height``.

    Raises:
        ValueError: If either dimension is not positive.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )

    def in_bounds(self, pos: Position) -> bool:
        return is_in_rect(pos, self.width, self.height)


@dataclass(frozen=True)
class MaskGrid:
    """Playable area given as an explicit set of cells.

    ``width`` and ``height`` describe the bounding extent from the origin and
    are used by renderers; they do not make extra cells playable.
    """

    cells: PSet[Position]

    @classmethod
    def from_cells(cls, cells: Iterable[Position]) -> "MaskGrid":
        return cls(pset(cells))

    @property
    def width(self) -> int:
        return max((pos.x for pos in self.cells), default=-1) + 1

    @property
    def height(self) -> int:
        return max((pos.y for pos in self.cells), default=-1) + 1

    def in_bounds(self, pos: Position) -> bool:
        return pos in self.cells
