from typing import Dict, Iterable, Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from tactics_board.board import BoardState
from tactics_board.components import Position
from tactics_board.grid import GridShape

DEFAULT_CELL_SIZE = 32
DEFAULT_GRID_LINE_COLOR = (40, 40, 40)

Color = Tuple[int, int, int]
UInt8Array = npt.NDArray[np.uint8]

TILE_COLORS: Dict[str, Color] = {
    "void": (20, 20, 20),
    "floor": (170, 170, 170),
    "highlight": (110, 170, 230),
}

UNIT_COLORS: Tuple[Color, ...] = (
    (200, 60, 60),
    (60, 160, 80),
    (220, 170, 40),
    (150, 80, 200),
)


def unit_color(entity_id: int) -> Color:
    """Stable marker colour for a unit."""
    return UNIT_COLORS[entity_id % len(UNIT_COLORS)]


def tile_array(
    grid: GridShape,
    width: int,
    height: int,
    highlighted: Iterable[Position] = (),
) -> UInt8Array:
    """Return a ``(height, width, 3)`` array with one colour per cell."""
    tiles: UInt8Array = np.empty((height, width, 3), dtype=np.uint8)
    tiles[:, :] = TILE_COLORS["void"]
    for y in range(height):
        for x in range(width):
            if grid.in_bounds(Position(x, y)):
                tiles[y, x] = TILE_COLORS["floor"]
    for pos in highlighted:
        if 0 <= pos.x < width and 0 <= pos.y < height:
            tiles[pos.y, pos.x] = TILE_COLORS["highlight"]
    return tiles


def render(
    board: BoardState,
    grid: GridShape,
    width: int,
    height: int,
    highlighted: Iterable[Position] = (),
    cell_size: int = DEFAULT_CELL_SIZE,
    grid_lines: bool = True,
) -> Image.Image:
    """
    Renders the board as an RGB image: tiles, highlighted cells, then one
    round marker per occupied cell.
    """
    tiles = tile_array(grid, width, height, highlighted)
    img = Image.fromarray(tiles).resize(
        (width * cell_size, height * cell_size), Image.Resampling.NEAREST
    )
    draw = ImageDraw.Draw(img)

    if grid_lines:
        for x in range(1, width):
            draw.line(
                [(x * cell_size, 0), (x * cell_size, height * cell_size)],
                fill=DEFAULT_GRID_LINE_COLOR,
            )
        for y in range(1, height):
            draw.line(
                [(0, y * cell_size), (width * cell_size, y * cell_size)],
                fill=DEFAULT_GRID_LINE_COLOR,
            )

    margin = max(2, cell_size // 6)
    for pos, entity_id in board.occupancy.items():
        x0, y0 = pos.x * cell_size, pos.y * cell_size
        draw.ellipse(
            [x0 + margin, y0 + margin, x0 + cell_size - margin, y0 + cell_size - margin],
            fill=unit_color(entity_id),
            outline=(0, 0, 0),
        )
    return img


class BoardRenderer:
    width: int
    height: int
    cell_size: int
    grid_lines: bool

    def __init__(
        self,
        width: int,
        height: int,
        cell_size: int = DEFAULT_CELL_SIZE,
        grid_lines: bool = True,
    ):
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.grid_lines = grid_lines

    def render(
        self,
        board: BoardState,
        grid: GridShape,
        highlighted: Optional[Iterable[Position]] = None,
    ) -> Image.Image:
        return render(
            board,
            grid,
            self.width,
            self.height,
            highlighted=highlighted if highlighted is not None else (),
            cell_size=self.cell_size,
            grid_lines=self.grid_lines,
        )
