"""ASCII board layouts.

Authoring-time helper that turns a block of text into a playable area and a
set of units, e.g.::

    layout = parse_layout(
        '''
        .....
        ..A..
        ...B#
        ''',
        move_ranges={"A": 2},
    )

Symbols:

* ``.``: floor cell.
* ``#`` (or a space past the end of a short row): void, outside the board.
* a letter: a unit standing on a floor cell, keyed by that letter.

Leading/trailing blank lines are dropped. When the text ends on a
whitespace-only line (the closing quotes of an indented triple-quoted string),
exactly that indentation is removed from every row, so layouts can be written
inline in tests and a space-void first column is kept.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from tactics_board.components import Position
from tactics_board.grid import MaskGrid
from tactics_board.unit import Unit

DEFAULT_MOVE_RANGE = 3
FLOOR = "."
VOID = "#"


@dataclass(frozen=True)
class Layout:
    """Result of :func:`parse_layout`.

    Attributes:
        grid: Playable cells.
        units: Units keyed by their layout letter.
    """

    grid: MaskGrid
    units: Dict[str, Unit]

    def unit_list(self) -> List[Unit]:
        return list(self.units.values())


def parse_layout(
    text: str,
    move_ranges: Optional[Mapping[str, int]] = None,
    default_move_range: int = DEFAULT_MOVE_RANGE,
    auto_finish: bool = False,
) -> Layout:
    """Parse an ASCII layout.

    Args:
        text: Layout rows, top row first.
        move_ranges: Per-letter move range overrides.
        default_move_range: Move range for letters not in ``move_ranges``.
        auto_finish: Passed to every created :class:`Unit`.

    Raises:
        ValueError: On an unknown symbol or a letter used twice.
    """
    move_ranges = move_ranges or {}
    rows = _layout_rows(text)

    cells: List[Position] = []
    units: Dict[str, Unit] = {}
    for y, row in enumerate(rows):
        for x, symbol in enumerate(row.rstrip()):
            if symbol in (VOID, " "):
                continue
            pos = Position(x, y)
            if symbol == FLOOR:
                cells.append(pos)
            elif symbol.isalpha():
                if symbol in units:
                    raise ValueError(f"Unit {symbol!r} appears more than once")
                cells.append(pos)
                units[symbol] = Unit(
                    cell=pos,
                    move_range=move_ranges.get(symbol, default_move_range),
                    auto_finish=auto_finish,
                )
            else:
                raise ValueError(f"Unknown layout symbol {symbol!r} at ({x}, {y})")

    return Layout(grid=MaskGrid.from_cells(cells), units=units)


def _layout_rows(text: str) -> List[str]:
    lines = text.split("\n")
    indent = lines[-1] if not lines[-1].strip() else ""
    rows = [line[len(indent):] if line.startswith(indent) else line for line in lines]
    while rows and not rows[0].strip():
        rows.pop(0)
    while rows and not rows[-1].strip():
        rows.pop()
    return rows
