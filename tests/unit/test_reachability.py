# tests/unit/test_reachability.py

import random
from collections import deque
from typing import Deque, List, Set, Tuple

import pytest
from pyrsistent import pset

from tactics_board.board import BoardState
from tactics_board.components import Position
from tactics_board.grid import MaskGrid, RectGrid
from tactics_board.reachability import ReachabilityEngine, compute_reachable
from tactics_board.types import CellPredicate
from tactics_board.utils.grid import manhattan_distance, neighbors
from tests.test_utils import cells, diamond, make_board


def _never_blocked(pos: Position) -> bool:
    return False


def _blocked_by(*coords: Tuple[int, int]) -> CellPredicate:
    blocked = cells(*coords)
    return lambda pos: pos in blocked


def _reference_reachable(
    start: Position, max_distance: int, is_blocked: CellPredicate, grid: RectGrid
) -> Set[Position]:
    """Breadth-first definition: connected, in-bounds, unblocked, within radius."""
    if not grid.in_bounds(start):
        return set()
    seen: Set[Position] = {start}
    queue: Deque[Position] = deque([start])
    while queue:
        cell = queue.popleft()
        for neighbor in neighbors(cell):
            if (
                neighbor not in seen
                and grid.in_bounds(neighbor)
                and not is_blocked(neighbor)
                and manhattan_distance(start, neighbor) <= max_distance
            ):
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


@pytest.mark.parametrize("start", [(0, 0), (2, 2), (4, 1), (3, 4)])
def test_zero_distance_is_only_start(start: Tuple[int, int]) -> None:
    grid = RectGrid(5, 5)
    reachable = compute_reachable(Position(*start), 0, _never_blocked, grid.in_bounds)
    assert reachable == cells(start)


def test_open_board_is_thirteen_cell_diamond() -> None:
    grid = RectGrid(5, 5)
    reachable = compute_reachable(Position(2, 2), 2, _never_blocked, grid.in_bounds)
    assert len(reachable) == 13
    assert reachable == diamond((2, 2), 2)


@pytest.mark.parametrize(
    "start, radius, expected_size",
    [
        ((0, 0), 2, 6),  # quarter diamond in the corner
        ((0, 2), 1, 4),  # edge clips one arm
        ((4, 4), 8, 25),  # radius covers the whole board
    ],
)
def test_diamond_clipped_to_bounds(
    start: Tuple[int, int], radius: int, expected_size: int
) -> None:
    grid = RectGrid(5, 5)
    reachable = compute_reachable(Position(*start), radius, _never_blocked, grid.in_bounds)
    assert reachable == diamond(start, radius)
    assert len(reachable) == expected_size


def test_start_included_even_when_blocked() -> None:
    grid = RectGrid(5, 5)
    is_blocked = _blocked_by((2, 2))
    reachable = compute_reachable(Position(2, 2), 1, is_blocked, grid.in_bounds)
    assert Position(2, 2) in reachable
    assert reachable == diamond((2, 2), 1)


def test_start_out_of_bounds_yields_nothing() -> None:
    grid = RectGrid(3, 3)
    assert compute_reachable(Position(5, 5), 2, _never_blocked, grid.in_bounds) == pset()


def test_negative_distance_raises() -> None:
    grid = RectGrid(3, 3)
    with pytest.raises(ValueError):
        compute_reachable(Position(1, 1), -1, _never_blocked, grid.in_bounds)


def test_blocker_hides_cells_behind_it() -> None:
    grid = RectGrid(5, 5)
    reachable = compute_reachable(
        Position(2, 2), 2, _blocked_by((2, 2), (3, 2)), grid.in_bounds
    )
    assert Position(3, 2) not in reachable
    assert Position(4, 2) not in reachable
    assert reachable == diamond((2, 2), 2).discard(Position(3, 2)).discard(
        Position(4, 2)
    )


def test_fully_surrounded_start_stays_put() -> None:
    grid = RectGrid(5, 5)
    reachable = compute_reachable(
        Position(0, 0), 3, _blocked_by((1, 0), (0, 1)), grid.in_bounds
    )
    assert reachable == cells((0, 0))


def test_displacement_not_walk_length_is_measured() -> None:
    # (2, 0) is two cells from the start but the only walk around (2, 1)
    # takes four steps; it is still reported as reachable with a budget of 3.
    grid = RectGrid(5, 5)
    reachable = compute_reachable(Position(2, 2), 3, _blocked_by((2, 1)), grid.in_bounds)
    assert Position(2, 0) in reachable
    assert Position(2, 1) not in reachable


def test_every_cell_within_budget() -> None:
    grid = RectGrid(7, 6)
    start = Position(3, 3)
    reachable = compute_reachable(start, 3, _blocked_by((3, 2), (4, 3)), grid.in_bounds)
    assert start in reachable
    assert all(manhattan_distance(start, pos) <= 3 for pos in reachable)
    assert all(grid.in_bounds(pos) for pos in reachable)


def test_mask_grid_holes_are_not_crossed() -> None:
    # A wall of void cells with a single gap at y=4.
    playable: List[Position] = [
        Position(x, y) for x in range(5) for y in range(5) if x != 2 or y == 4
    ]
    grid = MaskGrid.from_cells(playable)
    reachable = compute_reachable(Position(0, 0), 4, _never_blocked, grid.in_bounds)
    assert Position(3, 0) not in reachable
    assert Position(2, 4) not in reachable  # distance 6
    assert Position(1, 3) in reachable


@pytest.mark.parametrize("seed", range(8))
def test_matches_breadth_first_reference(seed: int) -> None:
    rng = random.Random(seed)
    grid = RectGrid(8, 8)
    start = Position(rng.randrange(8), rng.randrange(8))
    blocked = pset(
        Position(rng.randrange(8), rng.randrange(8)) for _ in range(rng.randrange(4, 20))
    )
    radius = rng.randrange(0, 6)

    def is_blocked(pos: Position) -> bool:
        return pos in blocked

    reachable = compute_reachable(start, radius, is_blocked, grid.in_bounds)
    assert set(reachable) == _reference_reachable(start, radius, is_blocked, grid)


def test_deterministic_for_identical_inputs() -> None:
    grid = RectGrid(6, 6)
    is_blocked = _blocked_by((1, 1), (2, 3), (4, 2))
    first = compute_reachable(Position(2, 2), 3, is_blocked, grid.in_bounds)
    second = compute_reachable(Position(2, 2), 3, is_blocked, grid.in_bounds)
    assert first == second


def test_engine_uses_board_occupancy() -> None:
    board, grid, _ = make_board([((2, 2), 2), ((3, 2), 1)])
    engine = ReachabilityEngine(board, grid)
    reachable = engine.compute(Position(2, 2), 2)
    assert reachable == diamond((2, 2), 2).discard(Position(3, 2)).discard(
        Position(4, 2)
    )


def test_engine_result_independent_of_unit_order() -> None:
    board_a, grid, units = make_board([((2, 2), 2), ((3, 2), 1), ((1, 1), 1)])
    board_b = BoardState(list(reversed(units)))
    assert ReachabilityEngine(board_a, grid).compute(
        Position(2, 2), 2
    ) == ReachabilityEngine(board_b, grid).compute(Position(2, 2), 2)
