from tactics_board.components import Position
from tactics_board.path import PathPreview, shortest_path
from tests.test_utils import cells, diamond


def test_straight_path() -> None:
    allowed = diamond((0, 0), 3)
    path = shortest_path(Position(0, 0), Position(3, 0), allowed)
    assert path == [Position(0, 0), Position(1, 0), Position(2, 0), Position(3, 0)]


def test_path_to_self() -> None:
    assert shortest_path(Position(1, 1), Position(1, 1), cells()) == [Position(1, 1)]


def test_path_detours_around_missing_cells() -> None:
    allowed = diamond((2, 2), 3).discard(Position(2, 1))
    path = shortest_path(Position(2, 2), Position(2, 0), allowed)
    assert len(path) == 5
    assert path[0] == Position(2, 2)
    assert path[-1] == Position(2, 0)
    assert Position(2, 1) not in path
    for a, b in zip(path, path[1:]):
        assert abs(a.x - b.x) + abs(a.y - b.y) == 1


def test_unreachable_goal_returns_empty() -> None:
    allowed = cells((0, 0), (1, 0), (3, 0))
    assert shortest_path(Position(0, 0), Position(3, 0), allowed) == []
    assert shortest_path(Position(0, 0), Position(4, 4), allowed) == []


def test_path_is_deterministic() -> None:
    allowed = diamond((2, 2), 2)
    first = shortest_path(Position(2, 2), Position(3, 3), allowed)
    second = shortest_path(Position(2, 2), Position(3, 3), allowed)
    assert first == second
    assert len(first) == 3


def test_preview_lifecycle() -> None:
    preview = PathPreview()
    preview.draw(Position(0, 0), Position(1, 0))
    assert preview.current_path() == []

    preview.initialize(cells((0, 0), (1, 0), (2, 0)))
    assert preview.active
    preview.draw(Position(0, 0), Position(2, 0))
    assert preview.current_path() == [Position(0, 0), Position(1, 0), Position(2, 0)]

    preview.draw(Position(0, 0), Position(0, 3))
    assert preview.current_path() == []

    preview.stop()
    assert not preview.active
    assert preview.current_path() == []
    assert len(preview.cells) == 0
