"""Grid construction, sentinel reads and lookups."""

from __future__ import annotations

import pytest

from backend.models.geometry import Coordinate
from backend.models.grid import Grid, NotFoundError, ShapeError

MAZE = """\
S..
.#.
..E
"""


def test_of_reports_dimensions() -> None:
    grid = Grid.of([[1, 2, 3], [4, 5, 6]], 0)
    assert (grid.rows, grid.cols) == (2, 3)


@pytest.mark.parametrize(
    "data",
    [[], [[]], [[1, 2], [3]], [[1], [2, 3]]],
    ids=["no-rows", "empty-row", "short-second-row", "long-second-row"],
)
def test_of_rejects_bad_shapes(data: list[list[int]]) -> None:
    with pytest.raises(ShapeError):
        Grid.of(data, 0)


def test_shape_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Grid.parse("", "#")


@pytest.mark.parametrize(
    "pos",
    [Coordinate(-1, 0), Coordinate(0, -1), Coordinate(3, 0), Coordinate(0, 3), Coordinate(99, 99)],
    ids=str,
)
def test_out_of_bounds_reads_return_sentinel(pos: Coordinate) -> None:
    grid = Grid.parse(MAZE, "X")
    assert grid.get(pos) == "X"
    assert not grid.in_bounds(pos)


def test_in_bounds_reads() -> None:
    grid = Grid.parse(MAZE, "X")
    assert grid.get(Coordinate(0, 0)) == "S"
    assert grid[Coordinate(1, 1)] == "#"
    assert grid.get(Coordinate(2, 2)) == "E"


def test_reads_are_idempotent() -> None:
    grid = Grid.parse(MAZE, "X")
    before = grid.data
    for _ in range(3):
        assert grid.get(Coordinate(1, 1)) == "#"
    assert grid.data == before


def test_find_returns_first_in_row_major_order() -> None:
    grid = Grid.parse("a.b\n.b.\nb..", "#")
    assert grid.find("b") == Coordinate(0, 2)
    assert grid.find_all("b") == [Coordinate(0, 2), Coordinate(1, 1), Coordinate(2, 0)]


def test_find_missing_value_raises() -> None:
    with pytest.raises(NotFoundError):
        Grid.parse(MAZE, "#").find("Z")


def test_parse_with_cell_converter() -> None:
    grid = Grid.parse("012\n345\n", -1, cell=int)
    assert grid.get(Coordinate(1, 2)) == 5
    assert grid.get(Coordinate(5, 5)) == -1


def test_cells_iterates_row_major() -> None:
    grid = Grid.of([["a", "b"], ["c", "d"]], "")
    assert list(grid.cells()) == [
        (Coordinate(0, 0), "a"),
        (Coordinate(0, 1), "b"),
        (Coordinate(1, 0), "c"),
        (Coordinate(1, 1), "d"),
    ]


def test_with_value_leaves_original_untouched() -> None:
    grid = Grid.parse(MAZE, "#")
    changed = grid.with_value(Coordinate(0, 1), "#")
    assert changed.get(Coordinate(0, 1)) == "#"
    assert grid.get(Coordinate(0, 1)) == "."
    assert changed.sentinel == grid.sentinel


def test_with_value_out_of_bounds_raises() -> None:
    with pytest.raises(IndexError):
        Grid.parse(MAZE, "#").with_value(Coordinate(3, 0), "#")


def test_render_with_overlay() -> None:
    grid = Grid.parse(MAZE, "#")
    assert grid.render({Coordinate(0, 1): "O"}) == "SO.\n.#.\n..E"
