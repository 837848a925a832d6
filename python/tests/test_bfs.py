"""Breadth-first engine: shortest paths, walk enumeration and flood fill."""

from __future__ import annotations

import itertools

import pytest

from backend.engine.search import BFS, SearchResult
from backend.models.geometry import Coordinate
from backend.models.grid import Grid

WALL = "#"

DIAGONAL_BLOCK = """\
S..
.#.
..E
"""

ADJACENT = "SE"

WALLED_IN = """\
S....
..###
..#E#
..###
"""


# -- helpers ------------------------------------------------------------------


def _maze(text: str) -> tuple[Grid[str], Coordinate, Coordinate]:
    grid = Grid.parse(text, WALL)
    return grid, grid.find("S"), grid.find("E")


def _open_steps(grid: Grid[str]):
    return lambda pos: [n for n in pos.neighbors() if grid.get(n) != WALL]


def _solve(text: str) -> SearchResult[Coordinate]:
    grid, start, end = _maze(text)
    return BFS.shortest_path(start, lambda pos: pos == end, _open_steps(grid))


def _assert_valid_walk(grid: Grid[str], path: tuple[Coordinate, ...]) -> None:
    for a, b in zip(path, path[1:]):
        assert a.manhattan(b) == 1, f"{a} -> {b} is not a single step"
        assert grid.get(b) != WALL, f"{b} is a wall"


# -- shortest path ------------------------------------------------------------


def test_diagonal_block_takes_four_steps() -> None:
    grid, start, end = _maze(DIAGONAL_BLOCK)
    result = _solve(DIAGONAL_BLOCK)
    assert result.found
    assert result.steps == 4
    assert result.cost == 4
    assert result.path[0] == start and result.path[-1] == end
    _assert_valid_walk(grid, result.path)


def test_adjacent_goal_costs_one() -> None:
    result = _solve(ADJACENT)
    assert result.path == (Coordinate(0, 0), Coordinate(0, 1))
    assert result.cost == 1


def test_unreachable_goal_is_a_result_not_an_error() -> None:
    result = _solve(WALLED_IN)
    assert not result.found
    assert result.path == ()
    assert result.steps == -1
    assert result.goal is None
    assert result.expanded == 11  # every open cell outside the box


def test_start_that_is_a_goal() -> None:
    result = BFS.shortest_path("a", lambda s: s == "a", lambda s: ["b"])
    assert result.path == ("a",)
    assert result.cost == 0


_OPEN = Grid.of([["."] * 6 for _ in range(5)], WALL)
_CELLS = [pos for pos, _ in _OPEN.cells()]


@pytest.mark.parametrize(
    "start, end",
    [(a, b) for a, b in itertools.product(_CELLS[::7], _CELLS[::4])],
    ids=lambda c: f"{c.row}-{c.col}",
)
def test_open_grid_distance_is_manhattan(start: Coordinate, end: Coordinate) -> None:
    result = BFS.shortest_path(start, lambda pos: pos == end, _open_steps(_OPEN))
    assert result.steps == start.manhattan(end)


def test_neighbors_are_generated_lazily() -> None:
    grid, start, end = _maze(ADJACENT)
    calls: list[Coordinate] = []

    def neighbors(pos: Coordinate) -> list[Coordinate]:
        calls.append(pos)
        return _open_steps(grid)(pos)

    BFS.shortest_path(start, lambda pos: pos == end, neighbors)
    assert calls == [start]


def test_repeated_runs_agree() -> None:
    first = _solve(DIAGONAL_BLOCK)
    second = _solve(DIAGONAL_BLOCK)
    assert first == second


# -- enumeration --------------------------------------------------------------

_DIAMOND = {
    "top": ["left", "right"],
    "left": ["bottom"],
    "right": ["bottom"],
    "bottom": [],
}


def test_all_paths_revisits_shared_states() -> None:
    paths = set(BFS.all_paths("top", lambda s: s == "bottom", _DIAMOND.__getitem__))
    assert paths == {("top", "left", "bottom"), ("top", "right", "bottom")}
    assert BFS.count_paths("top", lambda s: s == "bottom", _DIAMOND.__getitem__) == 2


def test_shortest_path_visits_shared_state_once() -> None:
    calls: list[str] = []

    def neighbors(state: str) -> list[str]:
        calls.append(state)
        return _DIAMOND[state]

    result = BFS.shortest_path("top", lambda s: False, neighbors)
    assert not result.found
    assert sorted(calls) == ["bottom", "left", "right", "top"]


def test_count_paths_keeps_expanding_past_goals() -> None:
    chain = {"a": ["b"], "b": ["c"], "c": []}
    assert BFS.count_paths("a", lambda s: s in {"b", "c"}, chain.__getitem__) == 2


def test_count_paths_with_no_goal_is_zero() -> None:
    assert BFS.count_paths("top", lambda s: s == "nowhere", _DIAMOND.__getitem__) == 0


# -- flood fill ---------------------------------------------------------------


def test_distances_from_corner() -> None:
    grid, start, end = _maze(DIAGONAL_BLOCK)
    distances = BFS.distances(start, _open_steps(grid))
    assert distances[start] == 0
    assert distances[end] == 4
    assert Coordinate(1, 1) not in distances
    assert len(distances) == 8


def test_reachable_stops_at_walls() -> None:
    grid, start, end = _maze(WALLED_IN)
    reachable = BFS.reachable(start, _open_steps(grid))
    assert end not in reachable
    assert len(reachable) == 11
