"""Day 10: hiking trails climb from height 0 to 9 one step at a time."""

from __future__ import annotations

from collections.abc import Callable

from backend.engine.search import BFS
from backend.models.geometry import Coordinate
from backend.models.grid import Grid
from backend.puzzles.base import Puzzle

OFF_MAP = -1
TRAILHEAD = 0
SUMMIT = 9


def parse(text: str) -> Grid[int]:
    """Digits become heights; anything else is impassable."""
    return Grid.parse(text, OFF_MAP, cell=lambda ch: int(ch) if ch.isdigit() else OFF_MAP)


def uphill(heights: Grid[int]) -> Callable[[Coordinate], list[Coordinate]]:
    def neighbors(pos: Coordinate) -> list[Coordinate]:
        target = heights.get(pos) + 1
        return [n for n in pos.neighbors() if heights.get(n) == target]

    return neighbors


class HoofIt(Puzzle):
    day = 10
    title = "Hoof It"

    @staticmethod
    def part1(text: str) -> int:
        """Sum of trailhead scores: distinct summits reachable from each."""
        heights = parse(text)
        climb = uphill(heights)
        return sum(
            sum(1 for pos in BFS.reachable(head, climb) if heights.get(pos) == SUMMIT)
            for head in heights.find_all(TRAILHEAD)
        )

    @staticmethod
    def part2(text: str) -> int:
        """Sum of trailhead ratings: distinct trails from each."""
        heights = parse(text)
        climb = uphill(heights)
        return sum(
            BFS.count_paths(head, lambda pos: heights.get(pos) == SUMMIT, climb)
            for head in heights.find_all(TRAILHEAD)
        )
