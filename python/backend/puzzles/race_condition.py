"""Day 20: shortcuts through the walls of a single-lane race track."""

from __future__ import annotations

from backend.engine.search import BFS
from backend.models.geometry import Coordinate
from backend.models.grid import Grid
from backend.puzzles.base import Puzzle

WALL = "#"
START = "S"
MIN_SAVING = 100
SHORT_CHEAT = 2
LONG_CHEAT = 20


def track_distances(track: Grid[str]) -> dict[Coordinate, int]:
    """Steps from the start to every track cell."""
    return BFS.distances(
        track.find(START),
        lambda pos: [n for n in pos.neighbors() if track.get(n) != WALL],
    )


def count_cheats(
    distances: dict[Coordinate, int], max_length: int, min_saving: int
) -> int:
    """Count (start, end) cheats of 2..max_length cells saving enough time.

    A cheat ignores walls for its duration, so it covers any cell within
    Manhattan distance *max_length* and must end back on the track.
    """
    count = 0
    for pos, before in distances.items():
        for dr in range(-max_length, max_length + 1):
            span = max_length - abs(dr)
            for dc in range(-span, span + 1):
                length = abs(dr) + abs(dc)
                if length < 2:
                    continue
                after = distances.get(Coordinate(pos.row + dr, pos.col + dc))
                if after is not None and after - before - length >= min_saving:
                    count += 1
    return count


class RaceCondition(Puzzle):
    day = 20
    title = "Race Condition"

    @staticmethod
    def part1(text: str, min_saving: int = MIN_SAVING) -> int:
        return count_cheats(track_distances(Grid.parse(text, WALL)), SHORT_CHEAT, min_saving)

    @staticmethod
    def part2(text: str, min_saving: int = MIN_SAVING) -> int:
        return count_cheats(track_distances(Grid.parse(text, WALL)), LONG_CHEAT, min_saving)
