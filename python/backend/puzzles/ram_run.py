"""Day 18: escape a memory grid while bytes keep falling into it."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from backend.engine.search import BFS, SearchResult
from backend.models.geometry import Coordinate
from backend.models.grid import Grid
from backend.puzzles.base import Puzzle

logger = logging.getLogger(__name__)

SIZE = 71
FIRST_BYTES = 1024
CORRUPTED = "#"
SAFE = "."


def parse(text: str) -> list[Coordinate]:
    """Read ``x,y`` lines; x is the column, y the row."""
    falling: list[Coordinate] = []
    for n, line in enumerate(text.strip().splitlines(), 1):
        try:
            x, y = (int(part) for part in line.split(","))
        except ValueError:
            raise ValueError(f"Line {n}: expected 'x,y', got {line!r}") from None
        falling.append(Coordinate(row=y, col=x))
    return falling


def memory(size: int, corrupted: Sequence[Coordinate]) -> Grid[str]:
    blocked = set(corrupted)
    return Grid.of(
        [
            [CORRUPTED if Coordinate(r, c) in blocked else SAFE for c in range(size)]
            for r in range(size)
        ],
        CORRUPTED,
    )


def escape(space: Grid[str]) -> SearchResult[Coordinate]:
    """Fewest steps from the top-left to the bottom-right corner."""
    start, exit_ = Coordinate(0, 0), Coordinate(space.rows - 1, space.cols - 1)
    if space.get(start) != SAFE:
        return SearchResult.not_found()
    return BFS.shortest_path(
        start,
        lambda pos: pos == exit_,
        lambda pos: [n for n in pos.neighbors() if space.get(n) == SAFE],
    )


def first_blocking_byte(falling: Sequence[Coordinate], size: int = SIZE) -> Coordinate:
    """Binary search for the first byte after which the exit is unreachable."""
    if escape(memory(size, falling)).found:
        raise ValueError("The exit stays reachable after every byte has fallen.")
    # The path exists after `low` bytes and is gone after `high` bytes.
    low, high = 0, len(falling)
    while high - low > 1:
        mid = (low + high) // 2
        reachable = escape(memory(size, falling[:mid])).found
        logger.debug("After %d bytes the exit is %s", mid, "open" if reachable else "cut off")
        if reachable:
            low = mid
        else:
            high = mid
    return falling[high - 1]


class RamRun(Puzzle):
    day = 18
    title = "RAM Run"

    @staticmethod
    def part1(text: str, size: int = SIZE, limit: int = FIRST_BYTES) -> int:
        """Minimum steps to the exit, or -1 when it is cut off."""
        return escape(memory(size, parse(text)[:limit])).steps

    @staticmethod
    def part2(text: str, size: int = SIZE) -> str:
        blocker = first_blocking_byte(parse(text), size)
        return f"{blocker.col},{blocker.row}"
