"""Day 6: a guard patrols a lab, turning right at every obstacle."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from backend.models.geometry import Coordinate, Direction
from backend.models.grid import Grid
from backend.puzzles.base import Puzzle

logger = logging.getLogger(__name__)

OBSTACLE = "#"
OUTSIDE = " "
ARROWS = "^>v<"


@dataclass(frozen=True)
class Guard:
    pos: Coordinate
    heading: Direction

    def step(self, lab: Grid[str]) -> Guard:
        """Move forward, or turn clockwise if an obstacle is ahead."""
        ahead = self.pos + self.heading.delta
        if lab.get(ahead) == OBSTACLE:
            return Guard(self.pos, self.heading.rotate_cw())
        return Guard(ahead, self.heading)


def parse(text: str) -> tuple[Grid[str], Guard]:
    lab = Grid.parse(text, OUTSIDE)
    for pos, cell in lab.cells():
        if cell in ARROWS:
            return lab, Guard(pos, Direction.from_arrow(cell))
    raise ValueError("No guard (one of ^ > v <) on the map.")


def patrol(lab: Grid[str], guard: Guard) -> tuple[set[Coordinate], bool]:
    """Walk the guard until it leaves the lab or repeats itself.

    Returns the positions visited and whether the walk is a loop.
    """
    seen: set[Guard] = set()
    visited: set[Coordinate] = set()
    while lab.in_bounds(guard.pos):
        if guard in seen:
            return visited, True
        seen.add(guard)
        visited.add(guard.pos)
        guard = guard.step(lab)
    return visited, False


class GuardGallivant(Puzzle):
    day = 6
    title = "Guard Gallivant"

    @staticmethod
    def part1(text: str) -> int:
        lab, guard = parse(text)
        visited, _ = patrol(lab, guard)
        return len(visited)

    @staticmethod
    def part2(text: str) -> int:
        lab, guard = parse(text)
        route, _ = patrol(lab, guard)
        # An obstacle off the original route never changes the walk.
        candidates = sorted(route - {guard.pos})
        logger.debug("Trying %d obstacle positions", len(candidates))
        return sum(
            1
            for pos in candidates
            if patrol(lab.with_value(pos, OBSTACLE), guard)[1]
        )
