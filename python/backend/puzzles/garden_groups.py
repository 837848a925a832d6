"""Day 12: fence off regions of identical plants."""

from __future__ import annotations

from dataclasses import dataclass

from backend.engine.search import BFS
from backend.models.geometry import CARDINAL, Coordinate
from backend.models.grid import Grid
from backend.puzzles.base import Puzzle

OUTSIDE = ""

# Clockwise pairs of orthogonal steps; each pair names one corner of a cell.
_CORNERS = tuple(zip(CARDINAL, CARDINAL[1:] + CARDINAL[:1]))


@dataclass(frozen=True)
class Region:
    plant: str
    cells: frozenset[Coordinate]

    @property
    def area(self) -> int:
        return len(self.cells)

    @property
    def perimeter(self) -> int:
        return sum(
            1 for cell in self.cells for n in cell.neighbors() if n not in self.cells
        )

    @property
    def sides(self) -> int:
        """Number of straight fence sides, counted as corners."""
        corners = 0
        for cell in self.cells:
            for a, b in _CORNERS:
                side_a = cell + a in self.cells
                side_b = cell + b in self.cells
                diagonal = cell + a + b in self.cells
                if not side_a and not side_b:
                    corners += 1
                elif side_a and side_b and not diagonal:
                    corners += 1
        return corners


def regions(garden: Grid[str]) -> list[Region]:
    """Split the garden into 4-connected same-plant regions (row-major)."""
    found: list[Region] = []
    assigned: set[Coordinate] = set()
    for pos, plant in garden.cells():
        if pos in assigned:
            continue
        cells = BFS.reachable(
            pos,
            lambda p, plant=plant: [n for n in p.neighbors() if garden.get(n) == plant],
        )
        assigned |= cells
        found.append(Region(plant, frozenset(cells)))
    return found


class GardenGroups(Puzzle):
    day = 12
    title = "Garden Groups"

    @staticmethod
    def part1(text: str) -> int:
        return sum(r.area * r.perimeter for r in regions(Grid.parse(text, OUTSIDE)))

    @staticmethod
    def part2(text: str) -> int:
        return sum(r.area * r.sides for r in regions(Grid.parse(text, OUTSIDE)))
