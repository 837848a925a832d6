"""Day 16: the cheapest ways through a maze where turning is expensive."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from backend.engine.search import Dijkstra
from backend.models.geometry import Coordinate, Direction
from backend.models.grid import Grid
from backend.puzzles.base import Puzzle

logger = logging.getLogger(__name__)

WALL = "#"
START = "S"
END = "E"
BEST_TILE = "O"
STEP_COST = 1
TURN_COST = 1000


@dataclass(frozen=True)
class Reindeer:
    pos: Coordinate
    heading: Direction


def moves(
    maze: Grid[str], turn_cost: int = TURN_COST
) -> Callable[[Reindeer, float], dict[Reindeer, float]]:
    """Step forward unless a wall is ahead, or turn 90 degrees in place."""

    def neighbor_costs(deer: Reindeer, cost: float) -> dict[Reindeer, float]:
        out: dict[Reindeer, float] = {}
        ahead = deer.pos + deer.heading.delta
        if maze.get(ahead) != WALL:
            out[Reindeer(ahead, deer.heading)] = cost + STEP_COST
        out[Reindeer(deer.pos, deer.heading.rotate_cw())] = cost + turn_cost
        out[Reindeer(deer.pos, deer.heading.rotate_ccw())] = cost + turn_cost
        return out

    return neighbor_costs


def parse(text: str) -> tuple[Grid[str], Reindeer, Coordinate]:
    maze = Grid.parse(text, WALL)
    return maze, Reindeer(maze.find(START), Direction.RIGHT), maze.find(END)


class ReindeerMaze(Puzzle):
    day = 16
    title = "Reindeer Maze"

    @staticmethod
    def part1(text: str) -> int:
        """Lowest score from the start tile to the end tile."""
        maze, start, end = parse(text)
        result = Dijkstra.shortest_path(start, lambda d: d.pos == end, moves(maze))
        return int(result.cost) if result.found else -1

    @staticmethod
    def part2(text: str) -> int:
        """Number of tiles on at least one best path."""
        maze, start, end = parse(text)
        result = Dijkstra.all_optimal_states(start, lambda d: d.pos == end, moves(maze))
        tiles = result.project(lambda d: d.pos)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Best-path tiles:\n%s", maze.render(dict.fromkeys(tiles, BEST_TILE)))
        return len(tiles)
