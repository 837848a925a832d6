"""Day 21: type door codes through a chain of robot-operated keypads."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import cache

from backend.engine.search import BFS
from backend.models.geometry import Coordinate, Delta, Direction
from backend.models.grid import Grid
from backend.puzzles.base import Puzzle

logger = logging.getLogger(__name__)

GAP = " "
PRESS = "A"
ROBOTS = 2
MANY_ROBOTS = 25

NUMERIC: Grid[str] = Grid.of(
    [["7", "8", "9"], ["4", "5", "6"], ["1", "2", "3"], [GAP, "0", PRESS]], GAP
)
DIRECTIONAL: Grid[str] = Grid.of([[GAP, "^", PRESS], ["<", "v", ">"]], GAP)

_STEP_ARROWS: dict[Delta, str] = {d.delta: d.arrow for d in Direction}


def _toward(pad: Grid[str], target: Coordinate) -> Callable[[Coordinate], list[Coordinate]]:
    """Steps onto a key that bring the arm closer to *target*."""
    return lambda pos: [
        n
        for n in pos.neighbors()
        if pad.get(n) != GAP and n.manhattan(target) < pos.manhattan(target)
    ]


def _arrows(path: tuple[Coordinate, ...]) -> str:
    return "".join(
        _STEP_ARROWS[Delta(b.row - a.row, b.col - a.col)] for a, b in zip(path, path[1:])
    )


@cache
def key_sequences(pad: Grid[str]) -> dict[tuple[str, str], tuple[str, ...]]:
    """Every shortest arrow sequence, press included, between two keys.

    Both keypads have their gap in a corner, so some route between any
    two keys closes the Manhattan distance on every step.  Those routes
    are the shortest ones, and restricted to them the moves form an
    acyclic graph that :meth:`BFS.all_paths` can enumerate.
    """
    keys = {key: pos for pos, key in pad.cells() if key != GAP}
    routes: dict[tuple[str, str], tuple[str, ...]] = {}
    for a, start in keys.items():
        for b, end in keys.items():
            walks = BFS.all_paths(start, end.__eq__, _toward(pad, end))
            routes[a, b] = tuple(_arrows(walk) + PRESS for walk in walks)
    return routes


@cache
def presses(sequence: str, layers: int, pad: Grid[str] = DIRECTIONAL) -> int:
    """Buttons a person presses so that *sequence* gets typed on *pad*.

    *layers* counts the robot-operated keypads from *pad* up to the
    person.  With none left the person types *sequence* directly.
    Every robot arm rests on ``A`` between presses of the keypad below,
    so each key-to-key segment is minimised on its own.
    """
    if layers == 0:
        return len(sequence)
    routes = key_sequences(pad)
    return sum(
        min(presses(route, layers - 1) for route in routes[a, b])
        for a, b in zip(PRESS + sequence, sequence)
    )


def parse(text: str) -> list[str]:
    codes: list[str] = []
    for n, line in enumerate(text.strip().splitlines(), 1):
        code = line.strip()
        if not (code.endswith(PRESS) and code[:-1].isdigit()):
            raise ValueError(f"Line {n}: expected digits followed by 'A', got {line!r}")
        codes.append(code)
    return codes


def complexity(codes: list[str], robots: int) -> int:
    """Sum of shortest press count times numeric part, over all codes."""
    total = 0
    for code in codes:
        # The numeric keypad is robot-operated too.
        length = presses(code, robots + 1, NUMERIC)
        logger.debug("Code %s needs %d presses through %d robots", code, length, robots)
        total += length * int(code[:-1])
    return total


class KeypadConundrum(Puzzle):
    day = 21
    title = "Keypad Conundrum"

    @staticmethod
    def part1(text: str, robots: int = ROBOTS) -> int:
        return complexity(parse(text), robots)

    @staticmethod
    def part2(text: str, robots: int = MANY_ROBOTS) -> int:
        return complexity(parse(text), robots)
