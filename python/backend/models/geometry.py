"""Grid geometry: coordinates, step deltas, and headings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class Delta:
    """A single step as a (row, col) offset."""

    drow: int
    dcol: int


UP = Delta(-1, 0)
RIGHT = Delta(0, 1)
DOWN = Delta(1, 0)
LEFT = Delta(0, -1)
UP_RIGHT = Delta(-1, 1)
DOWN_RIGHT = Delta(1, 1)
DOWN_LEFT = Delta(1, -1)
UP_LEFT = Delta(-1, -1)

CARDINAL: tuple[Delta, ...] = (UP, RIGHT, DOWN, LEFT)
ALL_EIGHT: tuple[Delta, ...] = (
    UP, UP_RIGHT, RIGHT, DOWN_RIGHT, DOWN, DOWN_LEFT, LEFT, UP_LEFT,
)


@dataclass(frozen=True, order=True)
class Coordinate:
    """A (row, col) cell address.  No bounds are implied."""

    row: int
    col: int

    # -- arithmetic -----------------------------------------------------------

    def apply(self, delta: Delta) -> Coordinate:
        return Coordinate(self.row + delta.drow, self.col + delta.dcol)

    def __add__(self, delta: Delta) -> Coordinate:
        return self.apply(delta)

    def neighbors(self, deltas: tuple[Delta, ...] = CARDINAL) -> list[Coordinate]:
        """Return the coordinates one step away along each of *deltas*."""
        return [self.apply(d) for d in deltas]

    def manhattan(self, other: Coordinate) -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)


class Direction(StrEnum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def delta(self) -> Delta:
        return _DELTAS[self]

    @property
    def arrow(self) -> str:
        return _GLYPHS[self]

    # -- rotation -------------------------------------------------------------

    def rotate_cw(self) -> Direction:
        return _CYCLE[(_CYCLE.index(self) + 1) % 4]

    def rotate_ccw(self) -> Direction:
        return _CYCLE[(_CYCLE.index(self) - 1) % 4]

    def opposite(self) -> Direction:
        return _CYCLE[(_CYCLE.index(self) + 2) % 4]

    # -- parsing --------------------------------------------------------------

    @classmethod
    def from_arrow(cls, glyph: str) -> Direction:
        """Parse one of ``^ > v <``.

        Raises ``ValueError`` for anything else.
        """
        try:
            return _ARROWS[glyph]
        except KeyError:
            raise ValueError(f"Not a direction arrow: {glyph!r}") from None


_CYCLE: tuple[Direction, ...] = (
    Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT,
)

_DELTAS: dict[Direction, Delta] = {
    Direction.UP: UP,
    Direction.RIGHT: RIGHT,
    Direction.DOWN: DOWN,
    Direction.LEFT: LEFT,
}

_ARROWS: dict[str, Direction] = {
    "^": Direction.UP,
    ">": Direction.RIGHT,
    "v": Direction.DOWN,
    "<": Direction.LEFT,
}

_GLYPHS: dict[Direction, str] = {d: glyph for glyph, d in _ARROWS.items()}
