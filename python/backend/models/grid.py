"""Immutable rectangular grid with sentinel reads outside its bounds."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from backend.models.geometry import Coordinate

T = TypeVar("T")


class ShapeError(ValueError):
    """Raised when grid data is empty or not rectangular."""


class NotFoundError(LookupError):
    """Raised when :meth:`Grid.find` finds no cell holding the value."""


@dataclass(frozen=True)
class Grid(Generic[T]):
    """A fixed ``rows`` x ``cols`` array of values.

    Reads outside ``[0, rows) x [0, cols)`` return :attr:`sentinel`
    instead of failing, so neighbor rules can treat the outside as just
    another cell value (typically a wall).
    """

    data: tuple[tuple[T, ...], ...]
    sentinel: T

    # -- construction helpers -------------------------------------------------

    @classmethod
    def of(cls, data: Sequence[Sequence[T]], sentinel: T) -> Grid[T]:
        """Build a grid from a 2D sequence of values.

        Raises :class:`ShapeError` if *data* is empty or ragged.
        """
        if not data or not data[0]:
            raise ShapeError("Grid data must have at least one row and one column.")
        width = len(data[0])
        for r, row in enumerate(data):
            if len(row) != width:
                raise ShapeError(
                    f"Row {r} has {len(row)} cells, expected {width}."
                )
        return cls(data=tuple(tuple(row) for row in data), sentinel=sentinel)

    @classmethod
    def parse(
        cls,
        text: str,
        sentinel: T,
        cell: Callable[[str], T] = lambda ch: ch,
    ) -> Grid[T]:
        """Build a grid from text, one row per non-blank line.

        Example::

            Grid.parse("S.#\\n..E", "#")
            Grid.parse("0123\\n1234", -1, cell=int)
        """
        lines = [line for line in text.strip().splitlines() if line.strip()]
        return cls.of([[cell(ch) for ch in line.strip()] for line in lines], sentinel)

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> int:
        return len(self.data)

    @property
    def cols(self) -> int:
        return len(self.data[0])

    def in_bounds(self, pos: Coordinate) -> bool:
        return 0 <= pos.row < self.rows and 0 <= pos.col < self.cols

    def get(self, pos: Coordinate) -> T:
        if self.in_bounds(pos):
            return self.data[pos.row][pos.col]
        return self.sentinel

    def __getitem__(self, pos: Coordinate) -> T:
        return self.get(pos)

    def cells(self) -> Iterator[tuple[Coordinate, T]]:
        """Yield ``(coordinate, value)`` pairs in row-major order."""
        for r, row in enumerate(self.data):
            for c, value in enumerate(row):
                yield Coordinate(r, c), value

    def find(self, value: T) -> Coordinate:
        """Return the first coordinate (row-major) holding *value*."""
        for pos, v in self.cells():
            if v == value:
                return pos
        raise NotFoundError(f"No cell holds {value!r}.")

    def find_all(self, value: T) -> list[Coordinate]:
        return [pos for pos, v in self.cells() if v == value]

    # -- derived grids --------------------------------------------------------

    def with_value(self, pos: Coordinate, value: T) -> Grid[T]:
        """Return a copy with the cell at *pos* replaced by *value*."""
        if not self.in_bounds(pos):
            raise IndexError(f"{pos} is outside a {self.rows}x{self.cols} grid.")
        row = self.data[pos.row]
        new_row = row[: pos.col] + (value,) + row[pos.col + 1 :]
        data = self.data[: pos.row] + (new_row,) + self.data[pos.row + 1 :]
        return Grid(data=data, sentinel=self.sentinel)

    def render(self, overlay: dict[Coordinate, str] | None = None) -> str:
        """Return the grid as text, with *overlay* glyphs drawn on top."""
        overlay = overlay or {}
        return "\n".join(
            "".join(
                overlay.get(Coordinate(r, c), str(v)) for c, v in enumerate(row)
            )
            for r, row in enumerate(self.data)
        )
