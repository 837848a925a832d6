"""Common shape of a day's puzzle."""

from __future__ import annotations

from typing import ClassVar

Answer = int | str


class Puzzle:
    """One day's puzzle.  Stateless; both parts take the raw input text.

    Subclasses set :attr:`day` and :attr:`title` and override the parts.
    """

    day: ClassVar[int]
    title: ClassVar[str]

    @staticmethod
    def part1(text: str) -> Answer:
        raise NotImplementedError("part1() is not implemented.")

    @staticmethod
    def part2(text: str) -> Answer:
        raise NotImplementedError("part2() is not implemented.")

    @classmethod
    def solve(cls, text: str, part: int) -> Answer:
        if part == 1:
            return cls.part1(text)
        if part == 2:
            return cls.part2(text)
        raise ValueError(f"Part must be 1 or 2, got {part}.")
