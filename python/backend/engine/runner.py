"""Runs registered puzzles against their input files and times each part."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from backend.puzzles import PUZZLES, Answer, Puzzle

logger = logging.getLogger(__name__)


@dataclass
class PartResult:
    day: int
    title: str
    part: int
    answer: Answer
    elapsed: float


def input_path(data_dir: Path, day: int) -> Path:
    """Default location of a day's input: ``<data_dir>/inputs/dayNN.txt``."""
    return data_dir / "inputs" / f"day{day:02d}.txt"


def available_days(data_dir: Path) -> list[int]:
    """Registered days whose default input file exists."""
    return [day for day in sorted(PUZZLES) if input_path(data_dir, day).exists()]


def solve(puzzle: type[Puzzle], text: str, parts: Iterable[int]) -> Iterator[PartResult]:
    """Yield one timed result per requested part, in order."""
    for part in parts:
        t0 = time.perf_counter()
        answer = puzzle.solve(text, part)
        elapsed = time.perf_counter() - t0
        logger.info("Day %d part %d solved in %.3fs", puzzle.day, part, elapsed)
        yield PartResult(puzzle.day, puzzle.title, part, answer, elapsed)


def solve_files(jobs: dict[int, Path], parts: tuple[int, ...]) -> Iterator[PartResult]:
    """Solve each ``day -> input file`` job, days in ascending order."""
    for day in sorted(jobs):
        text = jobs[day].read_text()
        yield from solve(PUZZLES[day], text, parts)
