"""Vanilla terminal frontend: no third-party dependencies.

Prints one line per solved part using plain ANSI colour codes.
"""

from __future__ import annotations

import sys
from pathlib import Path

from backend.engine.runner import PartResult, solve_files
from backend.puzzles import PUZZLES


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset


def _format_time(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.2f}s"


def _result_line(result: PartResult) -> str:
    return (
        f"  {_C}Day {result.day:>2}{_R} {result.title:<18} "
        f"part {result.part}: {_G}{result.answer}{_R}  "
        f"{_DIM}({_format_time(result.elapsed)}){_R}"
    )


# -- public entry points ------------------------------------------------------


def list_puzzles() -> None:
    print()
    print(f"  {_BOLD}=== PUZZLES ==={_R}")
    for day in sorted(PUZZLES):
        print(f"  {_Y}{day:>2}{_R}  {PUZZLES[day].title}")
    print()


def run(jobs: dict[int, Path], parts: tuple[int, ...]) -> None:
    """Solve every job and print answers as they arrive."""
    print()
    total = 0.0
    for result in solve_files(jobs, parts):
        print(_result_line(result))
        sys.stdout.flush()
        total += result.elapsed
    print(f"\n  {_DIM}Total: {_format_time(total)}{_R}\n")
