"""Rich terminal frontend: answers collected into a styled table.

Uses the ``rich`` library for output while sharing the same runner as
the vanilla CLI.
"""

from __future__ import annotations

from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.runner import PartResult, solve_files
from backend.puzzles import PUZZLES

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    return f"{seconds:.2f} s"


def _results_table(results: list[PartResult]) -> Table:
    table = Table(
        box=rich.box.ROUNDED,
        border_style="bright_blue",
        header_style="bold cyan",
        show_lines=False,
    )
    table.add_column("Day", justify="right", style="dim", width=3)
    table.add_column("Puzzle", style="bold white")
    table.add_column("Part", justify="center")
    table.add_column("Answer", justify="right", style="bold green")
    table.add_column("Time", justify="right", style="yellow")

    for r in results:
        table.add_row(
            str(r.day), r.title, str(r.part), str(r.answer), _format_time(r.elapsed)
        )
    return table


# -- public entry points ------------------------------------------------------


def list_puzzles() -> None:
    table = Table(box=rich.box.SIMPLE, header_style="bold cyan")
    table.add_column("Day", justify="right", style="yellow")
    table.add_column("Title")
    for day in sorted(PUZZLES):
        table.add_row(str(day), PUZZLES[day].title)
    console.print(Align.center(table))


def run(jobs: dict[int, Path], parts: tuple[int, ...]) -> None:
    """Solve every job, then show all answers in one panel."""
    results: list[PartResult] = []
    with console.status("[bold cyan]Solving…[/bold cyan]") as status:
        for result in solve_files(jobs, parts):
            results.append(result)
            status.update(
                f"[bold cyan]Solved day {result.day} part {result.part}…[/bold cyan]"
            )

    total = sum(r.elapsed for r in results)
    panel = Panel(
        Align.center(_results_table(results)),
        title="[bold]ANSWERS[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text(f"Total: {_format_time(total)}", style="dim")))
