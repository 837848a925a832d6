#!/usr/bin/env python3
"""Grid Puzzles.

Usage::

    python main.py                      # every puzzle with an input file
    python main.py -d 16 -p 2           # one day, one part
    python main.py -d 18 -i my.txt      # custom input file
    python main.py -f rich              # Rich table output
    python main.py --list               # show registered puzzles
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.runner import available_days, input_path  # noqa: E402
from backend.models.grid import NotFoundError  # noqa: E402
from backend.puzzles import PUZZLES  # noqa: E402

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _collect_jobs(days: list[int], input_file: Optional[Path]) -> dict[int, Path]:
    """Map each requested day to the input file it will read."""
    unknown = [d for d in days if d not in PUZZLES]
    if unknown:
        raise typer.BadParameter(
            f"No puzzle for day(s) {', '.join(map(str, unknown))}. "
            f"Available: {', '.join(map(str, sorted(PUZZLES)))}.",
            param_hint="--day",
        )

    if input_file is not None:
        if len(days) != 1:
            raise typer.BadParameter(
                "--input needs exactly one --day.", param_hint="--input"
            )
        return {days[0]: input_file}

    if not days:
        days = available_days(DATA_DIR)
        if not days:
            logger.warning("No input files under %s", DATA_DIR / "inputs")
        return {day: input_path(DATA_DIR, day) for day in days}

    jobs = {day: input_path(DATA_DIR, day) for day in days}
    missing = [str(path) for path in jobs.values() if not path.exists()]
    if missing:
        raise typer.BadParameter(
            f"Missing input file(s): {', '.join(missing)}", param_hint="--day"
        )
    return jobs


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    day: Optional[list[int]] = typer.Option(
        None, "-d", "--day",
        help="Day to run; repeat for several. Omit to run every day with an input.",
    ),
    part: Optional[int] = typer.Option(
        None, "-p", "--part",
        min=1, max=2,
        help="Part to run (1 or 2). Omit for both.",
    ),
    input_file: Optional[Path] = typer.Option(
        None, "-i", "--input",
        exists=True, dir_okay=False, readable=True,
        help="Input file (only with a single --day).",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    list_only: bool = typer.Option(
        False, "--list",
        help="List registered puzzles and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search details.",
    ),
) -> None:
    """Grid Puzzles."""
    _configure_logging(verbose)
    mod = importlib.import_module(_RUNNERS[frontend])

    if list_only:
        mod.list_puzzles()
        return

    jobs = _collect_jobs(day or [], input_file)
    parts = (part,) if part else (1, 2)
    try:
        mod.run(jobs, parts)
    except (ValueError, NotFoundError) as exc:
        typer.secho(f"Invalid puzzle input: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
