from backend.puzzles.base import Answer, Puzzle
from backend.puzzles.garden_groups import GardenGroups
from backend.puzzles.guard_gallivant import GuardGallivant
from backend.puzzles.hoof_it import HoofIt
from backend.puzzles.keypad_conundrum import KeypadConundrum
from backend.puzzles.race_condition import RaceCondition
from backend.puzzles.ram_run import RamRun
from backend.puzzles.reindeer_maze import ReindeerMaze

PUZZLES: dict[int, type[Puzzle]] = {
    p.day: p
    for p in (
        GuardGallivant,
        HoofIt,
        GardenGroups,
        ReindeerMaze,
        RamRun,
        RaceCondition,
        KeypadConundrum,
    )
}

__all__ = ["PUZZLES", "Answer", "Puzzle"]
