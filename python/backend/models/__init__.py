from backend.models.geometry import CARDINAL, Coordinate, Delta, Direction
from backend.models.grid import Grid, NotFoundError, ShapeError

__all__ = [
    "CARDINAL",
    "Coordinate",
    "Delta",
    "Direction",
    "Grid",
    "NotFoundError",
    "ShapeError",
]
