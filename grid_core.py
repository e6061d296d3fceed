# grid_core.py
import numpy as np
from enum import Enum, IntEnum
from typing import NamedTuple, Tuple

# Import from other project modules
import constants as const
from utils import linear_index


class MazeInvariantError(RuntimeError):
    """Raised when the walk or the wireframe breaks one of its own bounds/visited rules."""


class Container(NamedTuple):
    """Width x height of any rectangular grid (logical cells, wireframe cells or pixels)."""

    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def validate(self) -> "Container":
        """Returns self, or raises ValueError if either dimension is not positive."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Container dimensions must be positive, got {self.width}x{self.height}."
            )
        return self


class Coordinate(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    """Compass moves on the grid. NONE marks the end of an exhausted branch."""

    NORTH = const.DIR_NORTH
    EAST = const.DIR_EAST
    SOUTH = const.DIR_SOUTH
    WEST = const.DIR_WEST
    NONE = const.DIR_NONE

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def delta(self) -> Tuple[int, int]:
        """(dx, dy) of one step; y grows southward."""
        return _DIRECTION_DELTAS[self]

    @property
    def is_move(self) -> bool:
        return self is not Direction.NONE


_DIRECTION_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
    Direction.NONE: (0, 0),
}


class PathEvent(NamedTuple):
    """
    One entry of the carving trace. Standing at `coordinate`, the walk either moved
    one cell in `direction`, or (Direction.NONE) `coordinate` closed a branch.
    """

    coordinate: Coordinate
    direction: Direction

    def as_record(self) -> str:
        """Formats the event as an `x,y-D` trace line (without newline)."""
        return f"{self.coordinate.x},{self.coordinate.y}-{self.direction.symbol}"


class CellState(IntEnum):
    WALL = 0
    PASSAGE = 1


class VisitedSet:
    """Flat boolean table over the logical grid, one flag per cell."""

    def __init__(self, grid: Container):
        self.grid = grid.validate()
        self._table = np.zeros(grid.area, dtype=bool)
        self._count = 0

    def _index(self, coord: Coordinate) -> int:
        if not self.grid.contains(coord.x, coord.y):
            raise MazeInvariantError(
                f"Coordinate {tuple(coord)} lies outside the {self.grid.width}x{self.grid.height} grid."
            )
        return linear_index(coord, self.grid.width)

    def is_visited(self, coord: Coordinate) -> bool:
        return bool(self._table[self._index(coord)])

    def mark(self, coord: Coordinate):
        """Claims a cell. Each cell may be claimed once."""
        index = self._index(coord)
        if self._table[index]:
            raise MazeInvariantError(f"Cell {tuple(coord)} was already visited.")
        self._table[index] = True
        self._count += 1

    def count(self) -> int:
        return self._count

    def is_complete(self) -> bool:
        return self._count == self.grid.area

    def __len__(self) -> int:
        return self.grid.area

    def __repr__(self) -> str:
        return f"VisitedSet({self._count}/{self.grid.area})"
