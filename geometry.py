# geometry.py
import numpy as np
from typing import Iterable, Iterator, Tuple

# Import from other project modules
from grid_core import CellState, Container, MazeInvariantError, PathEvent
from utils import scale, step


def wireframe_container(grid: Container) -> Container:
    """Size of the wall/passage grid for a logical grid: (2w+1) x (2h+1)."""
    return Container(scale(grid.width), scale(grid.height))


class Wireframe:
    """
    Dense wall/passage grid at 2x+1 scale. Logical cells sit on odd positions, the
    walls between them (and the border) on even ones.
    Stored as a (height, width) array of CellState values, row-major.
    """

    def __init__(self, size: Container, data: np.ndarray):
        if data.shape != (size.height, size.width):
            raise ValueError(
                f"Wireframe data shape {data.shape} does not match {size.width}x{size.height}."
            )
        self.size = size
        self.data = data
        self.data.setflags(write=False)

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    def cell_at(self, x: int, y: int) -> CellState:
        return CellState(int(self.data[y, x]))

    def is_passage(self, x: int, y: int) -> bool:
        return self.cell_at(x, y) == CellState.PASSAGE

    def passage_count(self) -> int:
        return int(np.count_nonzero(self.data == CellState.PASSAGE))

    def wall_count(self) -> int:
        return self.size.area - self.passage_count()

    def cells(self) -> Iterator[Tuple[int, int, CellState]]:
        """Yields (x, y, state) row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.cell_at(x, y)

    def __eq__(self, other):
        return (
            isinstance(other, Wireframe)
            and self.size == other.size
            and np.array_equal(self.data, other.data)
        )

    def __repr__(self) -> str:
        return f"Wireframe({self.width}x{self.height}, passages={self.passage_count()})"


def _carve(data: np.ndarray, size: Container, x: int, y: int):
    if not size.contains(x, y):
        raise MazeInvariantError(
            f"Wireframe cell ({x},{y}) is outside the {size.width}x{size.height} frame."
        )
    data[y, x] = CellState.PASSAGE


def create_wireframe(paths: Iterable[PathEvent], size: Container) -> Wireframe:
    """
    Materializes the carving trace as a Wireframe of the given size.
    Every event opens its own cell; a movement event also opens the wall cell one
    wireframe step away in its direction.
    """
    data = np.full((size.height, size.width), CellState.WALL, dtype=np.uint8)

    for path in paths:
        x = scale(path.coordinate.x)
        y = scale(path.coordinate.y)
        _carve(data, size, x, y)
        if path.direction.is_move:
            _carve(data, size, *step(x, y, path.direction.delta))

    return Wireframe(size, data)
