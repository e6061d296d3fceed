# maze_gen.py
import random
from typing import List, Optional, Tuple

# Import from other project modules
from grid_core import (
    Container,
    Coordinate,
    Direction,
    MazeInvariantError,
    PathEvent,
    VisitedSet,
)
from utils import step, would_underflow


def valid_moves(
    coord: Coordinate, grid: Container, visited: VisitedSet
) -> List[Tuple[Coordinate, Direction]]:
    """
    Lists the in-bounds, unvisited neighbours of coord together with the direction
    leading to each. Probed in the order North, West, East, South.
    """
    moves: List[Tuple[Coordinate, Direction]] = []

    # North and West decrement, so guard the zero edge first
    if not would_underflow(coord.y, 1):
        north = Coordinate(*step(coord.x, coord.y, Direction.NORTH.delta))
        if not visited.is_visited(north):
            moves.append((north, Direction.NORTH))

    if not would_underflow(coord.x, 1):
        west = Coordinate(*step(coord.x, coord.y, Direction.WEST.delta))
        if not visited.is_visited(west):
            moves.append((west, Direction.WEST))

    if coord.x + 1 < grid.width:
        east = Coordinate(*step(coord.x, coord.y, Direction.EAST.delta))
        if not visited.is_visited(east):
            moves.append((east, Direction.EAST))

    if coord.y + 1 < grid.height:
        south = Coordinate(*step(coord.x, coord.y, Direction.SOUTH.delta))
        if not visited.is_visited(south):
            moves.append((south, Direction.SOUTH))

    return moves


def random_start(
    grid: Container, rng: random.Random, legacy_start: bool = False
) -> Coordinate:
    """
    Picks the cell the walk starts from, uniformly over the grid.
    legacy_start keeps the old range that never starts on the last row or column
    (a dimension of size 1 still starts at 0).
    """
    if legacy_start:
        return Coordinate(
            rng.randrange(max(grid.width - 1, 1)),
            rng.randrange(max(grid.height - 1, 1)),
        )
    return Coordinate(rng.randrange(grid.width), rng.randrange(grid.height))


def _backtrack(
    stack: List[Coordinate], grid: Container, visited: VisitedSet
) -> List[Tuple[Coordinate, Direction]]:
    """Pops cells until the top has an unvisited neighbour or the stack runs out."""
    moves: List[Tuple[Coordinate, Direction]] = []
    while stack:
        moves = valid_moves(stack[-1], grid, visited)
        if moves:
            break
        stack.pop()
    return moves


def generate_maze(
    grid: Container,
    rng: Optional[random.Random] = None,
    legacy_start: bool = False,
) -> List[PathEvent]:
    """
    Carves a perfect maze over `grid` with the randomized depth-first backtracker.

    Returns the ordered trace of PathEvents: one movement event per spanning-tree
    edge, plus one Direction.NONE event for the first cell popped in every run of
    backtracking (the end of a branch). Only the first pop of a run is recorded.
    """
    grid = grid.validate()
    if rng is None:
        rng = random.Random()

    print("--- Starting Maze Generation (Recursive Backtracking) ---")
    visited = VisitedSet(grid)
    # The current walk from the start cell to the frontier
    stack: List[Coordinate] = []
    paths: List[PathEvent] = []

    start = random_start(grid, rng, legacy_start)
    print(f"  Starting maze generation at cell: {start.x},{start.y}")
    stack.append(start)
    visited.mark(start)

    while stack:
        moves = valid_moves(stack[-1], grid, visited)

        if not moves:
            # First pop of a run is the end of a branch
            paths.append(PathEvent(stack.pop(), Direction.NONE))
            moves = _backtrack(stack, grid, visited)

        if moves:
            next_coord, direction = rng.choice(moves)
            paths.append(PathEvent(stack[-1], direction))
            stack.append(next_coord)
            visited.mark(next_coord)

    dead_ends = sum(1 for p in paths if not p.direction.is_move)
    print(
        f"--- Maze Generation Complete: Visited {visited.count()}/{grid.area} cells, "
        f"{len(paths)} events ({dead_ends} dead ends). ---"
    )

    if not visited.is_complete():
        raise MazeInvariantError(
            f"Walk ended after visiting {visited.count()}/{grid.area} cells."
        )
    return paths
