# main.py
"""
Generates a perfect maze with the randomized depth-first backtracker and writes it out.

  python main.py
  python main.py --width 20 --height 10 --seed 42 --output-dir output --stl
"""
import argparse
import random
import sys
import time
import traceback
from typing import List, Optional

# Import project modules
import constants as const
from grid_core import Container, MazeInvariantError
from maze_gen import generate_maze
from geometry import create_wireframe, wireframe_container
from visualization import draw_png, output_ascii, output_path
from mesh_builder import create_maze_stl


def start_timer(message: str) -> float:
    print(message)
    return time.perf_counter()


def end_timer(item: str, timer: float):
    print(f"{item} took {time.perf_counter() - timer:.4f}")


def run_maze_generation(
    backtrack: Container,
    cell: Container,
    output_dir: str = const.OUTPUT_DIR,
    seed: Optional[int] = None,
    legacy_start: bool = False,
    write_stl: bool = False,
) -> List[str]:
    """Runs every stage and returns the paths of the written files."""
    rng = random.Random(seed)
    maze = wireframe_container(backtrack)

    print("\n--- Configuration ---")
    print(f"  Grid: {backtrack.width}x{backtrack.height}, Wireframe: {maze.width}x{maze.height}")
    print(f"  Cell: {cell.width}x{cell.height} px, Seed: {seed}, Output: {output_dir}")

    timer = start_timer("Starting backtracking...")
    paths = generate_maze(backtrack, rng, legacy_start=legacy_start)
    end_timer("Backtracking", timer)

    timer = start_timer("Starting to build the wireframe...")
    wireframe = create_wireframe(paths, maze)
    end_timer("Wireframe", timer)

    timer = start_timer("Starting to draw the png...")
    written = [draw_png(wireframe, cell, output_dir)]
    end_timer("Drawing", timer)

    written.append(output_path(paths, output_dir))
    written.append(output_ascii(wireframe, output_dir))

    if write_stl:
        timer = start_timer("Starting to build the stl...")
        written.append(create_maze_stl(wireframe, output_dir))
        end_timer("Mesh", timer)

    return written


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Perfect maze generator (randomized DFS backtracker).")
    ap.add_argument("--width", type=_positive_int, default=const.DEFAULT_PATH_WIDTH, help="Maze width in cells")
    ap.add_argument("--height", type=_positive_int, default=const.DEFAULT_PATH_HEIGHT, help="Maze height in cells")
    ap.add_argument("--cell-width", type=_positive_int, default=const.DEFAULT_PIXEL_WIDTH, help="PNG pixels per wireframe cell (x)")
    ap.add_argument("--cell-height", type=_positive_int, default=const.DEFAULT_PIXEL_HEIGHT, help="PNG pixels per wireframe cell (y)")
    ap.add_argument("--seed", type=int, default=None, help="Seed for a reproducible maze")
    ap.add_argument("--output-dir", default=const.OUTPUT_DIR)
    ap.add_argument("--stl", action="store_true", help="Also export a printable STL")
    ap.add_argument(
        "--legacy-start",
        action="store_true",
        help="Never start on the last row/column",
    )
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    start_time = time.time()
    try:
        run_maze_generation(
            Container(args.width, args.height),
            Container(args.cell_width, args.cell_height),
            output_dir=args.output_dir,
            seed=args.seed,
            legacy_start=args.legacy_start,
            write_stl=args.stl,
        )
    except (OSError, MazeInvariantError) as e:
        print(f"ERROR during maze generation: {e}")
        traceback.print_exc()
        return 1

    print(f"\n--- Total Execution Time: {time.time() - start_time:.2f} seconds ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())
