# visualization.py
import os
import matplotlib.pyplot as plt
import numpy as np
from typing import Iterable, Optional, Tuple

# Import from other project modules
from grid_core import CellState, Container, PathEvent
from geometry import Wireframe
import constants as const

_ASCII_MARKERS = {
    CellState.WALL: const.MAZE_WALL_CHAR,
    CellState.PASSAGE: const.MAZE_PATH_CHAR,
}


# --- Text Renderers ---
def render_ascii(frame: Wireframe) -> str:
    """One character per wireframe cell, a newline after every `width` characters."""
    output = []
    for i, value in enumerate(frame.data.flat):
        output.append(_ASCII_MARKERS[CellState(int(value))])
        if i % frame.width == frame.width - 1:
            output.append("\n")
    return "".join(output)


def render_path(paths: Iterable[PathEvent]) -> str:
    """One `x,y-D` line per trace event, in generation order."""
    return "".join(f"{path.as_record()}\n" for path in paths)


# --- Raster Renderer ---
def _paint_square(
    image: np.ndarray, x: int, y: int, cell: Container, colour: Tuple[int, int, int]
):
    """Fills the cell-sized block at wireframe position (x, y)."""
    top, left = y * cell.height, x * cell.width
    image[top : top + cell.height, left : left + cell.width] = colour


def render_image(
    frame: Wireframe,
    cell: Container,
    path_colour: Tuple[int, int, int] = const.PATH_COLOR,
    wall_colour: Tuple[int, int, int] = const.WALL_COLOR,
) -> np.ndarray:
    """
    Rasterizes the wireframe into an RGB uint8 array of
    (height*cell.height, width*cell.width, 3), every cell a solid block.
    """
    cell = cell.validate()
    for colour in (path_colour, wall_colour):
        if len(colour) != 3 or not all(0 <= c <= 255 for c in colour):
            raise ValueError(f"Colour {colour} is not an RGB byte triple.")

    image = np.empty(
        (frame.height * cell.height, frame.width * cell.width, 3), dtype=np.uint8
    )
    palette = {CellState.WALL: wall_colour, CellState.PASSAGE: path_colour}
    for x, y, state in frame.cells():
        _paint_square(image, x, y, cell, palette[state])
    return image


# --- File Output ---
def write_to_file(file_path: str, output: str):
    """Writes text, replacing any previous file. OSError propagates."""
    with open(file_path, "w", newline="\n") as f:
        f.write(output)


def _output_file(output_dir: str, name: str) -> str:
    os.makedirs(output_dir, exist_ok=True)
    return os.path.join(output_dir, name)


def output_ascii(
    frame: Wireframe, output_dir: str = const.OUTPUT_DIR, name: Optional[str] = None
) -> str:
    file_path = _output_file(output_dir, name or const.OUTPUT_FILE_ASCII)
    write_to_file(file_path, render_ascii(frame))
    print(f"  Wrote ASCII maze to {file_path}")
    return file_path


def output_path(
    paths: Iterable[PathEvent],
    output_dir: str = const.OUTPUT_DIR,
    name: Optional[str] = None,
) -> str:
    file_path = _output_file(output_dir, name or const.OUTPUT_FILE_PATH)
    write_to_file(file_path, render_path(paths))
    print(f"  Wrote path trace to {file_path}")
    return file_path


def draw_png(
    frame: Wireframe,
    cell: Container,
    output_dir: str = const.OUTPUT_DIR,
    name: Optional[str] = None,
) -> str:
    """Renders the wireframe and saves it as a PNG."""
    file_path = _output_file(output_dir, name or const.OUTPUT_FILE_PNG)
    image = render_image(frame, cell)
    plt.imsave(file_path, image, format="png")
    print(
        f"  Wrote {image.shape[1]}x{image.shape[0]} px image to {file_path}"
    )
    return file_path
