# mesh_builder.py

import os
import numpy as np
import trimesh
import trimesh.creation
from typing import List, Optional

import constants as const

# Import from other project modules
from geometry import Wireframe
from grid_core import CellState


def _wall_box(x: int, y: int, frame: Wireframe, cell_size: float, wall_height: float) -> trimesh.Trimesh:
    """Box for the wall cell at wireframe (x, y). Row 0 (north) ends up at the largest Y."""
    box = trimesh.creation.box(extents=[cell_size, cell_size, wall_height])
    centre = np.array(
        [
            (x + 0.5) * cell_size,
            (frame.height - y - 0.5) * cell_size,
            wall_height / 2.0,
        ]
    )
    box.apply_translation(centre)
    return box


def create_wireframe_mesh(
    frame: Wireframe,
    cell_size: float = const.STL_CELL_SIZE,
    wall_height: float = const.STL_WALL_HEIGHT,
    base_height: float = const.STL_BASE_HEIGHT,
) -> trimesh.Trimesh:
    """
    Extrudes every Wall cell of the wireframe into a box standing on z=0, over a
    solid base slab spanning the whole frame (top face at z=0).
    A base_height of 0 leaves the slab out.
    """
    if cell_size <= 0 or wall_height <= 0 or base_height < 0:
        raise ValueError(
            f"Invalid STL dimensions: cell={cell_size}, wall={wall_height}, base={base_height}."
        )

    print(f"--- Building Maze Mesh ({frame.width}x{frame.height} cells) ---")
    meshes: List[trimesh.Trimesh] = [
        _wall_box(x, y, frame, cell_size, wall_height)
        for x, y, state in frame.cells()
        if state == CellState.WALL
    ]

    if base_height > 0:
        base = trimesh.creation.box(
            extents=[frame.width * cell_size, frame.height * cell_size, base_height]
        )
        base.apply_translation(
            [frame.width * cell_size / 2.0, frame.height * cell_size / 2.0, -base_height / 2.0]
        )
        meshes.append(base)

    combined = trimesh.util.concatenate(meshes)
    print(f"  Mesh: {len(combined.vertices)}V, {len(combined.faces)}F")
    return combined


def create_maze_stl(
    frame: Wireframe,
    output_dir: str = const.OUTPUT_DIR,
    name: Optional[str] = None,
    cell_size: float = const.STL_CELL_SIZE,
    wall_height: float = const.STL_WALL_HEIGHT,
    base_height: float = const.STL_BASE_HEIGHT,
) -> str:
    """Builds the printable mesh and exports it as STL. Export errors propagate."""
    mesh = create_wireframe_mesh(frame, cell_size, wall_height, base_height)
    os.makedirs(output_dir, exist_ok=True)
    file_path = os.path.join(output_dir, name or const.OUTPUT_FILE_STL)
    mesh.export(file_path)
    print(f"  Wrote STL maze to {file_path}")
    return file_path
