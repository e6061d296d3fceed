import os
import tempfile
import unittest

import numpy as np
import trimesh

from geometry import create_wireframe
from grid_core import Container, Coordinate, Direction, PathEvent
from mesh_builder import create_maze_stl, create_wireframe_mesh


def _corridor():
    paths = [
        PathEvent(Coordinate(0, 0), Direction.EAST),
        PathEvent(Coordinate(1, 0), Direction.NONE),
    ]
    return create_wireframe(paths, Container(5, 3))


class TestMeshBuilder(unittest.TestCase):
    def test_one_box_per_wall_plus_base(self):
        frame = _corridor()
        mesh = create_wireframe_mesh(frame, cell_size=1.0, wall_height=2.0, base_height=0.5)
        self.assertEqual(len(mesh.faces), 12 * (frame.wall_count() + 1))
        np.testing.assert_allclose(mesh.bounds, [[0.0, 0.0, -0.5], [5.0, 3.0, 2.0]])

    def test_without_base(self):
        frame = _corridor()
        mesh = create_wireframe_mesh(frame, cell_size=2.0, wall_height=1.0, base_height=0.0)
        self.assertEqual(len(mesh.faces), 12 * frame.wall_count())
        np.testing.assert_allclose(mesh.bounds, [[0.0, 0.0, 0.0], [10.0, 6.0, 1.0]])

    def test_rejects_bad_dimensions(self):
        with self.assertRaises(ValueError):
            create_wireframe_mesh(_corridor(), cell_size=0.0)
        with self.assertRaises(ValueError):
            create_wireframe_mesh(_corridor(), base_height=-1.0)

    def test_stl_export(self):
        frame = _corridor()
        with tempfile.TemporaryDirectory() as tmp:
            stl_file = create_maze_stl(frame, tmp)
            self.assertTrue(os.path.getsize(stl_file) > 0)
            loaded = trimesh.load_mesh(stl_file, process=False)
            self.assertEqual(len(loaded.faces), 12 * (frame.wall_count() + 1))


if __name__ == "__main__":
    unittest.main()
