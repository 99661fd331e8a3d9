"""
Tests for mesh_builder.py

The printable board is a base slab plus one box per wall.
"""

import numpy as np
import pytest

from conftest import ZeroRandom
from geometry import build_layout
from grid_core import RectGrid
from maze_gen import carve_maze
from mesh_builder import create_maze_stl


@pytest.fixture
def layout():
    grid = carve_maze(RectGrid(2, 2), ZeroRandom())
    return build_layout(grid, 200, 100)


class TestCreateMazeStl:
    def test_box_per_wall_plus_base(self, layout) -> None:
        board = create_maze_stl(layout, wall_height=10, base_height=2)
        # 1 carved wall + 4 boundaries + base, 12 triangles each
        assert len(board.faces) == 12 * 6

    def test_without_base(self, layout) -> None:
        board = create_maze_stl(layout, wall_height=10, base_height=0)
        assert len(board.faces) == 12 * 5

    def test_bounds(self, layout) -> None:
        board = create_maze_stl(layout, wall_height=10, base_height=2)
        lower, upper = board.bounds
        np.testing.assert_allclose(lower, [-1, -1, 0])
        np.testing.assert_allclose(upper, [201, 101, 12])

    def test_export(self, layout, tmp_path) -> None:
        filename = tmp_path / "board.stl"
        create_maze_stl(layout, wall_height=10, base_height=2, output_filename=str(filename))
        assert filename.exists()
        assert filename.stat().st_size > 0

    def test_invalid_heights(self, layout) -> None:
        with pytest.raises(ValueError):
            create_maze_stl(layout, wall_height=0, base_height=2)
