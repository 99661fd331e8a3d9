"""
Tests for visualization.py

Pathfinding over open edges and PNG export of the board.
"""

import random

from conftest import ZeroRandom
from geometry import build_layout
from grid_core import RectGrid
from maze_gen import carve_maze
from visualization import find_solution_path, visualize_maze_layout, visualize_maze_solution


class TestFindSolutionPath:
    def test_two_by_two_zero_trace(self) -> None:
        grid = carve_maze(RectGrid(2, 2), ZeroRandom())
        assert find_solution_path(grid, (0, 0), (1, 1)) == [(0, 0), (0, 1), (1, 1)]
        assert find_solution_path(grid, (0, 0), (1, 0)) == [(0, 0), (0, 1), (1, 1), (1, 0)]

    def test_same_cell(self) -> None:
        grid = carve_maze(RectGrid(3, 3), ZeroRandom())
        assert find_solution_path(grid, (1, 1), (1, 1)) == [(1, 1)]

    def test_path_steps_through_open_edges(self) -> None:
        grid = carve_maze(RectGrid(9, 11), random.Random(7))
        path = find_solution_path(grid, grid.start_cell, grid.goal_cell)
        assert path[0] == grid.start_cell
        assert path[-1] == grid.goal_cell
        for a, b in zip(path, path[1:]):
            assert b in grid.linked_neighbours(*a)

    def test_unreachable_on_uncarved_grid(self) -> None:
        assert find_solution_path(RectGrid(2, 2), (0, 0), (1, 1)) is None

    def test_invalid_cell(self) -> None:
        assert find_solution_path(RectGrid(2, 2), (0, 0), (5, 5)) is None


class TestVisualizeLayout:
    def test_writes_png(self, tmp_path) -> None:
        grid = carve_maze(RectGrid(3, 6), random.Random(3))
        layout = build_layout(grid, 600, 300)
        filename = tmp_path / "layout.png"
        visualize_maze_layout(layout, str(filename))
        assert filename.exists()
        assert filename.stat().st_size > 0

    def test_writes_solution_png(self, tmp_path) -> None:
        grid = carve_maze(RectGrid(4, 4), random.Random(3))
        layout = build_layout(grid, 400, 400)
        filename = tmp_path / "solution.png"
        path = visualize_maze_solution(grid, layout, str(filename))
        assert path[0] == (0, 0)
        assert path[-1] == (3, 3)
        assert filename.exists()
