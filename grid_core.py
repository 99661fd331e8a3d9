# grid_core.py
import numpy as np
from typing import List, Tuple, Iterator

Cell = Tuple[int, int]
Edge = Tuple[Cell, Cell]


class InvalidDimensionsError(ValueError):
    """Raised when a maze is requested with fewer than one row or column."""


class OutOfBoundsError(IndexError):
    """Raised on any cell or edge access outside the grid's index ranges."""


class RectGrid:
    """
    Represents the rectangular cell grid and the open/closed state of the
    edges between neighbouring cells.

    verticals[r, c] is the edge between (r, c) and (r, c + 1).
    horizontals[r, c] is the edge between (r, c) and (r + 1, c).
    True means the passage is open, False means a wall remains.
    """

    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise InvalidDimensionsError(
                f"Grid needs at least one row and one column (got rows={rows}, cols={cols})."
            )
        self.rows = rows
        self.cols = cols
        self.visited = np.zeros((rows, cols), dtype=bool)
        self.verticals = np.zeros((rows, cols - 1), dtype=bool)
        self.horizontals = np.zeros((rows - 1, cols), dtype=bool)

    # --- Bounds ---
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_cell(self, row: int, col: int):
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(
                f"Cell ({row}, {col}) outside {self.rows}x{self.cols} grid."
            )

    def _check_vertical(self, row: int, col: int):
        # Numpy would silently wrap negative indices, so check by hand.
        if not (0 <= row < self.rows and 0 <= col < self.cols - 1):
            raise OutOfBoundsError(
                f"Vertical edge ({row}, {col}) outside range {self.rows}x{self.cols - 1}."
            )

    def _check_horizontal(self, row: int, col: int):
        if not (0 <= row < self.rows - 1 and 0 <= col < self.cols):
            raise OutOfBoundsError(
                f"Horizontal edge ({row}, {col}) outside range {self.rows - 1}x{self.cols}."
            )

    # --- Visited state ---
    def is_visited(self, row: int, col: int) -> bool:
        self._check_cell(row, col)
        return bool(self.visited[row, col])

    def mark_visited(self, row: int, col: int):
        self._check_cell(row, col)
        self.visited[row, col] = True

    # --- Edge state ---
    def open_vertical(self, row: int, col: int):
        """Opens the passage between (row, col) and (row, col + 1)."""
        self._check_vertical(row, col)
        self.verticals[row, col] = True

    def open_horizontal(self, row: int, col: int):
        """Opens the passage between (row, col) and (row + 1, col)."""
        self._check_horizontal(row, col)
        self.horizontals[row, col] = True

    def is_vertical_open(self, row: int, col: int) -> bool:
        self._check_vertical(row, col)
        return bool(self.verticals[row, col])

    def is_horizontal_open(self, row: int, col: int) -> bool:
        self._check_horizontal(row, col)
        return bool(self.horizontals[row, col])

    # --- Read helpers ---
    def size(self) -> int:
        """Returns the total number of cells in the grid."""
        return self.rows * self.cols

    def visited_count(self) -> int:
        return int(self.visited.sum())

    def open_edge_count(self) -> int:
        return int(self.verticals.sum() + self.horizontals.sum())

    def open_edges(self) -> List[Edge]:
        """Lists every open passage as a pair of cells, smaller cell first."""
        edges: List[Edge] = []
        for row, col in zip(*np.nonzero(self.horizontals)):
            edges.append(((int(row), int(col)), (int(row) + 1, int(col))))
        for row, col in zip(*np.nonzero(self.verticals)):
            edges.append(((int(row), int(col)), (int(row), int(col) + 1)))
        return edges

    def linked_neighbours(self, row: int, col: int) -> List[Cell]:
        """Gets the cells reachable from (row, col) through an open edge."""
        self._check_cell(row, col)
        linked = []
        if row > 0 and self.horizontals[row - 1, col]:
            linked.append((row - 1, col))
        if col < self.cols - 1 and self.verticals[row, col]:
            linked.append((row, col + 1))
        if row < self.rows - 1 and self.horizontals[row, col]:
            linked.append((row + 1, col))
        if col > 0 and self.verticals[row, col - 1]:
            linked.append((row, col - 1))
        return linked

    def get_all_cells(self) -> Iterator[Cell]:
        """Returns an iterator over all cells in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)

    @property
    def start_cell(self) -> Cell:
        """Top-left cell, where the ball is placed."""
        return (0, 0)

    @property
    def goal_cell(self) -> Cell:
        """Bottom-right cell, where the goal sits."""
        return (self.rows - 1, self.cols - 1)

    def __repr__(self) -> str:
        return f"RectGrid({self.rows}x{self.cols}, open={self.open_edge_count()})"
