# maze_gen.py
import random
from typing import List, Optional, Tuple, TypeVar

# Import from other project modules
import constants as const
from grid_core import Cell, InvalidDimensionsError, OutOfBoundsError, RectGrid
from geometry import MazeLayout, build_layout, check_play_area

T = TypeVar("T")


def shuffle(items: List[T], rng) -> List[T]:
    """
    Shuffles items in place (Fisher-Yates) and returns them.
    Walks from the last slot down; each slot swaps with a uniformly chosen
    slot from the not-yet-fixed prefix, itself included.
    """
    counter = len(items)
    while counter > 0:
        index = rng.randrange(counter)
        counter -= 1
        items[counter], items[index] = items[index], items[counter]
    return items


def _shuffled_neighbours(row: int, col: int, rng) -> List[Tuple[int, int, str]]:
    neighbours = [
        (row + d_row, col + d_col, direction)
        for direction, d_row, d_col in const.NEIGHBOUR_OFFSETS
    ]
    return shuffle(neighbours, rng)


def _open_edge(grid: RectGrid, row: int, col: int, direction: str):
    """Removes the wall between (row, col) and its neighbour in direction."""
    if direction == const.DIR_LEFT:
        grid.open_vertical(row, col - 1)
    elif direction == const.DIR_RIGHT:
        grid.open_vertical(row, col)
    elif direction == const.DIR_UP:
        grid.open_horizontal(row - 1, col)
    elif direction == const.DIR_DOWN:
        grid.open_horizontal(row, col)
    else:
        raise ValueError(f"Unknown direction: {direction}")


def carve_maze(grid: RectGrid, rng=None, start: Optional[Cell] = None) -> RectGrid:
    """
    Carves passages through the grid using randomized depth-first
    backtracking and returns the grid.

    rng is any object with randrange(n); a fresh random.Random is used when
    None. start defaults to a uniformly random cell. Each stack frame holds
    a cell, its shuffled neighbour list and the index of the next neighbour
    to try, so cells are visited in the same order as the recursive version
    without growing the interpreter's call stack.
    """
    if rng is None:
        rng = random.Random()

    if start is None:
        start_row = rng.randrange(grid.rows)
        start_col = rng.randrange(grid.cols)
    else:
        start_row, start_col = start
        if not grid.in_bounds(start_row, start_col):
            raise OutOfBoundsError(
                f"Start cell ({start_row}, {start_col}) outside {grid.rows}x{grid.cols} grid."
            )

    print(f"--- Starting Maze Generation ({grid.rows}x{grid.cols}) at cell ({start_row}, {start_col}) ---")

    grid.mark_visited(start_row, start_col)
    stack = [[start_row, start_col, _shuffled_neighbours(start_row, start_col, rng), 0]]

    while stack:
        frame = stack[-1]
        row, col, neighbours, index = frame
        if index >= len(neighbours):
            # Every direction tried, backtrack
            stack.pop()
            continue
        frame[3] = index + 1

        next_row, next_col, direction = neighbours[index]
        if not grid.in_bounds(next_row, next_col):
            continue
        if grid.is_visited(next_row, next_col):
            continue

        _open_edge(grid, row, col, direction)
        grid.mark_visited(next_row, next_col)
        stack.append(
            [next_row, next_col, _shuffled_neighbours(next_row, next_col, rng), 0]
        )

    visited_count = grid.visited_count()
    print(f"--- Maze Generation Complete: Visited {visited_count}/{grid.size()} cells, {grid.open_edge_count()} passages. ---")

    # Sanity check: the full lattice is connected, so this only trips on a bug
    if visited_count < grid.size():
        raise RuntimeError(
            f"Maze generation failed to visit all cells ({visited_count}/{grid.size()})."
        )
    return grid


def generate_maze(
    rows: int,
    cols: int,
    rng=None,
    width: float = const.DEFAULT_WIDTH,
    height: float = const.DEFAULT_HEIGHT,
    goal_ratio: float = const.GOAL_SIZE_RATIO,
) -> MazeLayout:
    """
    Generates a fresh maze and returns its wall layout scaled to
    width x height. Raises InvalidDimensionsError for rows or cols below 1.
    """
    if rows < 1 or cols < 1:
        raise InvalidDimensionsError(
            f"Maze needs at least one row and one column (got rows={rows}, cols={cols})."
        )
    check_play_area(width, height)
    grid = carve_maze(RectGrid(rows, cols), rng)
    return build_layout(grid, width, height, goal_ratio=goal_ratio)
