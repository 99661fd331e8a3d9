# visualization.py
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from collections import deque
from typing import Dict, List, Optional

# Import from other project modules
from grid_core import Cell, RectGrid
from geometry import MazeLayout, Rect
from utils import unit_lengths
import constants as const


# --- Pathfinding (Often used with visualization) ---
def find_solution_path(
    grid: RectGrid, start_cell: Cell, end_cell: Cell
) -> Optional[List[Cell]]:
    """
    Finds the path between two cells using Breadth-First Search over open
    edges. On a carved maze this is the only simple path between them.
    """
    print(f"--- Finding path from {start_cell} to {end_cell} ---")
    if not (grid.in_bounds(*start_cell) and grid.in_bounds(*end_cell)):
        print("ERROR: Invalid start or end cell provided.")
        return None

    queue = deque([start_cell])
    predecessor: Dict[Cell, Optional[Cell]] = {start_cell: None}
    path_found = False

    while queue:
        current_cell = queue.popleft()
        if current_cell == end_cell:
            path_found = True
            break
        for neighbour_cell in grid.linked_neighbours(*current_cell):
            if neighbour_cell not in predecessor:
                predecessor[neighbour_cell] = current_cell
                queue.append(neighbour_cell)

    if not path_found:
        print("  Path not found!")
        return None

    # Reconstruct path
    path_cells: List[Cell] = []
    curr: Optional[Cell] = end_cell
    while curr is not None:
        path_cells.append(curr)
        curr = predecessor[curr]
    path_cells.reverse()

    print(f"  Path length: {len(path_cells)} cells.")
    return path_cells


# --- Visualization Helpers ---
def _setup_plot(layout: MazeLayout):
    """Creates an axis in screen coordinates (y grows downwards)."""
    aspect = layout.height / layout.width
    fig, ax = plt.subplots(figsize=(const.VIS_FIG_WIDTH, const.VIS_FIG_WIDTH * aspect))
    margin = const.BOUNDARY_THICKNESS * 2
    ax.set_xlim(-margin, layout.width + margin)
    ax.set_ylim(layout.height + margin, -margin)
    ax.set_aspect("equal")
    ax.set_facecolor(const.VIS_BACKGROUND_COLOR)
    ax.set_xticks([])
    ax.set_yticks([])
    return fig, ax


def _draw_rect(ax, rect: Rect, color: str):
    ax.add_patch(
        mpatches.Rectangle(
            (rect.x - rect.width / 2, rect.y - rect.height / 2),
            rect.width,
            rect.height,
            facecolor=color,
            edgecolor="none",
        )
    )


def _draw_board(ax, layout: MazeLayout):
    for wall in layout.walls:
        _draw_rect(ax, wall, const.VIS_WALL_COLOR)
    for wall in layout.boundaries:
        _draw_rect(ax, wall, const.VIS_BOUNDARY_COLOR)
    _draw_rect(ax, layout.goal, const.VIS_GOAL_COLOR)
    ax.add_patch(
        mpatches.Circle(
            (layout.start.x, layout.start.y),
            layout.ball_radius,
            facecolor=const.VIS_BALL_COLOR,
        )
    )


# --- Main Visualization Functions ---
def visualize_maze_layout(
    layout: MazeLayout,
    filename: str = "maze_layout.png",
    solution_path: Optional[List[Cell]] = None,
):
    """Draws the board (walls, goal, ball) and optionally a cell path, saving a PNG."""
    print(f"--- Generating Maze Layout Visualization: {filename} ---")
    fig, ax = _setup_plot(layout)
    _draw_board(ax, layout)

    if solution_path:
        unit_x, unit_y = unit_lengths(layout.width, layout.height, layout.rows, layout.cols)
        xs = [col * unit_x + unit_x / 2 for _, col in solution_path]
        ys = [row * unit_y + unit_y / 2 for row, _ in solution_path]
        ax.plot(
            xs,
            ys,
            const.VIS_SOLUTION_LINE_STYLE,
            lw=const.VIS_SOLUTION_LINE_LW,
            alpha=const.VIS_SOLUTION_LINE_ALPHA,
        )
        ax.set_title(f"Maze Solution ({len(solution_path)} cells)")
    else:
        ax.set_title(f"Maze Layout ({layout.rows}x{layout.cols}, {len(layout.walls)} walls)")

    plt.savefig(filename, dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"  Layout visualization saved to {filename}")


def visualize_maze_solution(
    grid: RectGrid, layout: MazeLayout, filename: str = "maze_solution.png"
) -> Optional[List[Cell]]:
    """Finds the start-to-goal path and draws it over the board."""
    solution_path = find_solution_path(grid, grid.start_cell, grid.goal_cell)
    if not solution_path:
        print("  Could not find solution path, cannot visualize.")
        return None
    visualize_maze_layout(layout, filename, solution_path=solution_path)
    return solution_path
