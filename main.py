# main.py
import os
import random
import time
import traceback
from typing import Optional

# Import project modules
import constants as const
from grid_core import RectGrid
from maze_gen import carve_maze
from geometry import build_layout
from mesh_builder import create_maze_stl
from visualization import visualize_maze_layout, visualize_maze_solution


def run_maze_generation(
    rows: int = const.DEFAULT_ROWS,
    cols: int = const.DEFAULT_COLS,
    seed: Optional[int] = None,
    output_dir: str = "output",
):
    start_time = time.time()
    os.makedirs(output_dir, exist_ok=True)

    print("\n--- Configuration ---")
    width = const.DEFAULT_WIDTH
    height = const.DEFAULT_HEIGHT
    goal_ratio = const.GOAL_SIZE_RATIO
    print(f"  Grid: {rows} rows x {cols} cols, Seed: {seed}")
    print(f"  Play Area: {width:.1f} x {height:.1f}, Goal Ratio: {goal_ratio:.2f}")

    rng = random.Random(seed)

    # Generation failures are configuration errors; let them surface
    grid = carve_maze(RectGrid(rows, cols), rng)
    layout = build_layout(grid, width, height, goal_ratio=goal_ratio)
    print(f"  Start ball at ({layout.start.x:.1f}, {layout.start.y:.1f}), r={layout.ball_radius:.1f}")
    print(f"  Goal at ({layout.goal.x:.1f}, {layout.goal.y:.1f}), {layout.goal.width:.1f}x{layout.goal.height:.1f}")

    # --- Visualizations ---
    print("\n--- Generating Visualizations ---")
    try:
        visualize_maze_layout(layout, filename=os.path.join(output_dir, "maze_layout.png"))
        visualize_maze_solution(grid, layout, filename=os.path.join(output_dir, "maze_solution.png"))
    except Exception as e:
        print(f"An error occurred during visualization generation: {e}")
        traceback.print_exc()

    # --- Printable Board STL ---
    print("\n--- Generating Board STL ---")
    try:
        create_maze_stl(
            layout,
            wall_height=const.MAZE_STL_WALL_HEIGHT,
            base_height=const.MAZE_STL_BASE_HEIGHT,
            output_filename=os.path.join(output_dir, "maze_board.stl"),
        )
    except Exception as e:
        print(f"An error occurred during STL generation: {e}")
        traceback.print_exc()

    end_time = time.time()
    print(f"\n--- Total Execution Time: {end_time - start_time:.2f} seconds ---")
    return layout


if __name__ == "__main__":
    run_maze_generation()
