# mesh_builder.py
import numpy as np
import trimesh
from typing import List, Optional

import trimesh.creation
import trimesh.transformations
import trimesh.util

# Import from other project modules
import constants as const
from geometry import MazeLayout, Rect


def _wall_box(rect: Rect, layout_height: float, z_bottom: float, wall_height: float) -> trimesh.Trimesh:
    """Extrudes one wall rectangle into a box. Screen y is flipped so the board prints the right way up."""
    center = np.array(
        [rect.x, layout_height - rect.y, z_bottom + wall_height / 2.0]
    )
    return trimesh.creation.box(
        extents=[rect.width, rect.height, wall_height],
        transform=trimesh.transformations.translation_matrix(center),
    )


def create_maze_stl(
    layout: MazeLayout,
    wall_height: float = const.MAZE_STL_WALL_HEIGHT,
    base_height: float = const.MAZE_STL_BASE_HEIGHT,
    output_filename: Optional[str] = None,
) -> trimesh.Trimesh:
    """
    Builds a printable board: a base slab covering the play area with every
    wall (carved and boundary) standing on top of it. Exports an STL when
    output_filename is given.
    """
    print(f"\n--- Generating Maze STL with Base: {output_filename} ---")
    print(
        f"    Wall H={wall_height:.2f}, Base H={base_height:.2f}, Total H={wall_height + base_height:.2f}"
    )
    if wall_height <= 0 or base_height < 0:
        raise ValueError("Wall height must be positive and base height non-negative.")

    meshes: List[trimesh.Trimesh] = []
    if base_height > 0:
        # Base reaches the outer edge of the boundary walls
        pad = const.BOUNDARY_THICKNESS
        meshes.append(
            trimesh.creation.box(
                extents=[layout.width + pad, layout.height + pad, base_height],
                transform=trimesh.transformations.translation_matrix(
                    [layout.width / 2.0, layout.height / 2.0, base_height / 2.0]
                ),
            )
        )

    walls = layout.all_walls()
    print(f"  Extruding {len(walls)} wall rectangles...")
    for rect in walls:
        meshes.append(_wall_box(rect, layout.height, base_height, wall_height))

    board = trimesh.util.concatenate(meshes)
    board.merge_vertices()
    print(f"  Board mesh: {len(board.vertices)}V, {len(board.faces)}F")

    if output_filename:
        board.export(output_filename)
        print(f"  Exported board to {output_filename}")
    return board
