# geometry.py
from typing import List, NamedTuple

# Import from other project modules
import constants as const
from grid_core import InvalidDimensionsError, RectGrid
from utils import circle_overlaps_rect, point_in_rect, unit_lengths


class Point(NamedTuple):
    x: float
    y: float


class Rect(NamedTuple):
    """Axis-aligned rectangle anchored at its center, as physics engines expect."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        return point_in_rect(x, y, self.x, self.y, self.width, self.height)


class MazeLayout(NamedTuple):
    """Everything a renderer or physics engine needs to build the board."""

    walls: List[Rect]  # Carved-maze walls: horizontals first, then verticals
    boundaries: List[Rect]  # Top, bottom, left, right
    goal: Rect
    start: Point
    ball_radius: float
    width: float
    height: float
    rows: int
    cols: int

    def all_walls(self) -> List[Rect]:
        return list(self.walls) + list(self.boundaries)

    def ball_reaches_goal(self, x: float, y: float) -> bool:
        """Checks if a ball centered at (x, y) touches the goal square."""
        goal = self.goal
        return circle_overlaps_rect(
            x, y, self.ball_radius, goal.x, goal.y, goal.width, goal.height
        )


def check_play_area(width: float, height: float):
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(
            f"Play area must have positive size (got {width}x{height})."
        )


def extract_wall_segments(
    grid: RectGrid,
    width: float,
    height: float,
    wall_thickness: float = const.WALL_THICKNESS,
) -> List[Rect]:
    """
    Emits one wall rectangle per closed edge.
    A closed horizontal edge (r, c) lies on the boundary below row r and
    spans column c; a closed vertical edge (r, c) lies on the boundary right
    of column c and spans row r.
    """
    unit_x, unit_y = unit_lengths(width, height, grid.rows, grid.cols)
    walls: List[Rect] = []

    for row_index in range(grid.rows - 1):
        for col_index in range(grid.cols):
            if grid.is_horizontal_open(row_index, col_index):
                continue
            walls.append(
                Rect(
                    col_index * unit_x + unit_x / 2,
                    row_index * unit_y + unit_y,
                    unit_x,
                    wall_thickness,
                )
            )

    for row_index in range(grid.rows):
        for col_index in range(grid.cols - 1):
            if grid.is_vertical_open(row_index, col_index):
                continue
            walls.append(
                Rect(
                    col_index * unit_x + unit_x,
                    row_index * unit_y + unit_y / 2,
                    wall_thickness,
                    unit_y,
                )
            )

    return walls


def boundary_walls(
    width: float, height: float, thickness: float = const.BOUNDARY_THICKNESS
) -> List[Rect]:
    """The four walls enclosing the play area: top, bottom, left, right."""
    return [
        Rect(width / 2, 0, width, thickness),
        Rect(width / 2, height, width, thickness),
        Rect(0, height / 2, thickness, height),
        Rect(width, height / 2, thickness, height),
    ]


def goal_rect(
    grid: RectGrid, width: float, height: float, ratio: float = const.GOAL_SIZE_RATIO
) -> Rect:
    """Goal square centered on the bottom-right cell."""
    if not 0 < ratio <= 1:
        raise ValueError(f"Goal ratio must be in (0, 1] (got {ratio}).")
    unit_x, unit_y = unit_lengths(width, height, grid.rows, grid.cols)
    goal_row, goal_col = grid.goal_cell
    return Rect(
        goal_col * unit_x + unit_x / 2,
        goal_row * unit_y + unit_y / 2,
        unit_x * ratio,
        unit_y * ratio,
    )


def start_point(grid: RectGrid, width: float, height: float) -> Point:
    """Center of the top-left cell, where the ball is dropped."""
    unit_x, unit_y = unit_lengths(width, height, grid.rows, grid.cols)
    start_row, start_col = grid.start_cell
    return Point(start_col * unit_x + unit_x / 2, start_row * unit_y + unit_y / 2)


def build_layout(
    grid: RectGrid,
    width: float = const.DEFAULT_WIDTH,
    height: float = const.DEFAULT_HEIGHT,
    goal_ratio: float = const.GOAL_SIZE_RATIO,
) -> MazeLayout:
    """Translates a carved grid into wall, goal and start geometry."""
    check_play_area(width, height)
    unit_x, unit_y = unit_lengths(width, height, grid.rows, grid.cols)

    walls = extract_wall_segments(grid, width, height)
    layout = MazeLayout(
        walls=walls,
        boundaries=boundary_walls(width, height),
        goal=goal_rect(grid, width, height, goal_ratio),
        start=start_point(grid, width, height),
        ball_radius=min(unit_x, unit_y) * const.BALL_RADIUS_RATIO,
        width=width,
        height=height,
        rows=grid.rows,
        cols=grid.cols,
    )
    print(f"  Layout: {len(walls)} maze walls, unit {unit_x:.2f}x{unit_y:.2f}")
    return layout
