# utils.py
from typing import Tuple


def unit_lengths(width: float, height: float, rows: int, cols: int) -> Tuple[float, float]:
    """Width and height of one cell when the play area is split into rows x cols."""
    return width / cols, height / rows


def point_in_rect(
    x: float, y: float, center_x: float, center_y: float, width: float, height: float
) -> bool:
    """Checks if (x, y) lies inside (or on the edge of) a center-anchored rectangle."""
    return (
        abs(x - center_x) <= width / 2.0
        and abs(y - center_y) <= height / 2.0
    )


def circle_overlaps_rect(
    cx: float,
    cy: float,
    radius: float,
    center_x: float,
    center_y: float,
    width: float,
    height: float,
) -> bool:
    """
    Checks if a circle touches or overlaps an axis-aligned, center-anchored
    rectangle. Clamps the circle center onto the rectangle and compares the
    distance to the radius.
    """
    half_w, half_h = width / 2.0, height / 2.0
    nearest_x = min(max(cx, center_x - half_w), center_x + half_w)
    nearest_y = min(max(cy, center_y - half_h), center_y + half_h)
    dx, dy = cx - nearest_x, cy - nearest_y
    return dx * dx + dy * dy <= radius * radius
