"""Coordinate transformation utilities for canvas rendering.

Provides conversion between the two coordinate systems used by the canvas:
- Grid space (integers, origin at canvas center, Y-up)
- Canvas pixels (origin top-left, Y-down)

Grid snapping rounds half away from zero, so a cursor exactly between two
grid lines snaps outward (2.5 -> 3, -2.5 -> -3).
"""
import math

from constants import GRID_SIZE
from models.point import Point


def round_half_away_from_zero(value):
    """Round to the nearest integer, ties going away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def canvas_to_grid(canvas_x, canvas_y, canvas_size, grid_size=GRID_SIZE):
    """Convert canvas pixel coordinates to the nearest grid point.

    Args:
        canvas_x: X pixel coordinate (0 = left edge)
        canvas_y: Y pixel coordinate (0 = top edge)
        canvas_size: Width/height of the square canvas in pixels
        grid_size: Pixels per grid cell

    Returns:
        Point with integer grid coordinates (Y-up)
    """
    half = canvas_size / 2
    grid_x = round_half_away_from_zero((canvas_x - half) / grid_size)
    grid_y = round_half_away_from_zero((half - canvas_y) / grid_size)
    return Point(grid_x, grid_y)


def grid_to_canvas(grid_x, grid_y, canvas_size, grid_size=GRID_SIZE):
    """Convert grid coordinates to canvas pixel coordinates.

    Works for real-valued grid coordinates too (dilated points are not
    snapped back to the grid).

    Returns:
        (canvas_x, canvas_y): Canvas pixel coordinates (Y-down)
    """
    half = canvas_size / 2
    canvas_x = half + grid_x * grid_size
    canvas_y = half - grid_y * grid_size
    return canvas_x, canvas_y
