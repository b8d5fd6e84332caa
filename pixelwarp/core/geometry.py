"""
Geometry Primitives
===================
Point rotation and point scaling about an arbitrary centre.

Every function accepts plain numbers or numpy arrays; arrays are
processed elementwise, which lets the resampler evaluate a whole
destination grid in one call.
"""

import math
from typing import NamedTuple, Tuple

import numpy as np


class Point2(NamedTuple):
    """An (x, y) pair of real numbers (or coordinate arrays)."""
    x: float
    y: float


def rotate_point(center_x, center_y, x, y, radians) -> Point2:
    """
    Rotate (x, y) about (center_x, center_y).

    Uses the standard matrix (cos, -sin; sin, cos). In image coordinates,
    where y grows downward, a positive angle moves points clockwise.

    Args:
        center_x: X coordinate of the pivot.
        center_y: Y coordinate of the pivot.
        x: X coordinate(s) of the point being rotated.
        y: Y coordinate(s) of the point being rotated.
        radians: Rotation angle; scalar or per-point array.

    Returns:
        Point2 with the rotated coordinates.
    """
    sin = np.sin(radians)
    cos = np.cos(radians)

    # Translate to origin
    px = x - center_x
    py = y - center_y

    return Point2(
        px * cos - py * sin + center_x,
        px * sin + py * cos + center_y
    )


def scale_point(center_x, center_y, x, y, factor) -> Point2:
    """
    Scale (x, y) away from (center_x, center_y) by ``factor``.

    factor=1 is the identity, 0 collapses onto the centre and a negative
    factor reflects through the centre.
    """
    return Point2(
        (x - center_x) * factor + center_x,
        (y - center_y) * factor + center_y
    )


def distance(x1, y1, x2, y2):
    """Euclidean distance between two points."""
    return np.hypot(x1 - x2, y1 - y2)


def angle_to(from_x, from_y, to_x, to_y):
    """Angle in radians of the vector from one point to another."""
    return np.arctan2(to_y - from_y, to_x - from_x)


def image_center(width: int, height: int) -> Tuple[int, int]:
    """Integer pixel centre of a width x height raster."""
    return width // 2, height // 2


def to_radians(degrees: float) -> float:
    return math.radians(degrees)
