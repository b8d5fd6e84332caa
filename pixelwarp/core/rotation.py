"""
Rotation and Reflection
=======================
Quarter turns, mirrors and arbitrary-angle rotation.

Technical Notes:
- Quarter turns and reflections are exact pixel permutations (numpy
  views over the pixel array, copied into a new raster)
- Arbitrary angles go through the inverse-mapping resampler
- rotate_any enlarges the canvas so no corner is cropped; the new size
  comes from rotating the four image corners about the centre
- Angles are given in degrees; positive angles turn the picture
  counter-clockwise on screen
"""

import logging
import math
from typing import NamedTuple

import numpy as np

from .geometry import rotate_point, image_center, to_radians
from .raster import Raster
from .resampler import resample, resample_same_size

logger = logging.getLogger(__name__)

# Corner extents closer than this to an integer are treated as that integer
EXTENT_EPSILON = 1e-6


class RotatedBounds(NamedTuple):
    """Canvas size and content offset for an unclipped rotation."""
    width: int
    height: int
    offset_x: int
    offset_y: int


def reflect_x(raster: Raster) -> Raster:
    """Mirror the raster left to right."""
    return Raster(raster.pixels[:, ::-1])


def reflect_y(raster: Raster) -> Raster:
    """Mirror the raster top to bottom."""
    return Raster(raster.pixels[::-1, :])


def rotate_90_cw(raster: Raster) -> Raster:
    """Rotate a quarter turn clockwise; width and height swap."""
    return Raster(np.rot90(raster.pixels, k=-1))


def rotate_90_ccw(raster: Raster) -> Raster:
    """Rotate a quarter turn counter-clockwise; width and height swap."""
    return Raster(np.rot90(raster.pixels, k=1))


def rotate_180(raster: Raster) -> Raster:
    return Raster(np.rot90(raster.pixels, k=2))


def _extent(value: float) -> int:
    return math.ceil(value - EXTENT_EPSILON)


def rotated_bounds(width: int, height: int, radians: float) -> RotatedBounds:
    """
    Compute the smallest canvas holding a rotated width x height image.

    The four corners are rotated about the image centre; the canvas spans
    their extents. The offset centres the original-size content in the
    larger canvas.

    Args:
        width: Source width in pixels.
        height: Source height in pixels.
        radians: Rotation angle.

    Returns:
        RotatedBounds(width, height, offset_x, offset_y).
    """
    center_x, center_y = image_center(width, height)

    corners = [
        rotate_point(center_x, center_y, x, y, radians)
        for x, y in ((0, 0), (width, 0), (0, height), (width, height))
    ]
    xs = [float(c.x) for c in corners]
    ys = [float(c.y) for c in corners]

    new_width = max(1, _extent(max(xs) - min(xs)))
    new_height = max(1, _extent(max(ys) - min(ys)))

    offset_x = int((new_width - width) / 2)
    offset_y = int((new_height - height) / 2)

    return RotatedBounds(new_width, new_height, offset_x, offset_y)


def _quarter_turns(degrees: float):
    """Number of counter-clockwise quarter turns, or None for other angles."""
    turns, remainder = divmod(degrees, 90)
    if remainder != 0:
        return None
    return int(turns) % 4


_QUARTER_TURNS = {
    0: Raster.copy,
    1: rotate_90_ccw,
    2: rotate_180,
    3: rotate_90_cw,
}


def rotate_any(raster: Raster, degrees: float) -> Raster:
    """
    Rotate by any angle, enlarging the canvas so nothing is cropped.

    Multiples of 90 degrees take the exact quarter-turn path, so a full
    turn returns an identical copy.

    Args:
        raster: Source raster.
        degrees: Angle in degrees, counter-clockwise on screen.

    Returns:
        New raster, usually larger than the source. Areas not covered by
        the rotated picture are transparent.
    """
    turns = _quarter_turns(degrees)
    if turns is not None:
        return _QUARTER_TURNS[turns](raster)

    angle = to_radians(degrees)
    center_x, center_y = image_center(raster.width, raster.height)
    bounds = rotated_bounds(raster.width, raster.height, angle)

    logger.debug(
        "rotate_any %.2f deg: %dx%d -> %dx%d",
        degrees, raster.width, raster.height, bounds.width, bounds.height
    )

    def map_dest(xs, ys):
        return rotate_point(
            center_x, center_y, xs - bounds.offset_x, ys - bounds.offset_y, angle
        )

    return resample(raster, (bounds.width, bounds.height), map_dest)


def rotate_any_no_resize(raster: Raster, degrees: float) -> Raster:
    """
    Rotate by any angle keeping the original canvas size.

    Corners that leave the canvas are cropped; uncovered areas are
    transparent.
    """
    if degrees % 360 == 0:
        return raster.copy()

    angle = to_radians(degrees)
    center_x, center_y = image_center(raster.width, raster.height)

    return resample_same_size(
        raster, lambda xs, ys: rotate_point(center_x, center_y, xs, ys, angle)
    )
