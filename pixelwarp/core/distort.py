"""
Distortion Filters
==================
Geometric warps built on the inverse-mapping resampler.

Each filter only decides how a destination pixel finds its source
coordinate: a rotation or a scale about some centre, with a per-pixel
angle or factor derived from the pixel's distance or angle to the centre.

Filters taking an ``amount`` (0-255) lay the warped picture over the
original: 0 returns the original, 255 the full effect.
"""

import numpy as np

from .compositing import check_amount, mix_alpha
from .geometry import rotate_point, scale_point, distance, angle_to, image_center
from .raster import Raster
from .resampler import resample_same_size

# Period divisors of the radial sine warps
SPHERE_PERIOD = 50.0
RIPPLE_PERIOD = 6.0

# Rotation speed of circle_distort: one radian per tenth of the short side
CIRCLE_TWIST_DIVISOR = 10.0

# Wave distortion: horizontal/vertical periods and displacement in pixels
WAVE_PERIOD_X = 18.0
WAVE_PERIOD_Y = 20.0
WAVE_MAGNITUDE = 10.0


def _warp(raster: Raster, map_dest, amount=None) -> Raster:
    warped = resample_same_size(raster, map_dest)
    # Full strength keeps the transparent areas the warp leaves behind
    if amount is None or amount == 255:
        return warped
    return mix_alpha(warped, raster, amount)


def _radius(center_x, center_y, xs, ys):
    """Whole-pixel distance from the centre."""
    return np.floor(distance(center_x, center_y, xs, ys))


def circle_distort(raster: Raster, amount: int = 255) -> Raster:
    """Twist the picture around its centre, more strongly further out."""
    check_amount(amount)
    cx, cy = image_center(raster.width, raster.height)
    twist = min(raster.width, raster.height) / CIRCLE_TWIST_DIVISOR

    def map_dest(xs, ys):
        return rotate_point(cx, cy, xs, ys, distance(cx, cy, xs, ys) / twist)

    return _warp(raster, map_dest, amount)


def circle_disfigure(raster: Raster, amount: int = 255) -> Raster:
    """
    Scatter samples around the centre in a noisy circular pattern.

    The rotation angle is cos(x * y), which looks random but is fully
    deterministic.
    """
    check_amount(amount)
    cx, cy = image_center(raster.width, raster.height)

    return _warp(
        raster,
        lambda xs, ys: rotate_point(cx, cy, xs, ys, np.cos(xs * ys)),
        amount
    )


def concave_distort(raster: Raster, amount: int = 255) -> Raster:
    """Scale from the centre by the cosine of four times the pixel's angle."""
    check_amount(amount)
    cx, cy = image_center(raster.width, raster.height)

    def map_dest(xs, ys):
        factor = np.cos(angle_to(cx, cy, xs, ys) * 4.0)
        return scale_point(cx, cy, xs, ys, factor)

    return _warp(raster, map_dest, amount)


def sphere_distort(raster: Raster, amount: int = 255) -> Raster:
    """Reflect the picture as if on a sphere (slow radial sine)."""
    check_amount(amount)
    cx, cy = image_center(raster.width, raster.height)

    def map_dest(xs, ys):
        factor = np.sin(_radius(cx, cy, xs, ys) / SPHERE_PERIOD)
        return scale_point(cx, cy, xs, ys, factor)

    return _warp(raster, map_dest, amount)


def ripple(raster: Raster, amount: int = 255) -> Raster:
    """Concentric ripples: sphere_distort with a much shorter period."""
    check_amount(amount)
    cx, cy = image_center(raster.width, raster.height)

    def map_dest(xs, ys):
        factor = np.sin(_radius(cx, cy, xs, ys) / RIPPLE_PERIOD)
        return scale_point(cx, cy, xs, ys, factor)

    return _warp(raster, map_dest, amount)


def bulge(raster: Raster, amount: int = 255) -> Raster:
    """Fisheye-like bulge: the scale grows linearly with distance."""
    check_amount(amount)
    cx, cy = image_center(raster.width, raster.height)
    div = min(raster.width, raster.height)

    def map_dest(xs, ys):
        return scale_point(cx, cy, xs, ys, _radius(cx, cy, xs, ys) / div)

    return _warp(raster, map_dest, amount)


def scale_out(raster: Raster) -> Raster:
    """Stretch the picture out towards its sides."""
    cx, cy = image_center(raster.width, raster.height)
    div = max(raster.width, raster.height)

    def map_dest(xs, ys):
        factor = (div - _radius(cx, cy, xs, ys)) / div
        return scale_point(cx, cy, xs, ys, factor)

    return _warp(raster, map_dest)


def curve_up(raster: Raster) -> Raster:
    """Curl the picture up like the edge of a sheet of paper."""
    height = raster.height
    return _warp(raster, lambda xs, ys: scale_point(0, 0, xs, ys, ys / height))


def curve_right(raster: Raster) -> Raster:
    """Curl the picture to the right like the edge of a sheet of paper."""
    width = raster.width
    return _warp(raster, lambda xs, ys: scale_point(0, 0, xs, ys, xs / width))


def _wave_x(xs, width):
    shifted = np.trunc(xs + np.sin(xs / WAVE_PERIOD_X) * WAVE_MAGNITUDE)
    return np.clip(shifted, 0, width - 1)


def _wave_y(ys, height):
    shifted = np.trunc(ys + np.cos(ys / WAVE_PERIOD_Y) * WAVE_MAGNITUDE)
    return np.clip(shifted, 0, height - 1)


def distort_wave(raster: Raster) -> Raster:
    """Wave the picture along both axes. Samples are clamped to the edges."""
    w, h = raster.size
    return _warp(raster, lambda xs, ys: (_wave_x(xs, w), _wave_y(ys, h)))


def distort_wave_x(raster: Raster) -> Raster:
    """Wave the picture along the x axis only."""
    w = raster.width
    return _warp(raster, lambda xs, ys: (_wave_x(xs, w), ys))


def distort_wave_y(raster: Raster) -> Raster:
    """Wave the picture along the y axis only."""
    h = raster.height
    return _warp(raster, lambda xs, ys: (xs, _wave_y(ys, h)))
