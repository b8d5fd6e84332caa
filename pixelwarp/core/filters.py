"""
Filter Registry
===============
Maps filter names to the functions implementing them, so callers such as
the worker threads can pick a transform by name.

Every entry takes a Raster as its first argument plus keyword parameters
and returns a new Raster.
"""

from typing import Callable, Dict

from . import adjust, distort, rotation
from .raster import Raster

FilterFunc = Callable[..., Raster]

FILTERS: Dict[str, FilterFunc] = {
    # Rotation and reflection
    "reflect_x": rotation.reflect_x,
    "reflect_y": rotation.reflect_y,
    "rotate_90_cw": rotation.rotate_90_cw,
    "rotate_90_ccw": rotation.rotate_90_ccw,
    "rotate_180": rotation.rotate_180,
    "rotate_any": rotation.rotate_any,
    "rotate_any_no_resize": rotation.rotate_any_no_resize,

    # Distortions
    "circle_distort": distort.circle_distort,
    "circle_disfigure": distort.circle_disfigure,
    "concave_distort": distort.concave_distort,
    "sphere_distort": distort.sphere_distort,
    "ripple": distort.ripple,
    "bulge": distort.bulge,
    "scale_out": distort.scale_out,
    "curve_up": distort.curve_up,
    "curve_right": distort.curve_right,
    "distort_wave": distort.distort_wave,
    "distort_wave_x": distort.distort_wave_x,
    "distort_wave_y": distort.distort_wave_y,

    # Colour adjustments and effects
    "greyscale": adjust.greyscale,
    "negative": adjust.negative,
    "brighten": adjust.brighten,
    "darken": adjust.darken,
    "red": adjust.red,
    "green": adjust.green,
    "blue": adjust.blue,
    "warm": adjust.warm,
    "cool": adjust.cool,
    "sepia": adjust.sepia,
    "saturate": adjust.saturate,
    "rainbow_wave": adjust.rainbow_wave,
    "rainbow_gradient": adjust.rainbow_gradient,
    "circle_fade": adjust.circle_fade,
    "square_fade": adjust.square_fade,
    "blur": adjust.blur,
    "blur_passes": adjust.blur_passes,
    "pixelate": adjust.pixelate,
    "noise": adjust.noise,
    "noise_greyscale": adjust.noise_greyscale,
    "shimmer": adjust.shimmer,
}


def available_filters() -> list:
    return sorted(FILTERS)


def apply_filter(name: str, raster: Raster, **params) -> Raster:
    """
    Run the named filter on ``raster``.

    Raises:
        KeyError: If no filter has that name.
    """
    try:
        func = FILTERS[name]
    except KeyError:
        raise KeyError(
            f"Unknown filter '{name}'. Available: {', '.join(available_filters())}"
        ) from None
    return func(raster, **params)
