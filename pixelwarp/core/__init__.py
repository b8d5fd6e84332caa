"""
Core Module - Pure Raster Transforms
====================================
This module contains no UI or threading dependencies.
All geometric and compositing algorithms are implemented here.
"""

from .errors import RasterError, InvalidRasterError, IncompatibleDimensionsError
from .raster import Raster, Color, TRANSPARENT, WHITE, BLACK
from .geometry import Point2, rotate_point, scale_point
from .resampler import resample, resample_same_size
from .rotation import (
    RotatedBounds, rotated_bounds,
    reflect_x, reflect_y, rotate_90_cw, rotate_90_ccw, rotate_180,
    rotate_any, rotate_any_no_resize
)
from .compositing import blend, unblend, composite, uncomposite, mix_alpha
from .region import (
    BlendMode, composite_region,
    add_watermark, remove_watermark, extract_from_white_background
)
from .filters import FILTERS, apply_filter, available_filters

__all__ = [
    # Errors
    "RasterError",
    "InvalidRasterError",
    "IncompatibleDimensionsError",

    # Values
    "Raster",
    "Color",
    "TRANSPARENT",
    "WHITE",
    "BLACK",
    "Point2",

    # Geometry and resampling
    "rotate_point",
    "scale_point",
    "resample",
    "resample_same_size",

    # Rotation
    "RotatedBounds",
    "rotated_bounds",
    "reflect_x",
    "reflect_y",
    "rotate_90_cw",
    "rotate_90_ccw",
    "rotate_180",
    "rotate_any",
    "rotate_any_no_resize",

    # Compositing
    "blend",
    "unblend",
    "composite",
    "uncomposite",
    "mix_alpha",
    "BlendMode",
    "composite_region",
    "add_watermark",
    "remove_watermark",
    "extract_from_white_background",

    # Registry
    "FILTERS",
    "apply_filter",
    "available_filters",
]
