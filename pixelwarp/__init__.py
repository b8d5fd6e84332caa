"""
PixelWarp Package
=================
Per-pixel raster transforms: geometric warps and alpha compositing.

Modules:
    - core: Pure algorithm logic (no Qt dependencies)
    - workers: QThread workers for async processing

Usage:
    from pixelwarp.core import Raster, rotate_any, add_watermark
    from pixelwarp.workers import TransformWorker, TransformConfig
"""

import logging

__version__ = "1.0.0"
__author__ = "PixelWarp"
__app_name__ = "PixelWarp"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core exports
from .core import (
    Raster,
    Color,
    IncompatibleDimensionsError,
    rotate_point,
    scale_point,
    resample,
    rotate_any,
    composite,
    uncomposite,
    mix_alpha,
    add_watermark,
    remove_watermark,
    extract_from_white_background,
    apply_filter,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__app_name__",

    # Core
    "Raster",
    "Color",
    "IncompatibleDimensionsError",
    "rotate_point",
    "scale_point",
    "resample",
    "rotate_any",
    "composite",
    "uncomposite",
    "mix_alpha",
    "add_watermark",
    "remove_watermark",
    "extract_from_white_background",
    "apply_filter",
]
