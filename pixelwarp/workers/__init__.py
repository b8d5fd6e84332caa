"""
Workers Module - Async Thread Management
========================================
Contains QThread workers for non-blocking raster transforms.

Heavy computations run in separate threads to keep a Qt event loop
responsive.

Components:
- TransformWorker: Runs one named filter on a raster
- WatermarkWorker: Adds, removes or extracts a watermark
"""

from .transform_worker import TransformWorker, TransformConfig, TransformResult
from .watermark_worker import (
    WatermarkWorker, WatermarkConfig, WatermarkResult, WATERMARK_MODES
)

__all__ = [
    # Transform
    "TransformWorker",
    "TransformConfig",
    "TransformResult",
    # Watermark
    "WatermarkWorker",
    "WatermarkConfig",
    "WatermarkResult",
    "WATERMARK_MODES",
]
