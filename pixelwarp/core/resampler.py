"""
Inverse-Mapping Resampler
=========================
Drives every geometric filter.

For each destination pixel a mapping function returns the source
coordinate to sample. Coordinates falling outside the source are not an
error: the destination pixel simply stays transparent.

Technical Notes:
- The mapping is evaluated once over the whole destination grid with
  numpy arrays (xs, ys of shape (H, W)), not once per pixel
- Sampling is nearest neighbour: in-range coordinates are truncated to
  the integer grid and the source pixel is copied unchanged
- Destination pixels are independent, so evaluation order is irrelevant
"""

import logging
from typing import Callable, Tuple

import numpy as np

from .raster import Raster

logger = logging.getLogger(__name__)

# map_dest(xs, ys) -> (source_xs, source_ys)
MapDest = Callable[[np.ndarray, np.ndarray], Tuple[np.ndarray, np.ndarray]]


def destination_grid(width: int, height: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Float coordinate grids for a width x height destination.

    Returns:
        (xs, ys), both of shape (height, width).
    """
    ys, xs = np.indices((height, width), dtype=np.float64)
    return xs, ys


def resample(source: Raster, size: Tuple[int, int], map_dest: MapDest) -> Raster:
    """
    Build a new raster by inverse mapping into ``source``.

    Args:
        source: Raster to sample from. Never modified.
        size: (width, height) of the output raster.
        map_dest: Function receiving destination coordinate arrays and
                  returning source coordinate arrays of the same shape
                  (scalars broadcast).

    Returns:
        New raster of the requested size. Pixels whose source coordinate
        is out of range or not finite are fully transparent.
    """
    width, height = size
    out = np.zeros((height, width, 4), dtype=np.float64)

    xs, ys = destination_grid(width, height)
    sx, sy = map_dest(xs, ys)
    sx = np.broadcast_to(np.asarray(sx, dtype=np.float64), xs.shape)
    sy = np.broadcast_to(np.asarray(sy, dtype=np.float64), ys.shape)

    src = source.pixels
    with np.errstate(invalid="ignore"):
        valid = (
            np.isfinite(sx) & np.isfinite(sy)
            & (sx >= 0) & (sx < source.width)
            & (sy >= 0) & (sy < source.height)
        )

    # Non-negative in-range values: truncation equals floor
    col = sx[valid].astype(np.intp)
    row = sy[valid].astype(np.intp)

    out[valid] = src[row, col]

    logger.debug(
        "Resampled %dx%d -> %dx%d (%d of %d pixels sampled)",
        source.width, source.height, width, height, int(valid.sum()), valid.size
    )
    return Raster(out)


def resample_same_size(source: Raster, map_dest: MapDest) -> Raster:
    """Resample onto a canvas the same size as ``source``."""
    return resample(source, source.size, map_dest)
