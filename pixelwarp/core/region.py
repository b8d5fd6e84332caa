"""
Region Compositor
=================
Applies the compositing algebra over the overlap of two offset rasters.

Used for adding a transparent watermark onto an image, removing a
previously added one, and extracting a watermark that was photographed
or exported over a white background.

Technical Notes:
- The overlay's own per-pixel alpha channel drives the blend
- Overlay pixels that land outside the base are skipped silently, so a
  watermark may sit partly or fully off-canvas
- The base raster is copied, never modified
"""

import logging
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .compositing import blend, unblend
from .raster import Raster, CHANNEL_MAX

logger = logging.getLogger(__name__)


class BlendMode(Enum):
    """Direction of the region blend."""
    FORWARD = "forward"   # lay the overlay on top
    INVERSE = "inverse"   # take a previously laid overlay back off


def overlap(base_size: Tuple[int, int], overlay_size: Tuple[int, int],
            offset: Tuple[int, int]) -> Optional[Tuple[slice, slice, slice, slice]]:
    """
    Find the overlapping region of an overlay placed at ``offset``.

    Returns:
        (base_rows, base_cols, overlay_rows, overlay_cols) slices, or None
        when the overlay does not touch the base at all.
    """
    base_w, base_h = base_size
    over_w, over_h = overlay_size
    x0, y0 = offset

    left = max(0, x0)
    top = max(0, y0)
    right = min(base_w, x0 + over_w)
    bottom = min(base_h, y0 + over_h)

    if left >= right or top >= bottom:
        return None

    return (
        slice(top, bottom),
        slice(left, right),
        slice(top - y0, bottom - y0),
        slice(left - x0, right - x0),
    )


def composite_region(
        base: Raster,
        overlay: Raster,
        offset: Tuple[int, int] = (0, 0),
        mode: BlendMode = BlendMode.FORWARD
) -> Raster:
    """
    Blend ``overlay`` into ``base`` at an integer offset.

    Args:
        base: Raster underneath. Never modified.
        overlay: Raster whose per-pixel alpha drives the blend.
        offset: (x, y) of the overlay's top-left corner in base coordinates.
        mode: FORWARD adds the overlay, INVERSE removes it.

    Returns:
        New raster the size of ``base``.
    """
    x0, y0 = int(offset[0]), int(offset[1])
    mode = BlendMode(mode)

    region = overlap(base.size, overlay.size, (x0, y0))
    if region is None:
        logger.debug("Overlay at (%d, %d) lies outside %dx%d base; nothing to do",
                     x0, y0, base.width, base.height)
        return base.copy()

    base_rows, base_cols, over_rows, over_cols = region
    output = base.pixels.copy()

    under = output[base_rows, base_cols]
    over = overlay.pixels[over_rows, over_cols]
    alpha = over[..., 3]

    if mode is BlendMode.FORWARD:
        output[base_rows, base_cols] = blend(over, under, alpha)
    else:
        output[base_rows, base_cols] = unblend(under, over, alpha)

    return Raster(output)


def add_watermark(base: Raster, watermark: Raster, x: int = 0, y: int = 0) -> Raster:
    """Lay a transparent watermark onto ``base`` with its top-left at (x, y)."""
    return composite_region(base, watermark, (x, y), BlendMode.FORWARD)


def remove_watermark(watermarked: Raster, watermark: Raster, x: int = 0, y: int = 0) -> Raster:
    """
    Remove a watermark previously added at (x, y).

    The same watermark raster and offset used by add_watermark recover the
    original pixels wherever the watermark is not fully opaque.
    """
    return composite_region(watermarked, watermark, (x, y), BlendMode.INVERSE)


def extract_from_white_background(raster: Raster) -> Raster:
    """
    Recover a transparent watermark from its render over pure white.

    Over white, each channel satisfies C = c * a + 255 * (1 - a), so the
    smallest alpha that explains a pixel is 255 - min(R, G, B). Pixels with
    any channel at full 255 are treated as untouched background and become
    transparent black.

    Args:
        raster: Watermark composited over a white background. Its own
                alpha channel is ignored.

    Returns:
        New raster holding the watermark's colour and alpha.
    """
    rgb = raster.pixels[..., :3]
    alpha = CHANNEL_MAX - rgb.min(axis=-1)

    output = np.zeros(raster.pixels.shape, dtype=np.float64)
    # A channel still at 255 means no watermark reached this pixel
    visible = rgb.max(axis=-1) < CHANNEL_MAX

    a = alpha[visible][:, np.newaxis]
    output[visible, :3] = CHANNEL_MAX - CHANNEL_MAX * (CHANNEL_MAX - rgb[visible]) / a
    output[visible, 3] = alpha[visible]

    return Raster(output)
