"""
Compositing Algebra
===================
Forward alpha blend and its algebraic inverse.

Formula (per colour channel, a = alpha / 255):
    C = Cs * a + Cd * (1 - a)            forward ("over")
    Cd = (C - Cs * a) / (1 - a)          inverse

The alpha channel follows the over operator: the result is as opaque
as alpha + bottom_alpha * (1 - a), and the inverse solves that for the
bottom alpha.

Technical Notes:
- Inverse blending is undefined at a == 1. There is no background left
  to recover, so the result takes the contributor's colour channels and
  keeps the observed alpha. NaN and infinity are never produced.
- Every output channel is clamped to [0, 255]
"""

import logging
from typing import Union

import numpy as np

from .errors import IncompatibleDimensionsError
from .raster import Raster, Color, CHANNEL_MAX

logger = logging.getLogger(__name__)

AlphaLike = Union[float, np.ndarray]


def check_amount(amount: float, name: str = "amount") -> float:
    """
    Validate a 0-255 mix amount.

    Raises:
        ValueError: If amount is outside [0, 255].
    """
    if not 0 <= amount <= 255:
        raise ValueError(f"{name.capitalize()} must be between 0 and 255, got {amount}")
    return amount


def _alpha_fraction(alpha: AlphaLike) -> np.ndarray:
    """Alpha 0-255 as a fraction, shaped to broadcast over the channel axis."""
    frac = np.clip(np.asarray(alpha, dtype=np.float64) / CHANNEL_MAX, 0.0, 1.0)
    return frac[..., np.newaxis]


def blend(top: np.ndarray, bottom: np.ndarray, alpha: AlphaLike) -> np.ndarray:
    """
    Forward blend over (..., 4) channel arrays.

    Args:
        top: Channels of the colour laid on top.
        bottom: Channels of the colour underneath.
        alpha: Scalar or per-pixel alpha (0-255) of the top colour.

    Returns:
        Blended (..., 4) array, clamped to [0, 255].
    """
    top = np.asarray(top, dtype=np.float64)
    bottom = np.asarray(bottom, dtype=np.float64)
    a = _alpha_fraction(alpha)

    result = np.empty(np.broadcast(top, bottom, a).shape, dtype=np.float64)
    result[..., :3] = top[..., :3] * a + bottom[..., :3] * (1.0 - a)
    result[..., 3:] = a * CHANNEL_MAX + bottom[..., 3:] * (1.0 - a)

    return np.clip(result, 0.0, CHANNEL_MAX)


def unblend(observed: np.ndarray, contributor: np.ndarray, alpha: AlphaLike) -> np.ndarray:
    """
    Inverse blend: recover the bottom colour from a blended result.

    Args:
        observed: Channels of the blended result.
        contributor: Channels of the colour that was laid on top.
        alpha: Scalar or per-pixel alpha (0-255) used for the blend.

    Returns:
        (..., 4) array of recovered bottom channels, clamped to [0, 255].
        Where alpha is 255 the contributor's colour and the observed alpha
        are returned.
    """
    observed = np.asarray(observed, dtype=np.float64)
    contributor = np.asarray(contributor, dtype=np.float64)
    a = _alpha_fraction(alpha)
    a, observed, contributor = np.broadcast_arrays(a, observed, contributor)

    opaque = a >= 1.0
    remaining = np.where(opaque, 1.0, 1.0 - a)

    result = np.empty(observed.shape, dtype=np.float64)
    result[..., :3] = (observed[..., :3] - contributor[..., :3] * a[..., :3]) / remaining[..., :3]
    result[..., 3:] = (observed[..., 3:] - a[..., 3:] * CHANNEL_MAX) / remaining[..., 3:]

    if opaque.any():
        logger.debug("unblend: %d fully opaque channel(s), background unrecoverable",
                     int(opaque[..., 0].sum()))
        result[..., :3] = np.where(opaque[..., :3], contributor[..., :3], result[..., :3])
        result[..., 3:] = np.where(opaque[..., 3:], observed[..., 3:], result[..., 3:])

    return np.clip(result, 0.0, CHANNEL_MAX)


def composite(top, bottom, alpha: float) -> Color:
    """
    Blend one colour over another with a scalar alpha.

    Args:
        top: Colour laid on top (RGB or RGBA sequence). Its own alpha
             channel is ignored; ``alpha`` alone sets its opacity.
        bottom: Colour underneath.
        alpha: 0-255; 0 returns bottom, 255 returns top's colour.

    Returns:
        The blended Color.
    """
    result = blend(Color.of(top), Color.of(bottom), alpha)
    return Color(*(float(c) for c in result))


def uncomposite(observed, contributor, alpha: float) -> Color:
    """
    Solve the forward blend for the bottom colour.

    Args:
        observed: The blended colour.
        contributor: The colour that was on top.
        alpha: 0-255 alpha used for the blend.

    Returns:
        The recovered bottom Color (see module notes for alpha == 255).
    """
    result = unblend(Color.of(observed), Color.of(contributor), alpha)
    return Color(*(float(c) for c in result))


def mix_alpha(top: Raster, bottom: Raster, amount: float) -> Raster:
    """
    Lay ``top`` over ``bottom`` with a uniform alpha.

    Args:
        top: Raster on top (usually a computed effect).
        bottom: Raster underneath (usually the original).
        amount: 0-255; 0 leaves bottom unchanged, 255 gives the full effect.

    Returns:
        New raster of the shared size.

    Raises:
        IncompatibleDimensionsError: If the rasters differ in size.
        ValueError: If amount is outside [0, 255].
    """
    if not top.same_size(bottom):
        raise IncompatibleDimensionsError(top.size, bottom.size, "mix_alpha")
    check_amount(amount)

    if amount == 0:
        return bottom.copy()

    return Raster(blend(top.pixels, bottom.pixels, amount))
