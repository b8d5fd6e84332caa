"""
Colour Adjustments and Effects
==============================
Per-channel filters that share the Raster type with the geometric core.

Technical Notes:
- Colour filters change R, G and B only; the source alpha is kept
- Filters taking an ``amount`` (0-255) compute a full-strength effect and
  mix it over the original, so 0 leaves the picture unchanged
- Random effects draw from an injectable numpy Generator; pass a seeded
  one for reproducible output
- The box blur delegates to OpenCV's boxFilter
"""

import logging
from typing import Optional

import cv2
import numpy as np

from .compositing import blend, check_amount
from .geometry import distance, image_center
from .raster import Raster, Color, CHANNEL_MAX
from .resampler import resample_same_size

logger = logging.getLogger(__name__)

# Classic sepia matrix, rows produce R, G, B
SEPIA_MATRIX = np.array([
    [0.393, 0.769, 0.189],
    [0.349, 0.686, 0.168],
    [0.272, 0.534, 0.131],
])

SATURATE_THRESHOLD = 128

# rainbow_wave weights its x wave at 128/255 against the y wave
WAVE_MIX = 128 / 255

# Shimmer samples within +/- this many pixels of the destination
SHIMMER_SPREAD = 25.0


def _with_rgb(raster: Raster, rgb: np.ndarray) -> Raster:
    """New raster with the given colour channels and the source alpha."""
    pixels = raster.pixels.copy()
    pixels[..., :3] = rgb
    return Raster(pixels)


def _mix_rgb(raster: Raster, effect_rgb: np.ndarray, amount: float) -> Raster:
    """Lay full-strength colour channels over the original at ``amount``."""
    check_amount(amount)
    source = raster.pixels
    effect = np.empty_like(source)
    effect[..., :3] = effect_rgb
    effect[..., 3] = source[..., 3]
    mixed = blend(effect, source, amount)
    mixed[..., 3] = source[..., 3]
    return Raster(mixed)


def _generator(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


# ===== Plain colour filters =====

def greyscale(raster: Raster) -> Raster:
    """Set every colour channel to the brightest of the three."""
    grey = raster.pixels[..., :3].max(axis=-1, keepdims=True)
    return _with_rgb(raster, grey)


def negative(raster: Raster) -> Raster:
    """Invert the colour channels."""
    return _with_rgb(raster, CHANNEL_MAX - raster.pixels[..., :3])


def brighten(raster: Raster, amount: int) -> Raster:
    """Add ``amount`` to every colour channel."""
    check_amount(amount)
    return _with_rgb(raster, raster.pixels[..., :3] + amount)


def darken(raster: Raster, amount: int) -> Raster:
    """Subtract ``amount`` from every colour channel."""
    check_amount(amount)
    return _with_rgb(raster, raster.pixels[..., :3] - amount)


# ===== Tints (mixed over the original) =====

def _single_channel(raster: Raster, channel: int) -> np.ndarray:
    rgb = np.zeros(raster.pixels.shape[:2] + (3,), dtype=np.float64)
    rgb[..., channel] = np.minimum(raster.pixels[..., channel] + 1, CHANNEL_MAX)
    return rgb


def red(raster: Raster, amount: int) -> Raster:
    """Push the picture towards its red channel."""
    check_amount(amount)
    return _mix_rgb(raster, _single_channel(raster, 0), amount)


def green(raster: Raster, amount: int) -> Raster:
    """Push the picture towards its green channel."""
    check_amount(amount)
    return _mix_rgb(raster, _single_channel(raster, 1), amount)


def blue(raster: Raster, amount: int) -> Raster:
    """Push the picture towards its blue channel."""
    check_amount(amount)
    return _mix_rgb(raster, _single_channel(raster, 2), amount)


def warm(raster: Raster, amount: int) -> Raster:
    """Warm the picture: full red, original green, no blue."""
    check_amount(amount)
    rgb = np.zeros(raster.pixels.shape[:2] + (3,), dtype=np.float64)
    rgb[..., 0] = CHANNEL_MAX
    rgb[..., 1] = raster.pixels[..., 1]
    return _mix_rgb(raster, rgb, amount)


def cool(raster: Raster, amount: int) -> Raster:
    """Cool the picture: no red, original green, full blue."""
    check_amount(amount)
    rgb = np.zeros(raster.pixels.shape[:2] + (3,), dtype=np.float64)
    rgb[..., 1] = raster.pixels[..., 1]
    rgb[..., 2] = CHANNEL_MAX
    return _mix_rgb(raster, rgb, amount)


def sepia(raster: Raster, amount: int) -> Raster:
    """Mix a sepia-toned version over the original."""
    check_amount(amount)
    rgb = raster.pixels[..., :3] @ SEPIA_MATRIX.T
    return _mix_rgb(raster, np.clip(rgb, 0.0, CHANNEL_MAX), amount)


def saturate(raster: Raster, amount: int) -> Raster:
    """Mix a fully saturated (thresholded) version over the original."""
    check_amount(amount)
    rgb = np.where(raster.pixels[..., :3] < SATURATE_THRESHOLD, 0.0, CHANNEL_MAX)
    return _mix_rgb(raster, rgb, amount)


def _positive_wave(values: np.ndarray) -> np.ndarray:
    return np.maximum(values * CHANNEL_MAX, 0.0)


def rainbow_wave(raster: Raster, intensity: int, seed: float = 0.0) -> Raster:
    """
    Mix sine and cosine colour waves over the picture.

    Each colour channel mixes one wave running along x with one running
    along y. ``seed`` shifts the phases and the period (100 to 150 px).
    """
    check_amount(intensity, "intensity")
    w, h = raster.size
    phase = np.cos(seed) * 20.0
    period = 100.0 * (abs(np.sin(phase)) + 0.5)

    ys, xs = np.indices((h, w), dtype=np.float64)
    xs /= period
    ys /= period

    along_x = np.stack([
        _positive_wave(np.sin(xs + phase)),
        _positive_wave(np.cos(xs + phase * 32)),
        _positive_wave(np.sin(xs - np.pi - phase * 12)),
    ], axis=-1)
    along_y = np.stack([
        _positive_wave(np.cos(ys + phase * 23)),
        _positive_wave(np.cos(ys - np.pi)),
        _positive_wave(np.sin(ys + phase * 65)),
    ], axis=-1)

    rgb = along_x * WAVE_MIX + along_y * (1.0 - WAVE_MIX)
    return _mix_rgb(raster, np.clip(rgb, 0.0, CHANNEL_MAX), intensity)


def rainbow_gradient(raster: Raster, amount: int, seed: float = 0.0) -> Raster:
    """
    Mix a three-point colour gradient over the picture.

    Red, green and blue each grow with the distance to their own anchor
    point; ``seed`` nudges the anchors around.
    """
    check_amount(amount)
    w, h = raster.size
    seed_x = int(np.cos(seed) * 20)
    seed_y = int(np.sin(seed) * 20)

    half_w, half_h = image_center(w, h)
    anchors = (
        (half_w + seed_x, seed_y),
        (-seed_x, half_h + half_h // 2 + seed_y),
        (w - seed_x, half_h + half_h // 2 + 2 * seed_y),
    )
    norm = max(float(distance(half_w, half_h, 0, 0)), 1.0)

    ys, xs = np.indices((h, w), dtype=np.float64)
    rgb = np.stack(
        [np.clip(distance(xs, ys, ax, ay) / norm, 0.0, 1.0) * CHANNEL_MAX for ax, ay in anchors],
        axis=-1
    )
    return _mix_rgb(raster, rgb, amount)


# ===== Fades =====

def _fade(raster: Raster, color, dist: np.ndarray, extent: float) -> Raster:
    if extent <= 0:
        raise ValueError("Fade size plus fade length must be positive")
    fade_color = np.asarray(Color.of(color), dtype=np.float64)
    alpha = np.clip(dist / extent * CHANNEL_MAX, 0.0, CHANNEL_MAX)
    rgb = blend(fade_color, raster.pixels, alpha)[..., :3]
    return _with_rgb(raster, rgb)


def circle_fade(raster: Raster, color, radius: int, fade_length: int) -> Raster:
    """Fade towards ``color`` with the distance from the centre."""
    cx, cy = image_center(raster.width, raster.height)
    ys, xs = np.indices((raster.height, raster.width), dtype=np.float64)
    return _fade(raster, color, distance(xs, ys, cx, cy), radius + fade_length)


def square_fade(raster: Raster, color, width: int, fade_length: int) -> Raster:
    """Fade towards ``color`` with the distance from the centre lines."""
    cx, cy = image_center(raster.width, raster.height)
    ys, xs = np.indices((raster.height, raster.width), dtype=np.float64)
    dist = np.maximum(np.abs(xs - cx), np.abs(ys - cy))
    return _fade(raster, color, dist, width + fade_length)


# ===== Blur and pixelate =====

def blur(raster: Raster, blur_range: int) -> Raster:
    """
    Box blur: average each pixel's square neighbourhood.

    The window is clipped at the edges and only pixels inside the raster
    contribute to the average.

    Args:
        raster: Source raster.
        blur_range: Neighbourhood radius in pixels (window is 2r+1 wide).
    """
    if blur_range < 0:
        raise ValueError(f"Blur range must not be negative, got {blur_range}")
    if blur_range == 0:
        return raster.copy()

    size = 2 * blur_range + 1
    ksize = (size, size)
    source = raster.pixels.copy()

    sums = cv2.boxFilter(source, -1, ksize, normalize=False,
                         borderType=cv2.BORDER_CONSTANT)
    counts = cv2.boxFilter(np.ones(source.shape[:2], dtype=np.float64), -1, ksize,
                           normalize=False, borderType=cv2.BORDER_CONSTANT)

    return Raster(sums / counts[..., np.newaxis])


def blur_passes(raster: Raster, blur_range: int, passes: int) -> Raster:
    """Apply ``blur`` repeatedly."""
    if passes < 1:
        raise ValueError(f"Passes must be at least 1, got {passes}")
    result = raster
    for _ in range(passes):
        result = blur(result, blur_range)
    return result


def pixelate(raster: Raster, pixel_size: int) -> Raster:
    """Paint each pixel_size block with the colour of its top-left pixel."""
    if pixel_size < 1:
        raise ValueError(f"Pixel size must be at least 1, got {pixel_size}")
    source = raster.pixels
    h, w = source.shape[:2]
    corners = source[::pixel_size, ::pixel_size]
    blocks = np.repeat(np.repeat(corners, pixel_size, axis=0), pixel_size, axis=1)
    return Raster(blocks[:h, :w])


# ===== Random effects =====

def noise(raster: Raster, amount: int, rng: Optional[np.random.Generator] = None) -> Raster:
    """Mix uniform colour noise over the picture."""
    check_amount(amount)
    rgb = _generator(rng).random(raster.pixels.shape[:2] + (3,)) * CHANNEL_MAX
    return _mix_rgb(raster, rgb, amount)


def noise_greyscale(raster: Raster, amount: int,
                    rng: Optional[np.random.Generator] = None) -> Raster:
    """Mix uniform grey noise over the picture."""
    check_amount(amount)
    grey = _generator(rng).random(raster.pixels.shape[:2] + (1,)) * CHANNEL_MAX
    return _mix_rgb(raster, np.broadcast_to(grey, grey.shape[:2] + (3,)), amount)


def shimmer(raster: Raster, amount: int, rng: Optional[np.random.Generator] = None) -> Raster:
    """
    Resample every pixel from a random nearby position and mix it over
    the original.
    """
    check_amount(amount)
    generator = _generator(rng)
    w, h = raster.size

    def map_dest(xs, ys):
        jitter_x = (generator.random(xs.shape) - 0.5) * 2 * SHIMMER_SPREAD
        jitter_y = (generator.random(ys.shape) - 0.5) * 2 * SHIMMER_SPREAD
        return (
            np.clip(np.trunc(xs + jitter_x), 0, w - 1),
            np.clip(np.trunc(ys + jitter_y), 0, h - 1),
        )

    shimmered = resample_same_size(raster, map_dest)
    logger.debug("shimmer: resampled %dx%d with spread %.1f", w, h, SHIMMER_SPREAD)
    return _mix_rgb(raster, shimmered.pixels[..., :3], amount)
