"""
Tests for the inverse-mapping resampler.

Run with: python -m pytest tests/test_resampler.py -v
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np

from pixelwarp.core.raster import Raster, Color, TRANSPARENT
from pixelwarp.core.resampler import resample, resample_same_size, destination_grid


def create_test_raster(width: int = 5, height: int = 4) -> Raster:
    """Opaque raster where red encodes x and green encodes y."""
    pixels = np.zeros((height, width, 4), dtype=np.float64)
    for y in range(height):
        for x in range(width):
            pixels[y, x] = [x * 10, y * 10, 50, 255]
    return Raster(pixels)


def test_destination_grid_layout():
    xs, ys = destination_grid(3, 2)

    assert xs.shape == (2, 3)
    assert xs[1, 2] == 2
    assert ys[1, 2] == 1


def test_identity_mapping_copies_source():
    source = create_test_raster()

    result = resample_same_size(source, lambda xs, ys: (xs, ys))

    assert result == source
    assert result is not source


def test_out_of_range_samples_stay_transparent():
    source = create_test_raster()

    result = resample_same_size(source, lambda xs, ys: (xs + 1, ys))

    for y in range(source.height):
        for x in range(source.width - 1):
            assert result.get(x, y) == source.get(x + 1, y)
        assert result.get(source.width - 1, y) == TRANSPARENT


def test_fractional_coordinates_are_truncated():
    source = create_test_raster()

    result = resample_same_size(source, lambda xs, ys: (xs + 0.7, ys + 0.99))

    assert result == source


def test_small_negative_coordinate_is_out_of_range():
    source = create_test_raster()

    result = resample_same_size(source, lambda xs, ys: (xs - 0.3, ys))

    assert result.get(0, 0) == TRANSPARENT
    assert result.get(1, 0) == source.get(0, 0)


def test_non_finite_coordinates_are_skipped():
    source = create_test_raster()

    result = resample_same_size(source, lambda xs, ys: (xs * np.nan, ys))

    assert result == Raster.blank(source.width, source.height)


def test_scalar_mapping_broadcasts():
    source = create_test_raster()

    result = resample_same_size(source, lambda xs, ys: (2, 3))

    assert all(
        result.get(x, y) == source.get(2, 3)
        for x in range(source.width) for y in range(source.height)
    )


def test_output_size_can_differ():
    source = create_test_raster(2, 2)

    result = resample(source, (3, 1), lambda xs, ys: (xs, ys))

    assert result.size == (3, 1)
    assert result.get(0, 0) == source.get(0, 0)
    assert result.get(1, 0) == source.get(1, 0)
    assert result.get(2, 0) == TRANSPARENT


def test_source_is_not_modified():
    source = create_test_raster()
    snapshot = source.copy()

    resample_same_size(source, lambda xs, ys: (ys, xs))

    assert source == snapshot


def test_copied_pixels_keep_their_alpha():
    source = Raster.filled(2, 2, Color(1, 2, 3, 40))

    result = resample_same_size(source, lambda xs, ys: (xs, ys))

    assert result.get(1, 1) == Color(1, 2, 3, 40)
