"""
Tests for the Raster value type.

Run with: python -m pytest tests/test_raster.py -v
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pytest
from PIL import Image

from pixelwarp.core.errors import InvalidRasterError, RasterError
from pixelwarp.core.raster import Raster, Color, TRANSPARENT


def create_test_raster(width: int = 8, height: int = 6) -> Raster:
    """Create an opaque gradient raster."""
    pixels = np.zeros((height, width, 4), dtype=np.float64)
    for y in range(height):
        for x in range(width):
            pixels[y, x] = [
                int(255 * x / width),
                int(255 * y / height),
                128,
                255
            ]
    return Raster(pixels)


def test_blank_is_transparent():
    raster = Raster.blank(4, 3)

    assert raster.size == (4, 3)
    assert raster.width == 4
    assert raster.height == 3
    assert all(raster.get(x, y) == TRANSPARENT for x in range(4) for y in range(3))


def test_filled_accepts_rgb():
    raster = Raster.filled(2, 2, (10, 20, 30))

    assert raster.get(1, 1) == Color(10, 20, 30, 255)


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
def test_non_positive_dimensions_rejected(width, height):
    with pytest.raises(InvalidRasterError):
        Raster.blank(width, height)


def test_wrong_shape_rejected():
    with pytest.raises(InvalidRasterError):
        Raster(np.zeros((3, 3, 3)))

    # Still a ValueError for callers that only guard parameters
    with pytest.raises(ValueError):
        Raster(np.zeros((0, 3, 4)))

    assert issubclass(InvalidRasterError, RasterError)


def test_get_set_round_trip():
    raster = Raster.blank(3, 3)
    raster.set(2, 1, Color(1, 2, 3, 4))

    assert raster.get(2, 1) == Color(1, 2, 3, 4)
    assert raster.get(1, 2) == TRANSPARENT


def test_set_clamps_channels():
    raster = Raster.blank(1, 1)
    raster.set(0, 0, (300, -5, 128, 999))

    assert raster.get(0, 0) == Color(255, 0, 128, 255)


def test_constructor_clamps_channels():
    raster = Raster(np.full((1, 1, 4), 400.0))

    assert raster.get(0, 0) == Color(255, 255, 255, 255)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_out_of_bounds_access_guarded(x, y):
    raster = Raster.blank(3, 2)

    with pytest.raises(IndexError):
        raster.get(x, y)
    with pytest.raises(IndexError):
        raster.set(x, y, Color(0, 0, 0))


def test_copy_is_independent():
    original = create_test_raster()
    duplicate = original.copy()
    duplicate.set(0, 0, Color(1, 1, 1, 1))

    assert original.get(0, 0) != duplicate.get(0, 0)
    assert original != duplicate


def test_pixels_view_is_read_only():
    raster = create_test_raster()

    with pytest.raises(ValueError):
        raster.pixels[0, 0, 0] = 1.0


def test_equality():
    assert create_test_raster() == create_test_raster()
    assert create_test_raster(8, 6) != create_test_raster(6, 8)
    assert create_test_raster() != "not a raster"


def test_pillow_round_trip():
    arr = np.zeros((5, 7, 4), dtype=np.uint8)
    arr[..., 0] = np.arange(7, dtype=np.uint8) * 30
    arr[..., 1] = 77
    arr[..., 3] = 200
    image = Image.fromarray(arr)

    raster = Raster.from_image(image)

    assert raster.size == (7, 5)
    assert raster.get(3, 2) == Color(90, 77, 0, 200)
    assert np.array_equal(np.asarray(raster.to_image()), arr)


def test_from_rgb_image_is_opaque():
    image = Image.new("RGB", (3, 2), (10, 20, 30))

    raster = Raster.from_image(image)

    assert raster.get(2, 1) == Color(10, 20, 30, 255)


def test_to_image_rounds_channels():
    raster = Raster.filled(1, 1, (10.4, 10.6, 0, 255))

    assert Raster.from_image(raster.to_image()).get(0, 0) == Color(10, 11, 0, 255)
