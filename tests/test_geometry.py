"""
Tests for the point rotation / scaling primitives.

Run with: python -m pytest tests/test_geometry.py -v
"""

import math
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pytest

from pixelwarp.core.geometry import (
    Point2, rotate_point, scale_point, distance, angle_to, image_center, to_radians
)

POINTS = [(0, 0, 0, 0), (5, 5, 1, 9), (-3, 7, 12, -4), (100, 40, 3, 3)]


@pytest.mark.parametrize("cx,cy,x,y", POINTS)
def test_scale_by_one_is_identity(cx, cy, x, y):
    assert scale_point(cx, cy, x, y, 1.0) == (x, y)


@pytest.mark.parametrize("cx,cy,x,y", POINTS)
def test_rotate_by_zero_is_identity(cx, cy, x, y):
    assert rotate_point(cx, cy, x, y, 0.0) == (x, y)


def test_scale_by_zero_collapses_to_center():
    assert scale_point(4, 6, 100, -20, 0.0) == (4, 6)


def test_negative_scale_reflects_through_center():
    assert scale_point(10, 10, 13, 6, -1.0) == (7, 14)


def test_scale_doubles_offset():
    assert scale_point(1, 1, 3, 2, 2.0) == (5, 3)


def test_quarter_rotation_about_origin():
    point = rotate_point(0, 0, 1, 0, math.pi / 2)

    assert isinstance(point, Point2)
    assert point.x == pytest.approx(0.0, abs=1e-12)
    assert point.y == pytest.approx(1.0)


def test_half_rotation_about_center():
    point = rotate_point(5, 5, 7, 5, math.pi)

    assert point.x == pytest.approx(3.0)
    assert point.y == pytest.approx(5.0)


def test_primitives_accept_arrays():
    xs = np.array([[0.0, 1.0], [2.0, 3.0]])
    ys = np.array([[4.0, 4.0], [5.0, 5.0]])

    scaled = scale_point(0, 0, xs, ys, 2.0)
    rotated = rotate_point(0, 0, xs, ys, np.zeros_like(xs))

    assert np.array_equal(scaled.x, xs * 2)
    assert np.array_equal(scaled.y, ys * 2)
    assert np.array_equal(rotated.x, xs)
    assert np.array_equal(rotated.y, ys)


def test_per_point_angles():
    xs = np.array([1.0, 1.0])
    ys = np.array([0.0, 0.0])
    angles = np.array([0.0, math.pi])

    rotated = rotate_point(0, 0, xs, ys, angles)

    assert np.allclose(rotated.x, [1.0, -1.0])


def test_helpers():
    assert distance(0, 0, 3, 4) == pytest.approx(5.0)
    assert angle_to(0, 0, 0, 1) == pytest.approx(math.pi / 2)
    assert image_center(5, 4) == (2, 2)
    assert to_radians(180) == pytest.approx(math.pi)
