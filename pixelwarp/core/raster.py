"""
Raster Value Type
=================
The pixel grid every transform reads and writes.

Technical Notes:
- Pixels are stored as a float64 numpy array of shape (height, width, 4)
- Channel order is RGBA, every channel lives in [0, 255]
- Float storage keeps blend/unblend round trips exact; conversion to an
  8-bit Pillow image rounds once, at the boundary
- Rasters are value-like: transforms never mutate their inputs
"""

from typing import NamedTuple, Tuple, Union, Iterable

import numpy as np
from PIL import Image

from .errors import InvalidRasterError


CHANNEL_MAX = 255.0


class Color(NamedTuple):
    """An RGBA colour. Alpha 255 means fully opaque."""
    red: float
    green: float
    blue: float
    alpha: float = 255

    @classmethod
    def of(cls, value: Union["Color", Iterable[float]]) -> "Color":
        """
        Build a Color from an RGB or RGBA sequence.

        A three-item sequence is treated as opaque.
        """
        channels = tuple(value)
        if len(channels) == 3:
            channels = channels + (CHANNEL_MAX,)
        if len(channels) != 4:
            raise ValueError(f"Color needs 3 or 4 channels, got {len(channels)}")
        return cls(*(float(c) for c in channels))


TRANSPARENT = Color(0, 0, 0, 0)
WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)


class Raster:
    """
    A width x height grid of RGBA pixels.

    Coordinates are (x, y) with x along the width and y along the height;
    the backing array is indexed [y, x, channel].
    """

    __slots__ = ("_pixels",)

    def __init__(self, pixels: np.ndarray):
        """
        Wrap an existing pixel array.

        Args:
            pixels: Array of shape (height, width, 4). It is copied and
                    clamped into [0, 255].

        Raises:
            InvalidRasterError: If the array is not (H, W, 4) or a
                                dimension is zero.
        """
        array = np.asarray(pixels)
        if array.ndim != 3 or array.shape[2] != 4:
            raise InvalidRasterError(
                f"Pixel array must have shape (height, width, 4), got {array.shape}"
            )
        if array.shape[0] <= 0 or array.shape[1] <= 0:
            raise InvalidRasterError(
                f"Raster dimensions must be positive, got {array.shape[1]}x{array.shape[0]}"
            )
        self._pixels = np.clip(array.astype(np.float64), 0.0, CHANNEL_MAX)

    # ===== Construction =====

    @classmethod
    def blank(cls, width: int, height: int) -> "Raster":
        """Create a zero-initialised, fully transparent raster."""
        _check_size(width, height)
        return cls._wrap(np.zeros((height, width, 4), dtype=np.float64))

    @classmethod
    def filled(cls, width: int, height: int, color) -> "Raster":
        """Create a raster where every pixel has the given colour."""
        _check_size(width, height)
        pixels = np.empty((height, width, 4), dtype=np.float64)
        pixels[...] = Color.of(color)
        return cls(pixels)

    @classmethod
    def from_image(cls, image: Image.Image) -> "Raster":
        """
        Convert a Pillow image into a Raster.

        Any mode is accepted; the image is converted to RGBA first.
        """
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls._wrap(np.asarray(image, dtype=np.float64).copy())

    @classmethod
    def _wrap(cls, pixels: np.ndarray) -> "Raster":
        # Internal fast path: caller guarantees a fresh, valid, clamped array.
        raster = cls.__new__(cls)
        raster._pixels = pixels
        return raster

    def to_image(self) -> Image.Image:
        """Convert to an 8-bit RGBA Pillow image (channels are rounded)."""
        data = np.clip(np.rint(self._pixels), 0, 255).astype(np.uint8)
        return Image.fromarray(data)

    # ===== Accessors =====

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height), the same order Pillow uses."""
        return self.width, self.height

    @property
    def pixels(self) -> np.ndarray:
        """Read-only view of the (H, W, 4) channel array."""
        view = self._pixels.view()
        view.flags.writeable = False
        return view

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Color:
        """
        Read one pixel.

        Raises:
            IndexError: If (x, y) is outside the raster.
        """
        self._check_coordinate(x, y)
        return Color(*(float(c) for c in self._pixels[y, x]))

    def set(self, x: int, y: int, color) -> None:
        """
        Write one pixel, clamping every channel into [0, 255].

        Raises:
            IndexError: If (x, y) is outside the raster.
        """
        self._check_coordinate(x, y)
        self._pixels[y, x] = np.clip(Color.of(color), 0.0, CHANNEL_MAX)

    def copy(self) -> "Raster":
        return Raster._wrap(self._pixels.copy())

    def same_size(self, other: "Raster") -> bool:
        return self.size == other.size

    def _check_coordinate(self, x: int, y: int):
        if not self.contains(x, y):
            raise IndexError(
                f"Coordinate ({x}, {y}) outside raster of size {self.width}x{self.height}"
            )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Raster):
            return NotImplemented
        return self.same_size(other) and np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Raster(width={self.width}, height={self.height})"


def _check_size(width: int, height: int):
    if width <= 0 or height <= 0:
        raise InvalidRasterError(f"Raster dimensions must be positive, got {width}x{height}")
