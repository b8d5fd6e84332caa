"""
Raster Errors
=============
Exceptions raised by the core transforms.

All of them derive from ValueError so callers that already guard
parameter validation with ``except ValueError`` keep working.
"""


class RasterError(ValueError):
    """Base class for raster-related failures."""


class InvalidRasterError(RasterError):
    """Pixel data does not describe a valid RGBA raster."""


class IncompatibleDimensionsError(RasterError):
    """Two rasters that must share a size do not."""

    def __init__(self, first_size, second_size, operation: str = "operation"):
        self.first_size = tuple(first_size)
        self.second_size = tuple(second_size)
        super().__init__(
            f"Invalid parameter for {operation}: sizes do not match "
            f"({self.first_size[0]}x{self.first_size[1]} vs "
            f"{self.second_size[0]}x{self.second_size[1]})"
        )
