"""
Pixel grid data model shared by the codec and the transformations.

A grid is a dense, rectangular block of RGB pixels indexed [row][col], with
row 0 at the visual top and col 0 at the visual left. It is backed by a single
numpy array of shape (height, width, 3) and dtype uint8, so rows can never be
jagged and every channel is always within [0, 255].
"""

from __future__ import annotations

from typing import Iterable, NamedTuple, Sequence

import numpy as np

from .errors import GridError

CHANNELS = 3


class Pixel(NamedTuple):
    """A single RGB pixel."""

    red: int
    green: int
    blue: int


BLACK = Pixel(0, 0, 0)
WHITE = Pixel(255, 255, 255)
RED = Pixel(255, 0, 0)
GREEN = Pixel(0, 255, 0)
BLUE = Pixel(0, 0, 255)


def saturate(values: np.ndarray) -> np.ndarray:
    """Convert arithmetic results to valid channel values.

    Values are truncated toward zero (the integer conversion the tone curves
    rely on) and then clamped to [0, 255], so scaling can never wrap around.

    Args:
        values: Array of channel values of any numeric dtype.

    Returns:
        New uint8 array with the same shape.

    Examples:
        >>> saturate(np.array([-3.5, 12.9, 300.0]))
        array([  0,  12, 255], dtype=uint8)
    """
    values = np.asarray(values)
    if np.issubdtype(values.dtype, np.floating):
        values = np.trunc(values)
    return np.clip(values, 0, 255).astype(np.uint8)


class PixelGrid:
    """Owned, bounds-checked pixel buffer.

    The constructor copies its input, so a grid never aliases an array held by
    the caller. Transformations build new grids rather than mutating this one.
    """

    __slots__ = ("_pixels",)

    def __init__(self, pixels: np.ndarray):
        if not isinstance(pixels, np.ndarray):
            raise TypeError(f"Expected numpy.ndarray, got {type(pixels).__name__}")
        if pixels.ndim != 3 or pixels.shape[2] != CHANNELS:
            raise GridError(
                f"Grid array must have shape (height, width, 3), got {pixels.shape}"
            )
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise GridError(f"Grid must not be empty, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            if pixels.size and (pixels.min() < 0 or pixels.max() > 255):
                raise GridError("Channel values must be within [0, 255]")
            pixels = pixels.astype(np.uint8)
        else:
            pixels = pixels.copy()
        pixels.setflags(write=False)
        self._pixels = pixels

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Iterable[int]]]) -> PixelGrid:
        """Build a grid from nested rows of (red, green, blue) triples."""
        if not rows:
            raise GridError("Grid must have at least one row")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise GridError(
                    f"Row {index} has {len(row)} pixels, expected {width}"
                )
        try:
            array = np.array([[tuple(p) for p in row] for row in rows], dtype=np.int64)
        except (TypeError, ValueError) as exc:
            raise GridError(f"Rows must contain RGB triples: {exc}") from exc
        if array.ndim != 3:
            raise GridError("Rows must contain RGB triples")
        return cls(array)

    @classmethod
    def filled(cls, height: int, width: int, pixel: Iterable[int] = BLACK) -> PixelGrid:
        """Build a grid of the given size with every pixel set to ``pixel``."""
        if height <= 0 or width <= 0:
            raise GridError(f"Grid dimensions must be positive, got {height}x{width}")
        array = np.empty((height, width, CHANNELS), dtype=np.int64)
        array[:, :] = tuple(pixel)
        return cls(array)

    @property
    def pixels(self) -> np.ndarray:
        """Read-only view of the (height, width, 3) uint8 array."""
        return self._pixels

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width) of the grid."""
        return self.height, self.width

    def pixel(self, row: int, col: int) -> Pixel:
        """Return the pixel at (row, col).

        Raises:
            IndexError: If row or col is outside the grid. Negative indices
                are rejected rather than wrapped.
        """
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(
                f"Pixel ({row}, {col}) outside {self.height}x{self.width} grid"
            )
        r, g, b = self._pixels[row, col]
        return Pixel(int(r), int(g), int(b))

    def to_rows(self) -> list[list[Pixel]]:
        """Return the grid as nested lists of Pixel, row 0 first."""
        return [
            [Pixel(int(r), int(g), int(b)) for r, g, b in row]
            for row in self._pixels
        ]

    def copy(self) -> PixelGrid:
        return PixelGrid(self._pixels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelGrid(height={self.height}, width={self.width})"
