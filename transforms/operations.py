"""
Pixel transformations over PixelGrid.

All functions are pure: they take a grid and return a new grid without
mutating the input. Arithmetic is done on wide integer or float arrays and
converted back through saturate(), so results always stay in [0, 255].
"""

from __future__ import annotations

import math
import numbers

import numpy as np

from bitmap.errors import ParameterError
from bitmap.grid import PixelGrid, saturate
from config import (
    CLARENDON_BRIGHT_THRESHOLD,
    CLARENDON_DARK_THRESHOLD,
    HIGH_CONTRAST_THRESHOLD,
    PALETTE_BLACK_SUM,
    PALETTE_WHITE_SUM,
)


def _channels(grid: PixelGrid) -> np.ndarray:
    """Wide signed copy of the grid's channels for arithmetic."""
    if not isinstance(grid, PixelGrid):
        raise TypeError(f"Expected PixelGrid, got {type(grid).__name__}")
    return grid.pixels.astype(np.int64)


def _channel_average(px: np.ndarray) -> np.ndarray:
    """Floor average of the three channels, shape (height, width, 1)."""
    return px.sum(axis=2, keepdims=True) // 3


def validate_unit_scale(scale: float) -> float:
    """Check that a tone scale factor is a number within [0, 1].

    Raises:
        ParameterError: If ``scale`` is not a real number in [0, 1].
    """
    if isinstance(scale, bool) or not isinstance(scale, numbers.Real):
        raise ParameterError(f"Scale factor must be a number, got {scale!r}")
    if math.isnan(scale) or not 0.0 <= scale <= 1.0:
        raise ParameterError(f"Scale factor must be between 0 and 1, got {scale}")
    return float(scale)


def validate_whole_number(value: int, name: str) -> int:
    """Check that a parameter is an integer (numpy integers included).

    Raises:
        ParameterError: If ``value`` is a bool or not an integer.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ParameterError(f"{name} must be a whole number, got {value!r}")
    return int(value)


def validate_positive_int(value: int, name: str) -> int:
    """Check that an integer parameter is >= 1.

    Raises:
        ParameterError: If ``value`` is not an integer or is not positive.
    """
    value = validate_whole_number(value, name)
    if value <= 0:
        raise ParameterError(f"{name} must be a positive integer, got {value}")
    return int(value)


def _lighten_channels(px: np.ndarray, scale: float) -> np.ndarray:
    return 255 - (255 - px) * scale


def _darken_channels(px: np.ndarray, scale: float) -> np.ndarray:
    return px * scale


def vignette(grid: PixelGrid) -> PixelGrid:
    """Darken pixels in proportion to their distance from the center.

    Each channel is scaled by ``(height - distance) / height``, where the
    distance is measured from (height // 2, width // 2).
    """
    px = _channels(grid)
    height, width = grid.shape
    rows = np.arange(height).reshape(-1, 1)
    cols = np.arange(width).reshape(1, -1)
    distance = np.sqrt((cols - width // 2) ** 2 + (rows - height // 2) ** 2)
    factor = (height - distance) / height
    return PixelGrid(saturate(px * factor[:, :, np.newaxis]))


def clarendon(grid: PixelGrid, scale: float) -> PixelGrid:
    """Push light pixels lighter and dark pixels darker.

    Pixels whose channel average is at least 170 are lightened with
    ``255 - (255 - c) * scale``; pixels below 90 are darkened with
    ``c * scale``; mid tones are kept.
    """
    scale = validate_unit_scale(scale)
    px = _channels(grid)
    average = _channel_average(px)
    result = np.where(
        average >= CLARENDON_BRIGHT_THRESHOLD,
        _lighten_channels(px, scale),
        np.where(average < CLARENDON_DARK_THRESHOLD, _darken_channels(px, scale), px),
    )
    return PixelGrid(saturate(result))


def grayscale(grid: PixelGrid) -> PixelGrid:
    """Set every channel to the floor average of the pixel's channels."""
    px = _channels(grid)
    average = _channel_average(px)
    return PixelGrid(saturate(np.repeat(average, 3, axis=2)))


def high_contrast(grid: PixelGrid) -> PixelGrid:
    """Map each pixel to pure white or pure black by its channel average."""
    px = _channels(grid)
    average = _channel_average(px)
    result = np.where(average >= HIGH_CONTRAST_THRESHOLD, 255, 0)
    return PixelGrid(saturate(np.repeat(result, 3, axis=2)))


def lighten(grid: PixelGrid, scale: float) -> PixelGrid:
    """Lighten every channel with ``255 - (255 - c) * scale``."""
    scale = validate_unit_scale(scale)
    return PixelGrid(saturate(_lighten_channels(_channels(grid), scale)))


def darken(grid: PixelGrid, scale: float) -> PixelGrid:
    """Darken every channel with ``c * scale``."""
    scale = validate_unit_scale(scale)
    return PixelGrid(saturate(_darken_channels(_channels(grid), scale)))


def reduce_palette(grid: PixelGrid) -> PixelGrid:
    """Reduce the image to black, white, red, green and blue.

    Rules, first match wins:
    - channel sum >= 550: white
    - channel sum <= 150: black
    - red is the largest channel: red
    - green is the largest channel: green
    - otherwise: blue
    """
    px = _channels(grid)
    red, green, blue = px[:, :, 0], px[:, :, 1], px[:, :, 2]
    total = px.sum(axis=2)
    largest = px.max(axis=2)

    conditions = [
        total >= PALETTE_WHITE_SUM,
        total <= PALETTE_BLACK_SUM,
        largest == red,
        largest == green,
    ]
    choices = [
        np.array([255, 255, 255]),
        np.array([0, 0, 0]),
        np.array([255, 0, 0]),
        np.array([0, 255, 0]),
    ]
    result = np.select(
        [c[:, :, np.newaxis] for c in conditions],
        choices,
        default=np.array([0, 0, 255]),
    )
    return PixelGrid(saturate(result))


def rotate_90(grid: PixelGrid) -> PixelGrid:
    """Rotate a quarter turn clockwise.

    The pixel at (row, col) moves to (col, height - 1 - row), so width and
    height swap.
    """
    return PixelGrid(np.rot90(_channels(grid), k=-1))


def rotate(grid: PixelGrid, degrees: int) -> PixelGrid:
    """Rotate clockwise by a multiple of 90 degrees.

    The angle is reduced modulo 360; 0 returns an unchanged copy and 90, 180
    and 270 apply rotate_90() one, two or three times. Negative angles rotate
    counter-clockwise.

    Raises:
        ParameterError: If ``degrees`` is not an integer multiple of 90.
    """
    if isinstance(degrees, bool) or not isinstance(degrees, numbers.Integral):
        raise ParameterError(f"Rotation angle must be a whole number, got {degrees!r}")
    if degrees % 90 != 0:
        raise ParameterError(
            f"Rotation angle must be a multiple of 90 degrees, got {degrees}"
        )
    result = grid.copy()
    for _ in range((int(degrees) % 360) // 90):
        result = rotate_90(result)
    return result


def rotate_turns(grid: PixelGrid, turns: int) -> PixelGrid:
    """Rotate clockwise by ``turns`` quarter turns."""
    return rotate(grid, validate_whole_number(turns, "Number of turns") * 90)


def enlarge(grid: PixelGrid, xscale: int, yscale: int) -> PixelGrid:
    """Nearest-neighbor upscale by whole-number factors.

    Output pixel (r, c) copies source pixel (r // yscale, c // xscale), so
    each source pixel becomes a yscale x xscale block.

    Raises:
        ParameterError: If either factor is not a positive integer.
    """
    xscale = validate_positive_int(xscale, "xscale")
    yscale = validate_positive_int(yscale, "yscale")
    px = _channels(grid)
    return PixelGrid(np.repeat(np.repeat(px, yscale, axis=0), xscale, axis=1))
