"""
Bitmap encoder: PixelGrid -> 24-bit uncompressed bottom-up file.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from .errors import GridError, StorageError
from .grid import PixelGrid
from .headers import BitmapLayout

logger = logging.getLogger(__name__)


def encode_grid(grid: PixelGrid) -> bytes:
    """Serialize a grid to the bytes of a complete bitmap file.

    Writes the container header, the format header, then the pixel rows from
    the bottom grid row to the top one, each pixel as blue, green, red and
    each row followed by zero padding up to a 4-byte boundary.

    Args:
        grid: Grid to encode.

    Returns:
        File contents; the length always equals the header's file size.

    Raises:
        GridError: If ``grid`` is not a PixelGrid.
    """
    if not isinstance(grid, PixelGrid):
        raise GridError(f"Expected PixelGrid, got {type(grid).__name__}")

    layout = BitmapLayout.for_dimensions(grid.width, grid.height)

    rows = np.zeros((layout.height, layout.row_stride), dtype=np.uint8)
    bgr_bottom_up = grid.pixels[::-1, :, ::-1]
    rows[:, : layout.scanline_bytes] = bgr_bottom_up.reshape(
        layout.height, layout.scanline_bytes
    )

    return layout.file_header().pack() + layout.info_header().pack() + rows.tobytes()


def write_bitmap(path: str | Path, grid: PixelGrid) -> int:
    """Encode ``grid`` and write it to ``path``.

    Returns:
        Number of bytes written.

    Raises:
        StorageError: If the destination cannot be opened or written.
        GridError: See encode_grid().
    """
    path = Path(path)
    data = encode_grid(grid)
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise StorageError(f"Cannot write bitmap {path}: {exc}") from exc
    logger.debug("Wrote %d bytes (%dx%d) to %s", len(data), grid.width, grid.height, path)
    return len(data)
