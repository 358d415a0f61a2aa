"""
Bitmap decoder: file bytes -> PixelGrid.

Only the canonical subformat is decoded: uncompressed, bottom-up rows,
24 bits per pixel (32-bit BI_RGB rows are accepted, the 4th byte of each
pixel is skipped). The single structural gate is that the declared file
size equals the header-derived layout; anything else that could cause
out-of-bounds reads is rejected with an explicit error first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from config import (
    COMPRESSION_NONE,
    FILE_HEADER_SIZE,
    INFO_HEADER_SIZE,
    SIGNATURE,
    SUPPORTED_BITS_PER_PIXEL,
)

from .errors import (
    HeaderError,
    StorageError,
    StructuralMismatchError,
    UnsupportedFormatError,
)
from .grid import CHANNELS, PixelGrid
from .headers import BitmapLayout, FileHeader, InfoHeader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BitmapInfo:
    """Decoded headers plus the layout derived from them."""

    file_header: FileHeader
    info_header: InfoHeader
    layout: BitmapLayout

    def summary(self) -> dict[str, object]:
        """Flat field -> value mapping for display."""
        return {
            "signature": self.file_header.signature.decode("latin-1"),
            "file_size": self.file_header.file_size,
            "pixel_offset": self.file_header.pixel_offset,
            "header_size": self.info_header.header_size,
            "width": self.info_header.width,
            "height": self.info_header.height,
            "planes": self.info_header.planes,
            "bits_per_pixel": self.info_header.bits_per_pixel,
            "compression": self.info_header.compression,
            "image_size": self.info_header.image_size,
            "x_pixels_per_meter": self.info_header.x_pixels_per_meter,
            "y_pixels_per_meter": self.info_header.y_pixels_per_meter,
            "scanline_bytes": self.layout.scanline_bytes,
            "padding": self.layout.padding,
        }


def parse_headers(data: bytes) -> BitmapInfo:
    """Decode and validate both header records.

    Args:
        data: The complete file contents (or at least the first 54 bytes
            when only inspecting headers).

    Returns:
        BitmapInfo with the decoded headers and the derived layout.

    Raises:
        HeaderError: If the headers are truncated, the info header is shorter
            than 40 bytes, the pixel offset points inside the headers, or the
            dimensions are not positive (top-down images have a negative
            height).
        UnsupportedFormatError: If the bit depth or compression is not one
            this decoder handles.
    """
    if len(data) < FILE_HEADER_SIZE + INFO_HEADER_SIZE:
        raise HeaderError(
            f"Bitmap needs at least {FILE_HEADER_SIZE + INFO_HEADER_SIZE} bytes "
            f"of headers, got {len(data)}"
        )

    file_header = FileHeader.unpack(data)
    info_header = InfoHeader.unpack(data)

    if file_header.signature != SIGNATURE:
        logger.warning(
            "Unexpected signature %r (expected %r), decoding anyway",
            file_header.signature,
            SIGNATURE,
        )

    if info_header.header_size < INFO_HEADER_SIZE:
        raise HeaderError(
            f"Info header size must be at least {INFO_HEADER_SIZE}, "
            f"got {info_header.header_size}"
        )
    headers_end = FILE_HEADER_SIZE + info_header.header_size
    if file_header.pixel_offset < headers_end:
        raise HeaderError(
            f"Pixel offset {file_header.pixel_offset} points inside the headers "
            f"(which end at byte {headers_end})"
        )
    if info_header.width <= 0:
        raise HeaderError(f"Width must be positive, got {info_header.width}")
    if info_header.height <= 0:
        raise HeaderError(
            f"Height must be positive (bottom-up rows), got {info_header.height}"
        )
    if info_header.bits_per_pixel not in SUPPORTED_BITS_PER_PIXEL:
        raise UnsupportedFormatError(
            f"Unsupported bits per pixel: {info_header.bits_per_pixel} "
            f"(supported: {', '.join(str(b) for b in SUPPORTED_BITS_PER_PIXEL)})"
        )
    if info_header.compression != COMPRESSION_NONE:
        raise UnsupportedFormatError(
            f"Unsupported compression method: {info_header.compression}"
        )

    layout = BitmapLayout(
        width=info_header.width,
        height=info_header.height,
        bits_per_pixel=info_header.bits_per_pixel,
        pixel_offset=file_header.pixel_offset,
    )
    return BitmapInfo(file_header=file_header, info_header=info_header, layout=layout)


def decode_bytes(data: bytes) -> PixelGrid:
    """Decode a complete bitmap file held in memory.

    Rows are stored bottom-to-top on disk, so the first row read becomes the
    last grid row. Each pixel is stored blue, green, red.

    Raises:
        HeaderError: See parse_headers().
        UnsupportedFormatError: See parse_headers().
        StructuralMismatchError: If the declared file size does not equal
            ``pixel_offset + (scanline + padding) * height``, or the data
            length does not equal the declared file size.
    """
    info = parse_headers(data)
    layout = info.layout
    declared = info.file_header.file_size

    if declared != layout.file_size:
        raise StructuralMismatchError(
            f"Declared file size {declared} does not match layout size "
            f"{layout.file_size} ({layout.pixel_offset} + "
            f"{layout.row_stride} * {layout.height})"
        )
    if len(data) != declared:
        raise StructuralMismatchError(
            f"File holds {len(data)} bytes but header declares {declared}"
        )

    logger.debug(
        "Decoding %dx%d bitmap, %d bpp, padding %d",
        layout.width,
        layout.height,
        layout.bits_per_pixel,
        layout.padding,
    )

    start = layout.pixel_offset
    rows = np.frombuffer(data, dtype=np.uint8, count=layout.array_bytes, offset=start)
    rows = rows.reshape(layout.height, layout.row_stride)
    pixels = rows[:, : layout.scanline_bytes].reshape(
        layout.height, layout.width, layout.bytes_per_pixel
    )
    # Keep blue, green, red; flip to red, green, blue; flip rows to top-down.
    rgb = pixels[:, :, :CHANNELS][:, :, ::-1][::-1]
    return PixelGrid(rgb)


def read_bitmap(path: str | Path) -> PixelGrid:
    """Read and decode a bitmap file.

    Raises:
        StorageError: If the file cannot be opened or read.
        HeaderError, UnsupportedFormatError, StructuralMismatchError:
            See decode_bytes().
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise StorageError(f"Cannot read bitmap {path}: {exc}") from exc
    return decode_bytes(data)


def read_header(path: str | Path) -> BitmapInfo:
    """Read only the headers of a bitmap file, without decoding pixels."""
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = f.read(FILE_HEADER_SIZE + INFO_HEADER_SIZE)
    except OSError as exc:
        raise StorageError(f"Cannot read bitmap {path}: {exc}") from exc
    return parse_headers(data)
