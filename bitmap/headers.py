"""
Fixed-layout header records for the bitmap container.

A 24-bit bitmap file starts with two records:

    offset  size  record       field
    0       2     FileHeader   signature ("BM")
    2       4     FileHeader   file_size
    6       2     FileHeader   reserved1
    8       2     FileHeader   reserved2
    10      4     FileHeader   pixel_offset
    14      4     InfoHeader   header_size (40)
    18      4     InfoHeader   width
    22      4     InfoHeader   height (positive = bottom-up rows)
    26      2     InfoHeader   planes (1)
    28      2     InfoHeader   bits_per_pixel
    30      4     InfoHeader   compression (0 = none)
    34      4     InfoHeader   image_size (padded pixel array bytes)
    38      4     InfoHeader   x_pixels_per_meter
    42      4     InfoHeader   y_pixels_per_meter
    46      4     InfoHeader   colors_used
    50      4     InfoHeader   colors_important

All integers are little-endian. Each record has exactly one pack and one
unpack routine so offsets live in a single struct format string.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from config import (
    BITS_PER_PIXEL,
    COLOR_PLANES,
    COMPRESSION_NONE,
    FILE_HEADER_SIZE,
    INFO_HEADER_SIZE,
    PIXEL_ARRAY_OFFSET,
    PIXELS_PER_METER,
    ROW_ALIGNMENT,
    SIGNATURE,
)

from .errors import HeaderError

_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")


def row_padding(scanline_bytes: int) -> int:
    """Number of zero bytes that round a scanline up to a 4-byte boundary.

    Always in the range 0-3; aligned scanlines need no padding.
    """
    return (ROW_ALIGNMENT - scanline_bytes % ROW_ALIGNMENT) % ROW_ALIGNMENT


@dataclass(frozen=True)
class FileHeader:
    """The 14-byte container header."""

    file_size: int
    pixel_offset: int = PIXEL_ARRAY_OFFSET
    signature: bytes = SIGNATURE
    reserved1: int = 0
    reserved2: int = 0

    def pack(self) -> bytes:
        return _FILE_HEADER.pack(
            self.signature,
            self.file_size,
            self.reserved1,
            self.reserved2,
            self.pixel_offset,
        )

    @classmethod
    def unpack(cls, data: bytes) -> FileHeader:
        """Decode the container header from the first 14 bytes of ``data``.

        Raises:
            HeaderError: If fewer than 14 bytes are available.
        """
        if len(data) < FILE_HEADER_SIZE:
            raise HeaderError(
                f"File header needs {FILE_HEADER_SIZE} bytes, got {len(data)}"
            )
        signature, file_size, reserved1, reserved2, pixel_offset = (
            _FILE_HEADER.unpack_from(data, 0)
        )
        return cls(
            file_size=file_size,
            pixel_offset=pixel_offset,
            signature=signature,
            reserved1=reserved1,
            reserved2=reserved2,
        )


@dataclass(frozen=True)
class InfoHeader:
    """The 40-byte BITMAPINFOHEADER.

    Larger header variants (V4, V5) share this prefix, so decoding only the
    first 40 bytes after the container header is enough for every variant.
    """

    width: int
    height: int
    image_size: int = 0
    bits_per_pixel: int = BITS_PER_PIXEL
    compression: int = COMPRESSION_NONE
    header_size: int = INFO_HEADER_SIZE
    planes: int = COLOR_PLANES
    x_pixels_per_meter: int = PIXELS_PER_METER
    y_pixels_per_meter: int = PIXELS_PER_METER
    colors_used: int = 0
    colors_important: int = 0

    def pack(self) -> bytes:
        return _INFO_HEADER.pack(
            self.header_size,
            self.width,
            self.height,
            self.planes,
            self.bits_per_pixel,
            self.compression,
            self.image_size,
            self.x_pixels_per_meter,
            self.y_pixels_per_meter,
            self.colors_used,
            self.colors_important,
        )

    @classmethod
    def unpack(cls, data: bytes, offset: int = FILE_HEADER_SIZE) -> InfoHeader:
        """Decode the format header starting at ``offset``.

        Raises:
            HeaderError: If the data ends before the 40-byte record does.
        """
        if len(data) < offset + INFO_HEADER_SIZE:
            raise HeaderError(
                f"Info header needs {offset + INFO_HEADER_SIZE} bytes, got {len(data)}"
            )
        (
            header_size,
            width,
            height,
            planes,
            bits_per_pixel,
            compression,
            image_size,
            x_ppm,
            y_ppm,
            colors_used,
            colors_important,
        ) = _INFO_HEADER.unpack_from(data, offset)
        return cls(
            width=width,
            height=height,
            image_size=image_size,
            bits_per_pixel=bits_per_pixel,
            compression=compression,
            header_size=header_size,
            planes=planes,
            x_pixels_per_meter=x_ppm,
            y_pixels_per_meter=y_ppm,
            colors_used=colors_used,
            colors_important=colors_important,
        )


@dataclass(frozen=True)
class BitmapLayout:
    """Container metadata derived from the image dimensions.

    Recomputed for every encode and every decode; never cached across files.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        bits_per_pixel: Bits per pixel (24 on encode).
        pixel_offset: Byte position where the pixel array starts.
    """

    width: int
    height: int
    bits_per_pixel: int = BITS_PER_PIXEL
    pixel_offset: int = PIXEL_ARRAY_OFFSET

    @classmethod
    def for_dimensions(cls, width: int, height: int) -> BitmapLayout:
        """Layout of the canonical 24-bit file the encoder writes."""
        return cls(width=width, height=height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def scanline_bytes(self) -> int:
        """Pixel bytes in one row, excluding padding."""
        return self.width * self.bytes_per_pixel

    @property
    def padding(self) -> int:
        return row_padding(self.scanline_bytes)

    @property
    def row_stride(self) -> int:
        """Bytes in one row including padding; always a multiple of 4."""
        return self.scanline_bytes + self.padding

    @property
    def array_bytes(self) -> int:
        return self.row_stride * self.height

    @property
    def file_size(self) -> int:
        return self.pixel_offset + self.array_bytes

    def file_header(self) -> FileHeader:
        return FileHeader(file_size=self.file_size, pixel_offset=self.pixel_offset)

    def info_header(self) -> InfoHeader:
        return InfoHeader(
            width=self.width,
            height=self.height,
            image_size=self.array_bytes,
            bits_per_pixel=self.bits_per_pixel,
        )
