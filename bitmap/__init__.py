"""
Bitmap codec for uncompressed 24-bit bottom-up BMP files.

Key components:
- grid: PixelGrid, the owned RGB pixel buffer, and the saturate() helper
- headers: FileHeader / InfoHeader records and the derived BitmapLayout
- decoder: read_bitmap() and decode_bytes() (file -> grid)
- encoder: write_bitmap() and encode_grid() (grid -> file)
- errors: exception hierarchy rooted at BitmapError
"""

from .decoder import BitmapInfo, decode_bytes, parse_headers, read_bitmap, read_header
from .encoder import encode_grid, write_bitmap
from .errors import (
    BitmapError,
    GridError,
    HeaderError,
    ParameterError,
    StorageError,
    StructuralMismatchError,
    UnsupportedFormatError,
)
from .grid import BLACK, BLUE, GREEN, RED, WHITE, Pixel, PixelGrid, saturate
from .headers import BitmapLayout, FileHeader, InfoHeader, row_padding

__all__ = [
    # Data model
    "Pixel",
    "PixelGrid",
    "saturate",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    # Headers
    "FileHeader",
    "InfoHeader",
    "BitmapLayout",
    "row_padding",
    # Codec
    "BitmapInfo",
    "parse_headers",
    "decode_bytes",
    "read_bitmap",
    "read_header",
    "encode_grid",
    "write_bitmap",
    # Errors
    "BitmapError",
    "StorageError",
    "HeaderError",
    "UnsupportedFormatError",
    "StructuralMismatchError",
    "GridError",
    "ParameterError",
]
