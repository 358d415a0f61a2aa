"""Pytest configuration and shared bitmap fixtures.

Bitmap bytes are assembled here field by field with struct, independently of
the encoder under test, so decoder tests do not depend on encoder behavior.
"""

from __future__ import annotations

import struct
from pathlib import Path

import numpy as np
import pytest

from bitmap import PixelGrid

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)


def build_bitmap(
    rows,
    bits_per_pixel: int = 24,
    pixel_offset: int = 54,
    file_size: int | None = None,
    width: int | None = None,
    height: int | None = None,
    compression: int = 0,
    signature: bytes = b"BM",
    header_size: int = 40,
    trailing: bytes = b"",
) -> bytes:
    """Assemble a bottom-up bitmap from rows of (r, g, b), top row first.

    32-bit pixels get an 0xFF fourth byte. Header fields can be overridden to
    produce inconsistent files.
    """
    bytes_per_pixel = bits_per_pixel // 8
    scanline = len(rows[0]) * bytes_per_pixel
    padding = (4 - scanline % 4) % 4

    body = bytearray()
    for row in reversed(rows):
        for r, g, b in row:
            body += bytes([b, g, r])
            body += b"\xff" * (bytes_per_pixel - 3)
        body += b"\x00" * padding

    if file_size is None:
        file_size = pixel_offset + len(body)
    file_header = struct.pack("<2sIHHI", signature, file_size, 0, 0, pixel_offset)
    info_header = struct.pack(
        "<IiiHHIIiiII",
        header_size,
        len(rows[0]) if width is None else width,
        len(rows) if height is None else height,
        1,
        bits_per_pixel,
        compression,
        len(body),
        2835,
        2835,
        0,
        0,
    )
    gap = b"\x00" * (pixel_offset - 54)
    return file_header + info_header + gap + bytes(body) + trailing


@pytest.fixture
def make_bitmap():
    """Factory fixture: build_bitmap(rows, **overrides) -> bytes."""
    return build_bitmap


@pytest.fixture
def write_file(tmp_path: Path):
    """Factory fixture: write bytes to tmp_path/name and return the path."""

    def _write(data: bytes, name: str = "image.bmp") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def two_by_two_rows():
    """Row 0: red, green. Row 1: blue, white."""
    return [[RED, GREEN], [BLUE, WHITE]]


@pytest.fixture
def two_by_two_grid(two_by_two_rows) -> PixelGrid:
    return PixelGrid.from_rows(two_by_two_rows)


@pytest.fixture
def random_grid():
    """Factory fixture: random grid of the given size, seeded."""

    def _make(height: int, width: int, seed: int = 0) -> PixelGrid:
        rng = np.random.default_rng(seed)
        return PixelGrid(rng.integers(0, 256, (height, width, 3), dtype=np.uint8))

    return _make
