"""Tests for the bitmap encoder and decode/encode round trips."""

import numpy as np
import pytest
from PIL import Image

from bitmap import (
    BitmapLayout,
    GridError,
    PixelGrid,
    StorageError,
    decode_bytes,
    encode_grid,
    read_bitmap,
    write_bitmap,
)


def _u32(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 4], "little")


class TestEncodeLayout:
    def test_single_red_pixel(self):
        data = encode_grid(PixelGrid.from_rows([[(255, 0, 0)]]))
        assert len(data) == 58
        assert data[0:2] == b"BM"
        assert _u32(data, 2) == 58
        assert _u32(data, 10) == 54
        assert _u32(data, 14) == 40
        assert _u32(data, 18) == 1
        assert _u32(data, 22) == 1
        assert int.from_bytes(data[26:28], "little") == 1
        assert int.from_bytes(data[28:30], "little") == 24
        assert _u32(data, 30) == 0
        assert _u32(data, 34) == 4
        assert _u32(data, 38) == 2835
        assert _u32(data, 42) == 2835
        assert _u32(data, 46) == 0
        assert _u32(data, 50) == 0
        assert data[54:58] == bytes([0, 0, 255, 0])

    def test_rows_written_bottom_up(self):
        grid = PixelGrid.from_rows([[(255, 0, 0)], [(0, 0, 255)]])
        data = encode_grid(grid)
        # Bottom row (blue) first, then top row (red), each padded to 4 bytes.
        assert data[54:58] == bytes([255, 0, 0, 0])
        assert data[58:62] == bytes([0, 0, 255, 0])

    def test_two_by_two_file_size(self, two_by_two_grid):
        data = encode_grid(two_by_two_grid)
        assert len(data) == 70
        assert _u32(data, 2) == 70
        assert _u32(data, 34) == 16

    @pytest.mark.parametrize("width", [1, 2, 3, 4, 5, 6, 7])
    def test_padding_is_zero_and_aligned(self, width):
        height = 3
        grid = PixelGrid.filled(height, width, (255, 255, 255))
        data = encode_grid(grid)
        layout = BitmapLayout.for_dimensions(width, height)

        assert layout.row_stride % 4 == 0
        assert len(data) == layout.file_size
        for row in range(height):
            start = 54 + row * layout.row_stride
            pixels = data[start:start + layout.scanline_bytes]
            padding = data[start + layout.scanline_bytes:start + layout.row_stride]
            assert pixels == b"\xff" * layout.scanline_bytes
            assert padding == b"\x00" * layout.padding

    def test_length_matches_declared_size(self, random_grid):
        for height, width in [(1, 1), (3, 5), (7, 2), (4, 4)]:
            data = encode_grid(random_grid(height, width))
            assert len(data) == _u32(data, 2)

    def test_rejects_non_grid(self):
        with pytest.raises(GridError, match="Expected PixelGrid"):
            encode_grid([[(0, 0, 0)]])


class TestRoundTrip:
    @pytest.mark.parametrize("shape", [(1, 1), (2, 3), (5, 7), (16, 9)])
    def test_decode_encode_identity(self, random_grid, shape):
        grid = random_grid(*shape)
        assert decode_bytes(encode_grid(grid)) == grid

    def test_file_round_trip(self, make_bitmap, write_file, tmp_path, two_by_two_rows):
        source = write_file(make_bitmap(two_by_two_rows))
        original = read_bitmap(source)
        target = tmp_path / "copy.bmp"
        write_bitmap(target, original)
        assert read_bitmap(target) == original
        assert target.read_bytes() == source.read_bytes()


class TestWriteBitmap:
    def test_returns_bytes_written(self, two_by_two_grid, tmp_path):
        path = tmp_path / "out.bmp"
        assert write_bitmap(path, two_by_two_grid) == 70
        assert path.stat().st_size == 70

    def test_unwritable_destination_raises_storage_error(self, two_by_two_grid, tmp_path):
        with pytest.raises(StorageError, match="Cannot write bitmap"):
            write_bitmap(tmp_path / "missing_dir" / "out.bmp", two_by_two_grid)


class TestPillowInterop:
    """Cross-check against an independent BMP implementation."""

    def test_pillow_reads_encoded_file(self, random_grid, tmp_path):
        grid = random_grid(5, 7, seed=3)
        path = tmp_path / "ours.bmp"
        write_bitmap(path, grid)
        with Image.open(path) as img:
            assert img.format == "BMP"
            assert img.size == (7, 5)
            pixels = np.array(img.convert("RGB"))
        assert np.array_equal(pixels, grid.pixels)

    def test_decodes_pillow_written_file(self, tmp_path):
        rng = np.random.default_rng(11)
        array = rng.integers(0, 256, (6, 5, 3), dtype=np.uint8)
        path = tmp_path / "pillow.bmp"
        Image.fromarray(array).save(path, format="BMP")
        assert np.array_equal(read_bitmap(path).pixels, array)
