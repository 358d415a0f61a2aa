"""Tests for the PixelGrid data model and saturate()."""

import numpy as np
import pytest

from bitmap import GridError, Pixel, PixelGrid, saturate


class TestSaturate:
    def test_clamps_both_ends(self):
        result = saturate(np.array([-20, 0, 128, 255, 400]))
        assert result.tolist() == [0, 0, 128, 255, 255]
        assert result.dtype == np.uint8

    def test_truncates_floats_toward_zero(self):
        result = saturate(np.array([12.9, 227.5, -0.7]))
        assert result.tolist() == [12, 227, 0]


class TestPixelGrid:
    def test_from_rows_dimensions(self, two_by_two_grid):
        assert two_by_two_grid.height == 2
        assert two_by_two_grid.width == 2
        assert two_by_two_grid.shape == (2, 2)

    def test_pixel_indexing_is_row_then_col(self, two_by_two_grid):
        assert two_by_two_grid.pixel(0, 1) == Pixel(0, 255, 0)
        assert two_by_two_grid.pixel(1, 0) == Pixel(0, 0, 255)

    @pytest.mark.parametrize("row, col", [(2, 0), (0, 2), (-1, 0), (0, -1)])
    def test_pixel_out_of_bounds_raises(self, two_by_two_grid, row, col):
        with pytest.raises(IndexError):
            two_by_two_grid.pixel(row, col)

    def test_to_rows_round_trip(self, two_by_two_rows):
        grid = PixelGrid.from_rows(two_by_two_rows)
        assert grid.to_rows() == [[Pixel(*p) for p in row] for row in two_by_two_rows]

    def test_jagged_rows_rejected(self):
        with pytest.raises(GridError, match="Row 1"):
            PixelGrid.from_rows([[(0, 0, 0), (0, 0, 0)], [(0, 0, 0)]])

    def test_empty_rows_rejected(self):
        with pytest.raises(GridError):
            PixelGrid.from_rows([])

    def test_empty_array_rejected(self):
        with pytest.raises(GridError, match="empty"):
            PixelGrid(np.zeros((0, 3, 3), dtype=np.uint8))

    def test_wrong_channel_count_rejected(self):
        with pytest.raises(GridError, match="shape"):
            PixelGrid(np.zeros((2, 2, 4), dtype=np.uint8))

    def test_out_of_range_values_rejected(self):
        with pytest.raises(GridError, match=r"\[0, 255\]"):
            PixelGrid(np.full((1, 1, 3), 256, dtype=np.int64))

    def test_non_array_rejected(self):
        with pytest.raises(TypeError, match="Expected numpy.ndarray"):
            PixelGrid([[[0, 0, 0]]])

    def test_copies_input_array(self):
        array = np.zeros((2, 2, 3), dtype=np.uint8)
        grid = PixelGrid(array)
        array[0, 0] = 255
        assert grid.pixel(0, 0) == Pixel(0, 0, 0)

    def test_pixels_are_read_only(self, two_by_two_grid):
        with pytest.raises(ValueError):
            two_by_two_grid.pixels[0, 0, 0] = 1

    def test_filled(self):
        grid = PixelGrid.filled(3, 4, (10, 20, 30))
        assert grid.shape == (3, 4)
        assert grid.pixel(2, 3) == Pixel(10, 20, 30)

    def test_filled_rejects_zero_size(self):
        with pytest.raises(GridError):
            PixelGrid.filled(0, 4)

    def test_equality_by_content(self, two_by_two_rows):
        assert PixelGrid.from_rows(two_by_two_rows) == PixelGrid.from_rows(two_by_two_rows)
        assert PixelGrid.filled(2, 2) != PixelGrid.from_rows(two_by_two_rows)
        assert PixelGrid.filled(2, 2) != PixelGrid.filled(2, 3)
