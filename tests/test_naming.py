"""Tests for output path construction."""

from pathlib import Path

import pytest

from bitmap import ParameterError
from naming import clean_label, default_label, derive_output_path


class TestDeriveOutputPath:
    def test_inserts_label_before_extension(self):
        assert derive_output_path("photos/cat.bmp", "gray") == Path("photos/cat_gray.bmp")

    def test_uses_last_dot_only(self):
        assert derive_output_path("my.cat.bmp", "v2") == Path("my.cat_v2.bmp")

    def test_source_without_extension(self):
        assert derive_output_path("images/cat", "gray") == Path("images/cat_gray.bmp")

    def test_always_bmp_extension(self):
        assert derive_output_path("cat.BMP", "x").suffix == ".bmp"


class TestCleanLabel:
    def test_unsafe_characters_collapse(self):
        assert clean_label("my new/image") == "my-new-image"

    def test_keeps_safe_characters(self):
        assert clean_label("v1.2_final") == "v1.2_final"

    @pytest.mark.parametrize("label", ["", "   ", "///"])
    def test_empty_label_rejected(self, label):
        with pytest.raises(ParameterError):
            clean_label(label)


def test_default_label_joins_operations():
    assert default_label(["grayscale", "rotate"]) == "grayscale-rotate"
