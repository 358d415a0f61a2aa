"""Exception types raised by the bitmap codec and the transformations."""

from __future__ import annotations


class BitmapError(Exception):
    """Base class for every error raised by this project."""


class StorageError(BitmapError, OSError):
    """A source file could not be read or a destination could not be written."""


class HeaderError(BitmapError, ValueError):
    """Header fields are truncated or describe an impossible image."""


class UnsupportedFormatError(HeaderError):
    """Valid header describing a bitmap variant we do not decode."""


class StructuralMismatchError(BitmapError, ValueError):
    """Declared file size disagrees with the header-derived layout."""


class GridError(BitmapError, ValueError):
    """A pixel grid is empty, jagged or holds out-of-range values."""


class ParameterError(BitmapError, ValueError):
    """A transformation received an invalid parameter."""
