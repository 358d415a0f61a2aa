"""Output path construction for edited bitmaps."""

from __future__ import annotations

import re
from pathlib import Path

from bitmap.errors import ParameterError
from config import OUTPUT_EXTENSION, OUTPUT_LABEL_SEPARATOR

_UNSAFE_LABEL_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def clean_label(label: str) -> str:
    """Normalize a user label for use in a file name.

    Runs of characters other than letters, digits, '.', '_' and '-' collapse
    to a single '-'.

    Raises:
        ParameterError: If nothing usable remains.
    """
    cleaned = _UNSAFE_LABEL_CHARS.sub("-", label.strip()).strip("-.")
    if not cleaned:
        raise ParameterError(f"Output label {label!r} has no usable characters")
    return cleaned


def derive_output_path(source: str | Path, label: str) -> Path:
    """Place the output beside the source as ``<stem>_<label>.bmp``.

    Examples:
        >>> derive_output_path("photos/cat.bmp", "gray")
        PosixPath('photos/cat_gray.bmp')
    """
    source = Path(source)
    name = f"{source.stem}{OUTPUT_LABEL_SEPARATOR}{clean_label(label)}{OUTPUT_EXTENSION}"
    return source.with_name(name)


def default_label(operation_names: list[str]) -> str:
    """Label built from the applied operations, e.g. ``grayscale-rotate``."""
    return "-".join(operation_names)
