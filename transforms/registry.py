"""
Table of the available transformations.

Operations are looked up by name or by their numeric menu code; adding a
transformation means adding one Operation entry here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from bitmap.errors import ParameterError

from .config import TransformParams
from .steps import (
    ClarendonStep,
    DarkenStep,
    EnlargeStep,
    GrayscaleStep,
    HighContrastStep,
    LightenStep,
    PaletteStep,
    Rotate90Step,
    RotateStep,
    TransformStep,
    VignetteStep,
)


@dataclass(frozen=True)
class Operation:
    """One entry in the operations table.

    Attributes:
        code: Numeric menu code (1-10).
        name: Name used on the command line and in output file labels.
        summary: One-line description.
        parameters: Names of the TransformParams fields the operation reads.
        factory: Builds the step from a TransformParams.
    """

    code: int
    name: str
    summary: str
    parameters: tuple[str, ...]
    factory: Callable[[TransformParams], TransformStep]

    def build(self, params: TransformParams) -> TransformStep:
        return self.factory(params)


OPERATIONS: tuple[Operation, ...] = (
    Operation(1, "vignette", "Darken toward the edges", (), lambda p: VignetteStep()),
    Operation(
        2,
        "clarendon",
        "Lighten light pixels and darken dark pixels",
        ("scale",),
        lambda p: ClarendonStep(scale=p.require_scale()),
    ),
    Operation(3, "grayscale", "Average the channels", (), lambda p: GrayscaleStep()),
    Operation(4, "rotate90", "Rotate 90 degrees clockwise", (), lambda p: Rotate90Step()),
    Operation(
        5,
        "rotate",
        "Rotate by multiples of 90 degrees",
        ("turns", "degrees"),
        lambda p: RotateStep(degrees=p.rotation_degrees),
    ),
    Operation(
        6,
        "enlarge",
        "Nearest-neighbor upscale",
        ("xscale", "yscale"),
        lambda p: EnlargeStep(xscale=p.xscale, yscale=p.yscale),
    ),
    Operation(7, "high-contrast", "Black and white threshold", (), lambda p: HighContrastStep()),
    Operation(
        8,
        "lighten",
        "Lighten every pixel",
        ("scale",),
        lambda p: LightenStep(scale=p.require_scale()),
    ),
    Operation(
        9,
        "darken",
        "Darken every pixel",
        ("scale",),
        lambda p: DarkenStep(scale=p.require_scale()),
    ),
    Operation(
        10,
        "palette",
        "Reduce to black, white, red, green and blue",
        (),
        lambda p: PaletteStep(),
    ),
)

_BY_NAME = {op.name: op for op in OPERATIONS}
_BY_CODE = {op.code: op for op in OPERATIONS}


def operation_names() -> list[str]:
    return [op.name for op in OPERATIONS]


def get_operation(key: str | int) -> Operation:
    """Look up an operation by name or menu code.

    Args:
        key: Operation name ("grayscale"), menu code (3) or the code as a
             string ("3").

    Raises:
        ParameterError: If no operation matches.
    """
    if isinstance(key, int) and not isinstance(key, bool):
        op = _BY_CODE.get(key)
    else:
        text = str(key).strip().lower()
        if text.isascii() and text.isdigit():
            op = _BY_CODE.get(int(text))
        else:
            op = _BY_NAME.get(text)
    if op is None:
        raise ParameterError(
            f"Unknown operation {key!r}; choose one of: {', '.join(operation_names())}"
        )
    return op


def build_step(key: str | int, params: TransformParams | None = None) -> TransformStep:
    """Build the step for an operation name or code."""
    if params is None:
        params = TransformParams()
    return get_operation(key).build(params)


def build_steps(
    keys: list[str | int],
    params: TransformParams | None = None,
) -> list[TransformStep]:
    """Build steps for several operations sharing one set of parameters."""
    if params is None:
        params = TransformParams()
    params.validate()
    return [build_step(key, params) for key in keys]
