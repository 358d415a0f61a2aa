"""
Parameters for the transformation steps.

Every parameterized transformation reads its inputs from a TransformParams
instance, so a run can be reproduced from a single immutable object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bitmap.errors import ParameterError

from .operations import validate_positive_int, validate_unit_scale, validate_whole_number


@dataclass(frozen=True)
class TransformParams:
    """Numeric inputs for the transformations that take parameters.

    Attributes:
        scale: Tone scale factor in [0, 1] for clarendon, lighten and darken.
        turns: Number of clockwise quarter turns for rotate.
        degrees: Clockwise rotation angle for rotate; overrides ``turns``
                 when set. Must be a multiple of 90 when applied.
        xscale: Horizontal enlargement factor (>= 1).
        yscale: Vertical enlargement factor (>= 1).
    """

    scale: Optional[float] = None
    turns: int = 1
    degrees: Optional[int] = None
    xscale: int = 1
    yscale: int = 1

    @property
    def rotation_degrees(self) -> int:
        """Clockwise angle requested by either ``degrees`` or ``turns``."""
        if self.degrees is not None:
            return self.degrees
        return self.turns * 90

    def require_scale(self) -> float:
        """Return the scale factor, failing if none was supplied.

        Raises:
            ParameterError: If ``scale`` is unset or outside [0, 1].
        """
        if self.scale is None:
            raise ParameterError("This transformation requires a scale factor")
        return validate_unit_scale(self.scale)

    def validate(self) -> None:
        """Validate every parameter that has been supplied.

        The rotation angle is not checked here: a non-multiple of 90 is
        reported by the rotate step itself so the pipeline can pass the
        image through unchanged.

        Raises:
            ParameterError: If any parameter is invalid.
        """
        if self.scale is not None:
            validate_unit_scale(self.scale)
        validate_whole_number(self.turns, "turns")
        validate_positive_int(self.xscale, "xscale")
        validate_positive_int(self.yscale, "yscale")
