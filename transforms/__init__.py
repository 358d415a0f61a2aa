"""
Stateless grid -> grid transformations.

Key components:
- operations: one pure function per transformation
- config: TransformParams for parameterized transformations
- steps: TransformStep classes and the Pipeline that chains them
- registry: the operations table, looked up by name or menu code

Two APIs are available:
1. Function-based: grayscale(grid), rotate(grid, 180), ...
2. Class-based: Pipeline(steps=[...]).run(grid) -> PipelineResults
"""

from .config import TransformParams
from .operations import (
    clarendon,
    darken,
    enlarge,
    grayscale,
    high_contrast,
    lighten,
    reduce_palette,
    rotate,
    rotate_90,
    rotate_turns,
    vignette,
)
from .registry import OPERATIONS, Operation, build_step, build_steps, get_operation, operation_names
from .steps import (
    ClarendonStep,
    DarkenStep,
    EnlargeStep,
    GrayscaleStep,
    HighContrastStep,
    LightenStep,
    PaletteStep,
    Pipeline,
    PipelineResults,
    Rotate90Step,
    RotateStep,
    StepResult,
    TransformStep,
    VignetteStep,
)

__all__ = [
    # Config
    "TransformParams",
    # Function API
    "vignette",
    "clarendon",
    "grayscale",
    "high_contrast",
    "lighten",
    "darken",
    "reduce_palette",
    "rotate_90",
    "rotate",
    "rotate_turns",
    "enlarge",
    # Class-based API
    "TransformStep",
    "VignetteStep",
    "ClarendonStep",
    "GrayscaleStep",
    "Rotate90Step",
    "RotateStep",
    "EnlargeStep",
    "HighContrastStep",
    "LightenStep",
    "DarkenStep",
    "PaletteStep",
    "Pipeline",
    "PipelineResults",
    "StepResult",
    # Registry
    "Operation",
    "OPERATIONS",
    "get_operation",
    "operation_names",
    "build_step",
    "build_steps",
]
