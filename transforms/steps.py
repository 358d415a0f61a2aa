"""
Transformation step classes with a common interface.

Each step is a frozen dataclass that implements the TransformStep interface.
Steps are pure: they take a grid and return a new grid without mutating the
input.

Usage:
    from transforms.steps import GrayscaleStep, RotateStep, Pipeline

    pipeline = Pipeline(steps=[
        GrayscaleStep(),
        RotateStep(degrees=180),
    ])
    result = pipeline.run(grid)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from bitmap.encoder import write_bitmap
from bitmap.errors import ParameterError, StorageError
from bitmap.grid import PixelGrid

from . import operations

logger = logging.getLogger(__name__)

STATUS_APPLIED = "applied"
STATUS_REJECTED = "rejected"


class TransformStep(ABC):
    """Base class for transformation steps.

    Steps must never mutate their input grid. A step that receives an invalid
    parameter raises ParameterError; the Pipeline turns that into a rejected
    step that passes its input through unchanged.
    """

    @abstractmethod
    def apply(self, grid: PixelGrid) -> PixelGrid:
        """Apply this step to a grid and return a new grid."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging and artifact file names."""
        pass

    def get_metadata(self) -> dict[str, Any]:
        """Return parameters worth recording alongside the result."""
        return {}


@dataclass(frozen=True)
class VignetteStep(TransformStep):
    """Darken the image toward its edges."""

    def apply(self, grid: PixelGrid) -> PixelGrid:
        return operations.vignette(grid)

    @property
    def name(self) -> str:
        return "vignette"


@dataclass(frozen=True)
class ClarendonStep(TransformStep):
    """Lighten light pixels and darken dark pixels by ``scale``."""

    scale: float

    def apply(self, grid: PixelGrid) -> PixelGrid:
        return operations.clarendon(grid, self.scale)

    @property
    def name(self) -> str:
        return f"clarendon({self.scale})"

    def get_metadata(self) -> dict[str, Any]:
        return {"scale": self.scale}


@dataclass(frozen=True)
class GrayscaleStep(TransformStep):
    """Average the channels of every pixel."""

    def apply(self, grid: PixelGrid) -> PixelGrid:
        return operations.grayscale(grid)

    @property
    def name(self) -> str:
        return "grayscale"


@dataclass(frozen=True)
class Rotate90Step(TransformStep):
    """Rotate a single quarter turn clockwise."""

    def apply(self, grid: PixelGrid) -> PixelGrid:
        return operations.rotate_90(grid)

    @property
    def name(self) -> str:
        return "rotate90"


@dataclass(frozen=True)
class RotateStep(TransformStep):
    """Rotate clockwise by a multiple of 90 degrees."""

    degrees: int

    def apply(self, grid: PixelGrid) -> PixelGrid:
        return operations.rotate(grid, self.degrees)

    @property
    def name(self) -> str:
        return f"rotate({self.degrees})"

    def get_metadata(self) -> dict[str, Any]:
        return {"degrees": self.degrees}


@dataclass(frozen=True)
class EnlargeStep(TransformStep):
    """Nearest-neighbor upscale by whole-number factors."""

    xscale: int
    yscale: int

    def apply(self, grid: PixelGrid) -> PixelGrid:
        return operations.enlarge(grid, self.xscale, self.yscale)

    @property
    def name(self) -> str:
        return f"enlarge({self.xscale}x{self.yscale})"

    def get_metadata(self) -> dict[str, Any]:
        return {"xscale": self.xscale, "yscale": self.yscale}


@dataclass(frozen=True)
class HighContrastStep(TransformStep):
    """Threshold every pixel to black or white."""

    def apply(self, grid: PixelGrid) -> PixelGrid:
        return operations.high_contrast(grid)

    @property
    def name(self) -> str:
        return "high-contrast"


@dataclass(frozen=True)
class LightenStep(TransformStep):
    scale: float

    def apply(self, grid: PixelGrid) -> PixelGrid:
        return operations.lighten(grid, self.scale)

    @property
    def name(self) -> str:
        return f"lighten({self.scale})"

    def get_metadata(self) -> dict[str, Any]:
        return {"scale": self.scale}


@dataclass(frozen=True)
class DarkenStep(TransformStep):
    scale: float

    def apply(self, grid: PixelGrid) -> PixelGrid:
        return operations.darken(grid, self.scale)

    @property
    def name(self) -> str:
        return f"darken({self.scale})"

    def get_metadata(self) -> dict[str, Any]:
        return {"scale": self.scale}


@dataclass(frozen=True)
class PaletteStep(TransformStep):
    """Reduce to black, white, red, green and blue."""

    def apply(self, grid: PixelGrid) -> PixelGrid:
        return operations.reduce_palette(grid)

    @property
    def name(self) -> str:
        return "palette"


@dataclass
class StepResult:
    """Result of applying a single step.

    Attributes:
        name: Name of the step that produced this result.
        grid: Output grid (the unchanged input when the step was rejected).
        status: "applied" or "rejected".
        error: Rejection message, if the step was rejected.
        metadata: Step parameters.
        artifact_path: Path where the grid was saved (if artifact saving enabled).
    """

    name: str
    grid: PixelGrid
    status: str = STATUS_APPLIED
    error: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    artifact_path: str | None = None

    @property
    def rejected(self) -> bool:
        return self.status == STATUS_REJECTED


@dataclass
class PipelineResults:
    """Results from running a pipeline.

    Attributes:
        original: The input grid.
        steps: StepResult for each step, in order.
    """

    original: PixelGrid
    steps: list[StepResult] = field(default_factory=list)

    @property
    def final(self) -> PixelGrid:
        """The grid produced by the last step (the input if there were none)."""
        if not self.steps:
            return self.original
        return self.steps[-1].grid

    @property
    def rejected(self) -> list[StepResult]:
        return [step for step in self.steps if step.rejected]

    @property
    def artifact_paths(self) -> list[str]:
        return [step.artifact_path for step in self.steps if step.artifact_path]


def _artifact_name(index: int, step: TransformStep) -> str:
    """File name for a step's saved grid, e.g. ``01_rotate.bmp``."""
    key = step.name.split("(")[0]
    return f"{index:02d}_{key}.bmp"


@dataclass
class Pipeline:
    """A sequence of steps applied in order.

    Each step receives the previous step's output. A step that raises
    ParameterError is logged and recorded as rejected, and its input is
    passed on unchanged; any other exception propagates.

    Attributes:
        steps: TransformStep instances to apply in order.
    """

    steps: list[TransformStep]

    def run(
        self,
        grid: PixelGrid,
        artifact_dir: str | Path | None = None,
    ) -> PipelineResults:
        """Run the pipeline on a grid.

        Args:
            grid: Input grid; never modified.
            artifact_dir: Optional directory to save each step's output as a
                         numbered bitmap.

        Returns:
            PipelineResults holding every intermediate grid.

        Raises:
            StorageError: If the artifact directory cannot be created or an
                artifact cannot be written.
        """
        if not isinstance(grid, PixelGrid):
            raise TypeError(f"Expected PixelGrid, got {type(grid).__name__}")

        result = PipelineResults(original=grid)
        current = grid

        if artifact_dir is not None:
            try:
                Path(artifact_dir).mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StorageError(
                    f"Cannot create artifact directory {artifact_dir}: {exc}"
                ) from exc

        for index, step in enumerate(self.steps, start=1):
            logger.debug("Applying %s to %dx%d grid", step.name, current.width, current.height)
            try:
                output = step.apply(current)
                status, error = STATUS_APPLIED, None
            except ParameterError as exc:
                logger.error("%s rejected: %s (image left unchanged)", step.name, exc)
                output = current
                status, error = STATUS_REJECTED, str(exc)

            artifact_path = None
            if artifact_dir is not None:
                artifact_path = str(Path(artifact_dir) / _artifact_name(index, step))
                write_bitmap(artifact_path, output)

            result.steps.append(
                StepResult(
                    name=step.name,
                    grid=output,
                    status=status,
                    error=error,
                    metadata=step.get_metadata(),
                    artifact_path=artifact_path,
                )
            )
            current = output

        return result

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self):
        return iter(self.steps)
