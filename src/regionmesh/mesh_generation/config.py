"""
Configuration settings for region mesh generation.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from regionmesh.core.exceptions import InvalidGeometryError


class SmoothingConfig(BaseModel):
    """Settings for the boundary-constrained Laplacian smoother."""

    lambda_smooth: float = Field(
        default=0.5, gt=0.0, le=1.0, description="Relaxation weight per iteration"
    )
    max_iterations: int = Field(default=250, ge=0, description="Iteration cap")
    tolerance: float = Field(
        default=0.01, gt=0.0, description="Stop once no vertex moves further than this"
    )

    model_config = {"extra": "forbid", "frozen": True}


class MeshingSettings(BaseModel):
    """Settings for a single region meshing run."""

    point_spacing: float = Field(description="Target average edge length")
    resample_boundary: bool = Field(
        default=True, description="Replace curves with their evenly resampled version"
    )
    visualize: bool = Field(default=False, description="Render the mesh after generation")
    plot_path: Path | None = Field(default=None, description="Save the rendered mesh here")
    min_connectivity: int = Field(
        default=4, ge=0, description="Seeds used by this many triangles or fewer are pruned"
    )
    seed_strategy: Literal["equilateral", "grid"] = Field(
        default="equilateral", description="Interior seed lattice layout"
    )
    interpolation: Literal["linear", "pchip", "cubic"] = Field(
        default="linear", description="Curve resampling interpolation"
    )
    boundary_subdivision: int = Field(
        default=1, ge=1, description="Points inserted per fine boundary segment"
    )
    smoothing: SmoothingConfig = Field(default_factory=SmoothingConfig)

    model_config = {"extra": "forbid"}

    @field_validator("point_spacing")
    @classmethod
    def _check_spacing(cls, value: float) -> float:
        # Not a ValueError, so pydantic lets it propagate unwrapped
        if not math.isfinite(value) or value <= 0:
            raise InvalidGeometryError(f"Point spacing must be positive, got {value}")
        return value
