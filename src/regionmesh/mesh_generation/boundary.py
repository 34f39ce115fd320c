"""
Boundary preparation for region meshing.

Converts the ordered curves of a region into a single boundary point set
with one closed cycle of constraint edges per curve. A second, finely
sampled copy of the boundary is kept apart for seed proximity filtering.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from regionmesh.core.curves import (
    InterpolationMethod,
    curve_length,
    prepare_curve,
    resample_curve_evenly,
    subdivide_curve,
)
from regionmesh.core.exceptions import InvalidGeometryError
from regionmesh.mesh_generation.constraints import BoundaryConstraints

logger = logging.getLogger(__name__)

# Fewest points a resampled curve may have and still enclose an area
MIN_CURVE_POINTS = 3


def validate_spacing(point_spacing: float) -> float:
    """Check that the point spacing is a positive finite number."""
    spacing = float(point_spacing)
    if not math.isfinite(spacing) or spacing <= 0:
        raise InvalidGeometryError(f"Point spacing must be positive, got {point_spacing}")
    return spacing


def curve_point_count(length: float, point_spacing: float) -> int:
    """Number of evenly spaced points for a closed curve of the given length."""
    return max(int(math.ceil(length / point_spacing)), MIN_CURVE_POINTS)


def prepare_boundary(
    curves: Sequence[ArrayLike],
    point_spacing: float,
    resample_curves: bool = True,
    interpolation: InterpolationMethod = "linear",
    subdivision: int = 1,
) -> BoundaryConstraints:
    """
    Build boundary points and constraint edges from region curves.

    Args:
        curves: Ordered curves, outer boundary first, then holes
        point_spacing: Target spacing between boundary points
        resample_curves: Use the evenly resampled curves as boundary
            points; otherwise keep the input points
        interpolation: Interpolation used for resampling
        subdivision: Points inserted per segment of the resampled curves
            to build the fine boundary set (1 gives half the spacing)

    Returns:
        BoundaryConstraints with points, edges and fine boundary points

    Raises:
        InvalidGeometryError: If a curve is degenerate or the spacing is
            not positive
    """
    spacing = validate_spacing(point_spacing)
    if len(curves) == 0:
        raise InvalidGeometryError("Region needs at least one curve")

    points = []
    edges = []
    fine_points = []
    offset = 0

    for i, raw_curve in enumerate(curves):
        curve = prepare_curve(raw_curve, curve_index=i)

        n_resampled = curve_point_count(curve_length(curve), spacing)
        resampled = resample_curve_evenly(curve, n_resampled, method=interpolation, closed=True)

        working = resampled if resample_curves else curve
        n = len(working)

        local = np.arange(n)
        edges.append(np.column_stack([local, (local + 1) % n]) + offset)
        points.append(working)
        fine_points.append(subdivide_curve(resampled, subdivision, closed=True))

        logger.debug(
            "Curve %d: %d input points, %d resampled points, %d boundary points",
            i,
            len(curve),
            n_resampled,
            n,
        )
        offset += n

    return BoundaryConstraints(
        points=np.vstack(points),
        edges=np.vstack(edges).astype(np.int64),
        fine_points=np.vstack(fine_points),
    )
