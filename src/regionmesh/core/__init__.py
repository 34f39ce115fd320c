"""Core data structures and geometry utilities for regionmesh."""

from __future__ import annotations

from regionmesh.core.curves import (
    bounding_box,
    curve_length,
    min_distance,
    prepare_curve,
    resample_curve_evenly,
    subdivide_curve,
)
from regionmesh.core.exceptions import (
    InvalidGeometryError,
    MeshingSkippedError,
    RegionMeshError,
    TriangulationError,
)

__all__ = [
    # Curve utilities
    "prepare_curve",
    "curve_length",
    "resample_curve_evenly",
    "subdivide_curve",
    "min_distance",
    "bounding_box",
    # Exceptions
    "RegionMeshError",
    "InvalidGeometryError",
    "MeshingSkippedError",
    "TriangulationError",
]
