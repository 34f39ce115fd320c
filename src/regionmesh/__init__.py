"""
regionmesh - 2D triangular meshing of regions bounded by closed curves.

This package provides tools for:
- Resampling boundary curves into triangulation constraints
- Seeding and pruning interior points for near-equilateral triangles
- Constrained triangulation of a region with holes
- Boundary-preserving Laplacian smoothing
"""

from __future__ import annotations

__version__ = "0.1.0"

from regionmesh.core.exceptions import (
    InvalidGeometryError,
    MeshingSkippedError,
    RegionMeshError,
    TriangulationError,
)
from regionmesh.mesh_generation import (
    MeshingSettings,
    MeshResult,
    Region,
    RegionMeshGenerator,
    SmoothingConfig,
    region_tri_mesh_2d,
)

__all__ = [
    "__version__",
    # Meshing
    "region_tri_mesh_2d",
    "RegionMeshGenerator",
    "Region",
    "MeshResult",
    # Settings
    "MeshingSettings",
    "SmoothingConfig",
    # Exceptions
    "RegionMeshError",
    "InvalidGeometryError",
    "MeshingSkippedError",
    "TriangulationError",
]
