"""Mesh generation tools for planar regions."""

from __future__ import annotations

from regionmesh.mesh_generation.boundary import prepare_boundary
from regionmesh.mesh_generation.compaction import compact_mesh
from regionmesh.mesh_generation.config import MeshingSettings, SmoothingConfig
from regionmesh.mesh_generation.constraints import BoundaryConstraints, Region
from regionmesh.mesh_generation.generators import MeshGenerator, MeshResult
from regionmesh.mesh_generation.mesher import ConstrainedMesher, prune_poorly_connected
from regionmesh.mesh_generation.pipeline import RegionMeshGenerator, region_tri_mesh_2d
from regionmesh.mesh_generation.seeds import filter_seed_points, generate_seed_points
from regionmesh.mesh_generation.smoothing import find_boundary_vertices, smooth_mesh
from regionmesh.mesh_generation.triangle_wrapper import (
    TriangulationResult,
    constrained_triangulate,
)

__all__ = [
    # Constraints
    "Region",
    "BoundaryConstraints",
    # Settings
    "MeshingSettings",
    "SmoothingConfig",
    # Generators
    "MeshGenerator",
    "MeshResult",
    "RegionMeshGenerator",
    "region_tri_mesh_2d",
    # Pipeline stages
    "prepare_boundary",
    "generate_seed_points",
    "filter_seed_points",
    "constrained_triangulate",
    "TriangulationResult",
    "ConstrainedMesher",
    "prune_poorly_connected",
    "compact_mesh",
    "find_boundary_vertices",
    "smooth_mesh",
]
