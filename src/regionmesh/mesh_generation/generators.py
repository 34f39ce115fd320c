"""
Mesh generator base classes for region meshing.

This module provides the abstract base class for mesh generators
and the MeshResult class for holding generated meshes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from shapely.geometry import Polygon

    from regionmesh.mesh_generation.constraints import Region


@dataclass
class MeshResult:
    """
    Result from mesh generation.

    Attributes:
        vertices: Array of vertex coordinates (n_vertices, 2)
        faces: Array of triangle vertex indices (n_faces, 3)
        boundary_vertices: Indices of vertices on the free mesh boundary
        skipped: True when meshing was skipped and the mesh is empty
        warnings: Messages collected while meshing
    """

    vertices: NDArray[np.float64]
    faces: NDArray[np.int64]
    boundary_vertices: NDArray[np.int64] = field(
        default_factory=lambda: np.zeros(0, dtype=np.int64)
    )
    skipped: bool = False
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def empty(cls, warning: str | None = None) -> MeshResult:
        """Create an empty, skipped result."""
        return cls(
            vertices=np.zeros((0, 2), dtype=np.float64),
            faces=np.zeros((0, 3), dtype=np.int64),
            skipped=True,
            warnings=[warning] if warning else [],
        )

    @property
    def n_vertices(self) -> int:
        """Return number of vertices."""
        return len(self.vertices)

    @property
    def n_faces(self) -> int:
        """Return number of triangular faces."""
        return len(self.faces)

    @property
    def is_empty(self) -> bool:
        """Return True if the mesh has no faces."""
        return self.n_faces == 0

    def as_tuple(self) -> tuple[NDArray[np.int64], NDArray[np.float64]]:
        """Return the mesh as a (faces, vertices) pair."""
        return self.faces, self.vertices

    def get_element_areas(self) -> NDArray[np.float64]:
        """
        Calculate area of each face.

        Returns:
            Array of face areas
        """
        if self.is_empty:
            return np.zeros(0)

        v0 = self.vertices[self.faces[:, 0]]
        v1 = self.vertices[self.faces[:, 1]]
        v2 = self.vertices[self.faces[:, 2]]
        return 0.5 * np.abs(
            (v1[:, 0] - v0[:, 0]) * (v2[:, 1] - v0[:, 1])
            - (v2[:, 0] - v0[:, 0]) * (v1[:, 1] - v0[:, 1])
        )

    def get_element_centroids(self) -> NDArray[np.float64]:
        """
        Calculate centroid of each face.

        Returns:
            Array of face centroids (n_faces, 2)
        """
        if self.is_empty:
            return np.zeros((0, 2))
        return self.vertices[self.faces].mean(axis=1)

    def get_edge_lengths(self) -> NDArray[np.float64]:
        """Return the length of every unique mesh edge."""
        from regionmesh.mesh_generation.smoothing import mesh_edges

        if self.is_empty:
            return np.zeros(0)
        edges, _ = mesh_edges(self.faces)
        return np.linalg.norm(self.vertices[edges[:, 1]] - self.vertices[edges[:, 0]], axis=1)

    def __repr__(self) -> str:
        return (
            f"MeshResult(n_vertices={self.n_vertices}, n_faces={self.n_faces}, "
            f"skipped={self.skipped})"
        )


class MeshGenerator(ABC):
    """
    Abstract base class for mesh generators.

    Subclasses must implement the generate() method to create
    a mesh from a region definition.
    """

    @abstractmethod
    def generate(self, region: Region) -> MeshResult:
        """
        Generate a mesh within the region.

        Args:
            region: Region bounded by an outer curve and optional holes

        Returns:
            MeshResult with generated mesh
        """
        pass

    def generate_from_shapely(self, polygon: Polygon) -> MeshResult:  # type: ignore
        """
        Generate mesh from Shapely polygon.

        Args:
            polygon: Shapely Polygon object

        Returns:
            MeshResult with generated mesh
        """
        from regionmesh.mesh_generation.constraints import Region

        return self.generate(Region.from_shapely(polygon))
