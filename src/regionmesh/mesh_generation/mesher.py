"""
Two-pass constrained mesher.

The first triangulation is only used to find poorly connected seed
points. Those points are removed and the reduced point set is
triangulated again, keeping only the triangles inside the region.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from regionmesh.core.exceptions import MeshingSkippedError
from regionmesh.mesh_generation.triangle_wrapper import (
    TriangulationResult,
    constrained_triangulate,
)

logger = logging.getLogger(__name__)

DEFAULT_MIN_CONNECTIVITY = 4


def constraint_vertex_mask(
    constraint_edges: NDArray[np.int64], n_vertices: int
) -> NDArray[np.bool_]:
    """Flag the vertices that are an endpoint of any constraint edge."""
    mask = np.zeros(n_vertices, dtype=bool)
    mask[np.asarray(constraint_edges).ravel()] = True
    return mask


@dataclass
class PruneResult:
    """
    Point set left after removing poorly connected vertices.

    Attributes:
        vertices: Kept vertex coordinates (k, 2)
        constraint_edges: Constraint edges rewritten to the kept indices
        index_map: Old index to new index, -1 for removed vertices
    """

    vertices: NDArray[np.float64]
    constraint_edges: NDArray[np.int64]
    index_map: NDArray[np.int64]

    @property
    def n_removed(self) -> int:
        """Return number of removed vertices."""
        return int(np.count_nonzero(self.index_map < 0))


def prune_poorly_connected(
    triangulation: TriangulationResult,
    min_connectivity: int = DEFAULT_MIN_CONNECTIVITY,
) -> PruneResult:
    """
    Remove vertices used by too few triangles.

    A vertex is removed when its connectivity is at most
    ``min_connectivity`` and it is not a constraint edge endpoint, so
    every constraint edge survives.

    Args:
        triangulation: First pass triangulation
        min_connectivity: Largest connectivity that still gets pruned

    Returns:
        PruneResult with the kept vertices and remapped constraints
    """
    n_vertices = triangulation.n_vertices
    counts = triangulation.vertex_connectivity()
    is_constraint = constraint_vertex_mask(triangulation.constraint_edges, n_vertices)

    keep = ~((counts <= min_connectivity) & ~is_constraint)

    index_map = np.full(n_vertices, -1, dtype=np.int64)
    index_map[keep] = np.arange(int(keep.sum()))

    return PruneResult(
        vertices=triangulation.vertices[keep],
        constraint_edges=index_map[triangulation.constraint_edges],
        index_map=index_map,
    )


@dataclass
class ConstrainedMeshResult:
    """
    Interior triangles over the pruned point set.

    Attributes:
        vertices: Pruned vertex coordinates, not yet compacted
        faces: Interior faces (m, 3)
        constraint_edges: Constraint edges in the pruned numbering
        n_pruned: Number of vertices removed by pruning
    """

    vertices: NDArray[np.float64]
    faces: NDArray[np.int64]
    constraint_edges: NDArray[np.int64]
    n_pruned: int


class ConstrainedMesher:
    """
    Constrained triangulation with a single connectivity pruning pass.

    Args:
        min_connectivity: Non-constraint vertices incident to this many
            triangles or fewer are removed before the final triangulation
    """

    def __init__(self, min_connectivity: int = DEFAULT_MIN_CONNECTIVITY) -> None:
        self.min_connectivity = min_connectivity

    def mesh(self, points: ArrayLike, constraint_edges: ArrayLike) -> ConstrainedMeshResult:
        """
        Triangulate, prune and re-triangulate a point set.

        Args:
            points: Boundary points followed by seed points (n, 2)
            constraint_edges: Boundary constraint edges (m, 2)

        Returns:
            ConstrainedMeshResult with the interior faces

        Raises:
            MeshingSkippedError: If pruning removed nothing or no seed
                point made it into the interior mesh
        """
        first = constrained_triangulate(points, constraint_edges)
        pruned = prune_poorly_connected(first, self.min_connectivity)
        logger.debug(
            "First pass: %d vertices, %d faces, %d pruned",
            first.n_vertices,
            first.n_faces,
            pruned.n_removed,
        )

        if pruned.n_removed == 0:
            raise MeshingSkippedError(
                "No points removed in constrained Delaunay triangulation. "
                "Possibly due to large point spacing with respect to curve size. "
                "Meshing skipped!"
            )

        second = constrained_triangulate(pruned.vertices, pruned.constraint_edges)
        faces = second.interior_faces()
        logger.debug(
            "Second pass: %d vertices, %d faces, %d interior",
            second.n_vertices,
            second.n_faces,
            len(faces),
        )

        is_constraint = constraint_vertex_mask(second.constraint_edges, second.n_vertices)
        used = np.unique(faces)
        if len(faces) == 0 or np.all(is_constraint[used]):
            raise MeshingSkippedError(
                "No interior seed points left after pruning. "
                "Possibly due to large point spacing with respect to curve size. "
                "Meshing skipped!"
            )

        return ConstrainedMeshResult(
            vertices=second.vertices,
            faces=faces,
            constraint_edges=second.constraint_edges,
            n_pruned=pruned.n_removed,
        )
