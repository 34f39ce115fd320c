"""
Triangle constrained triangulation wrapper.

This module wraps the Triangle library to provide the constrained
Delaunay triangulation used by the region mesher, together with the
interior/exterior classification of the resulting triangles.

Triangle is a high-quality mesh generator and Delaunay triangulator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from regionmesh.core.exceptions import TriangulationError

logger = logging.getLogger(__name__)

# Faces classified per block to bound the (faces x edges) work arrays
_CLASSIFY_BLOCK = 2048


@dataclass
class TriangulationResult:
    """
    Result of a constrained triangulation.

    Attributes:
        vertices: Vertex coordinates (n, 2); input points keep their index
        faces: Triangle vertex indices (m, 3)
        constraint_edges: Constraint edges honoured by the triangulation
        interior: Per-face flag, True when the face lies inside the outer
            constraint loop and outside every hole loop
    """

    vertices: NDArray[np.float64]
    faces: NDArray[np.int64]
    constraint_edges: NDArray[np.int64]
    interior: NDArray[np.bool_]

    @property
    def n_vertices(self) -> int:
        """Return number of vertices."""
        return len(self.vertices)

    @property
    def n_faces(self) -> int:
        """Return number of faces."""
        return len(self.faces)

    def vertex_connectivity(self) -> NDArray[np.int64]:
        """Return the number of faces incident to each vertex."""
        return np.bincount(self.faces.ravel(), minlength=self.n_vertices)

    def interior_faces(self) -> NDArray[np.int64]:
        """Return only the faces classified as interior."""
        return self.faces[self.interior]

    def __repr__(self) -> str:
        return (
            f"TriangulationResult(n_vertices={self.n_vertices}, n_faces={self.n_faces}, "
            f"n_interior={int(self.interior.sum())})"
        )


def constrained_triangulate(
    points: ArrayLike,
    constraint_edges: ArrayLike,
) -> TriangulationResult:
    """
    Triangulate the convex hull of a point set honouring constraint edges.

    No Steiner points are requested, so for non-intersecting constraints
    the output vertices are exactly the input points in input order.

    Args:
        points: Point coordinates (n, 2)
        constraint_edges: Index pairs (m, 2) that must appear as edges

    Returns:
        TriangulationResult with faces and interior classification
    """
    try:
        import triangle
    except ImportError as e:
        raise ImportError(
            "Triangle library is required for constrained triangulation. "
            "Install with: pip install triangle"
        ) from e

    vertices = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    edges = np.asarray(constraint_edges, dtype=np.int64).reshape(-1, 2)

    if len(vertices) < 3:
        raise TriangulationError(f"At least 3 points are required, got {len(vertices)}")

    tri_input = {
        "vertices": vertices,
        "segments": edges.astype(np.int32),
    }

    # p: honour segments, c: keep every triangle of the convex hull
    tri_output = triangle.triangulate(tri_input, "pc")

    faces = np.asarray(tri_output.get("triangles", np.zeros((0, 3))), dtype=np.int64)
    if len(faces) == 0:
        raise TriangulationError(
            f"Triangulation of {len(vertices)} points produced no triangles"
        )

    out_vertices = np.asarray(tri_output["vertices"], dtype=np.float64)
    if len(out_vertices) != len(vertices):
        logger.debug(
            "Triangulation added %d Steiner points", len(out_vertices) - len(vertices)
        )

    interior = classify_interior(out_vertices, faces, edges)

    return TriangulationResult(
        vertices=out_vertices,
        faces=faces,
        constraint_edges=edges,
        interior=interior,
    )


def classify_interior(
    vertices: NDArray[np.float64],
    faces: NDArray[np.int64],
    constraint_edges: NDArray[np.int64],
) -> NDArray[np.bool_]:
    """
    Classify faces as inside or outside the region bounded by constraints.

    A face is interior when a ray cast from its centroid crosses the
    constraint edges an odd number of times. With one outer loop and hole
    loops inside it, this is inside the outer loop and outside every hole.

    Args:
        vertices: Vertex coordinates (n, 2)
        faces: Triangle vertex indices (m, 3)
        constraint_edges: Closed constraint loops as index pairs

    Returns:
        Boolean array of length m
    """
    if len(faces) == 0 or len(constraint_edges) == 0:
        return np.zeros(len(faces), dtype=bool)

    centroids = vertices[faces].mean(axis=1)

    a = vertices[constraint_edges[:, 0]]
    b = vertices[constraint_edges[:, 1]]
    ax, ay = a[:, 0][None, :], a[:, 1][None, :]
    bx, by = b[:, 0][None, :], b[:, 1][None, :]
    dy = by - ay
    # Horizontal edges never straddle the ray; avoid dividing by zero
    safe_dy = np.where(dy == 0, 1.0, dy)

    inside = np.zeros(len(faces), dtype=bool)
    for start in range(0, len(faces), _CLASSIFY_BLOCK):
        block = centroids[start : start + _CLASSIFY_BLOCK]
        cx = block[:, 0][:, None]
        cy = block[:, 1][:, None]

        straddles = (ay > cy) != (by > cy)
        x_cross = ax + (cy - ay) * (bx - ax) / safe_dy
        crossings = np.count_nonzero(straddles & (cx < x_cross), axis=1)
        inside[start : start + _CLASSIFY_BLOCK] = crossings % 2 == 1

    return inside
