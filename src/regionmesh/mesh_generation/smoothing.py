"""
Boundary-constrained Laplacian smoothing.

Interior vertices are moved towards the average of their edge neighbours
while the fixed vertices (normally the mesh boundary) stay in place. Each
sweep is computed from the previous sweep's positions, so the result does
not depend on vertex order.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from regionmesh.mesh_generation.config import SmoothingConfig

logger = logging.getLogger(__name__)


def mesh_edges(faces: ArrayLike) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """
    Get the unique edges of a triangle mesh.

    Args:
        faces: Face vertex indices (m, 3)

    Returns:
        Tuple of (edges, counts) where edges are sorted index pairs and
        counts is the number of faces sharing each edge
    """
    face_array = np.asarray(faces, dtype=np.int64).reshape(-1, 3)
    all_edges = np.vstack([face_array[:, [0, 1]], face_array[:, [1, 2]], face_array[:, [2, 0]]])
    # Normalize edge to (min, max) for counting
    all_edges = np.sort(all_edges, axis=1)
    edges, counts = np.unique(all_edges, axis=0, return_counts=True)
    return edges.reshape(-1, 2), counts


def find_boundary_vertices(faces: ArrayLike) -> NDArray[np.int64]:
    """
    Find vertices on the free boundary of a triangle mesh.

    Boundary edges are used by exactly one face.

    Args:
        faces: Face vertex indices (m, 3)

    Returns:
        Sorted array of boundary vertex indices
    """
    edges, counts = mesh_edges(faces)
    return np.unique(edges[counts == 1])


def vertex_adjacency(faces: ArrayLike, n_vertices: int):
    """Return the symmetric vertex adjacency matrix as a scipy CSR matrix."""
    from scipy.sparse import csr_matrix

    edges, _ = mesh_edges(faces)
    rows = np.concatenate([edges[:, 0], edges[:, 1]])
    cols = np.concatenate([edges[:, 1], edges[:, 0]])
    data = np.ones(len(rows))
    return csr_matrix((data, (rows, cols)), shape=(n_vertices, n_vertices))


def smooth_mesh(
    faces: ArrayLike,
    vertices: ArrayLike,
    fixed_vertices: ArrayLike | None = None,
    config: SmoothingConfig | None = None,
) -> NDArray[np.float64]:
    """
    Smooth a triangle mesh while holding a set of vertices fixed.

    Every sweep moves each free vertex a fraction ``lambda_smooth`` of the
    way towards the mean of its neighbours. Iteration stops after
    ``max_iterations`` sweeps or once the largest displacement of a sweep
    drops below ``tolerance``.

    Args:
        faces: Face vertex indices (m, 3)
        vertices: Vertex coordinates (n, 2)
        fixed_vertices: Indices of vertices that must not move
        config: Smoothing parameters (defaults if omitted)

    Returns:
        Smoothed vertex coordinates with the same indexing as the input
    """
    config = config or SmoothingConfig()
    points = np.array(vertices, dtype=np.float64)
    n_vertices = len(points)

    if n_vertices == 0 or config.max_iterations == 0:
        return points

    adjacency = vertex_adjacency(faces, n_vertices)
    degree = np.asarray(adjacency.sum(axis=1)).ravel()

    free = degree > 0
    if fixed_vertices is not None:
        free[np.asarray(fixed_vertices, dtype=np.int64)] = False
    if not np.any(free):
        return points

    inv_degree = 1.0 / degree[free]
    weight = config.lambda_smooth

    for iteration in range(1, config.max_iterations + 1):
        neighbour_mean = (adjacency @ points)[free] * inv_degree[:, None]
        step = weight * (neighbour_mean - points[free])
        points[free] += step

        max_move = float(np.max(np.linalg.norm(step, axis=1)))
        if max_move < config.tolerance:
            logger.debug("Smoothing converged after %d iterations", iteration)
            break
    else:
        logger.debug(
            "Smoothing stopped at iteration cap %d (last move %.3g)",
            config.max_iterations,
            max_move,
        )

    return points
