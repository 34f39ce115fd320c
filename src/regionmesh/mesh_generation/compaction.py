"""Mesh compaction: drop vertices no face refers to."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


def compact_mesh(
    faces: ArrayLike,
    vertices: ArrayLike,
) -> tuple[NDArray[np.int64], NDArray[np.float64], NDArray[np.int64]]:
    """
    Renumber a mesh so that every vertex is used by at least one face.

    Kept vertices retain their relative order.

    Args:
        faces: Face vertex indices (m, 3)
        vertices: Vertex coordinates (n, 2)

    Returns:
        Tuple of (faces, vertices, index_map) where index_map gives the
        new index of each old vertex, or -1 if it was dropped
    """
    face_array = np.asarray(faces, dtype=np.int64).reshape(-1, 3)
    vertex_array = np.asarray(vertices, dtype=np.float64).reshape(-1, 2)

    used = np.unique(face_array)
    index_map = np.full(len(vertex_array), -1, dtype=np.int64)
    index_map[used] = np.arange(len(used))

    return index_map[face_array], vertex_array[used], index_map
