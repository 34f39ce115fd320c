"""Unit tests for mesh compaction."""

from __future__ import annotations

import numpy as np

from regionmesh.mesh_generation.compaction import compact_mesh


class TestCompactMesh:
    """Tests for dropping unreferenced vertices."""

    def test_drops_unused_vertices(self) -> None:
        """Test unreferenced vertices are removed and faces renumbered."""
        vertices = np.array([[0.0, 0.0], [9.0, 9.0], [1.0, 0.0], [0.0, 1.0], [8.0, 8.0]])
        faces = np.array([[0, 2, 3]])

        new_faces, new_vertices, index_map = compact_mesh(faces, vertices)

        np.testing.assert_array_equal(new_faces, [[0, 1, 2]])
        np.testing.assert_array_equal(new_vertices, vertices[[0, 2, 3]])
        np.testing.assert_array_equal(index_map, [0, -1, 1, 2, -1])

    def test_no_leak(self) -> None:
        """Test every kept vertex is referenced and every index is valid."""
        rng = np.random.default_rng(0)
        vertices = rng.random((30, 2))
        faces = np.array([[3, 7, 12], [7, 12, 25], [12, 25, 29]])

        new_faces, new_vertices, _ = compact_mesh(faces, vertices)

        assert new_faces.max() < len(new_vertices)
        assert set(np.unique(new_faces)) == set(range(len(new_vertices)))
        np.testing.assert_array_equal(new_vertices[new_faces], vertices[faces])

    def test_already_compact(self) -> None:
        vertices = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
        faces = np.array([[2, 0, 1]])

        new_faces, new_vertices, _ = compact_mesh(faces, vertices)

        np.testing.assert_array_equal(new_faces, faces)
        np.testing.assert_array_equal(new_vertices, vertices)

    def test_empty_faces(self) -> None:
        new_faces, new_vertices, index_map = compact_mesh(np.zeros((0, 3)), np.ones((4, 2)))

        assert new_faces.shape == (0, 3)
        assert new_vertices.shape == (0, 2)
        assert np.all(index_map == -1)
