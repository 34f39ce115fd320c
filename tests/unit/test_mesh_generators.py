"""Unit tests for MeshResult and the MeshGenerator base class."""

from __future__ import annotations

import numpy as np
import pytest

from regionmesh.mesh_generation.constraints import Region
from regionmesh.mesh_generation.generators import MeshGenerator, MeshResult


@pytest.fixture
def two_triangle_result() -> MeshResult:
    """Unit square split into two triangles."""
    return MeshResult(
        vertices=np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]]),
        faces=np.array([[0, 1, 2], [0, 2, 3]]),
        boundary_vertices=np.array([0, 1, 2, 3]),
    )


class TestMeshResult:
    """Tests for MeshResult."""

    def test_counts(self, two_triangle_result: MeshResult) -> None:
        assert two_triangle_result.n_vertices == 4
        assert two_triangle_result.n_faces == 2
        assert not two_triangle_result.is_empty
        assert not two_triangle_result.skipped

    def test_element_areas(self, two_triangle_result: MeshResult) -> None:
        np.testing.assert_allclose(two_triangle_result.get_element_areas(), [0.5, 0.5])

    def test_element_centroids(self, two_triangle_result: MeshResult) -> None:
        np.testing.assert_allclose(
            two_triangle_result.get_element_centroids(),
            [[2.0 / 3.0, 1.0 / 3.0], [1.0 / 3.0, 2.0 / 3.0]],
        )

    def test_edge_lengths(self, two_triangle_result: MeshResult) -> None:
        lengths = np.sort(two_triangle_result.get_edge_lengths())
        np.testing.assert_allclose(lengths, [1.0, 1.0, 1.0, 1.0, np.sqrt(2.0)])

    def test_as_tuple(self, two_triangle_result: MeshResult) -> None:
        faces, vertices = two_triangle_result.as_tuple()
        assert faces is two_triangle_result.faces
        assert vertices is two_triangle_result.vertices

    def test_empty(self) -> None:
        """Test an empty result carries its warning."""
        result = MeshResult.empty("Too coarse")

        assert result.is_empty
        assert result.skipped
        assert result.warnings == ["Too coarse"]
        assert result.vertices.shape == (0, 2)
        assert result.faces.shape == (0, 3)
        assert len(result.get_element_areas()) == 0
        assert result.get_element_centroids().shape == (0, 2)
        assert len(result.get_edge_lengths()) == 0

    def test_empty_without_warning(self) -> None:
        assert MeshResult.empty().warnings == []

    def test_repr(self, two_triangle_result: MeshResult) -> None:
        assert repr(two_triangle_result) == "MeshResult(n_vertices=4, n_faces=2, skipped=False)"


class _CornerGenerator(MeshGenerator):
    """Generator that fans the outer curve from its first point."""

    def generate(self, region: Region) -> MeshResult:
        n = len(region.outer)
        faces = np.array([[0, i, i + 1] for i in range(1, n - 1)])
        return MeshResult(vertices=region.outer, faces=faces)


class TestMeshGenerator:
    """Tests for the MeshGenerator base class."""

    def test_abstract(self) -> None:
        with pytest.raises(TypeError):
            MeshGenerator()  # type: ignore[abstract]

    def test_generate_from_shapely(self) -> None:
        """Test a Shapely polygon is converted to a region."""
        shapely_geometry = pytest.importorskip("shapely.geometry")
        polygon = shapely_geometry.Polygon([(0, 0), (2, 0), (2, 2), (0, 2)])

        result = _CornerGenerator().generate_from_shapely(polygon)

        assert result.n_vertices == 4
        assert result.get_element_areas().sum() == pytest.approx(4.0)
