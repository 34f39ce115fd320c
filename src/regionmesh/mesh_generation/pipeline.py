"""
Region mesh generation pipeline.

The pipeline meshes a planar region bounded by an outer curve and
optional hole curves with triangles of roughly uniform edge length:

1. Boundary curves are resampled and turned into constraint edges
2. Seed points are laid on a lattice over the bounding box
3. Seeds too close to the boundary are discarded
4. The points are triangulated, poorly connected seeds are pruned and
   the remaining points are triangulated again, keeping interior faces
5. Unused vertices are dropped
6. Interior vertices are smoothed with the boundary held fixed

Example
-------
>>> from regionmesh import region_tri_mesh_2d
>>> square = [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]]
>>> faces, vertices = region_tri_mesh_2d([square], point_spacing=0.2)
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from regionmesh.core.curves import bounding_box
from regionmesh.core.exceptions import MeshingSkippedError
from regionmesh.mesh_generation.boundary import prepare_boundary
from regionmesh.mesh_generation.compaction import compact_mesh
from regionmesh.mesh_generation.config import MeshingSettings
from regionmesh.mesh_generation.constraints import Region
from regionmesh.mesh_generation.generators import MeshGenerator, MeshResult
from regionmesh.mesh_generation.mesher import ConstrainedMesher
from regionmesh.mesh_generation.seeds import filter_seed_points, generate_seed_points
from regionmesh.mesh_generation.smoothing import find_boundary_vertices, smooth_mesh

logger = logging.getLogger(__name__)

MeshObserver = Callable[[MeshResult], Any]


class RegionMeshGenerator(MeshGenerator):
    """
    Mesh generator for regions bounded by closed curves.

    Observers registered with :meth:`add_observer` are called with every
    finished, non-empty mesh. They cannot alter the result.

    Args:
        settings: Meshing settings
        **options: Settings fields, used instead of or on top of
            ``settings``
    """

    def __init__(self, settings: MeshingSettings | None = None, **options: Any) -> None:
        if settings is None:
            settings = MeshingSettings(**options)
        elif options:
            settings = MeshingSettings(**{**settings.model_dump(), **options})
        self.settings = settings
        self._observers: list[MeshObserver] = []

        if settings.visualize:
            from regionmesh.visualization.plot_mesh import save_region_mesh_plot

            self.add_observer(
                functools.partial(save_region_mesh_plot, output_path=settings.plot_path)
            )

    def add_observer(self, observer: MeshObserver) -> None:
        """Register a callable invoked with each generated mesh."""
        self._observers.append(observer)

    def generate(self, region: Region | Sequence[ArrayLike]) -> MeshResult:
        """
        Generate a triangular mesh within the region.

        Args:
            region: Region, or ordered curve list with the outer boundary
                first and holes after it

        Returns:
            MeshResult with the smoothed mesh, or an empty result flagged
            as skipped when the spacing is too coarse for the curves

        Raises:
            InvalidGeometryError: If a curve is degenerate
        """
        if not isinstance(region, Region):
            region = Region.from_curves(region)

        settings = self.settings
        spacing = settings.point_spacing
        logger.info(
            "Meshing region with %d curve(s) at point spacing %g",
            len(region.curves),
            spacing,
        )

        boundary = prepare_boundary(
            region.curves,
            spacing,
            resample_curves=settings.resample_boundary,
            interpolation=settings.interpolation,
            subdivision=settings.boundary_subdivision,
        )

        candidates = generate_seed_points(
            bounding_box(boundary.points), spacing, strategy=settings.seed_strategy
        )
        seeds = filter_seed_points(candidates, boundary.fine_points, spacing)
        points = np.vstack([boundary.points, seeds])

        mesher = ConstrainedMesher(min_connectivity=settings.min_connectivity)
        try:
            meshed = mesher.mesh(points, boundary.edges)
        except MeshingSkippedError as exc:
            message = str(exc)
            logger.warning(message)
            return MeshResult.empty(message)

        faces, vertices, _ = compact_mesh(meshed.faces, meshed.vertices)
        boundary_vertices = find_boundary_vertices(faces)
        vertices = smooth_mesh(faces, vertices, boundary_vertices, settings.smoothing)

        result = MeshResult(
            vertices=vertices,
            faces=faces,
            boundary_vertices=boundary_vertices,
        )
        logger.info(
            "Generated mesh with %d vertices and %d faces (%d seeds pruned)",
            result.n_vertices,
            result.n_faces,
            meshed.n_pruned,
        )

        for observer in self._observers:
            observer(result)

        return result


def region_tri_mesh_2d(
    regions: Sequence[ArrayLike],
    point_spacing: float,
    resample_boundary: bool = True,
    visualize: bool = False,
    **options: Any,
) -> tuple[NDArray[np.int64], NDArray[np.float64]]:
    """
    Mesh a planar region with triangles of roughly uniform edge length.

    Args:
        regions: Ordered curves; the first is the outer boundary and the
            rest are holes
        point_spacing: Target average edge length
        resample_boundary: Replace each curve with its evenly resampled
            version; otherwise keep the input curve points
        visualize: Plot the mesh once it is generated
        **options: Further :class:`MeshingSettings` fields

    Returns:
        Tuple of (faces, vertices); both empty when meshing was skipped

    Raises:
        InvalidGeometryError: If a curve is degenerate or the spacing is
            not positive
    """
    settings = MeshingSettings(
        point_spacing=point_spacing,
        resample_boundary=resample_boundary,
        visualize=visualize,
        **options,
    )
    return RegionMeshGenerator(settings).generate(Region.from_curves(regions)).as_tuple()
