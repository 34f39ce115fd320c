"""
Region and boundary constraint definitions for mesh generation.

This module provides the region description consumed by the mesh
generators (an outer curve plus optional holes) and the boundary
constraint set produced from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from regionmesh.core.curves import prepare_curve
from regionmesh.core.exceptions import InvalidGeometryError

if TYPE_CHECKING:
    from shapely.geometry import Polygon


@dataclass
class Region:
    """
    A planar region bounded by closed curves.

    Attributes:
        outer: Outer boundary curve (n, 2), implicitly closed
        holes: List of hole curves, each implicitly closed and lying
            inside the outer curve
    """

    outer: NDArray[np.float64]
    holes: list[NDArray[np.float64]] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate and normalize the region curves."""
        self.outer = prepare_curve(self.outer, curve_index=0)
        self.holes = [
            prepare_curve(hole, curve_index=i) for i, hole in enumerate(self.holes, start=1)
        ]

    @classmethod
    def from_curves(cls, curves: Sequence[ArrayLike]) -> Region:
        """
        Create a region from an ordered curve list.

        Args:
            curves: Curves where the first is the outer boundary and the
                rest are holes

        Returns:
            Region instance
        """
        if len(curves) == 0:
            raise InvalidGeometryError("Region needs at least one curve")
        return cls(
            outer=np.asarray(curves[0], dtype=np.float64),
            holes=[np.asarray(c, dtype=np.float64) for c in curves[1:]],
        )

    @classmethod
    def from_shapely(cls, polygon: Polygon) -> Region:  # type: ignore
        """
        Create a region from a Shapely polygon.

        Args:
            polygon: Shapely Polygon object (interiors become holes)

        Returns:
            Region instance
        """
        # Shapely rings repeat the first coordinate at the end
        exterior = np.array(polygon.exterior.coords)[:-1, :2]
        holes = [np.array(interior.coords)[:-1, :2] for interior in polygon.interiors]
        return cls(outer=exterior, holes=holes)

    @property
    def curves(self) -> list[NDArray[np.float64]]:
        """Return all curves, outer boundary first."""
        return [self.outer, *self.holes]

    @property
    def n_holes(self) -> int:
        """Return number of holes."""
        return len(self.holes)

    @property
    def area(self) -> float:
        """
        Calculate region area using shoelace formula.

        Returns:
            Outer area minus the hole areas
        """
        outer_area = self._polygon_area(self.outer)
        hole_area = sum(self._polygon_area(hole) for hole in self.holes)
        return outer_area - hole_area

    @staticmethod
    def _polygon_area(vertices: NDArray[np.float64]) -> float:
        """Calculate polygon area using shoelace formula."""
        x = vertices[:, 0]
        y = vertices[:, 1]
        return float(0.5 * abs(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)))

    def __iter__(self) -> Iterator[NDArray[np.float64]]:
        return iter(self.curves)

    def __repr__(self) -> str:
        return f"Region(n_outer={len(self.outer)}, n_holes={self.n_holes})"


@dataclass
class BoundaryConstraints:
    """
    Boundary points and constraint edges of a region.

    Attributes:
        points: Boundary points used for triangulation (n, 2)
        edges: Constraint edges as index pairs into ``points`` (n, 2);
            one closed cycle per curve
        fine_points: Densely sampled boundary points, used only to
            measure how close seed points are to the boundary
    """

    points: NDArray[np.float64]
    edges: NDArray[np.int64]
    fine_points: NDArray[np.float64]

    @property
    def n_points(self) -> int:
        """Return number of boundary points."""
        return len(self.points)

    def __repr__(self) -> str:
        return (
            f"BoundaryConstraints(n_points={self.n_points}, "
            f"n_fine_points={len(self.fine_points)})"
        )
