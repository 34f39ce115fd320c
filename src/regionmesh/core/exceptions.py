"""Custom exceptions for regionmesh package."""

from __future__ import annotations


class RegionMeshError(Exception):
    """Base exception for all regionmesh errors."""

    pass


class InvalidGeometryError(RegionMeshError):
    """Error raised when a region curve or the point spacing is malformed."""

    def __init__(self, message: str, curve_index: int | None = None) -> None:
        super().__init__(message)
        self.curve_index = curve_index


class MeshingSkippedError(RegionMeshError):
    """
    Error raised when the point spacing is too coarse for the region curves.

    The mesh generation pipeline catches this error and returns an empty
    mesh, so batch callers can carry on with other regions.
    """

    pass


class TriangulationError(RegionMeshError):
    """Error raised when the triangulation backend produces no triangles."""

    pass
