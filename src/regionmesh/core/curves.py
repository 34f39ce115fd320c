"""
Closed-curve utilities used by the mesh generation pipeline.

This module provides the geometric helpers the pipeline relies on:

- :func:`prepare_curve`: Validate and normalize a boundary curve
- :func:`curve_length`: Arc length of an open or closed curve
- :func:`resample_curve_evenly`: Resample a curve to evenly spaced points
- :func:`subdivide_curve`: Insert points along every curve segment
- :func:`min_distance`: Nearest-neighbour distance to a reference point set
- :func:`bounding_box`: Axis-aligned extent of a point set

Example
-------
>>> import numpy as np
>>> from regionmesh.core.curves import curve_length, resample_curve_evenly
>>> square = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
>>> curve_length(square)
4.0
>>> resample_curve_evenly(square, 8).shape
(8, 2)
"""

from __future__ import annotations

from typing import Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from regionmesh.core.exceptions import InvalidGeometryError

InterpolationMethod = Literal["linear", "pchip", "cubic"]

# Relative length below which a curve is considered degenerate
_LENGTH_EPS = 1e-12


def prepare_curve(curve: ArrayLike, curve_index: int | None = None) -> NDArray[np.float64]:
    """
    Validate a closed boundary curve and return it as a float array.

    A trailing point that repeats the first point is dropped, since
    curves are implicitly closed.

    Parameters
    ----------
    curve : array_like
        Curve points with shape (n, 2).
    curve_index : int, optional
        Position of the curve in the region, used in error messages.

    Returns
    -------
    numpy.ndarray
        Curve points with shape (n, 2) and dtype float64.

    Raises
    ------
    InvalidGeometryError
        If the curve is not an (n, 2) array of finite values with at
        least three distinct points and a non-zero length.
    """
    label = "Curve" if curve_index is None else f"Curve {curve_index}"
    points = np.asarray(curve, dtype=np.float64)

    if points.ndim != 2 or points.shape[1] != 2:
        raise InvalidGeometryError(
            f"{label} must have shape (n, 2), got {points.shape}", curve_index
        )
    if not np.all(np.isfinite(points)):
        raise InvalidGeometryError(f"{label} contains non-finite coordinates", curve_index)

    if len(points) > 1 and np.array_equal(points[0], points[-1]):
        points = points[:-1]

    if len(np.unique(points, axis=0)) < 3:
        raise InvalidGeometryError(
            f"{label} needs at least 3 distinct points, got {len(points)}", curve_index
        )

    length = curve_length(points)
    extent = float(np.ptp(points, axis=0).max())
    if length <= _LENGTH_EPS * max(extent, 1.0):
        raise InvalidGeometryError(f"{label} has zero length", curve_index)

    return points


def curve_length(curve: ArrayLike, closed: bool = True) -> float:
    """
    Calculate the arc length of a curve.

    Parameters
    ----------
    curve : array_like
        Curve points with shape (n, 2).
    closed : bool, optional
        Include the segment joining the last point to the first.

    Returns
    -------
    float
        Total length of the curve segments.
    """
    points = np.asarray(curve, dtype=np.float64)
    if len(points) < 2:
        return 0.0

    if closed:
        points = np.vstack([points, points[:1]])

    return float(np.sum(np.linalg.norm(np.diff(points, axis=0), axis=1)))


def resample_curve_evenly(
    curve: ArrayLike,
    n: int,
    method: InterpolationMethod = "linear",
    closed: bool = True,
) -> NDArray[np.float64]:
    """
    Resample a curve to ``n`` points evenly spaced along its arc length.

    The first output point coincides with the first input point. For
    closed curves the closing segment is part of the parametrization and
    the first point is not repeated at the end.

    Parameters
    ----------
    curve : array_like
        Curve points with shape (m, 2).
    n : int
        Number of output points.
    method : {"linear", "pchip", "cubic"}, optional
        Interpolation between the input points. ``"cubic"`` uses a
        periodic spline for closed curves.
    closed : bool, optional
        Treat the curve as a closed loop.

    Returns
    -------
    numpy.ndarray
        Resampled points with shape (n, 2).
    """
    if n < 1:
        raise ValueError(f"Number of points must be positive, got {n}")

    points = np.asarray(curve, dtype=np.float64)
    if closed:
        points = np.vstack([points, points[:1]])

    # Drop repeated consecutive points so the arc parameter is strictly increasing
    seg_lengths = np.linalg.norm(np.diff(points, axis=0), axis=1)
    keep = np.concatenate([[True], seg_lengths > 0])
    points = points[keep]
    arc = np.concatenate([[0.0], np.cumsum(seg_lengths[seg_lengths > 0])])
    total = arc[-1]

    if closed:
        targets = np.linspace(0.0, total, n + 1)[:-1]
    else:
        targets = np.linspace(0.0, total, n)

    if method == "linear":
        x = np.interp(targets, arc, points[:, 0])
        y = np.interp(targets, arc, points[:, 1])
        return np.column_stack([x, y])

    if method == "pchip":
        from scipy.interpolate import PchipInterpolator

        return np.asarray(PchipInterpolator(arc, points, axis=0)(targets), dtype=np.float64)

    if method == "cubic":
        from scipy.interpolate import CubicSpline

        bc_type = "periodic" if closed else "not-a-knot"
        spline = CubicSpline(arc, points, axis=0, bc_type=bc_type)
        return np.asarray(spline(targets), dtype=np.float64)

    raise ValueError(f"Unknown interpolation method: {method!r}")


def subdivide_curve(curve: ArrayLike, n_sub: int, closed: bool = True) -> NDArray[np.float64]:
    """
    Insert ``n_sub`` evenly spaced points into every curve segment.

    The original points are kept, so the spacing of the result is the
    original spacing divided by ``n_sub + 1``.

    Parameters
    ----------
    curve : array_like
        Curve points with shape (m, 2).
    n_sub : int
        Number of points inserted per segment.
    closed : bool, optional
        Also subdivide the segment joining the last point to the first.

    Returns
    -------
    numpy.ndarray
        Subdivided curve points.
    """
    if n_sub < 0:
        raise ValueError(f"Subdivision count must be non-negative, got {n_sub}")

    points = np.asarray(curve, dtype=np.float64)
    if len(points) < 2 or n_sub == 0:
        return points.copy()

    starts = points if closed else points[:-1]
    ends = np.roll(points, -1, axis=0) if closed else points[1:]

    t = np.arange(n_sub + 1) / (n_sub + 1)
    subdivided = starts[:, None, :] + t[None, :, None] * (ends - starts)[:, None, :]
    subdivided = subdivided.reshape(-1, 2)

    if not closed:
        subdivided = np.vstack([subdivided, points[-1:]])

    return subdivided


def min_distance(points: ArrayLike, reference_points: ArrayLike) -> NDArray[np.float64]:
    """
    Distance from each point to its nearest reference point.

    Parameters
    ----------
    points : array_like
        Query points with shape (n, 2).
    reference_points : array_like
        Reference points with shape (m, 2), m >= 1.

    Returns
    -------
    numpy.ndarray
        Array of n distances.
    """
    from scipy.spatial import cKDTree

    query = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    reference = np.asarray(reference_points, dtype=np.float64).reshape(-1, 2)

    if len(query) == 0:
        return np.zeros(0)
    if len(reference) == 0:
        raise ValueError("Reference point set is empty")

    tree = cKDTree(reference)
    distances, _ = tree.query(query)
    return np.asarray(distances, dtype=np.float64)


def bounding_box(points: ArrayLike) -> tuple[float, float, float, float]:
    """Return bounding box of a point set as (xmin, ymin, xmax, ymax)."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    xmin, ymin = pts.min(axis=0)
    xmax, ymax = pts.max(axis=0)
    return (float(xmin), float(ymin), float(xmax), float(ymax))
