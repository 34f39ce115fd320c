"""
Interior seed point generation and filtering.

Seed points are laid on an approximately equilateral lattice covering the
region's bounding box. Candidates that lie too close to the boundary are
discarded so that merging them with the boundary points does not create
sliver triangles.
"""

from __future__ import annotations

import logging
import math
from typing import Literal

import numpy as np
from numpy.typing import NDArray

from regionmesh.core.curves import min_distance

logger = logging.getLogger(__name__)

SeedStrategy = Literal["equilateral", "grid"]

# Height of an equilateral triangle with unit side
ROW_FACTOR = 0.5 * math.sqrt(3.0)


def equilateral_lattice(
    bbox: tuple[float, float, float, float],
    point_spacing: float,
) -> NDArray[np.float64]:
    """
    Construct equilateral lattice points covering a bounding box.

    The box is expanded by one spacing in each direction. Columns are
    ``point_spacing`` apart, rows are one triangle height apart and every
    other row is shifted by half a spacing.

    Args:
        bbox: Bounding box as (xmin, ymin, xmax, ymax)
        point_spacing: Side length of the lattice triangles

    Returns:
        Lattice points (n, 2)
    """
    xmin, ymin, xmax, ymax = bbox
    row_spacing = point_spacing * ROW_FACTOR

    x0 = xmin - point_spacing
    y0 = ymin - point_spacing
    n_cols = int(math.ceil((xmax - xmin + 2 * point_spacing) / point_spacing)) + 1
    n_rows = int(math.ceil((ymax - ymin + 2 * point_spacing) / row_spacing)) + 1

    x_ax = x0 + np.arange(n_cols) * point_spacing
    y_ax = y0 + np.arange(n_rows) * row_spacing

    x, y = np.meshgrid(x_ax, y_ax)
    x[1::2, :] += 0.5 * point_spacing

    return np.column_stack([x.ravel(), y.ravel()])


def grid_lattice(
    bbox: tuple[float, float, float, float],
    point_spacing: float,
) -> NDArray[np.float64]:
    """
    Construct an offset rectangular grid approximating equilateral triangles.

    The box is expanded by (spacing, triangle height) and filled with
    ``linspace`` rows and columns, so the actual steps are rounded to fit
    the box exactly. Every other row, starting with the first, is shifted
    by half a spacing.

    Args:
        bbox: Bounding box as (xmin, ymin, xmax, ymax)
        point_spacing: Target horizontal spacing

    Returns:
        Grid points (n, 2)
    """
    xmin, ymin, xmax, ymax = bbox
    steps = np.array([point_spacing, point_spacing * ROW_FACTOR])

    lower = np.array([xmin, ymin]) - steps
    upper = np.array([xmax, ymax]) + steps
    n_cols, n_rows = np.maximum(np.round((upper - lower) / steps).astype(int), 2)

    x_range = np.linspace(lower[0], upper[0], n_cols)
    y_range = np.linspace(lower[1], upper[1], n_rows)
    x, y = np.meshgrid(x_range, y_range)
    x[0::2, :] += 0.5 * point_spacing

    return np.column_stack([x.ravel(), y.ravel()])


def generate_seed_points(
    bbox: tuple[float, float, float, float],
    point_spacing: float,
    strategy: SeedStrategy = "equilateral",
) -> NDArray[np.float64]:
    """
    Generate candidate interior seed points over a bounding box.

    Args:
        bbox: Bounding box of the boundary points (xmin, ymin, xmax, ymax)
        point_spacing: Target point spacing
        strategy: "equilateral" for a true equilateral lattice or "grid"
            for the offset rectangular grid

    Returns:
        Candidate seed points (n, 2)
    """
    if strategy == "equilateral":
        candidates = equilateral_lattice(bbox, point_spacing)
    elif strategy == "grid":
        candidates = grid_lattice(bbox, point_spacing)
    else:
        raise ValueError(f"Unknown seed strategy: {strategy!r}")

    logger.debug("Generated %d candidate seed points (%s)", len(candidates), strategy)
    return candidates


def seed_clearance(point_spacing: float) -> float:
    """Minimum boundary distance of a kept seed: half a triangle height."""
    return point_spacing * ROW_FACTOR / 2.0


def filter_seed_points(
    candidates: NDArray[np.float64],
    fine_boundary: NDArray[np.float64],
    point_spacing: float,
) -> NDArray[np.float64]:
    """
    Discard candidate seeds that lie too close to the boundary.

    Args:
        candidates: Candidate seed points (n, 2)
        fine_boundary: Densely sampled boundary points
        point_spacing: Target point spacing

    Returns:
        Seed points whose nearest fine boundary point is further away
        than half the equilateral triangle height
    """
    if len(candidates) == 0:
        return np.zeros((0, 2))

    distances = min_distance(candidates, fine_boundary)
    keep = distances > seed_clearance(point_spacing)

    logger.debug("Kept %d of %d candidate seed points", int(keep.sum()), len(candidates))
    return candidates[keep]
