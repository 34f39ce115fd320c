"""Mesh plotting functions for generated region meshes."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.axes import Axes  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

if TYPE_CHECKING:
    from regionmesh.mesh_generation.generators import MeshResult


def plot_region_mesh(
    result: MeshResult,
    ax: Axes | None = None,
    show_edges: bool = True,
    show_boundary: bool = True,
    edge_color: str = "black",
    edge_width: float = 0.5,
    face_color: str = "red",
    alpha: float = 1.0,
    boundary_color: str = "blue",
    marker_size: float = 20.0,
    title: str | None = "The meshed model",
    figsize: tuple[float, float] = (10, 8),
    output_path: Path | str | None = None,
    dpi: int = 150,
) -> tuple[Figure, Axes]:
    """
    Plot a generated mesh with its boundary vertices.

    Args:
        result: Generated mesh
        ax: Existing axes to plot on (creates new if None)
        show_edges: Show face edges
        show_boundary: Mark the boundary vertices
        edge_color: Color for face edges
        edge_width: Width of edge lines
        face_color: Fill color for faces
        alpha: Transparency of face fill
        boundary_color: Color of boundary vertex markers
        marker_size: Size of boundary vertex markers
        title: Axes title, or None for no title
        figsize: Figure size in inches
        output_path: Save the figure to this file if given
        dpi: Resolution used when saving

    Returns:
        Tuple of (Figure, Axes)
    """

    from matplotlib.collections import PolyCollection

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.get_figure()  # type: ignore[assignment]

    if not result.is_empty:
        collection = PolyCollection(
            result.vertices[result.faces],
            edgecolors=edge_color if show_edges else "none",
            facecolors=face_color,
            linewidths=edge_width,
            alpha=alpha,
        )
        ax.add_collection(collection)

        if show_boundary and len(result.boundary_vertices) > 0:
            boundary = result.vertices[result.boundary_vertices]
            ax.scatter(boundary[:, 0], boundary[:, 1], s=marker_size, c=boundary_color, zorder=3)

    if title:
        ax.set_title(title)
    ax.autoscale_view()
    ax.set_aspect("equal")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.grid(True)

    if output_path is not None:
        fig.savefig(output_path, dpi=dpi, bbox_inches="tight")

    return fig, ax


def save_region_mesh_plot(
    result: MeshResult,
    output_path: Path | str | None = None,
    **kwargs: Any,
) -> None:
    """
    Render a generated mesh, save it and release the figure.

    Args:
        result: Generated mesh
        output_path: Image file to write; the figure is only rendered
            when None
        **kwargs: Additional arguments passed to plot_region_mesh
    """
    fig, _ = plot_region_mesh(result, output_path=output_path, **kwargs)
    plt.close(fig)
