"""
Visualization tools for generated region meshes.

Plotting uses matplotlib with the non-interactive Agg backend, so
figures are meant to be saved to file.
"""

from __future__ import annotations

from regionmesh.visualization.plot_mesh import plot_region_mesh, save_region_mesh_plot

__all__ = ["plot_region_mesh", "save_region_mesh_plot"]
