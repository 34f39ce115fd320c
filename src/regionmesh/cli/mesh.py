"""
``regionmesh mesh`` subcommand.

Usage::

    regionmesh mesh --outer outer.txt [--hole hole.txt ...] --spacing 0.2
                    [--output mesh.npz] [--plot mesh.png]
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from regionmesh.core.exceptions import InvalidGeometryError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_SKIPPED = 2


def add_mesh_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    """Register the ``mesh`` subcommand."""
    p = subparsers.add_parser(
        "mesh",
        help="Mesh a region bounded by an outer curve and optional holes.",
        description=(
            "Mesh a region with triangles of roughly uniform edge length.\n\n"
            "Curve files hold one x, y pair per line, separated by whitespace\n"
            "or commas. Lines starting with '#' are ignored."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "--outer",
        type=Path,
        required=True,
        metavar="FILE",
        help="Outer boundary curve file",
    )
    p.add_argument(
        "--hole",
        type=Path,
        action="append",
        default=[],
        metavar="FILE",
        help="Hole curve file (may be repeated)",
    )
    p.add_argument(
        "--spacing",
        type=float,
        required=True,
        help="Target point spacing (average edge length)",
    )
    p.add_argument(
        "--no-resample",
        dest="resample",
        action="store_false",
        help="Keep the input curve points instead of resampling them",
    )
    p.add_argument(
        "--seed-strategy",
        choices=["equilateral", "grid"],
        default="equilateral",
        help="Interior seed lattice (default: equilateral)",
    )
    p.add_argument(
        "--min-connectivity",
        type=int,
        default=4,
        help="Prune seeds used by this many triangles or fewer (default: 4)",
    )
    p.add_argument(
        "--output",
        type=Path,
        default=Path("mesh.npz"),
        help="Output .npz file (default: ./mesh.npz)",
    )
    p.add_argument(
        "--plot",
        type=Path,
        default=None,
        metavar="FILE",
        help="Save a plot of the mesh to this image file",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    p.set_defaults(func=run_mesh)


def read_curve(path: Path) -> NDArray[np.float64]:
    """Read a two-column curve file."""
    text = path.read_text().replace(",", " ")
    rows = [
        line.split()
        for line in text.splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    ]
    return np.array(rows, dtype=np.float64).reshape(-1, 2)


def run_mesh(args: argparse.Namespace) -> int:
    """Run the ``mesh`` subcommand."""
    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    curve_paths = [args.outer, *args.hole]
    for path in curve_paths:
        if not path.exists():
            print(f"ERROR: Curve file not found: {path}")
            return EXIT_INVALID

    from regionmesh.mesh_generation import MeshingSettings, RegionMeshGenerator

    try:
        curves = [read_curve(path) for path in curve_paths]
        settings = MeshingSettings(
            point_spacing=args.spacing,
            resample_boundary=args.resample,
            seed_strategy=args.seed_strategy,
            min_connectivity=args.min_connectivity,
            visualize=args.plot is not None,
            plot_path=args.plot,
        )
        result = RegionMeshGenerator(settings).generate(curves)
    except (InvalidGeometryError, ValueError) as exc:
        logger.error("Invalid input: %s", exc)
        print(f"ERROR: {exc}")
        return EXIT_INVALID

    if result.skipped:
        for message in result.warnings:
            print(f"WARNING: {message}")
        return EXIT_SKIPPED

    output_path = args.output.resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    np.savez_compressed(
        output_path,
        faces=result.faces,
        vertices=result.vertices,
        boundary_vertices=result.boundary_vertices,
    )
    print(f"Meshed {result.n_vertices} vertices, {result.n_faces} faces -> {output_path}")
    if args.plot is not None:
        print(f"  Plot: {args.plot}")
    return EXIT_OK
