"""
regionmesh command-line interface.

Usage:
    regionmesh mesh [options]       Mesh a region bounded by curve files
    python -m regionmesh <command>  Same as above
"""

from __future__ import annotations

import argparse


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="regionmesh",
        description="Triangular meshing of planar regions bounded by closed curves.",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Register subcommands
    from regionmesh.cli.mesh import add_mesh_parser

    add_mesh_parser(subparsers)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    # Dispatch to the subcommand handler
    result: int = args.func(args)
    return result


__all__ = ["main"]
