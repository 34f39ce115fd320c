"""Tests for the regionmesh command-line interface."""

from __future__ import annotations

import argparse
from pathlib import Path
from unittest.mock import patch

import numpy as np
import pytest

from regionmesh.cli import main
from regionmesh.cli.mesh import (
    EXIT_INVALID,
    EXIT_OK,
    EXIT_SKIPPED,
    add_mesh_parser,
    read_curve,
)


def write_curve(path: Path, points: list[tuple[float, float]]) -> Path:
    """Write a curve file with a header comment."""
    lines = ["# x y"] + [f"{x} {y}" for x, y in points]
    path.write_text("\n".join(lines) + "\n")
    return path


SQUARE = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
HOLE = [(3.5, 3.5), (6.5, 3.5), (6.5, 6.5), (3.5, 6.5)]


class TestMain:
    """Tests for main() dispatch."""

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0
        assert "regionmesh" in capsys.readouterr().out

    def test_mesh_help(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["mesh", "--help"])
        assert exc_info.value.code == 0

    def test_unknown_command(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["extrude"])
        assert exc_info.value.code != 0

    def test_missing_required(self) -> None:
        with pytest.raises(SystemExit):
            main(["mesh", "--spacing", "1"])

    def test_dispatch(self, tmp_path: Path) -> None:
        with patch("regionmesh.cli.mesh.run_mesh", return_value=0) as mock_run:
            # set_defaults binds the function at parser build time
            parser = argparse.ArgumentParser()
            add_mesh_parser(parser.add_subparsers(dest="command"))
            args = parser.parse_args(["mesh", "--outer", "a.txt", "--spacing", "2"])

        assert args.func is mock_run
        assert args.outer == Path("a.txt")
        assert args.spacing == 2.0
        assert args.hole == []
        assert args.resample is True
        assert args.seed_strategy == "equilateral"
        assert args.min_connectivity == 4


class TestReadCurve:
    """Tests for read_curve."""

    def test_whitespace(self, tmp_path: Path) -> None:
        path = write_curve(tmp_path / "c.txt", SQUARE)
        np.testing.assert_array_equal(read_curve(path), np.array(SQUARE))

    def test_commas_and_comments(self, tmp_path: Path) -> None:
        path = tmp_path / "c.csv"
        path.write_text("# header\n0,0\n1, 0\n\n  # note\n1,1\n")

        np.testing.assert_array_equal(read_curve(path), [[0, 0], [1, 0], [1, 1]])

    def test_bad_value(self, tmp_path: Path) -> None:
        path = tmp_path / "c.txt"
        path.write_text("0 0\n1 x\n")

        with pytest.raises(ValueError):
            read_curve(path)


class TestRunMesh:
    """Tests for the mesh subcommand."""

    @pytest.fixture(autouse=True)
    def _needs_triangle(self) -> None:
        pytest.importorskip("triangle")

    def test_writes_npz(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        outer = write_curve(tmp_path / "outer.txt", SQUARE)
        hole = write_curve(tmp_path / "hole.txt", HOLE)
        output = tmp_path / "out" / "mesh.npz"

        code = main(
            [
                "mesh",
                "--outer",
                str(outer),
                "--hole",
                str(hole),
                "--spacing",
                "1",
                "--output",
                str(output),
            ]
        )

        assert code == EXIT_OK
        assert output.exists()
        with np.load(output) as data:
            assert set(data.files) == {"faces", "vertices", "boundary_vertices"}
            assert data["faces"].shape[1] == 3
            assert len(data["boundary_vertices"]) == 52
        assert "Meshed" in capsys.readouterr().out

    def test_plot(self, tmp_path: Path) -> None:
        import matplotlib.pyplot as plt

        plt.close("all")

        outer = write_curve(tmp_path / "outer.txt", SQUARE)
        plot = tmp_path / "mesh.png"

        code = main(
            [
                "mesh",
                "--outer",
                str(outer),
                "--spacing",
                "1",
                "--output",
                str(tmp_path / "mesh.npz"),
                "--plot",
                str(plot),
            ]
        )

        assert code == EXIT_OK
        assert plot.exists()
        assert plt.get_fignums() == []

    def test_skipped(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        outer = write_curve(tmp_path / "outer.txt", SQUARE)
        output = tmp_path / "mesh.npz"

        code = main(["mesh", "--outer", str(outer), "--spacing", "1000", "--output", str(output)])

        assert code == EXIT_SKIPPED
        assert not output.exists()
        assert "WARNING" in capsys.readouterr().out

    def test_invalid_spacing(self, tmp_path: Path) -> None:
        outer = write_curve(tmp_path / "outer.txt", SQUARE)

        code = main(["mesh", "--outer", str(outer), "--spacing=-1"])

        assert code == EXIT_INVALID

    def test_degenerate_curve(self, tmp_path: Path) -> None:
        outer = write_curve(tmp_path / "outer.txt", [(0.0, 0.0), (1.0, 1.0)])

        code = main(["mesh", "--outer", str(outer), "--spacing", "1"])

        assert code == EXIT_INVALID

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["mesh", "--outer", str(tmp_path / "nope.txt"), "--spacing", "1"])

        assert code == EXIT_INVALID
        assert "not found" in capsys.readouterr().out
