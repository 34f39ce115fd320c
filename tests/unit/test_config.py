"""Unit tests for meshing settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from regionmesh.core.exceptions import InvalidGeometryError
from regionmesh.mesh_generation.config import MeshingSettings, SmoothingConfig


class TestSmoothingConfig:
    """Tests for SmoothingConfig."""

    def test_defaults(self) -> None:
        config = SmoothingConfig()
        assert config.lambda_smooth == 0.5
        assert config.max_iterations == 250
        assert config.tolerance == 0.01

    @pytest.mark.parametrize("value", [0.0, -0.1, 1.5])
    def test_lambda_out_of_range(self, value: float) -> None:
        with pytest.raises(ValidationError):
            SmoothingConfig(lambda_smooth=value)

    def test_negative_iterations(self) -> None:
        with pytest.raises(ValidationError):
            SmoothingConfig(max_iterations=-1)

    def test_frozen(self) -> None:
        config = SmoothingConfig()
        with pytest.raises(ValidationError):
            config.tolerance = 1.0  # type: ignore[misc]


class TestMeshingSettings:
    """Tests for MeshingSettings."""

    def test_defaults(self) -> None:
        settings = MeshingSettings(point_spacing=0.5)

        assert settings.point_spacing == 0.5
        assert settings.resample_boundary is True
        assert settings.visualize is False
        assert settings.plot_path is None
        assert settings.min_connectivity == 4
        assert settings.seed_strategy == "equilateral"
        assert settings.interpolation == "linear"
        assert settings.boundary_subdivision == 1
        assert settings.smoothing == SmoothingConfig()

    @pytest.mark.parametrize("value", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_spacing(self, value: float) -> None:
        """Test non-positive or non-finite spacing is a geometry error."""
        with pytest.raises(InvalidGeometryError, match="Point spacing"):
            MeshingSettings(point_spacing=value)

    def test_spacing_required(self) -> None:
        with pytest.raises(ValidationError):
            MeshingSettings()  # type: ignore[call-arg]

    def test_unknown_field(self) -> None:
        with pytest.raises(ValidationError):
            MeshingSettings(point_spacing=1.0, spacing=2.0)  # type: ignore[call-arg]

    def test_unknown_seed_strategy(self) -> None:
        with pytest.raises(ValidationError):
            MeshingSettings(point_spacing=1.0, seed_strategy="hexagonal")  # type: ignore[arg-type]

    def test_plot_path_coerced(self) -> None:
        settings = MeshingSettings(
            point_spacing=1.0, plot_path="mesh.png"  # type: ignore[arg-type]
        )
        assert settings.plot_path == Path("mesh.png")

    def test_nested_smoothing(self) -> None:
        settings = MeshingSettings(
            point_spacing=1.0, smoothing={"max_iterations": 10}  # type: ignore[arg-type]
        )
        assert settings.smoothing.max_iterations == 10
        assert settings.smoothing.lambda_smooth == 0.5
