"""Pytest configuration and fixtures for regionmesh tests."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray


@pytest.fixture
def unit_square() -> NDArray[np.float64]:
    """Corners of the unit square, counter-clockwise."""
    return np.array(
        [
            [0.0, 0.0],
            [1.0, 0.0],
            [1.0, 1.0],
            [0.0, 1.0],
        ]
    )


@pytest.fixture
def outer_square() -> NDArray[np.float64]:
    """Corners of a 10 x 10 square."""
    return np.array(
        [
            [0.0, 0.0],
            [10.0, 0.0],
            [10.0, 10.0],
            [0.0, 10.0],
        ]
    )


@pytest.fixture
def inner_square() -> NDArray[np.float64]:
    """Corners of a 3 x 3 hole centred in the 10 x 10 square."""
    return np.array(
        [
            [3.5, 3.5],
            [6.5, 3.5],
            [6.5, 6.5],
            [3.5, 6.5],
        ]
    )


@pytest.fixture
def circle() -> NDArray[np.float64]:
    """Densely sampled circle of radius 5 centred at the origin."""
    t = np.linspace(0.0, 2.0 * np.pi, 200, endpoint=False)
    return np.column_stack([5.0 * np.cos(t), 5.0 * np.sin(t)])
