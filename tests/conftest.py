import numpy as np
import pytest

from colortools import Color


@pytest.fixture
def rgb_grid():
    """Every 5th channel value (0..255) in all combinations, as unit floats of shape (N, 3)."""
    axis = np.arange(0, 256, 5) / 255.0
    r, g, b = np.meshgrid(axis, axis, axis, indexing="ij")
    return np.stack([r.ravel(), g.ravel(), b.ravel()], axis=-1)


@pytest.fixture
def orange_red():
    return Color(255, 87, 51)


@pytest.fixture
def dodger_blue():
    return Color(30, 136, 229)
