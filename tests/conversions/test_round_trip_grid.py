from colortools.conversions import (
    np_unit_rgb_to_hsl,
    np_hsl_to_unit_rgb,
    np_unit_rgb_to_hsb,
    np_hsb_to_unit_rgb,
    np_unit_rgb_to_cmyk,
    np_cmyk_to_unit_rgb,
    np_unit_rgb_to_xyz,
    np_xyz_to_unit_rgb,
    np_unit_rgb_to_lab,
    np_lab_to_unit_rgb,
)
from colortools.conversions import model_values, to_color
from colortools.colors import Color, BLACK, WHITE
from colortools.utils import np_round_channels
import numpy as np
import pytest


def _split(arr):
    return arr[..., 0], arr[..., 1], arr[..., 2]


round_trips = {
    "hsl": lambda rgb: np_hsl_to_unit_rgb(*_split(np_unit_rgb_to_hsl(*_split(rgb)))),
    "hsb": lambda rgb: np_hsb_to_unit_rgb(*_split(np_unit_rgb_to_hsb(*_split(rgb)))),
    "cmyk": lambda rgb: np_cmyk_to_unit_rgb(np_unit_rgb_to_cmyk(rgb)),
    "xyz": lambda rgb: np_xyz_to_unit_rgb(np_unit_rgb_to_xyz(rgb)),
    "lab": lambda rgb: np_lab_to_unit_rgb(np_unit_rgb_to_lab(rgb)),
}


@pytest.mark.parametrize("model", list(round_trips))
def test_round_trip_through_model(model, rgb_grid):
    original = np_round_channels(rgb_grid * 255)
    restored = np_round_channels(round_trips[model](rgb_grid) * 255)

    assert restored.shape == original.shape
    assert np.abs(restored - original).max() <= 1


@pytest.mark.parametrize("model", list(round_trips))
def test_round_trip_keeps_leading_shape(model):
    rgb = np.random.default_rng(42).random((3, 4, 3))
    assert np.allclose(round_trips[model](rgb), rgb, atol=1e-6)


scalar_models = ["hsl", "hsb", "cmyk", "lab", "xyz"]

# Every 15th channel value, both ends included
_axis = range(0, 256, 15)
grid_colors = [Color(r, g, b) for r in _axis for g in _axis for b in _axis]


@pytest.mark.parametrize("model", scalar_models)
def test_model_values_round_trip_over_grid(model):
    worst = 0
    for color in grid_colors:
        restored = to_color(model, model_values(color, model))
        worst = max(worst, *(abs(x - y) for x, y in zip(restored.rgb, color.rgb)))
    assert worst <= 1


@pytest.mark.parametrize("model", scalar_models)
@pytest.mark.parametrize("color", [WHITE, BLACK])
def test_model_values_round_trip_extremes(model, color):
    assert to_color(model, model_values(color, model)) == color
