from colortools.conversions.to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl, hsl_to_unit_rgb, np_hsl_to_unit_rgb
import numpy as np
from ..samples import samples_rgb_hsl


def test_unit_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = unit_rgb_to_hsl(r, g, b)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(s_out - s_exp) < 1e-9
        assert abs(l_out - l_exp) < 1e-9


def test_unit_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    hsl = np_unit_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert hsl.shape == expected.shape
    assert np.allclose(hsl, expected, atol=1e-9)


def test_hsl_to_unit_rgb():
    for (r, g, b), (h, s, l) in samples_rgb_hsl.items():
        r_out, g_out, b_out = hsl_to_unit_rgb(h, s, l)

        assert abs(r_out - r) < 1e-9
        assert abs(g_out - g) < 1e-9
        assert abs(b_out - b) < 1e-9


def test_hsl_to_unit_rgb_numpy():
    expected = np.array(list(samples_rgb_hsl.keys()))
    the_matrix = np.array(list(samples_rgb_hsl.values()))
    rgb = np_hsl_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(rgb, expected, atol=1e-9)


def test_hue_is_wrapped():
    assert np.allclose(hsl_to_unit_rgb(360.0, 1.0, 0.5), (1.0, 0.0, 0.0))
    assert np.allclose(hsl_to_unit_rgb(-120.0, 1.0, 0.5), (0.0, 0.0, 1.0))
    assert np.allclose(np_hsl_to_unit_rgb(480.0, 1.0, 0.5), (0.0, 1.0, 0.0))


def test_orange_red_hue():
    h, s, l = unit_rgb_to_hsl(1.0, 87 / 255, 51 / 255)
    assert abs(h - 10.588235) < 1e-5
    assert abs(s - 1.0) < 1e-9
    assert abs(l - 0.6) < 1e-9


def test_scalar_and_numpy_agree(rgb_grid):
    hsl = np_unit_rgb_to_hsl(rgb_grid[..., 0], rgb_grid[..., 1], rgb_grid[..., 2])
    for index in (0, 17, 4321, len(rgb_grid) - 1):
        assert np.allclose(hsl[index], unit_rgb_to_hsl(*rgb_grid[index]), atol=1e-9)
