from colortools.conversions.to_cmyk import unit_rgb_to_cmyk, cmyk_to_unit_rgb, np_unit_rgb_to_cmyk, np_cmyk_to_unit_rgb
import numpy as np
from ..samples import samples_rgb_cmyk


def test_unit_rgb_to_cmyk():
    for rgb, expected in samples_rgb_cmyk.items():
        assert np.allclose(unit_rgb_to_cmyk(*rgb), expected, atol=1e-9)


def test_unit_rgb_to_cmyk_numpy():
    the_matrix = np.array(list(samples_rgb_cmyk.keys()))
    expected = np.array(list(samples_rgb_cmyk.values()))
    cmyk = np_unit_rgb_to_cmyk(the_matrix)

    assert cmyk.shape == (len(samples_rgb_cmyk), 4)
    assert np.allclose(cmyk, expected, atol=1e-9)


def test_black_has_no_ink_split():
    assert tuple(unit_rgb_to_cmyk(0.0, 0.0, 0.0)) == (0.0, 0.0, 0.0, 1.0)
    assert np.array_equal(np_unit_rgb_to_cmyk(np.zeros((2, 3))), [[0, 0, 0, 1], [0, 0, 0, 1]])


def test_cmyk_to_unit_rgb():
    for rgb, cmyk in samples_rgb_cmyk.items():
        assert np.allclose(cmyk_to_unit_rgb(*cmyk), rgb, atol=1e-9)
    expected = np.array(list(samples_rgb_cmyk.keys()))
    assert np.allclose(np_cmyk_to_unit_rgb(np.array(list(samples_rgb_cmyk.values()))), expected, atol=1e-9)
