from colortools.contrast import (
    relative_luminance,
    np_relative_luminance,
    contrast_ratio,
    check_contrast,
    wcag_levels,
    ContrastResult,
    WCAGLevels,
)
from colortools.colors import Color, BLACK, WHITE
import numpy as np
import pytest


def test_luminance_extremes():
    assert relative_luminance(BLACK) == 0.0
    assert relative_luminance(WHITE) == pytest.approx(1.0)
    assert relative_luminance(Color(255, 0, 0)) == pytest.approx(0.2126)
    assert relative_luminance(Color(0, 255, 0)) == pytest.approx(0.7152)
    assert relative_luminance(Color(0, 0, 255)) == pytest.approx(0.0722)


def test_black_on_white_is_21():
    assert contrast_ratio(BLACK, WHITE) == 21.0
    assert contrast_ratio(WHITE, BLACK) == 21.0


def test_same_color_is_1(orange_red):
    assert contrast_ratio(orange_red, orange_red) == 1.0


def test_ratio_is_symmetric_and_bounded(rgb_grid):
    rng = np.random.default_rng(7)
    picks = rgb_grid[rng.integers(0, len(rgb_grid), size=(50, 2))]
    for first, second in picks:
        a = Color(*np.rint(first * 255).astype(int).tolist())
        b = Color(*np.rint(second * 255).astype(int).tolist())
        ratio = contrast_ratio(a, b)
        assert ratio == contrast_ratio(b, a)
        assert 1.0 <= ratio <= 21.0


def test_gray_on_white_thresholds():
    # #767676 is the lightest gray that passes AA on white
    passing = check_contrast(Color(118, 118, 118), WHITE)
    failing = check_contrast(Color(119, 119, 119), WHITE)

    assert isinstance(passing, ContrastResult)
    assert passing.ratio == pytest.approx(4.54, abs=0.01)
    assert passing.levels.aa_normal
    assert failing.ratio == pytest.approx(4.48, abs=0.01)
    assert not failing.levels.aa_normal
    assert failing.levels.aa_large


def test_wcag_levels():
    assert wcag_levels(21.0) == WCAGLevels(True, True, True, True)
    assert wcag_levels(7.0) == WCAGLevels(True, True, True, True)
    assert wcag_levels(4.5) == WCAGLevels(aa_normal=True, aa_large=True, aaa_normal=False, aaa_large=True)
    assert wcag_levels(3.0) == WCAGLevels(aa_normal=False, aa_large=True, aaa_normal=False, aaa_large=False)
    assert wcag_levels(2.9) == WCAGLevels(False, False, False, False)


def test_np_relative_luminance_matches_scalar():
    colors = [BLACK, WHITE, Color(255, 87, 51), Color(30, 136, 229)]
    rgb = np.array([c.unit() for c in colors])
    expected = [relative_luminance(c) for c in colors]
    assert np.allclose(np_relative_luminance(rgb), expected)
    assert np_relative_luminance(np.ones((2, 2, 3))).shape == (2, 2)
