"""
WCAG 2.x relative luminance and contrast ratio.

Contrast is measured on the opaque RGB channels; alpha is not composited.
"""

from __future__ import annotations
from typing import NamedTuple

import numpy as np
from numpy import ndarray as NDArray

from .colors.color import Color
from .conversions.constants import LUMA_WEIGHTS
from .conversions.to_xyz import np_srgb_to_linear, srgb_to_linear

WCAG_AA_NORMAL = 4.5
WCAG_AA_LARGE = 3.0
WCAG_AAA_NORMAL = 7.0
WCAG_AAA_LARGE = 4.5

LUMINANCE_OFFSET = 0.05
MIN_RATIO = 1.0
MAX_RATIO = 21.0


class WCAGLevels(NamedTuple):
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool


class ContrastResult(NamedTuple):
    ratio: float
    levels: WCAGLevels


def relative_luminance(color: Color) -> float:
    """
    WCAG relative luminance of a color.

    Returns:
        Luminance in [0, 1] (0 for black, 1 for white)
    """
    r, g, b = (srgb_to_linear(c) for c in color.unit())
    wr, wg, wb = LUMA_WEIGHTS.tolist()
    return wr * r + wg * g + wb * b


def np_relative_luminance(rgb: NDArray) -> NDArray:
    """Vectorized: luminance of RGB values in [0, 1], shape (..., 3) -> (...)."""
    return np_srgb_to_linear(np.asarray(rgb, dtype=float)) @ LUMA_WEIGHTS


def ratio_from_luminance(lum1: float, lum2: float) -> float:
    lighter, darker = (lum1, lum2) if lum1 >= lum2 else (lum2, lum1)
    return (lighter + LUMINANCE_OFFSET) / (darker + LUMINANCE_OFFSET)


def contrast_ratio(color1: Color, color2: Color) -> float:
    """Contrast ratio in [1, 21]; symmetric in its arguments."""
    return ratio_from_luminance(relative_luminance(color1), relative_luminance(color2))


def wcag_levels(ratio: float) -> WCAGLevels:
    """Classify a contrast ratio against the WCAG AA/AAA thresholds."""
    return WCAGLevels(
        aa_normal=ratio >= WCAG_AA_NORMAL,
        aa_large=ratio >= WCAG_AA_LARGE,
        aaa_normal=ratio >= WCAG_AAA_NORMAL,
        aaa_large=ratio >= WCAG_AAA_LARGE,
    )


def check_contrast(foreground: Color, background: Color) -> ContrastResult:
    """
    Evaluate foreground text on a background.

    Args:
        foreground: Text color
        background: Background color

    Returns:
        ContrastResult with the ratio and its WCAG pass/fail levels
    """
    ratio = contrast_ratio(foreground, background)
    return ContrastResult(ratio, wcag_levels(ratio))
