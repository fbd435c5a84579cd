"""sRGB transfer curve and the linear sRGB <-> CIE XYZ (D65) transform."""

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB, XYZ
from .constants import (
    LINEAR_TO_SRGB_TH,
    M_SRGB_TO_XYZ,
    M_XYZ_TO_SRGB,
    SRGB_DIVISOR,
    SRGB_GAMMA,
    SRGB_OFFSET,
    SRGB_SLOPE,
    SRGB_TO_LINEAR_TH,
    XYZ_SCALING,
)


def srgb_to_linear(c: float) -> float:
    """Gamma-decompress one sRGB component in [0, 1]."""
    if c <= SRGB_TO_LINEAR_TH:
        return c / SRGB_SLOPE
    return ((c + SRGB_OFFSET) / SRGB_DIVISOR) ** SRGB_GAMMA


def linear_to_srgb(c: float) -> float:
    """Gamma-compress one linear-light component."""
    if c <= LINEAR_TO_SRGB_TH:
        return SRGB_SLOPE * c
    return SRGB_DIVISOR * (c ** (1 / SRGB_GAMMA)) - SRGB_OFFSET


def np_srgb_to_linear(values: NDArray) -> NDArray:
    """Vectorized :func:`srgb_to_linear`."""
    values = np.asarray(values, dtype=float)
    return np.where(
        values <= SRGB_TO_LINEAR_TH,
        values / SRGB_SLOPE,
        ((values + SRGB_OFFSET) / SRGB_DIVISOR) ** SRGB_GAMMA,
    )


def np_linear_to_srgb(values: NDArray) -> NDArray:
    """Vectorized :func:`linear_to_srgb`. Negative inputs follow the linear segment."""
    values = np.asarray(values, dtype=float)
    safe = np.maximum(values, 0.0)
    return np.where(
        values <= LINEAR_TO_SRGB_TH,
        values * SRGB_SLOPE,
        SRGB_DIVISOR * safe ** (1 / SRGB_GAMMA) - SRGB_OFFSET,
    )


def np_unit_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert gamma-encoded RGB to XYZ.

    Args:
        rgb: array of shape (..., 3) in [0, 1]

    Returns:
        xyz: array of shape (..., 3), Y of white is 100
    """
    linear = np_srgb_to_linear(rgb)
    return linear @ M_SRGB_TO_XYZ.T * XYZ_SCALING


def np_xyz_to_unit_rgb(xyz: NDArray) -> NDArray:
    """
    Vectorized: Convert XYZ to gamma-encoded RGB.

    The result is not clamped; values outside [0, 1] mean the color is
    outside the sRGB gamut.
    """
    linear = np.asarray(xyz, dtype=float) / XYZ_SCALING @ M_XYZ_TO_SRGB.T
    return np_linear_to_srgb(linear)


def unit_rgb_to_xyz(r: float, g: float, b: float) -> XYZ:
    """Convert RGB in [0, 1] to CIE XYZ under D65."""
    x, y, z = np_unit_rgb_to_xyz(np.array([r, g, b]))
    return XYZ(float(x), float(y), float(z))


def xyz_to_unit_rgb(x: float, y: float, z: float) -> RGB:
    """Convert CIE XYZ under D65 to (unclamped) RGB in [0, 1]."""
    r, g, b = np_xyz_to_unit_rgb(np.array([x, y, z]))
    return RGB(float(r), float(g), float(b))
