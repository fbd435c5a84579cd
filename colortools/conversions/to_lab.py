import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import LAB, RGB, XYZ
from .constants import D65_WHITE, LAB_DELTA, LAB_EPSILON, LAB_KAPPA
from .to_xyz import np_unit_rgb_to_xyz, np_xyz_to_unit_rgb


def _np_lab_f(t: NDArray) -> NDArray:
    return np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16) / 116)


def _np_lab_f_inv(t: NDArray) -> NDArray:
    return np.where(t > LAB_DELTA, t ** 3, (116 * t - 16) / LAB_KAPPA)


def np_xyz_to_lab(xyz: NDArray) -> NDArray:
    """
    Vectorized: Convert XYZ (Y of white = 100) to CIE L*a*b* under D65.

    Args:
        xyz: array of shape (..., 3)

    Returns:
        lab: array of shape (..., 3)
    """
    f = _np_lab_f(np.asarray(xyz, dtype=float) / D65_WHITE)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)


def np_lab_to_xyz(lab: NDArray) -> NDArray:
    """Vectorized: Convert CIE L*a*b* to XYZ under D65."""
    lab = np.asarray(lab, dtype=float)
    fy = (lab[..., 0] + 16) / 116
    fx = fy + lab[..., 1] / 500
    fz = fy - lab[..., 2] / 200
    return _np_lab_f_inv(np.stack([fx, fy, fz], axis=-1)) * D65_WHITE


def np_unit_rgb_to_lab(rgb: NDArray) -> NDArray:
    """Vectorized: RGB in [0, 1] to L*a*b*."""
    return np_xyz_to_lab(np_unit_rgb_to_xyz(rgb))


def np_lab_to_unit_rgb(lab: NDArray) -> NDArray:
    """Vectorized: L*a*b* to (unclamped) RGB in [0, 1]."""
    return np_xyz_to_unit_rgb(np_lab_to_xyz(lab))


def xyz_to_lab(x: float, y: float, z: float) -> LAB:
    """Convert XYZ to CIE L*a*b*."""
    l, a, b = np_xyz_to_lab(np.array([x, y, z]))
    return LAB(float(l), float(a), float(b))


def lab_to_xyz(l: float, a: float, b: float) -> XYZ:
    """Convert CIE L*a*b* to XYZ."""
    x, y, z = np_lab_to_xyz(np.array([l, a, b]))
    return XYZ(float(x), float(y), float(z))


def unit_rgb_to_lab(r: float, g: float, b: float) -> LAB:
    """Direct RGB to LAB conversion."""
    l, a, b_ = np_unit_rgb_to_lab(np.array([r, g, b]))
    return LAB(float(l), float(a), float(b_))


def lab_to_unit_rgb(l: float, a: float, b: float) -> RGB:
    """Direct LAB to RGB conversion."""
    r, g, b_ = np_lab_to_unit_rgb(np.array([l, a, b]))
    return RGB(float(r), float(g), float(b_))
