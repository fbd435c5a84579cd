import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import CMYK, RGB


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> CMYK:
    """
    Convert RGB to CMYK.

    Pure black has no defined ink split; c, m and y are 0 when k is 1.

    Args:
        r, g, b: Components in [0, 1]

    Returns:
        CMYK: (c, m, y, k) in [0, 1]
    """
    k = 1.0 - max(r, g, b)
    if k >= 1.0:
        return CMYK(0.0, 0.0, 0.0, 1.0)
    denom = 1.0 - k
    return CMYK((1.0 - r - k) / denom, (1.0 - g - k) / denom, (1.0 - b - k) / denom, k)


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> RGB:
    """Convert CMYK in [0, 1] to RGB in [0, 1]."""
    return RGB((1.0 - c) * (1.0 - k), (1.0 - m) * (1.0 - k), (1.0 - y) * (1.0 - k))


def np_unit_rgb_to_cmyk(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to CMYK.

    Args:
        rgb: array of shape (..., 3) in [0, 1]

    Returns:
        cmyk: array of shape (..., 4) in [0, 1]
    """
    rgb = np.asarray(rgb, dtype=float)
    k = np.asarray(1.0 - rgb.max(axis=-1))
    denom = (1.0 - k)[..., None]
    safe = np.where(denom > 0, denom, 1.0)
    cmy = np.where(denom > 0, (1.0 - rgb - k[..., None]) / safe, 0.0)
    return np.concatenate([cmy, k[..., None]], axis=-1)


def np_cmyk_to_unit_rgb(cmyk: NDArray) -> NDArray:
    """Vectorized: Convert CMYK of shape (..., 4) to RGB of shape (..., 3)."""
    cmyk = np.asarray(cmyk, dtype=float)
    return (1.0 - cmyk[..., :3]) * (1.0 - cmyk[..., 3:4])
