import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from ..types.color_types import HSL, RGB
from ..utils.num_utils import normalize_hue

_wrap = bound_type_to_np_function[BoundType.CYCLIC]


def _hue_from_extrema(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """Six-case piecewise hue shared by HSL and HSB."""
    if delta == 0:
        return 0.0
    if max_c == r:
        hue = 60 * (((g - b) / delta) % 6)
    elif max_c == g:
        hue = 60 * ((b - r) / delta + 2)
    else:
        hue = 60 * ((r - g) / delta + 4)
    return normalize_hue(hue)


def np_hue_from_extrema(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, delta: NDArray) -> NDArray:
    """Vectorized :func:`_hue_from_extrema`."""
    hue = np.zeros_like(max_c)
    mask = delta > 0
    mask_r = mask & (max_c == r)
    mask_g = mask & (max_c == g) & ~mask_r
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = 60 * (((g[mask_r] - b[mask_r]) / delta[mask_r]) % 6)
    hue[mask_g] = 60 * ((b[mask_g] - r[mask_g]) / delta[mask_g] + 2)
    hue[mask_b] = 60 * ((r[mask_b] - g[mask_b]) / delta[mask_b] + 4)
    return _wrap(hue, 0.0, 360.0)


## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        HSL: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        saturation = 0.0
    else:
        saturation = delta / (1 - abs(2 * lightness - 1))

    hue = _hue_from_extrema(r, g, b, max_c, delta)
    return HSL(hue, min(saturation, 1.0), lightness)


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros_like(lightness)
    mask_delta = delta > 0
    saturation[mask_delta] = delta[mask_delta] / (1 - np.abs(2 * lightness[mask_delta] - 1))

    hue = np_hue_from_extrema(r, g, b, max_c, delta)
    return np.stack([hue, np.minimum(saturation, 1.0), lightness], axis=-1)


## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        RGB: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    if s == 0:
        return RGB(l, l, l)

    chroma = (1 - abs(2 * l - 1)) * s
    x = chroma * (1 - abs((h / 60) % 2 - 1))
    m = l - chroma / 2

    hue_section = int(h // 60)
    if hue_section == 0:
        r, g, b = chroma, x, 0.0
    elif hue_section == 1:
        r, g, b = x, chroma, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, chroma, x
    elif hue_section == 3:
        r, g, b = 0.0, x, chroma
    elif hue_section == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return RGB(r + m, g + m, b + m)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = _wrap(np.asarray(h, dtype=float), 0.0, 360.0)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    a = s * np.minimum(l, 1 - l)

    def channel(n: int) -> NDArray:
        k = (n + h / 30) % 12
        return l - a * np.clip(np.minimum(k - 3, 9 - k), -1, 1)

    return np.stack([channel(0), channel(8), channel(4)], axis=-1)
