import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from ..types.color_types import HSB, HSL, RGB
from ..utils.num_utils import normalize_hue
from .to_hsl import _hue_from_extrema, np_hue_from_extrema

_wrap = bound_type_to_np_function[BoundType.CYCLIC]


## RGB to HSB (HSV) conversions

def unit_rgb_to_hsb(r: float, g: float, b: float) -> HSB:
    """
    Convert RGB to HSB (also known as HSV).

    Args:
        r, g, b: Components in [0, 1]

    Returns:
        HSB: (hue [0,360), saturation [0,1], brightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    saturation = 0.0 if max_c == 0 else delta / max_c
    hue = _hue_from_extrema(r, g, b, max_c, delta)
    return HSB(hue, saturation, max_c)


def np_unit_rgb_to_hsb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSB.

    Returns:
        hsb: array of shape (..., 3): (hue [0,360), saturation [0,1], brightness [0,1])
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

    saturation = np.zeros_like(max_c)
    mask = max_c > 0
    saturation[mask] = delta[mask] / max_c[mask]

    hue = np_hue_from_extrema(r, g, b, max_c, delta)
    return np.stack([hue, saturation, max_c], axis=-1)


## HSB to RGB conversions

def hsb_to_unit_rgb(h: float, s: float, v: float) -> RGB:
    """
    Convert HSB to RGB.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        v: Brightness in [0, 1]

    Returns:
        RGB: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    chroma = v * s
    x = chroma * (1 - abs((h / 60) % 2 - 1))
    m = v - chroma

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


def np_hsb_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSB to RGB.

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = _wrap(np.asarray(h, dtype=float), 0.0, 360.0)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    def channel(n: int) -> NDArray:
        k = (n + h / 60) % 6
        return v - v * s * np.clip(np.minimum(k, 4 - k), 0, 1)

    return np.stack([channel(5), channel(3), channel(1)], axis=-1)


## HSL <-> HSB

def hsl_to_hsb(h: float, s: float, l: float) -> HSB:
    """Convert HSL to HSB without going through RGB."""
    v = l + s * min(l, 1 - l)
    s_v = 0.0 if v == 0 else 2 * (1 - l / v)
    return HSB(h, s_v, v)


def hsb_to_hsl(h: float, s: float, v: float) -> HSL:
    """Convert HSB to HSL without going through RGB."""
    l = v * (1 - s / 2)
    s_l = 0.0 if l in (0.0, 1.0) else (v - l) / min(l, 1 - l)
    return HSL(h, s_l, l)
