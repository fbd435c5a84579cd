from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Optional, Union

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp

from .colors.color import Color
from .utils.num_utils import check_range, np_round_channels
from .types.format_type import RGB_MAX


class BlendMode(str, Enum):
    NORMAL = "normal"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    DIFFERENCE = "difference"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        return None


## Separable blend functions on unit channels (base, blend) -> result

def _multiply(a: NDArray, b: NDArray) -> NDArray:
    return a * b


def _screen(a: NDArray, b: NDArray) -> NDArray:
    return 1.0 - (1.0 - a) * (1.0 - b)


def _overlay(a: NDArray, b: NDArray) -> NDArray:
    return np.where(a <= 0.5, 2.0 * a * b, 1.0 - 2.0 * (1.0 - a) * (1.0 - b))


def _difference(a: NDArray, b: NDArray) -> NDArray:
    return np.abs(a - b)


BLEND_FUNCTIONS: Dict[BlendMode, Callable[[NDArray, NDArray], NDArray]] = {
    BlendMode.MULTIPLY: _multiply,
    BlendMode.SCREEN: _screen,
    BlendMode.OVERLAY: _overlay,
    BlendMode.DARKEN: np.minimum,
    BlendMode.LIGHTEN: np.maximum,
    BlendMode.DIFFERENCE: _difference,
}


def np_mix(rgb1: NDArray, rgb2: NDArray, ratio: float, mode: Union[BlendMode, str] = BlendMode.NORMAL) -> NDArray:
    """
    Vectorized mix of 0-255 channel arrays of shape (..., 3), unrounded.

    ``normal`` interpolates linearly. Other modes compute the blend ``B`` of
    the two colors and interpolate color1 -> B over ratio [0, 0.5] and
    B -> color2 over [0.5, 1].
    """
    mode = BlendMode(mode)
    a = np.asarray(rgb1, dtype=float)
    b = np.asarray(rgb2, dtype=float)

    if mode == BlendMode.NORMAL:
        return a * (1.0 - ratio) + b * ratio

    blended = BLEND_FUNCTIONS[mode](a / RGB_MAX, b / RGB_MAX) * RGB_MAX
    if ratio <= 0.5:
        t = ratio * 2.0
        return a * (1.0 - t) + blended * t
    t = (ratio - 0.5) * 2.0
    return blended * (1.0 - t) + b * t


def _mix_alpha(color1: Color, color2: Color, ratio: float) -> Optional[float]:
    if ratio == 0.0:
        return color1.alpha
    if ratio == 1.0:
        return color2.alpha
    if not (color1.has_alpha or color2.has_alpha):
        return None
    return clamp(color1.opacity * (1.0 - ratio) + color2.opacity * ratio, 0.0, 1.0)


def mix(
    color1: Color,
    color2: Color,
    ratio: float = 0.5,
    mode: Union[BlendMode, str] = BlendMode.NORMAL,
) -> Color:
    """
    Mix two colors.

    Args:
        color1: First color (ratio 0)
        color2: Second color (ratio 1)
        ratio: Fraction of ``color2`` in [0, 1]
        mode: Blend mode (``BlendMode`` or its name)

    Returns:
        Mixed color, channels rounded half-up; alpha is interpolated when
        either input carries one (a missing alpha counts as opaque). At
        ratio 0 or 1 the matching input is returned with its own alpha.

    Raises:
        RangeError: if ratio is outside [0, 1]
        ValueError: for an unknown blend mode
    """
    ratio = check_range("ratio", ratio, 0.0, 1.0)
    rgb = np_mix(color1.value, color2.value, ratio, mode)
    channels = np_round_channels(rgb).tolist()
    return Color(*channels, alpha=_mix_alpha(color1, color2, ratio))
