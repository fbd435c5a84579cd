import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp
from boundednumbers.functions import cyclic_wrap_float

from ..errors import RangeError
from ..types.format_type import HUE_360, RGB_MAX


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with ties going up (127.5 -> 128), independent of float banker's rounding."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_channel(value: float) -> int:
    """Round a 0-255 float to an integer channel, absorbing floating noise at the edges."""
    return int(clamp(math.floor(value + 0.5), 0, RGB_MAX))


def np_round_channels(values: NDArray) -> NDArray:
    """Vectorized :func:`round_channel`."""
    return np.clip(np.floor(np.asarray(values, dtype=float) + 0.5), 0, RGB_MAX).astype(int)


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return cyclic_wrap_float(h, 0.0, float(HUE_360))


def check_range(field: str, value, minimum: float, maximum: float) -> float:
    """
    Validate that ``value`` is a real number inside ``[minimum, maximum]``.

    Raises:
        RangeError: naming ``field`` when the value is outside the range or NaN.
        TypeError: when the value is not a real number.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise TypeError(f"{field} must be a real number, got {type(value).__name__}")
    if math.isnan(value) or not minimum <= value <= maximum:
        raise RangeError(field, value, minimum, maximum)
    return float(value)
