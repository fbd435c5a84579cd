"""
Color harmonies: colors related to a base color by fixed hue offsets on the
HSL wheel (or, for monochromatic schemes, by lightness offsets).
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function, clamp

from .colors.color import Color
from .conversions.to_hsl import hsl_to_unit_rgb, unit_rgb_to_hsl
from .conversions.wrapper import FormattedValue, ModelLike, convert
from .types.format_type import HUE_360, PERCENT


class HarmonyType(str, Enum):
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SPLIT_COMPLEMENTARY = "split-complementary"
    MONOCHROMATIC = "monochromatic"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-").replace(" ", "-")
            key = HARMONY_ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        return None


HARMONY_ALIASES = {
    "complement": "complementary",
    "analogue": "analogous",
    "square": "tetradic",
    "split": "split-complementary",
    "splitcomplementary": "split-complementary",
    "mono": "monochromatic",
}

# Hue offsets in degrees, base first
HUE_OFFSETS: Dict[HarmonyType, Tuple[float, ...]] = {
    HarmonyType.COMPLEMENTARY: (0, 180),
    HarmonyType.ANALOGOUS: (0, 30, 330),
    HarmonyType.TRIADIC: (0, 120, 240),
    HarmonyType.TETRADIC: (0, 90, 180, 270),
    HarmonyType.SPLIT_COMPLEMENTARY: (0, 150, 210),
}

# Lightness offsets in percentage points, base first
LIGHTNESS_OFFSETS: Dict[HarmonyType, Tuple[float, ...]] = {
    HarmonyType.MONOCHROMATIC: (0, -20, 20),
}

_wrap_hues = bound_type_to_np_function[BoundType.CYCLIC]


def harmony_hues(hue: float, harmony: Union[HarmonyType, str]) -> NDArray:
    """
    Hues of a harmony around ``hue``, wrapped into [0, 360).

    Lightness-based harmonies keep the base hue for every member.
    """
    harmony = HarmonyType(harmony)
    if harmony in LIGHTNESS_OFFSETS:
        return np.full(len(LIGHTNESS_OFFSETS[harmony]), float(hue))
    offsets = np.asarray(HUE_OFFSETS[harmony], dtype=float)
    return _wrap_hues(hue + offsets, 0.0, float(HUE_360))


def generate_harmony(
    base: Color,
    harmony: Union[HarmonyType, str],
    output_format: Optional[ModelLike] = None,
) -> Union[List[Color], List[FormattedValue]]:
    """
    Generate a color harmony.

    Args:
        base: Base color; its alpha is carried to every member
        harmony: Harmony type (``HarmonyType`` or its name)
        output_format: When given, members are returned as ``FormattedValue``
            in this model instead of ``Color``

    Returns:
        Members in offset order, the base color first

    Raises:
        ValueError: for an unknown harmony name
    """
    harmony = HarmonyType(harmony)
    h, s, l = unit_rgb_to_hsl(*base.unit())

    if harmony in LIGHTNESS_OFFSETS:
        lightnesses = [
            clamp(l + offset / PERCENT, 0.0, 1.0) for offset in LIGHTNESS_OFFSETS[harmony]
        ]
        hsl_values = [(h, s, light) for light in lightnesses]
    else:
        hsl_values = [(hue, s, l) for hue in harmony_hues(h, harmony).tolist()]

    colors = [base]
    for hue, sat, light in hsl_values[1:]:
        colors.append(Color.from_unit_rgb(*hsl_to_unit_rgb(hue, sat, light), alpha=base.alpha))

    if output_format is None:
        return colors
    return [convert(color, output_format) for color in colors]
