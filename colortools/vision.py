"""
Color-vision deficiency simulation.

Colors are gamma-decompressed to linear sRGB, multiplied by a 3x3 deficiency
matrix, clamped to [0, 1] and compressed again. The dichromacy matrices are
Machado, Oliveira & Fernandes (2009) at severity 1.0; achromatopsia projects
onto Rec. 709 luminance.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, Union

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from .colors.color import Color
from .conversions.to_xyz import np_linear_to_srgb, np_srgb_to_linear
from .conversions.constants import LUMA_WEIGHTS
from .types.format_type import RGB_MAX
from .utils.num_utils import np_round_channels


class Deficiency(str, Enum):
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    ACHROMATOPSIA = "achromatopsia"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        return None


DEFICIENCY_MATRICES: Dict[Deficiency, NDArray] = {
    Deficiency.PROTANOPIA: np.array([
        [0.152286, 1.052583, -0.204868],
        [0.114503, 0.786281, 0.099216],
        [-0.003882, -0.048116, 1.051998],
    ]),
    Deficiency.DEUTERANOPIA: np.array([
        [0.367322, 0.860646, -0.227968],
        [0.280085, 0.672501, 0.047413],
        [-0.011820, 0.042940, 0.968881],
    ]),
    Deficiency.TRITANOPIA: np.array([
        [1.255528, -0.076749, -0.178779],
        [-0.078411, 0.930809, 0.147602],
        [0.004733, 0.691367, 0.303900],
    ]),
    Deficiency.ACHROMATOPSIA: np.tile(LUMA_WEIGHTS, (3, 1)),
}

for _matrix in DEFICIENCY_MATRICES.values():
    _matrix.setflags(write=False)

_clip = bound_type_to_np_function[BoundType.CLAMP]


def np_simulate(rgb: NDArray, deficiency: Union[Deficiency, str]) -> NDArray:
    """
    Vectorized simulation.

    Args:
        rgb: sRGB values in [0, 1], shape (..., 3)
        deficiency: Deficiency (``Deficiency`` or its name)

    Returns:
        Simulated sRGB values in [0, 1], shape (..., 3)
    """
    matrix = DEFICIENCY_MATRICES[Deficiency(deficiency)]
    linear = np_srgb_to_linear(np.asarray(rgb, dtype=float))
    simulated = _clip(linear @ matrix.T, 0.0, 1.0)
    return np_linear_to_srgb(simulated)


def simulate(color: Color, deficiency: Union[Deficiency, str]) -> Color:
    """Simulate how ``color`` appears under one deficiency; alpha is preserved."""
    rgb = np_simulate(color.to_array(), deficiency) * RGB_MAX
    return Color(*np_round_channels(rgb).tolist(), alpha=color.alpha)


def simulate_color_blindness(color: Color) -> Dict[Deficiency, Color]:
    """Simulate every deficiency, in declaration order."""
    return {deficiency: simulate(color, deficiency) for deficiency in Deficiency}
