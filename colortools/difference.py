"""
Perceptual color difference (Delta E) in CIE L*a*b*.

CIE76 is the Euclidean distance; CIEDE2000 follows Sharma, Wu & Dalal (2005)
with unit weighting factors.
"""

from __future__ import annotations
import math
from typing import Callable, Dict, Sequence

from .colors.color import Color
from .conversions.to_lab import unit_rgb_to_lab

LabLike = Sequence[float]

POW7_25 = 25 ** 7


def delta_e_cie76(lab1: LabLike, lab2: LabLike) -> float:
    """Euclidean distance between two L*a*b* triples."""
    return math.dist(tuple(lab1), tuple(lab2))


def delta_e_ciede2000(lab1: LabLike, lab2: LabLike) -> float:
    """
    CIEDE2000 color difference between two L*a*b* triples.

    Args:
        lab1: (L, a, b) of the reference color
        lab2: (L, a, b) of the sample color

    Returns:
        Delta E 2000 (0 for identical colors)
    """
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2

    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)
    C_bar_7 = ((C1 + C2) / 2) ** 7
    G = 0.5 * (1 - math.sqrt(C_bar_7 / (C_bar_7 + POW7_25)))

    a1_prime = (1 + G) * a1
    a2_prime = (1 + G) * a2
    C1_prime = math.hypot(a1_prime, b1)
    C2_prime = math.hypot(a2_prime, b2)

    h1_prime = math.degrees(math.atan2(b1, a1_prime)) % 360
    h2_prime = math.degrees(math.atan2(b2, a2_prime)) % 360

    delta_L_prime = L2 - L1
    delta_C_prime = C2_prime - C1_prime
    chroma_product = C1_prime * C2_prime

    if chroma_product == 0:
        delta_h_prime = 0.0
    elif abs(h2_prime - h1_prime) <= 180:
        delta_h_prime = h2_prime - h1_prime
    elif h2_prime - h1_prime > 180:
        delta_h_prime = h2_prime - h1_prime - 360
    else:
        delta_h_prime = h2_prime - h1_prime + 360

    delta_H_prime = 2 * math.sqrt(chroma_product) * math.sin(math.radians(delta_h_prime) / 2)

    L_prime_bar = (L1 + L2) / 2
    C_prime_bar = (C1_prime + C2_prime) / 2

    if chroma_product == 0:
        h_prime_bar = h1_prime + h2_prime
    elif abs(h1_prime - h2_prime) <= 180:
        h_prime_bar = (h1_prime + h2_prime) / 2
    elif h1_prime + h2_prime < 360:
        h_prime_bar = (h1_prime + h2_prime + 360) / 2
    else:
        h_prime_bar = (h1_prime + h2_prime - 360) / 2

    T = (
        1
        - 0.17 * math.cos(math.radians(h_prime_bar - 30))
        + 0.24 * math.cos(math.radians(2 * h_prime_bar))
        + 0.32 * math.cos(math.radians(3 * h_prime_bar + 6))
        - 0.20 * math.cos(math.radians(4 * h_prime_bar - 63))
    )

    L_50_sq = (L_prime_bar - 50) ** 2
    S_L = 1 + (0.015 * L_50_sq) / math.sqrt(20 + L_50_sq)
    S_C = 1 + 0.045 * C_prime_bar
    S_H = 1 + 0.015 * C_prime_bar * T

    delta_theta = 30 * math.exp(-(((h_prime_bar - 275) / 25) ** 2))
    C_prime_bar_7 = C_prime_bar ** 7
    R_C = 2 * math.sqrt(C_prime_bar_7 / (C_prime_bar_7 + POW7_25))
    R_T = -R_C * math.sin(math.radians(2 * delta_theta))

    dL = delta_L_prime / S_L
    dC = delta_C_prime / S_C
    dH = delta_H_prime / S_H
    return math.sqrt(max(0.0, dL ** 2 + dC ** 2 + dH ** 2 + R_T * dC * dH))


DELTA_E_METHODS: Dict[str, Callable[[LabLike, LabLike], float]] = {
    "cie76": delta_e_cie76,
    "ciede2000": delta_e_ciede2000,
}


def color_distance(color1: Color, color2: Color, method: str = "ciede2000") -> float:
    """
    Perceptual distance between two colors (alpha is ignored).

    Args:
        color1: First color
        color2: Second color
        method: ``"ciede2000"`` (default) or ``"cie76"``

    Raises:
        ValueError: for an unknown method name
    """
    try:
        delta_e = DELTA_E_METHODS[method.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown delta E method: {method!r}. Expected one of {sorted(DELTA_E_METHODS)}"
        ) from None
    return delta_e(unit_rgb_to_lab(*color1.unit()), unit_rgb_to_lab(*color2.unit()))
