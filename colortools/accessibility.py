from __future__ import annotations
import math
from typing import Iterator, Optional, Tuple

from boundednumbers import clamp

from .colors.color import BLACK, WHITE, Color
from .contrast import (
    MAX_RATIO,
    MIN_RATIO,
    WCAG_AA_NORMAL,
    contrast_ratio,
    ratio_from_luminance,
    relative_luminance,
)
from .conversions.to_hsl import hsl_to_unit_rgb, unit_rgb_to_hsl
from .errors import RangeError, UnreachableError
from .types.format_type import PERCENT
from .utils.num_utils import check_range

# Lightness step in percentage points
LIGHTNESS_STEP = 1.0

DARKER = -1
LIGHTER = 1


def max_steps(step: float) -> int:
    """
    Step limit per direction for a walk of ``step`` points.

    The walk stops at the first lightness bound it reaches, which takes at
    most 100 steps at the default step; the extra step lands exactly on the
    bound despite float error in ``step * i``.
    """
    return math.ceil(PERCENT / step) + 1


def _walk_lightness(target: Color, direction: int, step: float) -> Iterator[Color]:
    """Yield candidates with lightness moved ``step`` points at a time until a bound."""
    h, s, l = unit_rgb_to_hsl(*target.unit())
    lightness = l * PERCENT
    for i in range(1, max_steps(step) + 1):
        candidate_l = clamp(lightness + direction * step * i, 0.0, float(PERCENT))
        rgb = hsl_to_unit_rgb(h, s, candidate_l / PERCENT)
        yield Color.from_unit_rgb(*rgb, alpha=target.alpha)
        if candidate_l in (0.0, float(PERCENT)):
            return


def _search(target: Color, background: Color, min_ratio: float, direction: int, step: float) -> Tuple[Optional[Color], float]:
    best_ratio = MIN_RATIO
    for candidate in _walk_lightness(target, direction, step):
        ratio = contrast_ratio(candidate, background)
        best_ratio = max(best_ratio, ratio)
        if ratio >= min_ratio:
            return candidate, ratio
    return None, best_ratio


def find_accessible_color(
    target: Color,
    background: Color,
    min_ratio: float = WCAG_AA_NORMAL,
    step: float = LIGHTNESS_STEP,
) -> Color:
    """
    Find the color closest in lightness to ``target`` that reaches ``min_ratio``
    against ``background``.

    The target keeps its hue and saturation; its HSL lightness is stepped away
    from the background (darker when the target is not lighter than the
    background), and the opposite direction is tried if that bound is reached
    without success. Contrast is measured on the rounded candidate.

    Args:
        target: Preferred color; returned unchanged if it already passes
        background: Background color
        min_ratio: Required contrast ratio in [1, 21]
        step: Lightness step in percentage points

    Returns:
        The first candidate that meets the ratio (alpha of ``target`` kept)

    Raises:
        RangeError: if ``min_ratio`` is outside [1, 21] or ``step`` is not positive
        UnreachableError: if neither lightness bound reaches ``min_ratio``
    """
    min_ratio = check_range("min_ratio", min_ratio, MIN_RATIO, MAX_RATIO)
    step = check_range("step", step, 0.0, float(PERCENT))
    if step == 0:
        raise RangeError("step", step, 0.0, float(PERCENT))

    target_lum = relative_luminance(target)
    background_lum = relative_luminance(background)
    start_ratio = ratio_from_luminance(target_lum, background_lum)
    if start_ratio >= min_ratio:
        return target

    first = DARKER if target_lum <= background_lum else LIGHTER
    best_ratio = start_ratio
    for direction in (first, -first):
        found, ratio = _search(target, background, min_ratio, direction, step)
        if found is not None:
            return found
        best_ratio = max(best_ratio, ratio)

    raise UnreachableError(min_ratio, best_ratio)


def readable_text_color(background: Color) -> Color:
    """Black or white, whichever contrasts more with ``background`` (black on ties)."""
    if contrast_ratio(BLACK, background) >= contrast_ratio(WHITE, background):
        return BLACK
    return WHITE
