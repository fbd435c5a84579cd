from __future__ import annotations
import warnings
from typing import Dict, NamedTuple, Optional

from .accessibility import readable_text_color
from .colors.color import BLACK, WHITE, Color
from .contrast import contrast_ratio, relative_luminance
from .conversions.wrapper import FormattedValue, convert
from .errors import AlphaDroppedWarning
from .naming import ColorTable, nearest_named_color
from .types.format_type import ColorModel

# Above this luminance black text contrasts better than white
LIGHT_LUMINANCE_THRESHOLD = 0.179


class ColorReport(NamedTuple):
    color: Color
    formats: Dict[ColorModel, FormattedValue]
    luminance: float
    is_light: bool
    contrast_white: float
    contrast_black: float
    name: str
    name_delta_e: float
    text_color: Color


def analyze(color: Color, names: Optional[ColorTable] = None) -> ColorReport:
    """
    Describe a color in every model along with its accessibility properties.

    Models without an alpha slot are reported silently for colors carrying
    alpha; ``convert`` warns about the drop when called directly.
    """
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", AlphaDroppedWarning)
        formats = {
            model: convert(color, model)
            for model in ColorModel
            if model != ColorModel.NAMED
        }

    luminance = relative_luminance(color)
    name, delta_e = nearest_named_color(color, names)
    return ColorReport(
        color=color,
        formats=formats,
        luminance=luminance,
        is_light=luminance > LIGHT_LUMINANCE_THRESHOLD,
        contrast_white=contrast_ratio(color, WHITE),
        contrast_black=contrast_ratio(color, BLACK),
        name=name,
        name_delta_e=delta_e,
        text_color=readable_text_color(color),
    )
