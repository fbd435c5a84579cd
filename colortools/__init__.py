"""colortools: color parsing, conversion, harmony and accessibility utilities."""

from .colors import Color, BLACK, WHITE
from .types import ColorModel, RGB, HSL, HSB, CMYK, XYZ, LAB
from .errors import (
    ColorToolsError,
    ParseError,
    RangeError,
    UnreachableError,
    AlphaDroppedWarning,
)
from .parser import parse, parse_color, ParsedColor
from .conversions import (
    convert,
    format_color,
    model_values,
    to_color,
    FormattedValue,
)
from .harmony import generate_harmony, harmony_hues, HarmonyType
from .mixer import mix, np_mix, BlendMode
from .contrast import (
    relative_luminance,
    np_relative_luminance,
    contrast_ratio,
    check_contrast,
    wcag_levels,
    ContrastResult,
    WCAGLevels,
)
from .accessibility import find_accessible_color, readable_text_color
from .vision import simulate, simulate_color_blindness, np_simulate, Deficiency
from .difference import delta_e_cie76, delta_e_ciede2000, color_distance
from .naming import (
    lookup_name,
    nearest_named_color,
    exact_name,
    get_palette,
    list_palettes,
    nearest_palette_color,
    PaletteMatch,
)
from .analysis import analyze, ColorReport
from .samples import NAMED_COLORS, PALETTES

__all__ = [
    # color and records
    "Color",
    "BLACK",
    "WHITE",
    "ColorModel",
    "RGB",
    "HSL",
    "HSB",
    "CMYK",
    "XYZ",
    "LAB",
    # errors
    "ColorToolsError",
    "ParseError",
    "RangeError",
    "UnreachableError",
    "AlphaDroppedWarning",
    # parsing and conversion
    "parse",
    "parse_color",
    "ParsedColor",
    "convert",
    "format_color",
    "model_values",
    "to_color",
    "FormattedValue",
    # harmony and mixing
    "generate_harmony",
    "harmony_hues",
    "HarmonyType",
    "mix",
    "np_mix",
    "BlendMode",
    # contrast and accessibility
    "relative_luminance",
    "np_relative_luminance",
    "contrast_ratio",
    "check_contrast",
    "wcag_levels",
    "ContrastResult",
    "WCAGLevels",
    "find_accessible_color",
    "readable_text_color",
    # vision
    "simulate",
    "simulate_color_blindness",
    "np_simulate",
    "Deficiency",
    # difference, naming, analysis
    "delta_e_cie76",
    "delta_e_ciede2000",
    "color_distance",
    "lookup_name",
    "nearest_named_color",
    "exact_name",
    "get_palette",
    "list_palettes",
    "nearest_palette_color",
    "PaletteMatch",
    "analyze",
    "ColorReport",
    # tables
    "NAMED_COLORS",
    "PALETTES",
]
