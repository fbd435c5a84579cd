from __future__ import annotations
import warnings
from typing import Any, Callable, Dict, NamedTuple, Optional, Sequence, Union

from boundednumbers import clamp

from ..colors.color import Color
from ..errors import AlphaDroppedWarning
from ..types.color_types import CMYK, HSB, HSL, LAB, RGB, XYZ, ModelRecord
from ..types.format_type import ColorModel, HUE_360, PERCENT, RGB_MAX, alpha_models, output_precision
from ..utils.num_utils import check_range, normalize_hue, round_half_up
from .constants import D65_WHITE
from .to_cmyk import cmyk_to_unit_rgb, unit_rgb_to_cmyk
from .to_hsl import hsl_to_unit_rgb, unit_rgb_to_hsl
from .to_hsv import hsb_to_unit_rgb, unit_rgb_to_hsb
from .to_lab import lab_to_unit_rgb, unit_rgb_to_lab
from .to_xyz import unit_rgb_to_xyz, xyz_to_unit_rgb

ModelLike = Union[ColorModel, str]

# White computes to Y = 100.00001 through the sRGB matrix
XYZ_TOLERANCE = 0.01
# and L of white to 100.000004
LAB_TOLERANCE = 0.01


class FormattedValue(NamedTuple):
    """A color expressed in one model: rounded components plus a CSS-like string."""
    model: ColorModel
    value: Union[ModelRecord, str]
    css: str
    alpha: Optional[float] = None


# Float records in the model's natural units (percentages for S/L/B/CMYK)
def _to_rgb(color: Color) -> RGB:
    return color.rgb


def _to_hsl(color: Color) -> HSL:
    h, s, l = unit_rgb_to_hsl(*color.unit())
    return HSL(h, s * PERCENT, l * PERCENT)


def _to_hsb(color: Color) -> HSB:
    h, s, b = unit_rgb_to_hsb(*color.unit())
    return HSB(h, s * PERCENT, b * PERCENT)


def _to_cmyk(color: Color) -> CMYK:
    return CMYK(*(v * PERCENT for v in unit_rgb_to_cmyk(*color.unit())))


def _to_lab(color: Color) -> LAB:
    return unit_rgb_to_lab(*color.unit())


def _to_xyz(color: Color) -> XYZ:
    return unit_rgb_to_xyz(*color.unit())


TO_MODEL: Dict[ColorModel, Callable[[Color], ModelRecord]] = {
    ColorModel.RGB: _to_rgb,
    ColorModel.HSL: _to_hsl,
    ColorModel.HSB: _to_hsb,
    ColorModel.CMYK: _to_cmyk,
    ColorModel.LAB: _to_lab,
    ColorModel.XYZ: _to_xyz,
}


def _round_record(record: ModelRecord, model: ColorModel) -> ModelRecord:
    digits = output_precision[model]
    values = [round_half_up(v, digits) for v in record]
    if model in (ColorModel.HSL, ColorModel.HSB):
        # 359.6 rounds to 360, which is hue 0
        values[0] = normalize_hue(values[0])
    if digits == 0:
        values = [int(v) for v in values]
    return type(record)(*values)


def _alpha_text(alpha: float) -> str:
    return f"{round_half_up(alpha, 3):g}"


def _css(model: ColorModel, record: ModelRecord, alpha: Optional[float]) -> str:
    if model == ColorModel.RGB:
        body = f"{record.r}, {record.g}, {record.b}"
    elif model in (ColorModel.HSL, ColorModel.HSB):
        body = f"{record[0]}, {record[1]}%, {record[2]}%"
    elif model == ColorModel.CMYK:
        body = ", ".join(f"{v}%" for v in record)
    else:
        body = ", ".join(f"{v:g}" for v in record)

    name = model.value
    if alpha is not None and model in alpha_models:
        return f"{name}a({body}, {_alpha_text(alpha)})"
    return f"{name}({body})"


def model_values(color: Color, target: ModelLike) -> ModelRecord:
    """
    Float components of ``color`` in ``target`` (no rounding).

    Hue is in degrees [0, 360); HSL/HSB saturation, lightness, brightness and
    CMYK channels are percentages; LAB is CIE L*a*b*; XYZ has Y of white = 100.
    """
    model = ColorModel(target)
    if model not in TO_MODEL:
        raise ValueError(f"{model.value} has no numeric components")
    return TO_MODEL[model](color)


def convert(color: Color, target: ModelLike, names=None) -> FormattedValue:
    """
    Convert a color to another model.

    Args:
        color: Canonical color
        target: Target model (``ColorModel`` or its name; ``"hsv"`` is accepted for HSB)
        names: Named-color table used when ``target`` is ``NAMED``

    Returns:
        FormattedValue with components rounded to the model's output precision
    """
    model = ColorModel(target)

    if color.has_alpha and model not in alpha_models:
        warnings.warn(
            f"{model.value} has no alpha channel; alpha {color.alpha:g} was dropped",
            AlphaDroppedWarning,
            stacklevel=2,
        )

    if model == ColorModel.HEX:
        return FormattedValue(model, color.hex, color.hex, color.alpha)

    if model == ColorModel.NAMED:
        from ..naming import nearest_named_color  # local import to avoid cycles
        name, _ = nearest_named_color(color, names)
        return FormattedValue(model, name, name)

    record = _round_record(TO_MODEL[model](color), model)
    alpha = color.alpha if model in alpha_models else None
    return FormattedValue(model, record, _css(model, record, alpha), alpha)


def format_color(color: Color, target: ModelLike = ColorModel.HEX) -> str:
    """Return only the CSS-like string of :func:`convert`."""
    return convert(color, target).css


## Model components -> canonical color

def _hue_field(name: str, value: Any) -> float:
    return check_range(name, value, 0, HUE_360)


def _percent(name: str, value: Any) -> float:
    return check_range(name, value, 0, PERCENT) / PERCENT


def _from_rgb(values: Sequence[Any]) -> RGB:
    r, g, b = (check_range(n, v, 0, RGB_MAX) / RGB_MAX for n, v in zip(("red", "green", "blue"), values))
    return RGB(r, g, b)


def _from_hsl(values: Sequence[Any]) -> RGB:
    h, s, l = values
    return hsl_to_unit_rgb(_hue_field("hue", h), _percent("saturation", s), _percent("lightness", l))


def _from_hsb(values: Sequence[Any]) -> RGB:
    h, s, b = values
    return hsb_to_unit_rgb(_hue_field("hue", h), _percent("saturation", s), _percent("brightness", b))


def _from_cmyk(values: Sequence[Any]) -> RGB:
    names = ("cyan", "magenta", "yellow", "black")
    return cmyk_to_unit_rgb(*(_percent(n, v) for n, v in zip(names, values)))


def _from_lab(values: Sequence[Any]) -> RGB:
    l, a, b = values
    return lab_to_unit_rgb(
        clamp(check_range("L", l, -LAB_TOLERANCE, 100 + LAB_TOLERANCE), 0.0, 100.0),
        check_range("a", a, -128, 128),
        check_range("b", b, -128, 128),
    )


def _from_xyz(values: Sequence[Any]) -> RGB:
    checked = [check_range(n, v, 0, float(w) + XYZ_TOLERANCE) for n, v, w in zip("XYZ", values, D65_WHITE)]
    return xyz_to_unit_rgb(*checked)


FROM_MODEL: Dict[ColorModel, Callable[[Sequence[Any]], RGB]] = {
    ColorModel.RGB: _from_rgb,
    ColorModel.HSL: _from_hsl,
    ColorModel.HSB: _from_hsb,
    ColorModel.CMYK: _from_cmyk,
    ColorModel.LAB: _from_lab,
    ColorModel.XYZ: _from_xyz,
}

_component_counts = {ColorModel.CMYK: 4}


def to_color(model: ModelLike, values: Sequence[Any], alpha: Optional[float] = None) -> Color:
    """
    Build a canonical color from model components.

    Components use the same units as :func:`model_values` (percentages for
    S/L/B/CMYK, degrees for hue).

    Raises:
        RangeError: when a component is outside its model's domain or the
            result falls outside the sRGB gamut; the error names the field.
    """
    model = ColorModel(model)
    if model not in FROM_MODEL:
        raise ValueError(f"cannot build a color from {model.value} components")
    expected = _component_counts.get(model, 3)
    if len(values) != expected:
        raise ValueError(f"{model.value} expects {expected} components, got {len(values)}")
    r, g, b = FROM_MODEL[model](values)
    return Color.from_unit_rgb(r, g, b, alpha=alpha)
