"""
Color literal parser.

Recognized notations, tried in order (case-insensitive, whitespace tolerant):

    #RGB  #RGBA  #RRGGBB  #RRGGBBAA
    rgb(255, 87, 51)      rgba(255, 87, 51, 0.5)    rgb(100% 34% 20% / 50%)
    hsl(11, 100%, 60%)    hsla(11deg 100% 60% / 0.5)
    hsb(11, 80%, 100%)    hsv(...)  hsba(...)  hsva(...)
    cmyk(0%, 66%, 80%, 0%)
    CSS color names       "tomato", "Dark Slate Gray", "rebecca-purple"

Every failure raises :class:`~colortools.errors.ParseError` whose ``token``
is the offending piece of the literal.
"""

from __future__ import annotations
import re
from typing import Callable, List, NamedTuple, Optional, Pattern, Tuple

from .colors.color import Color
from .conversions.to_hsl import hsl_to_unit_rgb
from .conversions.to_hsv import hsb_to_unit_rgb
from .conversions.to_cmyk import cmyk_to_unit_rgb
from .errors import ParseError
from .naming import ColorTable, lookup_name
from .samples.named_colors import NAMED_COLORS
from .types.format_type import ColorModel, HUE_360, PERCENT, RGB_MAX
from .utils.num_utils import normalize_hue, round_half_up


class ParsedColor(NamedTuple):
    color: Color
    format: ColorModel


_NUMBER_RE = re.compile(r"^([+-]?(?:\d+(?:\.\d*)?|\.\d+))(%|deg)?$", re.IGNORECASE)

HEX_RE = re.compile(r"^#(.*)$")
HEX_DIGITS_RE = re.compile(r"^(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
RGB_RE = re.compile(r"^(rgba?)\s*\((.*)\)$", re.IGNORECASE | re.DOTALL)
HSL_RE = re.compile(r"^(hsla?)\s*\((.*)\)$", re.IGNORECASE | re.DOTALL)
HSB_RE = re.compile(r"^(hs[bv]a?)\s*\((.*)\)$", re.IGNORECASE | re.DOTALL)
CMYK_RE = re.compile(r"^(cmyk)\s*\((.*)\)$", re.IGNORECASE | re.DOTALL)
NAME_RE = re.compile(r"^[a-z][a-z0-9 _-]*$", re.IGNORECASE)


## Token helpers

def _split_args(func: str, body: str, count: int, allow_alpha: bool) -> Tuple[List[str], Optional[str]]:
    """Split a function body into ``count`` components plus an optional alpha token."""
    alpha = None
    main = body
    if "/" in body:
        if not allow_alpha:
            raise ParseError(f"{func}() does not take an alpha component", token=body.strip())
        main, alpha = body.split("/", 1)
        alpha = alpha.strip()
        if not alpha or "/" in alpha:
            raise ParseError(f"malformed alpha in {func}()", token=body.strip())

    if "," in main:
        tokens = [t.strip() for t in main.split(",")]
    else:
        tokens = main.split()

    if any(not t for t in tokens):
        raise ParseError(f"empty component in {func}()", token=body.strip())

    # legacy comma form carries alpha as a trailing component
    if alpha is None and allow_alpha and len(tokens) == count + 1:
        alpha = tokens.pop()

    if len(tokens) != count:
        raise ParseError(
            f"{func}() expects {count} components, got {len(tokens)}", token=body.strip()
        )
    return tokens, alpha


def _number(token: str, units: Tuple[Optional[str], ...]) -> Tuple[float, Optional[str]]:
    match = _NUMBER_RE.match(token)
    if not match:
        raise ParseError(f"invalid number: {token!r}", token=token)
    unit = match.group(2).lower() if match.group(2) else None
    if unit not in units:
        raise ParseError(f"unexpected unit in {token!r}", token=token)
    return float(match.group(1)), unit


def _in_range(token: str, value: float, minimum: float, maximum: float, field: str) -> float:
    if not minimum <= value <= maximum:
        raise ParseError(
            f"{field} {token!r} is outside [{minimum:g}, {maximum:g}]", token=token
        )
    return value


def _channel(token: str, field: str) -> int:
    value, unit = _number(token, (None, "%"))
    if unit == "%":
        value = _in_range(token, value, 0, PERCENT, field) * RGB_MAX / PERCENT
    else:
        value = _in_range(token, value, 0, RGB_MAX, field)
    return int(round_half_up(value))


def _hue(token: str) -> float:
    value, _ = _number(token, (None, "deg"))
    return normalize_hue(_in_range(token, value, 0, HUE_360, "hue"))


def _percent(token: str, field: str) -> float:
    value, _ = _number(token, (None, "%"))
    return _in_range(token, value, 0, PERCENT, field) / PERCENT


def _alpha(token: Optional[str]) -> Optional[float]:
    if token is None:
        return None
    value, unit = _number(token, (None, "%"))
    if unit == "%":
        return _in_range(token, value, 0, PERCENT, "alpha") / PERCENT
    return _in_range(token, value, 0, 1, "alpha")


## Notation handlers

def _parse_hex(match: re.Match, names: ColorTable) -> Color:
    digits = match.group(1)
    if not HEX_DIGITS_RE.match(digits):
        raise ParseError(f"invalid hex color: {match.group(0)!r}", token=match.group(0))
    return Color.from_hex(digits)


def _parse_rgb(match: re.Match, names: ColorTable) -> Color:
    tokens, alpha = _split_args(match.group(1).lower(), match.group(2), 3, allow_alpha=True)
    channels = [_channel(t, f) for t, f in zip(tokens, Color.channel_names)]
    return Color(*channels, alpha=_alpha(alpha))


def _parse_hue_model(match: re.Match, third: str, to_unit_rgb: Callable) -> Color:
    tokens, alpha = _split_args(match.group(1).lower(), match.group(2), 3, allow_alpha=True)
    h = _hue(tokens[0])
    s = _percent(tokens[1], "saturation")
    v = _percent(tokens[2], third)
    return Color.from_unit_rgb(*to_unit_rgb(h, s, v), alpha=_alpha(alpha))


def _parse_hsl(match: re.Match, names: ColorTable) -> Color:
    return _parse_hue_model(match, "lightness", hsl_to_unit_rgb)


def _parse_hsb(match: re.Match, names: ColorTable) -> Color:
    return _parse_hue_model(match, "brightness", hsb_to_unit_rgb)


def _parse_cmyk(match: re.Match, names: ColorTable) -> Color:
    tokens, _ = _split_args("cmyk", match.group(2), 4, allow_alpha=False)
    fields = ("cyan", "magenta", "yellow", "black")
    c, m, y, k = (_percent(t, f) for t, f in zip(tokens, fields))
    return Color.from_unit_rgb(*cmyk_to_unit_rgb(c, m, y, k))


def _parse_name(match: re.Match, names: ColorTable) -> Color:
    token = match.group(0)
    color = lookup_name(token, names)
    if color is None:
        raise ParseError(f"unknown color name: {token!r}", token=token)
    return color


ParseRule = Tuple[ColorModel, Pattern, Callable[[re.Match, ColorTable], Color]]

PARSE_RULES: Tuple[ParseRule, ...] = (
    (ColorModel.HEX, HEX_RE, _parse_hex),
    (ColorModel.RGB, RGB_RE, _parse_rgb),
    (ColorModel.HSL, HSL_RE, _parse_hsl),
    (ColorModel.HSB, HSB_RE, _parse_hsb),
    (ColorModel.CMYK, CMYK_RE, _parse_cmyk),
    (ColorModel.NAMED, NAME_RE, _parse_name),
)


def parse(text: str, names: ColorTable = NAMED_COLORS) -> ParsedColor:
    """
    Parse a color literal.

    Args:
        text: Color literal in any supported notation
        names: Name -> hex table used for named colors

    Returns:
        ParsedColor(color, format) where ``format`` is the detected notation

    Raises:
        ParseError: if the literal is not recognized or a component is invalid
    """
    if not isinstance(text, str):
        raise ParseError(
            f"color literal must be a string, got {type(text).__name__}", token=repr(text)
        )
    literal = text.strip()
    if not literal:
        raise ParseError("empty color literal", token=text)

    for model, pattern, handler in PARSE_RULES:
        match = pattern.match(literal)
        if match:
            return ParsedColor(handler(match, names), model)

    raise ParseError(f"unrecognized color format: {literal!r}", token=literal)


def parse_color(text: str, names: ColorTable = NAMED_COLORS) -> Color:
    """Shortcut for ``parse(text, names).color``."""
    return parse(text, names).color
