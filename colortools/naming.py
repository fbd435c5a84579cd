"""
Named-color and curated-palette lookups.

Tables map names to hex strings and are only read, never copied or mutated.
Nearest-match searches rank candidates by CIEDE2000 and keep the first entry
in table order on ties.
"""

from __future__ import annotations
from typing import Iterator, List, Mapping, NamedTuple, Optional, Tuple


from .colors.color import Color
from .conversions.to_lab import unit_rgb_to_lab
from .difference import delta_e_ciede2000
from .samples.named_colors import NAMED_COLORS
from .samples.palettes import PALETTES

ColorTable = Mapping[str, str]

_IGNORED_CHARS = str.maketrans("", "", " -_")


class PaletteMatch(NamedTuple):
    family: str
    shade: int
    color: Color
    delta_e: float


def normalize_name(name: str) -> str:
    """Lowercase and drop spaces, hyphens and underscores (``"Dark Slate-Gray"`` -> ``"darkslategray"``)."""
    return name.strip().lower().translate(_IGNORED_CHARS)


def lookup_name(name: str, names: Optional[ColorTable] = None) -> Optional[Color]:
    """Return the color registered under ``name``, or ``None``."""
    names = NAMED_COLORS if names is None else names
    key = normalize_name(name)
    value = names.get(key)
    if value is None:
        # custom tables may use display-style keys
        value = next((v for k, v in names.items() if normalize_name(k) == key), None)
    return None if value is None else Color.from_hex(value)


def _nearest(color: Color, candidates: List[Tuple[object, str]]) -> Tuple[object, Color, float]:
    target = unit_rgb_to_lab(*color.unit())

    best_index, best_delta = 0, float("inf")
    colors = []
    for i, (_, value) in enumerate(candidates):
        candidate = Color.from_hex(value)
        colors.append(candidate)
        delta = delta_e_ciede2000(target, unit_rgb_to_lab(*candidate.unit()))
        if delta < best_delta:
            best_index, best_delta = i, delta
    return candidates[best_index][0], colors[best_index], best_delta


def nearest_named_color(color: Color, names: Optional[ColorTable] = None) -> Tuple[str, float]:
    """
    Find the closest named color.

    Args:
        color: Color to name (alpha is ignored)
        names: Name -> hex table, defaults to the CSS named colors

    Returns:
        (name, delta_e) where delta_e is the CIEDE2000 distance
    """
    names = NAMED_COLORS if names is None else names
    if not names:
        raise ValueError("named-color table is empty")
    name, _, delta = _nearest(color, list(names.items()))
    return name, delta


def exact_name(color: Color, names: Optional[ColorTable] = None) -> Optional[str]:
    """First name whose color has exactly the same RGB channels, or ``None``."""
    names = NAMED_COLORS if names is None else names
    for name, value in names.items():
        if Color.from_hex(value).rgb == color.rgb:
            return name
    return None


def list_palettes() -> List[str]:
    return list(PALETTES)


def get_palette(name: str) -> Mapping[str, Mapping[int, str]]:
    """
    Return a curated palette (family -> shade -> hex).

    Raises:
        KeyError: if no palette has that name
    """
    try:
        return PALETTES[name.strip().lower()]
    except KeyError:
        raise KeyError(f"Unknown palette: {name!r}. Available: {list_palettes()}") from None


def iter_palette(name: str) -> Iterator[Tuple[str, int, str]]:
    """Yield ``(family, shade, hex)`` for every entry of a palette."""
    for family, shades in get_palette(name).items():
        for shade, value in shades.items():
            yield family, shade, value


def nearest_palette_color(color: Color, palette: str = "tailwind") -> PaletteMatch:
    """Closest palette entry to ``color`` by CIEDE2000."""
    candidates = [((family, shade), value) for family, shade, value in iter_palette(palette)]
    (family, shade), match, delta = _nearest(color, candidates)
    return PaletteMatch(family, shade, match, delta)
