from colortools.naming import (
    lookup_name,
    nearest_named_color,
    exact_name,
    get_palette,
    list_palettes,
    nearest_palette_color,
    normalize_name,
    PaletteMatch,
)
from colortools.samples import NAMED_COLORS, PALETTES, SHADES
from colortools.colors import Color
import pytest
from .samples import samples_named


def test_named_table():
    assert len(NAMED_COLORS) == 148
    assert NAMED_COLORS["rebeccapurple"] == "#663399"
    with pytest.raises(TypeError):
        NAMED_COLORS["brand"] = "#000000"


def test_normalize_name():
    assert normalize_name(" Dark Slate-Gray ") == "darkslategray"
    assert normalize_name("light_goldenrod_yellow") == "lightgoldenrodyellow"


def test_lookup_name():
    assert lookup_name("Tomato") == Color(255, 99, 71)
    assert lookup_name("dark-slate_gray") == Color(47, 79, 79)
    assert lookup_name("nope") is None


def test_lookup_in_display_style_table():
    table = {"Brand Blue": "#0055FF"}
    assert lookup_name("brand-blue", table) == Color(0, 85, 255)


def test_nearest_named_color_exact_matches():
    for rgb, name in samples_named.items():
        assert nearest_named_color(Color(*rgb)) == (name, 0.0)


def test_nearest_named_color_close_match():
    name, delta_e = nearest_named_color(Color(254, 100, 70))
    assert name == "tomato"
    assert 0.0 < delta_e < 1.5


def test_ties_keep_table_order():
    assert nearest_named_color(Color(0, 255, 255))[0] == "aqua"
    assert exact_name(Color(255, 0, 255)) == "fuchsia"


def test_exact_name():
    assert exact_name(Color(255, 99, 71)) == "tomato"
    assert exact_name(Color(1, 2, 3)) is None
    assert exact_name(Color(1, 2, 3), {"almost black": "#010203"}) == "almost black"


def test_custom_table_for_nearest():
    table = {"dark": "#111111", "light": "#EEEEEE"}
    assert nearest_named_color(Color(40, 40, 40), table)[0] == "dark"
    with pytest.raises(ValueError):
        nearest_named_color(Color(40, 40, 40), {})


def test_palettes():
    assert list_palettes() == ["tailwind"]
    tailwind = get_palette("Tailwind")
    assert tailwind is PALETTES["tailwind"]
    assert tailwind["blue"][500] == "#3B82F6"
    for family, shades in tailwind.items():
        assert tuple(shades) == SHADES, family


def test_unknown_palette():
    with pytest.raises(KeyError):
        get_palette("material")


def test_nearest_palette_color():
    match = nearest_palette_color(Color.from_hex("#3B82F6"))
    assert match == PaletteMatch("blue", 500, Color(0x3B, 0x82, 0xF6), 0.0)

    near = nearest_palette_color(Color(240, 70, 70))
    assert near.family == "red"
