from colortools.parser import parse, parse_color, ParsedColor
from colortools.colors import Color, BLACK, WHITE
from colortools.errors import ParseError
from colortools.samples import NAMED_COLORS
from colortools.types import ColorModel
import pytest
from .samples import samples_named


@pytest.mark.parametrize("text, expected", [
    ("#FF5733", Color(255, 87, 51)),
    ("#ff5733", Color(255, 87, 51)),
    ("#f53", Color(255, 85, 51)),
    ("  #FF5733  ", Color(255, 87, 51)),
    ("#FF573380", Color(255, 87, 51, alpha=128 / 255)),
    ("#F538", Color(255, 85, 51, alpha=136 / 255)),
])
def test_hex(text, expected):
    result = parse(text)
    assert result == ParsedColor(expected, ColorModel.HEX)


@pytest.mark.parametrize("text, expected", [
    ("rgb(255, 87, 51)", Color(255, 87, 51)),
    ("RGB( 10 , 20 , 30 )", Color(10, 20, 30)),
    ("rgb(255 87 51)", Color(255, 87, 51)),
    ("rgba(255, 87, 51, 0.5)", Color(255, 87, 51, alpha=0.5)),
    ("rgb(100% 0% 50% / 50%)", Color(255, 0, 128, alpha=0.5)),
    ("rgb(0, 0, 0 / 1)", Color(0, 0, 0, alpha=1.0)),
])
def test_rgb(text, expected):
    result = parse(text)
    assert result.format is ColorModel.RGB
    assert result.color == expected


@pytest.mark.parametrize("text, expected", [
    ("hsl(0, 100%, 50%)", Color(255, 0, 0)),
    ("hsl(120deg 100% 25%)", Color(0, 128, 0)),
    ("hsl(360, 100%, 50%)", Color(255, 0, 0)),
    ("hsl(0, 0, 100)", WHITE),
    ("hsla(240, 100%, 50%, 0.25)", Color(0, 0, 255, alpha=0.25)),
])
def test_hsl(text, expected):
    result = parse(text)
    assert result.format is ColorModel.HSL
    assert result.color == expected


@pytest.mark.parametrize("text, expected", [
    ("hsb(60, 100%, 100%)", Color(255, 255, 0)),
    ("hsv(60, 100%, 100%)", Color(255, 255, 0)),
    ("HSV(0, 0%, 100%)", WHITE),
    ("hsva(180 100% 100% / 0.5)", Color(0, 255, 255, alpha=0.5)),
])
def test_hsb(text, expected):
    result = parse(text)
    assert result.format is ColorModel.HSB
    assert result.color == expected


def test_cmyk():
    assert parse("cmyk(0%, 100%, 100%, 0%)") == ParsedColor(Color(255, 0, 0), ColorModel.CMYK)
    assert parse("cmyk(0 0 0 100)").color == BLACK
    assert parse("CMYK(0, 0, 0, 0)").color == WHITE


def test_named_colors():
    for rgb, name in samples_named.items():
        assert parse(name) == ParsedColor(Color(*rgb), ColorModel.NAMED)
    assert parse("Dark Slate Gray").color == Color(47, 79, 79)
    assert parse("rebecca-purple").color == Color(102, 51, 153)
    assert parse("TOMATO").color == Color(255, 99, 71)


def test_custom_name_table():
    table = {"brand": "#123456"}
    assert parse("brand", names=table).color == Color(0x12, 0x34, 0x56)
    with pytest.raises(ParseError):
        parse("tomato", names=table)
    assert table == {"brand": "#123456"}


def test_named_table_is_not_mutated():
    before = dict(NAMED_COLORS)
    parse("tomato")
    assert dict(NAMED_COLORS) == before


def test_parse_color_shortcut():
    assert parse_color("#000") == BLACK


@pytest.mark.parametrize("text, token", [
    ("#GG0000", "#GG0000"),
    ("#12345", "#12345"),
    ("rgb(256, 0, 0)", "256"),
    ("rgb(10, 20, x)", "x"),
    ("rgba(1, 2, 3, 1.5)", "1.5"),
    ("hsl(361, 50%, 50%)", "361"),
    ("hsl(10, 101%, 50%)", "101%"),
    ("hsl(10%, 50%, 50%)", "10%"),
    ("cmyk(0, 0, 0, 120)", "120"),
    ("notacolor", "notacolor"),
    ("~~~", "~~~"),
])
def test_errors_name_the_token(text, token):
    with pytest.raises(ParseError) as err:
        parse(text)
    assert err.value.token == token
    assert token in str(err.value)


@pytest.mark.parametrize("text", [
    "rgb(1, 2)",
    "rgb(1, 2, 3, 4, 5)",
    "hsl(1, 2%)",
    "cmyk(0, 0, 0)",
    "cmyk(0, 0, 0, 0 / 0.5)",
    "rgb(1,, 2, 3)",
    "rgb(1, 2, 3",
    "",
    "   ",
])
def test_malformed_literals(text):
    with pytest.raises(ParseError):
        parse(text)


@pytest.mark.parametrize("value", [None, 42, 0xFF5733, ("#FFF",)])
def test_non_string_input(value):
    with pytest.raises(ParseError):
        parse(value)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse("nope")
