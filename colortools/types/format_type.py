# No dependencies
from enum import Enum


class ColorModel(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    HSB = "hsb"
    CMYK = "cmyk"
    LAB = "lab"
    XYZ = "xyz"
    NAMED = "named"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower()
            key = MODEL_ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        return None


MODEL_ALIASES = {
    "hsv": "hsb",
    "name": "named",
    "css": "named",
    "cielab": "lab",
}

# Decimal places used when rounding formatted output (0 means integers)
output_precision = {
    ColorModel.RGB: 0,
    ColorModel.HSL: 0,
    ColorModel.HSB: 0,
    ColorModel.CMYK: 0,
    ColorModel.LAB: 2,
    ColorModel.XYZ: 2,
}

# Models whose formatted value can carry an alpha channel
alpha_models = {ColorModel.HEX, ColorModel.RGB, ColorModel.HSL, ColorModel.HSB}

RGB_MAX = 255
HUE_360 = 360
PERCENT = 100
