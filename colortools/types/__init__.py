from .format_type import ColorModel
from .color_types import RGB, HSL, HSB, CMYK, XYZ, LAB

__all__ = ["ColorModel", "RGB", "HSL", "HSB", "CMYK", "XYZ", "LAB"]
