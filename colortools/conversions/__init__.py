"""
colortools Color Space Conversions
==================================

Conversions between canonical RGB and the HSL, HSB (HSV), CMYK, CIE XYZ and
CIE L*a*b* models, with both scalar and vectorized (numpy) implementations.

Features
--------
- Bidirectional conversions: RGB <-> HSL, HSB, CMYK, XYZ, LAB
- Scalar functions returning float records (``HSL``, ``HSB``, ``CMYK``, ...)
- Vectorized ``np_`` functions operating on arrays of shape (..., 3)
- sRGB gamma handling and D65 white point for the XYZ/LAB path
- High-level ``convert`` / ``to_color`` working on canonical ``Color`` objects

Conversion Functions
--------------------

RGB <-> HSL:
    unit_rgb_to_hsl(r, g, b), hsl_to_unit_rgb(h, s, l)
    np_unit_rgb_to_hsl(r, g, b), np_hsl_to_unit_rgb(h, s, l)

RGB <-> HSB:
    unit_rgb_to_hsb(r, g, b), hsb_to_unit_rgb(h, s, v)
    np_unit_rgb_to_hsb(r, g, b), np_hsb_to_unit_rgb(h, s, v)

RGB <-> CMYK:
    unit_rgb_to_cmyk(r, g, b), cmyk_to_unit_rgb(c, m, y, k)
    np_unit_rgb_to_cmyk(rgb), np_cmyk_to_unit_rgb(cmyk)

RGB <-> XYZ <-> LAB:
    unit_rgb_to_xyz, xyz_to_unit_rgb, xyz_to_lab, lab_to_xyz
    unit_rgb_to_lab, lab_to_unit_rgb and their np_ counterparts

High-Level API
--------------
    convert(color, target)
        Canonical color -> FormattedValue (rounded record + CSS-like string)
    model_values(color, target)
        Canonical color -> unrounded float record
    to_color(model, values, alpha=None)
        Model components -> canonical color, validating every component
    format_color(color, target)
        Canonical color -> CSS-like string

Units
-----
Low-level functions work on unit floats: RGB, saturation, lightness,
brightness and CMYK in [0, 1], hue in degrees [0, 360). The high-level API
uses percentages for saturation/lightness/brightness/CMYK, 0-255 for RGB,
CIE units for LAB and Y(white) = 100 for XYZ.

Examples
--------
>>> from colortools.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> h, s, l = unit_rgb_to_hsl(1.0, 0.5, 0.0)
>>> r, g, b = hsl_to_unit_rgb(h, s, l)
>>>
>>> import numpy as np
>>> from colortools.conversions import np_unit_rgb_to_hsl
>>> rgb_array = np.array([[1.0, 0.5, 0.0], [0.0, 1.0, 0.5]])
>>> hsl_array = np_unit_rgb_to_hsl(rgb_array[..., 0], rgb_array[..., 1], rgb_array[..., 2])
"""

# RGB <-> HSL
from .to_hsl import (
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    np_unit_rgb_to_hsl,
    np_hsl_to_unit_rgb,
)

# RGB <-> HSB
from .to_hsv import (
    unit_rgb_to_hsb,
    hsb_to_unit_rgb,
    np_unit_rgb_to_hsb,
    np_hsb_to_unit_rgb,
    hsl_to_hsb,
    hsb_to_hsl,
)

# RGB <-> CMYK
from .to_cmyk import (
    unit_rgb_to_cmyk,
    cmyk_to_unit_rgb,
    np_unit_rgb_to_cmyk,
    np_cmyk_to_unit_rgb,
)

# RGB <-> XYZ
from .to_xyz import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    unit_rgb_to_xyz,
    xyz_to_unit_rgb,
    np_unit_rgb_to_xyz,
    np_xyz_to_unit_rgb,
)

# XYZ <-> LAB
from .to_lab import (
    xyz_to_lab,
    lab_to_xyz,
    unit_rgb_to_lab,
    lab_to_unit_rgb,
    np_xyz_to_lab,
    np_lab_to_xyz,
    np_unit_rgb_to_lab,
    np_lab_to_unit_rgb,
)

# High-level API
from .wrapper import convert, format_color, model_values, to_color, FormattedValue

# Types and enums
from ..types.format_type import ColorModel

__all__ = [
    # RGB <-> HSL
    'unit_rgb_to_hsl',
    'hsl_to_unit_rgb',
    'np_unit_rgb_to_hsl',
    'np_hsl_to_unit_rgb',

    # RGB <-> HSB
    'unit_rgb_to_hsb',
    'hsb_to_unit_rgb',
    'np_unit_rgb_to_hsb',
    'np_hsb_to_unit_rgb',
    'hsl_to_hsb',
    'hsb_to_hsl',

    # RGB <-> CMYK
    'unit_rgb_to_cmyk',
    'cmyk_to_unit_rgb',
    'np_unit_rgb_to_cmyk',
    'np_cmyk_to_unit_rgb',

    # RGB <-> XYZ
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'unit_rgb_to_xyz',
    'xyz_to_unit_rgb',
    'np_unit_rgb_to_xyz',
    'np_xyz_to_unit_rgb',

    # XYZ <-> LAB
    'xyz_to_lab',
    'lab_to_xyz',
    'unit_rgb_to_lab',
    'lab_to_unit_rgb',
    'np_xyz_to_lab',
    'np_lab_to_xyz',
    'np_unit_rgb_to_lab',
    'np_lab_to_unit_rgb',

    # High-level API
    'convert',
    'format_color',
    'model_values',
    'to_color',
    'FormattedValue',

    # Types
    'ColorModel',
]
