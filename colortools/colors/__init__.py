"""
colortools Color Class
======================

The canonical, immutable color every other model converts to and from.

Features
--------
- Three integer channels in [0, 255] and an optional alpha in [0, 1]
- Frozen after initialization (``__slots__`` plus a guarded ``__setattr__``)
- Value equality and hashing, so colors work as dict keys and set members
- Range validation: out-of-range channels raise ``RangeError`` naming the field

Usage
-----
>>> from colortools.colors import Color
>>>
>>> color = Color(255, 87, 51)
>>> color.hex
'#FF5733'
>>> color.with_alpha(0.5).hex
'#FF573380'
>>> Color.from_unit_rgb(1.0, 0.5, 0.0)
Color(255, 128, 0)

Notes
-----
- ``alpha=None`` means "no alpha given"; ``opacity`` reports it as 1.0
- ``from_unit_rgb`` rounds half-up and rejects values outside the sRGB gamut
"""

from .color import Color, BLACK, WHITE

__all__ = ['Color', 'BLACK', 'WHITE']
