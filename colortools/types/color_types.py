from __future__ import annotations
from typing import NamedTuple, Tuple, Union

Scalar = int | float
Channels = Tuple[int, int, int]


class RGB(NamedTuple):
    r: Scalar
    g: Scalar
    b: Scalar


class HSL(NamedTuple):
    h: float
    s: float
    l: float


class HSB(NamedTuple):
    h: float
    s: float
    b: float


class CMYK(NamedTuple):
    c: float
    m: float
    y: float
    k: float


class XYZ(NamedTuple):
    x: float
    y: float
    z: float


class LAB(NamedTuple):
    l: float
    a: float
    b: float


ModelRecord = Union[RGB, HSL, HSB, CMYK, XYZ, LAB]
