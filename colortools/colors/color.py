from __future__ import annotations
from typing import Any, ClassVar, Iterator, Optional, Tuple

import numpy as np

from ..utils.num_utils import check_range, round_channel
from ..errors import RangeError
from ..types.color_types import RGB, Channels
from ..types.format_type import RGB_MAX

# Half a channel step of tolerance before a float result counts as out of gamut
GAMUT_TOLERANCE = 0.5


class Color:
    """
    Canonical color: three integer channels in [0, 255] plus an optional alpha in [0, 1].

    Instances are immutable, hashable and compare by value. ``alpha=None``
    means the color was given without an alpha channel (opaque).
    """

    __slots__ = ('_value', '_alpha', '_is_frozen')  # no new attributes -> immutability

    num_channels: ClassVar[int] = 3
    channel_names: ClassVar[Tuple[str, str, str]] = ("red", "green", "blue")
    maxima: ClassVar[Channels] = (RGB_MAX, RGB_MAX, RGB_MAX)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, red: int, green: int, blue: int, alpha: Optional[float] = None) -> None:
        channels = []
        for name, value, maximum in zip(self.channel_names, (red, green, blue), self.maxima):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
            if not 0 <= value <= maximum:
                raise RangeError(name, value, 0, maximum)
            channels.append(int(value))

        if alpha is not None:
            alpha = check_range("alpha", alpha, 0.0, 1.0)

        self._value = tuple(channels)
        self._alpha = alpha

        # freeze instance - no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ ALTERNATE CONSTRUCTORS ------------------
    @classmethod
    def from_unit_rgb(cls, r: float, g: float, b: float, alpha: Optional[float] = None) -> Color:
        """
        Build a color from float channels in [0, 1], rounding half-up.

        Raises:
            RangeError: when a channel falls outside the sRGB gamut by more than
                half a channel step.
        """
        channels = []
        for name, value in zip(cls.channel_names, (r, g, b)):
            scaled = float(value) * RGB_MAX
            if not -GAMUT_TOLERANCE <= scaled <= RGB_MAX + GAMUT_TOLERANCE:
                raise RangeError(name, scaled, 0, RGB_MAX)
            channels.append(round_channel(scaled))
        return cls(*channels, alpha=alpha)

    @classmethod
    def from_tuple(cls, value: Tuple[Any, ...]) -> Color:
        """Build a color from an ``(r, g, b)`` or ``(r, g, b, a)`` tuple."""
        if len(value) not in (3, 4):
            raise ValueError(f"expected 3 or 4 components, got {len(value)}")
        return cls(*value)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """
        Build a color from ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA`` (``#`` optional).

        Short forms duplicate each digit; the fourth byte is alpha / 255.
        """
        digits = text.strip().lstrip("#")
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) not in (6, 8):
            raise ValueError(f"hex color needs 3, 4, 6 or 8 digits, got {text!r}")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"invalid hex digits in {text!r}") from None
        alpha = channels[3] / RGB_MAX if len(channels) == 4 else None
        return cls(*channels[:3], alpha=alpha)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def red(self) -> int:
        return self._value[0]

    @property
    def green(self) -> int:
        return self._value[1]

    @property
    def blue(self) -> int:
        return self._value[2]

    @property
    def alpha(self) -> Optional[float]:
        return self._alpha

    @property
    def value(self) -> Channels:
        return self._value

    @property
    def rgb(self) -> RGB:
        return RGB(*self._value)

    @property
    def has_alpha(self) -> bool:
        """Check if this color carries an alpha channel."""
        return self._alpha is not None

    @property
    def opacity(self) -> float:
        """Alpha, treating a missing channel as fully opaque."""
        return 1.0 if self._alpha is None else self._alpha

    @property
    def hex(self) -> str:
        """``#RRGGBB``, or ``#RRGGBBAA`` when the color has alpha."""
        text = "#{:02X}{:02X}{:02X}".format(*self._value)
        if self._alpha is not None:
            text += f"{round_channel(self._alpha * RGB_MAX):02X}"
        return text

    def unit(self) -> Tuple[float, float, float]:
        """Channels scaled to [0, 1]."""
        return tuple(v / RGB_MAX for v in self._value)

    def to_array(self) -> np.ndarray:
        """Channels as a float array of shape (3,) in [0, 1]."""
        return np.array(self._value, dtype=float) / RGB_MAX

    def with_alpha(self, alpha: Optional[float]) -> Color:
        """Return a new color with the given alpha (``None`` removes it)."""
        return self.__class__(*self._value, alpha=alpha)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value and self._alpha == other._alpha

    def __hash__(self) -> int:
        return hash((self._value, self._alpha))

    def __repr__(self) -> str:
        if self._alpha is None:
            return "Color({}, {}, {})".format(*self._value)
        return "Color({}, {}, {}, alpha={})".format(*self._value, self._alpha)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
