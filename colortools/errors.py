"""Exceptions and warnings raised by colortools."""

from __future__ import annotations
from typing import Any, Optional


class ColorToolsError(ValueError):
    """Base class for every error raised by the color core."""


class ParseError(ColorToolsError):
    """A color literal could not be recognized or one of its tokens is invalid."""

    def __init__(self, message: str, token: Optional[str] = None) -> None:
        super().__init__(message)
        self.token = token


class RangeError(ColorToolsError):
    """A numeric value lies outside the domain of its color model."""

    def __init__(self, field: str, value: Any, minimum: Any = None, maximum: Any = None) -> None:
        if minimum is not None and maximum is not None:
            message = f"{field} must be within [{minimum}, {maximum}], got {value!r}"
        else:
            message = f"{field} is out of range: {value!r}"
        super().__init__(message)
        self.field = field
        self.value = value


class UnreachableError(ColorToolsError):
    """The accessible-color search cannot reach the requested contrast ratio."""

    def __init__(self, min_ratio: float, best_ratio: float) -> None:
        super().__init__(
            f"no lightness reaches a contrast ratio of {min_ratio:g} "
            f"against this background (best possible is {best_ratio:.2f})"
        )
        self.min_ratio = min_ratio
        self.best_ratio = best_ratio


class AlphaDroppedWarning(UserWarning):
    """The target model has no alpha channel, so the color's alpha was discarded."""


__all__ = [
    "ColorToolsError",
    "ParseError",
    "RangeError",
    "UnreachableError",
    "AlphaDroppedWarning",
]
