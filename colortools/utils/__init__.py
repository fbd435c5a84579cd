"""Numeric helpers shared by the conversion and color modules."""

from .num_utils import (
    check_range,
    normalize_hue,
    np_round_channels,
    round_channel,
    round_half_up,
)

__all__ = [
    "check_range",
    "normalize_hue",
    "np_round_channels",
    "round_channel",
    "round_half_up",
]
