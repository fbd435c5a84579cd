from .named_colors import NAMED_COLORS
from .palettes import PALETTES, SHADES, TAILWIND

__all__ = ["NAMED_COLORS", "PALETTES", "SHADES", "TAILWIND"]
