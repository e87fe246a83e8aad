"""Color math, built-in presets and the theme engine."""

from .color_math import contrast_color, darken, lighten, luminance, parse_hex, rgb_to_hex, to_hex
from .presets import DARK_PRESETS, DEFAULT_PRESET, PRESETS
from .theme_engine import THEME_VARIABLES, ThemeEngine, derive_variables

__all__ = [
    "ThemeEngine",
    "THEME_VARIABLES",
    "derive_variables",
    "PRESETS",
    "DARK_PRESETS",
    "DEFAULT_PRESET",
    "parse_hex",
    "to_hex",
    "lighten",
    "darken",
    "luminance",
    "contrast_color",
    "rgb_to_hex",
]
