# jank/services/theme/color_math.py
"""
Small, pure color helpers used by the theme engine.

All functions accept ``#rrggbb`` strings (leading ``#`` optional) and are
tolerant of garbage: a channel that is not one or two hex digits parses as 0.
Nothing in here raises on bad input.
"""

from __future__ import annotations

import re

RGB = tuple[int, int, int]

_HEX_CHANNEL_RE = re.compile(r"[0-9a-fA-F]{1,2}")
_CSS_RGB_RE = re.compile(r"rgb\((\d+),\s*(\d+),\s*(\d+)\)")


def _clamp(v: int) -> int:
    return max(0, min(255, v))


def parse_hex(color: str) -> RGB:
    raw = str(color).replace("#", "", 1)
    channels: list[int] = []
    for start in (0, 2, 4):
        chunk = raw[start : start + 2]
        channels.append(int(chunk, 16) if _HEX_CHANNEL_RE.fullmatch(chunk) else 0)
    return channels[0], channels[1], channels[2]


def to_hex(rgb: RGB) -> str:
    r, g, b = (_clamp(int(c)) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def lighten(color: str, factor: float) -> str:
    """Move each channel toward white by ``1 - factor`` of the remaining distance."""
    return to_hex(tuple(min(255, int(c + (255 - c) * (1 - factor))) for c in parse_hex(color)))


def darken(color: str, factor: float) -> str:
    """Scale each channel down by ``factor``."""
    return to_hex(tuple(int(c * (1 - factor)) for c in parse_hex(color)))


def luminance(color: str) -> float:
    # Weights kept in integer thousandths so exactly-half colors compare equal to 0.5.
    r, g, b = parse_hex(color)
    return (299 * r + 587 * g + 114 * b) / 255000


def contrast_color(color: str) -> str:
    """Black text on light backgrounds, white otherwise."""
    return "#000000" if luminance(color) > 0.5 else "#ffffff"


def rgb_to_hex(value: str) -> str:
    """Normalize a computed CSS color (``#...`` or ``rgb(r, g, b)``); other input is returned as-is."""
    value = value.strip()
    if value.startswith("#"):
        return value
    m = _CSS_RGB_RE.match(value)
    if m:
        return to_hex((int(m.group(1)), int(m.group(2)), int(m.group(3))))
    return value
