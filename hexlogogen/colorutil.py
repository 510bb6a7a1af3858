"""Conversions and arithmetic on '#RRGGBB' colours."""

from __future__ import annotations

import math
import string

__all__ = [
    "average_colors",
    "blend_colors",
    "color_contrast",
    "hex_to_rgb",
    "relative_luminance",
    "rgb_to_hex",
]

_HEX_DIGITS = frozenset(string.hexdigits)


def _parse_component(text: str) -> int:
    if text and all(ch in _HEX_DIGITS for ch in text):
        return int(text, 16)
    return 0


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Split a '#RRGGBB' string into components; unparsable pairs become 0."""
    digits = hex_color.lstrip("#")
    if len(digits) < 6:
        raise ValueError(f"colour {hex_color!r} needs six hex digits")
    return (
        _parse_component(digits[0:2]),
        _parse_component(digits[2:4]),
        _parse_component(digits[4:6]),
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format components 0-255 as an upper-case '#RRGGBB' string."""
    for value in (r, g, b):
        if not 0 <= value <= 255:
            raise ValueError(f"colour component {value} is outside 0-255")
    return f"#{r:02X}{g:02X}{b:02X}"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def blend_colors(color1: str, color2: str, opacity: float) -> str:
    """Lay color2 over color1 with the given opacity, clamped to 0-1."""
    r1, g1, b1 = hex_to_rgb(color1)
    r2, g2, b2 = hex_to_rgb(color2)
    alpha = min(max(opacity, 0.0), 1.0)
    return rgb_to_hex(
        *(
            _round_half_up(c1 * (1.0 - alpha) + c2 * alpha)
            for c1, c2 in ((r1, r2), (g1, g2), (b1, b2))
        )
    )


def average_colors(color1: str, color2: str) -> str:
    """Component-wise integer mean of two colours."""
    return rgb_to_hex(
        *((c1 + c2) // 2 for c1, c2 in zip(hex_to_rgb(color1), hex_to_rgb(color2)))
    )


def _to_linear(value: float) -> float:
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """WCAG relative luminance of an sRGB colour."""
    return (
        0.2126 * _to_linear(r / 255.0)
        + 0.7152 * _to_linear(g / 255.0)
        + 0.0722 * _to_linear(b / 255.0)
    )


def color_contrast(color1: str, color2: str) -> float:
    """WCAG contrast ratio between two colours, at least 1."""
    l1 = relative_luminance(*hex_to_rgb(color1))
    l2 = relative_luminance(*hex_to_rgb(color2))
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)