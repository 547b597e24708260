"""Hex <-> HSL conversion"""

import math
from dataclasses import dataclass
from typing import Iterator

from ..errors import InvalidColorError
from .hex import parse_hex


@dataclass(frozen=True)
class HSL:
    """HSL triple with integer hue (degrees) and percentage saturation/lightness"""
    h: int
    s: int
    l: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.h, self.s, self.l))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)"""
    return int(math.floor(value + 0.5))


def hex_to_rgb_fractions(hex_color: str) -> tuple[float, float, float]:
    """
    Parse a hex color into channel values in [0, 1]

    Raises:
        InvalidColorError: If hex_color is not a 6-digit hex color
    """
    rgb = parse_hex(hex_color)
    if rgb is None:
        raise InvalidColorError(f"Invalid hex color: {hex_color!r}", value=hex_color)

    r, g, b = rgb
    return r / 255, g / 255, b / 255


def hex_to_hsl(hex_color: str) -> HSL:
    """
    Convert a hex color to HSL

    Hue, saturation and lightness are each rounded to the nearest integer;
    hue is wrapped into [0, 360).

    Args:
        hex_color: "#RRGGBB" or "RRGGBB"

    Returns:
        HSL triple

    Raises:
        InvalidColorError: If hex_color is not a 6-digit hex color
    """
    r, g, b = hex_to_rgb_fractions(hex_color)

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    h = 0.0
    s = 0.0
    l = (max_c + min_c) / 2

    if max_c != min_c:
        d = max_c - min_c
        s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)

        if max_c == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif max_c == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    return HSL(
        h=round_half_up(h * 360) % 360,
        s=round_half_up(s * 100),
        l=round_half_up(l * 100),
    )


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """
    Convert HSL to a lowercase "#rrggbb" hex color

    Uses the closed-form chroma formula
        a = s * min(l, 1 - l)
        k = (n + h / 30) mod 12            n = 0, 8, 4 for R, G, B
        channel = l - a * max(min(k - 3, 9 - k, 1), -1)

    Args:
        h: Hue in degrees
        s: Saturation percentage (0-100)
        l: Lightness percentage (0-100)

    Returns:
        Hex color string
    """
    s /= 100
    l /= 100

    a = s * min(l, 1 - l)

    def channel(n: int) -> str:
        k = (n + h / 30) % 12
        color = l - a * max(min(k - 3, 9 - k, 1), -1)
        value = min(max(round_half_up(255 * color), 0), 255)
        return f"{value:02x}"

    return f"#{channel(0)}{channel(8)}{channel(4)}"
