"""Shade derivation from a primary color"""

from typing import Sequence

from .hsl import hex_to_hsl, hsl_to_hex

# Light to dark
LIGHTNESS_LEVELS: tuple[int, ...] = (92, 78, 64, 50, 36)
SHADE_COUNT = len(LIGHTNESS_LEVELS)


def generate_shades_from_primary(
    primary_hex: str,
    lightness_levels: Sequence[int] = LIGHTNESS_LEVELS,
) -> tuple[str, ...]:
    """
    Generate 5 shades, light to dark, from a primary color

    The primary's rounded hue and saturation are kept and its lightness is
    discarded; each shade is hsl_to_hex(h, s, level).

    Args:
        primary_hex: Primary color as "#RRGGBB" or "RRGGBB"
        lightness_levels: Lightness percentages to emit, in output order

    Returns:
        Tuple of 5 hex colors

    Raises:
        InvalidColorError: If primary_hex is not a valid hex color
        ValueError: If lightness_levels does not hold exactly 5 values
    """
    if len(lightness_levels) != SHADE_COUNT:
        raise ValueError(
            f"Expected {SHADE_COUNT} lightness levels, got {len(lightness_levels)}"
        )

    hsl = hex_to_hsl(primary_hex)
    return tuple(hsl_to_hex(hsl.h, hsl.s, level) for level in lightness_levels)
