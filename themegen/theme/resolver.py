"""Override resolution for displayed theme colors"""

from typing import Sequence

from ..colors.shades import LIGHTNESS_LEVELS, generate_shades_from_primary
from .models import Theme


def derive_display_colors(
    theme: Theme,
    lightness_levels: Sequence[int] = LIGHTNESS_LEVELS,
) -> tuple[str, ...]:
    """
    Resolve the 5 colors shown for a theme

    Each slot shows its override when one is set, otherwise the shade
    generated from the primary.
    """
    generated = generate_shades_from_primary(theme.primary, lightness_levels)
    return tuple(
        override if override is not None else auto
        for override, auto in zip(theme.overrides, generated)
    )
