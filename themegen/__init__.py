"""
themegen - Color Theme Generator

Derives five tonal shades from a single primary color and picks a
WCAG-compliant text color (near-black or white) for each of them.
"""

from .colors import (
    HSL,
    contrast_ratio,
    generate_shades_from_primary,
    get_contrast_text_color,
    hex_to_hsl,
    hsl_to_hex,
    is_valid_hex,
    normalize_hex,
    relative_luminance,
)
from .errors import InvalidColorError
from .theme import Theme, derive_display_colors

__version__ = "0.1.0"
__author__ = "themegen Team"

__all__ = [
    "HSL",
    "InvalidColorError",
    "Theme",
    "contrast_ratio",
    "derive_display_colors",
    "generate_shades_from_primary",
    "get_contrast_text_color",
    "hex_to_hsl",
    "hsl_to_hex",
    "is_valid_hex",
    "normalize_hex",
    "relative_luminance",
]
