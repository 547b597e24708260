"""Color math: hex validation, HSL conversion, shades and WCAG contrast"""

from .contrast import (
    AA_NORMAL_TEXT_RATIO,
    DARK_TEXT,
    LIGHT_TEXT,
    TextColorDecision,
    contrast_ratio,
    get_contrast_text_color,
    relative_luminance,
    select_text_color,
)
from .hex import is_valid_hex, normalize_hex, parse_hex
from .hsl import HSL, hex_to_hsl, hsl_to_hex, round_half_up
from .shades import LIGHTNESS_LEVELS, SHADE_COUNT, generate_shades_from_primary

__all__ = [
    "HSL",
    "TextColorDecision",
    "is_valid_hex",
    "normalize_hex",
    "parse_hex",
    "hex_to_hsl",
    "hsl_to_hex",
    "round_half_up",
    "generate_shades_from_primary",
    "relative_luminance",
    "contrast_ratio",
    "select_text_color",
    "get_contrast_text_color",
    "LIGHTNESS_LEVELS",
    "SHADE_COUNT",
    "DARK_TEXT",
    "LIGHT_TEXT",
    "AA_NORMAL_TEXT_RATIO",
]
