"""
WCAG relative luminance, contrast ratio and text color selection.

Contrast levels (WCAG 2.x): 4.5:1 is AA for normal text. Text on a swatch
is always one of two constants, near-black or white.
"""

from dataclasses import dataclass

from ..errors import InvalidColorError
from .hex import parse_hex

DARK_TEXT = "#010101"
LIGHT_TEXT = "#FFFFFF"
AA_NORMAL_TEXT_RATIO = 4.5


def _linearize(channel: int) -> float:
    """sRGB byte -> linear-light value"""
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return float(((c + 0.055) / 1.055) ** 2.4)


def relative_luminance(hex_color: str) -> float:
    """
    Calculate relative luminance per WCAG

    L = 0.2126 * R + 0.7152 * G + 0.0722 * B on linearized channels.

    Args:
        hex_color: "#RRGGBB" or "RRGGBB"

    Returns:
        Luminance in [0, 1]

    Raises:
        InvalidColorError: If hex_color is not a valid hex color
    """
    rgb = parse_hex(hex_color)
    if rgb is None:
        raise InvalidColorError(f"Invalid hex color: {hex_color!r}", value=hex_color)

    r, g, b = (_linearize(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(color_a: str, color_b: str) -> float:
    """
    Calculate WCAG contrast ratio between two colors

    Symmetric in its arguments.

    Returns:
        Contrast ratio (1.0 to 21.0)
    """
    l1 = relative_luminance(color_a)
    l2 = relative_luminance(color_b)

    lighter = max(l1, l2)
    darker = min(l1, l2)

    return (lighter + 0.05) / (darker + 0.05)


@dataclass(frozen=True)
class TextColorDecision:
    """Outcome of choosing a text color for one background"""
    background: str
    text_color: str
    ratio_black: float
    ratio_white: float
    min_ratio: float

    @property
    def black_passes(self) -> bool:
        return self.ratio_black >= self.min_ratio

    @property
    def white_passes(self) -> bool:
        return self.ratio_white >= self.min_ratio

    @property
    def passes(self) -> bool:
        """Whether the chosen text color meets the threshold"""
        chosen = self.ratio_black if self.text_color == DARK_TEXT else self.ratio_white
        return chosen >= self.min_ratio

    @property
    def ratio(self) -> float:
        """Contrast ratio of the chosen text color"""
        return self.ratio_black if self.text_color == DARK_TEXT else self.ratio_white


def select_text_color(
    background_hex: str,
    min_ratio: float = AA_NORMAL_TEXT_RATIO,
) -> TextColorDecision:
    """
    Choose near-black or white text for a background

    A color that meets min_ratio beats one that does not. When both or
    neither meet it, the higher ratio wins and black wins ties.

    Raises:
        InvalidColorError: If background_hex is not a valid hex color
    """
    ratio_black = contrast_ratio(DARK_TEXT, background_hex)
    ratio_white = contrast_ratio(LIGHT_TEXT, background_hex)

    black_passes = ratio_black >= min_ratio
    white_passes = ratio_white >= min_ratio

    if black_passes and not white_passes:
        text_color = DARK_TEXT
    elif white_passes and not black_passes:
        text_color = LIGHT_TEXT
    else:
        text_color = DARK_TEXT if ratio_black >= ratio_white else LIGHT_TEXT

    return TextColorDecision(
        background=background_hex,
        text_color=text_color,
        ratio_black=ratio_black,
        ratio_white=ratio_white,
        min_ratio=min_ratio,
    )


def get_contrast_text_color(
    background_hex: str,
    min_ratio: float = AA_NORMAL_TEXT_RATIO,
) -> str:
    """
    Return "#010101" or "#FFFFFF" for text on the given background

    Raises:
        InvalidColorError: If background_hex is not a valid hex color
    """
    return select_text_color(background_hex, min_ratio).text_color
