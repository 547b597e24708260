"""Hex color validation and input normalization"""

import re
from typing import Optional

HEX_PATTERN = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)
_NON_HEX = re.compile(r"[^0-9a-fA-F]")


def is_valid_hex(value: Optional[str]) -> bool:
    """
    Check whether a value is a 6-digit hex color

    Accepts "#RRGGBB" or "RRGGBB" in any case. Shorthand "#RGB",
    empty strings, None and non-string values are rejected.
    """
    if not isinstance(value, str):
        return False
    return HEX_PATTERN.fullmatch(value) is not None


def parse_hex(value: str) -> Optional[tuple[int, int, int]]:
    """
    Split a hex color into its red, green and blue bytes

    Returns:
        (r, g, b) tuple of ints in 0-255, or None if value is not a valid hex color
    """
    if not isinstance(value, str):
        return None

    match = HEX_PATTERN.fullmatch(value)
    if match is None:
        return None

    return (
        int(match.group(1), 16),
        int(match.group(2), 16),
        int(match.group(3), 16),
    )


def normalize_hex(value: Optional[str]) -> str:
    """
    Turn loosely typed user input into a "#RRGGBB" candidate

    Every non-hex character is dropped. Three remaining digits are expanded
    ("f0a" -> "#ff00aa"), six are prefixed with "#". Any other digit count is
    returned as "#" + digits so that is_valid_hex() rejects it, and empty
    input stays empty.

    Args:
        value: Raw input, e.g. from a text field

    Returns:
        Normalized string (not guaranteed to be valid)
    """
    if not value:
        return ""

    cleaned = _NON_HEX.sub("", value)

    if len(cleaned) == 6:
        return f"#{cleaned}"

    if len(cleaned) == 3:
        return "#" + "".join(c * 2 for c in cleaned)

    return f"#{cleaned}"
