"""
Error classification for theme generation.

Color errors describe bad user input and are recoverable by falling back
to a previous or default value. Configuration errors are not.
"""

from .color import (
    ColorError,
    InvalidColorError,
    ShadeOverrideError,
)
from .configuration import ConfigurationError

__all__ = [
    # Color input errors
    "ColorError",
    "InvalidColorError",
    "ShadeOverrideError",
    # Configuration errors
    "ConfigurationError",
]
