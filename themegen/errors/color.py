"""
Color input error classifications.

These exceptions are raised at every conversion entry point that receives
a string which is not a well-formed 6-digit hex color.
"""

from typing import Optional, Dict, Any


class ColorError(Exception):
    """Base class for color input problems that callers can recover from."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidColorError(ColorError, ValueError):
    """Value is not a #RRGGBB / RRGGBB hex color."""

    def __init__(self, message: str, value: Optional[object] = None,
                 expected_format: str = "#RRGGBB", **kwargs):
        super().__init__(message, **kwargs)
        self.value = value
        self.expected_format = expected_format


class ShadeOverrideError(ColorError, IndexError):
    """Override addresses a shade slot that does not exist."""

    def __init__(self, message: str, index: Optional[int] = None,
                 shade_count: int = 5, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index
        self.shade_count = shade_count
