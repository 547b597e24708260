"""
Configuration error classification.

Raised when merged configuration fails validation; the theme engine cannot
run with it and the caller has to fix the configuration source.
"""

from typing import Any, Dict, List, Optional


class ConfigurationError(Exception):
    """Configuration failed validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.errors = errors or []
        self.context = context or {}
        self.recoverable = False
