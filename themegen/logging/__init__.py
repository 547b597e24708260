"""
Logging configuration and utilities for theme generation.
"""
from .config import configure_logging, get_logger, get_theme_logger

__all__ = ["configure_logging", "get_logger", "get_theme_logger"]
