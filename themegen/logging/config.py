"""
Centralized logging configuration for theme generation.

This module configures structlog on top of the standard library logging
module. The color math itself never logs; the engine and the CLI do.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
    """
    log_level = getattr(logging, level.upper())

    # Logs go to stderr so CSS/JSON on stdout stays clean
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_theme_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the theme subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for theme building
    """
    return get_logger(name).bind(subsystem="theme")


def log_text_color_decision(
    logger: FilteringBoundLogger,
    index: int,
    background: str,
    text_color: str,
    ratio_black: float,
    ratio_white: float,
    passes: bool,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a text color choice with standardized format.

    Args:
        logger: Structlog logger instance
        index: Shade index the text is shown on
        background: Shade background color
        text_color: Chosen text color
        ratio_black: Contrast ratio of near-black text
        ratio_white: Contrast ratio of white text
        passes: Whether the chosen color meets the contrast threshold
        context: Additional context data
    """
    bound_logger = logger.bind(
        shade_index=index,
        background=background,
        text_color=text_color,
        ratio_black=round(ratio_black, 3),
        ratio_white=round(ratio_white, 3),
        contrast_result="PASS" if passes else "FAIL",
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if passes:
        bound_logger.debug("Text color selected")
    else:
        bound_logger.warning("Text color below contrast threshold")


def log_override_resolution(
    logger: FilteringBoundLogger,
    index: int,
    override: Optional[str],
    generated: str,
) -> None:
    """
    Log which color a shade slot resolved to.

    Args:
        logger: Structlog logger instance
        index: Shade index
        override: Override color, or None when the slot is automatic
        generated: Generated shade for the slot
    """
    logger.debug(
        "Shade resolved",
        shade_index=index,
        source="override" if override is not None else "generated",
        color=override if override is not None else generated,
        generated=generated,
    )
