"""Command-line entry point: print a theme palette as CSS or JSON."""

import argparse
import json
import sys
from typing import Optional, Sequence

import structlog

from .config.loader import ConfigLoader
from .config.validation import VALID_LOG_LEVELS
from .engine import ThemeEngine
from .errors import ColorError, ConfigurationError
from .logging.config import configure_logging
from .theme.models import Theme

logger = structlog.get_logger(__name__)

EXIT_CONFIG_ERROR = 1
EXIT_INPUT_ERROR = 2


def parse_override(value: str) -> tuple[int, str]:
    """Parse an INDEX=HEX override argument."""
    index, sep, color = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"Expected INDEX=HEX, got {value!r}")
    try:
        return int(index), color
    except ValueError:
        raise argparse.ArgumentTypeError(f"Override index must be an integer, got {index!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="themegen",
        description="Generate 5 shades and contrast-safe text colors from a primary color",
    )
    parser.add_argument("primary", nargs="?", default="",
                        help="Primary color (#RRGGBB, RRGGBB or #RGB)")
    parser.add_argument("--override", "-o", action="append", type=parse_override, default=[],
                        metavar="INDEX=HEX", help="Replace shade INDEX (0-4) with a custom color")
    parser.add_argument("--format", "-f", choices=("css", "json"), default="css",
                        help="Output format (default: css)")
    parser.add_argument("--config-dir", help="Directory containing themegen.yaml")
    parser.add_argument("--log-level", type=str.upper, choices=VALID_LOG_LEVELS,
                        help="Override the configured log level")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging_overrides = {}
    if args.log_level:
        logging_overrides["level"] = args.log_level
    if args.json_logs:
        logging_overrides["format_json"] = True

    try:
        config = ConfigLoader.create(args.config_dir).load_config(
            {"logging": logging_overrides} if logging_overrides else None
        )
    except ConfigurationError as e:
        print(f"themegen: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(level=config.logging.level, format_json=config.logging.format_json)
    engine = ThemeEngine(config)

    if not args.primary:
        if args.format == "json":
            print(json.dumps({"primary": None, "swatches": [], "css_variables": {}}, indent=2))
        else:
            sys.stdout.write(engine.render_css())
        return 0

    try:
        theme = Theme.create(args.primary)
        for index, color in args.override:
            theme = theme.with_override(index, color)
        palette = engine.build_palette(theme)
    except ColorError as e:
        logger.error("Invalid color input", error=str(e))
        print(f"themegen: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    if args.format == "json":
        print(json.dumps(palette.to_dict(), indent=2, ensure_ascii=False))
    else:
        sys.stdout.write(engine.render_css(palette))
    return 0


if __name__ == "__main__":
    sys.exit(main())
