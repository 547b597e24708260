"""Default configuration parameters for theme generation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShadeParams:
    """Shade generation parameters."""
    lightness_levels: tuple[int, ...] = (92, 78, 64, 50, 36)   # Light to dark, one per shade


@dataclass(frozen=True)
class ContrastParams:
    """Text contrast parameters."""
    min_ratio: float = 4.5                           # WCAG AA, normal text


@dataclass(frozen=True)
class CssParams:
    """CSS output parameters."""
    selector: str = ":root"
    variable_prefix: str = "--color"
    placeholder: str = "—"                           # Shown when no primary is set


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    shades: ShadeParams
    contrast: ContrastParams
    css: CssParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        shades=ShadeParams(),
        contrast=ContrastParams(),
        css=CssParams(),
        logging=LoggingParams(),
    )
