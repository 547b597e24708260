"""
Theme engine coordinator.

Builds a fully resolved palette from a primary color and optional shade
overrides: shade generation, override resolution, text color selection
and CSS variable output, all driven by one configuration.
"""

from typing import Optional, Sequence, Union

import structlog

from .colors.contrast import select_text_color
from .colors.shades import generate_shades_from_primary
from .config.defaults import DefaultConfig, get_default_config
from .errors import InvalidColorError
from .logging.config import (
    get_theme_logger,
    log_override_resolution,
    log_text_color_decision,
)
from .theme.css import css_variables, render_css, render_placeholder_css
from .theme.models import SHADE_NAMES, Swatch, Theme, ThemePalette

logger = structlog.get_logger(__name__)


class ThemeEngine:
    """
    Coordinator for palette building.

    Primary → Shades → Overrides → Text colors → CSS variables
    """

    def __init__(self, config: Optional[DefaultConfig] = None) -> None:
        self.config = config or get_default_config()
        self.logger = logger
        self.theme_logger = get_theme_logger(__name__)

    @property
    def lightness_levels(self) -> tuple[int, ...]:
        return tuple(self.config.shades.lightness_levels)

    def generate_shades(self, primary: str) -> tuple[str, ...]:
        """Generated shades for a primary, without overrides."""
        return generate_shades_from_primary(primary, self.lightness_levels)

    def build_palette(
        self,
        theme: Union[Theme, str],
        overrides: Optional[Sequence[Optional[str]]] = None,
    ) -> ThemePalette:
        """
        Resolve a theme into swatches with text colors and CSS variables.

        Args:
            theme: Theme instance or raw primary color input
            overrides: Per-shade overrides, only used with a raw primary

        Returns:
            ThemePalette for the theme

        Raises:
            InvalidColorError: If the primary color is invalid
            ShadeOverrideError: If more than five overrides are given
        """
        if not isinstance(theme, Theme):
            try:
                theme = Theme.create(theme, overrides)
            except InvalidColorError as e:
                self.logger.warning(
                    "Rejected primary color",
                    value=e.value,
                    expected_format=e.expected_format,
                )
                raise

        generated = self.generate_shades(theme.primary)
        min_ratio = self.config.contrast.min_ratio

        swatches = []
        for index, (override, auto) in enumerate(zip(theme.overrides, generated)):
            log_override_resolution(self.theme_logger, index, override, auto)
            background = override if override is not None else auto

            decision = select_text_color(background, min_ratio)
            log_text_color_decision(
                self.theme_logger,
                index=index,
                background=background,
                text_color=decision.text_color,
                ratio_black=decision.ratio_black,
                ratio_white=decision.ratio_white,
                passes=decision.passes,
            )

            swatches.append(Swatch(
                index=index,
                name=SHADE_NAMES[index],
                background=background,
                text_color=decision.text_color,
                contrast_ratio=decision.ratio,
                overridden=override is not None,
            ))

        shades = tuple(swatch.background for swatch in swatches)
        palette = ThemePalette(
            primary=theme.primary,
            swatches=tuple(swatches),
            css_variables=css_variables(
                theme.primary, shades, prefix=self.config.css.variable_prefix
            ),
        )

        self.logger.info(
            "Palette built",
            primary=theme.primary,
            shades=list(shades),
            overridden=[swatch.index for swatch in swatches if swatch.overridden],
        )

        return palette

    def render_css(self, palette: Optional[ThemePalette] = None) -> str:
        """CSS block for a palette, or the placeholder block when there is none."""
        css = self.config.css
        if palette is None:
            return render_placeholder_css(css.selector, css.variable_prefix, css.placeholder)
        return render_css(palette.css_variables, css.selector)
