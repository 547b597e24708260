"""Theme model, override resolution and CSS output"""

from .css import css_variables, render_css, render_placeholder_css, variable_names
from .models import SHADE_NAMES, Swatch, Theme, ThemePalette
from .resolver import derive_display_colors

__all__ = [
    "Theme",
    "Swatch",
    "ThemePalette",
    "SHADE_NAMES",
    "derive_display_colors",
    "css_variables",
    "variable_names",
    "render_css",
    "render_placeholder_css",
]
