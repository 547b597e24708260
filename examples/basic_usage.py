#!/usr/bin/env python3
"""
Basic Usage Example - themegen

This script demonstrates the basic usage of themegen. It shows how to:
- Convert a primary color to HSL
- Generate the 5 shades and their text colors
- Override a shade and watch it revert when cleared
- Render the theme as CSS custom properties

Run: python examples/basic_usage.py
"""

from themegen import (
    Theme,
    derive_display_colors,
    generate_shades_from_primary,
    get_contrast_text_color,
    hex_to_hsl,
    is_valid_hex,
    normalize_hex,
)
from themegen.colors.contrast import contrast_ratio
from themegen.engine import ThemeEngine
from themegen.errors import InvalidColorError
from themegen.logging import configure_logging


def print_shades(title: str, shades: tuple[str, ...]) -> None:
    """Print shades with their text colors."""
    print(f"   {title}:")
    for index, shade in enumerate(shades):
        text = get_contrast_text_color(shade)
        print(f"     [{index}] {shade}  text {text}  ({contrast_ratio(text, shade):.2f}:1)")


def main():
    """Main demonstration function."""
    print("🎨 themegen - Basic Usage Demo")
    print("=" * 50)

    configure_logging(level="WARNING")

    # 1. Validation and normalization
    print("1. Validating user input...")
    for raw in ("#6366f1", "6366f1", "#f00", "not a color"):
        normalized = normalize_hex(raw)
        print(f"   {raw!r:15} valid={is_valid_hex(raw)!s:5} normalized={normalized!r} "
              f"valid after normalize={is_valid_hex(normalized)}")
    print()

    # 2. HSL decomposition
    primary = "#6366f1"
    hsl = hex_to_hsl(primary)
    print(f"2. {primary} in HSL: h={hsl.h} s={hsl.s} l={hsl.l}")
    print()

    # 3. Shades
    print("3. Generating shades (lightness 92, 78, 64, 50, 36)...")
    print_shades("Generated", generate_shades_from_primary(primary))
    print()

    # 4. Overrides
    print("4. Overriding shade 2, then clearing it...")
    theme = Theme.create(primary).with_override(2, "#abc")
    print_shades("With override", derive_display_colors(theme))
    theme = theme.with_override(2, "")
    print_shades("Cleared", derive_display_colors(theme))
    print()

    # 5. CSS
    print("5. Theme as CSS variables:")
    engine = ThemeEngine()
    print(engine.render_css(engine.build_palette(theme)))

    # 6. Error handling
    print("6. Invalid input falls back to the previous theme...")
    try:
        theme = theme.with_primary("#12345")
    except InvalidColorError as e:
        print(f"   Rejected: {e} (keeping {theme.primary})")
    print()

    print("✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
