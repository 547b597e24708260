"""CSS custom property rendering"""

from typing import Mapping, Sequence

from ..colors.shades import SHADE_COUNT
from .models import SHADE_NAMES

PLACEHOLDER = "—"
# --color-500 repeats the darkest shade
ALIAS_NAME = "500"


def variable_names(prefix: str = "--color") -> list[str]:
    """Ordered custom property names, primary first."""
    names = [f"{prefix}-primary"]
    names.extend(f"{prefix}-{name}" for name in SHADE_NAMES)
    names.append(f"{prefix}-{ALIAS_NAME}")
    return names


def css_variables(primary: str, shades: Sequence[str],
                  prefix: str = "--color") -> dict[str, str]:
    """
    Map a primary and its 5 shades to CSS custom properties

    Raises:
        ValueError: If shades does not hold exactly 5 colors
    """
    if len(shades) != SHADE_COUNT:
        raise ValueError(f"Expected {SHADE_COUNT} shades, got {len(shades)}")

    values = [primary, *shades, shades[-1]]
    return dict(zip(variable_names(prefix), values))


def render_css(variables: Mapping[str, str], selector: str = ":root") -> str:
    """Render custom properties as a CSS rule block."""
    lines = [f"{selector} {{"]
    lines.extend(f"  {name}: {value};" for name, value in variables.items())
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_placeholder_css(selector: str = ":root", prefix: str = "--color",
                           placeholder: str = PLACEHOLDER) -> str:
    """CSS block shown before any primary color is chosen."""
    return render_css({name: placeholder for name in variable_names(prefix)}, selector)
