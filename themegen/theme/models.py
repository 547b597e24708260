"""Theme data models"""

from dataclasses import dataclass, field, replace
from typing import Any, Optional, Sequence

from ..colors.hex import is_valid_hex, normalize_hex
from ..colors.shades import SHADE_COUNT
from ..errors import InvalidColorError, ShadeOverrideError

# CSS scale step for each shade index, light to dark
SHADE_NAMES: tuple[str, ...] = ("50", "100", "200", "300", "400")


def _clean_override(value: Optional[str]) -> Optional[str]:
    """Normalize an override; anything that is not a valid color means "no override"."""
    hex_color = normalize_hex(value)
    if hex_color and is_valid_hex(hex_color):
        return hex_color
    return None


def _check_index(index: int) -> None:
    if not 0 <= index < SHADE_COUNT:
        raise ShadeOverrideError(
            f"Shade index {index} out of range 0-{SHADE_COUNT - 1}",
            index=index,
            shade_count=SHADE_COUNT,
        )


@dataclass(frozen=True)
class Theme:
    """
    Primary color plus optional manual override per shade

    Immutable: the with_* methods return new themes. An override of None
    means the generated shade is shown for that slot.
    """
    primary: str
    overrides: tuple[Optional[str], ...] = (None,) * SHADE_COUNT

    def __post_init__(self) -> None:
        if not is_valid_hex(self.primary):
            raise InvalidColorError(f"Invalid primary color: {self.primary!r}", value=self.primary)

        if len(self.overrides) != SHADE_COUNT:
            raise ShadeOverrideError(
                f"Got {len(self.overrides)} overrides for {SHADE_COUNT} shades",
                index=len(self.overrides) - 1,
                shade_count=SHADE_COUNT,
            )

        for index, value in enumerate(self.overrides):
            if value is not None and not is_valid_hex(value):
                raise InvalidColorError(
                    f"Invalid override for shade {index}: {value!r}",
                    value=value,
                    context={"index": index},
                )

    @classmethod
    def create(cls, primary: str,
               overrides: Optional[Sequence[Optional[str]]] = None) -> "Theme":
        """
        Build a theme from raw input

        The primary is normalized and must then be valid. Overrides are padded
        to five slots; invalid or empty entries become None.

        Raises:
            InvalidColorError: If the primary is not a usable hex color
            ShadeOverrideError: If more than five overrides are given
        """
        hex_color = normalize_hex(primary)
        if not is_valid_hex(hex_color):
            raise InvalidColorError(f"Invalid primary color: {primary!r}", value=primary)

        overrides = list(overrides or [])
        if len(overrides) > SHADE_COUNT:
            raise ShadeOverrideError(
                f"Got {len(overrides)} overrides for {SHADE_COUNT} shades",
                index=len(overrides) - 1,
                shade_count=SHADE_COUNT,
            )
        overrides.extend([None] * (SHADE_COUNT - len(overrides)))

        return cls(
            primary=hex_color,
            overrides=tuple(_clean_override(value) for value in overrides),
        )

    def with_primary(self, primary: str) -> "Theme":
        """New theme with a different primary; every override is dropped."""
        return Theme.create(primary)

    def with_override(self, index: int, value: Optional[str]) -> "Theme":
        """
        New theme with the override at index replaced

        An empty or invalid value clears the override, so the slot reverts
        to the generated shade.
        """
        _check_index(index)
        overrides = list(self.overrides)
        overrides[index] = _clean_override(value)
        return replace(self, overrides=tuple(overrides))

    def without_override(self, index: int) -> "Theme":
        return self.with_override(index, None)

    @property
    def has_overrides(self) -> bool:
        return any(value is not None for value in self.overrides)


@dataclass(frozen=True)
class Swatch:
    """One displayed shade with its text color"""
    index: int
    name: str
    background: str
    text_color: str
    contrast_ratio: float
    overridden: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "name": self.name,
            "background": self.background,
            "text_color": self.text_color,
            "contrast_ratio": round(self.contrast_ratio, 2),
            "overridden": self.overridden,
        }


@dataclass(frozen=True)
class ThemePalette:
    """Fully resolved theme: swatches, text colors and CSS variables"""
    primary: str
    swatches: tuple[Swatch, ...]
    css_variables: dict[str, str] = field(default_factory=dict)

    @property
    def shades(self) -> tuple[str, ...]:
        return tuple(swatch.background for swatch in self.swatches)

    @property
    def text_colors(self) -> tuple[str, ...]:
        return tuple(swatch.text_color for swatch in self.swatches)

    def to_dict(self) -> dict[str, Any]:
        return {
            "primary": self.primary,
            "swatches": [swatch.to_dict() for swatch in self.swatches],
            "css_variables": dict(self.css_variables),
        }
