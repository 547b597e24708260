"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_shade_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate shade parameters."""
        errors = []

        if "lightness_levels" in params:
            value = params["lightness_levels"]
            if (not isinstance(value, (list, tuple)) or len(value) != 5
                    or not all(isinstance(v, int) and not isinstance(v, bool) for v in value)):
                errors.append(ValidationError(
                    field="lightness_levels",
                    message="Must be a list of exactly 5 integers",
                    value=value
                ))
            elif not all(0 <= v <= 100 for v in value):
                errors.append(ValidationError(
                    field="lightness_levels",
                    message="Each level must be between 0 and 100",
                    value=value
                ))
            elif any(a <= b for a, b in zip(value, value[1:])):
                errors.append(ValidationError(
                    field="lightness_levels",
                    message="Levels must be strictly descending (light to dark)",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_contrast_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate contrast parameters."""
        errors = []

        if "min_ratio" in params:
            value = params["min_ratio"]
            if not _is_number(value) or value < 1 or value > 21:
                errors.append(ValidationError(
                    field="min_ratio",
                    message="Must be a number between 1 and 21",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_css_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate CSS output parameters."""
        errors = []

        if "selector" in params:
            value = params["selector"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="selector",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "variable_prefix" in params:
            value = params["variable_prefix"]
            if not isinstance(value, str) or not value.startswith("--") or len(value) < 3:
                errors.append(ValidationError(
                    field="variable_prefix",
                    message="Must be a custom property name starting with '--'",
                    value=value
                ))

        if "placeholder" in params:
            value = params["placeholder"]
            if not isinstance(value, str):
                errors.append(ValidationError(
                    field="placeholder",
                    message="Must be a string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []
        section_validators = {
            "shades": ConfigValidator.validate_shade_params,
            "contrast": ConfigValidator.validate_contrast_params,
            "css": ConfigValidator.validate_css_params,
            "logging": ConfigValidator.validate_logging_params,
        }

        for section, validate in section_validators.items():
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
