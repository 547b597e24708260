"""Unit tests for configuration management."""

from pathlib import Path

import pytest
import yaml

from themegen.config.defaults import get_default_config
from themegen.config.loader import ConfigLoader
from themegen.config.validation import ConfigValidator
from themegen.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.shades.lightness_levels == (92, 78, 64, 50, 36)
        assert config.contrast.min_ratio == 4.5
        assert config.css.selector == ":root"
        assert config.css.variable_prefix == "--color"
        assert config.logging.level == "INFO"


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self, tmp_path) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create(tmp_path)
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path) -> None:
        """Test config merging without a config file."""
        config = ConfigLoader.create(tmp_path).merge_config()

        assert config["shades"]["lightness_levels"] == (92, 78, 64, 50, 36)
        assert config["contrast"]["min_ratio"] == 4.5

    def test_file_overrides_defaults(self, write_config) -> None:
        """Test that themegen.yaml overrides defaults."""
        config_dir = write_config({"contrast": {"min_ratio": 7.0}})

        config = ConfigLoader.create(config_dir).merge_config()

        assert config["contrast"]["min_ratio"] == 7.0
        # Other defaults should remain
        assert config["css"]["selector"] == ":root"

    def test_explicit_overrides_win(self, write_config) -> None:
        """Test that explicit overrides beat the config file."""
        config_dir = write_config({"contrast": {"min_ratio": 7.0}, "css": {"selector": ".a"}})

        config = ConfigLoader.create(config_dir).merge_config({"contrast": {"min_ratio": 3.0}})

        assert config["contrast"]["min_ratio"] == 3.0
        assert config["css"]["selector"] == ".a"

    def test_empty_file_uses_defaults(self, write_config) -> None:
        config_dir = write_config("")
        assert ConfigLoader.create(config_dir).load_file_config() == {}

    def test_non_mapping_file_raises(self, write_config) -> None:
        config_dir = write_config("- just\n- a list\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(config_dir).load_file_config()

    def test_unparsable_file_raises_configuration_error(self, write_config) -> None:
        config_dir = write_config("shades: [unclosed\n")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(config_dir).load_file_config()

        assert exc_info.value.context["path"] == str(Path(config_dir) / "themegen.yaml")
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    def test_load_config_builds_typed_config(self, write_config) -> None:
        """Test that load_config returns dataclasses."""
        config_dir = write_config({
            "shades": {"lightness_levels": [95, 80, 65, 50, 35]},
            "logging": {"level": "debug"},
        })

        config = ConfigLoader.create(config_dir).load_config()

        assert config.shades.lightness_levels == (95, 80, 65, 50, 35)
        assert config.logging.level == "DEBUG"
        assert config.contrast.min_ratio == 4.5

    def test_load_config_invalid_raises(self, write_config) -> None:
        """Test that invalid configuration is rejected."""
        config_dir = write_config({"contrast": {"min_ratio": 50}})

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(config_dir).load_config()

        assert exc_info.value.recoverable is False
        assert [err.field for err in exc_info.value.errors] == ["min_ratio"]


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_defaults_are_valid(self, tmp_path) -> None:
        config = ConfigLoader.create(tmp_path).merge_config()
        assert ConfigValidator.validate_config(config) == []

    @pytest.mark.parametrize("levels", [
        [92, 78, 64, 50],            # too few
        [92, 78, 64, 50, 36, 20],    # too many
        [92, 78, 64.5, 50, 36],      # not integers
        [120, 78, 64, 50, 36],       # out of range
        [36, 50, 64, 78, 92],        # ascending
        [92, 78, 78, 50, 36],        # duplicate
        "92,78,64,50,36",
    ])
    def test_invalid_lightness_levels(self, levels) -> None:
        errors = ConfigValidator.validate_shade_params({"lightness_levels": levels})
        assert len(errors) == 1
        assert errors[0].field == "lightness_levels"

    @pytest.mark.parametrize("value", [0.5, 22, "4.5", True])
    def test_invalid_min_ratio(self, value) -> None:
        errors = ConfigValidator.validate_contrast_params({"min_ratio": value})
        assert len(errors) == 1
        assert errors[0].field == "min_ratio"

    def test_valid_min_ratio(self) -> None:
        assert ConfigValidator.validate_contrast_params({"min_ratio": 3}) == []
        assert ConfigValidator.validate_contrast_params({"min_ratio": 7.0}) == []

    def test_invalid_css_params(self) -> None:
        errors = ConfigValidator.validate_css_params({
            "selector": "  ",
            "variable_prefix": "color",
            "placeholder": None,
        })
        assert {err.field for err in errors} == {"selector", "variable_prefix", "placeholder"}

    def test_invalid_logging_params(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": "yes"})
        assert {err.field for err in errors} == {"level", "format_json"}

    def test_section_must_be_mapping(self) -> None:
        errors = ConfigValidator.validate_config({"shades": [92, 78]})
        assert len(errors) == 1
        assert errors[0].field == "shades"
