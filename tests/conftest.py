"""Pytest configuration and shared fixtures."""

import logging
from pathlib import Path

import pytest
import yaml

from themegen.config.defaults import get_default_config
from themegen.theme.models import Theme


# Shades of #6366f1 (hue 239, saturation 84) at lightness 92, 78, 64, 50, 36
INDIGO_SHADES = ("#d9dafc", "#9899f6", "#5659f0", "#1418eb", "#0f11a9")


@pytest.fixture
def primary_hex() -> str:
    """Indigo primary used across tests."""
    return "#6366f1"


@pytest.fixture
def indigo_shades() -> tuple[str, ...]:
    return INDIGO_SHADES


@pytest.fixture
def sample_theme(primary_hex) -> Theme:
    """Theme with an override on the middle shade."""
    return Theme.create(primary_hex, [None, None, "#abcdef"])


@pytest.fixture
def default_config():
    return get_default_config()


@pytest.fixture
def write_config(tmp_path):
    """Write a themegen.yaml into a temporary config dir and return the dir."""
    def _write(content) -> Path:
        config_file = tmp_path / "themegen.yaml"
        if isinstance(content, str):
            config_file.write_text(content)
        else:
            config_file.write_text(yaml.safe_dump(content))
        return tmp_path
    return _write


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """CLI tests reconfigure logging onto captured streams; undo that afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
