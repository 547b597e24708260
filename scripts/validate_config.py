#!/usr/bin/env python3
"""Configuration validation script."""

import argparse
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from themegen.config.loader import ConfigLoader
from themegen.config.validation import ConfigValidator
from themegen.errors import ConfigurationError


def main():
    """Main validation function."""
    parser = argparse.ArgumentParser(description="Validate themegen.yaml")
    parser.add_argument("config_dir", nargs="?", default=str(project_root / "config"),
                        help="Directory containing themegen.yaml")
    args = parser.parse_args()

    loader = ConfigLoader.create(args.config_dir)
    print(f"🔍 Validating {loader.config_dir / 'themegen.yaml'}...")

    try:
        config = loader.merge_config()
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print("✅ Configuration is valid")
    print(f"   Lightness levels: {list(config['shades']['lightness_levels'])}")
    print(f"   Minimum contrast: {config['contrast']['min_ratio']}:1")
    print(f"   CSS: {config['css']['selector']} / {config['css']['variable_prefix']}-*")
    sys.exit(0)


if __name__ == "__main__":
    main()
