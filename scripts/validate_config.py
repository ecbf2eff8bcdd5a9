#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from voyage_app.config.loader import ConfigLoader
from voyage_app.config.validation import ConfigValidator, ValidationError
from voyage_app.errors import ConfigurationError
from voyage_app.exchange.models import RateTable


def validate_config_dir(config_dir: Path) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else project_root / "config"
    print(f"🔍 Validating voyage configuration in {config_dir}...")

    try:
        errors = validate_config_dir(config_dir)
    except ConfigurationError as e:
        print(f"❌ Config file rejected: {e}")
        print("\n❌ Configuration validation failed!")
        sys.exit(1)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        print("\n❌ Configuration validation failed!")
        sys.exit(1)

    print("✅ Configuration is valid")

    print("\n💱 Building rate table...")
    config = ConfigLoader.create(config_dir).merge_config()
    try:
        table = RateTable.from_mapping(config["exchange"]["rates"])
    except ConfigurationError as e:
        print(f"❌ Rate table rejected: {e}")
        print("\n❌ Configuration validation failed!")
        sys.exit(1)

    for code in table.currencies:
        print(f"  • 1 USD = {table.rate_for(code)} {code}")

    print("\n🎉 All configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
