"""Configuration module for toolchainlocator.

This module provides YAML configuration parsing and validation for
toolchainlocator.yaml.
"""

from toolchainlocator.config.parser import (
    CONFIG_ENV,
    LocatorConfig,
    ConfigError,
    load_config,
    parse_config,
)

__all__ = [
    "CONFIG_ENV",
    "LocatorConfig",
    "ConfigError",
    "load_config",
    "parse_config",
]
