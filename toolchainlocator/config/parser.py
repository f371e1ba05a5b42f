"""YAML configuration parser for toolchainlocator.

This module provides parsing and validation for toolchainlocator.yaml files.

Example toolchainlocator.yaml:

    version: 1
    installation_root: ~/.rustup/toolchains
    compiler: rustc
    version_flag: -V
    probe_timeout: 10
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..core.directory import get_toolchains_root
from ..core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "TOOLCHAINLOCATOR_CONFIG"
SUPPORTED_CONFIG_VERSION = 1


@dataclass
class LocatorConfig:
    """Complete toolchainlocator configuration."""

    version: int = SUPPORTED_CONFIG_VERSION
    installation_root: Optional[str] = None  # None: resolve from RUSTUP_HOME
    compiler: str = "rustc"
    version_flag: str = "-V"
    probe_timeout: Optional[float] = None  # None: wait for the compiler forever
    version_pattern: Optional[str] = None  # group 1 version, group 2 date

    def resolve_root(self) -> Optional[Path]:
        """
        Get the installation root to scan.

        Returns:
            Configured root with ``~`` expanded, or the rustup toolchains
            directory; None if neither can be determined
        """
        if self.installation_root:
            return Path(self.installation_root).expanduser()
        return get_toolchains_root()


def parse_config(config_path: Path) -> LocatorConfig:
    """
    Parse toolchainlocator.yaml configuration file.

    Args:
        config_path: Path to toolchainlocator.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration must be a mapping, got {type(data).__name__}"
        )

    config = _parse_and_validate(data)
    logger.debug(f"Loaded configuration from {config_path}")
    return config


def load_config(config_path: Optional[Path] = None) -> LocatorConfig:
    """
    Load configuration from an explicit path, the environment, or defaults.

    Args:
        config_path: Configuration file; when omitted, the file named by
            ``$TOOLCHAINLOCATOR_CONFIG`` is used if set

    Returns:
        Parsed configuration, or the default configuration if no file is
        given

    Raises:
        ConfigError: If the selected configuration file is invalid
    """
    if config_path is None:
        env_path = os.environ.get(CONFIG_ENV)
        if env_path:
            config_path = Path(env_path)

    if config_path is None:
        return LocatorConfig()

    return parse_config(config_path)


def _parse_and_validate(data: Dict[str, Any]) -> LocatorConfig:
    """Parse and validate configuration data."""
    known_keys = set(LocatorConfig.__dataclass_fields__)
    unknown = sorted(str(key) for key in data if key not in known_keys)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    version = data.get("version", SUPPORTED_CONFIG_VERSION)
    if version != SUPPORTED_CONFIG_VERSION:
        raise ConfigError(
            f"Unsupported version: {version} (expected {SUPPORTED_CONFIG_VERSION})"
        )

    installation_root = data.get("installation_root")
    if installation_root is not None and not isinstance(installation_root, str):
        raise ConfigError("installation_root must be a string")

    compiler = data.get("compiler", "rustc")
    if not isinstance(compiler, str) or not compiler.strip():
        raise ConfigError("compiler must be a non-empty string")

    version_flag = data.get("version_flag", "-V")
    if not isinstance(version_flag, str) or not version_flag:
        raise ConfigError("version_flag must be a non-empty string")

    probe_timeout = data.get("probe_timeout")
    if probe_timeout is not None:
        if isinstance(probe_timeout, bool) or not isinstance(
            probe_timeout, (int, float)
        ):
            raise ConfigError("probe_timeout must be a number or null")
        if probe_timeout <= 0:
            raise ConfigError(f"probe_timeout must be positive: {probe_timeout}")
        probe_timeout = float(probe_timeout)

    version_pattern = data.get("version_pattern")
    if version_pattern is not None:
        _validate_pattern(version_pattern)

    return LocatorConfig(
        version=version,
        installation_root=installation_root,
        compiler=compiler,
        version_flag=version_flag,
        probe_timeout=probe_timeout,
        version_pattern=version_pattern,
    )


def _validate_pattern(pattern: Any) -> None:
    """Check that a version pattern compiles and captures the version."""
    if not isinstance(pattern, str):
        raise ConfigError("version_pattern must be a string")

    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise ConfigError(f"Invalid version_pattern: {e}")

    if compiled.groups < 1:
        raise ConfigError("version_pattern must capture the version in group 1")
