"""
Pytest configuration and shared fixtures for toolchainlocator tests.
"""

import os
from pathlib import Path
from typing import Callable, Iterable, Optional

import pytest

from toolchainlocator.core.platform import clear_platform_cache


def write_executable(path: Path, stdout: str = "", exit_code: int = 0) -> Path:
    """Write a shell script that prints ``stdout`` and exits with ``exit_code``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        "#!/bin/sh\n"
        "cat <<'EOF'\n"
        f"{stdout}\n"
        "EOF\n"
        f"exit {exit_code}\n"
    )
    path.chmod(0o755)
    return path


@pytest.fixture(autouse=True)
def _reset_platform_cache():
    """Make every test see a fresh OS detection."""
    clear_platform_cache()
    yield
    clear_platform_cache()


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Create isolated home directory with no rustup or config overrides."""
    fake_home = tmp_path / "home"
    fake_home.mkdir()

    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setenv("USERPROFILE", str(fake_home))
    monkeypatch.delenv("RUSTUP_HOME", raising=False)
    monkeypatch.delenv("TOOLCHAINLOCATOR_CONFIG", raising=False)

    return fake_home


@pytest.fixture
def toolchains_root(tmp_path: Path) -> Path:
    """Create an empty rustup-style toolchains directory."""
    root = tmp_path / ".rustup" / "toolchains"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def make_toolchain(toolchains_root: Path) -> Callable[..., Path]:
    """
    Factory creating a toolchain directory with fake executables.

    Args (of the returned factory):
        name: Toolchain directory name
        version_output: What the fake ``rustc -V`` prints, or None to leave
            the compiler out
        components: Component executables to create in ``bin``
        root: Installation root; defaults to ``toolchains_root``

    Returns:
        Path to the toolchain's ``bin`` directory

    Example:
        def test_lookup(make_toolchain):
            bin_dir = make_toolchain(
                "stable", "rustc 1.32.0 (9fda7c223 2019-01-16)", ["rustfmt"]
            )
    """

    def _make(
        name: str,
        version_output: Optional[str],
        components: Iterable[str] = ("rustfmt",),
        root: Optional[Path] = None,
    ) -> Path:
        bin_dir = (root or toolchains_root) / name / "bin"
        bin_dir.mkdir(parents=True, exist_ok=True)

        if version_output is not None:
            write_executable(bin_dir / "rustc", version_output)

        for component in components:
            write_executable(bin_dir / component, f"{component} from {name}")

        return bin_dir

    return _make


@pytest.fixture
def enforced_permissions():
    """Skip when running as root, where permission bits are not enforced."""
    if hasattr(os, "geteuid") and os.geteuid() == 0:
        pytest.skip("permission checks are bypassed for root")


@pytest.fixture
def fake_executable() -> Callable[..., Path]:
    """Factory writing a shell script that prints fixed output."""
    return write_executable
