"""Pytest configuration and shared fixtures for the sidecar-bridge test suite.

This module provides fixtures for writing config files, building
configurations in memory, and isolating tests from the caller's
environment variables.
"""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import yaml

from fixtures import GO_CONFIG_YAML, FakeLauncher
from sidecar_bridge.config.models import BridgeConfig
from sidecar_bridge.config.settings import get_settings

_BRIDGE_ENV_VARS = (
    "SIDECAR_CONFIG_DIR",
    "BRIDGE_CONFIG",
    "BRIDGE_LOG_LEVEL",
    "BRIDGE_LOG_JSON",
    "BRIDGE_SANDBOX_TOOL",
)


@pytest.fixture(autouse=True)
def clean_bridge_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove bridge environment variables and reset cached settings."""
    for name in _BRIDGE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes YAML text to ``tmp_path/bridge.yaml``."""

    def _write(content: str, name: str = "bridge.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def go_config() -> BridgeConfig:
    """A validated configuration with go, npm, php and a claude override."""
    config = BridgeConfig.model_validate(yaml.safe_load(GO_CONFIG_YAML))
    config.ensure_valid()
    return config


@pytest.fixture
def fake_launcher() -> FakeLauncher:
    """A launcher that records spawns and raises instead of exec'ing."""
    return FakeLauncher()
