"""Configuration module for the bridge dispatch policy.

This module provides Pydantic models for the YAML policy file, the
loader that finds and validates it, and environment settings via
pydantic-settings.
"""

from sidecar_bridge.config.loader import load_config, resolve_config_path
from sidecar_bridge.config.models import BridgeConfig, CommandMapping, NativeOverride
from sidecar_bridge.config.settings import BridgeSettings, get_settings

__all__ = [
    "BridgeConfig",
    "BridgeSettings",
    "CommandMapping",
    "get_settings",
    "load_config",
    "NativeOverride",
    "resolve_config_path",
]
