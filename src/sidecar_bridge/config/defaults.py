"""Default values and constants for the bridge configuration.

This module centralizes the literals shared by the loader, the settings
and the CLI so they are defined in exactly one place.
"""

__all__ = [
    "COMMAND_NOT_FOUND_EXIT_CODE",
    "DEFAULT_CONFIG_DIR_NAME",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_SANDBOX_TOOL",
    "EXAMPLE_CONFIG_PATH",
    "LAUNCHER_NAME",
    "SUPPORTED_CONFIG_VERSION",
]

# Only schema version understood by this release
SUPPORTED_CONFIG_VERSION = "1"

# Config file location: $SIDECAR_CONFIG_DIR/bridge.yaml, else ./.sidecar/bridge.yaml
DEFAULT_CONFIG_DIR_NAME = ".sidecar"
DEFAULT_CONFIG_FILENAME = "bridge.yaml"
EXAMPLE_CONFIG_PATH = "examples/claude-bridge.yaml"

DEFAULT_SANDBOX_TOOL = "docker"
DEFAULT_LOG_LEVEL = "WARNING"

# Shell convention for "command not found"
COMMAND_NOT_FOUND_EXIT_CODE = 127

# File every wrapper symlink points at
LAUNCHER_NAME = "dispatcher"
