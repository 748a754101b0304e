"""Exceptions for config module.

This module defines exceptions related to configuration loading,
parsing, and validation errors. Every validation rule has its own
subclass so callers can tell the failure kinds apart.
"""

from __future__ import annotations

from pathlib import Path

from sidecar_bridge.config.defaults import EXAMPLE_CONFIG_PATH, SUPPORTED_CONFIG_VERSION
from sidecar_bridge.exceptions import SidecarBridgeError

__all__ = [
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "ConfigurationError",
    "EmptyCommandsError",
    "InvalidCommandError",
    "InvalidOverrideError",
    "MissingVersionError",
    "UnsupportedVersionError",
]


class ConfigurationError(SidecarBridgeError):
    """Base exception for configuration-related errors.

    Attributes:
        path: Config file the error originates from, when known.

    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        return self.message


class ConfigNotFoundError(ConfigurationError):
    """Raised when the config file does not exist."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"config file not found: {path}", path)

    def __str__(self) -> str:
        return (
            f"{self.message}\n"
            f"See {EXAMPLE_CONFIG_PATH} for an example configuration"
        )


class ConfigParseError(ConfigurationError):
    """Raised when the config file is not valid YAML or has the wrong shape."""

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"invalid YAML in {self.path}: {self.message}"


class ConfigValidationError(ConfigurationError):
    """Raised when a parsed configuration violates a validation rule."""

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"invalid config in {self.path}: {self.message}"


class MissingVersionError(ConfigValidationError):
    """Raised when the ``version`` field is absent or empty."""

    def __init__(self) -> None:
        super().__init__("missing required field 'version'")


class UnsupportedVersionError(ConfigValidationError):
    """Raised when ``version`` is present but not the supported value."""

    def __init__(self, version: str) -> None:
        super().__init__(
            f"unsupported config version '{version}', "
            f"expected '{SUPPORTED_CONFIG_VERSION}'"
        )
        self.version = version


class EmptyCommandsError(ConfigValidationError):
    """Raised when no commands are configured."""

    def __init__(self) -> None:
        super().__init__(
            "missing required field 'commands' (must have at least one command)"
        )


class InvalidCommandError(ConfigValidationError):
    """Raised when a command mapping lacks a required field."""

    def __init__(self, command: str, field: str) -> None:
        super().__init__(f"command '{command}': missing required field '{field}'")
        self.command = command
        self.field = field


class InvalidOverrideError(ConfigValidationError):
    """Raised when a native override has no executable path."""

    def __init__(self, override: str) -> None:
        super().__init__(f"override '{override}': missing required field 'native'")
        self.override = override
