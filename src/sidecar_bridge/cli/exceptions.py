"""Exceptions for the CLI module.

This module defines exceptions specific to CLI operations.
"""

from sidecar_bridge.exceptions import SidecarBridgeError

__all__ = ["CLIError", "UsageError"]


class CLIError(SidecarBridgeError):
    """Base exception for CLI-related errors."""

    pass


class UsageError(CLIError):
    """Raised when the command line is missing something required."""

    pass
