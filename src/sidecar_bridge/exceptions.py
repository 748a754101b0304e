"""Base exceptions for sidecar-bridge.

This module defines the root exception hierarchy for the entire
package. All domain-specific exceptions should inherit from
SidecarBridgeError.
"""

__all__ = ["SidecarBridgeError"]


class SidecarBridgeError(Exception):
    """Base exception for all sidecar-bridge errors.

    Every error is resolved by the CLI to a single diagnostic line and
    a process exit code, taken from ``exit_code``.
    """

    exit_code: int = 1
