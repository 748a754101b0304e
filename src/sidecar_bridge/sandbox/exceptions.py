"""Exceptions for the sandbox module.

A non-zero exit code forwarded from a process that did start is not an
error and has no exception type.
"""

from sidecar_bridge.exceptions import SidecarBridgeError

__all__ = ["LaunchError"]


class LaunchError(SidecarBridgeError):
    """Raised when a native binary or the sandbox exec tool cannot be started."""

    def __init__(self, executable: str, reason: str) -> None:
        super().__init__(f"failed to execute '{executable}': {reason}")
        self.executable = executable
        self.reason = reason
