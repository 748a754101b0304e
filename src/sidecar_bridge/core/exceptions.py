"""Exceptions for command dispatch."""

from sidecar_bridge.config.defaults import COMMAND_NOT_FOUND_EXIT_CODE
from sidecar_bridge.exceptions import SidecarBridgeError

__all__ = ["CommandNotFoundError", "DispatchError"]


class DispatchError(SidecarBridgeError):
    """Base exception for dispatch errors."""

    pass


class CommandNotFoundError(DispatchError):
    """Raised when a command is neither configured nor on the host PATH."""

    exit_code = COMMAND_NOT_FOUND_EXIT_CODE

    def __init__(self, command: str) -> None:
        super().__init__(
            f"command '{command}' not found in config and not available natively"
        )
        self.command = command
