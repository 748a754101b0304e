"""Exceptions for the wrappers module."""

from sidecar_bridge.exceptions import SidecarBridgeError

__all__ = ["WrapperError"]


class WrapperError(SidecarBridgeError):
    """Raised when wrapper symlinks cannot be materialized."""

    pass
