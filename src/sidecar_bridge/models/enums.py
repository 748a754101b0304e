"""Enumeration types for sidecar-bridge."""

from enum import Enum

__all__ = ["ResolutionKind"]


class ResolutionKind(str, Enum):
    """How a command name is dispatched.

    Attributes:
        native: Run a host binary named by a native override.
        sandboxed: Run inside a container through the sandbox exec tool.
        unresolved: Not configured; looked up on the host PATH.
    """

    native = "native"
    sandboxed = "sandboxed"
    unresolved = "unresolved"
