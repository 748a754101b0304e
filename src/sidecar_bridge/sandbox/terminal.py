"""Terminal detection for standard streams."""

from __future__ import annotations

import os
import sys
from typing import IO, Any

__all__ = ["is_terminal", "stdio_is_interactive"]


def is_terminal(stream: IO[Any] | None) -> bool:
    """Return True if ``stream`` is attached to an interactive terminal.

    Streams without a real file descriptor (closed, replaced by test
    harnesses, or None) are not terminals.
    """
    if stream is None:
        return False
    try:
        return os.isatty(stream.fileno())
    except (OSError, ValueError):
        return False


def stdio_is_interactive() -> bool:
    """Return True when both stdin and stdout are terminals."""
    return is_terminal(sys.stdin) and is_terminal(sys.stdout)
