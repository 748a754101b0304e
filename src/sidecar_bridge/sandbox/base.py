"""Base launcher abstraction for dispatched commands.

This module defines the BaseLauncher abstract base class. A launcher
owns the two process primitives the dispatcher needs: replacing the
current process image with a host binary, and spawning a child that
shares the parent's standard streams.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import NoReturn

__all__ = ["BaseLauncher"]


class BaseLauncher(ABC):
    """Abstract base class for process launchers.

    All launchers must implement:
    - replace_process(): Exec a host binary in place of this process
    - spawn(): Run a child to completion and return its exit code
    - name: Property returning the launcher identifier
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the launcher identifier."""
        ...

    @abstractmethod
    def replace_process(
        self,
        executable: str,
        argv: Sequence[str],
        env: Mapping[str, str],
    ) -> NoReturn:
        """Replace the current process image.

        Only returns control by raising; on success the calling process
        no longer exists in its prior form.

        Args:
            executable: Absolute path of the binary to exec.
            argv: Full argument vector, argv[0] included.
            env: Environment for the new image.

        Raises:
            LaunchError: If the binary cannot be executed.

        """
        ...

    @abstractmethod
    def spawn(self, argv: Sequence[str]) -> int:
        """Run a child process with inherited standard streams.

        Args:
            argv: Argument vector; argv[0] is looked up on PATH.

        Returns:
            The child's exit code.

        Raises:
            LaunchError: If the child cannot be started.

        """
        ...
