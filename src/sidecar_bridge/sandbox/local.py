"""Local process launcher.

Runs dispatched commands on this host with the standard library
process primitives. Standard streams are inherited, not piped, so
interactive tools behave as if started directly from the shell.
"""

from __future__ import annotations

import os
import signal
import subprocess
from collections.abc import Mapping, Sequence
from typing import NoReturn

from sidecar_bridge.logging_config import get_logger
from sidecar_bridge.sandbox.base import BaseLauncher
from sidecar_bridge.sandbox.exceptions import LaunchError

__all__ = ["LocalLauncher"]

logger = get_logger(__name__)


class LocalLauncher(BaseLauncher):
    """Launches processes directly on the host."""

    @property
    def name(self) -> str:
        """Return the launcher identifier."""
        return "local"

    def replace_process(
        self,
        executable: str,
        argv: Sequence[str],
        env: Mapping[str, str],
    ) -> NoReturn:
        """Exec ``executable`` in place of the current process."""
        logger.debug("process_replace", executable=executable, argv=list(argv))
        try:
            os.execve(executable, list(argv), dict(env))
        except OSError as e:
            raise LaunchError(executable, e.strerror or str(e)) from e
        # os.execve only returns by raising
        raise LaunchError(executable, "exec returned unexpectedly")

    def spawn(self, argv: Sequence[str]) -> int:
        """Run ``argv`` and wait for it, forwarding its exit code.

        SIGINT is ignored by this process while the child runs, so Ctrl-C
        reaches the child alone and the child decides how to exit. A
        child terminated by signal N is reported as 128 + N.
        """
        logger.debug("process_spawn", argv=list(argv))
        try:
            process = subprocess.Popen(list(argv))
        except OSError as e:
            raise LaunchError(argv[0], e.strerror or str(e)) from e

        exit_code = _wait_ignoring_interrupts(process)
        if exit_code < 0:
            exit_code = 128 - exit_code
        logger.debug("process_exited", executable=argv[0], exit_code=exit_code)
        return exit_code


def _wait_ignoring_interrupts(process: subprocess.Popen[bytes]) -> int:
    """Wait for ``process`` with SIGINT ignored, then restore the handler.

    The child is started before the handler changes, so it keeps the
    default SIGINT disposition.
    """
    try:
        previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    except ValueError:
        # Signal handlers can only be changed from the main thread
        return process.wait()
    try:
        return process.wait()
    finally:
        signal.signal(signal.SIGINT, previous if previous is not None else signal.SIG_DFL)
