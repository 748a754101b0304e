"""Command construction for ``docker exec``.

Sandboxed commands run in an already running container. This module
only builds the argument vector; the container's lifecycle is managed
elsewhere.
"""

from __future__ import annotations

from collections.abc import Sequence

from sidecar_bridge.config.defaults import DEFAULT_SANDBOX_TOOL

__all__ = ["DockerExec"]


class DockerExec:
    """Builds ``<tool> exec`` invocations.

    Args:
        tool: Exec tool name or path (``docker`` or a compatible CLI).

    """

    def __init__(self, tool: str = DEFAULT_SANDBOX_TOOL) -> None:
        self._tool = tool

    @property
    def tool(self) -> str:
        """Name or path of the exec tool."""
        return self._tool

    def build_command(
        self,
        container: str,
        executable: str,
        args: Sequence[str],
        workdir: str,
        tty: bool = False,
    ) -> list[str]:
        """Construct the full ``exec`` command.

        ``-i`` keeps stdin open in every case; ``-t`` allocates a
        pseudo-terminal and is only requested for interactive sessions.

        Args:
            container: Concrete container name.
            executable: Binary to run inside the container.
            args: Arguments for the binary, already translated.
            workdir: Working directory inside the container.
            tty: Whether to request a pseudo-terminal.

        Returns:
            Argument vector starting with the tool name.

        """
        cmd: list[str] = [self._tool, "exec", "-i"]
        if tty:
            cmd.append("-t")
        cmd.extend(["-w", workdir, container, executable])
        cmd.extend(args)
        return cmd
