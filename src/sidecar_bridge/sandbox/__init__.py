"""Process launching for dispatched commands.

Available pieces:
- BaseLauncher: Abstract base class for process launchers
- LocalLauncher: Exec and spawn on the host with inherited streams
- DockerExec: Builds ``docker exec`` command lines
- stdio_is_interactive: Terminal query used to pick the TTY flag
"""

from sidecar_bridge.sandbox.base import BaseLauncher
from sidecar_bridge.sandbox.docker_exec import DockerExec
from sidecar_bridge.sandbox.exceptions import LaunchError
from sidecar_bridge.sandbox.local import LocalLauncher
from sidecar_bridge.sandbox.terminal import is_terminal, stdio_is_interactive

__all__ = [
    "BaseLauncher",
    "DockerExec",
    "is_terminal",
    "LaunchError",
    "LocalLauncher",
    "stdio_is_interactive",
]
