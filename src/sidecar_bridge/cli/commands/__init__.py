"""CLI command implementations."""

from sidecar_bridge.cli.commands.base import BaseCommand, CommandResult
from sidecar_bridge.cli.commands.init_wrappers import InitWrappersCommand
from sidecar_bridge.cli.commands.run import RunCommand

__all__ = [
    "BaseCommand",
    "CommandResult",
    "InitWrappersCommand",
    "RunCommand",
]
