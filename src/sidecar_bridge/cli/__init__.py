"""CLI package for sidecar-bridge.

This package provides the ``bridge`` command-line interface. It
implements the Command pattern for its operations (run a command,
generate wrapper symlinks).
"""

from sidecar_bridge.cli.commands import (
    BaseCommand,
    CommandResult,
    InitWrappersCommand,
    RunCommand,
)
from sidecar_bridge.cli.main import CommandDispatcher, main
from sidecar_bridge.cli.parser import create_parser, parse_command_line, split_command_line

__all__ = [
    "BaseCommand",
    "CommandDispatcher",
    "CommandResult",
    "create_parser",
    "InitWrappersCommand",
    "main",
    "parse_command_line",
    "RunCommand",
    "split_command_line",
]
