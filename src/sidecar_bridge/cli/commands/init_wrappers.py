"""Init-wrappers command implementation."""

from argparse import Namespace

from sidecar_bridge.cli.commands.base import BaseCommand, CommandResult
from sidecar_bridge.config.models import BridgeConfig
from sidecar_bridge.wrappers import init_wrappers

__all__ = ["InitWrappersCommand"]


class InitWrappersCommand(BaseCommand):
    """Command to generate dispatcher symlinks for configured commands."""

    @property
    def name(self) -> str:
        """Get the command name."""
        return "init-wrappers"

    def execute(self, args: Namespace, config: BridgeConfig) -> CommandResult:
        """Create the symlinks in ``args.init_wrappers``.

        Args:
            args: Parsed arguments with the target directory.
            config: Loaded bridge configuration.

        Returns:
            CommandResult with the created/skipped summary.

        """
        report = init_wrappers(config, args.init_wrappers)
        return CommandResult(exit_code=0, message=report.summary())
