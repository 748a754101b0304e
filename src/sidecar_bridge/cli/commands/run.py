"""Run command implementation.

This module implements dispatching a command line through the bridge.
"""

from argparse import Namespace

from sidecar_bridge.cli.commands.base import BaseCommand, CommandResult
from sidecar_bridge.config.models import BridgeConfig
from sidecar_bridge.config.settings import BridgeSettings
from sidecar_bridge.core.orchestrator import DispatchOrchestrator, current_directory
from sidecar_bridge.sandbox.base import BaseLauncher
from sidecar_bridge.sandbox.docker_exec import DockerExec

__all__ = ["RunCommand"]


class RunCommand(BaseCommand):
    """Command to dispatch a command line natively or into a container.

    Args:
        settings: Environment settings (selects the exec tool).
        launcher: Process launcher; the orchestrator default when None.

    """

    def __init__(
        self, settings: BridgeSettings, launcher: BaseLauncher | None = None
    ) -> None:
        self._settings = settings
        self._launcher = launcher

    @property
    def name(self) -> str:
        """Get the command name."""
        return "run"

    def execute(self, args: Namespace, config: BridgeConfig) -> CommandResult:
        """Plan the command line and run it (or print the plan).

        Args:
            args: Parsed arguments with ``command_line`` and ``dry_run``.
            config: Loaded bridge configuration.

        Returns:
            CommandResult carrying the forwarded exit code.

        """
        orchestrator = DispatchOrchestrator(
            config,
            launcher=self._launcher,
            sandbox=DockerExec(self._settings.sandbox_tool),
        )
        plan = orchestrator.plan(args.command_line, current_directory())

        if getattr(args, "dry_run", False):
            print(plan.model_dump_json(indent=2))
            return CommandResult(exit_code=0)

        return CommandResult(exit_code=orchestrator.execute(plan))
