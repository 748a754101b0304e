"""CLI main entry point.

This module provides the main entry point for the bridge CLI. Every
error is reported as one ``Error: ...`` line on stderr and mapped to
the exit code carried by its exception.
"""

import argparse
import sys

from sidecar_bridge.cli.commands import InitWrappersCommand, RunCommand
from sidecar_bridge.cli.exceptions import UsageError
from sidecar_bridge.cli.parser import create_parser, parse_command_line
from sidecar_bridge.config.loader import load_config
from sidecar_bridge.config.settings import BridgeSettings, get_settings
from sidecar_bridge.exceptions import SidecarBridgeError
from sidecar_bridge.logging_config import configure_logging, get_logger
from sidecar_bridge.sandbox.base import BaseLauncher

__all__ = ["main", "CommandDispatcher"]

logger = get_logger(__name__)


class CommandDispatcher:
    """Dispatches CLI invocations to the appropriate command.

    Attributes:
        _settings: Environment settings.
        _run_cmd: Command handler for dispatching a command line.
        _wrappers_cmd: Command handler for generating wrapper symlinks.

    """

    def __init__(
        self, settings: BridgeSettings, launcher: BaseLauncher | None = None
    ) -> None:
        """Initialize the command dispatcher with all command handlers."""
        self._settings = settings
        self._run_cmd = RunCommand(settings, launcher=launcher)
        self._wrappers_cmd = InitWrappersCommand()

    def dispatch(self, args: argparse.Namespace) -> int:
        """Dispatch to the appropriate command based on arguments.

        The configuration is loaded first, whatever the command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code.

        Raises:
            SidecarBridgeError: On configuration, dispatch or wrapper errors.

        """
        config = load_config(getattr(args, "config", None), self._settings)

        if getattr(args, "init_wrappers", None):
            result = self._wrappers_cmd.execute(args, config)
        elif not getattr(args, "command_line", None):
            raise UsageError("no command specified\nRun 'bridge --help' for usage")
        else:
            result = self._run_cmd.execute(args, config)

        if result.message:
            print(result.message, file=sys.stderr)
        return result.exit_code


def main(argv: list[str] | None = None) -> int:
    """Run the CLI application.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code: the forwarded exit code of a sandboxed command, 127
        when the command is not found, 1 for local errors.

    """
    parser = create_parser()
    args = parse_command_line(parser, list(sys.argv[1:] if argv is None else argv))

    settings = get_settings()
    _setup_logging(settings)

    try:
        dispatcher = CommandDispatcher(settings)
        return dispatcher.dispatch(args)

    except KeyboardInterrupt:
        return 130

    except SidecarBridgeError as e:
        logger.debug("bridge_error", error_type=type(e).__name__, exit_code=e.exit_code)
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    except Exception as e:
        logger.exception("fatal_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _setup_logging(settings: BridgeSettings) -> None:
    """Configure logging for the CLI.

    Args:
        settings: Environment settings carrying level and format.

    """
    configure_logging(level=settings.log_level, json_output=settings.log_json)


if __name__ == "__main__":
    sys.exit(main())
