"""Base command class for CLI commands.

This module defines the abstract base class for CLI commands
following the Command pattern.
"""

from abc import ABC, abstractmethod
from argparse import Namespace

from sidecar_bridge.config.models import BridgeConfig
from sidecar_bridge.models.base import BaseSchema

__all__ = ["BaseCommand", "CommandResult"]


class CommandResult(BaseSchema):
    """Result of a command execution.

    Attributes:
        exit_code: Exit code for the CLI.
        message: Optional message to display on stderr.

    """

    exit_code: int
    message: str | None = None


class BaseCommand(ABC):
    """Abstract base class for CLI commands.

    All CLI commands should inherit from this class and implement
    the execute method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the command name for logging and display."""
        pass

    @abstractmethod
    def execute(self, args: Namespace, config: BridgeConfig) -> CommandResult:
        """Execute the command.

        Args:
            args: Parsed command-line arguments.
            config: Loaded and validated bridge configuration.

        Returns:
            CommandResult with the exit code.

        """
        pass
