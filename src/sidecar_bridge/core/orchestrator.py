"""Dispatch orchestration.

Combines command resolution, path translation and working directory
selection into an ExecutionPlan, then hands the plan to a launcher.

Native and unresolved-but-found commands replace the current process.
Sandboxed commands run ``docker exec`` as a child whose exit code is
forwarded unchanged.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable, Mapping, Sequence

from sidecar_bridge.config.defaults import DEFAULT_SANDBOX_TOOL
from sidecar_bridge.config.models import BridgeConfig
from sidecar_bridge.core.exceptions import CommandNotFoundError
from sidecar_bridge.core.paths import translate_args
from sidecar_bridge.core.resolver import Resolution, resolve_command
from sidecar_bridge.core.workdir import resolve_workdir
from sidecar_bridge.logging_config import get_logger
from sidecar_bridge.models.enums import ResolutionKind
from sidecar_bridge.models.plan import ExecutionPlan
from sidecar_bridge.sandbox.base import BaseLauncher
from sidecar_bridge.sandbox.docker_exec import DockerExec
from sidecar_bridge.sandbox.local import LocalLauncher
from sidecar_bridge.sandbox.terminal import stdio_is_interactive

__all__ = ["DispatchOrchestrator", "current_directory"]

logger = get_logger(__name__)


def current_directory() -> str | None:
    """Return the current working directory, or None if it is gone."""
    try:
        return os.getcwd()
    except OSError:
        return None


class DispatchOrchestrator:
    """Resolves and runs one command invocation.

    Every collaborator that touches the environment is injectable, so
    planning can be exercised without a terminal, a PATH or a container.

    Args:
        config: Validated bridge configuration.
        launcher: Process launcher (defaults to LocalLauncher).
        sandbox: ``exec`` command builder (defaults to docker).
        which: Host PATH lookup, returns None when not found.
        interactive: Returns True when stdin and stdout are terminals.
        environ: Environment passed to natively executed binaries.

    """

    def __init__(
        self,
        config: BridgeConfig,
        launcher: BaseLauncher | None = None,
        sandbox: DockerExec | None = None,
        which: Callable[[str], str | None] = shutil.which,
        interactive: Callable[[], bool] = stdio_is_interactive,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._config = config
        self._launcher = launcher or LocalLauncher()
        self._sandbox = sandbox or DockerExec(DEFAULT_SANDBOX_TOOL)
        self._which = which
        self._interactive = interactive
        self._environ = environ

    @property
    def config(self) -> BridgeConfig:
        """The configuration this orchestrator dispatches against."""
        return self._config

    def plan(self, argv: Sequence[str], cwd: str | None = None) -> ExecutionPlan:
        """Build the execution plan for a command line.

        Args:
            argv: Command name followed by its arguments.
            cwd: Caller's working directory; only used for sandboxed
                commands. None means it could not be determined.

        Returns:
            The resolved ExecutionPlan.

        Raises:
            ValueError: If ``argv`` is empty.
            CommandNotFoundError: If the command is unresolved and not
                found on the host PATH.

        """
        if not argv:
            raise ValueError("argv must contain at least the command name")

        resolution = resolve_command(self._config, argv[0])
        logger.debug(
            "command_resolved",
            command=resolution.command,
            kind=resolution.kind.value,
            via_default_container=resolution.via_default_container,
        )

        if resolution.kind is ResolutionKind.native:
            return ExecutionPlan(
                kind=ResolutionKind.native,
                executable=resolution.native_path,
                argv=list(argv),
            )

        if resolution.kind is ResolutionKind.sandboxed:
            return self._plan_sandboxed(resolution, argv, cwd)

        found = self._which(resolution.command)
        if found is None:
            raise CommandNotFoundError(resolution.command)
        return ExecutionPlan(
            kind=ResolutionKind.unresolved,
            executable=found,
            argv=list(argv),
        )

    def _plan_sandboxed(
        self,
        resolution: Resolution,
        argv: Sequence[str],
        cwd: str | None,
    ) -> ExecutionPlan:
        """Plan a ``docker exec`` for a sandboxed resolution."""
        mapping = resolution.mapping
        container = self._config.resolve_container(mapping.container)
        arguments = translate_args(argv[1:], mapping.paths)
        workdir = resolve_workdir(mapping, cwd)
        tty = self._interactive()

        command = self._sandbox.build_command(
            container=container,
            executable=mapping.exec,
            args=arguments,
            workdir=workdir,
            tty=tty,
        )
        logger.debug(
            "sandbox_planned",
            container=container,
            workdir=workdir,
            executable=mapping.exec,
            tty=tty,
        )
        return ExecutionPlan(
            kind=ResolutionKind.sandboxed,
            executable=self._sandbox.tool,
            argv=command,
            workdir=workdir,
            container=container,
            command=mapping.exec,
            arguments=arguments,
            tty=tty,
        )

    def execute(self, plan: ExecutionPlan) -> int:
        """Run a plan.

        For native and unresolved plans this does not return on success.

        Args:
            plan: Plan produced by ``plan()``.

        Returns:
            Exit code of the sandboxed command.

        Raises:
            LaunchError: If the binary or the exec tool cannot be started.

        """
        if plan.replaces_process:
            environ = self._environ if self._environ is not None else os.environ
            logger.debug("native_exec", executable=plan.executable, kind=plan.kind.value)
            self._launcher.replace_process(plan.executable, plan.argv, environ)

        exit_code = self._launcher.spawn(plan.argv)
        if exit_code != 0:
            logger.debug("sandbox_command_exited", exit_code=exit_code)
        return exit_code

    def run(self, argv: Sequence[str], cwd: str | None = None) -> int:
        """Plan and execute a command line.

        Args:
            argv: Command name followed by its arguments.
            cwd: Caller's working directory (defaults to the process cwd).

        Returns:
            Exit code of the sandboxed command.

        """
        if cwd is None:
            cwd = current_directory()
        return self.execute(self.plan(argv, cwd))
