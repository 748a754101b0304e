"""Test doubles and sample configurations for sidecar-bridge tests.

This package provides a recording launcher and YAML snippets shared by
unit and integration tests.
"""

from collections.abc import Mapping, Sequence
from typing import NoReturn

from sidecar_bridge.sandbox.base import BaseLauncher
from sidecar_bridge.sandbox.exceptions import LaunchError

__all__ = [
    "FakeLauncher",
    "GO_CONFIG_YAML",
    "ProcessReplaced",
]


GO_CONFIG_YAML = """
version: "1"
containers:
  php: app-php-1
commands:
  go:
    container: golang
    exec: go
    paths:
      /workspaces: /app
  npm:
    container: node
    exec: npm
    workdir: /srv/app
  php:
    container: php
    exec: php
    paths:
      /workspace: /workspace
overrides:
  claude:
    native: /usr/local/bin/claude
"""


class ProcessReplaced(Exception):
    """Raised by FakeLauncher in place of an actual exec."""

    def __init__(self, executable: str, argv: list[str], env: dict[str, str]) -> None:
        super().__init__(executable)
        self.executable = executable
        self.argv = argv
        self.env = env


class FakeLauncher(BaseLauncher):
    """Launcher that records calls instead of starting processes.

    Args:
        exit_code: Exit code returned by ``spawn``.
        fail: If set, every launch raises LaunchError with this reason.

    """

    def __init__(self, exit_code: int = 0, fail: str | None = None) -> None:
        self.exit_code = exit_code
        self.fail = fail
        self.spawned: list[list[str]] = []

    @property
    def name(self) -> str:
        return "fake"

    def replace_process(
        self,
        executable: str,
        argv: Sequence[str],
        env: Mapping[str, str],
    ) -> NoReturn:
        if self.fail:
            raise LaunchError(executable, self.fail)
        raise ProcessReplaced(executable, list(argv), dict(env))

    def spawn(self, argv: Sequence[str]) -> int:
        if self.fail:
            raise LaunchError(argv[0], self.fail)
        self.spawned.append(list(argv))
        return self.exit_code
