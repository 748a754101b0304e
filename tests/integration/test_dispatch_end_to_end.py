"""Integration tests for dispatching through a config file on disk.

These tests load a real YAML file, resolve commands with the full
pipeline and check the exact ``docker exec`` invocation produced.
"""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from fixtures import FakeLauncher
from sidecar_bridge.cli.main import main
from sidecar_bridge.config.loader import load_config
from sidecar_bridge.core.orchestrator import DispatchOrchestrator

MONOREPO_YAML = """
version: 1
default_container: devbox
containers:
  go: project-golang-1
commands:
  go:
    container: go
    exec: go
    workdir: /app
    paths:
      /workspaces: /app
      /workspaces/myapp/vendor: /opt/vendor
  gofmt:
    container: go
    exec: /usr/local/go/bin/gofmt
    paths:
      /workspaces: /app
overrides:
  git:
    native: /usr/bin/git
"""


@pytest.fixture
def monorepo_config(write_config: Callable[..., Path]) -> Path:
    """Config file with aliases, nested path rules and a default container."""
    return write_config(MONOREPO_YAML)


class TestDispatchEndToEnd:
    """End-to-end planning from a config file."""

    def test_go_build_in_project(self, monorepo_config: Path) -> None:
        """Test the full invocation for a go build inside the workspace."""
        launcher = FakeLauncher()
        orchestrator = DispatchOrchestrator(
            load_config(monorepo_config), launcher=launcher, interactive=lambda: False
        )

        code = orchestrator.run(
            ["go", "build", "-o", "/workspaces/myapp/bin/app", "./cmd/app"],
            "/workspaces/myapp",
        )

        assert code == 0
        assert launcher.spawned == [
            [
                "docker", "exec", "-i", "-w", "/app/myapp", "project-golang-1",
                "go", "build", "-o", "/app/myapp/bin/app", "./cmd/app",
            ]
        ]

    def test_longest_prefix_wins(self, monorepo_config: Path) -> None:
        """Test that the more specific rule translates vendor paths."""
        orchestrator = DispatchOrchestrator(
            load_config(monorepo_config), launcher=FakeLauncher(), interactive=lambda: False
        )
        plan = orchestrator.plan(
            ["go", "list", "/workspaces/myapp/vendor/x/y"], "/workspaces/myapp/vendor"
        )
        assert plan.workdir == "/opt/vendor"
        assert plan.arguments == ["list", "/opt/vendor/x/y"]

    def test_static_workdir_outside_workspace(self, monorepo_config: Path) -> None:
        """Test that the static workdir is used outside every mapped prefix."""
        orchestrator = DispatchOrchestrator(
            load_config(monorepo_config), launcher=FakeLauncher(), interactive=lambda: False
        )
        plan = orchestrator.plan(["go", "version"], "/home/dev")
        assert plan.workdir == "/app"

    def test_cwd_passthrough_without_workdir(self, monorepo_config: Path) -> None:
        """Test that the caller's directory is used when nothing else applies."""
        orchestrator = DispatchOrchestrator(
            load_config(monorepo_config), launcher=FakeLauncher(), interactive=lambda: False
        )
        plan = orchestrator.plan(["gofmt", "-l", "."], "/tmp/scratch")
        assert plan.workdir == "/tmp/scratch"
        assert plan.command == "/usr/local/go/bin/gofmt"

    def test_unavailable_cwd_falls_back(self, monorepo_config: Path) -> None:
        """Test the fallback when the working directory is unknown."""
        orchestrator = DispatchOrchestrator(
            load_config(monorepo_config), launcher=FakeLauncher(), interactive=lambda: False
        )
        assert orchestrator.plan(["go", "env"], None).workdir == "/app"
        assert orchestrator.plan(["gofmt"], None).workdir == "/"

    def test_default_container_catches_unmapped(self, monorepo_config: Path) -> None:
        """Test that unmapped commands run in the default container."""
        orchestrator = DispatchOrchestrator(
            load_config(monorepo_config), launcher=FakeLauncher(), interactive=lambda: False
        )
        plan = orchestrator.plan(["make", "test"], "/workspaces/myapp")
        assert plan.container == "devbox"
        assert plan.arguments == ["test"]
        assert plan.workdir == "/workspaces/myapp"

    def test_cli_dry_run(
        self,
        monorepo_config: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test the JSON plan printed by the CLI for a git override."""
        monkeypatch.setattr(
            "sidecar_bridge.cli.commands.run.current_directory",
            lambda: "/workspaces/myapp",
        )
        code = main(["--config", str(monorepo_config), "--dry-run", "git", "status"])

        assert code == 0
        plan = json.loads(capsys.readouterr().out)
        assert plan["kind"] == "native"
        assert plan["executable"] == "/usr/bin/git"
        assert plan["argv"] == ["git", "status"]
