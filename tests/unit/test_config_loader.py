"""Unit tests for locating and loading the bridge config file."""

from collections.abc import Callable
from pathlib import Path

import pytest

from sidecar_bridge.config.exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    InvalidOverrideError,
    UnsupportedVersionError,
)
from sidecar_bridge.config.loader import load_config, resolve_config_path
from sidecar_bridge.config.settings import BridgeSettings


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_with_overrides(self, write_config: Callable[..., Path]) -> None:
        """Test loading commands and overrides from YAML."""
        path = write_config(
            """
version: "1"
commands:
  go:
    container: golang
    exec: go
overrides:
  echo:
    native: /bin/echo
  claude:
    native: /usr/local/bin/claude
"""
        )
        config = load_config(path)
        assert len(config.overrides) == 2
        assert config.overrides["echo"].native == "/bin/echo"
        assert config.overrides["claude"].native == "/usr/local/bin/claude"

    def test_load_without_overrides(self, write_config: Callable[..., Path]) -> None:
        """Test that the overrides section is optional."""
        path = write_config('version: "1"\ncommands:\n  go:\n    container: golang\n    exec: go\n')
        assert load_config(path).overrides == {}

    def test_load_full_command(self, write_config: Callable[..., Path]) -> None:
        """Test that workdir, paths, aliases and default container are read."""
        path = write_config(
            """
version: "1"
default_container: devbox
containers:
  golang: proj-golang-1
commands:
  go:
    container: golang
    exec: go
    workdir: /app
    paths:
      /workspaces: /app
      /workspaces/lib: /lib
"""
        )
        config = load_config(path)
        mapping = config.commands["go"]
        assert mapping.workdir == "/app"
        assert mapping.paths == {"/workspaces": "/app", "/workspaces/lib": "/lib"}
        assert config.default_container == "devbox"
        assert config.resolve_container("golang") == "proj-golang-1"

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises ConfigNotFoundError with a hint."""
        path = tmp_path / "nope.yaml"
        with pytest.raises(ConfigNotFoundError) as exc_info:
            load_config(path)
        assert exc_info.value.path == path
        message = str(exc_info.value)
        assert f"config file not found: {path}" in message
        assert "examples/claude-bridge.yaml" in message

    def test_invalid_yaml(self, write_config: Callable[..., Path]) -> None:
        """Test that malformed YAML raises ConfigParseError."""
        path = write_config("version: '1'\ncommands: [unclosed\n")
        with pytest.raises(ConfigParseError) as exc_info:
            load_config(path)
        assert str(exc_info.value).startswith(f"invalid YAML in {path}")

    def test_wrong_structure(self, write_config: Callable[..., Path]) -> None:
        """Test that a well-formed document with the wrong shape is a parse error."""
        path = write_config('version: "1"\ncommands: 3\n')
        with pytest.raises(ConfigParseError) as exc_info:
            load_config(path)
        assert "commands" in str(exc_info.value)

    def test_top_level_list(self, write_config: Callable[..., Path]) -> None:
        """Test that a non-mapping document is a parse error."""
        path = write_config("- a\n- b\n")
        with pytest.raises(ConfigParseError, match="expected mapping"):
            load_config(path)

    def test_empty_file_fails_validation(self, write_config: Callable[..., Path]) -> None:
        """Test that an empty file reports what is missing."""
        path = write_config("")
        with pytest.raises(ConfigValidationError, match="version"):
            load_config(path)

    def test_validation_error_carries_path(self, write_config: Callable[..., Path]) -> None:
        """Test that rule violations name the file they came from."""
        path = write_config('version: "2"\ncommands:\n  go:\n    container: golang\n    exec: go\n')
        with pytest.raises(UnsupportedVersionError) as exc_info:
            load_config(path)
        assert exc_info.value.path == path
        assert str(exc_info.value).startswith(f"invalid config in {path}: ")

    def test_override_without_native(self, write_config: Callable[..., Path]) -> None:
        """Test that an override with no native field is rejected."""
        path = write_config(
            'version: "1"\ncommands:\n  go:\n    container: golang\n    exec: go\n'
            "overrides:\n  echo:\n"
        )
        with pytest.raises(InvalidOverrideError):
            load_config(path)

    def test_shipped_example_is_valid(self) -> None:
        """Test that the example referenced by the not-found error loads."""
        example = Path(__file__).parents[2] / "examples" / "claude-bridge.yaml"
        config = load_config(example)
        assert config.resolve_container(config.commands["php"].container) == "myproject-php-1"
        assert config.overrides["git"].native == "/usr/bin/git"


class TestResolveConfigPath:
    """Tests for config path precedence."""

    def test_explicit_path_wins(self) -> None:
        """Test that the command-line path beats the environment."""
        settings = BridgeSettings(config_path="/env/bridge.yaml", config_dir="/dir")
        assert resolve_config_path("/cli/bridge.yaml", settings) == Path("/cli/bridge.yaml")

    def test_bridge_config_beats_config_dir(self) -> None:
        """Test that BRIDGE_CONFIG wins over SIDECAR_CONFIG_DIR."""
        settings = BridgeSettings(config_path="/env/bridge.yaml", config_dir="/dir")
        assert resolve_config_path(None, settings) == Path("/env/bridge.yaml")

    def test_config_dir(self) -> None:
        """Test that SIDECAR_CONFIG_DIR selects <dir>/bridge.yaml."""
        settings = BridgeSettings(config_dir="/etc/sidecar")
        assert resolve_config_path(None, settings) == Path("/etc/sidecar/bridge.yaml")

    def test_default_under_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the default of ./.sidecar/bridge.yaml."""
        monkeypatch.chdir(tmp_path)
        expected = Path.cwd() / ".sidecar" / "bridge.yaml"
        assert resolve_config_path(None, BridgeSettings()) == expected

    def test_environment_is_read(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that load_config honours BRIDGE_CONFIG without explicit settings."""
        path = tmp_path / "custom.yaml"
        path.write_text('version: "1"\ncommands:\n  go:\n    container: golang\n    exec: go\n')
        monkeypatch.setenv("BRIDGE_CONFIG", str(path))
        assert "go" in load_config().commands
