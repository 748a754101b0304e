"""Configuration models for the bridge YAML file.

This module defines Pydantic models for the dispatch policy: which
commands run inside which container, how host paths map into the
container, and which commands always run natively.

Parsing (``model_validate``) only checks the shape of the document.
The dispatch rules themselves are checked by ``BridgeConfig.ensure_valid``
so every rule violation surfaces as its own error type.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import Field, field_validator

from sidecar_bridge.config.defaults import SUPPORTED_CONFIG_VERSION
from sidecar_bridge.config.exceptions import (
    EmptyCommandsError,
    InvalidCommandError,
    InvalidOverrideError,
    MissingVersionError,
    UnsupportedVersionError,
)
from sidecar_bridge.models.base import BaseSchema

__all__ = ["BridgeConfig", "CommandMapping", "NativeOverride"]


def _empty_entries(value: Any) -> Any:
    """Read ``name:`` entries with no body as empty mappings."""
    if value is None:
        return {}
    if isinstance(value, dict):
        return {key: {} if entry is None else entry for key, entry in value.items()}
    return value


def _frozen(value: Mapping[str, Any]) -> Mapping[str, Any]:
    """Wrap a validated mapping in a read-only view."""
    return MappingProxyType(dict(value))


def _is_blank(value: str) -> bool:
    return not value.strip()


class CommandMapping(BaseSchema):
    """How one command name is dispatched into a container.

    Attributes:
        container: Logical container name (resolved through aliases).
        exec: Binary to invoke inside the container.
        workdir: Static working directory used when no path rule matches.
        paths: Host path prefix to container path prefix rules.

    """

    container: str = ""
    exec: str = ""
    workdir: str = ""
    paths: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("workdir", mode="before")
    @classmethod
    def _none_workdir(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("paths", mode="before")
    @classmethod
    def _none_paths(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("paths")
    @classmethod
    def _freeze_paths(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return _frozen(value)


class NativeOverride(BaseSchema):
    """A command that always runs as a host binary.

    Attributes:
        native: Absolute path of the executable on the host.

    """

    native: str = ""


class BridgeConfig(BaseSchema):
    """Top-level bridge configuration.

    Loaded once at startup and never modified afterwards. Fields cannot
    be reassigned and every mapping section is a read-only view.
    Components receive it explicitly rather than reading a module-level
    instance.

    Attributes:
        version: Schema version, must be "1".
        default_container: Container for commands absent from ``commands``.
        containers: Logical to concrete container names.
        commands: Command name to container mapping.
        overrides: Command name to native executable.

    """

    version: str = ""
    default_container: str = ""
    containers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    commands: Mapping[str, CommandMapping] = Field(default_factory=dict, validate_default=True)
    overrides: Mapping[str, NativeOverride] = Field(default_factory=dict, validate_default=True)

    @field_validator("version", mode="before")
    @classmethod
    def _scalar_version(cls, value: Any) -> Any:
        """Accept unquoted scalars such as ``version: 1``."""
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("default_container", mode="before")
    @classmethod
    def _none_default_container(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("containers", mode="before")
    @classmethod
    def _none_containers(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("commands", "overrides", mode="before")
    @classmethod
    def _none_entries(cls, value: Any) -> Any:
        return _empty_entries(value)

    @field_validator("containers", "commands", "overrides")
    @classmethod
    def _freeze_sections(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return _frozen(value)

    def ensure_valid(self) -> None:
        """Check the dispatch rules of this configuration.

        Every command and every override is checked. When several
        entries are invalid, the first one encountered is reported.

        Raises:
            MissingVersionError: If ``version`` is absent.
            UnsupportedVersionError: If ``version`` is not supported.
            EmptyCommandsError: If no commands are configured.
            InvalidCommandError: If a command has a blank ``container`` or ``exec``.
            InvalidOverrideError: If an override has a blank ``native``.

        """
        if _is_blank(self.version):
            raise MissingVersionError()
        if self.version != SUPPORTED_CONFIG_VERSION:
            raise UnsupportedVersionError(self.version)
        if not self.commands:
            raise EmptyCommandsError()

        for name, command in self.commands.items():
            if _is_blank(command.container):
                raise InvalidCommandError(name, "container")
            if _is_blank(command.exec):
                raise InvalidCommandError(name, "exec")

        for name, override in self.overrides.items():
            if _is_blank(override.native):
                raise InvalidOverrideError(name)

    def resolve_container(self, name: str) -> str:
        """Resolve a logical container name to the actual container name.

        Args:
            name: Logical container name.

        Returns:
            The aliased name, or ``name`` unchanged when no alias exists.

        """
        return self.containers.get(name, name)
