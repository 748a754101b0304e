"""Command classification.

Decides, for a command name, whether it runs natively, inside a
container, or is left for a host PATH lookup. Classification is pure:
it depends only on the configuration and the name.

Precedence:
    1. Native overrides
    2. Configured commands
    3. The default container, when one is configured
    4. Unresolved (the orchestrator searches the host PATH)
"""

from __future__ import annotations

from pydantic import model_validator

from sidecar_bridge.config.models import BridgeConfig, CommandMapping
from sidecar_bridge.models.base import BaseSchema
from sidecar_bridge.models.enums import ResolutionKind

__all__ = ["Resolution", "resolve_command"]


class Resolution(BaseSchema):
    """Outcome of classifying one command name.

    Attributes:
        command: The command name that was classified.
        kind: Native, sandboxed or unresolved.
        native_path: Host executable (native only).
        mapping: Container mapping (sandboxed only).
        via_default_container: True when the mapping was synthesized
            from ``default_container``.

    """

    command: str
    kind: ResolutionKind
    native_path: str | None = None
    mapping: CommandMapping | None = None
    via_default_container: bool = False

    @model_validator(mode="after")
    def _check_payload(self) -> Resolution:
        """Ensure each kind carries exactly the data it needs."""
        if self.kind is ResolutionKind.native and not self.native_path:
            raise ValueError("native resolution requires native_path")
        if self.kind is ResolutionKind.sandboxed and self.mapping is None:
            raise ValueError("sandboxed resolution requires mapping")
        return self


def resolve_command(config: BridgeConfig, name: str) -> Resolution:
    """Classify a command name against the configuration.

    Args:
        config: Validated bridge configuration.
        name: Command name (argv[0] of the dispatched command).

    Returns:
        Resolution describing how to dispatch the command.

    """
    override = config.overrides.get(name)
    if override is not None:
        return Resolution(
            command=name, kind=ResolutionKind.native, native_path=override.native
        )

    mapping = config.commands.get(name)
    if mapping is not None:
        return Resolution(command=name, kind=ResolutionKind.sandboxed, mapping=mapping)

    if config.default_container:
        return Resolution(
            command=name,
            kind=ResolutionKind.sandboxed,
            mapping=CommandMapping(container=config.default_container, exec=name),
            via_default_container=True,
        )

    return Resolution(command=name, kind=ResolutionKind.unresolved)
