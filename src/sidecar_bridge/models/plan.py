"""Execution plan model.

An ExecutionPlan is the fully resolved description of one dispatch. It is
built fresh for every invocation and handed to a launcher; nothing keeps
it afterwards.
"""

from __future__ import annotations

from pydantic import Field

from sidecar_bridge.models.base import BaseSchema
from sidecar_bridge.models.enums import ResolutionKind

__all__ = ["ExecutionPlan"]


class ExecutionPlan(BaseSchema):
    """Resolved invocation for a single command.

    Attributes:
        kind: How the command was classified.
        executable: Program the launcher starts (host binary or exec tool).
        argv: Full argument vector, argv[0] included.
        workdir: Working directory inside the container (sandboxed only).
        container: Concrete container name (sandboxed only).
        command: Executable run inside the container (sandboxed only).
        arguments: Arguments after path translation (sandboxed only).
        tty: Whether a pseudo-terminal was requested.

    """

    kind: ResolutionKind
    executable: str
    argv: list[str]
    workdir: str | None = None
    container: str | None = None
    command: str | None = None
    arguments: list[str] = Field(default_factory=list)
    tty: bool = False

    @property
    def replaces_process(self) -> bool:
        """Whether launching this plan replaces the current process image."""
        return self.kind is not ResolutionKind.sandboxed
