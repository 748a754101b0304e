"""Working directory selection for sandboxed commands."""

from __future__ import annotations

from sidecar_bridge.config.models import CommandMapping
from sidecar_bridge.core.paths import translate_path

__all__ = ["resolve_workdir"]


def resolve_workdir(mapping: CommandMapping, cwd: str | None) -> str:
    """Pick the directory a sandboxed command starts in.

    Priority:
        1. ``cwd`` translated by the mapping's path rules, if any rule
           matched (an identity rule counts as a match).
        2. The mapping's static ``workdir``, if set.
        3. ``cwd`` unchanged.

    Args:
        mapping: Command mapping being dispatched.
        cwd: Caller's current directory, or None if it cannot be
            determined (in which case ``workdir`` or ``/`` is used).

    Returns:
        Working directory inside the container.

    """
    if cwd is None:
        return mapping.workdir or "/"

    translated, matched = translate_path(cwd, mapping.paths)
    if matched:
        return translated
    if mapping.workdir:
        return mapping.workdir
    return cwd
