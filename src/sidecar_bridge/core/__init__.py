"""Resolution and translation engine.

- paths: longest-prefix path translation
- resolver: native / sandboxed / unresolved classification
- workdir: working directory selection for sandboxed commands
- orchestrator: builds and runs ExecutionPlans
"""

from sidecar_bridge.core.exceptions import CommandNotFoundError, DispatchError
from sidecar_bridge.core.orchestrator import DispatchOrchestrator, current_directory
from sidecar_bridge.core.paths import PathTranslation, translate_args, translate_path
from sidecar_bridge.core.resolver import Resolution, resolve_command
from sidecar_bridge.core.workdir import resolve_workdir

__all__ = [
    "CommandNotFoundError",
    "current_directory",
    "DispatchError",
    "DispatchOrchestrator",
    "PathTranslation",
    "Resolution",
    "resolve_command",
    "resolve_workdir",
    "translate_args",
    "translate_path",
]
