"""Models module for sidecar-bridge.

- base: BaseSchema for Pydantic models
- enums: ResolutionKind
- plan: ExecutionPlan
"""

from sidecar_bridge.models.base import BaseSchema
from sidecar_bridge.models.enums import ResolutionKind
from sidecar_bridge.models.plan import ExecutionPlan

__all__ = ["BaseSchema", "ExecutionPlan", "ResolutionKind"]
