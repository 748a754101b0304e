"""Base Pydantic schema for the project.

Provides a common base class for all Pydantic models in sidecar-bridge
with shared configuration and validation behavior.
"""

from pydantic import BaseModel, ConfigDict

__all__ = ["BaseSchema"]


class BaseSchema(BaseModel):
    """Base model for all Pydantic schemas.

    Provides common configuration for all models in the project:
    - frozen: Instances are immutable once constructed

    String values are kept exactly as given. Command names, paths and
    arguments are dispatch data and surrounding whitespace is significant.
    """

    model_config = ConfigDict(frozen=True)
