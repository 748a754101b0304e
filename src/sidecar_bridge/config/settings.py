"""Application settings using pydantic-settings.

Settings are read from the environment. They only steer where the
bridge looks for its policy file and how it logs; the dispatch policy
itself lives in the YAML file loaded by ``config.loader``.

Environment Variables:
    SIDECAR_CONFIG_DIR: Directory holding ``bridge.yaml``
    BRIDGE_CONFIG: Direct path to the config file (wins over SIDECAR_CONFIG_DIR)
    BRIDGE_LOG_LEVEL: Log level for bridge diagnostics (default WARNING)
    BRIDGE_LOG_JSON: Emit logs as JSON lines
    BRIDGE_SANDBOX_TOOL: Executable used for ``<tool> exec`` (default docker)
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sidecar_bridge.config.defaults import DEFAULT_LOG_LEVEL, DEFAULT_SANDBOX_TOOL

__all__ = ["BridgeSettings", "get_settings"]


class BridgeSettings(BaseSettings):
    """Environment-driven settings for the bridge CLI.

    Attributes:
        config_dir: Directory containing the default config file.
        config_path: Explicit config file path.
        log_level: Log level name for bridge diagnostics.
        log_json: Whether logs are rendered as JSON.
        sandbox_tool: Name or path of the container exec tool.

    """

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    config_dir: str | None = Field(
        default=None,
        validation_alias=AliasChoices("SIDECAR_CONFIG_DIR"),
        description="Directory containing bridge.yaml",
    )
    config_path: str | None = Field(
        default=None,
        validation_alias=AliasChoices("BRIDGE_CONFIG"),
        description="Direct path to the bridge config file",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        validation_alias=AliasChoices("BRIDGE_LOG_LEVEL"),
        description="Log level for bridge diagnostics",
    )
    log_json: bool = Field(
        default=False,
        validation_alias=AliasChoices("BRIDGE_LOG_JSON"),
        description="Render logs as JSON lines",
    )
    sandbox_tool: str = Field(
        default=DEFAULT_SANDBOX_TOOL,
        validation_alias=AliasChoices("BRIDGE_SANDBOX_TOOL"),
        description="Executable used to exec into containers",
    )

    @field_validator("config_dir", "config_path", mode="before")
    @classmethod
    def _empty_as_unset(cls, value: object) -> object:
        """Treat empty environment values as unset."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("sandbox_tool", mode="before")
    @classmethod
    def _default_sandbox_tool(cls, value: object) -> object:
        """Fall back to the default tool for empty values."""
        if isinstance(value, str) and not value.strip():
            return DEFAULT_SANDBOX_TOOL
        return value


@lru_cache
def get_settings() -> BridgeSettings:
    """Get the cached settings instance.

    Returns:
        BridgeSettings built from the current environment.

    """
    return BridgeSettings()
