"""YAML configuration loader for the bridge policy file.

This module locates the config file, parses it into a BridgeConfig and
validates its dispatch rules. Every failure is raised as one of the
ConfigurationError subclasses with the originating file path attached.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from sidecar_bridge.config.defaults import DEFAULT_CONFIG_DIR_NAME, DEFAULT_CONFIG_FILENAME
from sidecar_bridge.config.exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigurationError,
    ConfigValidationError,
)
from sidecar_bridge.config.models import BridgeConfig
from sidecar_bridge.config.settings import BridgeSettings, get_settings
from sidecar_bridge.logging_config import get_logger

__all__ = ["default_config_path", "load_config", "load_yaml_file", "resolve_config_path"]

logger = get_logger(__name__)


def default_config_path(settings: BridgeSettings) -> Path:
    """Return ``<config-dir>/bridge.yaml``.

    The config directory is SIDECAR_CONFIG_DIR when set, otherwise
    ``.sidecar`` under the current working directory.
    """
    if settings.config_dir:
        config_dir = Path(settings.config_dir)
    else:
        try:
            config_dir = Path.cwd() / DEFAULT_CONFIG_DIR_NAME
        except OSError:
            config_dir = Path(".") / DEFAULT_CONFIG_DIR_NAME
    return config_dir / DEFAULT_CONFIG_FILENAME


def resolve_config_path(
    config_path: Path | str | None = None,
    settings: BridgeSettings | None = None,
) -> Path:
    """Determine which config file to load.

    Precedence: explicit path, then BRIDGE_CONFIG, then the default
    location.

    Args:
        config_path: Path given on the command line, if any.
        settings: Environment settings (defaults to ``get_settings()``).

    Returns:
        Path of the config file to load.

    """
    if config_path:
        return Path(config_path)
    settings = settings or get_settings()
    if settings.config_path:
        return Path(settings.config_path)
    return default_config_path(settings)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning the parsed mapping.

    An empty file yields an empty mapping; the validation step then
    reports what is missing.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed dictionary from the YAML file.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ConfigParseError: If the file is not valid YAML or not a mapping.
        ConfigurationError: If the file cannot be read.

    """
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigNotFoundError(path) from e
    except yaml.YAMLError as e:
        raise ConfigParseError(str(e), path) from e
    except OSError as e:
        raise ConfigurationError(f"failed to read config file {path}: {e}", path) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigParseError(
            f"expected mapping at top level, got {type(data).__name__}", path
        )

    return data


def _first_error(error: ValidationError) -> str:
    """Summarize the first pydantic error as ``location: message``."""
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def load_config(
    config_path: Path | str | None = None,
    settings: BridgeSettings | None = None,
) -> BridgeConfig:
    """Read, parse and validate the bridge configuration.

    Args:
        config_path: Explicit config file path (``--config``).
        settings: Environment settings (defaults to ``get_settings()``).

    Returns:
        The validated, immutable BridgeConfig.

    Raises:
        ConfigNotFoundError: If the config file does not exist.
        ConfigParseError: If the file is not valid YAML or has the wrong shape.
        ConfigValidationError: If a dispatch rule is violated.

    Example:
        >>> config = load_config("/workspaces/app/.sidecar/bridge.yaml")
        >>> config.commands["go"].container
        'golang'

    """
    path = resolve_config_path(config_path, settings)
    data = load_yaml_file(path)

    try:
        config = BridgeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(_first_error(e), path) from e

    try:
        config.ensure_valid()
    except ConfigValidationError as e:
        e.path = path
        raise

    logger.debug(
        "config_loaded",
        path=str(path),
        commands=len(config.commands),
        overrides=len(config.overrides),
    )
    return config
