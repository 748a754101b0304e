"""Wrapper symlink generation for configured commands."""

from sidecar_bridge.wrappers.exceptions import WrapperError
from sidecar_bridge.wrappers.materializer import WrapperReport, init_wrappers

__all__ = ["init_wrappers", "WrapperError", "WrapperReport"]
