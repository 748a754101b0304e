"""Wrapper symlink generation.

A wrappers directory holds one launcher file (``dispatcher``) and one
symlink per configured command pointing at it, so putting the directory
on PATH routes every configured command through the bridge.

Generation is idempotent: links that already point at the launcher are
left alone, links pointing elsewhere are replaced, and regular files are
never overwritten.
"""

from __future__ import annotations

import os
from pathlib import Path

from sidecar_bridge.config.defaults import LAUNCHER_NAME
from sidecar_bridge.config.models import BridgeConfig
from sidecar_bridge.logging_config import get_logger
from sidecar_bridge.models.base import BaseSchema
from sidecar_bridge.wrappers.exceptions import WrapperError

__all__ = ["WrapperReport", "init_wrappers"]

logger = get_logger(__name__)


class WrapperReport(BaseSchema):
    """Outcome of one wrapper generation run.

    Attributes:
        directory: Directory the symlinks were written to.
        created: Symlinks created, including replaced stale ones.
        skipped: Entries already correct or occupied by a regular file.

    """

    directory: str
    created: int = 0
    skipped: int = 0

    def summary(self) -> str:
        """Human-readable one-line summary."""
        text = f"Created {self.created} symlinks in {self.directory}"
        if self.skipped > 0:
            text += f" ({self.skipped} already existed)"
        return text


def _points_at_launcher(link: Path, launcher: Path) -> bool:
    try:
        target = os.readlink(link)
    except OSError as e:
        raise WrapperError(f"failed to read symlink {link}: {e}") from e
    return target in (LAUNCHER_NAME, str(launcher))


def init_wrappers(config: BridgeConfig, directory: Path | str) -> WrapperReport:
    """Create a launcher symlink for every configured command.

    Args:
        config: Bridge configuration whose command names are linked.
        directory: Directory containing the ``dispatcher`` launcher.

    Returns:
        WrapperReport with created and skipped counts.

    Raises:
        WrapperError: If the launcher is missing or a link cannot be
            removed or created.

    """
    directory = Path(directory)
    launcher = directory / LAUNCHER_NAME
    if not launcher.exists():
        raise WrapperError(f"dispatcher not found at {launcher}")

    created = 0
    skipped = 0

    for name in sorted(config.commands):
        link = directory / name

        if link.is_symlink():
            if _points_at_launcher(link, launcher):
                skipped += 1
                continue
            try:
                link.unlink()
            except OSError as e:
                raise WrapperError(
                    f"failed to remove existing symlink {link}: {e}"
                ) from e
            logger.debug("wrapper_stale_removed", path=str(link))
        elif link.exists():
            # Regular files (including the launcher itself) are never replaced
            skipped += 1
            logger.debug("wrapper_skipped_file", path=str(link))
            continue

        try:
            link.symlink_to(LAUNCHER_NAME)
        except OSError as e:
            raise WrapperError(f"failed to create symlink {link}: {e}") from e
        created += 1
        logger.debug("wrapper_created", path=str(link))

    report = WrapperReport(directory=str(directory), created=created, skipped=skipped)
    logger.info("wrappers_initialized", directory=str(directory), created=created, skipped=skipped)
    return report
