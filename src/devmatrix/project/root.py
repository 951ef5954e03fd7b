"""Project root discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

MANIFEST_NAME = "Cargo.toml"


def find_project_root(start: Path | None = None) -> Path:
    """Find the root directory of the firmware project.

    Uses CARGO_MANIFEST_DIR when set. Otherwise walks up from start
    (default: the working directory) to the nearest directory holding
    a Cargo.toml, falling back to start itself. Always returns a
    resolved path.
    """
    env_root = os.environ.get("CARGO_MANIFEST_DIR")
    if env_root:
        root = Path(env_root).resolve()
        logger.debug("Project root from CARGO_MANIFEST_DIR: %s", root)
        return root

    origin = (start or Path.cwd()).resolve()
    for candidate in (origin, *origin.parents):
        if (candidate / MANIFEST_NAME).is_file():
            logger.debug("Project root from %s: %s", MANIFEST_NAME, candidate)
            return candidate

    logger.debug("No %s above %s, using it as project root", MANIFEST_NAME, origin)
    return origin
