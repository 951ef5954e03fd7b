"""Build configuration parsing and target triple resolution."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from devmatrix.errors import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigReadError,
    MissingTargetFieldError,
)

logger = logging.getLogger(__name__)

CONFIG_PATH = ".cargo/config"


@dataclass(frozen=True)
class BuildSection:
    """The `[build]` table."""

    target: str | None = None


@dataclass(frozen=True)
class BuildConfig:
    """The parts of the build configuration this tool reads.

    Keys are kebab-case; unknown keys are ignored.
    """

    build: BuildSection | None = None

    @classmethod
    def from_toml(cls, text: str, path: Path) -> BuildConfig:
        """Parse configuration text.

        Raises ConfigParseError on malformed TOML or wrongly-typed fields.
        """
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(path, str(e)) from e

        build = data.get("build")
        if build is None:
            return cls()
        if not isinstance(build, dict):
            raise ConfigParseError(path, "`build` must be a table")

        target = build.get("target")
        if target is not None and not isinstance(target, str):
            raise ConfigParseError(path, "`build.target` must be a string")
        return cls(build=BuildSection(target=target))

    @property
    def target(self) -> str | None:
        if self.build is None:
            return None
        return self.build.target or None


def load_build_config(project_root: Path) -> BuildConfig:
    """Read and parse the build configuration under project_root.

    Raises ConfigNotFoundError if the file is missing (or not a regular
    file), ConfigReadError if it can't be read and ConfigParseError if
    it can't be parsed.
    """
    path = project_root / CONFIG_PATH
    if not path.is_file():
        raise ConfigNotFoundError(CONFIG_PATH, project_root)

    logger.debug("Reading build configuration from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigParseError(path, str(e)) from e
    except OSError as e:
        raise ConfigReadError(path, e.strerror or str(e)) from e
    return BuildConfig.from_toml(text, path)


def resolve_target(project_root: Path) -> str:
    """Return the configured build target triple, unchanged.

    Raises:
        ConfigNotFoundError: No configuration file under project_root.
        ConfigReadError: The file exists but can't be read.
        ConfigParseError: The file is not valid TOML.
        MissingTargetFieldError: No `build.target` entry.
    """
    config = load_build_config(project_root)
    target = config.target
    if target is None:
        raise MissingTargetFieldError(CONFIG_PATH)
    return target
