"""Error types raised by the target and matrix commands."""

from __future__ import annotations

from pathlib import Path


class DevmatrixError(Exception):
    """Base class for errors that terminate a devmatrix command."""


class ConfigNotFoundError(DevmatrixError, FileNotFoundError):
    """The build configuration file does not exist under the project root."""

    def __init__(self, relative_path: str, project_root: Path) -> None:
        self.path = project_root / relative_path
        self.project_root = project_root
        super().__init__(
            f"`{relative_path}` does not exist in `{project_root}` "
            f"(looked for {self.path})"
        )


class ConfigParseError(DevmatrixError, ValueError):
    """The build configuration file exists but is not well-formed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


class MissingTargetFieldError(DevmatrixError, ValueError):
    """The build configuration has no `[build] target` entry."""

    def __init__(self, relative_path: str) -> None:
        self.relative_path = relative_path
        super().__init__(f"No [build.target] configuration in {relative_path}")


class OutputWriteError(DevmatrixError, OSError):
    """Writing the rendered result to the output stream failed."""


class ConfigReadError(DevmatrixError, OSError):
    """The build configuration file exists but can't be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")
