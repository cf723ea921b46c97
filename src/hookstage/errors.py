"""
Exception hierarchy for hookstage.

Fatal errors carry the process exit code the entry point should use; library
code only raises them, `hookstage.bootstrap.exit_on_fatal` turns them into an
exit.
"""

from pathlib import Path


class HookstageError(Exception):
    """Base class for all hookstage errors."""


class CopyConflictError(HookstageError):
    """Target file exists and overwriting was not requested."""

    def __init__(self, target: Path) -> None:
        self.target = target
        super().__init__(f"{target} already exists")


class DestinationOutsideRootError(HookstageError, ValueError):
    """A copy target resolved to somewhere outside the project root."""

    def __init__(self, target: Path, project_root: Path) -> None:
        self.target = target
        self.project_root = project_root
        super().__init__("Destination must be within project root")


class HookConfigError(HookstageError):
    """Malformed [tool.hookstage.hooks] table in pyproject.toml."""


class FatalError(HookstageError):
    """Setup failure that should halt the install rather than be handled."""

    exit_code = 1


class GitRootNotFoundError(FatalError):
    # Not finding a repository must not break a larger install pipeline
    exit_code = 0


class SourceUnreadableError(FatalError):
    exit_code = 1

    def __init__(self, source: Path) -> None:
        self.source = source
        super().__init__(f"Unable to read copy source {source}")
