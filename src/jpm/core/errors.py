"""Typed failures raised while resolving a project.

Resolution errors are fatal to the caller; :class:`VersionQueryUnavailable`
is always absorbed by the version resolver and replaced with the default.
"""

from __future__ import annotations

from pathlib import Path


class ProjectError(Exception):
    """Base class for every project resolution failure."""


class RootNotFoundError(ProjectError):
    """Raised when no ancestor of *start* looks like a project root."""

    def __init__(self, start: Path, source_marker: str, vcs_marker: str):
        self.start = start
        super().__init__(
            f"No project root found from {start}: "
            f"no ancestor contains '{source_marker}' or a '{vcs_marker}' directory."
        )


class ModulePathMissingError(ProjectError):
    """Raised when the source root is absent, not a directory, or empty."""

    def __init__(self, source_path: Path, project_path: Path, reason: str):
        self.source_path = source_path
        self.project_path = project_path
        self.reason = reason
        super().__init__(
            f"Cannot resolve module in project \"{project_path}\": "
            f"{reason} ({source_path})"
        )


class VersionQueryUnavailable(ProjectError):
    """Raised by a command runner when the version query cannot be answered."""

    def __init__(self, command: list[str], reason: str):
        self.command = list(command)
        self.reason = reason
        super().__init__(f"Command {' '.join(command)!r} failed: {reason}")
