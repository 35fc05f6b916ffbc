"""Project descriptor — the resolved root, its derived paths, name and version.

One instance is expected per process.  The working directory is read once at
construction; everything else is derived from the root found there.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel

from jpm.core.commands import CommandRunner, run_command
from jpm.core.errors import ModulePathMissingError
from jpm.core.layout import DEFAULT_LAYOUT, DerivedPaths, ProjectLayout
from jpm.core.memo import Memo
from jpm.core.root_locator import require_root
from jpm.core.settings import Settings
from jpm.core.version import VersionResolver

logger = logging.getLogger(__name__)


class ProjectInfo(BaseModel):
    root: Path
    source_path: Path
    resource_path: Path
    build_path: Path
    library_path: Path
    name: str
    version: str
    jar_name: str


class ProjectDescriptor:
    def __init__(
        self,
        cwd: Path | None = None,
        layout: ProjectLayout = DEFAULT_LAYOUT,
        runner: CommandRunner = run_command,
        settings: Settings | None = None,
        create_dirs: bool = True,
        boundary: Path | None = None,
    ):
        settings = settings or Settings()
        start = (Path(cwd) if cwd is not None else Path.cwd()).absolute()

        self.start = start
        self.layout = layout
        self.paths: DerivedPaths = layout.derive(require_root(start, layout, boundary))
        logger.debug("Project root: %s", self.paths.project_root)

        if create_dirs:
            self.ensure_output_dirs()

        self.version_resolver = VersionResolver(
            cwd=start,
            runner=runner,
            git_executable=settings.git_executable,
            timeout=settings.git_timeout,
            default=settings.default_version,
        )
        self._version: Memo[str] = Memo(self.version_resolver.get_version)

    # -- paths ---------------------------------------------------------------

    @property
    def project_path(self) -> Path:
        return self.paths.project_root

    @property
    def source_path(self) -> Path:
        return self.paths.source_root

    @property
    def resource_path(self) -> Path:
        return self.paths.resource_root

    @property
    def build_path(self) -> Path:
        return self.paths.build_root

    @property
    def library_path(self) -> Path:
        return self.paths.lib_root

    def ensure_output_dirs(self) -> None:
        """Create the build, library and resource directories if missing."""
        for directory in self.paths.output_dirs():
            directory.mkdir(parents=True, exist_ok=True)

    # -- naming --------------------------------------------------------------

    def get_module_path(self) -> Path:
        """Return the first non-hidden entry (by name) directly inside the source root.

        Raises ``ModulePathMissingError`` if the source root is not a directory
        or holds nothing but hidden entries.
        """
        source = self.source_path
        if not source.is_dir():
            reason = "source path is not a directory" if source.exists() else "source path does not exist"
            raise ModulePathMissingError(source, self.project_path, reason)

        for entry in sorted(source.iterdir(), key=lambda p: p.name):
            if not entry.name.startswith(self.layout.hidden_prefix):
                return entry
        raise ModulePathMissingError(source, self.project_path, "source path has no module entries")

    def get_project_name(self) -> str:
        return self.get_module_path().name

    def get_project_version(self) -> str:
        return self._version.get()

    def get_project_jar_name(self) -> str:
        return f"{self.get_project_name()}-{self.get_project_version()}.jar"

    def describe(self) -> ProjectInfo:
        """Snapshot of everything resolved for this project."""
        return ProjectInfo(
            root=self.project_path,
            source_path=self.source_path,
            resource_path=self.resource_path,
            build_path=self.build_path,
            library_path=self.library_path,
            name=self.get_project_name(),
            version=self.get_project_version(),
            jar_name=self.get_project_jar_name(),
        )
