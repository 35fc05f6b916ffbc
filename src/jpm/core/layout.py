"""Project layout — the relative offsets every build path is derived from."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ProjectLayout(BaseModel):
    """Relative offsets of the standard source/build tree."""

    model_config = ConfigDict(frozen=True)

    source: str = "src/main/java"
    resources: str = "src/main/resources"
    build: str = "build"
    lib: str = "lib"
    lib_main: str = "main"
    lib_transitive: str = "transitive"
    vcs_marker: str = ".git"
    hidden_prefix: str = "."

    def derive(self, root: Path) -> DerivedPaths:
        """Return the derived paths anchored at *root*."""
        lib_root = root / self.lib
        return DerivedPaths(
            project_root=root,
            source_root=root / self.source,
            resource_root=root / self.resources,
            build_root=root / self.build,
            lib_root=lib_root,
            lib_main=lib_root / self.lib_main,
            lib_transitive=lib_root / self.lib_transitive,
        )


class DerivedPaths(BaseModel):
    model_config = ConfigDict(frozen=True)

    project_root: Path
    source_root: Path
    resource_root: Path
    build_root: Path
    lib_root: Path
    lib_main: Path
    lib_transitive: Path

    def output_dirs(self) -> list[Path]:
        """Directories a build writes into (created on demand)."""
        return [self.build_root, self.lib_main, self.lib_transitive, self.resource_root]


DEFAULT_LAYOUT = ProjectLayout()
