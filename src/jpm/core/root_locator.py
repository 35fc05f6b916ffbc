"""Project root resolution — walk up the directory ancestry of a start dir.

Two markers are consulted at every level:

- ``src/main/java`` (primary): the first directory that has it wins and the
  walk stops immediately.
- ``.git`` (fallback): recorded as a candidate and the walk keeps going, so
  a later (outer) ``.git`` replaces an earlier (inner) one.  The candidate
  closest to the filesystem root is therefore the one returned.
"""

from __future__ import annotations

import logging
from pathlib import Path

from jpm.core.errors import RootNotFoundError
from jpm.core.layout import DEFAULT_LAYOUT, ProjectLayout

logger = logging.getLogger(__name__)


def _ancestry(start: Path, boundary: Path | None):
    """Yield *start* and its parents up to the filesystem root or *boundary*."""
    for directory in [start, *start.parents]:
        yield directory
        if boundary is not None and directory == boundary:
            return


def locate(
    start: Path,
    layout: ProjectLayout = DEFAULT_LAYOUT,
    boundary: Path | None = None,
) -> Path | None:
    """Return the project root for *start*, or None if neither marker is found.

    *boundary*, when given, is the last directory checked (inclusive).
    """
    start = Path(start).absolute()
    if boundary is not None:
        boundary = Path(boundary).absolute()

    fallback: Path | None = None
    for directory in _ancestry(start, boundary):
        if (directory / layout.source).exists():
            logger.debug("Found %s under %s", layout.source, directory)
            return directory
        if (directory / layout.vcs_marker).is_dir():
            logger.debug("Recording %s candidate %s", layout.vcs_marker, directory)
            fallback = directory

    if fallback is None:
        logger.debug("No project root found from %s", start)
    return fallback


def require_root(
    start: Path,
    layout: ProjectLayout = DEFAULT_LAYOUT,
    boundary: Path | None = None,
) -> Path:
    """Like :func:`locate` but raise ``RootNotFoundError`` instead of returning None."""
    root = locate(start, layout, boundary)
    if root is None:
        raise RootNotFoundError(Path(start).absolute(), layout.source, layout.vcs_marker)
    return root
