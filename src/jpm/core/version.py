"""Project version — derived from the nearest ``vX.Y.Z`` tag in git history."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from jpm.core.commands import CommandRunner, run_command
from jpm.core.errors import VersionQueryUnavailable
from jpm.core.memo import Memo
from jpm.core.settings import DEFAULT_GIT_TIMEOUT, DEFAULT_VERSION

logger = logging.getLogger(__name__)

TAG_PATTERN = re.compile(r"tag: v(\d+\.\d+\.\d+)")

# Decorated commits only, newest first, one line each.
LOG_ARGS = ["log", "--simplify-by-decoration", "--decorate", "--pretty=oneline", "HEAD"]


def parse_version(output: str) -> str | None:
    """Return the version from the first line carrying a ``tag: vX.Y.Z`` decoration."""
    for line in output.splitlines():
        match = TAG_PATTERN.search(line)
        if match:
            return match.group(1)
    return None


class VersionResolver:
    """Runs the git tag query once and caches the answer."""

    def __init__(
        self,
        cwd: Path | None = None,
        runner: CommandRunner = run_command,
        git_executable: str = "git",
        timeout: float = DEFAULT_GIT_TIMEOUT,
        default: str = DEFAULT_VERSION,
    ):
        self.cwd = cwd
        self.default = default
        self._runner = runner
        self._command = [git_executable, *LOG_ARGS]
        self._timeout = timeout
        self._version: Memo[str] = Memo(self._resolve)

    @property
    def resolved(self) -> bool:
        return self._version.computed

    def get_version(self) -> str:
        return self._version.get()

    def _resolve(self) -> str:
        try:
            output = self._runner(self._command, cwd=self.cwd, timeout=self._timeout)
        except VersionQueryUnavailable as exc:
            logger.info("Version query unavailable, using %s: %s", self.default, exc.reason)
            return self.default

        version = parse_version(output)
        if version is None:
            logger.debug("No vX.Y.Z tag in history, using %s", self.default)
            return self.default
        logger.debug("Resolved version %s from tags", version)
        return version
