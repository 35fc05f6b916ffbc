"""External command execution.

The version resolver talks to ``git`` through a :class:`CommandRunner` so tests
can hand it canned output instead of spawning a process.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from jpm.core.errors import VersionQueryUnavailable

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def __call__(self, command: list[str], *, cwd: Path | None, timeout: float) -> str:
        """Run *command* and return its stdout.

        Raises ``VersionQueryUnavailable`` when the command cannot run, times
        out, or exits non-zero.
        """
        ...


def run_command(command: list[str], *, cwd: Path | None, timeout: float) -> str:
    """Run *command* synchronously and return its captured stdout."""
    logger.debug("Running %s (cwd=%s, timeout=%ss)", command, cwd, timeout)
    try:
        proc = subprocess.run(
            command,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as exc:
        if cwd is not None and exc.filename == str(cwd):
            raise VersionQueryUnavailable(command, f"working directory not found ({cwd})") from exc
        raise VersionQueryUnavailable(command, f"executable not found ({exc})") from exc
    except subprocess.TimeoutExpired as exc:
        raise VersionQueryUnavailable(command, f"timed out after {timeout}s") from exc
    except OSError as exc:
        raise VersionQueryUnavailable(command, str(exc)) from exc

    if proc.returncode != 0:
        reason = f"exit code {proc.returncode}"
        stderr = (proc.stderr or "").strip()
        if stderr:
            reason = f"{reason}: {stderr}"
        raise VersionQueryUnavailable(command, reason)
    return proc.stdout or ""
