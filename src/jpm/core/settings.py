"""Runtime settings — loaded from the environment.

A ``.env`` file in the working directory is read first (``override=False``,
so variables already exported in the shell win).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "1.0.0"
DEFAULT_GIT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    git_executable: str = "git"
    git_timeout: float = DEFAULT_GIT_TIMEOUT
    default_version: str = DEFAULT_VERSION


def load_settings(env_file: Path | None = None) -> Settings:
    """Build :class:`Settings` from ``JPM_*`` environment variables.

    Raises ``ValueError`` when a variable is set to something unusable.
    """
    env_path = env_file if env_file is not None else Path.cwd() / ".env"
    load_dotenv(env_path, override=False)
    logger.debug("Loaded .env from %s (exists=%s)", env_path, env_path.exists())

    raw_timeout = os.environ.get("JPM_GIT_TIMEOUT", "")
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"JPM_GIT_TIMEOUT must be a number, got {raw_timeout!r}") from None
        if timeout <= 0:
            raise ValueError(f"JPM_GIT_TIMEOUT must be positive, got {raw_timeout!r}")
    else:
        timeout = DEFAULT_GIT_TIMEOUT

    git = os.environ.get("JPM_GIT_EXECUTABLE", "") or "git"
    default_version = os.environ.get("JPM_DEFAULT_VERSION", "") or DEFAULT_VERSION

    return Settings(git_executable=git, git_timeout=timeout, default_version=default_version)
