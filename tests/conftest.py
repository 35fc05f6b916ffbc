"""Shared test fixtures — project trees and a canned command runner."""

from __future__ import annotations

from pathlib import Path

import pytest

from jpm.core.errors import VersionQueryUnavailable

TAGGED_LOG = (
    "9f1c2ab (HEAD -> main, origin/main) Merge branch 'feature'\n"
    "77aa310 (tag: v2.3.1) Release 2.3.1\n"
    "1b2c3d4 (tag: v2.3.0) Release 2.3.0\n"
    "0a0b0c0 (tag: v1.0.0) Initial release\n"
)


class FakeRunner:
    """Stands in for ``run_command``; records every invocation."""

    def __init__(self, output: str = "", error: str | None = None):
        self.output = output
        self.error = error
        self.calls: list[tuple[list[str], Path | None, float]] = []

    def __call__(self, command: list[str], *, cwd: Path | None, timeout: float) -> str:
        self.calls.append((list(command), cwd, timeout))
        if self.error is not None:
            raise VersionQueryUnavailable(command, self.error)
        return self.output


@pytest.fixture
def fake_runner():
    """Factory: ``fake_runner(output=..., error=...)`` -> FakeRunner."""
    return FakeRunner


@pytest.fixture
def tagged_runner() -> FakeRunner:
    return FakeRunner(TAGGED_LOG)


@pytest.fixture
def java_project(tmp_path: Path) -> Path:
    """A project root with a single ``myapp`` module under src/main/java."""
    root = tmp_path / "myapp-repo"
    (root / "src" / "main" / "java" / "myapp").mkdir(parents=True)
    (root / ".git").mkdir()
    return root
