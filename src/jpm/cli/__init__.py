"""CLI shared utilities — the only place resolution errors become exit codes."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from jpm.core.errors import ProjectError
from jpm.core.project import ProjectDescriptor
from jpm.core.settings import load_settings

console = Console()


def cli_error(message: str) -> NoReturn:
    """Print a red error message and exit with code 1."""
    console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)
    raise typer.Exit(code=1)


def load_project() -> ProjectDescriptor:
    """Resolve the project for the current directory or exit with an error."""
    try:
        return ProjectDescriptor(settings=load_settings())
    except (ProjectError, ValueError, OSError) as exc:
        cli_error(str(exc))
