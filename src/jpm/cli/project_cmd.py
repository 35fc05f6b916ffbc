"""Project CLI commands — show the resolved root, paths, version and jar name."""

from __future__ import annotations

import typer
from rich.markup import escape
from rich.table import Table

from jpm.cli import cli_error, console, load_project
from jpm.core.errors import ModulePathMissingError

project_app = typer.Typer(
    name="project",
    help="Inspect the project resolved from the current directory.",
    no_args_is_help=True,
)


@project_app.command("info")
def project_info() -> None:
    """Show the project root, derived paths, name, version and jar name."""
    project = load_project()
    try:
        info = project.describe()
    except ModulePathMissingError as exc:
        cli_error(str(exc))

    table = Table(title="Project")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Root", escape(str(info.root)))
    table.add_row("Sources", escape(str(info.source_path)))
    table.add_row("Resources", escape(str(info.resource_path)))
    table.add_row("Build", escape(str(info.build_path)))
    table.add_row("Libraries", escape(str(info.library_path)))
    table.add_section()
    table.add_row("Name", escape(info.name))
    table.add_row("Version", escape(info.version))
    table.add_row("Jar", f"[bold]{escape(info.jar_name)}[/bold]")
    console.print(table)


@project_app.command("root")
def project_root() -> None:
    """Print the resolved project root."""
    console.print(str(load_project().project_path), markup=False, highlight=False, soft_wrap=True)


@project_app.command("version")
def project_version() -> None:
    """Print the version derived from the latest vX.Y.Z tag."""
    console.print(load_project().get_project_version(), markup=False, highlight=False)


@project_app.command("jar-name")
def project_jar_name() -> None:
    """Print the jar file name (<module>-<version>.jar)."""
    project = load_project()
    try:
        jar_name = project.get_project_jar_name()
    except ModulePathMissingError as exc:
        cli_error(str(exc))
    console.print(jar_name, markup=False, highlight=False, soft_wrap=True)
