import logging
from importlib.metadata import version as pkg_version
from typing import Optional

import typer

from jpm.cli.project_cmd import project_app

app = typer.Typer(
    name="jpm",
    help="Locate a Java project and derive its build paths and version.",
    no_args_is_help=True,
    invoke_without_command=True,
)

app.add_typer(project_app, name="project")


def version_callback(value: bool):
    if value:
        typer.echo(f"jpm {pkg_version('jpm')}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug logging.",
    ),
):
    """Locate a Java project and derive its build paths and version."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=logging.WARNING, format="%(name)s %(levelname)s: %(message)s")
    logging.getLogger("jpm").setLevel(level)


if __name__ == "__main__":
    app()
