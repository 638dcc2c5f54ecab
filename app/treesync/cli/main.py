"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from treesync import __version__
from treesync.cli.commands import config, gerrit, tree
from treesync.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="treesync",
    help="Working tree utilities for source synchronization.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"treesync version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route treesync log records to stderr through Rich."""
    package_logger = logging.getLogger("treesync")
    package_logger.handlers.clear()
    if verbose:
        package_logger.addHandler(RichHandler(console=err_console, show_path=False))
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.WARNING)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """treesync - working tree utilities for source synchronization.

    Clean materialized working trees with globs and decode commit
    metadata fetched from Gerrit.
    """
    _configure_logging(verbose)


# Register commands
app.add_typer(tree.app, name="tree")
app.add_typer(gerrit.app, name="gerrit")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
