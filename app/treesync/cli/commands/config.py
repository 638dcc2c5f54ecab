"""Configuration commands.

Shows the effective configuration and writes a default config file.
"""

from typing import Annotated

import typer
from rich.markup import escape

from treesync.core.config import ConfigError, TreeSyncConfig, load_config, save_config
from treesync.core.paths import get_config_path
from treesync.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config_path = get_config_path()
    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    source = str(config_path) if config_path.exists() else "defaults"
    console.print(f"[muted]Source: {escape(source)}[/]")
    console.print(f"[bold_header]clean.include[/]  {escape(str(config.clean.include))}")
    console.print(f"[bold_header]clean.exclude[/]  {escape(str(config.clean.exclude))}")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=0)

    try:
        saved = save_config(TreeSyncConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote default config to {saved}")
