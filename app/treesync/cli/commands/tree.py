"""Working tree cleanup commands.

Provides a command that deletes the files of a materialized working
tree selected by globs, keeping the directory structure in place.
"""

from pathlib import Path
from typing import Annotated

import typer

from treesync.core.config import ConfigError, load_config
from treesync.filesystem.deleter import TreeDeletionError, delete_files_recursively
from treesync.matchers.glob import GlobPatternError, glob_matcher
from treesync.utils.formatting import print_error, print_info, print_success

app = typer.Typer(
    help="Working tree cleanup.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def clean(
    root: Annotated[
        Path,
        typer.Argument(help="Root directory of the working tree."),
    ],
    globs: Annotated[
        list[str] | None,
        typer.Option(
            "--glob",
            "-g",
            help="Glob selecting files to delete (repeatable).",
        ),
    ] = None,
    excludes: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-x",
            help="Glob for files to keep (repeatable).",
        ),
    ] = None,
    all_files: Annotated[
        bool,
        typer.Option("--all", help="Select every file in the tree."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete the files under ROOT matching the given globs.

    Directories are never removed. Globs use gitignore syntax and are
    relative to ROOT. Exclude globs from the config file always apply.

    Examples:
        treesync tree clean ./checkout -g '*.orig' -g '*.rej'
        treesync tree clean ./checkout --all -x 'LICENSE'
    """
    try:
        config = load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    include = globs or config.clean.include
    exclude = [*config.clean.exclude, *(excludes or [])]

    if not all_files and not include:
        print_error("No globs given. Use --glob, --all, or set clean.include in the config.")
        raise typer.Exit(code=1)

    try:
        matcher = glob_matcher(root, ["**"] if all_files else include, exclude)
    except GlobPatternError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not yes:
        confirmed = typer.confirm(f"Delete matching files under {root}?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    try:
        deleted = delete_files_recursively(root, matcher)
    except TreeDeletionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if deleted:
        print_success(f"Deleted {deleted} file(s) under {root}.")
    else:
        print_info(f"No files matched under {root}.")
