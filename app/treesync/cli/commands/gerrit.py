"""Gerrit record inspection commands.

Decodes GitPersonInfo records saved from the Gerrit REST API and shows
the commit time at the person's own UTC offset.
"""

import json
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from treesync.gerrit.person import GitPersonInfo, PersonInfoError
from treesync.gerrit.timestamps import TimestampParseError
from treesync.utils.formatting import console, print_error

app = typer.Typer(
    help="Inspect Gerrit REST API records.",
    invoke_without_command=True,
    no_args_is_help=True,
)

# Gerrit prefixes JSON responses with this line to prevent XSSI
_XSSI_PREFIX = ")]}'"


@app.command()
def person(
    source: Annotated[
        str,
        typer.Argument(help="JSON file with a GitPersonInfo record, or '-' for stdin."),
    ],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON."),
    ] = False,
) -> None:
    """Decode a GitPersonInfo record.

    Examples:
        treesync gerrit person author.json
        curl -s $GERRIT/changes/42/revisions/current/commit | jq .author | treesync gerrit person -
    """
    try:
        text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    except OSError as e:
        print_error(f"Cannot read {source}: {e}")
        raise typer.Exit(code=1) from e

    try:
        info = GitPersonInfo.from_json(_strip_xssi_prefix(text))
        timestamp = info.timestamp
    except (PersonInfoError, TimestampParseError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if json_output:
        data = {**info.to_dict(), "timestamp": timestamp.isoformat()}
        console.print_json(json.dumps(data))
        return

    table = Table(title="GitPersonInfo", show_header=False, border_style="border")
    table.add_column("Field", style="bold_header")
    table.add_column("Value")
    table.add_row("name", escape(info.name))
    table.add_row("email", escape(info.email))
    table.add_row("date", escape(info.date))
    table.add_row("tz", str(info.tz))
    table.add_row("timestamp", timestamp.isoformat())
    console.print(table)


def _strip_xssi_prefix(text: str) -> str:
    """Remove the anti-XSSI line Gerrit puts in front of JSON bodies."""
    stripped = text.lstrip()
    if stripped.startswith(_XSSI_PREFIX):
        return stripped[len(_XSSI_PREFIX) :]
    return text
